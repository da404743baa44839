"""Ledger of course completions, enforcing at most one completion per (user, course)."""

from typing import Dict, Optional
import bittensor as bt

from ..models.completion_record import CompletionRecord, EnrollmentKey
from ..models.result import ErrorKind, Result
from ..utils.error_handling import log_failure


class CompletionLedger:
    """
    Stores one immutable CompletionRecord per (user, course).

    ``commit`` is the only write path; once a completed record exists for a
    key every later commit for that key is rejected with ``AlreadyCompleted``.
    """

    def __init__(self):
        self._records: Dict[EnrollmentKey, CompletionRecord] = {}

    def get(self, user: str, course_id: int) -> Optional[CompletionRecord]:
        return self._records.get(EnrollmentKey(user, course_id))

    def is_completed(self, user: str, course_id: int) -> bool:
        record = self.get(user, course_id)
        return record is not None and record.completed

    def commit(
        self,
        user: str,
        course_id: int,
        score: int,
        timestamp: int,
        cert_id: str,
        tokens_awarded: int = 0
    ) -> Result[None]:
        """
        Write the completion record for (user, course).

        Args:
            user: Learner identity
            course_id: Completed course
            score: Quiz score achieved
            timestamp: Logical timestamp of the completion
            cert_id: Issued certificate identifier
            tokens_awarded: Reward minted for this completion

        Returns:
            Success, or a failure with ``AlreadyCompleted``
        """
        if self.is_completed(user, course_id):
            return log_failure(
                ErrorKind.ALREADY_COMPLETED,
                "commit_completion",
                {'user': user, 'course_id': course_id}
            )

        self._records[EnrollmentKey(user, course_id)] = CompletionRecord(
            completed=True,
            score=score,
            timestamp=timestamp,
            cert_id=cert_id,
            tokens_awarded=tokens_awarded
        )
        bt.logging.debug(f"Recorded completion of course {course_id} by {user} ({cert_id})")
        return Result.success()

    def total_awarded(self) -> int:
        """Sum of tokens awarded across all completion records."""
        return sum(record.tokens_awarded for record in self._records.values() if record.completed)

    def __len__(self) -> int:
        return len(self._records)

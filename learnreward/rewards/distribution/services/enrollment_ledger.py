"""Ledger of course enrollments."""

from typing import Set
import bittensor as bt

from ..models.completion_record import EnrollmentKey
from ..models.result import Result


class EnrollmentLedger:
    """Records which users are enrolled in which courses. Records are never removed."""

    def __init__(self):
        self._enrollments: Set[EnrollmentKey] = set()

    def enroll(self, user: str, course_id: int) -> Result[None]:
        """Record an enrollment; enrolling twice has no further effect."""
        key = EnrollmentKey(user, course_id)
        if key in self._enrollments:
            bt.logging.debug(f"{user} already enrolled in course {course_id}")
        else:
            self._enrollments.add(key)
            bt.logging.debug(f"Enrolled {user} in course {course_id}")
        return Result.success()

    def is_enrolled(self, user: str, course_id: int) -> bool:
        return EnrollmentKey(user, course_id) in self._enrollments

    def __len__(self) -> int:
        return len(self._enrollments)

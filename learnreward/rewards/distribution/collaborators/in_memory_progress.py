"""In-process progress tracker."""

from typing import Set, Tuple
import bittensor as bt

from ..interfaces.progress_tracker import ProgressTracker
from ..models.result import CollaboratorError, Result

SOURCE = "in_memory_progress"


class InMemoryProgressTracker(ProgressTracker):
    """Keeps the set of completed (user, course) pairs."""

    def __init__(self):
        self._completed: Set[Tuple[str, int]] = set()

    def complete_course(self, user: str, course_id: int) -> Result[None]:
        if (user, course_id) in self._completed:
            return Result.failure(CollaboratorError(SOURCE, "already_recorded", f"{user}/{course_id}"))

        self._completed.add((user, course_id))
        bt.logging.debug(f"Progress: {user} completed course {course_id}")
        return Result.success()

    def has_completed(self, user: str, course_id: int) -> bool:
        return (user, course_id) in self._completed

"""Abstract interface for learner progress tracking."""

from abc import ABC, abstractmethod

from ..models.result import Result


class ProgressTracker(ABC):
    """Records course completion in the learner's progress history."""

    @abstractmethod
    def complete_course(self, user: str, course_id: int) -> Result[None]:
        """Mark ``course_id`` as completed for ``user``."""
        pass

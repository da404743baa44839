"""Abstract interface for quiz scoring."""

from abc import ABC, abstractmethod
from typing import Sequence

from ..models.result import Result


class QuizScorer(ABC):
    """Scores a learner's quiz answers for a course."""

    @abstractmethod
    def score_quiz(self, course_id: int, answers: Sequence[int]) -> Result[int]:
        """
        Score a quiz submission.

        Args:
            course_id: Course the quiz belongs to
            answers: Submitted answers, one integer per question

        Returns:
            Result carrying the integer score, or a CollaboratorError
        """
        pass

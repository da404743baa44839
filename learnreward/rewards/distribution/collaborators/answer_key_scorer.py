"""Quiz scorer that grades answers against a registered answer key."""

from typing import Dict, List, Sequence
import bittensor as bt

from learnreward.rewards.utils.config import POINTS_PER_CORRECT_ANSWER
from ..interfaces.quiz_scorer import QuizScorer
from ..models.result import CollaboratorError, Result

SOURCE = "answer_key_scorer"


class AnswerKeyQuizScorer(QuizScorer):
    """Scores a quiz as correct answers times ``points_per_correct``."""

    def __init__(self, points_per_correct: int = POINTS_PER_CORRECT_ANSWER):
        if points_per_correct <= 0:
            raise ValueError(f"Points per correct answer must be positive, got {points_per_correct}")
        self.points_per_correct = points_per_correct
        self._answer_keys: Dict[int, List[int]] = {}

    def register_answer_key(self, course_id: int, answer_key: Sequence[int]):
        """Register or replace the answer key of a course."""
        if not answer_key:
            raise ValueError(f"Answer key for course {course_id} cannot be empty")
        self._answer_keys[course_id] = list(answer_key)
        bt.logging.debug(f"Registered {len(answer_key)}-question answer key for course {course_id}")

    def score_quiz(self, course_id: int, answers: Sequence[int]) -> Result[int]:
        answer_key = self._answer_keys.get(course_id)
        if answer_key is None:
            return Result.failure(CollaboratorError(SOURCE, "unknown_course", f"course {course_id}"))

        if len(answers) != len(answer_key):
            return Result.failure(CollaboratorError(
                SOURCE, "answer_count_mismatch", f"expected {len(answer_key)}, got {len(answers)}"
            ))

        correct_answers = sum(1 for given, expected in zip(answers, answer_key) if given == expected)
        score = correct_answers * self.points_per_correct
        bt.logging.debug(f"Course {course_id} quiz: {correct_answers}/{len(answer_key)} correct, score {score}")
        return Result.success(score)

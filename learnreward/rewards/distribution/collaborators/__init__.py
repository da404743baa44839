"""In-process reference implementations of the distributor's collaborators."""

from .answer_key_scorer import AnswerKeyQuizScorer
from .in_memory_minter import InMemoryTokenMinter
from .in_memory_progress import InMemoryProgressTracker

__all__ = [
    "AnswerKeyQuizScorer",
    "InMemoryTokenMinter",
    "InMemoryProgressTracker",
]

"""Collaborator interfaces consumed by the reward distributor."""

from .quiz_scorer import QuizScorer
from .token_minter import TokenMinter
from .progress_tracker import ProgressTracker
from .cert_id_generator import CertIdGenerator

__all__ = [
    "QuizScorer",
    "TokenMinter",
    "ProgressTracker",
    "CertIdGenerator",
]

"""
Reward distribution core for the course-completion platform.

Gates token rewards behind verified quiz results and records one
completion per (user, course).
"""

from .orchestrator import RewardDistributor

__all__ = [
    "RewardDistributor",
]

"""Per-course reward configuration."""

from dataclasses import dataclass
from typing import Any, Dict

from learnreward.rewards.utils.config import MIN_COURSE_DIFFICULTY, MAX_COURSE_DIFFICULTY


@dataclass(frozen=True)
class CourseRewardConfig:
    """
    Reward parameters of a single course.

    Only the administrator creates or replaces these, through the config store.
    """
    difficulty: int
    base_reward: int
    pass_threshold: int

    def __post_init__(self):
        """Validation after initialization."""
        if not MIN_COURSE_DIFFICULTY <= self.difficulty <= MAX_COURSE_DIFFICULTY:
            raise ValueError(
                f"Difficulty must be between {MIN_COURSE_DIFFICULTY} and "
                f"{MAX_COURSE_DIFFICULTY}, got {self.difficulty}"
            )

        if self.base_reward <= 0:
            raise ValueError(f"Base reward must be positive, got {self.base_reward}")

        if self.pass_threshold <= 0:
            raise ValueError(f"Pass threshold must be positive, got {self.pass_threshold}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "difficulty": self.difficulty,
            "base_reward": self.base_reward,
            "pass_threshold": self.pass_threshold,
        }

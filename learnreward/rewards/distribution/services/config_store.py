"""Administrator-gated store for course reward configuration and global settings."""

from typing import Dict, Optional
import bittensor as bt

from learnreward.rewards.utils.config import (
    ADMIN_PRINCIPAL,
    REWARD_MULTIPLIER,
    MIN_COURSE_DIFFICULTY,
    MAX_COURSE_DIFFICULTY,
)
from ..models.course_config import CourseRewardConfig
from ..models.result import ErrorKind, Result
from ..utils.error_handling import log_failure


class ConfigStore:
    """Holds per-course reward configs, the reward multiplier and the administrator identity."""

    def __init__(self, admin: str = ADMIN_PRINCIPAL, reward_multiplier: int = REWARD_MULTIPLIER):
        if reward_multiplier <= 0:
            raise ValueError(f"Reward multiplier must be positive, got {reward_multiplier}")
        self._admin = admin
        self._reward_multiplier = reward_multiplier
        self._course_configs: Dict[int, CourseRewardConfig] = {}

    def is_admin(self, identity: str) -> bool:
        return identity == self._admin

    def get_admin(self) -> str:
        return self._admin

    def get_reward_multiplier(self) -> int:
        return self._reward_multiplier

    def set_admin(self, caller: str, new_admin: str) -> Result[None]:
        """Hand the administrator role to ``new_admin``."""
        if not self.is_admin(caller):
            return log_failure(ErrorKind.NOT_AUTHORIZED, "set_admin", {'caller': caller})

        previous = self._admin
        self._admin = new_admin
        bt.logging.info(f"Administrator changed: {previous} -> {new_admin}")
        return Result.success()

    def set_reward_multiplier(self, caller: str, multiplier: int) -> Result[None]:
        """Replace the global reward multiplier (admin only, must be positive)."""
        if not self.is_admin(caller):
            return log_failure(ErrorKind.NOT_AUTHORIZED, "set_reward_multiplier", {'caller': caller})

        if multiplier <= 0:
            return log_failure(ErrorKind.INVALID_VALUE, "set_reward_multiplier", {'multiplier': multiplier})

        self._reward_multiplier = multiplier
        bt.logging.info(f"Reward multiplier set to {multiplier}")
        return Result.success()

    def add_course_reward_config(
        self,
        caller: str,
        course_id: int,
        difficulty: int,
        base_reward: int,
        pass_threshold: int
    ) -> Result[None]:
        """
        Insert or overwrite the reward config of a course.

        Checks run in order: authorization, difficulty range, base reward,
        pass threshold. A rejected call leaves the store unchanged.
        """
        context = {
            'caller': caller,
            'course_id': course_id,
            'difficulty': difficulty,
            'base_reward': base_reward,
            'pass_threshold': pass_threshold
        }

        if not self.is_admin(caller):
            return log_failure(ErrorKind.NOT_AUTHORIZED, "add_course_reward_config", context)

        if not MIN_COURSE_DIFFICULTY <= difficulty <= MAX_COURSE_DIFFICULTY:
            return log_failure(ErrorKind.INVALID_DIFFICULTY, "add_course_reward_config", context)

        if base_reward <= 0 or pass_threshold <= 0:
            return log_failure(ErrorKind.INVALID_VALUE, "add_course_reward_config", context)

        replaced = course_id in self._course_configs
        self._course_configs[course_id] = CourseRewardConfig(
            difficulty=difficulty,
            base_reward=base_reward,
            pass_threshold=pass_threshold
        )
        bt.logging.info(
            f"{'Updated' if replaced else 'Added'} reward config for course {course_id}: "
            f"difficulty={difficulty}, base_reward={base_reward}, pass_threshold={pass_threshold}"
        )
        return Result.success()

    def get_course_reward_config(self, course_id: int) -> Optional[CourseRewardConfig]:
        return self._course_configs.get(course_id)

    def __repr__(self) -> str:
        return (
            f"ConfigStore(admin={self._admin}, multiplier={self._reward_multiplier}, "
            f"courses={len(self._course_configs)})"
        )

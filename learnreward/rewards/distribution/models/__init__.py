"""Data models for the reward distribution system."""

from .result import Result, ErrorKind, CollaboratorError
from .course_config import CourseRewardConfig
from .completion_record import EnrollmentKey, CompletionRecord, ClaimReceipt

__all__ = [
    "Result",
    "ErrorKind",
    "CollaboratorError",
    "CourseRewardConfig",
    "EnrollmentKey",
    "CompletionRecord",
    "ClaimReceipt",
]

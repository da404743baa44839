"""Utility helpers for the reward distributor."""

from .error_handling import (
    log_failure,
    log_collaborator_failure,
    safe_collaborator_call,
    ErrorMessages,
)

__all__ = [
    "log_failure",
    "log_collaborator_failure",
    "safe_collaborator_call",
    "ErrorMessages",
]

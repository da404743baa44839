"""
Error handling utilities for consistent failure reporting across the distributor.

Distributor operations never raise for domain failures; these helpers log the
failure with context and hand back the failed Result to return.
"""

import bittensor as bt
from typing import Any, Callable, Dict, Optional

from ..models.result import CollaboratorError, ErrorKind, Result

SENSITIVE_KEYS = ('proof', 'token', 'secret', 'signature')


def _sanitize(context: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Drop values that must not reach the logs (proofs, secrets)."""
    if not context:
        return {}
    return {
        k: ('***REDACTED***' if any(s in k.lower() for s in SENSITIVE_KEYS) else v)
        for k, v in context.items()
    }


def log_failure(
    kind: ErrorKind,
    operation: str,
    context: Optional[Dict[str, Any]] = None
) -> Result:
    """
    Log a validation or authorization failure and return it as a Result.

    Args:
        kind: The error kind to report
        operation: Name of the operation that failed
        context: Additional context (sensitive keys are redacted)

    Returns:
        Failed Result carrying ``kind``
    """
    bt.logging.debug(
        f"{operation} rejected: {kind.label} ({ErrorMessages.for_kind(kind)})",
        extra={'operation': operation, 'context': _sanitize(context), 'error_code': int(kind)}
    )
    return Result.failure(kind)


def log_collaborator_failure(
    kind: ErrorKind,
    operation: str,
    collaborator_error: Any,
    context: Optional[Dict[str, Any]] = None
) -> Result:
    """
    Log a failure reported by an external collaborator and return the core error kind.

    The collaborator's own error is logged verbatim but not wrapped into the result.
    """
    bt.logging.warning(
        f"{operation} aborted: {kind.label} - {collaborator_error}",
        extra={
            'operation': operation,
            'context': _sanitize(context),
            'error_code': int(kind),
            'collaborator_error': str(collaborator_error)
        }
    )
    return Result.failure(kind)


def safe_collaborator_call(source: str, call: Callable[..., Result], *args) -> Result:
    """
    Invoke a collaborator, converting an unexpected exception into a failed Result.

    Args:
        source: Collaborator name used in the CollaboratorError
        call: Bound collaborator method
        *args: Positional arguments for ``call``

    Returns:
        The collaborator's Result, or a failed Result with reason ``exception``
    """
    try:
        result = call(*args)
    except Exception as e:
        bt.logging.error(
            f"Collaborator '{source}' raised: {e}",
            extra={'collaborator': source, 'error_type': type(e).__name__}
        )
        return Result.failure(CollaboratorError(source, "exception", f"{type(e).__name__}: {e}"))

    if not isinstance(result, Result):
        bt.logging.error(f"Collaborator '{source}' returned {type(result).__name__}, expected Result")
        return Result.failure(CollaboratorError(source, "invalid_response", type(result).__name__))

    return result


class ErrorMessages:
    """Standard error messages for consistency."""

    _MESSAGES = {
        ErrorKind.NOT_AUTHORIZED: "Caller is not the administrator",
        ErrorKind.INVALID_VALUE: "Value must be positive",
        ErrorKind.INVALID_DIFFICULTY: "Course difficulty is out of range",
        ErrorKind.NOT_ENROLLED: "User is not enrolled in the course",
        ErrorKind.ALREADY_COMPLETED: "Course already completed by the user",
        ErrorKind.INVALID_QUIZ_RESULTS: "Quiz results have the wrong number of answers",
        ErrorKind.INVALID_PROOF: "Completion proof is empty",
        ErrorKind.QUIZ_FAILED: "Quiz was not passed",
        ErrorKind.COURSE_NOT_FOUND: "No reward configuration for the course",
        ErrorKind.TOKEN_MINT_FAILED: "Reward token mint failed",
        ErrorKind.PROGRESS_UPDATE_FAILED: "Progress tracker update failed",
    }

    @classmethod
    def for_kind(cls, kind: ErrorKind) -> str:
        return cls._MESSAGES.get(kind, kind.label)

"""Result type and error taxonomy returned by every distributor operation."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorKind(IntEnum):
    """Stable failure kinds of the distributor, keyed by their numeric codes."""

    NOT_ENROLLED = 1001
    QUIZ_FAILED = 1002
    ALREADY_COMPLETED = 1003
    INVALID_QUIZ_RESULTS = 1005
    INVALID_PROOF = 1006
    COURSE_NOT_FOUND = 1007
    INVALID_VALUE = 1009
    TOKEN_MINT_FAILED = 1010
    PROGRESS_UPDATE_FAILED = 1011
    INVALID_DIFFICULTY = 1012
    NOT_AUTHORIZED = 1013

    @property
    def label(self) -> str:
        """CamelCase name, e.g. ``NotEnrolled``."""
        return "".join(part.capitalize() for part in self.name.split("_"))


@dataclass(frozen=True)
class CollaboratorError:
    """Failure reported by an external collaborator, in its own terms."""
    source: str
    reason: str
    detail: str = ""

    def __str__(self) -> str:
        suffix = f" ({self.detail})" if self.detail else ""
        return f"{self.source}: {self.reason}{suffix}"


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of an operation.

    Successful results carry ``value``; failed results carry exactly one
    ``error`` (an ``ErrorKind`` for distributor operations, a
    ``CollaboratorError`` for collaborator calls).
    """
    ok: bool
    value: Optional[T] = None
    error: Any = None

    @classmethod
    def success(cls, value: Optional[T] = None) -> 'Result[T]':
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: Any) -> 'Result[T]':
        if error is None:
            raise ValueError("A failed result must carry an error")
        return cls(ok=False, error=error)

    def unwrap(self) -> T:
        """Return the value, raising RuntimeError if the result is a failure."""
        if not self.ok:
            raise RuntimeError(f"Operation failed: {self.error!r}")
        return self.value

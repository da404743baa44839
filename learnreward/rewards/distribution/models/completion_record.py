"""Ledger keys and records for enrollments and completions."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True, order=True)
class EnrollmentKey:
    """Composite (user, course) key shared by the enrollment and completion ledgers."""
    user: str
    course_id: int


@dataclass(frozen=True)
class CompletionRecord:
    """Immutable record written once, on the first successful completion."""
    completed: bool
    score: int
    timestamp: int
    cert_id: str
    tokens_awarded: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "completed": self.completed,
            "score": self.score,
            "timestamp": self.timestamp,
            "cert_id": self.cert_id,
            "tokens_awarded": self.tokens_awarded,
        }


@dataclass(frozen=True)
class ClaimReceipt:
    """Value returned to the caller after a successful completion claim."""
    tokens_awarded: int
    certification_id: str
    timestamp: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tokens_awarded": self.tokens_awarded,
            "certification_id": self.certification_id,
            "timestamp": self.timestamp,
        }

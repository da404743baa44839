"""Abstract interface for certificate identifier generation."""

from abc import ABC, abstractmethod


class CertIdGenerator(ABC):
    """Produces certificate identifiers, unique for the generator's lifetime."""

    @abstractmethod
    def next_id(self) -> str:
        """Return a certificate identifier never returned before by this generator."""
        pass

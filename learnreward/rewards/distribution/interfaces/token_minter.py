"""Abstract interface for reward token minting."""

from abc import ABC, abstractmethod

from ..models.result import Result


class TokenMinter(ABC):
    """Mints reward tokens to a recipient."""

    @abstractmethod
    def mint(self, recipient: str, amount: int) -> Result[None]:
        """
        Mint ``amount`` tokens to ``recipient``.

        Implementations report failures (e.g. an exhausted supply cap) as a
        failed Result carrying a CollaboratorError.
        """
        pass

"""In-process token minter with per-recipient balances and an optional supply cap."""

from typing import Dict, Optional
import bittensor as bt

from ..interfaces.token_minter import TokenMinter
from ..models.result import CollaboratorError, Result

SOURCE = "in_memory_minter"


class InMemoryTokenMinter(TokenMinter):
    """Mints tokens into an in-memory balance sheet."""

    def __init__(self, supply_cap: Optional[int] = None):
        if supply_cap is not None and supply_cap < 0:
            raise ValueError(f"Supply cap cannot be negative, got {supply_cap}")
        self.supply_cap = supply_cap
        self.total_supply = 0
        self._balances: Dict[str, int] = {}

    def mint(self, recipient: str, amount: int) -> Result[None]:
        if amount <= 0:
            return Result.failure(CollaboratorError(SOURCE, "invalid_amount", str(amount)))

        if self.supply_cap is not None and self.total_supply + amount > self.supply_cap:
            return Result.failure(CollaboratorError(
                SOURCE,
                "supply_cap_exceeded",
                f"supply {self.total_supply} + {amount} > cap {self.supply_cap}"
            ))

        self._balances[recipient] = self._balances.get(recipient, 0) + amount
        self.total_supply += amount
        bt.logging.debug(f"Minted {amount} tokens to {recipient} (supply {self.total_supply})")
        return Result.success()

    def balance_of(self, account: str) -> int:
        return self._balances.get(account, 0)

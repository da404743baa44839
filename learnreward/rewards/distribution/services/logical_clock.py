"""Block-height style logical clock used to timestamp completions."""


class LogicalClock:
    """Monotonic integer clock, advanced explicitly by the host."""

    def __init__(self, start: int = 0):
        if start < 0:
            raise ValueError(f"Clock cannot start below zero, got {start}")
        self._height = start

    def now(self) -> int:
        return self._height

    def advance(self, blocks: int = 1) -> int:
        """Move the clock forward and return the new height."""
        if blocks < 0:
            raise ValueError(f"Clock cannot move backwards, got {blocks}")
        self._height += blocks
        return self._height

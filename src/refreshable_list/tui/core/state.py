"""List state for the refreshable list screen."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Tuple

from loguru import logger


class RefreshState(str, Enum):
    """Refresh lifecycle of the list screen."""

    IDLE = "idle"
    REFRESHING = "refreshing"


class DisplayList:
    """Ordered strings backing the list widget.

    Items are only ever replaced as a whole; there is no append or patch.
    """

    def __init__(self) -> None:
        self._items: List[str] = []

    @property
    def items(self) -> Tuple[str, ...]:
        """Read-only snapshot of the current items."""
        return tuple(self._items)

    def replace(self, new_items: Iterable[str]) -> None:
        """Replace every item with ``new_items`` (copied)."""
        self._items = list(new_items)
        logger.debug(f"DisplayList replaced with {len(self._items)} items")

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> str:
        if index < 0:
            raise IndexError(f"row index {index} out of range")
        return self._items[index]

"""Snapshot-based undo history."""

import logging
from collections import deque
from typing import Optional

from folio.domain.models import PortfolioState
from folio.repositories.codec import parse, serialize

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 50


class UndoManager:
    """
    Bounded stack of serialized portfolio states.

    Each snapshot is the full codec text of the state, so restoring is a
    parse of the most recent entry. The oldest entry is dropped once
    capacity is reached. There is no redo.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity < 1:
            raise ValueError("Undo capacity must be at least 1")
        self._history: deque[str] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._history.maxlen or DEFAULT_CAPACITY

    @property
    def can_undo(self) -> bool:
        return bool(self._history)

    def __len__(self) -> int:
        return len(self._history)

    def snapshot(self, state: PortfolioState) -> None:
        """Record state so the next undo() returns to it."""
        self._history.append(serialize(state))
        logger.debug("Undo snapshot taken (%d/%d)", len(self._history), self.capacity)

    def undo(self) -> Optional[PortfolioState]:
        """Pop and rebuild the most recent snapshot, or None when history is empty."""
        if not self._history:
            logger.debug("Nothing to undo")
            return None
        return parse(self._history.pop())

    def clear(self) -> None:
        self._history.clear()

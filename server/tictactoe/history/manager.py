"""Linear board history with time-travel."""
from __future__ import annotations
import logging

from ..board import BoardSnapshot, Mark
from .move import MoveEntry

logger = logging.getLogger(__name__)


class HistoryIndexError(ValueError):
    """Raised when jumping to a move the history does not hold."""

    def __init__(self, index: int, length: int):
        super().__init__(f"Move {index} not found (history holds moves 0-{length - 1})")
        self.index = index
        self.length = length


class GameHistory:
    """Ordered board snapshots plus a pointer to the one on display.

    The first snapshot is always the empty board. Appending after a jump
    back discards every snapshot past the pointer.
    """

    def __init__(self):
        self._snapshots: list[BoardSnapshot] = [BoardSnapshot.empty()]
        self._current = 0

    def __len__(self) -> int:
        return len(self._snapshots)

    @property
    def current(self) -> int:
        return self._current

    @property
    def snapshots(self) -> tuple[BoardSnapshot, ...]:
        return tuple(self._snapshots)

    def append(self, snapshot: BoardSnapshot) -> int:
        """Add the result of a validated move. Returns the new current index."""
        dropped = len(self._snapshots) - self._current - 1
        if dropped:
            logger.debug("Discarding %d forward snapshot(s) after move %d", dropped, self._current)
        self._snapshots = self._snapshots[:self._current + 1] + [snapshot]
        self._current = len(self._snapshots) - 1
        return self._current

    def jump_to(self, index: int) -> BoardSnapshot:
        """Move the pointer to `index` without touching the snapshots."""
        if not 0 <= index < len(self._snapshots):
            raise HistoryIndexError(index, len(self._snapshots))
        self._current = index
        return self._snapshots[index]

    def current_snapshot(self) -> BoardSnapshot:
        return self._snapshots[self._current]

    def current_turn(self) -> Mark:
        return Mark.PLAYER_A if self._current % 2 == 0 else Mark.PLAYER_B

    def moves(self) -> list[MoveEntry]:
        """Describe every history position for the move list."""
        entries = []
        previous = None
        for index, snapshot in enumerate(self._snapshots):
            entries.append(MoveEntry.describe(index, snapshot, previous, index == self._current))
            previous = snapshot
        return entries

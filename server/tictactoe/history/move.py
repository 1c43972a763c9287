"""Move list entries derived from consecutive snapshots."""
from __future__ import annotations
from dataclasses import dataclass

from ..board import BoardSnapshot, Mark


@dataclass(frozen=True)
class MoveEntry:
    """Immutable description of one history position."""
    move: int
    label: str
    is_current: bool
    cell: int | None = None
    mark: Mark | None = None

    @classmethod
    def describe(cls, move: int, snapshot: BoardSnapshot,
                 previous: BoardSnapshot | None, is_current: bool) -> MoveEntry:
        if previous is None:
            return cls(move=move, label="Go to game start", is_current=is_current)

        # The cell that changed since the previous snapshot
        cell = next((i for i in range(len(snapshot)) if snapshot[i] != previous[i]), None)
        return cls(
            move=move,
            label=f"Go to move #{move}",
            is_current=is_current,
            cell=cell,
            mark=snapshot[cell] if cell is not None else None,
        )

    def to_dict(self) -> dict:
        return {
            "move": self.move,
            "label": self.label,
            "current": self.is_current,
            "cell": self.cell,
            "mark": self.mark.value if self.mark else None,
        }

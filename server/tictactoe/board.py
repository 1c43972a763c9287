from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE


class Mark(Enum):
    EMPTY = ""
    PLAYER_A = "A"
    PLAYER_B = "B"

    @property
    def is_empty(self) -> bool:
        return self is Mark.EMPTY


@dataclass(frozen=True)
class BoardSnapshot:
    """One immutable state of the 3x3 grid, cells in row-major order."""
    cells: tuple[Mark, ...]

    def __post_init__(self):
        if len(self.cells) != CELL_COUNT:
            raise ValueError(f"A board has {CELL_COUNT} cells, got {len(self.cells)}")
        # Accept any sequence of marks but always store a tuple
        object.__setattr__(self, "cells", tuple(Mark(c) for c in self.cells))

    @classmethod
    def empty(cls) -> BoardSnapshot:
        return cls(cells=(Mark.EMPTY,) * CELL_COUNT)

    def __getitem__(self, index: int) -> Mark:
        return self.cells[index]

    def __iter__(self) -> Iterator[Mark]:
        return iter(self.cells)

    def __len__(self) -> int:
        return CELL_COUNT

    def with_mark(self, index: int, mark: Mark) -> BoardSnapshot:
        """Return a new snapshot with `index` set to `mark`."""
        if not 0 <= index < CELL_COUNT:
            raise ValueError(f"Cell index {index} out of range 0-{CELL_COUNT - 1}")
        cells = list(self.cells)
        cells[index] = mark
        return BoardSnapshot(cells=tuple(cells))

    def empty_cells(self) -> list[int]:
        return [i for i, mark in enumerate(self.cells) if mark.is_empty]

    def is_full(self) -> bool:
        return not self.empty_cells()

    def to_list(self) -> list[str]:
        return [mark.value for mark in self.cells]

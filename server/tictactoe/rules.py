from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from .board import BoardSnapshot, Mark, CELL_COUNT

if TYPE_CHECKING:
    from .config import GameConfig


# Rows, columns, diagonals. Order decides which line is reported first.
WIN_LINES: tuple[tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


def winning_line(snapshot: BoardSnapshot) -> tuple[int, int, int] | None:
    """First completed line in table order, or None."""
    for a, b, c in WIN_LINES:
        if not snapshot[a].is_empty and snapshot[a] == snapshot[b] == snapshot[c]:
            return (a, b, c)
    return None


def detect_winner(snapshot: BoardSnapshot) -> Mark | None:
    """Return the mark holding a completed line, or None.

    A full board without a line also returns None; callers tell an
    ongoing game from a drawn one by checking `snapshot.is_full()`.
    """
    line = winning_line(snapshot)
    if line is None:
        return None
    return snapshot[line[0]]


def is_legal_move(snapshot: BoardSnapshot, index: int) -> bool:
    """A cell may be taken only while nobody has won and it is still empty."""
    if not 0 <= index < CELL_COUNT:
        return False
    return detect_winner(snapshot) is None and snapshot[index].is_empty


@dataclass(frozen=True)
class GameStatus:
    kind: Literal["winner", "next", "draw"]
    text: str
    winner: Mark | None = None
    next_player: Mark | None = None
    winning_line: tuple[int, int, int] | None = None

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "text": self.text,
            "winner": self.winner.value if self.winner else None,
            "next_player": self.next_player.value if self.next_player else None,
            "winning_line": list(self.winning_line) if self.winning_line else None,
        }


def game_status(snapshot: BoardSnapshot, turn: Mark, config: GameConfig) -> GameStatus:
    """Derive the status line shown above the board."""
    line = winning_line(snapshot)
    if line is not None:
        winner = snapshot[line[0]]
        return GameStatus(
            kind="winner",
            text=f"Winner: {config.player_for(winner).display_name}",
            winner=winner,
            winning_line=line,
        )

    if config.report_draw and snapshot.is_full():
        return GameStatus(kind="draw", text="Draw")

    return GameStatus(
        kind="next",
        text=f"Next player: {config.player_for(turn).display_name}",
        next_player=turn,
    )

import pytest

from tictactoe.board import BoardSnapshot, Mark

_CHARS = {"A": Mark.PLAYER_A, "B": Mark.PLAYER_B, "_": Mark.EMPTY}


def board(layout: str) -> BoardSnapshot:
    """Build a snapshot from a 9-char layout like "AA_BB____"."""
    return BoardSnapshot(cells=tuple(_CHARS[c] for c in layout))


@pytest.fixture
def make_board():
    return board

import dataclasses

import pytest

from tictactoe.board import BoardSnapshot, Mark


def test_empty_board_has_nine_empty_cells():
    snapshot = BoardSnapshot.empty()
    assert len(snapshot) == 9
    assert all(mark is Mark.EMPTY for mark in snapshot)
    assert snapshot.empty_cells() == list(range(9))
    assert not snapshot.is_full()


def test_with_mark_returns_new_snapshot_and_keeps_original():
    original = BoardSnapshot.empty()
    updated = original.with_mark(4, Mark.PLAYER_A)

    assert updated is not original
    assert updated[4] is Mark.PLAYER_A
    assert original[4] is Mark.EMPTY
    assert [updated[i] for i in range(9) if i != 4] == [Mark.EMPTY] * 8


def test_with_mark_rejects_out_of_range_index():
    with pytest.raises(ValueError):
        BoardSnapshot.empty().with_mark(9, Mark.PLAYER_A)
    with pytest.raises(ValueError):
        BoardSnapshot.empty().with_mark(-1, Mark.PLAYER_A)


def test_snapshot_is_frozen():
    snapshot = BoardSnapshot.empty()
    with pytest.raises(dataclasses.FrozenInstanceError):
        snapshot.cells = ()


def test_wrong_cell_count_is_rejected():
    with pytest.raises(ValueError):
        BoardSnapshot(cells=(Mark.EMPTY,) * 8)


def test_list_conversion(make_board):
    snapshot = make_board("AB_______")
    assert snapshot.to_list() == ["A", "B", "", "", "", "", "", "", ""]


def test_unknown_mark_is_rejected():
    with pytest.raises(ValueError):
        BoardSnapshot(cells=("X",) + ("",) * 8)


def test_full_board(make_board):
    assert make_board("ABAABBBAA").is_full()

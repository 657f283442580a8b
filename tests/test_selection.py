import pytest

from conftest import make_row
from vatsim_online.selection import index_of, move_down, move_up, reanchor, selected_cid


def test_reanchor_none_stays_none():
    rows = (make_row(1), make_row(2))
    assert reanchor(None, rows, rows) is None


def test_reanchor_follows_pilot_after_reorder():
    before = (make_row(1, 5), make_row(2, 10), make_row(3, 15))
    after = (make_row(3, 1), make_row(1, 5), make_row(2, 10))
    assert reanchor(1, before, after) == 2
    assert reanchor(0, before, after) == 1
    assert reanchor(2, before, after) == 0


def test_reanchor_missing_pilot_is_none():
    before = (make_row(1), make_row(2))
    after = (make_row(2), make_row(3))
    assert reanchor(0, before, after) is None


def test_reanchor_invalid_previous_index_is_none():
    before = (make_row(1),)
    assert reanchor(5, before, before) is None
    assert reanchor(0, (), before) is None


def test_reanchor_into_empty():
    assert reanchor(0, (make_row(1),), ()) is None


def test_selected_cid_and_index_of():
    rows = (make_row(7), make_row(8))
    assert selected_cid(1, rows) == 8
    assert selected_cid(None, rows) is None
    assert selected_cid(2, rows) is None
    assert index_of(7, rows) == 0
    assert index_of(9, rows) is None
    assert index_of(None, rows) is None


@pytest.mark.parametrize("rows", [1, 2, 5])
def test_move_down_wraps_from_last(rows):
    assert move_down(rows - 1, rows) == 0


@pytest.mark.parametrize("rows", [1, 2, 5])
def test_move_up_wraps_from_first(rows):
    assert move_up(0, rows) == rows - 1


def test_move_from_nothing():
    assert move_down(None, 4) == 0
    assert move_up(None, 4) == 3


def test_move_steps_by_one():
    assert move_down(1, 4) == 2
    assert move_up(2, 4) == 1
    assert move_down(2, 4) == 3
    assert move_up(3, 4) == 2


@pytest.mark.parametrize("index", [None, 0, 3])
def test_moves_with_zero_rows_select_nothing(index):
    assert move_up(index, 0) is None
    assert move_down(index, 0) is None


def test_move_from_stale_index_stays_in_bounds():
    assert move_down(7, 3) == 0
    assert move_up(7, 3) == 2

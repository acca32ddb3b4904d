"""
Tests for grid_games.games.placement

Tests direct placement, gravity drops, and the legal-move lists.
"""

import numpy as np
import pytest

from grid_games.core.types import EMPTY, Mode
from grid_games.games.placement import (
    DIRECT, GRAVITY,
    DirectPlacement, GravityPlacement,
    apply_move, rule_for, valid_moves,
)
from grid_games.games.validation import validate_move


def empty(size: int) -> np.ndarray:
    return np.zeros(size * size, dtype=np.int8)


class TestRuleSelection:
    """Mode -> rule mapping."""

    def test_connect_four_uses_gravity(self):
        assert isinstance(rule_for(Mode.CONNECT_FOUR), GravityPlacement)

    @pytest.mark.parametrize("mode", [Mode.TIC_TAC_TOE, Mode.CHESS, Mode.CHECKERS])
    def test_others_place_directly(self, mode):
        assert isinstance(rule_for(mode), DirectPlacement)

    def test_unknown_mode_raises(self):
        with pytest.raises(ValueError):
            rule_for("tic_tac_toe")


class TestDirectPlacement:
    """Tic-Tac-Toe style placement."""

    @pytest.mark.parametrize("selection", range(1, 10))
    def test_places_exactly_at_selection(self, selection):
        """Marker lands on selection - 1 and nowhere else."""
        new = apply_move(empty(3), 3, Mode.TIC_TAC_TOE, 1, 2, selection)
        expected = empty(3)
        expected[selection - 1] = 1
        assert np.array_equal(new, expected)

    def test_input_not_mutated(self):
        board = empty(3)
        apply_move(board, 3, Mode.TIC_TAC_TOE, 1, 2, 5)
        assert not board.any()

    def test_keeps_existing_markers(self):
        board = empty(3)
        board[0] = 2
        new = apply_move(board, 3, Mode.CHESS, 1, 2, 9)
        assert new[0] == 2 and new[8] == 1


class TestGravityPlacement:
    """Connect-4 drops."""

    @pytest.mark.parametrize("column", [1, 2, 3, 4])
    def test_lands_on_bottom_row(self, column):
        """A drop into an empty column lands on the last row."""
        new = apply_move(empty(4), 4, Mode.CONNECT_FOUR, 1, 2, column)
        assert np.flatnonzero(new).tolist() == [12 + column - 1]

    def test_stacks_upward(self):
        """Successive drops in one column stack bottom to top."""
        board = empty(4)
        for expected, marker in zip([12, 8, 4, 0], [1, 2, 1, 2]):
            board = apply_move(board, 4, Mode.CONNECT_FOUR, marker, 3 - marker, 1)
            assert board[expected] == marker
        assert board[[0, 4, 8, 12]].tolist() == [2, 1, 2, 1]

    def test_lands_on_top_of_stack_with_gap_above(self):
        board = empty(5)
        board[[22, 17]] = [1, 2]  # column 3, bottom two rows
        new = apply_move(board, 5, Mode.CONNECT_FOUR, 1, 2, 3)
        assert new[12] == 1
        assert np.count_nonzero(new) == 3

    def test_last_free_cell_is_top(self):
        board = empty(4)
        board[[5, 9, 13]] = [1, 2, 1]
        assert GRAVITY.target_index(board, 4, 2) == 1

    def test_full_column_raises(self):
        """Dropping into a full column is an invariant violation."""
        board = empty(4)
        board[[0, 4, 8, 12]] = 1
        with pytest.raises(ValueError):
            apply_move(board, 4, Mode.CONNECT_FOUR, 2, 1, 1)

    @pytest.mark.parametrize("size", [3, 4, 6, 7])
    def test_any_size(self, size):
        new = apply_move(empty(size), size, Mode.CONNECT_FOUR, 2, 1, 1)
        assert new[(size - 1) * size] == 2


class TestValidMoves:
    """Legal selection lists."""

    def test_direct_lists_empty_cells(self):
        board = empty(3)
        board[[0, 4]] = [1, 2]
        assert valid_moves(board, 3, Mode.TIC_TAC_TOE) == [2, 3, 4, 6, 7, 8, 9]

    def test_gravity_lists_open_columns(self):
        board = empty(4)
        board[[1, 5, 9, 13]] = 1
        assert valid_moves(board, 4, Mode.CONNECT_FOUR) == [1, 3, 4]

    def test_full_board_has_no_moves(self):
        board = np.ones(9, dtype=np.int8)
        assert DIRECT.valid_moves(board, 3) == []
        assert GRAVITY.valid_moves(board, 3) == []

    @pytest.mark.parametrize("mode", list(Mode))
    def test_agrees_with_validator(self, mode):
        """Every listed move validates; every unlisted one does not."""
        rng = np.random.default_rng(7)
        board = empty(4)
        board[rng.choice(16, size=7, replace=False)] = 1
        if mode is Mode.CONNECT_FOUR:
            board[[0, 4, 8, 12]] = 2  # one full column
        listed = set(valid_moves(board, 4, mode))
        for selection in range(0, 18):
            ok = validate_move(board, 4, mode, 1, 2, selection).is_valid
            assert ok == (selection in listed)

    def test_moves_are_plain_ints(self):
        moves = valid_moves(empty(3), 3, Mode.TIC_TAC_TOE)
        assert all(type(m) is int for m in moves)
        assert EMPTY not in moves

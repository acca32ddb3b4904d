"""
Placement rules - where a validated selection actually lands.

Each rule family is a PlacementRule. The mode picks the rule once
(rule_for); win checking is the same for every rule.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List

import numpy as np

from grid_games.core.types import EMPTY, Mode

logger = logging.getLogger(__name__)


class PlacementRule(ABC):
    """
    Abstract base class for placement rules.

    Rules assume the selection already passed validate_move(); they do
    not re-validate.
    """

    @abstractmethod
    def target_index(self, board: np.ndarray, size: int, selection: int) -> int:
        """Return the 0-based board index a selection lands on."""
        pass

    @abstractmethod
    def valid_moves(self, board: np.ndarray, size: int) -> List[int]:
        """
        Return all 1-based selections that are legal on this board.
        Example (TicTacToe, empty board): [1, 2, ..., 9]
        """
        pass

    def apply(self, board: np.ndarray, size: int, current: int, selection: int) -> np.ndarray:
        """Return a new board with current's marker placed. Input is not mutated."""
        index = self.target_index(board, size, selection)
        new_board = board.copy()
        new_board[index] = current
        logger.debug("Player %d placed at cell %d (selection %d)", current, index + 1, selection)
        return new_board


class DirectPlacement(PlacementRule):
    """The marker goes exactly on the selected cell."""

    def target_index(self, board: np.ndarray, size: int, selection: int) -> int:
        return selection - 1

    def valid_moves(self, board: np.ndarray, size: int) -> List[int]:
        return [int(i) + 1 for i in np.flatnonzero(board == EMPTY)]


class GravityPlacement(PlacementRule):
    """
    Connect-4 drop: the selection names a column and the marker falls
    to the lowest empty row of that column.
    """

    def target_index(self, board: np.ndarray, size: int, selection: int) -> int:
        cell = selection - 1  # top row of the column
        if board[cell] != EMPTY:
            raise ValueError(f"Column {selection} is full")

        for _ in range(size):
            if board[cell] == EMPTY and cell + size < board.shape[0]:
                cell += size

        # Stopped on top of the stack, step back up onto the empty cell
        if board[cell] != EMPTY:
            cell -= size

        return cell

    def valid_moves(self, board: np.ndarray, size: int) -> List[int]:
        return [c + 1 for c in range(size) if board[c] == EMPTY]


DIRECT = DirectPlacement()
GRAVITY = GravityPlacement()

# Chess and Checkers have no rules of their own and place directly
_RULES = {
    Mode.TIC_TAC_TOE: DIRECT,
    Mode.CONNECT_FOUR: GRAVITY,
    Mode.CHESS: DIRECT,
    Mode.CHECKERS: DIRECT,
}


def rule_for(mode: Mode) -> PlacementRule:
    try:
        return _RULES[mode]
    except KeyError:
        raise ValueError(f"No placement rule for mode: {mode}") from None


def apply_move(
    board: np.ndarray,
    size: int,
    mode: Mode,
    current: int,
    other: int,
    selection: int,
) -> np.ndarray:
    """
    Place current's marker for a validated selection and return the new board.

    ``other`` is accepted so the signature mirrors validate_move(); occupancy
    is read from the board itself.
    """
    return rule_for(mode).apply(board, size, current, selection)


def valid_moves(board: np.ndarray, size: int, mode: Mode) -> List[int]:
    """All 1-based selections validate_move() would accept."""
    return rule_for(mode).valid_moves(board, size)

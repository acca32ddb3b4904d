"""
NumPy line helpers and win/tie evaluation for square boards.

Boards are flat row-major int8 arrays; every helper reshapes to
(size, size) and extracts copies so callers can never alias the board.
"""

from __future__ import annotations

from typing import List

import numpy as np

from grid_games.core.types import EMPTY, Status


def as_grid(board: np.ndarray, size: int) -> np.ndarray:
    return np.asarray(board).reshape(size, size)


def get_rows(grid: np.ndarray) -> List[np.ndarray]:
    """The size horizontal lines, top to bottom."""
    return [row.copy() for row in grid]


def get_cols(grid: np.ndarray) -> List[np.ndarray]:
    """The size vertical lines, left to right (a Connect-4 column each)."""
    return [col.copy() for col in grid.T]


def get_diagonals(grid: np.ndarray) -> List[np.ndarray]:
    """
    The two corner-to-corner lines: cells 0, size+1, 2*(size+1), ...
    then the mirror line starting from the top-right corner.
    """
    major = grid.diagonal().copy()
    minor = np.fliplr(grid).diagonal().copy()
    return [major, minor]


def get_lines(grid: np.ndarray) -> List[np.ndarray]:
    """Every full-length line: columns, rows, then both diagonals."""
    return get_cols(grid) + get_rows(grid) + get_diagonals(grid)


def owns_line(line: np.ndarray, marker: int) -> bool:
    """Return True if every cell of a nonempty line holds marker."""
    if line.size == 0 or marker == EMPTY:
        return False
    return bool(np.all(line == marker))


def has_won(board: np.ndarray, size: int, marker: int) -> bool:
    """
    Return True if marker fills an entire column, row, main diagonal
    or anti-diagonal of the board. Works for any size.

    Ties are not detected here; see evaluate_status().
    """
    grid = as_grid(board, size)
    return any(owns_line(line, marker) for line in get_lines(grid))


def can_win(turn_count: int, size: int) -> bool:
    """Cheap gate: no line can be complete before size + 2 turns."""
    return turn_count >= size + 2


def evaluate_status(board: np.ndarray, size: int, turn_count: int, marker: int) -> Status:
    """
    Status after marker has just moved.

    WON if marker completed a line, TIE once every cell has been played,
    otherwise NOT_OVER.
    """
    if not can_win(turn_count, size):
        return Status.NOT_OVER
    if has_won(board, size, marker):
        return Status.WON
    if turn_count == size * size:
        return Status.TIE
    return Status.NOT_OVER

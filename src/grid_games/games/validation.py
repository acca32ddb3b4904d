"""
Move validation.

Selections are 1-based: a cell index for direct-placement modes, a column
index for Connect-4. Validation never touches the board.
"""

from __future__ import annotations

import numpy as np

from grid_games.core.types import VALID, Mode, MoveError, MoveStatus


def validate_move(
    board: np.ndarray,
    size: int,
    mode: Mode,
    current: int,
    other: int,
    selection: int,
) -> MoveStatus:
    """
    Check a selection against the board.

    Args:
        board: Flat row-major board
        size: Length of one side of the board
        mode: Game mode
        current: ID of the player making the move
        other: ID of the opponent
        selection: 1-based cell (or column) chosen by the player

    Returns:
        VALID, or an invalid MoveStatus carrying the MoveError
    """
    # The range check uses the board area even in Connect-4; the column
    # check below narrows it.
    if selection < 1 or selection > size * size:
        return MoveStatus.invalid(MoveError.OUT_OF_RANGE)

    # For Connect-4 this is the top of the column, so full columns fail here
    target = board[selection - 1]
    if target == current or target == other:
        return MoveStatus.invalid(MoveError.CELL_OCCUPIED)

    if mode is Mode.CONNECT_FOUR and selection > size:
        return MoveStatus.invalid(MoveError.INVALID_COLUMN)

    return VALID

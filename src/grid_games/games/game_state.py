"""
GameState - the mutable game aggregate.

Uses a flat int8 board, row-major (index = row * size + column):
    0 = empty
    1 = player 1's marker
    2 = player 2's marker
"""

from __future__ import annotations

from typing import Dict, Optional

import numpy as np

from grid_games.core.types import (
    EMPTY,
    MIN_SIZE,
    PLAYER_IDS,
    Mode,
    Status,
)

# Cell strings: each cell value maps to its display string
CELL_STRINGS = {EMPTY: " ", 1: "X", 2: "H"}

TIC_TAC_TOE_SIZE = 3
CONNECT_FOUR_SIZE = 4
CHESS_SIZE = 8
CHECKERS_SIZE = 8


def empty_board(size: int) -> np.ndarray:
    """Return a cleared flat board for a size x size grid."""
    check_size(size)
    return np.zeros(size * size, dtype=np.int8)


def check_size(size: int) -> None:
    if size < MIN_SIZE:
        raise ValueError(f"Board size must be at least {MIN_SIZE}, got {size}")


def check_board(board: np.ndarray, size: int) -> None:
    """Raise ValueError unless board is a flat array of size * size cells."""
    check_size(size)
    if board.ndim != 1 or board.shape[0] != size * size:
        raise ValueError(
            f"Board of shape {board.shape} does not match a {size}x{size} grid"
        )


class GameState:
    """
    Everything the engine needs to know about one game.

    Only the turn controller (``grid_games.games.engine``) and ``reset`` mutate
    a state. ``active_index`` selects which of the two players is to move.
    """
    __slots__ = (
        'name', 'mode', 'size', 'board',
        'turn_count', 'status', 'active_index', 'winner',
    )

    def __init__(self, name: str, mode: Mode, size: int, board: Optional[np.ndarray] = None):
        if board is None:
            board = empty_board(size)
        check_board(board, size)

        self.name = name
        self.mode = mode
        self.size = size
        self.board = board
        self.turn_count = 0
        self.status = Status.NOT_OVER
        self.active_index = 0
        self.winner = EMPTY  # 0 = none, else winning player ID

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def new(cls, mode: Mode, size: int, name: Optional[str] = None) -> "GameState":
        """Generic constructor for any mode and size."""
        return cls(name or mode.label, mode, size)

    @classmethod
    def tic_tac_toe(cls) -> "GameState":
        return cls.new(Mode.TIC_TAC_TOE, TIC_TAC_TOE_SIZE)

    @classmethod
    def connect_four(cls) -> "GameState":
        return cls.new(Mode.CONNECT_FOUR, CONNECT_FOUR_SIZE)

    @classmethod
    def chess(cls) -> "GameState":
        return cls.new(Mode.CHESS, CHESS_SIZE)

    @classmethod
    def checkers(cls) -> "GameState":
        return cls.new(Mode.CHECKERS, CHECKERS_SIZE)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def capacity(self) -> int:
        """Number of cells on the board."""
        return self.size * self.size

    @property
    def current_player(self) -> int:
        """ID of the player to move."""
        return PLAYER_IDS[self.active_index]

    @property
    def other_player(self) -> int:
        return PLAYER_IDS[1 - self.active_index]

    def grid(self) -> np.ndarray:
        """(size, size) view of the board."""
        return self.board.reshape(self.size, self.size)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Clear the board and start over with player 1 to move."""
        self.board = empty_board(self.size)
        self.turn_count = 0
        self.status = Status.NOT_OVER
        self.active_index = 0
        self.winner = EMPTY

    def copy(self) -> "GameState":
        """Deep copy - the board array is not shared."""
        g = GameState.__new__(GameState)
        g.name = self.name
        g.mode = self.mode
        g.size = self.size
        g.board = self.board.copy()
        g.turn_count = self.turn_count
        g.status = self.status
        g.active_index = self.active_index
        g.winner = self.winner
        return g

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def state_string(self, cell_strings: Optional[Dict[int, str]] = None) -> str:
        """Pretty string representation of the board."""
        strings = cell_strings or CELL_STRINGS
        width = max(len(s) for s in strings.values())
        grid = self.grid()
        bar = "─" * (width + 2)

        lines = ["╭" + "┬".join([bar] * self.size) + "╮"]
        for i in range(self.size):
            cells = (strings[int(grid[i, j])].center(width) for j in range(self.size))
            lines.append("│ " + " │ ".join(cells) + " │")
            if i < self.size - 1:
                lines.append("├" + "┼".join([bar] * self.size) + "┤")
        lines.append("╰" + "┴".join([bar] * self.size) + "╯")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"GameState(name={self.name!r}, mode={self.mode.name}, size={self.size}, "
            f"turn_count={self.turn_count}, status={self.status.name})"
        )

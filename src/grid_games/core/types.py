"""
Core types, constants, and data structures.

This module contains the fundamental types used throughout the engine:
- Mode: which rule family a game follows
- Status: the outcome state of a game
- MoveError / MoveStatus: typed result of validating a move
- Cell encoding constants
"""

from __future__ import annotations

from enum import Enum, auto
from typing import NamedTuple, Optional


# ─── Cell Encoding ────────────────────────────────────────────────────────────
#
# Boards are int8 arrays. A cell is either EMPTY or holds the ID of the player
# occupying it, so the empty value can never collide with a player marker.

EMPTY = 0
PLAYER_ONE = 1
PLAYER_TWO = 2
PLAYER_IDS = (PLAYER_ONE, PLAYER_TWO)

# Smallest board on which a game is defined
MIN_SIZE = 3

# ──────────────────────────────────────────────────────────────────────────────


class Mode(Enum):
    TIC_TAC_TOE = auto()
    CONNECT_FOUR = auto()
    CHESS = auto()
    CHECKERS = auto()

    @property
    def label(self) -> str:
        """Display name (e.g. 'Connect-4')."""
        return _MODE_LABELS[self]


_MODE_LABELS = {
    Mode.TIC_TAC_TOE: "Tic-Tac-Toe",
    Mode.CONNECT_FOUR: "Connect-4",
    Mode.CHESS: "Chess",
    Mode.CHECKERS: "Checkers",
}


class Status(Enum):
    NOT_OVER = auto()
    WON = auto()
    TIE = auto()

    @property
    def is_terminal(self) -> bool:
        return self is not Status.NOT_OVER


class MoveError(Enum):
    """Reasons a selection can be rejected."""

    OUT_OF_RANGE = "Selected cell was out of range"
    CELL_OCCUPIED = "A player was already there"
    INVALID_COLUMN = "Selected an invalid column"


class MoveStatus(NamedTuple):
    """Result of validating (or playing) a selection."""

    error: Optional[MoveError] = None

    @property
    def is_valid(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str:
        """Human-readable reason; empty for a valid move."""
        return "" if self.error is None else self.error.value

    @classmethod
    def valid(cls) -> "MoveStatus":
        return cls()

    @classmethod
    def invalid(cls, error: MoveError) -> "MoveStatus":
        return cls(error)


VALID = MoveStatus.valid()

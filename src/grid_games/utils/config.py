"""
Configuration and game registry.
"""

from typing import Optional

from grid_games.core.types import MIN_SIZE, Mode
from grid_games.games.game_state import (
    CHECKERS_SIZE,
    CHESS_SIZE,
    CONNECT_FOUR_SIZE,
    TIC_TAC_TOE_SIZE,
)


# ---------------------------------------------------------------------------
# Game Registry
# ---------------------------------------------------------------------------

GAMES = {
    "tic_tac_toe": Mode.TIC_TAC_TOE,
    "connect_four": Mode.CONNECT_FOUR,
    "chess": Mode.CHESS,
    "checkers": Mode.CHECKERS,
}

DEFAULT_SIZES = {
    Mode.TIC_TAC_TOE: TIC_TAC_TOE_SIZE,
    Mode.CONNECT_FOUR: CONNECT_FOUR_SIZE,
    Mode.CHESS: CHESS_SIZE,
    Mode.CHECKERS: CHECKERS_SIZE,
}

# Only these modes may be played on a non-default board
RESIZABLE_MODES = frozenset({Mode.TIC_TAC_TOE, Mode.CONNECT_FOUR})


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

def resolve_size(mode: Mode, size: Optional[int]) -> int:
    """Return the board size to use for mode, checking any override."""
    if size is None:
        return DEFAULT_SIZES[mode]
    if size < MIN_SIZE:
        raise ValueError(f"Board size must be at least {MIN_SIZE}, got {size}")
    if size != DEFAULT_SIZES[mode] and mode not in RESIZABLE_MODES:
        raise ValueError(f"Board size can only be changed for tic-tac-toe or connect-4, not {mode.label}")
    return size


class Config:
    """Game and player settings with the classic defaults (human X vs. HAL)."""

    def __init__(
        self,
        game_name: str = "tic_tac_toe",
        size: Optional[int] = None,
        p1_name: str = "P1",
        p1_marker: str = "X",
        p1_ai: bool = False,
        p2_name: str = "HAL",
        p2_marker: str = "H",
        p2_ai: bool = True,
    ):
        self.game_name = game_name
        self.p1_name = p1_name
        self.p1_marker = p1_marker
        self.p1_ai = p1_ai
        self.p2_name = p2_name
        self.p2_marker = p2_marker
        self.p2_ai = p2_ai

        if p1_marker == p2_marker:
            raise ValueError(f"Players need different markers, both are {p1_marker!r}")

        # Derive dependent values
        self.mode = GAMES[game_name]
        self.size = resolve_size(self.mode, size)


# Default configuration
DEFAULT_CONFIG = Config()

"""
Core module - fundamental types and constants.

This module provides the building blocks used throughout the engine.
"""

from grid_games.core.types import (
    EMPTY,
    PLAYER_ONE,
    PLAYER_TWO,
    PLAYER_IDS,
    MIN_SIZE,
    VALID,
    Mode,
    Status,
    MoveError,
    MoveStatus,
)

__all__ = [
    # Types
    "Mode",
    "Status",
    "MoveError",
    "MoveStatus",
    # Constants
    "EMPTY",
    "PLAYER_ONE",
    "PLAYER_TWO",
    "PLAYER_IDS",
    "MIN_SIZE",
    "VALID",
]

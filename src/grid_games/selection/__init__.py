"""
Selection module - move selection for AI-controlled players.

Provides the main entry point:
- select_move(): uniform random choice among the legal selections
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Optional

from grid_games.games.placement import valid_moves

if TYPE_CHECKING:
    from grid_games.games.game_state import GameState


def select_move(state: "GameState", rng: Optional[random.Random] = None) -> int:
    """
    Pick a move for the player to act.

    No search: every legal selection is equally likely.

    Args:
        state: Current game state
        rng: Optional Random instance (for reproducible games)

    Returns:
        1-based selection accepted by validate_move()

    Raises:
        ValueError: If there is no legal move
    """
    moves = valid_moves(state.board, state.size, state.mode)
    if not moves:
        raise ValueError(f"No valid moves left in {state.name}")
    return (rng or random).choice(moves)


__all__ = ["select_move"]

"""
Games module - board state, rules, and the turn controller.
"""

from grid_games.games.game_state import GameState
from grid_games.games.game_rules import has_won, evaluate_status, get_rows, get_cols, get_diagonals
from grid_games.games.validation import validate_move
from grid_games.games.placement import (
    PlacementRule,
    DirectPlacement,
    GravityPlacement,
    apply_move,
    rule_for,
    valid_moves,
)
from grid_games.games.engine import GameOverError, play_move, reset

__all__ = [
    "GameState",
    "GameOverError",
    "PlacementRule",
    "DirectPlacement",
    "GravityPlacement",
    "validate_move",
    "apply_move",
    "rule_for",
    "valid_moves",
    "has_won",
    "evaluate_status",
    "play_move",
    "reset",
    "get_rows",
    "get_cols",
    "get_diagonals",
]

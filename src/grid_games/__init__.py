"""
Grid Games - a small engine for Tic-Tac-Toe, Connect-4 and other N x N grid games.

Quick Start:
    from grid_games import new_game, play_move, Mode, Status

    game = new_game(Mode.TIC_TAC_TOE)
    for cell in (1, 4, 2, 5, 3):
        play_move(game, cell)
    assert game.status is Status.WON

Modules:
    core       - Fundamental types (Mode, Status, MoveError, MoveStatus)
    games      - Board state, validation, placement, win detection, turn controller
    agent      - Players and their win counters
    selection  - Random move picker for AI players
    utils      - Game registry, config, factories
"""

from grid_games.api import (
    new_game,
    play_move,
    reset,
    start_game,
)

from grid_games.agent.agent import Player, ControlMode
from grid_games.core.types import Mode, Status, MoveError, MoveStatus
from grid_games.games.engine import GameOverError
from grid_games.games.game_state import GameState

__version__ = "1.0.0"

__all__ = [
    # Main API
    "new_game",
    "play_move",
    "reset",
    "start_game",
    # Types
    "GameState",
    "GameOverError",
    "Mode",
    "Status",
    "MoveError",
    "MoveStatus",
    "Player",
    "ControlMode",
]

"""
Factory functions for creating games and players.
"""

from typing import List, Optional

from grid_games.agent.agent import ControlMode, Player
from grid_games.games.game_state import GameState
from grid_games.utils.config import GAMES, Config, resolve_size


def create_players(config: Config) -> List[Player]:
    """
    Create both players described by a config.

    Args:
        config: Player names, markers, and control modes

    Returns:
        [player 1, player 2]; list position + 1 is the player ID on the board
    """
    settings = [
        (config.p1_name, config.p1_marker, config.p1_ai),
        (config.p2_name, config.p2_marker, config.p2_ai),
    ]
    return [
        Player(name, marker, ControlMode.AI if is_ai else ControlMode.HUMAN)
        for name, marker, is_ai in settings
    ]


def create_game(game_name: str, size: Optional[int] = None) -> GameState:
    """
    Create a fresh game.

    Args:
        game_name: Key from GAMES registry (e.g., "connect_four")
        size: Optional board size override (tic-tac-toe and connect-4 only)

    Returns:
        A new GameState with an empty board
    """
    if game_name not in GAMES:
        available = ", ".join(GAMES.keys())
        raise ValueError(f"Unknown game: {game_name}. Available: {available}")

    mode = GAMES[game_name]
    return GameState.new(mode, resolve_size(mode, size))

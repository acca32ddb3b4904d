"""
Public API for creating and playing grid games.

Usage:
    from grid_games import new_game, play_move, Mode

    game = new_game(Mode.CONNECT_FOUR)
    result = play_move(game, 2)
    if not result.is_valid:
        print(result.message)
"""

from __future__ import annotations

import logging
import random
from typing import Callable, Dict, List, Optional

from grid_games.agent.agent import Player
from grid_games.core.types import EMPTY, Mode, Status
from grid_games.games.engine import play_move, reset
from grid_games.games.game_state import GameState
from grid_games.selection import select_move
from grid_games.utils.config import resolve_size

logger = logging.getLogger(__name__)


def new_game(mode: Mode, size: Optional[int] = None) -> GameState:
    """Fresh game for mode; size defaults to the mode's preset."""
    return GameState.new(mode, resolve_size(mode, size))


def cell_strings(players: List[Player]) -> Dict[int, str]:
    """Map board cell values to the players' markers."""
    first, second = players[0].marker, players[1].marker
    if first == second:
        raise ValueError(f"Players need different markers, both are {first!r}")
    return {EMPTY: " ", 1: first, 2: second}


def _ai_turn(state: GameState, rng: Optional[random.Random]) -> int:
    """AI selects and plays a move. Returns the selection."""
    selection = select_move(state, rng)
    play_move(state, selection)
    return selection


def _human_turn(state: GameState, player: Player, input_fn: Callable[[str], str]) -> Optional[int]:
    """Prompt until a legal move is played. Returns None if the player quits."""
    while True:
        try:
            raw = input_fn("Make a move: ").strip()
        except EOFError:
            return None
        if not raw:
            return None

        try:
            selection = int(raw)
        except ValueError:
            print(f"Invalid input: {raw!r} is not a number")
            continue

        result = play_move(state, selection)
        if result.is_valid:
            return selection
        print(f"{result.message}. Try again, {player.name}.")


def start_game(
    state: GameState,
    players: List[Player],
    *,
    input_fn: Callable[[str], str] = input,
    rng: Optional[random.Random] = None,
) -> Optional[Player]:
    """
    Play one game to completion.

    Parameters
    ----------
    state : GameState
        Game to play; mutated in place.
    players : List[Player]
        [player 1, player 2]. The winner's counter is incremented.
    input_fn : Callable
        Source of human moves. Empty input or EOF exits mid-game.
    rng : random.Random, optional
        Random source for AI players.

    Returns
    -------
    The winning Player, or None on a tie or early exit.

    Raises
    ------
    ValueError
        If both players use the same marker.
    """
    strings = cell_strings(players)
    print(f"Welcome to {state.name}")

    try:
        while state.status is Status.NOT_OVER:
            print(state.state_string(strings))
            player = players[state.active_index]
            print(f"Current Player: {player.name}")

            if player.is_ai:
                selection = _ai_turn(state, rng)
                print(f"{player.name} played: {selection}")
            elif _human_turn(state, player, input_fn) is None:
                print("Exiting game...")
                return None

        print(state.state_string(strings))

        if state.status is Status.WON:
            winner = players[state.winner - 1]
            winner.update_wins(1)
            print(f"Congrats {winner.name} won!")
            return winner

        print("It was a tie")
        return None

    except Exception:
        logger.exception("Fatal error in game loop")
        raise


__all__ = [
    "new_game",
    "play_move",
    "reset",
    "start_game",
    "cell_strings",
]

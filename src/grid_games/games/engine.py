"""
Turn controller - the one entry point a UI calls per move.

play_move() runs validate -> place -> evaluate -> switch player on a
GameState in place.
"""

from __future__ import annotations

import logging

from grid_games.core.types import MoveStatus, Status
from grid_games.games.game_rules import evaluate_status
from grid_games.games.game_state import GameState
from grid_games.games.placement import apply_move
from grid_games.games.validation import validate_move

logger = logging.getLogger(__name__)


class GameOverError(RuntimeError):
    """Raised when a move is played on a game that has already ended."""


def play_move(state: GameState, selection: int) -> MoveStatus:
    """
    Play one selection for the player to move.

    Rejected selections leave the state untouched and are returned so the
    caller can re-prompt. A valid move is placed, counted, and evaluated for
    the player who made it; the turn passes only while the game is not over.

    Args:
        state: Game to mutate
        selection: 1-based cell (or column for Connect-4)

    Returns:
        The MoveStatus from validation

    Raises:
        GameOverError: If the game is already won or tied
    """
    if state.status is not Status.NOT_OVER:
        raise GameOverError(f"{state.name} is over ({state.status.name}); reset to play again")

    current, other = state.current_player, state.other_player
    result = validate_move(state.board, state.size, state.mode, current, other, selection)
    if not result.is_valid:
        logger.info("Rejected selection %s for player %d: %s", selection, current, result.message)
        return result

    state.board = apply_move(state.board, state.size, state.mode, current, other, selection)
    state.turn_count += 1

    state.status = evaluate_status(state.board, state.size, state.turn_count, current)
    if state.status is Status.WON:
        state.winner = current
        logger.info("Player %d won %s in %d turns", current, state.name, state.turn_count)
    elif state.status is Status.TIE:
        logger.info("%s ended in a tie", state.name)
    else:
        state.active_index = 1 - state.active_index

    return result


def reset(state: GameState) -> None:
    """Clear the board so the same game can be played again."""
    state.reset()

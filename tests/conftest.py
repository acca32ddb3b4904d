"""
Shared test fixtures for grid_games tests.

Design principles:
- Fresh state per test
- Clean imports at module level
- Minimal, focused fixtures
"""

from typing import Callable, Iterable, Iterator, List

import pytest

from grid_games.agent.agent import Player
from grid_games.games.engine import play_move
from grid_games.games.game_state import GameState


# =============================================================================
# Game Fixtures
# =============================================================================

@pytest.fixture
def ttt() -> GameState:
    """Fresh 3x3 Tic-Tac-Toe game."""
    return GameState.tic_tac_toe()


@pytest.fixture
def c4() -> GameState:
    """Fresh 4x4 Connect-4 game."""
    return GameState.connect_four()


@pytest.fixture
def play() -> Callable[[GameState, Iterable[int]], GameState]:
    """Play a sequence of selections, asserting each one is accepted."""
    def _play(state: GameState, selections: Iterable[int]) -> GameState:
        for s in selections:
            result = play_move(state, s)
            assert result.is_valid, f"selection {s} rejected: {result.message}"
        return state
    return _play


# =============================================================================
# Player Fixtures
# =============================================================================

@pytest.fixture
def humans() -> List[Player]:
    """Two human players, X and O."""
    return [Player.human("Ada", "X"), Player.human("Bob", "O")]


@pytest.fixture
def scripted_input() -> Callable[[Iterable[str]], Callable[[str], str]]:
    """Build an input() replacement that replays answers, then raises EOFError."""
    def _make(answers: Iterable[str]) -> Callable[[str], str]:
        it: Iterator[str] = iter(answers)

        def _input(prompt: str = "") -> str:
            try:
                return next(it)
            except StopIteration:
                raise EOFError from None
        return _input
    return _make

"""
Command-line interface for playing grid games.
"""

import argparse
import logging
from typing import Callable, List, Optional

from grid_games import __version__
from grid_games.agent.agent import Player
from grid_games.api import reset, start_game
from grid_games.utils.config import GAMES, Config
from grid_games.utils.factory import create_game, create_players

PLAY_AGAIN = "Play again? (Y/N): "


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="grid-games",
        description="Play Tic-Tac-Toe or Connect-4 against a friend or a random AI",
    )
    parser.add_argument(
        "--mode", "-m",
        choices=list(GAMES.keys()),
        default="tic_tac_toe",
        help="Game to play (default: tic_tac_toe)",
    )
    parser.add_argument(
        "--size", "-s",
        type=int,
        default=None,
        help="Board size, 3 or more (tic_tac_toe and connect_four only)",
    )
    parser.add_argument("--p1-name", default="P1", help="Player 1 name (default: P1)")
    parser.add_argument("--p1-marker", default="X", help="Player 1 marker (default: X)")
    parser.add_argument("--p2-name", default="HAL", help="Player 2 name (default: HAL)")
    parser.add_argument("--p2-marker", default="H", help="Player 2 marker (default: H)")
    parser.add_argument(
        "--p1-ai",
        action="store_true",
        help="Player 1 is controlled by the AI",
    )
    parser.add_argument(
        "--p2-human",
        action="store_true",
        help="Player 2 is a human instead of the AI",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log every move",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> Config:
    return Config(
        game_name=args.mode,
        size=args.size,
        p1_name=args.p1_name,
        p1_marker=args.p1_marker,
        p1_ai=args.p1_ai,
        p2_name=args.p2_name,
        p2_marker=args.p2_marker,
        p2_ai=not args.p2_human,
    )


def ask_play_again(input_fn: Callable[[str], str]) -> bool:
    """Keep asking until the answer is Y or N. EOF counts as N."""
    while True:
        try:
            answer = input_fn(PLAY_AGAIN).strip().upper()
        except EOFError:
            return False
        if answer in ("Y", "N"):
            return answer == "Y"
        print("Please enter a `Y` or `N`: Try again.")


def scoreboard(players: List[Player]) -> str:
    return " | ".join(str(p) for p in players)


def main(argv: Optional[List[str]] = None, input_fn: Callable[[str], str] = input) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = build_config(args)
    except (KeyError, ValueError) as e:
        print(f"Invalid settings: {e}")
        return 2

    game = create_game(config.game_name, config.size)
    players = create_players(config)

    try:
        while True:
            start_game(game, players, input_fn=input_fn)
            print(scoreboard(players))
            if not ask_play_again(input_fn):
                break
            reset(game)
    except KeyboardInterrupt:
        print("\nInterrupted - exiting...")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

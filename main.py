#!/usr/bin/env python3
"""
DragonSweeper - Main entry point.

Usage:
    python main.py play [--size small] [--level N] [--seed S]
    python main.py simulate [--games N] [--level N] [--seed S]
"""
import argparse
import logging
import sys
from typing import Optional, TextIO

import numpy as np

from src.dragonsweeper import Board, BoardConfig, ClickEvent, render_text
from src.dragonsweeper.environment import DragonSweeperEnv


HELP_TEXT = """Commands:
  l ROW COL   reveal a cell
  r ROW COL   toggle a flag
  c ROW COL   clear around a revealed cell
  restart     start a new game
  quit        leave"""

CLICK_BUTTONS = {
    "l": (True, False),
    "r": (False, True),
    "c": (True, True),
}


def parse_command(line: str, board: Board) -> Optional[ClickEvent]:
    """
    Turn a typed command into a click on the board.

    Returns:
        ClickEvent at the chosen cell, or None if the line is not a click.
    """
    parts = line.split()
    if len(parts) != 3 or parts[0] not in CLICK_BUTTONS:
        return None
    try:
        row, col = int(parts[1]), int(parts[2])
    except ValueError:
        return None
    left, right = CLICK_BUTTONS[parts[0]]
    return ClickEvent.at_cell(row, col, board.layout, left=left, right=right)


def play(args: argparse.Namespace, stdin: TextIO = sys.stdin) -> None:
    """Play an interactive game in the terminal."""
    board = Board(
        BoardConfig.from_size_class(args.size, args.level),
        rng=np.random.default_rng(args.seed),
    )
    print(board)
    print(HELP_TEXT)
    print(render_text(board))

    for line in stdin:
        command = line.strip().lower()
        if command in ("quit", "q"):
            break
        if command == "restart":
            board.configure(args.size, args.level)
            print(render_text(board))
            continue

        click = parse_command(command, board)
        if click is None:
            print(HELP_TEXT)
            continue

        board.update(click)
        print(render_text(board))

        if board.is_won:
            print("\n*** All dragons found! ***")
        elif board.is_lost:
            print("\n*** A dragon woke up ***")


def simulate(args: argparse.Namespace) -> None:
    """Play random games through the environment and report results."""
    config = BoardConfig.from_size_class(args.size, args.level)
    env = DragonSweeperEnv(config=config)
    rng = np.random.default_rng(args.seed)

    wins = 0
    total_steps = 0
    for game in range(args.games):
        obs, info = env.reset(seed=None if args.seed is None else args.seed + game)
        done = False
        while not done:
            # Random player: reveal only, never flag or chord
            mask = env.get_action_mask()[: config.total_cells]
            action = int(rng.choice(np.flatnonzero(mask)))
            obs, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated
        total_steps += info["steps"]
        if info["game_state"] == "WON":
            wins += 1

    print(f"Games: {args.games}")
    print(f"  Win rate: {wins / args.games:.1%}")
    print(f"  Avg steps: {total_steps / args.games:.1f}")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="DragonSweeper - find the dragons without waking them"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Show debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    sim_parser = subparsers.add_parser(
        "simulate", help="Play random games and report the win rate"
    )
    for sub in (play_parser, sim_parser):
        sub.add_argument("--size", default="small", help="Board size class")
        sub.add_argument("--level", type=int, default=1, help="Difficulty level")
        sub.add_argument("--seed", type=int, default=None, help="Random seed")
    sim_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "play":
            play(args)
        elif args.command == "simulate":
            simulate(args)
        else:
            parser.print_help()
    except ValueError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()

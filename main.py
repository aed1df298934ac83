#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--size N] [--seed S]
    python main.py evaluate [--games G] [--size N] [--seed S]
"""
import argparse
import random
import sys

from src.minesweeper.board import Board, BoardConfig, InvalidConfigurationError
from src.minesweeper.console import run
from src.minesweeper.environment import MinesweeperEnv
from src.agents import RandomAgent


def play(args: argparse.Namespace) -> None:
    """Play an interactive game in the terminal."""
    config = BoardConfig(grid_size=args.size)
    board = Board(config, rng=random.Random(args.seed))
    run(board)


def evaluate(args: argparse.Namespace) -> None:
    """Measure the random agent's win rate."""
    config = BoardConfig(grid_size=args.size)
    env = MinesweeperEnv(config=config)
    agent = RandomAgent(args.size, seed=args.seed)

    print(f"\nEvaluating Random agent over {args.games} games...")
    print(f"Board: {args.size}x{args.size} with {config.mine_count} mines")

    wins = 0
    total_steps = 0
    total_revealed = 0
    for game in range(args.games):
        seed = None if args.seed is None else args.seed + game
        info = agent.play_episode(env, seed=seed)
        if info["game_state"] == "WON":
            wins += 1
        total_steps += info["steps"]
        total_revealed += info["revealed"]

    print("Results for Random:")
    print(f"  Win rate: {wins / args.games:.1%}")
    print(f"  Avg steps: {total_steps / args.games:.1f}")
    print(f"  Avg revealed: {total_revealed / args.games:.1f} cells")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minesweeper - Play in the terminal or watch a baseline"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument(
        "--size", type=int, default=10, help="Board side length"
    )
    play_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine layouts"
    )

    # Evaluate command
    eval_parser = subparsers.add_parser(
        "evaluate", help="Evaluate the random agent"
    )
    eval_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )
    eval_parser.add_argument(
        "--size", type=int, default=10, help="Board side length"
    )
    eval_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for layouts and agent"
    )

    args = parser.parse_args()

    try:
        if args.command == "play":
            play(args)
        elif args.command == "evaluate":
            evaluate(args)
        else:
            parser.print_help()
    except InvalidConfigurationError as error:
        print(f"Invalid board: {error}")
        sys.exit(2)


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""Watch the Random agent play Minesweeper in the terminal."""
import argparse
import os
import time

from src.minesweeper.board import BoardConfig
from src.minesweeper.environment import MinesweeperEnv
from src.agents import RandomAgent


def redraw(title: str, board_text: str) -> None:
    """Replace the terminal contents with a titled board."""
    os.system("cls" if os.name == "nt" else "clear")
    print(title)
    print(board_text)


def watch(env: MinesweeperEnv, agent: RandomAgent, delay: float,
          games: int) -> int:
    """Play ``games`` rounds, redrawing after every move. Returns wins."""
    wins = 0
    for game in range(1, games + 1):

        def show_move(action: int, info: dict) -> None:
            row, col = agent.action_to_position(action)
            redraw(
                f"Game {game}/{games} | move {info['steps']} at ({row}, {col})"
                f" | {info['revealed']}/{info['total_safe']} safe cells open",
                env.render(),
            )
            time.sleep(delay)

        result = agent.play_episode(env, on_step=show_move)
        if result["game_state"] == "WON":
            wins += 1
            print("\nCleared the board.")
        else:
            print("\nStepped on a mine.")
        time.sleep(4 * delay)

    return wins


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--delay", type=float, default=0.3,
                        help="Seconds between moves")
    parser.add_argument("--games", type=int, default=5,
                        help="Number of games")
    parser.add_argument("--size", type=int, default=10,
                        help="Board side length")
    args = parser.parse_args()

    config = BoardConfig(grid_size=args.size)
    env = MinesweeperEnv(config=config, render_mode="ansi")
    agent = RandomAgent(args.size)

    wins = watch(env, agent, args.delay, args.games)
    print(f"\nRandom agent won {wins} of {args.games} games "
          f"on {args.size}x{args.size} with {config.mine_count} mines")


if __name__ == "__main__":
    main()

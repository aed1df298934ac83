"""
Text front-end for Minesweeper.

Maps board observations to ASCII and routes typed commands back into
the board. The board itself never prints.
"""
from typing import Callable, List, Optional

import numpy as np

from .board import Board, OutOfBoundsError, RevealOutcome
from .cell import HIDDEN_VALUE, MINE_VALUE


HELP_TEXT = (
    "Commands:\n"
    "  <row> <col>  reveal a cell\n"
    "  reset        start a new board\n"
    "  give up      show the board and start over\n"
    "  help         show this message\n"
    "  quit         leave the game"
)

LOST_MESSAGE = "You clicked on a mine!"
WON_MESSAGE = "You have won!"
GAVE_UP_MESSAGE = "You gave up."


# ============================================================================
# Rendering
# ============================================================================

def render_symbol(value: int) -> str:
    """Single character for one observation value."""
    if value == HIDDEN_VALUE:
        return "."
    if value == MINE_VALUE:
        return "*"
    if value == 0:
        return " "
    return str(value)


def render_observation(obs: np.ndarray) -> str:
    """
    Render an observation as a labelled ASCII grid.

    Args:
        obs: 2D array as produced by ``Board.get_observation``.

    Returns:
        Multi-line string with column indices on top and row indices on
        the left.
    """
    height, width = obs.shape
    label_width = len(str(max(height, width) - 1))
    header = " " * (label_width + 1) + " ".join(
        str(col).rjust(label_width) for col in range(width)
    )
    lines = [header]
    for row in range(height):
        cells = " ".join(
            render_symbol(int(value)).rjust(label_width) for value in obs[row]
        )
        lines.append(f"{str(row).rjust(label_width)} {cells}")
    return "\n".join(lines)


# ============================================================================
# Console Session
# ============================================================================

class ConsoleSession:
    """
    Command interpreter driving a board.

    Each call to ``handle`` performs one action and returns the text
    to show the player. Finished rounds are disclosed and replaced by a
    fresh board straight away.
    """

    def __init__(self, board: Board) -> None:
        self.board = board
        self.wins = 0
        self.losses = 0

    def handle(self, command: str) -> str:
        """
        Execute one command.

        Args:
            command: Raw text typed by the player.

        Returns:
            Message to display.
        """
        words = command.strip().lower().split()
        if not words:
            return self.render()
        if words == ["help"]:
            return HELP_TEXT
        if words == ["reset"]:
            self.board.reset()
            return self.render()
        if words in (["give", "up"], ["giveup"]):
            return self._finish(self.board.give_up(), GAVE_UP_MESSAGE)
        return self._activate(words)

    def _activate(self, words: List[str]) -> str:
        if len(words) != 2:
            return f"Unknown command: {' '.join(words)}\n{HELP_TEXT}"
        try:
            row, col = int(words[0]), int(words[1])
        except ValueError:
            return f"Expected two numbers, got: {' '.join(words)}"

        try:
            outcome = self.board.activate_cell(row, col)
        except OutOfBoundsError as error:
            return str(error)

        if outcome == RevealOutcome.LOST:
            self.losses += 1
            return self._finish(self.board.give_up(), LOST_MESSAGE)
        if outcome == RevealOutcome.WON:
            self.wins += 1
            finished = self.board.get_observation()
            self.board.reset()
            return self._finish(finished, WON_MESSAGE)
        return self.render()

    def _finish(self, finished: np.ndarray, message: str) -> str:
        return (
            f"{render_observation(finished)}\n\n{message}\n"
            f"Wins: {self.wins} | Losses: {self.losses}\n\n"
            f"New board:\n{self.render()}"
        )

    def render(self) -> str:
        """Current board as text."""
        return render_observation(self.board.get_observation())


def run(
    board: Optional[Board] = None,
    read: Optional[Callable[[str], str]] = None,
    write: Optional[Callable[[str], None]] = None,
) -> ConsoleSession:
    """
    Interactive loop until ``quit`` or end of input.

    Args:
        board: Board to play on (default: 10x10).
        read: Prompt-and-read function (default: ``input``).
        write: Output function (default: ``print``).

    Returns:
        The session, for its win/loss tally.
    """
    read = read or input
    write = write or print
    session = ConsoleSession(board or Board())

    write(f"Minesweeper {session.board.grid_size}x{session.board.grid_size}"
          f" with {session.board.mine_count} mines")
    write(HELP_TEXT)
    write(session.render())

    while True:
        try:
            command = read("> ")
        except EOFError:
            break
        if command.strip().lower() in ("quit", "exit", "q"):
            break
        write(session.handle(command))

    write(f"Final: {session.wins} wins, {session.losses} losses")
    return session

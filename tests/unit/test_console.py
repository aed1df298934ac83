"""
Unit tests for the text front-end.

Tests ASCII rendering, command handling and the interactive loop.
"""
import random
from unittest.mock import patch

import numpy as np
import pytest
from minesweeper import Board, BoardConfig, ConsoleSession, render_observation
from minesweeper.console import (
    GAVE_UP_MESSAGE,
    HELP_TEXT,
    LOST_MESSAGE,
    WON_MESSAGE,
    render_symbol,
    run,
)


@pytest.fixture
def session(canonical_board: Board) -> ConsoleSession:
    """Console session on the 3x3 fixture."""
    return ConsoleSession(canonical_board)


# ============================================================================
# Rendering Tests
# ============================================================================

class TestRendering:
    """Test observation to text conversion."""

    @pytest.mark.parametrize(
        "value, symbol",
        [(-1, "."), (0, " "), (1, "1"), (8, "8"), (9, "*")],
    )
    def test_symbols(self, value: int, symbol: str) -> None:
        """Each observation value has its own symbol."""
        assert render_symbol(value) == symbol

    def test_render_after_cascade(self, canonical_board: Board) -> None:
        """Rendered grid has labels and shows revealed counts."""
        canonical_board.activate_cell(0, 2)
        lines = render_observation(canonical_board.get_observation()).split("\n")
        assert lines == [
            "  0 1 2",
            "0 . 1  ",
            "1 . 2 1",
            "2 . . .",
        ]

    def test_wide_board_pads_labels(self) -> None:
        """Two-digit indices keep columns aligned."""
        obs = np.full((12, 12), -1, dtype=np.int8)
        lines = render_observation(obs).split("\n")
        assert lines[0].startswith("    0  1")
        assert lines[0].endswith("10 11")
        assert lines[-1].startswith("11  .")
        assert len({len(line) for line in lines}) == 1


# ============================================================================
# Command Tests
# ============================================================================

class TestCommands:
    """Test ConsoleSession.handle."""

    def test_reveal_command(self, session: ConsoleSession) -> None:
        """Two numbers activate a cell and re-render."""
        output = session.handle("1 1")
        assert session.board.get_cell(1, 1).is_revealed is True
        assert "1 . 2 ." in output

    def test_blank_command_renders(self, session: ConsoleSession) -> None:
        """Empty input just shows the board."""
        assert session.handle("   ") == session.render()

    def test_help_command(self, session: ConsoleSession) -> None:
        """Help lists the commands."""
        assert session.handle("HELP") == HELP_TEXT

    def test_unknown_command(self, session: ConsoleSession) -> None:
        """Unknown words produce a message, not an error."""
        output = session.handle("flag")
        assert output.startswith("Unknown command: flag")

    def test_non_numeric_coordinates(self, session: ConsoleSession) -> None:
        """Coordinates must be integers."""
        assert session.handle("a b").startswith("Expected two numbers")

    def test_out_of_bounds_coordinates(self, session: ConsoleSession) -> None:
        """Off-board coordinates are reported."""
        output = session.handle("5 0")
        assert "outside" in output
        assert session.board.get_valid_actions() == [
            (row, col) for row in range(3) for col in range(3)
        ]

    def test_mine_loses_and_restarts(self, session: ConsoleSession) -> None:
        """Hitting a mine shows the full board and deals a new one."""
        output = session.handle("0 0")
        assert LOST_MESSAGE in output
        assert "0 * 1  " in output
        assert "2   1 *" in output
        assert session.losses == 1
        assert session.board.is_playing is True
        assert len(session.board.get_valid_actions()) == 9

    def test_win_counts_and_restarts(self, session: ConsoleSession) -> None:
        """Clearing the board reports a win and deals a new one."""
        session.handle("0 2")
        output = session.handle("2 0")
        assert WON_MESSAGE in output
        assert session.wins == 1
        assert session.board.is_playing is True

    @pytest.mark.parametrize("command", ["give up", "giveup", "Give Up"])
    def test_give_up(self, session: ConsoleSession, command: str) -> None:
        """Giving up discloses the old board."""
        output = session.handle(command)
        assert GAVE_UP_MESSAGE in output
        assert "0 * 1  " in output
        assert session.board.is_playing is True

    def test_reset(self, session: ConsoleSession) -> None:
        """Reset covers every cell again."""
        session.handle("1 1")
        session.handle("reset")
        assert len(session.board.get_valid_actions()) == 9


# ============================================================================
# Interactive Loop Tests
# ============================================================================

class TestRun:
    """Test the read-eval-print loop."""

    def test_quit_stops_loop(self, canonical_board: Board) -> None:
        """Commands run until quit."""
        commands = iter(["0 2", "2 0", "quit", "1 1"])
        output = []
        session = run(
            canonical_board,
            read=lambda prompt: next(commands),
            write=output.append,
        )
        assert session.wins == 1
        assert output[-1] == "Final: 1 wins, 0 losses"
        assert next(commands) == "1 1"

    def test_end_of_input_stops_loop(self, canonical_board: Board) -> None:
        """EOF ends the game cleanly."""
        with patch("builtins.input", side_effect=EOFError):
            with patch("builtins.print") as mock_print:
                session = run(canonical_board)
        assert session.wins == 0
        mock_print.assert_called_with("Final: 0 wins, 0 losses")

    def test_banner_shows_board_size(self) -> None:
        """Start-up banner names the board dimensions."""
        board = Board(BoardConfig(4), rng=random.Random(3))
        output = []
        run(board, read=lambda prompt: "q", write=output.append)
        assert output[0] == "Minesweeper 4x4 with 6 mines"

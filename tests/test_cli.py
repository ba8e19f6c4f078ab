"""Tests for the console turn loop, driven by scripted input."""

import csv

import pytest

from connect_four.cli.play import ask_human_first, read_human_column, run_game
from connect_four.games.connect4 import HUMAN, MACHINE, GameSession, board_from_rows
from connect_four.search.connect4 import Connect4MinimaxPlayer
from connect_four.utils import MetricsLogger


class ScriptedConsole:
    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []
        self.lines = []

    def input(self, prompt=""):
        self.prompts.append(prompt)
        return self.answers.pop(0)

    def print(self, *args):
        self.lines.append(" ".join(str(a) for a in args))


def test_ask_human_first():
    console = ScriptedConsole(["x", " 2 "])
    assert ask_human_first(console.input, console.print) is False
    assert console.lines == ["Invalid input. Please try again."]

    console = ScriptedConsole(["1"])
    assert ask_human_first(console.input, console.print) is True


def test_read_human_column_is_one_based():
    assert read_human_column(lambda _: "1") == 0
    assert read_human_column(lambda _: " 7 ") == 6


def test_human_wins_after_bad_input():
    board = board_from_rows([
        ".......",
        ".......",
        ".......",
        ".......",
        "OOO....",
        "XXX....",
    ])
    session = GameSession.from_board(board, first_player=HUMAN)
    console = ScriptedConsole(["abc", "9", "4"])

    winner = run_game(session, Connect4MinimaxPlayer(), console.input, console.print)

    assert winner == HUMAN
    assert console.prompts == ["Enter column number 1-7: "] * 3
    assert "Invalid input. Please try again." in console.lines
    assert "Invalid Column Index" in console.lines
    assert console.lines[-1] == "Game Over! The winner is Human Player."
    assert "|X|X|X|X| | | |" in console.lines[-3]
    assert session.history[-1] == {"player": HUMAN, "column": 3, "row": 5}


def test_machine_wins_and_logs_metrics(tmp_path):
    board = board_from_rows([
        ".......",
        ".......",
        ".......",
        ".......",
        ".......",
        "OOO.XXX",
    ])
    session = GameSession.from_board(board, first_player=MACHINE)
    console = ScriptedConsole([])

    with MetricsLogger(log_dir=str(tmp_path)) as metrics:
        winner = run_game(
            session, Connect4MinimaxPlayer(), console.input, console.print, metrics=metrics
        )
        path = metrics.csv_path

    assert winner == MACHINE
    assert console.prompts == []
    assert "AI's turn. AI is 'O'" in console.lines
    assert "Calculating..." in console.lines
    assert "AI chooses COLUMN 4" in console.lines
    assert console.lines[-1] == "Game Over! The winner is AI."

    with open(path, newline="") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 1
    assert rows[0]["step"] == "6"
    assert rows[0]["column"] == "3"
    assert rows[0]["source"] == "immediate_win"
    assert rows[0]["nodes"] == "0"



def test_full_column_is_reported_and_turn_kept():
    board = board_from_rows([
        "..X....",
        "..O....",
        "..X....",
        "..O....",
        "..X....",
        "..O....",
    ])
    session = GameSession.from_board(board, first_player=HUMAN)
    console = ScriptedConsole(["3"])

    # The script runs dry on the re-prompt.
    with pytest.raises(IndexError):
        run_game(session, Connect4MinimaxPlayer(), console.input, console.print)
    assert "Column is already full." in console.lines
    assert session.current_turn == HUMAN
    assert len(console.prompts) == 2

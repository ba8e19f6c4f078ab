"""CLI for playing Connect Four against the minimax machine player."""

import logging
from typing import Callable, Optional

import tyro

from connect_four.config import AppConfig, load_config
from connect_four.games.connect4 import GameOver, GameSession, InvalidColumnError
from connect_four.games.connect4.constants import HUMAN, MACHINE, SYMBOLS
from connect_four.search.connect4 import Connect4MinimaxPlayer
from connect_four.utils import MetricsLogger

InputFn = Callable[[str], str]
OutputFn = Callable[..., None]


def ask_human_first(input_fn: InputFn = input, output: OutputFn = print) -> bool:
    """Prompt until the human answers 1 (play first) or 2 (play second)."""
    while True:
        answer = input_fn('Would you like to play first(enter "1") or second(enter "2"): ').strip()
        if answer == "1":
            return True
        if answer == "2":
            return False
        output("Invalid input. Please try again.")


def read_human_column(input_fn: InputFn = input) -> int:
    """Read a one-based column and return it zero-based."""
    raw = input_fn("Enter column number 1-7: ").strip()
    try:
        return int(raw) - 1
    except ValueError:
        raise InvalidColumnError(-1, "Invalid input. Please try again.") from None


def run_game(
    session: GameSession,
    machine: Connect4MinimaxPlayer,
    input_fn: InputFn = input,
    output: OutputFn = print,
    metrics: Optional[MetricsLogger] = None,
) -> Optional[int]:
    """
    Alternate human and machine turns until the game ends.

    Returns the winner's token, or None for a draw.
    """
    output(session.render())
    output()

    while True:
        try:
            if session.current_turn == HUMAN:
                output(f"Human player's turn. Human is '{SYMBOLS[HUMAN]}'")
                session.drop_disc(read_human_column(input_fn))
            else:
                output(f"AI's turn. AI is '{SYMBOLS[MACHINE]}'")
                output("Calculating...")
                column = machine.choose_column(session)
                output("Done")
                output(f"AI chooses COLUMN {column + 1}")
                if metrics is not None:
                    stats = machine.last_stats
                    metrics.log_dict(
                        {
                            "column": column,
                            "source": machine.last_source,
                            "nodes": stats.nodes,
                            "evaluations": stats.evaluations,
                            "cutoffs": stats.cutoffs,
                            "elapsed": round(stats.elapsed, 6),
                        },
                        step=session.disc_count,
                    )
                session.drop_disc(column)
            output()
            output(session.render())
            output()
        except InvalidColumnError as e:
            output(str(e))
            output()
        except GameOver as e:
            output()
            output(session.render())
            output()
            output(str(e))
            return e.winner


def play(
    config: Optional[str] = None,
    human_first: Optional[bool] = None,
    log_dir: Optional[str] = None,
    verbose: bool = False,
) -> None:
    """
    Play Connect Four against the machine.

    Args:
        config: Path to a YAML config file
        human_first: Whether the human plays first (asked when omitted)
        log_dir: Directory for a per-move search metrics CSV
        verbose: Log search details at DEBUG level
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
    app_config = load_config(config) if config else AppConfig()
    if human_first is None:
        human_first = app_config.play.human_first
    if log_dir is None:
        log_dir = app_config.metrics.log_dir

    print("Welcome to Connect 4")
    print("Using Minimax with Alpha Beta Pruning\n")

    if human_first is None:
        human_first = ask_human_first()

    session = GameSession(first_player=HUMAN if human_first else MACHINE)
    machine = Connect4MinimaxPlayer.from_config(app_config.search)

    metrics = MetricsLogger(log_dir=log_dir) if log_dir else None
    try:
        run_game(session, machine, metrics=metrics)
    finally:
        if metrics is not None:
            metrics.close()

    print("Thank you. Goodbye!")


def main() -> None:
    tyro.cli(play)


if __name__ == "__main__":
    main()

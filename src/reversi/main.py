import typer
from typing import Optional

from reversi.commands.play import TerminalGame
from reversi.commands.replay import Replay
from reversi.config import get_show_hints, setup_logging


def play_command(
    hints: Optional[bool] = typer.Option(None, "--hints/--no-hints"),
) -> None:
    if hints is None:
        hints = get_show_hints()

    TerminalGame(hints)()


def replay_command(
    fields: Optional[list[str]] = typer.Argument(
        None, help="Moves in field notation, e.g. d3 c5"
    ),
    hints: Optional[bool] = typer.Option(None, "--hints/--no-hints"),
) -> None:
    if hints is None:
        hints = get_show_hints()

    Replay(fields or [], hints)()


def play() -> None:
    setup_logging()
    typer.run(play_command)


def replay() -> None:
    setup_logging()
    typer.run(replay_command)

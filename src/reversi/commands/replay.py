import typer
from typing import Optional

from reversi.othello.board import Board, InvalidMove
from reversi.othello.game import Game
from reversi.render import render, render_result


class Replay:
    def __init__(
        self, fields: list[str], show_hints: bool, start: Optional[Board] = None
    ) -> None:
        self.fields = fields
        self.show_hints = show_hints

        # Replays begin from the standard opening unless a position is given
        self.start = start

    def replay(self) -> Game:
        game = Game(self.start)

        for field in self.fields:
            try:
                game.play(Board.field_to_pos(field))
            except (ValueError, InvalidMove) as e:
                typer.echo(f'Cannot play "{field}": {e}', err=True)
                raise typer.Exit(1)

        return game

    def __call__(self) -> None:
        game = self.replay()

        if game.is_over():
            typer.echo(render(game.board))
            typer.echo(render_result(game))
            return

        moves = game.valid_moves()
        hints = moves if self.show_hints else []
        typer.echo(render(game.board, hints))
        typer.echo(f"{game.turn} to move: {Board.positions_to_fields(moves)}")

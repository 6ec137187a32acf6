import typer
from typing import Optional

from reversi.othello.board import Board, InvalidMove
from reversi.othello.game import Game
from reversi.render import render, render_result

QUIT_ANSWERS = ["q", "quit"]


class TerminalGame:
    def __init__(self, show_hints: bool, game: Optional[Game] = None) -> None:
        if game is None:
            game = Game()

        self.game = game
        self.show_hints = show_hints

    def show_board(self) -> None:
        hints = self.game.valid_moves() if self.show_hints else []
        typer.echo(render(self.game.board, hints))

    def ask_move(self) -> str:
        return str(typer.prompt(f"{self.game.turn} to move")).strip()

    def __call__(self) -> None:
        while not self.game.is_over():
            self.show_board()
            answer = self.ask_move()

            if answer.lower() in QUIT_ANSWERS:
                typer.echo("Quit.")
                return

            turn = self.game.turn

            try:
                self.game.play(Board.field_to_pos(answer))
            except (ValueError, InvalidMove) as e:
                fields = Board.positions_to_fields(self.game.valid_moves())
                typer.echo(f"{e}. Valid moves: {fields}")
                continue

            if self.game.passed_last():
                typer.echo(f"{turn.opponent()} has no moves and passes.")

        self.show_board()
        typer.echo(render_result(self.game))

from __future__ import annotations

from typing import Optional, Sequence

from loguru import logger

from reversi.othello.board import Board, InvalidMove, Pos
from reversi.othello.piece import Color


class Game:
    """
    Game tracks whose turn it is on top of a Board.
    Passes happen automatically when the player to move has no valid move left.
    """

    def __init__(self, board: Optional[Board] = None, turn: Color = Color.BLACK) -> None:
        if board is None:
            board = Board()

        self.board = board
        self.turn = turn

        # Played positions in order, None marks a pass
        self.moves: list[Optional[Pos]] = []

        self._skip_if_stuck()

    @classmethod
    def from_fields(cls, fields: Sequence[str]) -> Game:
        game = Game()
        for field in fields:
            game.play(Board.field_to_pos(field))
        return game

    def __repr__(self) -> str:
        return f"Game({self.board}, {self.turn})"

    def valid_moves(self) -> list[Pos]:
        return self.board.valid_moves(self.turn)

    def play(self, pos: Sequence[int]) -> None:
        self.board.place_piece(pos, self.turn)
        self.moves.append((pos[0], pos[1]))
        self.turn = self.turn.opponent()
        self._skip_if_stuck()

    def pass_turn(self) -> None:
        if self.is_over():
            raise InvalidMove("The game is over")

        if self.board.has_move(self.turn):
            raise InvalidMove(f"{self.turn} has a valid move and cannot pass")

        self.moves.append(None)
        self.turn = self.turn.opponent()

    def _skip_if_stuck(self) -> None:
        if self.board.is_over() or self.board.has_move(self.turn):
            return

        logger.debug(f"{self.turn} has no moves and passes")
        self.pass_turn()

    def passed_last(self) -> bool:
        return len(self.moves) != 0 and self.moves[-1] is None

    def is_over(self) -> bool:
        return self.board.is_over()

    def score(self) -> dict[Color, int]:
        return {color: self.board.count(color) for color in Color}

    def winner(self) -> Optional[Color]:
        if not self.is_over():
            return None
        return self.board.winner()

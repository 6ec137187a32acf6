from typing import Iterable, Sequence

from reversi.othello.board import COLS, Board
from reversi.othello.game import Game
from reversi.othello.piece import Color

EMPTY_SQUARE = "  "
HINT_SQUARE = "· "


def render(board: Board, hints: Iterable[Sequence[int]] = ()) -> str:
    hinted = {(pos[0], pos[1]) for pos in hints}

    lines = ["+-a-b-c-d-e-f-g-h-+"]
    line = ""

    for (row, col), piece in board.cells():
        if col == 0:
            line = f"{row + 1} "

        if piece is not None:
            line += piece.symbol() + " "
        elif (row, col) in hinted:
            line += HINT_SQUARE
        else:
            line += EMPTY_SQUARE

        if col == COLS - 1:
            lines.append(line + "|")

    lines.append("+-----------------+")
    return "\n".join(lines)


def render_result(game: Game) -> str:
    score = game.score()
    black = score[Color.BLACK]
    white = score[Color.WHITE]
    winner = game.winner()

    if winner is None:
        return f"Draw {black}-{white}."
    return f"{winner.value.capitalize()} wins {black}-{white}."

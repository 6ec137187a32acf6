from __future__ import annotations

from typing import Iterator, Optional, Sequence

from loguru import logger

from reversi.othello.piece import Color, Piece

ROWS = 8
COLS = 8

# (d_row, d_col), clockwise starting east
DIRECTIONS = [
    (0, 1),
    (1, 1),
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, -1),
    (-1, 0),
    (-1, 1),
]

Pos = tuple[int, int]

Grid = list[list[Optional[Piece]]]

ROW_CHARS = {
    "B": Color.BLACK,
    "W": Color.WHITE,
    ".": None,
    "-": None,
    " ": None,
}


class InvalidPosition(Exception):
    pass


class InvalidMove(Exception):
    pass


def _empty_grid() -> Grid:
    return [[None] * COLS for _ in range(ROWS)]


def _start_grid() -> Grid:
    grid = _empty_grid()
    grid[3][4] = Piece(Color.BLACK)
    grid[4][3] = Piece(Color.BLACK)
    grid[3][3] = Piece(Color.WHITE)
    grid[4][4] = Piece(Color.WHITE)
    return grid


def positions_to_flip(
    board: Board, pos: Sequence[int], color: Color, direction: Pos
) -> Optional[list[Pos]]:
    """
    Walks away from `pos` in `direction`, collecting discs of the opponent of `color`
    until a disc of `color` closes the line.

    Returns the collected positions in walking order, excluding `pos` and the closing disc.
    Returns None when the walk leaves the board, hits an empty square
    or hits a disc of `color` before collecting anything.
    """
    row, col = board._check_pos(pos)
    d_row, d_col = direction
    flipped: list[Pos] = []

    while True:
        row += d_row
        col += d_col
        next_pos = (row, col)

        if not board.is_valid_pos(next_pos):
            return None

        if not board.is_occupied(next_pos):
            return None

        if board.is_mine(next_pos, color):
            if not flipped:
                return None
            return flipped

        flipped.append(next_pos)


class Board:
    """
    Board holds the 8x8 grid and applies the othello rules to it.
    It does not know whose turn it is, see `reversi.othello.game.Game` for that.
    """

    def __init__(self, grid: Optional[Grid] = None) -> None:
        if grid is None:
            grid = _start_grid()

        assert len(grid) == ROWS
        assert all(len(row) == COLS for row in grid)

        self.grid = grid

    @classmethod
    def empty(cls) -> Board:
        return Board(_empty_grid())

    @classmethod
    def from_rows(cls, rows: list[str]) -> Board:
        if len(rows) != ROWS:
            raise ValueError(f"Expected {ROWS} rows, got {len(rows)}")

        grid = _empty_grid()
        for row, line in enumerate(rows):
            if len(line) != COLS:
                raise ValueError(f'Row {row + 1} "{line}" does not have {COLS} squares')

            for col, char in enumerate(line.upper()):
                try:
                    color = ROW_CHARS[char]
                except KeyError:
                    raise ValueError(f'Invalid square "{char}" in row {row + 1}') from None

                if color is not None:
                    grid[row][col] = Piece(color)

        return Board(grid)

    def __repr__(self) -> str:
        lines: list[str] = []
        for row in self.grid:
            line = ""
            for piece in row:
                if piece is None:
                    line += "."
                elif piece.color() == Color.BLACK:
                    line += "B"
                else:
                    line += "W"
            lines.append(line)
        return f"Board({lines})"

    def is_valid_pos(self, pos: Sequence[int]) -> bool:
        try:
            row, col = pos
        except (TypeError, ValueError):
            return False

        if not (isinstance(row, int) and isinstance(col, int)):
            return False

        return row in range(ROWS) and col in range(COLS)

    def _check_pos(self, pos: Sequence[int]) -> Pos:
        if not self.is_valid_pos(pos):
            raise InvalidPosition(f"Position {pos} is not on the board")

        row, col = pos
        return (row, col)

    def get_piece(self, pos: Sequence[int]) -> Optional[Piece]:
        row, col = self._check_pos(pos)
        return self.grid[row][col]

    def is_occupied(self, pos: Sequence[int]) -> bool:
        return self.get_piece(pos) is not None

    def is_mine(self, pos: Sequence[int], color: Color) -> bool:
        piece = self.get_piece(pos)
        if piece is None:
            return False
        return piece.color() == color

    def flips(self, pos: Sequence[int], color: Color) -> list[Pos]:
        flipped: list[Pos] = []
        for direction in DIRECTIONS:
            line = positions_to_flip(self, pos, color, direction)
            if line:
                flipped += line
        return flipped

    def valid_move(self, pos: Sequence[int], color: Color) -> bool:
        if self.is_occupied(pos):
            return False

        for direction in DIRECTIONS:
            if positions_to_flip(self, pos, color, direction):
                return True
        return False

    def valid_moves(self, color: Color) -> list[Pos]:
        moves: list[Pos] = []
        for row in range(ROWS):
            for col in range(COLS):
                if self.valid_move((row, col), color):
                    moves.append((row, col))
        return moves

    def place_piece(self, pos: Sequence[int], color: Color) -> None:
        row, col = self._check_pos(pos)
        field = self.pos_to_field((row, col))

        if not self.valid_move((row, col), color):
            logger.info(f"Rejected move {field} for {color}")
            raise InvalidMove(f"{color} cannot play {field}")

        flipped = self.flips((row, col), color)
        self.grid[row][col] = Piece(color)

        for flip_pos in flipped:
            piece = self.get_piece(flip_pos)
            assert piece is not None
            piece.flip()

        logger.debug(
            f"{color} played {field}, flipped {self.positions_to_fields(flipped)}"
        )

    def has_move(self, color: Color) -> bool:
        return len(self.valid_moves(color)) != 0

    def is_over(self) -> bool:
        return not self.has_move(Color.WHITE) and not self.has_move(Color.BLACK)

    def cells(self) -> Iterator[tuple[Pos, Optional[Piece]]]:
        for row in range(ROWS):
            for col in range(COLS):
                yield (row, col), self.grid[row][col]

    def count(self, color: Color) -> int:
        return sum(
            1 for _, piece in self.cells() if piece is not None and piece.color() == color
        )

    def count_empties(self) -> int:
        return sum(1 for _, piece in self.cells() if piece is None)

    def winner(self) -> Optional[Color]:
        black = self.count(Color.BLACK)
        white = self.count(Color.WHITE)

        if black > white:
            return Color.BLACK
        if white > black:
            return Color.WHITE
        return None

    @classmethod
    def pos_to_field(cls, pos: Sequence[int]) -> str:
        if len(pos) != 2:
            raise ValueError
        row, col = pos
        if row not in range(ROWS) or col not in range(COLS):
            raise ValueError
        return "abcdefgh"[col] + "12345678"[row]

    @classmethod
    def positions_to_fields(cls, positions: Sequence[Sequence[int]]) -> str:
        return " ".join(cls.pos_to_field(pos) for pos in positions)

    @classmethod
    def field_to_pos(cls, field: str) -> Pos:
        if len(field) != 2:
            raise ValueError(f'Invalid field length "{len(field)}"')

        field = field.lower()

        if not ("a" <= field[0] <= "h" and "1" <= field[1] <= "8"):
            raise ValueError(f'Invalid field "{field}"')

        col = ord(field[0]) - ord("a")
        row = ord(field[1]) - ord("1")
        return (row, col)

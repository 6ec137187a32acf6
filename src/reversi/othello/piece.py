from __future__ import annotations

from enum import Enum


class Color(Enum):
    BLACK = "black"
    WHITE = "white"

    def opponent(self) -> Color:
        if self == Color.BLACK:
            return Color.WHITE
        return Color.BLACK

    @classmethod
    def parse(cls, string: str) -> Color:
        try:
            return cls(string.strip().lower())
        except ValueError:
            raise ValueError(f'Invalid color "{string}"') from None

    def __str__(self) -> str:
        return self.value


SYMBOLS = {
    Color.BLACK: "○",
    Color.WHITE: "●",
}


class Piece:
    """
    Piece is a single disc on the board. Its identity never changes, only its color does.
    """

    def __init__(self, color: Color) -> None:
        assert isinstance(color, Color)
        self.__color = color

    def __repr__(self) -> str:
        return f"Piece({self.__color})"

    def color(self) -> Color:
        return self.__color

    def flip(self) -> None:
        self.__color = self.__color.opponent()

    def symbol(self) -> str:
        return SYMBOLS[self.__color]

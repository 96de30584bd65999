from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple
import sys

__all__ = [
    "Direction",
    "Position",
    "Rectangle",
    "EMPTY_RECTANGLE",
]


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTAS[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITE[self]

    @property
    def glyph(self) -> str:
        return _GLYPHS[self]


_DELTAS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

_OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_GLYPHS = {
    Direction.UP: "^",
    Direction.DOWN: "v",
    Direction.LEFT: "<",
    Direction.RIGHT: ">",
}


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Cell of the unbounded grid. Rows grow downwards, columns to the right."""

    r: int
    c: int

    def move(self, direction: Direction) -> "Position":
        dr, dc = direction.delta
        return Position(self.r + dr, self.c + dc)

    def __str__(self) -> str:
        return f"({self.r}, {self.c})"


@dataclass(frozen=True, slots=True)
class Rectangle:
    """Closed rectangle between the corners lo (min row/col) and hi (max row/col)."""

    lo: Position
    hi: Position

    @property
    def is_empty(self) -> bool:
        return self.lo.r > self.hi.r or self.lo.c > self.hi.c

    def contains(self, pos: Position) -> bool:
        return self.lo.r <= pos.r <= self.hi.r and self.lo.c <= pos.c <= self.hi.c

    def expanded(self, n: int) -> "Rectangle":
        if self.is_empty:
            return self
        return Rectangle(Position(self.lo.r - n, self.lo.c - n),
                         Position(self.hi.r + n, self.hi.c + n))

    def including(self, pos: Position) -> "Rectangle":
        return Rectangle(Position(min(self.lo.r, pos.r), min(self.lo.c, pos.c)),
                         Position(max(self.hi.r, pos.r), max(self.hi.c, pos.c)))

    def excess(self, pos: Position) -> List[Tuple[Direction, int]]:
        """Signed distance of pos outside each side of the rectangle.

        Each entry is paired with the direction a tile there has to face to
        head back towards the rectangle: (DOWN, rows above the top edge),
        (UP, rows below the bottom edge), (RIGHT, columns left of the left
        edge), (LEFT, columns right of the right edge).
        """
        return [
            (Direction.DOWN, self.lo.r - pos.r),
            (Direction.UP, pos.r - self.hi.r),
            (Direction.RIGHT, self.lo.c - pos.c),
            (Direction.LEFT, pos.c - self.hi.c),
        ]


# inverted corners: including() any position yields that single cell
EMPTY_RECTANGLE = Rectangle(Position(sys.maxsize, sys.maxsize),
                            Position(-sys.maxsize - 1, -sys.maxsize - 1))

from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum

from .geometry import Direction


class Color(Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    BLACK = "black"
    YELLOW = "yellow"
    ORANGE = "orange"

    @property
    def code(self) -> str:
        """One-letter code used in ASCII output (black is K)."""
        return "K" if self is Color.BLACK else self.name[0]

    def __str__(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True, slots=True)
class Tile:
    color: Color
    direction: Direction

    def facing(self, direction: Direction) -> "Tile":
        return replace(self, direction=direction)

    def __str__(self) -> str:
        return f"Tile({self.color}, {self.direction.name.capitalize()})"

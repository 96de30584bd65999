from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from .geometry import EMPTY_RECTANGLE, Direction, Position, Rectangle
from .state import BoardState
from .tiles import Color


def bounding_box(arrows: Mapping[Position, Direction], targets: Mapping[Position, Color]) -> Rectangle:
    """Smallest rectangle covering every arrow and target cell.

    Without arrows and targets the result is EMPTY_RECTANGLE (inverted corners).
    """
    box = EMPTY_RECTANGLE
    for pos in arrows:
        box = box.including(pos)
    for pos in targets:
        box = box.including(pos)
    return box


@dataclass(frozen=True, slots=True)
class Puzzle:
    """
    Static level description: arrow cells, target cells and the starting board.

    bounding_box and extended_bounding_box are derived once here.
    The extended box pads the bounding box by `padding` cells on every side,
    by default the number of tiles on the board.
    """

    arrows: Dict[Position, Direction] = field(hash=False)
    targets: Dict[Position, Color] = field(hash=False)
    initial: BoardState
    name: str = ""
    padding: Optional[int] = None
    bounding_box: Rectangle = field(init=False, compare=False)
    extended_bounding_box: Rectangle = field(init=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "arrows", dict(self.arrows))
        object.__setattr__(self, "targets", dict(self.targets))
        if self.padding is None:
            object.__setattr__(self, "padding", len(self.initial))
        box = bounding_box(self.arrows, self.targets)
        object.__setattr__(self, "bounding_box", box)
        object.__setattr__(self, "extended_bounding_box", box.expanded(self.padding))

    @property
    def has_bounds(self) -> bool:
        """False when there are no arrows and no targets to bound the board."""
        return not self.bounding_box.is_empty

    @property
    def tile_count(self) -> int:
        return len(self.initial)

    def arrow_at(self, pos: Position) -> Optional[Direction]:
        return self.arrows.get(pos)

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple, Union

from .geometry import Position
from .tiles import Color, Tile

__all__ = [
    "BoardState",
    "Cell",
]

Cell = Tuple[Position, Tile]


@dataclass(frozen=True, slots=True)
class BoardState:
    """
    Immutable snapshot of the board: which tile sits on which cell.

    Stored as a frozenset of (position, tile) pairs, so equality and hash
    only depend on the content and never on the order the tiles were added.
    No two tiles may share a position.
    """

    cells: FrozenSet[Cell]
    _index: Dict[Position, Tile] = field(init=False, repr=False, compare=False, hash=False)

    def __post_init__(self) -> None:
        index = dict(self.cells)
        if len(index) != len(self.cells):
            raise ValueError("two tiles share a position")
        object.__setattr__(self, "_index", index)

    @classmethod
    def from_tiles(cls, tiles: Union[Mapping[Position, Tile], Iterable[Cell]]) -> "BoardState":
        pairs = list(tiles.items()) if isinstance(tiles, Mapping) else list(tiles)
        if len({pos for pos, _ in pairs}) != len(pairs):
            raise ValueError("two tiles share a position")
        return cls(frozenset(pairs))

    # ---- queries
    def tile_at(self, pos: Position) -> Optional[Tile]:
        return self._index.get(pos)

    def is_occupied(self, pos: Position) -> bool:
        return pos in self._index

    def items(self) -> List[Cell]:
        """Tiles in row-major order of their positions."""
        return sorted(self._index.items())

    def positions(self) -> List[Position]:
        return sorted(self._index)

    def colors(self) -> List[Color]:
        return [tile.color for _, tile in self.items()]

    def as_dict(self) -> Dict[Position, Tile]:
        return dict(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def __str__(self) -> str:
        return "[" + ", ".join(f"{p}:{t}" for p, t in self.items()) + "]"

from __future__ import annotations

from .puzzle import Puzzle
from .state import BoardState


def is_solved(state: BoardState, puzzle: Puzzle) -> bool:
    """Every target cell holds a tile of the required color."""
    for pos, color in puzzle.targets.items():
        tile = state.tile_at(pos)
        if tile is None or tile.color is not color:
            return False
    return True

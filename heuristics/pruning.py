from __future__ import annotations
from typing import Callable, List, Tuple

from squares_core.geometry import Direction
from squares_core.puzzle import Puzzle
from squares_core.state import BoardState
from squares_core.tiles import Tile

# keep_fn(state, puzzle) -> True if the state may still lead to a solution
KeepFn = Callable[[BoardState, Puzzle], bool]


# ---- pruning passes

def keep_all(state: BoardState, puzzle: Puzzle) -> bool:
    return True


def in_extended_box(state: BoardState, puzzle: Puzzle) -> bool:
    """False if any tile is strictly outside the extended bounding box.

    A puzzle without arrows and targets has no box; every state is kept.
    """
    if not puzzle.has_bounds:
        return True
    box = puzzle.extended_bounding_box
    return all(box.contains(pos) for pos in state.positions())


def faces_bounding_box(state: BoardState, puzzle: Puzzle) -> bool:
    """Tiles farthest outside the bounding box must be heading back to it.

    Takes the largest distance any tile has past any side of the box. Every
    tile at that distance must face towards the box on that side: nothing
    lies farther out to push it back, and only arrows (all inside the box)
    can turn it.
    Necessary condition only, and it assumes every tile has to return.
    """
    if not puzzle.has_bounds:
        return True
    box = puzzle.bounding_box
    worst = 0
    offenders: List[Tuple[Tile, Direction]] = []
    for pos, tile in state.items():
        for back, dist in box.excess(pos):
            if dist > worst:
                worst = dist
                offenders = [(tile, back)]
            elif dist == worst and dist > 0:
                offenders.append((tile, back))
    return all(tile.direction is back for tile, back in offenders)


def with_facing(state: BoardState, puzzle: Puzzle, base: KeepFn = in_extended_box) -> bool:
    return base(state, puzzle) and faces_bounding_box(state, puzzle)

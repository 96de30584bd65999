from __future__ import annotations
from typing import List, Sequence, Tuple

from .geometry import Direction, Position
from .puzzle import Puzzle
from .state import BoardState
from .tiles import Tile


def push(state: BoardState, pos: Position, direction: Direction, puzzle: Puzzle) -> BoardState:
    """Moves the tile at pos one cell towards direction, returning a new state.

    Tiles lined up in front of it are pushed along (the whole run shifts by one).
    The farthest tile moves first, so a tile only enters a cell that was just vacated.
    A tile arriving on an arrow cell takes the arrow's direction.
    Empty pos → the same state.
    """
    if not state.is_occupied(pos):
        return state

    chain: List[Position] = []
    cur = pos
    while state.is_occupied(cur):
        chain.append(cur)
        cur = cur.move(direction)

    cells = state.as_dict()
    for src in reversed(chain):
        tile = cells.pop(src)
        dst = src.move(direction)
        arrow = puzzle.arrow_at(dst)
        if arrow is not None:
            tile = tile.facing(arrow)
        cells[dst] = tile
    return BoardState.from_tiles(cells)


def click(state: BoardState, pos: Position, puzzle: Puzzle) -> BoardState:
    """Player clicks the tile at pos: it is pushed in its own facing direction."""
    tile = state.tile_at(pos)
    if tile is None:
        return state
    return push(state, pos, tile.direction, puzzle)


def successors_clicks(state: BoardState, puzzle: Puzzle) -> List[Tuple[Position, Tile, BoardState]]:
    """One successor per tile (cost of step = 1 click), in row-major tile order."""
    return [(pos, tile, push(state, pos, tile.direction, puzzle)) for pos, tile in state.items()]


def replay(puzzle: Puzzle, clicks: Sequence[Position]) -> List[BoardState]:
    """Applies clicks to the initial state; returns [s0, s1, ..., sT]."""
    path = [puzzle.initial]
    for pos in clicks:
        path.append(click(path[-1], pos, puzzle))
    return path

from __future__ import annotations
from typing import Optional

from .geometry import Position
from .puzzle import Puzzle
from .state import BoardState


def render_ascii(state: BoardState, puzzle: Optional[Puzzle] = None) -> str:
    """ASCII visualization of the state, two characters per cell.

    'R>' red tile facing right, 'r.' empty red target, ' v' empty arrow cell,
    '. ' empty cell. A tile standing on a target or arrow hides it.
    """
    cells = list(state.positions())
    if puzzle is not None:
        cells += list(puzzle.arrows) + list(puzzle.targets)
    if not cells:
        return ""
    top = min(p.r for p in cells)
    bottom = max(p.r for p in cells)
    left = min(p.c for p in cells)
    right = max(p.c for p in cells)

    out_lines = []
    for r in range(top, bottom + 1):
        row_chars = []
        for c in range(left, right + 1):
            pos = Position(r, c)
            tile = state.tile_at(pos)
            if tile is not None:
                row_chars.append(tile.color.code + tile.direction.glyph)
                continue
            if puzzle is not None and pos in puzzle.targets:
                row_chars.append(puzzle.targets[pos].code.lower() + ".")
            elif puzzle is not None and pos in puzzle.arrows:
                row_chars.append(" " + puzzle.arrows[pos].glyph)
            else:
                row_chars.append(". ")
        out_lines.append("".join(row_chars).rstrip())
    return "\n".join(out_lines)

# --- file: squares_core/levels/resolve.py
from __future__ import annotations
from typing import Tuple

from ..parser import parse_puzzle_dict
from ..puzzle import Puzzle
from .io import DEFAULT_PACK, load_pack


def parse_level_id(level_id: str) -> Tuple[str, str]:
    """Parses "path/to/pack.yaml#level19" (or "#3") into (path, selector).

    A bare "level19" refers to the bundled classic pack; a bare path selects its first level.
    """
    if "#" not in level_id:
        if level_id.endswith((".yaml", ".yml")):
            return level_id, "0"
        return DEFAULT_PACK, level_id
    path, sel = level_id.rsplit("#", 1)
    return path or DEFAULT_PACK, sel


def load_level_by_id(level_id: str) -> Puzzle:
    """Loads a SPECIFIC level of a pack, by name or by index."""
    path, sel = parse_level_id(level_id)
    entries = load_pack(path)
    if not entries:
        raise ValueError(f"No levels found in {path}")
    for entry in entries:
        if isinstance(entry, dict) and str(entry.get("name", "")) == sel:
            return parse_puzzle_dict(entry)
    try:
        wanted = int(sel)
    except ValueError:
        raise KeyError(f"No level named {sel!r} in {path}") from None
    if wanted < 0 or wanted >= len(entries):
        raise IndexError(f"Index {wanted} out of range for {path} (total {len(entries)})")
    return parse_puzzle_dict(entries[wanted])

from __future__ import annotations
from typing import Any, Dict, List, Mapping, Tuple

import yaml

from .geometry import Direction, Position
from .puzzle import Puzzle
from .state import BoardState
from .tiles import Color, Tile

KEY_ARROWS = "arrows"
KEY_TARGETS = "targets"
KEY_TILES = "tiles"


def _position(entry: Mapping[str, Any]) -> Position:
    at = entry.get("at")
    if not isinstance(at, (list, tuple)) or len(at) != 2 or not all(isinstance(v, int) for v in at):
        raise ValueError(f"expected 'at: [row, col]' with integers, got {at!r}")
    return Position(at[0], at[1])


def _entries(data: Mapping[str, Any], key: str) -> List[Mapping[str, Any]]:
    """Entries of a level section; a missing or empty section gives []."""
    section = data.get(key) or []
    if not isinstance(section, list):
        raise ValueError(f"'{key}' must be a list, got {type(section).__name__}")
    for entry in section:
        if not isinstance(entry, Mapping):
            raise ValueError(f"'{key}' entries must be mappings, got {entry!r}")
    return section


def _enum(enum_cls, value: Any, what: str):
    try:
        return enum_cls(str(value).lower())
    except ValueError:
        names = ", ".join(m.value for m in enum_cls)
        raise ValueError(f"unknown {what} {value!r} (expected one of: {names})") from None


def parse_puzzle_dict(data: Mapping[str, Any]) -> Puzzle:
    """Builds a Puzzle from a level description.

    Expected keys:
      'tiles':   list of {at: [r, c], color: <color>, facing: <direction>}
      'targets': list of {at: [r, c], color: <color>}       (optional)
      'arrows':  list of {at: [r, c], dir: <direction>}     (optional)
      'name':    level name                                 (optional)
    Colors and directions are case-insensitive.
    """
    if not isinstance(data, Mapping):
        raise ValueError("level must be a mapping")
    if KEY_TILES not in data:
        raise ValueError("level has no 'tiles'")

    arrows: Dict[Position, Direction] = {}
    for entry in _entries(data, KEY_ARROWS):
        pos = _position(entry)
        if pos in arrows:
            raise ValueError(f"two arrows at {pos}")
        arrows[pos] = _enum(Direction, entry.get("dir"), "direction")

    targets: Dict[Position, Color] = {}
    for entry in _entries(data, KEY_TARGETS):
        pos = _position(entry)
        if pos in targets:
            raise ValueError(f"two targets at {pos}")
        targets[pos] = _enum(Color, entry.get("color"), "color")

    tiles: List[Tuple[Position, Tile]] = []
    for entry in _entries(data, KEY_TILES):
        color = _enum(Color, entry.get("color"), "color")
        facing = _enum(Direction, entry.get("facing"), "direction")
        tiles.append((_position(entry), Tile(color, facing)))

    return Puzzle(arrows=arrows, targets=targets, initial=BoardState.from_tiles(tiles),
                  name=str(data.get("name", "")))


def parse_level_str(level_str: str) -> Puzzle:
    """Parses a single YAML level document into a Puzzle."""
    data = yaml.safe_load(level_str)
    if data is None:
        raise ValueError("Empty level")
    return parse_puzzle_dict(data)


def parse_level_file(path: str) -> Puzzle:
    with open(path, "r", encoding="utf-8") as f:
        return parse_level_str(f.read())

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Tuple
import os

import yaml

from squares_core.parser import parse_puzzle_dict

PACKS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "packs")
DEFAULT_PACK = os.path.join(PACKS_DIR, "classic.yaml")


@dataclass
class LevelRef:
    path: str
    index: int  # position of the level inside the pack
    name: str

    @property
    def level_id(self) -> str:
        return f"{self.path}#{self.name or self.index}"


def load_pack(path: str) -> List[Dict[str, Any]]:
    """Reads a YAML level pack and returns its raw level entries."""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return []
    if not isinstance(data, dict) or not isinstance(data.get("levels"), list):
        raise ValueError(f"{path}: expected a mapping with a 'levels' list")
    return data["levels"]


def iterate_pack(path: str) -> Iterator[Tuple[LevelRef, Dict[str, Any]]]:
    for i, entry in enumerate(load_pack(path)):
        name = str(entry.get("name", "")) if isinstance(entry, dict) else ""
        yield LevelRef(path=path, index=i, name=name), entry


def iterate_level_entries(root_dir: str, rel_dirs: List[str]) -> Iterator[Tuple[LevelRef, Dict[str, Any]]]:
    """Iterate over all .yaml packs in the given subfolders and return (level reference, raw entry)."""
    for rel in rel_dirs:
        abs_dir = os.path.join(root_dir, rel)
        if not os.path.isdir(abs_dir):
            continue
        for fname in sorted(os.listdir(abs_dir)):
            if not fname.endswith((".yaml", ".yml")):
                continue
            yield from iterate_pack(os.path.join(abs_dir, fname))


def count_tiles(entry: Dict[str, Any]) -> int:
    tiles = entry.get("tiles")
    return len(tiles) if isinstance(tiles, list) else 0


def filter_level(entry: Dict[str, Any], *, min_t: Optional[int], max_t: Optional[int]) -> bool:
    if not isinstance(entry, dict):
        return False
    t = count_tiles(entry)
    if min_t is not None and t < min_t: return False
    if max_t is not None and t > max_t: return False
    # check if it parses
    try:
        _ = parse_puzzle_dict(entry)
    except ValueError:
        return False
    return True

from __future__ import annotations
from typing import Any, Dict, List, Tuple
import os

import yaml

DEFAULT_CONFIG = "configs/search.yaml"

DEFAULTS: Dict[str, Any] = {
    "prune": "box+facing",
    "node_limit": None,
    "time_limit": None,
    "trace_every": 1024,
}

DEFAULT_LEVELS_ROOT = "squares_core/levels"
DEFAULT_LEVEL_SOURCES = ["packs"]


def load_config(path: str = DEFAULT_CONFIG) -> Dict[str, Any]:
    """Reads the YAML config; a missing file gives an empty config."""
    if not os.path.exists(path):
        return {}
    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    return cfg or {}


def search_settings(cfg: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(DEFAULTS)
    out.update({k: v for k, v in (cfg.get("search") or {}).items() if k in DEFAULTS})
    if not isinstance(out["trace_every"], int) or out["trace_every"] < 1:
        raise ValueError(f"trace_every must be a positive integer, got {out['trace_every']!r}")
    return out


def level_sources(cfg: Dict[str, Any]) -> Tuple[str, List[str]]:
    """(root_dir, sources) of the level packs, defaulting to the bundled packs."""
    levels = cfg.get("levels") or {}
    return levels.get("root_dir", DEFAULT_LEVELS_ROOT), levels.get("sources", DEFAULT_LEVEL_SOURCES)

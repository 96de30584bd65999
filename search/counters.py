from __future__ import annotations
from dataclasses import asdict, dataclass
from typing import Dict


@dataclass
class SearchCounters:
    """Per-search statistics, owned by the caller and passed into the driver."""

    expanded: int = 0    # states taken off the frontier
    generated: int = 0   # successor states computed
    duplicates: int = 0  # successors already in the visited index
    pruned: int = 0      # new successors rejected by the pruning pass
    lookups: int = 0     # visited-index membership tests (one hash each)

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)

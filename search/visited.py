from __future__ import annotations
from typing import Optional, Set

from squares_core.state import BoardState
from .counters import SearchCounters


class VisitedIndex:
    """Board states already seen, keyed by structural equality."""
    def __init__(self, counters: Optional[SearchCounters] = None) -> None:
        self.counters = counters if counters is not None else SearchCounters()
        self.seen: Set[BoardState] = set()

    def add_if_new(self, s: BoardState) -> bool:
        """Marks s visited; False if it already was."""
        self.counters.lookups += 1
        if s in self.seen:
            self.counters.duplicates += 1
            return False
        self.seen.add(s)
        return True

    def __contains__(self, s: BoardState) -> bool:
        return s in self.seen

    def __len__(self) -> int:
        return len(self.seen)

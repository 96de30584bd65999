from __future__ import annotations
from collections import deque
from typing import Callable, Deque, Dict, List, Optional, Tuple
import time

from squares_core.geometry import Position
from squares_core.goal_check import is_solved
from squares_core.moves import replay, successors_clicks
from squares_core.puzzle import Puzzle
from squares_core.state import BoardState
from squares_core.tiles import Color
from heuristics.pruning import KeepFn, with_facing
from .counters import SearchCounters
from .visited import VisitedIndex

Result = Dict[str, object]
Step = Tuple[Color, Position]  # clicked tile's color and where it stood
History = Tuple[Step, ...]
TraceFn = Callable[[BoardState, int, int], None]

TRACE_HEAD = 20


def bfs(
    puzzle: Puzzle,
    keep_fn: KeepFn = with_facing,
    counters: Optional[SearchCounters] = None,
    time_limit_s: Optional[float] = None,
    node_limit: Optional[int] = None,
    trace: Optional[TraceFn] = None,
    trace_every: int = 1024,
) -> Result:
    """Breadth-first search over clicks; the first solution found is a shortest one.

    keep_fn decides whether a newly visited state is worth expanding; pruned
    states stay in the visited index. trace(state, depth, visited) is called
    for the first TRACE_HEAD generated states and then every trace_every.
    """
    if trace_every < 1:
        raise ValueError(f"trace_every must be >= 1, got {trace_every}")
    t0 = time.time()
    counters = counters if counters is not None else SearchCounters()
    visited = VisitedIndex(counters)
    start = puzzle.initial

    if is_solved(start, puzzle):
        return _solved(puzzle, (), counters, visited, t0)

    visited.add_if_new(start)
    frontier: Deque[Tuple[BoardState, History]] = deque([(start, ())])

    while frontier:
        if time_limit_s is not None and (time.time() - t0) > time_limit_s:
            break
        if node_limit is not None and counters.expanded >= node_limit:
            break
        state, history = frontier.popleft()
        counters.expanded += 1

        for pos, tile, ns in successors_clicks(state, puzzle):
            counters.generated += 1
            nh = history + ((tile.color, pos),)
            if is_solved(ns, puzzle):
                return _solved(puzzle, nh, counters, visited, t0)
            if visited.add_if_new(ns):
                if keep_fn(ns, puzzle):
                    frontier.append((ns, nh))
                else:
                    counters.pruned += 1
            if trace is not None and (counters.generated <= TRACE_HEAD or counters.generated % trace_every == 0):
                trace(ns, len(nh), len(visited))

    return {
        "success": False,
        "nodes": counters.expanded,
        "visited": len(visited),
        "runtime": time.time() - t0,
        "counters": counters.as_dict(),
    }


def _solved(puzzle: Puzzle, history: History, counters: SearchCounters,
            visited: VisitedIndex, t0: float) -> Result:
    clicks = [pos for _, pos in history]
    path = replay(puzzle, clicks)
    return {
        "success": True,
        "nodes": counters.expanded,
        "visited": len(visited),
        "runtime": time.time() - t0,
        "counters": counters.as_dict(),
        "solution_len": len(history),
        "moves": [color for color, _ in history],
        "clicks": clicks,
        "path": path,
    }


def solve(puzzle: Puzzle, keep_fn: KeepFn = with_facing, **kwargs) -> List[Color]:
    """Colors of the tiles to click, in order; [] if no solution was found (or none is needed)."""
    res = bfs(puzzle, keep_fn, **kwargs)
    return list(res.get("moves", []))  # type: ignore

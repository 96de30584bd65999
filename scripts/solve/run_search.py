from __future__ import annotations
import argparse

from tqdm import tqdm

from squares_core.levels.resolve import load_level_by_id
from squares_core.render import render_ascii
from search.bfs import bfs
from search.counters import SearchCounters
from heuristics.selector import PRUNERS, get_pruner
from scripts.config import DEFAULT_CONFIG, load_config, search_settings


def main():
    p = argparse.ArgumentParser()
    p.add_argument(
        "level_id",
        nargs="?",
        default=None,
        help="Level id like 'path/to/pack.yaml#level19' or just 'level19'.",
    )
    p.add_argument("--config", type=str, default=DEFAULT_CONFIG)
    p.add_argument("--prune", type=str, default=None, choices=PRUNERS, help="pruning pass")
    p.add_argument("--node_limit", type=int, default=None)
    p.add_argument("--time_limit", type=float, default=None)
    p.add_argument("--trace", action="store_true", help="print states while searching")
    args = p.parse_args()

    if args.level_id is None:
        raise ValueError("Level id is required")
    puzzle = load_level_by_id(args.level_id)

    cfg = search_settings(load_config(args.config))
    for key in ("prune", "node_limit", "time_limit"):
        if getattr(args, key) is not None:
            cfg[key] = getattr(args, key)

    def trace(state, depth, n_visited):
        tqdm.write(f"{state}, {depth} moves, {n_visited} states")

    counters = SearchCounters()
    res = bfs(puzzle, get_pruner(cfg["prune"]), counters=counters,
              time_limit_s=cfg["time_limit"], node_limit=cfg["node_limit"],
              trace=trace if args.trace else None, trace_every=cfg["trace_every"])
    print("Result:", {k: v for k, v in res.items() if k not in ("path", "clicks", "moves")})
    if res.get("success"):
        print("Moves:", [str(c) for c in res["moves"]])  # type: ignore
        path = res["path"]  # type: ignore
        for i, st in enumerate(path):
            print(f"\n-- step {i} --\n{render_ascii(st, puzzle)}")

if __name__ == "__main__":
    main()

from __future__ import annotations
import argparse, csv, os, time
from typing import Dict
from multiprocessing import Pool, cpu_count
from tqdm import tqdm

from squares_core.levels.io import iterate_pack
from squares_core.parser import parse_puzzle_dict
from search.bfs import bfs
from heuristics.selector import PRUNERS, get_pruner
from scripts.config import DEFAULT_CONFIG, load_config, search_settings

FIELDS = ["level_id", "prune", "success", "nodes", "visited", "runtime", "solution_len", "moves"]


def _run_one(args_tuple) -> Dict[str, object]:
    level_id, entry, prune, time_limit, node_limit = args_tuple
    try:
        puzzle = parse_puzzle_dict(entry)
        res = bfs(puzzle, get_pruner(prune), time_limit_s=time_limit, node_limit=node_limit)
        return {
            "level_id": level_id,
            "prune": prune,
            "success": bool(res.get("success", False)),
            "nodes": int(res.get("nodes", 0)),
            "visited": int(res.get("visited", 0)),
            "runtime": float(res.get("runtime", 0.0)),
            "solution_len": int(res.get("solution_len", -1)),
            "moves": " ".join(str(c) for c in res.get("moves", [])),  # type: ignore
        }
    except ValueError as e:
        print(f"[skip] {level_id}: {e}")
        return {"level_id": level_id, "prune": prune, "success": False, "nodes": 0, "visited": 0,
                "runtime": 0.0, "solution_len": -1, "moves": ""}


def main():
    p = argparse.ArgumentParser(description="Batch BFS runs over a level pack → CSV (flags, parallel)")
    p.add_argument("--config", default=DEFAULT_CONFIG)
    p.add_argument("--pack", default=None, help="YAML level pack (default: levels.pack from config)")
    p.add_argument("--prune", default=None, choices=PRUNERS)
    p.add_argument("--out", default="results/batch.csv")
    p.add_argument("--time_limit", type=float, default=None)
    p.add_argument("--node_limit", type=int, default=None)
    p.add_argument("--jobs", type=int, default=0, help="processes (0→cpu_count)")
    args = p.parse_args()

    raw = load_config(args.config)
    cfg = search_settings(raw)
    pack = args.pack or (raw.get("levels") or {}).get("pack")
    if pack is None:
        raise ValueError("No level pack given (--pack or levels.pack in config)")
    prune = args.prune or cfg["prune"]
    time_limit = args.time_limit if args.time_limit is not None else cfg["time_limit"]
    node_limit = args.node_limit if args.node_limit is not None else cfg["node_limit"]

    os.makedirs(os.path.dirname(args.out) or ".", exist_ok=True)

    payload = [(ref.level_id, entry, prune, time_limit, node_limit) for ref, entry in iterate_pack(pack)]
    jobs = args.jobs or cpu_count()

    started = time.time()
    if jobs == 1:
        rows = [_run_one(t) for t in tqdm(payload, desc="Running BFS", unit="level")]
    else:
        with Pool(processes=jobs) as pool:
            rows = list(tqdm(pool.imap_unordered(_run_one, payload), total=len(payload), desc="Running BFS", unit="level"))

    with open(args.out, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()
        for r in rows:
            w.writerow(r)

    print(f"done: {len(rows)} levels → {args.out}; total_time={time.time()-started:.2f}s; jobs={jobs}")


if __name__ == "__main__":
    main()

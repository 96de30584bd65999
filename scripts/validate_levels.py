from __future__ import annotations
import argparse
from squares_core.levels.io import iterate_level_entries, filter_level
from scripts.config import DEFAULT_CONFIG, level_sources, load_config


def main():
    p = argparse.ArgumentParser()
    p.add_argument("--config", type=str, default=DEFAULT_CONFIG)
    args = p.parse_args()

    cfg = load_config(args.config)

    root, rels = level_sources(cfg)
    flt  = cfg.get("filters") or {}

    ok = 0
    bad = 0
    for ref, entry in iterate_level_entries(root, rels):
        if filter_level(entry,
                        min_t=flt.get("min_tiles"),
                        max_t=flt.get("max_tiles")):
            ok += 1
        else:
            bad += 1
            print(f"[skip] {ref.level_id}")
    print(f"valid: {ok}, skipped: {bad}")

if __name__ == "__main__":
    main()

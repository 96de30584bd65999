from __future__ import annotations

from heuristics.pruning import KeepFn, faces_bounding_box, in_extended_box, keep_all, with_facing

PRUNERS = ("none", "box", "facing", "box+facing")


def get_pruner(name: str) -> KeepFn:
    name = name.lower()
    if name == "none":
        return keep_all
    if name == "box":
        return in_extended_box
    if name == "facing":
        return faces_bounding_box
    if name == "box+facing":
        return with_facing
    raise ValueError(f"unknown pruner: {name}")

import pytest

from squares_core.geometry import Direction, Position
from squares_core.parser import parse_level_file, parse_level_str, parse_puzzle_dict
from squares_core.tiles import Color, Tile

LVL = """
name: turn
arrows:
  - {at: [2, 2], dir: left}
targets:
  - {at: [2, 0], color: Red}
tiles:
  - {at: [1, 2], color: red, facing: DOWN}
"""


def test_parse_basic():
    p = parse_level_str(LVL)
    assert p.name == "turn"
    assert p.arrows == {Position(2, 2): Direction.LEFT}
    assert p.targets == {Position(2, 0): Color.RED}
    assert p.initial.tile_at(Position(1, 2)) == Tile(Color.RED, Direction.DOWN)


def test_parse_file(tmp_path):
    f = tmp_path / "lvl.yaml"
    f.write_text(LVL, encoding="utf-8")
    assert parse_level_file(str(f)).name == "turn"


@pytest.mark.parametrize("bad", [
    "",
    "- just a list",
    "targets: []",
    "tiles: [{at: [0, 0], color: pink, facing: up}]",
    "tiles: [{at: [0, 0], color: red, facing: north}]",
    "tiles: [{at: [0], color: red, facing: up}]",
    "tiles: [{at: [0, 'x'], color: red, facing: up}]",
    "tiles: [{at: [0, 0], color: red, facing: up}, {at: [0, 0], color: blue, facing: up}]",
    "arrows: [{at: [1, 1], dir: up}, {at: [1, 1], dir: down}]\ntiles: []",
    "tiles: [5]",
    "tiles: {a: 1}",
    "tiles: []\ntargets: [[1, 2]]",
    "tiles: []\narrows: 7",
])
def test_parse_errors(bad):
    with pytest.raises(ValueError):
        parse_level_str(bad)


def test_optional_sections():
    p = parse_puzzle_dict({"tiles": []})
    assert p.arrows == {} and p.targets == {} and len(p.initial) == 0
    assert not p.has_bounds

from squares_core.geometry import Direction, Position, Rectangle
from squares_core.levels.resolve import load_level_by_id
from squares_core.puzzle import Puzzle
from squares_core.state import BoardState
from squares_core.tiles import Color, Tile


def test_bounding_box_covers_targets():
    p = load_level_by_id("level2")
    assert p.has_bounds
    assert p.bounding_box == Rectangle(Position(1, 2), Position(2, 3))
    # padded by the number of tiles
    assert p.padding == 3
    assert p.extended_bounding_box == Rectangle(Position(-2, -1), Position(5, 6))


def test_bounding_box_covers_arrows_and_targets():
    p = load_level_by_id("level19")
    assert p.bounding_box == Rectangle(Position(1, 1), Position(7, 4))


def test_padding_override():
    p = Puzzle(arrows={}, targets={Position(0, 0): Color.RED},
               initial=BoardState.from_tiles([(Position(0, 1), Tile(Color.RED, Direction.LEFT))]),
               padding=0)
    assert p.extended_bounding_box == p.bounding_box


def test_empty_puzzle_has_no_bounds():
    p = Puzzle(arrows={}, targets={},
               initial=BoardState.from_tiles([(Position(0, 0), Tile(Color.RED, Direction.UP))]))
    assert not p.has_bounds
    assert p.bounding_box.is_empty
    assert p.extended_bounding_box.is_empty


def test_puzzle_copies_mappings():
    arrows = {Position(1, 1): Direction.LEFT}
    p = Puzzle(arrows=arrows, targets={}, initial=BoardState.from_tiles([]))
    arrows[Position(2, 2)] = Direction.UP
    assert p.arrow_at(Position(2, 2)) is None
    assert p.arrow_at(Position(1, 1)) is Direction.LEFT


def test_puzzle_is_hashable():
    a = load_level_by_id("level2")
    b = load_level_by_id("level2")
    assert a == b
    assert hash(a) == hash(b)
    assert {a: 1}[b] == 1

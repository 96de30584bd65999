import pytest

from squares_core.geometry import Direction, Position
from squares_core.goal_check import is_solved
from squares_core.levels.resolve import load_level_by_id
from squares_core.moves import replay
from squares_core.puzzle import Puzzle
from squares_core.state import BoardState
from squares_core.tiles import Color, Tile
from heuristics.pruning import keep_all
from heuristics.selector import PRUNERS, get_pruner
from search.bfs import bfs, solve
from search.counters import SearchCounters

# red and blue never meet; no green tile exists, so the target can't be met
APART = Puzzle(
    arrows={},
    targets={Position(1, 1): Color.GREEN},
    initial=BoardState.from_tiles([
        (Position(0, 0), Tile(Color.RED, Direction.RIGHT)),
        (Position(3, 3), Tile(Color.BLUE, Direction.DOWN)),
    ]),
)

# two tiles sliding along one row towards a target nobody can fill
ROW = Puzzle(
    arrows={},
    targets={Position(0, 1): Color.GREEN},
    initial=BoardState.from_tiles([
        (Position(0, 0), Tile(Color.RED, Direction.RIGHT)),
        (Position(0, 2), Tile(Color.BLUE, Direction.LEFT)),
    ]),
)


def _assert_valid(puzzle, res):
    path = replay(puzzle, res["clicks"])
    assert is_solved(path[-1], puzzle)
    assert path == res["path"]
    for st, pos, color in zip(path, res["clicks"], res["moves"]):
        assert st.tile_at(pos).color is color


def test_level0_two_clicks():
    puzzle = load_level_by_id("level0")
    assert solve(puzzle) == [Color.RED, Color.RED]


@pytest.mark.parametrize("name, shortest", [("level0", 2), ("level2", 6)])
@pytest.mark.parametrize("prune", PRUNERS)
def test_pruning_keeps_shortest_solution(name, shortest, prune):
    puzzle = load_level_by_id(name)
    res = bfs(puzzle, get_pruner(prune))
    assert res["success"] is True
    assert res["solution_len"] == shortest
    _assert_valid(puzzle, res)


def test_facing_keeps_shortest_with_arrows():
    puzzle = load_level_by_id("level19")
    baseline = bfs(puzzle, get_pruner("box"))
    res = bfs(puzzle, get_pruner("box+facing"))
    assert baseline["success"] is True and res["success"] is True
    assert res["solution_len"] == baseline["solution_len"]
    _assert_valid(puzzle, res)


def test_level19_solved():
    puzzle = load_level_by_id("level19")
    res = bfs(puzzle)
    assert res["success"] is True
    assert res["solution_len"] == len(res["moves"]) > 0
    _assert_valid(puzzle, res)


def test_already_solved_needs_no_clicks():
    puzzle = Puzzle(arrows={}, targets={Position(0, 0): Color.RED},
                    initial=BoardState.from_tiles([(Position(0, 0), Tile(Color.RED, Direction.UP))]))
    res = bfs(puzzle)
    assert res["success"] is True
    assert res["solution_len"] == 0 and res["moves"] == []
    assert res["nodes"] == 0


def test_no_targets_is_trivially_solved():
    puzzle = Puzzle(arrows={}, targets={},
                    initial=BoardState.from_tiles([(Position(0, 0), Tile(Color.RED, Direction.UP))]))
    assert bfs(puzzle)["success"] is True


def test_unsolvable_terminates():
    res = bfs(ROW)
    assert res["success"] is False
    assert "moves" not in res
    box = ROW.extended_bounding_box
    cells = (box.hi.r - box.lo.r + 3) * (box.hi.c - box.lo.c + 3)
    # the one ring around the box holds states that were visited but pruned
    assert 0 < res["visited"] <= cells ** len(ROW.initial)
    assert res["nodes"] <= res["visited"]
    assert solve(ROW) == []


def test_each_state_expanded_once():
    c = SearchCounters()
    res = bfs(APART, keep_all, counters=c, node_limit=3)
    assert res["success"] is False
    assert c.expanded == res["nodes"] == 3
    assert c.generated == 6
    # red-then-blue and blue-then-red meet in the same board
    assert c.duplicates == 1
    assert res["visited"] == 6


def test_counters_account_for_pruning():
    c = SearchCounters()
    bfs(ROW, counters=c)
    assert c.pruned > 0
    assert c.lookups == c.generated + 1


def test_node_limit_zero():
    res = bfs(load_level_by_id("level2"), node_limit=0)
    assert res["success"] is False and res["nodes"] == 0


def test_trace_called():
    seen = []
    bfs(load_level_by_id("level2"), trace=lambda s, depth, n: seen.append((depth, n)), trace_every=1)
    assert seen
    assert all(depth >= 1 for depth, _ in seen)
    assert [depth for depth, _ in seen] == sorted(depth for depth, _ in seen)


def test_trace_every_must_be_positive():
    with pytest.raises(ValueError):
        bfs(load_level_by_id("level0"), trace_every=0)

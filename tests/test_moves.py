import pytest
from sokoban_engine.parser import parse_rows, parse_level_str
from sokoban_engine.moves import apply_direction, apply_directions
from sokoban_engine.goal_check import is_complete
from sokoban_engine.state import Direction, Position

D = Direction
REAL_DIRECTIONS = [D.UP, D.DOWN, D.LEFT, D.RIGHT]

LVL = """
#######
#     #
# .$  #
#  @$.#
#     #
#######
"""


def test_push_onto_target_completes():
    s = parse_rows(["#####", "#@$.#", "#####"])
    assert s.player == Position(1, 1)
    assert s.crates == frozenset({Position(2, 1)})
    assert s.targets == frozenset({Position(3, 1)})

    ns = apply_direction(s, D.RIGHT)
    assert ns.player == Position(2, 1)
    assert ns.crates == frozenset({Position(3, 1)})
    assert is_complete(ns)


def test_push_into_wall_is_blocked():
    s = parse_rows(["####", "#@$#", "####"])
    ns = apply_direction(s, D.RIGHT)
    assert ns is s
    assert ns.player == Position(1, 1)
    assert ns.crates == frozenset({Position(2, 1)})


def test_push_into_crate_is_blocked():
    s = parse_rows(["#####", "#@$$#", "#####"])
    assert s.crates == frozenset({Position(2, 1), Position(3, 1)})
    ns = apply_direction(s, D.RIGHT)
    assert ns is s


def test_walk_into_wall_is_blocked():
    s = parse_rows(["###", "#@#", "###"])
    for d in REAL_DIRECTIONS:
        assert apply_direction(s, d) is s


def test_ignore_is_identity():
    s = parse_level_str(LVL)
    assert apply_direction(s, D.IGNORE) is s


def test_walk_onto_empty_target():
    s = parse_rows(["#####", "#@. #", "#  $#", "#####"])
    ns = apply_direction(s, D.RIGHT)
    assert ns.player == Position(2, 1)
    assert ns.crates == s.crates


def test_walls_and_targets_never_change():
    s = parse_level_str(LVL)
    ns = apply_directions(s, [D.RIGHT, D.UP, D.LEFT, D.LEFT, D.DOWN])
    assert ns.walls is s.walls
    assert ns.targets is s.targets
    assert ns.level_index == s.level_index


def test_original_state_untouched():
    s = parse_level_str(LVL)
    ns = apply_direction(s, D.RIGHT)
    assert s.player == Position(3, 3)
    assert Position(4, 3) in s.crates
    assert Position(5, 3) in ns.crates


def test_solve_small_level():
    s = parse_level_str(LVL)
    ns = apply_direction(s, D.RIGHT)
    assert ns.crates == frozenset({Position(5, 3), Position(3, 2)})
    assert not is_complete(ns)
    ns = apply_directions(ns, [D.UP, D.LEFT])
    assert ns.player == Position(3, 2)
    assert ns.crates == frozenset({Position(5, 3), Position(2, 2)})
    assert is_complete(ns)


def test_crate_can_be_pushed_off_target():
    s = parse_rows(["######", "#@*  #", "######"])
    assert is_complete(s)
    ns = apply_direction(s, D.RIGHT)
    assert ns.crates == frozenset({Position(3, 1)})
    assert not is_complete(ns)


def test_no_pulling():
    s = parse_rows(["######", "# @$.#", "######"])
    ns = apply_direction(s, D.LEFT)
    assert ns.player == Position(1, 1)
    assert ns.crates == s.crates


@pytest.mark.parametrize("seq", [
    [D.RIGHT] * 6,
    [D.UP, D.UP, D.LEFT, D.LEFT, D.DOWN, D.DOWN, D.RIGHT, D.RIGHT, D.RIGHT],
    [D.LEFT, D.UP, D.RIGHT, D.RIGHT, D.RIGHT, D.DOWN, D.DOWN, D.LEFT, D.UP, D.UP, D.LEFT],
    [D.DOWN, D.RIGHT, D.UP, D.UP, D.UP, D.LEFT, D.LEFT, D.DOWN, D.DOWN, D.IGNORE],
])
def test_invariants_hold_along_any_sequence(seq):
    s = parse_level_str(LVL)
    crate_count = len(s.crates)
    for d in seq:
        ns = apply_direction(s, d)
        assert len(ns.crates) == crate_count
        assert ns.player not in ns.walls
        assert ns.player not in ns.crates
        assert not (ns.crates & ns.walls)
        # at most one crate moved
        assert len(ns.crates - s.crates) <= 1
        assert len(s.crates - ns.crates) <= 1
        # the player moves at most one cell
        assert abs(ns.player.col - s.player.col) + abs(ns.player.row - s.player.row) <= 1
        s = ns

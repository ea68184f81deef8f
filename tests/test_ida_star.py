import pytest

from manuscript.domains.puzzle8 import DEFAULT_GOAL, DOWN, RIGHT, scramble, unsolvable_variant
from manuscript.search.a_star import a_star
from manuscript.search.ida_star import ida_star

SCENARIO = (1, 2, 3, 0, 4, 6, 7, 5, 8)


@pytest.mark.parametrize("heuristic", ["h1", "h2"])
def test_scenario_needs_one_threshold(heuristic):
    # f stays at 3 along the optimal path for both heuristics
    res = ida_star(SCENARIO, DEFAULT_GOAL, heuristic=heuristic)
    assert res.solved
    assert res.actions == [RIGHT, DOWN, RIGHT]
    assert res.stats["iterations"] == 1
    assert res.stats["bound_final"] == 3


@pytest.mark.parametrize("heuristic", ["h1", "h2"])
@pytest.mark.parametrize("depth", [8, 14, 20])
def test_ida_star_matches_a_star_length(heuristic, depth, goal_distances):
    start = scramble(depth, 300 + depth)
    res = ida_star(start, DEFAULT_GOAL, heuristic=heuristic)
    assert res.solved
    assert res.moves == a_star(start, DEFAULT_GOAL, heuristic=heuristic).moves
    assert res.moves == goal_distances[start]
    assert res.explored >= res.stats["iterations"]
    assert res.stats["peak_recursion"] >= res.moves


def test_ida_star_start_is_goal():
    res = ida_star(DEFAULT_GOAL, DEFAULT_GOAL)
    assert res.solved
    assert res.explored == 1
    assert res.moves == 0
    assert res.stats["iterations"] == 1


def test_threshold_cap_stops_unsolvable_run():
    res = ida_star(unsolvable_variant(SCENARIO), DEFAULT_GOAL, max_threshold=8)
    assert not res.solved
    assert res.termination == "threshold_cap"
    assert res.path is None
    assert res.stats["bound_final"] <= 8


def test_threshold_cap_does_not_hurt_solvable_run():
    res = ida_star(SCENARIO, DEFAULT_GOAL, max_threshold=3)
    assert res.solved


def test_no_rejected_children_means_exhausted():
    res = ida_star(SCENARIO, DEFAULT_GOAL, neighbors_fn=lambda s: [])
    assert not res.solved
    assert res.termination == "exhausted"
    assert res.explored == 1
    assert res.stats["iterations"] == 1


def test_backtracked_state_is_reopened_on_another_branch():
    start = (8, 6, 7, 2, 5, 4, 3, 0, 1)
    a = (1, 2, 3, 4, 5, 6, 7, 0, 8)
    b = (1, 2, 3, 4, 5, 0, 7, 8, 6)
    shared = (1, 2, 3, 4, 0, 6, 7, 5, 8)
    graph = {start: [a, b], a: [shared], b: [shared]}
    expanded = []

    def spy(s):
        expanded.append(s)
        return graph.get(s, [])

    res = ida_star(start, DEFAULT_GOAL, neighbors_fn=spy)
    assert res.termination == "exhausted"
    assert expanded == [start, a, shared, b, shared]
    assert res.explored == 5
    assert res.stats["peak_recursion"] == 2

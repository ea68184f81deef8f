import pytest

from manuscript.domains.puzzle8 import DEFAULT_GOAL, DOWN, RIGHT, action, scramble
from manuscript.search.bfs import bfs
from manuscript.search.dfs import DEFAULT_DEPTH_LIMIT, dfs

SCENARIO = (1, 2, 3, 0, 4, 6, 7, 5, 8)


def assert_valid_path(res):
    assert res.path[0] == res.start
    assert res.path[-1] == res.goal
    for a, b in zip(res.path, res.path[1:]):
        assert action(a, b) is not None


def test_bfs_solves_scenario_optimally():
    res = bfs(SCENARIO, DEFAULT_GOAL)
    assert res.solved
    assert res.termination == "ok"
    assert res.moves == 3
    assert res.actions == [RIGHT, DOWN, RIGHT]
    assert res.heuristic is None
    assert_valid_path(res)


@pytest.mark.parametrize("depth", [4, 8, 12, 16, 20])
def test_bfs_length_matches_true_distance(depth, goal_distances):
    for seed in range(3):
        start = scramble(depth, seed)
        res = bfs(start, DEFAULT_GOAL)
        assert res.solved
        assert res.moves == goal_distances[start]
        assert_valid_path(res)


def test_bfs_start_is_goal():
    res = bfs(DEFAULT_GOAL, DEFAULT_GOAL)
    assert res.solved
    assert res.explored == 1
    assert res.moves == 0
    assert res.actions == []


def test_bfs_stats():
    res = bfs(scramble(10, 1), DEFAULT_GOAL)
    assert res.stats["generated"] >= res.explored - 1
    assert res.stats["peak_frontier"] >= 1


def test_dfs_bound_below_solution_depth_is_cutoff():
    res = dfs(SCENARIO, DEFAULT_GOAL, max_depth=2)
    assert not res.solved
    assert res.termination == "cutoff"
    assert res.path is None
    assert res.moves is None
    assert res.stats["bound_final"] == 2


def test_dfs_bound_equal_to_solution_depth_finds_it():
    res = dfs(SCENARIO, DEFAULT_GOAL, max_depth=3)
    assert res.solved
    assert res.moves == 3
    assert_valid_path(res)


def test_dfs_explored_set_can_hide_a_goal_inside_the_bound():
    # 4 moves from the goal; the states on the short route are first popped deep and never reopened
    res = dfs((1, 5, 2, 4, 0, 3, 7, 8, 6), DEFAULT_GOAL, max_depth=9)
    assert not res.solved
    assert res.termination == "cutoff"


@pytest.mark.parametrize("slack", [0, 2])
def test_dfs_within_bound_solves_or_reports_cutoff(slack, goal_distances):
    for start, d in goal_distances.items():
        if not 1 <= d <= 8:
            continue
        res = dfs(start, DEFAULT_GOAL, max_depth=d + slack)
        if res.solved:
            assert d <= res.moves <= d + slack
            assert_valid_path(res)
        else:
            assert res.termination == "cutoff"


def test_dfs_default_bound_respected():
    res = dfs(SCENARIO, DEFAULT_GOAL)
    assert res.stats["bound_final"] == DEFAULT_DEPTH_LIMIT
    assert res.stats["peak_recursion"] <= DEFAULT_DEPTH_LIMIT
    if res.solved:
        assert res.moves <= DEFAULT_DEPTH_LIMIT
        assert_valid_path(res)
    else:
        assert res.termination == "cutoff"


def test_dfs_start_is_goal():
    res = dfs(DEFAULT_GOAL, DEFAULT_GOAL, max_depth=0)
    assert res.solved
    assert res.explored == 1
    assert res.moves == 0


@pytest.mark.slow
def test_bfs_exhausts_component_on_unsolvable_pair():
    res = bfs((1, 2, 3, 4, 5, 6, 8, 7, 0), DEFAULT_GOAL)
    assert not res.solved
    assert res.termination == "exhausted"
    assert res.explored == 181440


@pytest.mark.parametrize("search", [bfs, dfs])
def test_dead_end_start_is_exhausted(search):
    res = search(SCENARIO, DEFAULT_GOAL, neighbors_fn=lambda s: [])
    assert not res.solved
    assert res.termination == "exhausted"
    assert res.explored == 1
    assert res.path is None

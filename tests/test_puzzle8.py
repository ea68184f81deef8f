import pytest

from manuscript.domains.puzzle8 import (
    DEFAULT_GOAL, DOWN, LEFT, RIGHT, UP,
    action, goal_positions, is_solvable, neighbors, scramble, unsolvable_variant, validate_state,
)
from manuscript.heuristics.catalog import make_heuristic
from manuscript.heuristics.manhattan import manhattan
from manuscript.heuristics.misplaced import misplaced

SCENARIO = (1, 2, 3, 0, 4, 6, 7, 5, 8)
CENTER = (1, 2, 3, 4, 0, 5, 6, 7, 8)


def test_neighbors_follow_up_down_left_right_order():
    assert neighbors(CENTER) == [
        (1, 0, 3, 4, 2, 5, 6, 7, 8),
        (1, 2, 3, 4, 7, 5, 6, 0, 8),
        (1, 2, 3, 0, 4, 5, 6, 7, 8),
        (1, 2, 3, 4, 5, 0, 6, 7, 8),
    ]


def test_corner_blank_has_two_moves():
    s = (0, 1, 2, 3, 4, 5, 6, 7, 8)
    assert [action(s, n) for n in neighbors(s)] == [DOWN, RIGHT]


def test_neighbors_do_not_touch_the_input():
    before = tuple(SCENARIO)
    neighbors(SCENARIO)
    assert SCENARIO == before


@pytest.mark.parametrize("s, expected", [
    (CENTER, [UP, DOWN, LEFT, RIGHT]),
    (SCENARIO, [UP, DOWN, RIGHT]),
    (DEFAULT_GOAL, [UP, LEFT]),
])
def test_action_recovers_each_direction(s, expected):
    assert [action(s, n) for n in neighbors(s)] == expected


def test_action_is_none_for_non_neighbours():
    assert action(CENTER, CENTER) is None
    two_steps = neighbors(neighbors(CENTER)[0])[0]
    assert action(CENTER, two_steps) is None
    # blank moved to an adjacent cell but other tiles were shuffled too
    assert action(CENTER, (2, 1, 3, 4, 5, 0, 6, 7, 8)) is None


def test_heuristics_on_scenario():
    # tiles 4, 5 and 8 are off their goal cells; tile 6 is already home
    assert misplaced(SCENARIO, DEFAULT_GOAL) == 3
    assert manhattan(SCENARIO, goal_positions(DEFAULT_GOAL)) == 3
    assert misplaced(DEFAULT_GOAL, DEFAULT_GOAL) == 0
    assert manhattan(DEFAULT_GOAL, goal_positions(DEFAULT_GOAL)) == 0


def test_goal_positions_table():
    pos = goal_positions(DEFAULT_GOAL)
    assert pos[1] == (0, 0)
    assert pos[6] == (1, 2)
    assert pos[0] == (2, 2)
    custom = (0, 1, 2, 3, 4, 5, 6, 7, 8)
    assert goal_positions(custom)[0] == (0, 0)
    assert manhattan(custom, goal_positions(custom)) == 0


def test_heuristics_admissible_consistent_and_zero_only_at_goal(goal_distances):
    h1 = make_heuristic("h1", DEFAULT_GOAL)
    h2 = make_heuristic("h2", DEFAULT_GOAL)
    for i, (s, d) in enumerate(goal_distances.items()):
        a, b = h1(s), h2(s)
        assert a <= b <= d
        assert (b == 0) == (s == DEFAULT_GOAL)
        if i % 97 == 0:
            for n in neighbors(s):
                assert abs(h1(n) - a) <= 1
                assert abs(h2(n) - b) <= 1


def test_make_heuristic_labels_and_unknown_key():
    assert make_heuristic("h1", DEFAULT_GOAL).label == "h1 - Misplaced Tiles"
    assert make_heuristic("h2", DEFAULT_GOAL).label == "h2 - Manhattan Distance"
    with pytest.raises(ValueError):
        make_heuristic("h9", DEFAULT_GOAL)


@pytest.mark.parametrize("bad", [
    (1, 2, 3),
    (1, 2, 3, 4, 5, 6, 7, 8, 8),
    (1, 2, 3, 4, 5, 6, 7, 8, 9),
])
def test_validate_state_rejects_non_permutations(bad):
    with pytest.raises(ValueError):
        validate_state(bad)


def test_validate_state_returns_tuple():
    assert validate_state([1, 2, 3, 4, 5, 6, 7, 8, 0]) == DEFAULT_GOAL


def test_solvability_parity(goal_distances):
    assert is_solvable(SCENARIO, DEFAULT_GOAL)
    flipped = unsolvable_variant(SCENARIO)
    assert not is_solvable(flipped, DEFAULT_GOAL)
    assert flipped not in goal_distances
    assert len(goal_distances) == 181440


def test_scramble_is_seeded_and_solvable(goal_distances):
    assert scramble(20, 5) == scramble(20, 5)
    for seed in range(10):
        s = scramble(15, seed)
        assert s in goal_distances
        assert goal_distances[s] <= 15

from __future__ import annotations
from typing import Dict, List, Optional, Sequence, Tuple
import random

State = Tuple[int, ...]  # 9-length tuple, 0 is blank
SIZE = 3
DEFAULT_GOAL: State = (1, 2, 3, 4, 5, 6, 7, 8, 0)

UP, DOWN, LEFT, RIGHT = "Up", "Down", "Left", "Right"
# Blank displacement per direction. The order is part of the contract:
# it fixes tie-breaking in every search and the reported action sequence.
DIRECTIONS: Tuple[Tuple[str, int, int], ...] = (
    (UP, -1, 0),
    (DOWN, 1, 0),
    (LEFT, 0, -1),
    (RIGHT, 0, 1),
)

# Precomputed (direction, target cell) pairs for each blank position
_NEI: Dict[int, Tuple[Tuple[str, int], ...]] = {}
for _i in range(SIZE * SIZE):
    _r, _c = divmod(_i, SIZE)
    _NEI[_i] = tuple(
        (name, (_r + dr) * SIZE + (_c + dc))
        for name, dr, dc in DIRECTIONS
        if 0 <= _r + dr < SIZE and 0 <= _c + dc < SIZE
    )


def validate_state(s: Sequence[int]) -> State:
    """Return *s* as a State, raising ValueError unless it is a permutation of 0..8."""
    t = tuple(s)
    if len(t) != SIZE * SIZE or sorted(t) != list(range(SIZE * SIZE)):
        raise ValueError(f"not a 3x3 puzzle state: {t!r}")
    return t


def neighbors(s: State) -> List[State]:
    """States reachable by one blank move, in Up, Down, Left, Right order."""
    z = s.index(0)
    out: List[State] = []
    for _, j in _NEI[z]:
        lst = list(s)
        lst[z], lst[j] = lst[j], lst[z]
        out.append(tuple(lst))
    return out


def action(frm: State, to: State) -> Optional[str]:
    """Direction the blank moved between two adjacent states, or None if they are not adjacent."""
    if sorted(i for i in range(SIZE * SIZE) if frm[i] != to[i]) != sorted((frm.index(0), to.index(0))):
        return None
    br, bc = divmod(frm.index(0), SIZE)
    tr, tc = divmod(to.index(0), SIZE)
    for name, dr, dc in DIRECTIONS:
        if (tr - br, tc - bc) == (dr, dc):
            return name
    return None


def goal_positions(goal: State) -> Dict[int, Tuple[int, int]]:
    """Tile value -> (row, col) in *goal*."""
    return {tile: divmod(i, SIZE) for i, tile in enumerate(goal)}


def inversions(s: State) -> int:
    arr = [x for x in s if x != 0]
    inv = 0
    for i in range(len(arr)):
        for j in range(i + 1, len(arr)):
            if arr[i] > arr[j]:
                inv += 1
    return inv


def is_solvable(s: State, goal: State = DEFAULT_GOAL) -> bool:
    """3x3 solvability: start and goal must share inversion parity (blank ignored)."""
    return inversions(s) % 2 == inversions(goal) % 2


def scramble(depth: int, seed: int, goal: State = DEFAULT_GOAL) -> State:
    """Scramble *goal* by performing 'depth' random legal blank moves (no immediate backtracks)."""
    rng = random.Random(seed)
    s = goal
    last_blank = None
    for _ in range(depth):
        z = s.index(0)
        cand = [j for _, j in _NEI[z]]
        if last_blank in cand and len(cand) > 1:
            cand.remove(last_blank)
        j = rng.choice(cand)
        lst = list(s)
        lst[z], lst[j] = lst[j], lst[z]
        last_blank = z
        s = tuple(lst)
    return s


def unsolvable_variant(s: State) -> State:
    """Swap the first two tiles (blank excluded), which flips the inversion parity."""
    lst = list(s)
    i = next(k for k, v in enumerate(lst) if v != 0)
    j = next(k for k, v in enumerate(lst[i + 1:], start=i + 1) if v != 0)
    lst[i], lst[j] = lst[j], lst[i]
    return tuple(lst)

from typing import Dict, Tuple
from manuscript.domains.puzzle8 import SIZE, State

def manhattan(s: State, goal_pos: Dict[int, Tuple[int, int]]) -> int:
    """Sum of Manhattan distances to goal positions (blank ignored)."""
    dist = 0
    for idx, tile in enumerate(s):
        if tile == 0:
            continue
        r, c = divmod(idx, SIZE)
        gr, gc = goal_pos[tile]
        dist += abs(r - gr) + abs(c - gc)
    return dist

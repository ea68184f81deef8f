from collections import deque
from typing import Dict

import pytest

from manuscript.domains.puzzle8 import DEFAULT_GOAL, State, neighbors


@pytest.fixture(scope="session")
def goal_distances() -> Dict[State, int]:
    """Exact distance to DEFAULT_GOAL for every state in its component (reference BFS)."""
    dist = {DEFAULT_GOAL: 0}
    q = deque([DEFAULT_GOAL])
    while q:
        s = q.popleft()
        for s2 in neighbors(s):
            if s2 not in dist:
                dist[s2] = dist[s] + 1
                q.append(s2)
    return dist

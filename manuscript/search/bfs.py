from collections import deque
from time import perf_counter
from typing import Callable, Dict, List, Optional, Set
import logging

from manuscript.domains.puzzle8 import State, neighbors as default_neighbors
from manuscript.search.path import reconstruct_path
from manuscript.search.result import SearchResult

logger = logging.getLogger(__name__)

def bfs(start: State, goal: State,
        neighbors_fn: Optional[Callable[[State], List[State]]] = None) -> SearchResult:
    """Breadth-first search. States are marked seen (and parented) when enqueued."""
    neighbors = neighbors_fn or default_neighbors
    t0 = perf_counter()
    q = deque([start])
    parent: Dict[State, Optional[State]] = {start: None}
    seen: Set[State] = {start}
    explored = generated = 0
    peak = 1
    while q:
        peak = max(peak, len(q))
        s = q.popleft()
        explored += 1
        if s == goal:
            logger.debug(f"[BFS] goal reached after {explored} states")
            return SearchResult("Breadth-First Search (BFS)", start, goal, True, explored,
                                perf_counter() - t0, path=reconstruct_path(parent, s),
                                stats={"generated": generated, "peak_frontier": peak})
        for s2 in neighbors(s):
            generated += 1
            if s2 in seen: continue
            seen.add(s2); parent[s2] = s; q.append(s2)
    logger.debug(f"[BFS] frontier exhausted after {explored} states")
    return SearchResult("Breadth-First Search (BFS)", start, goal, False, explored,
                        perf_counter() - t0, termination="exhausted",
                        stats={"generated": generated, "peak_frontier": peak})

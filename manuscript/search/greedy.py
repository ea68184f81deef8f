from __future__ import annotations
from typing import Callable, Dict, List, Optional, Set, Tuple
from time import perf_counter
import heapq
import itertools
import logging

from manuscript.domains.puzzle8 import State, neighbors as default_neighbors
from manuscript.heuristics.catalog import make_heuristic
from manuscript.search.path import reconstruct_path
from manuscript.search.result import SearchResult

logger = logging.getLogger(__name__)

def greedy_best_first(
    start: State,
    goal: State,
    heuristic: str = "h2",
    neighbors_fn: Optional[Callable[[State], List[State]]] = None,
) -> SearchResult:
    """
    Greedy best-first search ordered by h alone.

    Equal h values pop in insertion order. A state may be queued several
    times; the explored check at pop lets the first pop win. The parent is
    recorded once, at first discovery.
    """
    neighbors = neighbors_fn or default_neighbors
    hfun = make_heuristic(heuristic, goal)
    t0 = perf_counter()

    counter = itertools.count()
    open_heap: List[Tuple[int, int, State]] = [(hfun(start), next(counter), start)]
    parent: Dict[State, Optional[State]] = {start: None}
    closed: Set[State] = set()

    explored = 0
    generated = 0
    peak_open = 1

    while open_heap:
        peak_open = max(peak_open, len(open_heap))
        _, _, s = heapq.heappop(open_heap)
        if s in closed:
            continue
        closed.add(s)
        explored += 1

        if s == goal:
            return SearchResult(
                "Greedy Best-First Search", start, goal, True, explored, perf_counter() - t0,
                path=reconstruct_path(parent, s), heuristic=hfun.label,
                stats={"generated": generated, "peak_frontier": peak_open},
            )

        for s2 in neighbors(s):
            if s2 in closed:
                continue
            generated += 1
            if s2 not in parent:
                parent[s2] = s
            heapq.heappush(open_heap, (hfun(s2), next(counter), s2))

    logger.debug(f"[Greedy] open list exhausted after {explored} states")
    return SearchResult(
        "Greedy Best-First Search", start, goal, False, explored, perf_counter() - t0,
        heuristic=hfun.label, termination="exhausted",
        stats={"generated": generated, "peak_frontier": peak_open},
    )

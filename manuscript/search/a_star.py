from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple, List
import heapq
from time import perf_counter
import math
import itertools
import logging

from manuscript.domains.puzzle8 import State, neighbors as default_neighbors
from manuscript.heuristics.catalog import make_heuristic
from manuscript.search.path import reconstruct_path
from manuscript.search.result import SearchResult

logger = logging.getLogger(__name__)

TIE_BREAKS = ("h", "g", "fifo", "lifo")

@dataclass
class PQItem:
    f: int
    h: int
    g: int
    state: State

def a_star(
    start: State,
    goal: State,
    heuristic: str = "h2",
    tie_break: str = "h",
    neighbors_fn: Optional[Callable[[State], List[State]]] = None,
) -> SearchResult:
    """
    A* with lazy deletion and instrumentation.

    Priority is (f, tie-break, insertion order). The default tie-break "h"
    prefers the smaller heuristic on equal f. A popped node whose g is worse
    than the best g known for its state is stale and skipped; a neighbour is
    pushed only on a strictly better g.
    """
    if tie_break not in TIE_BREAKS:
        raise ValueError(f"Unknown tie_break: {tie_break}. Available: {', '.join(TIE_BREAKS)}")
    neighbors = neighbors_fn or default_neighbors
    hfun = make_heuristic(heuristic, goal)
    t0 = perf_counter()

    open_heap: List[Tuple[Tuple[int, int, int], PQItem]] = []
    counter = itertools.count()

    def priority_tuple(f: int, g: int, h: int, ctr: int) -> Tuple[int, int, int]:
        if tie_break == "g":   return (f, -g, ctr)
        if tie_break == "fifo":return (f, 0,  ctr)
        if tie_break == "lifo":return (f, 0, -ctr)
        return (f, h, ctr)

    h0 = hfun(start)
    heapq.heappush(open_heap, (priority_tuple(h0, 0, h0, next(counter)), PQItem(f=h0, h=h0, g=0, state=start)))

    best_g: Dict[State, int] = {start: 0}
    parent: Dict[State, Optional[State]] = {start: None}

    explored = 0
    generated = 0
    stale = 0
    peak_open = 1

    while open_heap:
        peak_open = max(peak_open, len(open_heap))
        _, node = heapq.heappop(open_heap)
        if node.g > best_g.get(node.state, math.inf):
            stale += 1
            continue
        explored += 1

        if node.state == goal:
            return SearchResult(
                "A* Search", start, goal, True, explored, perf_counter() - t0,
                path=reconstruct_path(parent, node.state), heuristic=hfun.label,
                stats={"generated": generated, "stale": stale, "peak_frontier": peak_open,
                       "tie_break": tie_break},
            )

        for s2 in neighbors(node.state):
            g2 = node.g + 1  # unit step cost
            generated += 1
            if g2 < best_g.get(s2, math.inf):
                best_g[s2] = g2
                parent[s2] = node.state
                h2 = hfun(s2)
                f2 = g2 + h2
                heapq.heappush(open_heap, (priority_tuple(f2, g2, h2, next(counter)),
                                           PQItem(f=f2, h=h2, g=g2, state=s2)))

    # Open exhausted without finding goal
    logger.debug(f"[A*] open list exhausted after {explored} states")
    return SearchResult(
        "A* Search", start, goal, False, explored, perf_counter() - t0,
        heuristic=hfun.label, termination="exhausted",
        stats={"generated": generated, "stale": stale, "peak_frontier": peak_open,
               "tie_break": tie_break},
    )

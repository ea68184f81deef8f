from __future__ import annotations
from typing import Callable, List, Optional, Set, Union
from time import perf_counter
import logging
import math

from manuscript.domains.puzzle8 import State, neighbors as default_neighbors
from manuscript.heuristics.catalog import make_heuristic
from manuscript.search.result import SearchResult

logger = logging.getLogger(__name__)

def ida_star(
    start: State,
    goal: State,
    heuristic: str = "h2",
    max_threshold: Optional[int] = None,
    neighbors_fn: Optional[Callable[[State], List[State]]] = None,
) -> SearchResult:
    """
    IDA* with path-local cycle avoidance and instrumentation.

    Memory is O(depth): the only bookkeeping is the current root-to-node path
    and its membership set, both undone on every return. ``max_threshold``
    optionally caps threshold escalation (termination "threshold_cap").
    """
    neighbors = neighbors_fn or default_neighbors
    hfun = make_heuristic(heuristic, goal)
    t0 = perf_counter()
    FOUND = object()

    explored = 0
    max_depth = 0
    path: List[State] = [start]
    on_path: Set[State] = {start}
    solution: List[State] = []

    def search(g: int, bound: int) -> Union[object, float]:
        """
        Probe below the node at the end of ``path``.

        - returns FOUND if the goal was reached (``solution`` holds a copy of the path)
        - otherwise the minimal f among children that exceeded ``bound``
          (math.inf if there were none)
        """
        nonlocal explored, max_depth
        state = path[-1]
        max_depth = max(max_depth, len(path) - 1)
        f_here = g + hfun(state)
        if f_here > bound:
            return f_here
        explored += 1
        if state == goal:
            solution[:] = path
            return FOUND

        min_next = math.inf
        for s2 in neighbors(state):
            if s2 in on_path:
                continue
            path.append(s2)
            on_path.add(s2)
            try:
                t = search(g + 1, bound)
            finally:
                path.pop()
                on_path.discard(s2)
            if t is FOUND:
                return FOUND
            if t < min_next:
                min_next = t
        return min_next

    bound = hfun(start)
    iterations = 0

    def _result(solved: bool, termination: str) -> SearchResult:
        return SearchResult(
            "Iterative Deepening A* (IDA*)", start, goal, solved, explored, perf_counter() - t0,
            path=list(solution) if solved else None, heuristic=hfun.label,
            termination=termination,
            stats={"iterations": iterations, "bound_final": bound, "peak_recursion": max_depth},
        )

    while True:
        iterations += 1
        t = search(0, bound)
        if t is FOUND:
            return _result(True, "ok")
        if t == math.inf:
            return _result(False, "exhausted")
        logger.debug(f"[IDA*] iteration {iterations}: threshold {bound}, next {t} "
                     f"(states explored so far: {explored})")
        if max_threshold is not None and t > max_threshold:
            return _result(False, "threshold_cap")
        bound = int(t)

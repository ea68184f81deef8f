from __future__ import annotations
from typing import Callable, Dict, List, Optional, Set, Tuple
from time import perf_counter
import logging

from manuscript.domains.puzzle8 import State, neighbors as default_neighbors
from manuscript.search.path import reconstruct_path
from manuscript.search.result import SearchResult

logger = logging.getLogger(__name__)

DEFAULT_DEPTH_LIMIT = 50

def dfs(
    start: State,
    goal: State,
    max_depth: int = DEFAULT_DEPTH_LIMIT,
    neighbors_fn: Optional[Callable[[State], List[State]]] = None,
) -> SearchResult:
    """
    Depth-limited DFS over an explicit stack with a global explored set.

    Explored membership is checked at pop time, so a state may sit on the
    stack several times but is expanded at most once. A state at depth
    ``max_depth`` is still goal-tested but never expanded. The parent travels
    with each stack entry and is recorded when the state is first popped, so
    the reconstructed path always has ``depth`` moves.
    """
    neighbors = neighbors_fn or default_neighbors
    t0 = perf_counter()
    algorithm = "Depth-First Search (DFS)"

    explored = 0
    generated = 0
    peak_depth = 0
    cutoff = False

    # stack holds: (state, depth, parent)
    stack: List[Tuple[State, int, Optional[State]]] = [(start, 0, None)]
    parent: Dict[State, Optional[State]] = {}
    visited: Set[State] = set()

    while stack:
        s, d, p = stack.pop()
        if s in visited:
            continue
        visited.add(s)
        parent[s] = p
        explored += 1
        peak_depth = max(peak_depth, d)

        if s == goal:
            return SearchResult(
                algorithm, start, goal, True, explored, perf_counter() - t0,
                path=reconstruct_path(parent, s),
                stats={"generated": generated, "peak_recursion": peak_depth,
                       "bound_final": max_depth},
            )

        # depth bound: tested above, not expanded
        if d >= max_depth:
            cutoff = True
            continue

        for s2 in neighbors(s):
            if s2 in visited:
                continue
            generated += 1
            stack.append((s2, d + 1, s))

    logger.debug(f"[DFS] no goal within depth {max_depth} ({explored} states explored)")
    return SearchResult(
        algorithm, start, goal, False, explored, perf_counter() - t0,
        termination="cutoff" if cutoff else "exhausted",
        stats={"generated": generated, "peak_recursion": peak_depth,
               "bound_final": max_depth},
    )

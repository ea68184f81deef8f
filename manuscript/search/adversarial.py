from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, List, Optional, Set
from time import perf_counter
import logging
import math

from manuscript.domains.puzzle8 import State, action, goal_positions, neighbors as default_neighbors
from manuscript.heuristics.manhattan import manhattan

logger = logging.getLogger(__name__)

DEFAULT_PLY = 6

@dataclass
class GameSearchResult:
    """Top-level decision of one adversarial search run."""
    algorithm: str
    start: State
    goal: State
    depth: int
    best_move: Optional[State]
    best_action: Optional[str]
    utility: float
    evaluated: int
    time: float

@dataclass
class AdversarialComparison:
    minimax: GameSearchResult
    alpha_beta: GameSearchResult

    @property
    def same_move(self) -> bool:
        return self.minimax.best_move == self.alpha_beta.best_move

    @property
    def pruning_savings(self) -> float:
        """Percentage of minimax evaluations that alpha-beta avoided."""
        if self.minimax.evaluated == 0:
            return 0.0
        return (1.0 - self.alpha_beta.evaluated / self.minimax.evaluated) * 100

def _decide(
    algorithm: str,
    start: State,
    goal: State,
    depth: int,
    pruning: bool,
    neighbors_fn: Optional[Callable[[State], List[State]]],
) -> GameSearchResult:
    """
    Pick MAX's move at the root of a depth-bounded two-agent game.

    Utility is -h2: MAX plays towards the goal, MIN away from it. Levels
    alternate below the root. A branch stops at ply 0 or at the goal. The
    visited set covers the current root-to-node path only and is restored
    after each child. With ``pruning`` the alpha-beta window is carried and
    siblings are cut once beta <= alpha.
    """
    if depth < 1:
        raise ValueError(f"ply limit must be >= 1, got {depth}")
    neighbors = neighbors_fn or default_neighbors
    goal_pos = goal_positions(goal)
    t0 = perf_counter()
    evaluated = 0

    def utility(s: State) -> int:
        return -manhattan(s, goal_pos)

    def value(s: State, ply: int, is_max: bool, alpha: float, beta: float, visited: Set[State]) -> float:
        nonlocal evaluated
        evaluated += 1
        if ply == 0 or s == goal:
            return utility(s)

        best = -math.inf if is_max else math.inf
        for s2 in neighbors(s):
            if s2 in visited:
                continue
            visited.add(s2)
            try:
                v = value(s2, ply - 1, not is_max, alpha, beta, visited)
            finally:
                visited.discard(s2)
            if is_max:
                best = max(best, v)
                alpha = max(alpha, best) if pruning else alpha
            else:
                best = min(best, v)
                beta = min(beta, best) if pruning else beta
            if pruning and beta <= alpha:
                break
        # every move leads back onto the current path
        if best in (math.inf, -math.inf):
            return utility(s)
        return best

    evaluated += 1  # the root
    best_move: Optional[State] = None
    best_value: float = -math.inf
    if start != goal:
        visited: Set[State] = {start}
        alpha = -math.inf
        for s2 in neighbors(start):
            visited.add(s2)
            try:
                v = value(s2, depth - 1, False, alpha if pruning else -math.inf, math.inf, visited)
            finally:
                visited.discard(s2)
            if v > best_value:
                best_value, best_move = v, s2
                if pruning:
                    alpha = best_value
    if best_move is None:
        # goal reached or no move available at the root
        best_value = utility(start)

    result = GameSearchResult(
        algorithm, start, goal, depth, best_move,
        action(start, best_move) if best_move is not None else None,
        best_value, evaluated, perf_counter() - t0,
    )
    logger.debug(f"[{algorithm}] depth {depth}: best move {result.best_action} "
                 f"(utility={best_value}), {evaluated} states evaluated")
    return result

def minimax(start: State, goal: State, depth: int = DEFAULT_PLY,
            neighbors_fn: Optional[Callable[[State], List[State]]] = None) -> GameSearchResult:
    return _decide("Minimax", start, goal, depth, False, neighbors_fn)

def alpha_beta(start: State, goal: State, depth: int = DEFAULT_PLY,
               neighbors_fn: Optional[Callable[[State], List[State]]] = None) -> GameSearchResult:
    return _decide("Alpha-Beta Pruning", start, goal, depth, True, neighbors_fn)

def compare_adversarial(start: State, goal: State, depth: int = DEFAULT_PLY,
                        neighbors_fn: Optional[Callable[[State], List[State]]] = None) -> AdversarialComparison:
    """Run minimax and alpha-beta on the same position."""
    cmp = AdversarialComparison(minimax(start, goal, depth, neighbors_fn),
                                alpha_beta(start, goal, depth, neighbors_fn))
    if not cmp.same_move:
        logger.warning(f"alpha-beta chose {cmp.alpha_beta.best_action}, minimax chose {cmp.minimax.best_action}")
    return cmp

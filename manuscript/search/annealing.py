from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, List, Optional
from time import perf_counter
import logging
import math
import random

from manuscript.domains.puzzle8 import State, goal_positions, neighbors as default_neighbors
from manuscript.heuristics.catalog import LABELS
from manuscript.heuristics.manhattan import manhattan
from manuscript.search.result import SearchResult

logger = logging.getLogger(__name__)

PROGRESS_INTERVAL = 100000

@dataclass(frozen=True)
class AnnealingSchedule:
    """Geometric cooling schedule and the seed of the random source."""
    initial_temperature: float = 1000.0
    cooling_factor: float = 0.9995
    min_temperature: float = 0.001
    max_iterations: int = 500000
    seed: int = 42

    def __post_init__(self):
        if not 0.0 < self.cooling_factor < 1.0:
            raise ValueError(f"cooling_factor must be in (0, 1), got {self.cooling_factor}")
        if self.initial_temperature <= 0 or self.min_temperature < 0:
            raise ValueError("initial_temperature must be positive and min_temperature non-negative")
        if self.max_iterations < 0:
            raise ValueError("max_iterations must be >= 0")

def accept(delta: int, temperature: float, rng: random.Random) -> bool:
    """Metropolis criterion: always take an improvement, otherwise with probability e^(-delta/T)."""
    return delta < 0 or rng.random() < math.exp(-delta / temperature)

def simulated_annealing(
    start: State,
    goal: State,
    schedule: Optional[AnnealingSchedule] = None,
    neighbors_fn: Optional[Callable[[State], List[State]]] = None,
) -> SearchResult:
    """
    Single-state stochastic walk on h2 (Manhattan distance).

    Each iteration proposes one uniformly random neighbour, accepts it by the
    Metropolis criterion and cools the temperature. The run is fully
    determined by ``schedule.seed``. Solved runs return the accepted-state
    log as the path; unsolved runs report the best state ever reached.
    """
    schedule = schedule or AnnealingSchedule()
    neighbors = neighbors_fn or default_neighbors
    goal_pos = goal_positions(goal)
    rng = random.Random(schedule.seed)
    t0 = perf_counter()

    temperature = schedule.initial_temperature
    current = start
    current_distance = manhattan(current, goal_pos)
    best_state, best_distance = current, current_distance
    accepted: List[State] = [start]
    explored = 0
    solved = False

    iteration = 0
    while iteration < schedule.max_iterations and temperature > schedule.min_temperature:
        explored += 1
        # h2 is zero only on the goal itself
        if current_distance == 0:
            solved = True
            break

        candidate = rng.choice(neighbors(current))
        candidate_distance = manhattan(candidate, goal_pos)
        if accept(candidate_distance - current_distance, temperature, rng):
            current, current_distance = candidate, candidate_distance
            accepted.append(current)
            if current_distance < best_distance:
                best_state, best_distance = current, current_distance

        temperature *= schedule.cooling_factor
        iteration += 1
        if iteration % PROGRESS_INTERVAL == 0:
            logger.debug(f"[SA] iteration {iteration}: T={temperature:.4f}, "
                         f"current h2={current_distance}, best h2={best_distance}")

    if not solved and current_distance == 0:
        # goal accepted on the last permitted iteration
        solved = True

    if solved:
        termination = "ok"
    elif temperature <= schedule.min_temperature:
        termination = "cooled"
    else:
        termination = "iteration_cap"

    logger.info(f"[SA] {termination}: {explored} iterations, best h2={best_distance}, "
                f"final T={temperature:.6f}")
    return SearchResult(
        "Simulated Annealing", start, goal, solved, explored, perf_counter() - t0,
        path=accepted if solved else None, heuristic=LABELS["h2"], termination=termination,
        stats={"final_temperature": temperature, "best_distance": best_distance,
               "best_state": best_state, "iterations": iteration,
               "accepted": len(accepted) - 1, "accepted_path": accepted},
    )

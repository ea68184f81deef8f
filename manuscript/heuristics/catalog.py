from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict

from manuscript.domains.puzzle8 import State, goal_positions
from manuscript.heuristics.manhattan import manhattan
from manuscript.heuristics.misplaced import misplaced

LABELS: Dict[str, str] = {
    "h1": "h1 - Misplaced Tiles",
    "h2": "h2 - Manhattan Distance",
}

@dataclass(frozen=True)
class Heuristic:
    """A heuristic bound to one goal state."""
    key: str
    label: str
    fn: Callable[[State], int]

    def __call__(self, s: State) -> int:
        return self.fn(s)

def make_heuristic(key: str, goal: State) -> Heuristic:
    if key == "h1":
        return Heuristic(key, LABELS[key], lambda s: misplaced(s, goal))
    if key == "h2":
        pos = goal_positions(goal)
        return Heuristic(key, LABELS[key], lambda s: manhattan(s, pos))
    raise ValueError(f"Unknown heuristic: {key}. Available: {', '.join(LABELS)}")

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from manuscript.domains.puzzle8 import State
from manuscript.search.path import path_actions

@dataclass
class SearchResult:
    """Outcome of one search run on one instance.

    ``termination`` is one of ``ok``, ``exhausted``, ``cutoff``, ``cooled``,
    ``iteration_cap`` or ``threshold_cap``. ``stats`` holds the
    algorithm-specific diagnostics (``generated``, ``peak_frontier``,
    ``iterations``, ``final_temperature``, ...).
    """
    algorithm: str
    start: State
    goal: State
    solved: bool
    explored: int
    time: float
    path: Optional[List[State]] = None
    heuristic: Optional[str] = None
    termination: str = "ok"
    stats: Dict[str, Any] = field(default_factory=dict)

    @property
    def moves(self) -> Optional[int]:
        return len(self.path) - 1 if self.path else None

    @property
    def actions(self) -> List[str]:
        return path_actions(self.path) if self.path else []

    def as_row(self) -> Dict[str, Any]:
        """Flat dict for CSV export."""
        row: Dict[str, Any] = {
            "algorithm": self.algorithm,
            "heuristic": self.heuristic or "",
            "solved": int(self.solved),
            "explored": self.explored,
            "moves": "" if self.moves is None else self.moves,
            "time_sec": f"{self.time:.6f}",
            "termination": self.termination,
            "actions": " ".join(self.actions),
        }
        for k, v in self.stats.items():
            if isinstance(v, (int, float, str)):
                row[k] = v
        return row

from typing import Dict, List, Optional

from manuscript.domains.puzzle8 import State, action

def reconstruct_path(parents: Dict[State, Optional[State]], goal: State) -> List[State]:
    """Walk the parent relation back from *goal* and return the start-to-goal sequence."""
    path: List[State] = []
    s: Optional[State] = goal
    while s is not None:
        path.append(s)
        s = parents.get(s)
    return list(reversed(path))

def path_actions(path: List[State]) -> List[str]:
    """Direction labels for consecutive states of *path* ('?' for a non-move)."""
    return [action(a, b) or "?" for a, b in zip(path, path[1:])]

from manuscript.domains.puzzle8 import State

def misplaced(s: State, goal: State) -> int:
    """Number of tiles not on their goal cell (blank ignored)."""
    return sum(1 for t, g in zip(s, goal) if t != 0 and t != g)

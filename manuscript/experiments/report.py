from __future__ import annotations
from typing import List

from manuscript.domains.puzzle8 import SIZE, State
from manuscript.search.adversarial import AdversarialComparison, GameSearchResult
from manuscript.search.annealing import AnnealingSchedule
from manuscript.search.result import SearchResult

def _cell(v: int) -> str:
    return "B" if v == 0 else str(v)

def state_to_string(s: State) -> str:
    """'1 2 3 / B 4 6 / 7 5 8'"""
    rows = [" ".join(_cell(v) for v in s[r * SIZE:(r + 1) * SIZE]) for r in range(SIZE)]
    return " / ".join(rows)

def state_to_grid(s: State) -> str:
    return "".join(" ".join(_cell(v) for v in s[r * SIZE:(r + 1) * SIZE]) + "\n" for r in range(SIZE))

def format_result(res: SearchResult) -> str:
    lines: List[str] = []
    lines.append("=" * 60)
    lines.append(f"Algorithm    : {res.algorithm}" + (f" ({res.heuristic})" if res.heuristic else ""))
    lines.append("=" * 60)
    lines.append(f"Status       : {'SUCCESS' if res.solved else 'FAILURE'}")
    lines.append(f"States Explored: {res.explored}")
    lines.append(f"Time Taken   : {res.time * 1000:.1f} ms")
    if not res.solved:
        lines.append(f"Termination  : {res.termination}")
    if "bound_final" in res.stats and res.algorithm.startswith("Depth-First"):
        lines.append(f"Depth Limit  : {res.stats['bound_final']}")
    if "iterations" in res.stats and res.algorithm.startswith("Iterative"):
        lines.append(f"Iterations   : {res.stats['iterations']}")
    if res.solved and res.path is not None:
        lines.append(f"Path Length  : {res.moves} moves")
        if res.actions:
            lines.append("Path         : " + " -> ".join(res.actions))
    lines.append("Initial State:")
    lines.append(state_to_grid(res.start).rstrip("\n"))
    lines.append("Goal State:")
    lines.append(state_to_grid(res.goal).rstrip("\n"))
    if "final_temperature" in res.stats:
        lines.append(f"Final Temperature: {res.stats['final_temperature']:.6f}")
        lines.append(f"Best h2 achieved : {res.stats['best_distance']}")
        if not res.solved:
            lines.append("Best state found (not goal):")
            lines.append(state_to_grid(res.stats["best_state"]).rstrip("\n"))
    return "\n".join(lines)

def format_schedule(schedule: AnnealingSchedule) -> str:
    return "\n".join([
        "Cooling Schedule:",
        f"  T0           = {schedule.initial_temperature}",
        f"  Cooling Rate = {schedule.cooling_factor}",
        f"  T_min        = {schedule.min_temperature}",
        f"  Max Iter     = {schedule.max_iterations}",
        f"  Seed         = {schedule.seed}",
    ])

def _format_game(res: GameSearchResult) -> str:
    lines = [f"--- {res.algorithm} ---",
             f"  Best move: {res.best_action or 'none'} (utility={res.utility})",
             f"  States evaluated: {res.evaluated}",
             f"  Time: {res.time * 1000:.1f} ms"]
    if res.best_move is not None:
        lines.append("  Resulting state:")
        lines.extend("  " + row for row in state_to_grid(res.best_move).splitlines())
    return "\n".join(lines)

def format_comparison(cmp: AdversarialComparison) -> str:
    mm, ab = cmp.minimax, cmp.alpha_beta
    lines = [
        f"Adversarial Search Depth: {mm.depth}",
        "Utility function: u(s) = -ManhattanDistance(s)",
        "",
        _format_game(mm),
        "",
        _format_game(ab),
        "",
        "=" * 60,
        f"Minimax vs Alpha-Beta (depth={mm.depth})",
        "=" * 60,
        f"{'':<20}{'Minimax':<11}Alpha-Beta",
        f"{'States evaluated:':<20}{mm.evaluated:<11}{ab.evaluated}",
        f"{'Time (ms):':<20}{mm.time * 1000:<11.1f}{ab.time * 1000:.1f}",
        f"{'Same best move?':<20}" + ("YES (pruning is lossless)" if cmp.same_move else "NO (unexpected)"),
        f"{'Pruning saved:':<20}{cmp.pruning_savings:.1f}% of state evaluations",
    ]
    return "\n".join(lines)

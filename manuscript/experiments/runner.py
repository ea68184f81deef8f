from __future__ import annotations
import argparse, csv, logging, sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from manuscript.domains.puzzle8 import (
    DEFAULT_GOAL,
    is_solvable,
    scramble,
    unsolvable_variant,
)
from manuscript.experiments.loader import Instance, InputFormatError, load_instances
from manuscript.experiments.report import (
    format_comparison,
    format_result,
    format_schedule,
    state_to_grid,
    state_to_string,
)
from manuscript.search.a_star import TIE_BREAKS, a_star
from manuscript.search.adversarial import DEFAULT_PLY, compare_adversarial
from manuscript.search.annealing import AnnealingSchedule, simulated_annealing
from manuscript.search.bfs import bfs
from manuscript.search.dfs import DEFAULT_DEPTH_LIMIT, dfs
from manuscript.search.greedy import greedy_best_first
from manuscript.search.ida_star import ida_star
from manuscript.search.result import SearchResult

logger = logging.getLogger(__name__)

ALGORITHMS = ["bfs", "dfs", "greedy", "astar", "ida", "sa", "adversarial"]

HEADER = [
    "instance", "algorithm", "heuristic", "solvable", "solved", "explored", "moves",
    "time_sec", "termination", "generated", "peak_frontier", "iterations", "bound_final",
    "peak_recursion", "final_temperature", "best_distance", "evaluated", "best_action",
    "utility", "pruning_savings", "actions",
]

def generate_instances(depths: List[int], per_depth: int, start_seed: int = 0,
                       goal=DEFAULT_GOAL, include_unsolvable: bool = False) -> List[Instance]:
    """Scrambled instances, ``per_depth`` for each scramble depth, plus parity-flipped twins if asked."""
    out: List[Instance] = []
    seed = start_seed
    for d in depths:
        for _ in range(per_depth):
            s = scramble(d, seed, goal)
            out.append(Instance(index=len(out) + 1, start=s, goal=goal, depth=d, seed=seed))
            if include_unsolvable:
                out.append(Instance(index=len(out) + 1, start=unsolvable_variant(s), goal=goal,
                                    depth=d, seed=seed))
            seed += 1
    return out

def heuristic_keys(choice: str) -> List[str]:
    return ["h1", "h2"] if choice == "both" else [choice]

def run_instance(inst: Instance, args) -> List[Dict[str, Any]]:
    """Run every selected algorithm on one instance, print the reports and return CSV rows."""
    algos = ALGORITHMS if "all" in args.algo else args.algo
    solvable = is_solvable(inst.start, inst.goal)
    rows: List[Dict[str, Any]] = []

    def emit(res: SearchResult):
        if not args.quiet:
            print(format_result(res))
        row = res.as_row()
        row.update(instance=inst.index, solvable=int(solvable))
        rows.append(row)

    if not args.quiet:
        print(f"Start State: {state_to_string(inst.start)}")
        print(f"Goal  State: {state_to_string(inst.goal)}")
        print("Start Grid:\n" + state_to_grid(inst.start))
    if not solvable:
        logger.warning(f"instance {inst.index} is unsolvable (inversion parity differs from goal)")

    if "bfs" in algos:
        emit(bfs(inst.start, inst.goal))
    if "dfs" in algos:
        emit(dfs(inst.start, inst.goal, max_depth=args.dfs_max_depth))
    if "greedy" in algos:
        for h in heuristic_keys(args.heuristic):
            emit(greedy_best_first(inst.start, inst.goal, heuristic=h))
    if "astar" in algos:
        for h in heuristic_keys(args.heuristic):
            emit(a_star(inst.start, inst.goal, heuristic=h, tie_break=args.tie_break))
    if "ida" in algos:
        if solvable or args.ida_max_threshold is not None:
            for h in heuristic_keys(args.heuristic):
                emit(ida_star(inst.start, inst.goal, heuristic=h, max_threshold=args.ida_max_threshold))
        else:
            # path-local cycle checking cannot exhaust the reachable component in practice
            logger.warning(f"instance {inst.index}: IDA* skipped on unsolvable pair "
                           f"(pass --ida_max_threshold to force a bounded run)")
    if "sa" in algos:
        schedule = AnnealingSchedule(
            initial_temperature=args.sa_t0, cooling_factor=args.sa_cooling,
            min_temperature=args.sa_tmin, max_iterations=args.sa_max_iter, seed=args.sa_seed,
        )
        if not args.quiet:
            print(format_schedule(schedule))
        emit(simulated_annealing(inst.start, inst.goal, schedule))
    if "adversarial" in algos:
        cmp = compare_adversarial(inst.start, inst.goal, depth=args.ply)
        if not args.quiet:
            print(format_comparison(cmp))
        for g in (cmp.minimax, cmp.alpha_beta):
            rows.append({
                "instance": inst.index, "algorithm": g.algorithm, "solvable": int(solvable),
                "evaluated": g.evaluated, "explored": g.evaluated, "best_action": g.best_action or "",
                "utility": g.utility, "time_sec": f"{g.time:.6f}", "bound_final": g.depth,
                "pruning_savings": f"{cmp.pruning_savings:.1f}",
            })

    if not args.quiet:
        print("#" * 60)
    return rows

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Manuscript sorting (3x3 sliding puzzle) search comparison")
    ap.add_argument("--input", type=Path, default=None,
                    help="Instance file: start/goal line pairs, tokens 0-8 or B")
    ap.add_argument("--depths", type=int, nargs="+", default=[6, 10, 14],
                    help="Scramble depths used when no --input is given")
    ap.add_argument("--per_depth", type=int, default=3)
    ap.add_argument("--seed", type=int, default=0, help="First scramble seed")
    ap.add_argument("--include_unsolvable", action="store_true",
                    help="Also run parity-flipped twins of generated instances")
    ap.add_argument("--algo", nargs="+", choices=ALGORITHMS + ["all"], default=["all"])
    ap.add_argument("--heuristic", choices=["h1", "h2", "both"], default="both")
    ap.add_argument("--tie_break", choices=list(TIE_BREAKS), default="h")
    ap.add_argument("--dfs_max_depth", type=int, default=DEFAULT_DEPTH_LIMIT)
    ap.add_argument("--ida_max_threshold", type=int, default=None)
    ap.add_argument("--ply", type=int, default=DEFAULT_PLY, help="Adversarial ply limit")
    defaults = AnnealingSchedule()
    ap.add_argument("--sa_t0", type=float, default=defaults.initial_temperature)
    ap.add_argument("--sa_cooling", type=float, default=defaults.cooling_factor)
    ap.add_argument("--sa_tmin", type=float, default=defaults.min_temperature)
    ap.add_argument("--sa_max_iter", type=int, default=defaults.max_iterations)
    ap.add_argument("--sa_seed", type=int, default=defaults.seed)
    ap.add_argument("--out", type=Path, default=None, help="Write one CSV row per run")
    ap.add_argument("--quiet", action="store_true", help="No per-run reports on stdout")
    ap.add_argument("--log_level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.input is not None:
        try:
            insts = load_instances(args.input)
        except InputFormatError as e:
            logger.error(f"{args.input}: {e}")
            return 1
        except OSError as e:
            logger.error(f"cannot read {args.input}: {e}")
            return 1
    else:
        insts = generate_instances(args.depths, args.per_depth, args.seed,
                                   include_unsolvable=args.include_unsolvable)
    if not insts:
        logger.error("no instances to run")
        return 1

    rows: List[Dict[str, Any]] = []
    for inst in insts:
        rows.extend(run_instance(inst, args))

    if args.out is not None:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        with args.out.open("w", newline="") as f:
            w = csv.writer(f); w.writerow(HEADER)
            for r in rows:
                w.writerow([r.get(k, "") for k in HEADER])
        print(f"Wrote {args.out} ({len(insts)} instances, {len(rows)} runs)")
    return 0

if __name__ == "__main__":
    sys.exit(main())

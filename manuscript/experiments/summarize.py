#!/usr/bin/env python3
from __future__ import annotations
import argparse
from pathlib import Path
from typing import List

import pandas as pd

METRICS = ["explored", "time_sec", "moves"]

def load(files: List[Path]) -> pd.DataFrame:
    """Concatenate runner CSVs, keeping only rows with the columns we aggregate."""
    frames = []
    for p in files:
        df = pd.read_csv(p)
        need = {"algorithm", "explored", "time_sec"}
        if not need.issubset(df.columns):
            continue
        df["file"] = Path(p).name
        frames.append(df)
    if not frames:
        return pd.DataFrame(columns=["file", "algorithm", "heuristic", "solved"] + METRICS)
    df = pd.concat(frames, ignore_index=True)
    df["heuristic"] = df["heuristic"].fillna("")
    for m in METRICS + ["solved"]:
        if m in df.columns:
            df[m] = pd.to_numeric(df[m], errors="coerce")
    return df

def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Per (algorithm, heuristic): runs, solve rate and means of explored / time / moves."""
    if df.empty:
        return pd.DataFrame(columns=["algorithm", "heuristic", "runs", "solve_rate",
                                     "explored_mean", "time_mean", "moves_mean"])
    g = df.groupby(["algorithm", "heuristic"], sort=True)
    out = pd.DataFrame({
        "runs": g.size(),
        "solve_rate": g["solved"].mean() if "solved" in df.columns else float("nan"),
        "explored_mean": g["explored"].mean(),
        "time_mean": g["time_sec"].mean(),
        "moves_mean": g["moves"].mean() if "moves" in df.columns else float("nan"),
    })
    return out.reset_index()

def write_summary_md(path: Path, table: pd.DataFrame):
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write("# Experiment Summary\n\n")
        f.write("| algorithm | heuristic | runs | solve rate | explored mean | time mean (s) | moves mean |\n")
        f.write("|:---|:---|---:|---:|---:|---:|---:|\n")
        for r in table.itertuples(index=False):
            f.write(f"| {r.algorithm} | {r.heuristic or '-'} | {r.runs} | {r.solve_rate:.2f} | "
                    f"{r.explored_mean:.1f} | {r.time_mean:.6f} | {r.moves_mean:.2f} |\n")
    print(f"Wrote {path}")

def main(argv=None):
    ap = argparse.ArgumentParser(description="Summarize runner result CSVs.")
    ap.add_argument("csv", nargs="+", type=Path, help="One or more CSV result files")
    ap.add_argument("--md", type=Path, default=None, help="Also write a markdown table here")
    args = ap.parse_args(argv)

    table = summarize(load(args.csv))
    if table.empty:
        print("No rows to summarize. Are your CSVs empty?")
        return 0
    with pd.option_context("display.width", 160, "display.max_columns", None):
        print(table.to_string(index=False))
    if args.md is not None:
        write_summary_md(args.md, table)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())

#!/usr/bin/env python3
from __future__ import annotations
import argparse, os
from pathlib import Path

import numpy as np
import pandas as pd
import matplotlib
# Default to a non-interactive backend; we'll only show() if --show
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from manuscript.experiments.summarize import load

def sem(x):
    x = np.asarray(x, float)
    n = np.sum(~np.isnan(x))
    return 0.0 if n <= 1 else np.nanstd(x, ddof=1) / np.sqrt(n)

def plot_metric(ax, df: pd.DataFrame, metric: str):
    """Bar per (algorithm, heuristic): mean of *metric* with standard-error whiskers."""
    labels, means, errs = [], [], []
    for (algo, heur), grp in df.groupby(["algorithm", "heuristic"], sort=True):
        vals = grp[metric].dropna().to_numpy(dtype=float)
        if vals.size == 0:
            continue
        labels.append(f"{algo}\n{heur}" if heur else algo)
        means.append(vals.mean())
        errs.append(sem(vals))
    xs = np.arange(len(labels))
    ax.bar(xs, means, yerr=errs, capsize=3)
    ax.set_xticks(xs)
    ax.set_xticklabels(labels, rotation=45, ha="right", fontsize=7)
    if means and min(means) > 0:
        ax.set_yscale("log")
    ax.set_ylabel(metric)
    ax.set_title(f"{metric} per algorithm (mean ± sem)")
    ax.grid(True, axis="y")

def save_fig(fig, outdir: Path, name: str) -> Path:
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / f"{name}.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    print(f"Saved: {path}")
    return path

def main(argv=None):
    ap = argparse.ArgumentParser(description="Plot runner result CSVs and save PNGs.")
    ap.add_argument("csv", nargs="+", type=Path, help="One or more CSV result files")
    ap.add_argument("--save", type=Path, default=Path("results/plots"), help="Directory to save plots")
    ap.add_argument("--show", action="store_true", help="Also open interactive windows (if GUI available)")
    args = ap.parse_args(argv)

    df = load(args.csv)
    if df.empty:
        print("No rows to plot. Are your CSVs empty?")
        return 0

    base = "combo" if len(args.csv) > 1 else args.csv[0].stem
    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    for ax, metric in zip(axes, ["explored", "time_sec"]):
        plot_metric(ax, df, metric)
    plt.tight_layout()
    save_fig(fig, args.save, f"{base}_combined")

    if args.show:
        plt.show()
    plt.close(fig)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())

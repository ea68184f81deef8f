#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(cmd):
    print("Running:", cmd)
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    run("python -m manuscript.experiments.runner --input inputfile/input.txt --out results/input.csv")
    run("python -m manuscript.experiments.runner --depths 6 10 14 18 --per_depth 10 --algo bfs astar ida greedy --quiet --out results/scrambled.csv")
    run("python -m manuscript.experiments.runner --depths 8 --per_depth 5 --include_unsolvable --algo bfs greedy astar --heuristic h2 --quiet --out results/unsolvable.csv")
    run("python -m manuscript.experiments.summarize results/input.csv results/scrambled.csv results/unsolvable.csv --md results/summary.md")
    run("python -m manuscript.experiments.plot results/scrambled.csv --save results/plots")

if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""Time to first solution of the circulant core tabu search.

Runs the search once per (ell, seed) with max_solutions=1 and tabulates
elapsed time, iterations and restarts.
"""

import argparse
import time

import pandas as pd
from tqdm import tqdm

from circulant_cores import SearchConfig, SearchEngine


SEARCH_CONFIG = {
    "max_time": 60.0,
    "idle_restart_threshold": 1000,
    "tenure_multiplier": 0.5,
}

DEFAULT_ELLS = [5, 7, 9, 11, 13, 15, 17, 19, 21, 23, 25]


def run_single_task(ell, seed, config):
    engine = SearchEngine(
        SearchConfig(ell=ell, seed=seed, max_solutions=1, **config)
    )
    result = engine.run()
    return {
        "ell": ell,
        "seed": seed,
        "found": result.found,
        "time": result.solution_times[0] if result.found else None,
        "iterations": result.iterations,
        "restarts": result.restarts,
        "best_F": result.best_objective,
    }


def run_benchmarks(ells, n_samples, config):
    tasks = [(ell, seed) for ell in ells for seed in range(1, n_samples + 1)]
    return [
        run_single_task(ell, seed, config)
        for ell, seed in tqdm(tasks, desc="Benchmarking")
    ]


def build_parser():
    parser = argparse.ArgumentParser(
        description="Benchmark the circulant core tabu search"
    )
    parser.add_argument(
        "--ells", type=int, nargs="+", default=None, help="Specific ell values"
    )
    parser.add_argument("--n-samples", type=int, default=5, help="Seeds per ell")
    parser.add_argument(
        "--max-time",
        type=float,
        default=SEARCH_CONFIG["max_time"],
        help="Time limit per run (s)",
    )
    parser.add_argument(
        "--idle",
        type=int,
        default=SEARCH_CONFIG["idle_restart_threshold"],
        help="Idle iterations before restart",
    )
    parser.add_argument(
        "--tenure",
        type=float,
        default=SEARCH_CONFIG["tenure_multiplier"],
        help="Tabu tenure multiplier",
    )
    parser.add_argument(
        "--output-csv", type=str, default="benchmark_results.csv", help="Output CSV"
    )
    return parser


def main():
    args = build_parser().parse_args()

    config = {
        "max_time": args.max_time,
        "idle_restart_threshold": args.idle,
        "tenure_multiplier": args.tenure,
    }
    ells = args.ells if args.ells else DEFAULT_ELLS

    print("=" * 60)
    print("Circulant Core Tabu Search Benchmark")
    print("=" * 60)
    print(f"ell values: {ells}")
    print(f"Seeds per ell: {args.n_samples}")
    print(f"Config: {config}")
    print("=" * 60)

    start_time = time.time()
    results = run_benchmarks(ells, args.n_samples, config)
    elapsed = time.time() - start_time
    print(f"\nCompleted in {elapsed:.1f}s ({elapsed / 60:.1f}m)")

    df = pd.DataFrame(results)
    df.to_csv(args.output_csv, index=False)
    print(f"Results saved to {args.output_csv}")

    print("\nSummary statistics:")
    stats = df.groupby("ell").agg(
        found=("found", "sum"),
        median_time=("time", "median"),
        max_time=("time", "max"),
        median_iterations=("iterations", "median"),
    )
    print(stats.to_string())


if __name__ == "__main__":
    main()

"""Circulant core tabu search - Command Line Interface.

Usage:
    python main.py 33 600 1 10000 0.5
    python main.py ELL MAX_TIME SEED IDLE_ITERATIONS TENURE_MULTIPLIER [--verbose]
"""

import argparse
import os
import sys

from .config import SearchConfig
from .constants import DESCRIPTION, EPILOG
from .report import SolutionWriter
from .search import SearchEngine


def build_parser(prog: str = None) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Problem and search parameters, in the given order
    parser.add_argument(
        "ell", type=int, help="the size of the sequence (n = ell * 2 + 2)"
    )
    parser.add_argument("max_time", type=float, help="time limit in seconds")
    parser.add_argument("seed", type=int, help="random seed")
    parser.add_argument(
        "idle_restart_threshold",
        type=int,
        help="idle iterations before restart",
    )
    parser.add_argument(
        "tenure_multiplier", type=float, help="tabu tenure (multiplier of ell)"
    )

    # Output
    parser.add_argument(
        "--output", type=str, default=None, help="Solution file (default: sol-...txt)"
    )
    parser.add_argument("--verbose", action="store_true", help="Show progress bar")
    parser.add_argument(
        "--check-invariants",
        action="store_true",
        help="Recompute autocorrelations from scratch after every move",
    )
    parser.add_argument(
        "--legacy-tabu",
        action="store_true",
        help="Keep tabu grids across restarts and use the original aspiration rule",
    )
    return parser


def run(config: SearchConfig, output: str, verbose: bool = False) -> int:
    """Run one search writing solutions to output; returns the exit status."""
    try:
        writer = SolutionWriter(output)
    except OSError as e:
        print(f"problems in opening file {output}: {e}", file=sys.stderr)
        return 1

    print("=" * 60)
    print(f"Circulant core tabu search - ell={config.ell} (n={config.hadamard_order})")
    print("=" * 60)
    print(f"Time limit: {config.max_time:g}s, Seed: {config.seed}")
    print(
        f"Idle restart: {config.idle_restart_threshold}, "
        f"Tabu tenure: {config.tabu_tenure}"
    )
    print(f"Output: {output}")
    print()

    with writer:
        result = SearchEngine(config, sink=writer, verbose=verbose).run()

    print()
    print("=" * 60)
    print(f"Solutions: {writer.count}")
    print(f"Best objective: {result.best_objective}")
    print(f"Iterations: {result.iterations}, Restarts: {result.restarts}")
    print(f"Total time: {result.elapsed:.2f}s")
    print("=" * 60)

    return 0 if writer.count > 0 else 1


def main(argv=None) -> int:
    """Parse command line arguments and run the search."""
    prog = os.path.basename(sys.argv[0]) or "circulant-cores"
    parser = build_parser(prog)
    args = parser.parse_args(argv)

    try:
        config = SearchConfig(
            ell=args.ell,
            max_time=args.max_time,
            seed=args.seed,
            idle_restart_threshold=args.idle_restart_threshold,
            tenure_multiplier=args.tenure_multiplier,
            check_invariants=args.check_invariants,
            legacy_tabu=args.legacy_tabu,
        )
    except ValueError as e:
        parser.error(str(e))

    output = args.output or config.output_name(prog)
    return run(config, output, verbose=args.verbose)


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""Re-check every solution in a solution file from scratch."""

import argparse
import sys

from circulant_cores import check_solution_file


def main():
    parser = argparse.ArgumentParser(
        description="Verify circulant core pairs written by the tabu search"
    )
    parser.add_argument("path", type=str, help="Solution file (sol-...txt)")
    args = parser.parse_args()

    df = check_solution_file(args.path)
    if df.empty:
        print(f"{args.path}: no solutions")
        return 1

    print(df.to_string())
    n_valid = int(df["valid"].sum())
    print(f"\nValid: {n_valid}/{len(df)}")
    return 0 if n_valid == len(df) else 1


if __name__ == "__main__":
    sys.exit(main())

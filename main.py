#!/usr/bin/env python3
"""Circulant core tabu search - command line entry point.

Usage:
    python main.py ELL MAX_TIME SEED IDLE_ITERATIONS TENURE_MULTIPLIER
    python main.py 33 600 1 10000 0.5 --verbose
"""

import sys

from circulant_cores.cli import main

if __name__ == "__main__":
    sys.exit(main())

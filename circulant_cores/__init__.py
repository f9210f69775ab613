"""Circulant core tabu search package.

A tabu search for pairs of +1/-1 sequences with complementary periodic
autocorrelations, used to construct Hadamard matrices of order 2 * ell + 2
with two circulant cores.
"""

from .config import SearchConfig
from .energy import (
    apply_swap,
    autocorrelation_profile,
    core_objective,
    is_circulant_core_pair,
    swap_objective,
    wrap,
)
from .report import SolutionWriter, check_solution_file, read_solutions
from .rng import RandomStream
from .search import SearchEngine, SearchResult, SearchState
from .sequence import CoreSequence, shuffled_core
from .tabu import TabuMemory

__all__ = [
    # Search
    "SearchEngine",
    "SearchResult",
    "SearchState",
    "SearchConfig",
    "TabuMemory",
    # Sequences and objective
    "CoreSequence",
    "shuffled_core",
    "autocorrelation_profile",
    "core_objective",
    "swap_objective",
    "apply_swap",
    "is_circulant_core_pair",
    "wrap",
    # Randomness
    "RandomStream",
    # Output
    "SolutionWriter",
    "read_solutions",
    "check_solution_file",
]

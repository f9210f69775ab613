"""Run configuration for the circulant core search."""

from dataclasses import dataclass
from typing import Optional

from .constants import MIN_ELL


@dataclass
class SearchConfig:
    """Parameters of one search run.

    Args:
        ell: Length of each sequence (Hadamard order is 2 * ell + 2)
        max_time: Wall-clock budget in seconds
        seed: Seed of the random stream
        idle_restart_threshold: Iterations without improvement before a restart
        tenure_multiplier: Tabu tenure as a multiple of ell
        max_solutions: Halt after this many solutions (None: run until max_time)
        check_invariants: Recompute profiles from scratch after every move
        legacy_tabu: Reproduce the original C program: tabu grids are not cleared
            at restart and any aspirating swap replaces the incumbent
    """

    ell: int
    max_time: float
    seed: int
    idle_restart_threshold: int
    tenure_multiplier: float
    max_solutions: Optional[int] = None
    check_invariants: bool = False
    legacy_tabu: bool = False

    def __post_init__(self):
        if self.ell < MIN_ELL:
            raise ValueError(f"ell must be at least {MIN_ELL}, got {self.ell}")
        if self.max_time < 0:
            raise ValueError(f"max_time must be non-negative, got {self.max_time}")
        if self.idle_restart_threshold < 0:
            raise ValueError(
                f"idle_restart_threshold must be non-negative, "
                f"got {self.idle_restart_threshold}"
            )
        if self.tenure_multiplier < 0:
            raise ValueError(
                f"tenure_multiplier must be non-negative, got {self.tenure_multiplier}"
            )
        if self.max_solutions is not None and self.max_solutions < 1:
            raise ValueError(f"max_solutions must be positive, got {self.max_solutions}")

    @property
    def tabu_tenure(self) -> int:
        return int(self.ell * self.tenure_multiplier)

    @property
    def hadamard_order(self) -> int:
        return 2 * self.ell + 2

    def output_name(self, prog: str) -> str:
        """Default solution file name, sol-<prog>-<args>.txt."""
        return (
            f"sol-{prog}-{self.ell}-{self.max_time:g}-{self.seed}-"
            f"{self.idle_restart_threshold}-{self.tenure_multiplier:g}.txt"
        )

"""+1/-1 sequences with a running periodic autocorrelation profile."""

import numpy as np

from .energy import apply_swap, autocorrelation_profile, swap_objective
from .rng import RandomStream


def balance(ell: int) -> int:
    """Sum of a freshly initialized sequence: 1 for odd ell, 0 for even ell."""
    return 2 * ((ell + 1) // 2) - ell


def shuffled_core(ell: int, rng: RandomStream) -> np.ndarray:
    """Random sequence with (ell + 1) // 2 entries +1 and the rest -1.

    Fisher-Yates shuffle from the last index down to 1, drawing every swap
    partner from rng.
    """
    values = np.full(ell, -1, dtype=np.int64)
    values[: (ell + 1) // 2] = 1
    for i in range(ell - 1, 0, -1):
        r = rng.uniform_int(0, i)
        values[i], values[r] = values[r], values[i]
    return values


class CoreSequence:
    """A candidate circulant core together with its autocorrelation profile.

    The profile is computed once from scratch and afterwards only changed by
    swap(), which keeps it equal to a full recomputation.
    """

    def __init__(self, values):
        self.values = np.array(values, dtype=np.int64)
        self.profile = autocorrelation_profile(self.values)

    @classmethod
    def random(cls, ell: int, rng: RandomStream) -> "CoreSequence":
        return cls(shuffled_core(ell, rng))

    @property
    def ell(self) -> int:
        return len(self.values)

    def objective_after_swap(self, other: "CoreSequence", i1: int, i2: int) -> int:
        return swap_objective(self.values, self.profile, other.profile, i1, i2)

    def swap(self, i1: int, i2: int) -> None:
        apply_swap(self.values, self.profile, i1, i2)

    def verify(self) -> None:
        """Assert the balance and profile invariants."""
        total = int(self.values.sum())
        assert total == balance(self.ell), (
            f"Sequence sum {total} != {balance(self.ell)}"
        )
        expected = autocorrelation_profile(self.values)
        assert np.array_equal(self.profile, expected), (
            f"Profile {self.profile.tolist()} diverged from {expected.tolist()}"
        )

    def __repr__(self) -> str:
        return f"CoreSequence({self.values.tolist()})"

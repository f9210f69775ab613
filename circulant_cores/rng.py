"""Deterministic uniform random numbers (L'Ecuyer's MRG32k3a)."""

from .constants import A12, A13N, A21, A23N, M1, M2, NORM


class RandomStream:
    """Combined multiple recursive generator MRG32k3a.

    The whole state is six doubles, all set to the seed. Arithmetic is done in
    double precision exactly as in the reference C generator, so a given seed
    produces a bit-identical stream on every platform.

    Args:
        seed: Integer seed
    """

    def __init__(self, seed: int):
        self.seed = int(seed)
        s = float(self.seed)
        self.s10 = self.s11 = self.s12 = s
        self.s20 = self.s21 = self.s22 = s

    def uniform01(self) -> float:
        """Return the next value in (0, 1)."""
        # Component 1
        p1 = A12 * self.s11 - A13N * self.s10
        k = int(p1 / M1)
        p1 -= k * M1
        if p1 < 0.0:
            p1 += M1
        self.s10, self.s11, self.s12 = self.s11, self.s12, p1

        # Component 2
        p2 = A21 * self.s22 - A23N * self.s20
        k = int(p2 / M2)
        p2 -= k * M2
        if p2 < 0.0:
            p2 += M2
        self.s20, self.s21, self.s22 = self.s21, self.s22, p2

        # Combination
        if p1 <= p2:
            return (p1 - p2 + M1) * NORM
        return (p1 - p2) * NORM

    def uniform_int(self, i: int, j: int) -> int:
        """Uniform random integer in [i, j]."""
        return i + int((j - i + 1.0) * self.uniform01())

    def state(self) -> tuple:
        return (self.s10, self.s11, self.s12, self.s20, self.s21, self.s22)

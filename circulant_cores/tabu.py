"""Tabu memory over position pairs."""

import numpy as np


class TabuMemory:
    """Per-pair cooldown grid.

    table[i1, i2] holds the last iteration at which the swap (i1, i2) is still
    tabu. A zeroed grid forbids nothing because iterations start at 1.

    Args:
        ell: Sequence length
    """

    def __init__(self, ell: int):
        self.table = np.zeros((ell, ell), dtype=np.int64)

    def is_tabu(self, i1: int, i2: int, iteration: int) -> bool:
        return bool(self.table[i1, i2] >= iteration)

    def set_tenure(self, i1: int, i2: int, iteration: int, tenure: int) -> None:
        self.table[i1, i2] = iteration + tenure

    def clear(self) -> None:
        self.table.fill(0)

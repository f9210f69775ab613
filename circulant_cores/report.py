"""Solution output: the solution file sink and its human-readable echo."""

import sys
from pathlib import Path

import numpy as np
import pandas as pd

from .constants import GLYPH_SEPARATOR, SOLUTION_ANNOUNCEMENT
from .energy import core_objective
from .sequence import balance


def format_solution_line(a: np.ndarray, b: np.ndarray) -> str:
    """Comma-joined 1/-1 tokens of a followed by b (no trailing newline)."""
    return ",".join("1" if x == 1 else "-1" for x in list(a) + list(b))


def format_glyphs(a: np.ndarray, b: np.ndarray) -> str:
    """'+'/'-' glyphs of a, three spaces, glyphs of b."""
    glyphs_a = "".join("+" if x == 1 else "-" for x in a)
    glyphs_b = "".join("+" if x == 1 else "-" for x in b)
    return f"{glyphs_a}{GLYPH_SEPARATOR}{glyphs_b}"


class SolutionWriter:
    """Appends solutions to a text file and echoes them to a stream.

    Opening truncates the file. Every line is flushed as soon as it is written
    so that solutions survive an interrupted run.

    Args:
        path: Solution file path
        stream: Human-readable echo stream (default: stdout)
    """

    def __init__(self, path, stream=None):
        self.path = Path(path)
        self.stream = stream if stream is not None else sys.stdout
        self._file = open(self.path, "w")
        self.count = 0

    def emit(self, a: np.ndarray, b: np.ndarray, elapsed: float) -> None:
        self._file.write(format_solution_line(a, b) + "\n")
        self._file.flush()
        self.count += 1
        print(SOLUTION_ANNOUNCEMENT.format(elapsed=elapsed), file=self.stream)
        print(format_glyphs(a, b), file=self.stream)

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


def read_solutions(path) -> list:
    """Read a solution file back into (a, b) pairs of numpy arrays."""
    try:
        df = pd.read_csv(path, header=None)
    except pd.errors.EmptyDataError:
        return []
    rows = df.to_numpy(dtype=np.int64)
    if rows.shape[1] % 2:
        raise ValueError(f"{path}: odd number of tokens per line ({rows.shape[1]})")
    ell = rows.shape[1] // 2
    return [(row[:ell].copy(), row[ell:].copy()) for row in rows]


def check_solution_file(path) -> pd.DataFrame:
    """Recompute every solution in a file from scratch.

    Returns:
        DataFrame with one row per solution: ell, balanced, objective, valid
    """
    records = []
    for a, b in read_solutions(path):
        ell = len(a)
        balanced = int(a.sum()) == balance(ell) and int(b.sum()) == balance(ell)
        objective = core_objective(a, b)
        records.append(
            {
                "ell": ell,
                "balanced": balanced,
                "objective": objective,
                "valid": balanced and objective == 0,
            }
        )
    return pd.DataFrame(records, columns=["ell", "balanced", "objective", "valid"])

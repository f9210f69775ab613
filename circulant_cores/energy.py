"""Periodic autocorrelation objective for pairs of circulant cores."""

import numpy as np


def wrap(index, ell: int):
    """Reduce an index (or index array) into [0, ell), also for negative input."""
    return np.mod(index, ell)


def half_length(ell: int) -> int:
    """Number of distinct periodic autocorrelation shifts, (ell - 1) // 2."""
    return (ell - 1) // 2


def autocorrelation_profile(values: np.ndarray) -> np.ndarray:
    """Compute the periodic autocorrelation profile of a +1/-1 sequence.

    P[s] = sum_i c[i] * c[(i + s) mod ell] for s = 1..(ell-1)//2. The returned
    array is indexed by s - 1.

    Args:
        values: Binary sequence (+1/-1) of length ell

    Returns:
        Integer array of length (ell - 1) // 2
    """
    c = np.asarray(values, dtype=np.int64)
    ell = len(c)
    positions = np.arange(ell)
    profile = np.zeros(half_length(ell), dtype=np.int64)
    for s in range(1, half_length(ell) + 1):
        profile[s - 1] = np.dot(c, c[wrap(positions + s, ell)])
    return profile


def objective_from_profiles(pa: np.ndarray, pb: np.ndarray) -> int:
    """F = sum_s |2 + PA[s] + PB[s]|."""
    return int(np.abs(2 + pa + pb).sum())


def core_objective(a: np.ndarray, b: np.ndarray) -> int:
    """Full O(ell^2) evaluation of the circulant core objective.

    Args:
        a: First sequence (+1/-1)
        b: Second sequence (+1/-1) of the same length

    Returns:
        Non-negative integer, zero exactly when (a, b) is a pair of cores
    """
    if len(a) != len(b):
        raise ValueError(f"Sequence lengths differ: {len(a)} != {len(b)}")
    return objective_from_profiles(
        autocorrelation_profile(a), autocorrelation_profile(b)
    )


def is_circulant_core_pair(a: np.ndarray, b: np.ndarray) -> bool:
    """True if PA[s] + PB[s] == -2 for every shift."""
    return core_objective(a, b) == 0


def swap_terms(values: np.ndarray, i1: int, i2: int) -> np.ndarray:
    """Per-shift products touched by flipping positions i1 < i2.

    Flipping both positions changes P[s] by -2 * tmp[s]. When the positions are
    exactly s apart (directly, or around the wrap) the product linking them
    flips twice and is left out.
    """
    ell = len(values)
    shifts = np.arange(1, half_length(ell) + 1)
    c1 = values[i1]
    c2 = values[i2]
    fwd1 = c1 * values[wrap(i1 + shifts, ell)]
    back1 = values[wrap(i1 - shifts, ell)] * c1
    fwd2 = c2 * values[wrap(i2 + shifts, ell)]
    back2 = values[wrap(i2 - shifts, ell)] * c2
    gap = i2 - i1
    return np.where(
        shifts == gap,
        fwd2 + back1,
        np.where(shifts == ell - gap, fwd1 + back2, fwd1 + back1 + fwd2 + back2),
    )


def swap_objective(
    values: np.ndarray,
    profile: np.ndarray,
    other_profile: np.ndarray,
    i1: int,
    i2: int,
) -> int:
    """Objective after flipping values[i1] and values[i2], without mutating.

    Requires i1 < i2 and values[i1] != values[i2].

    Args:
        values: Sequence being changed
        profile: Its current autocorrelation profile
        other_profile: Profile of the partner sequence (unchanged)
        i1: First position
        i2: Second position

    Returns:
        Candidate total objective F'
    """
    tmp = swap_terms(values, i1, i2)
    return int(np.abs(2 + profile - 2 * tmp + other_profile).sum())


def apply_swap(values: np.ndarray, profile: np.ndarray, i1: int, i2: int) -> None:
    """Flip values[i1] and values[i2] and update the profile in place."""
    if not 0 <= i1 < i2 < len(values):
        raise ValueError(f"Invalid swap positions ({i1}, {i2}) for ell={len(values)}")
    if values[i1] == values[i2]:
        raise ValueError(f"Positions {i1} and {i2} hold the same sign")
    profile -= 2 * swap_terms(values, i1, i2)
    values[i1] = -values[i1]
    values[i2] = -values[i2]

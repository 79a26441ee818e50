"""
Prime generation utilities.

Responsibility: the base sieve only. Primality flags and the ascending prime
list for [0, N). Every derived table is built from this output.
"""

import math

import numpy as np
from numba import njit
from typing import Tuple


def prime_count_bound(N: int) -> int:
    """
    Upper bound on the number of primes below N.

    Uses pi(x) < 1.25506 x / ln(x), rounded down and padded by one.

    Parameters
    ----------
    N : int
        Upper bound (exclusive).

    Returns
    -------
    int
        Capacity large enough for every prime < N. Zero for N <= 1.
    """
    if N <= 1:
        return 0
    return int(1.25 * N / math.log(N)) + 1


@njit
def _linear_sieve_kernel(n, flags, primes):
    """
    Linear sieve: each composite is crossed out exactly once, by its
    smallest prime factor. Returns the number of primes found.
    """
    m = 0
    for i in range(2, n):
        if flags[i]:
            primes[m] = i
            m += 1
        for j in range(m):
            p = primes[j]
            if i * p >= n:
                break
            flags[i * p] = False
            if i % p == 0:
                break
    return m


def linear_sieve(N: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Compute primality flags and the prime list for [0, N).

    Parameters
    ----------
    N : int
        Upper bound (exclusive). Must be >= 0.

    Returns
    -------
    tuple
        (flags, primes). flags is a bool array of length N with flags[i]
        True iff i is prime. primes is an ascending int64 array of every
        prime < N.
    """
    if N < 0:
        raise ValueError(f"sieve bound must be non-negative, got {N}")

    flags = np.ones(N, dtype=bool)
    flags[:2] = False
    primes = np.zeros(prime_count_bound(N), dtype=np.int64)

    m = _linear_sieve_kernel(N, flags, primes)
    return flags, primes[:m].copy()


def prime_flags_below(N: int) -> np.ndarray:
    """Return boolean array where flags[i] is True iff i is prime, i < N."""
    flags, _ = linear_sieve(N)
    return flags


def primes_below(N: int) -> np.ndarray:
    """Return array of all primes < N."""
    _, primes = linear_sieve(N)
    return primes

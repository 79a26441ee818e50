"""
Factorization utilities.

Responsibility: turning integers into (prime, exponent) pairs by peeling
largest prime factors. This file must not know how the factor table was
built, only that pf[i] is the largest prime dividing i.
"""

import operator

import numpy as np
from typing import Iterable, List, Tuple

FactorPair = Tuple[int, int]


def _peel(n: int, pf: np.ndarray) -> List[int]:
    """Return the prime factors of n with multiplicity, largest first."""
    n = operator.index(n)
    if n <= 0 or n >= len(pf):
        raise ValueError(f"cannot factor {n}: outside (0, {len(pf)})")

    peeled = []
    while n > 1:
        p = int(pf[n])
        peeled.append(p)
        n //= p
    return peeled


def _run_length(sorted_primes: List[int]) -> List[FactorPair]:
    vf = []
    for p in sorted_primes:
        if vf and vf[-1][0] == p:
            vf[-1] = (p, vf[-1][1] + 1)
        else:
            vf.append((p, 1))
    return vf


def factor_integer(n: int, pf: np.ndarray) -> List[FactorPair]:
    """
    Factor n using a largest-prime-factor table.

    Parameters
    ----------
    n : int
        Integer to factor, 0 < n < len(pf).
    pf : np.ndarray
        Largest prime factor array from largest_factor_table.

    Returns
    -------
    list
        (prime, exponent) pairs with primes strictly ascending.
        Empty for n = 1.
    """
    return _run_length(_peel(n, pf)[::-1])


def factor_integers(vn: Iterable[int], pf: np.ndarray) -> List[FactorPair]:
    """
    Factor the product of every integer in vn.

    The primes of all elements are pooled before exponents are counted,
    so factor_integers([4, 6], pf) == [(2, 3), (3, 1)]. Use factor_each
    for a per-element breakdown.

    Parameters
    ----------
    vn : iterable of int
        Integers to factor, each 0 < n < len(pf).
    pf : np.ndarray
        Largest prime factor array.

    Returns
    -------
    list
        (prime, exponent) pairs of the product, primes strictly ascending.
    """
    pooled = []
    for n in vn:
        pooled.extend(_peel(n, pf))
    pooled.sort()
    return _run_length(pooled)


def factor_each(vn: Iterable[int], pf: np.ndarray) -> List[List[FactorPair]]:
    """Factor each integer in vn separately."""
    return [factor_integer(n, pf) for n in vn]


def reconstruct(vf: List[FactorPair]) -> int:
    """Multiply a factorization back out."""
    n = 1
    for p, e in vf:
        n *= p ** e
    return n


def omega(vf: List[FactorPair]) -> int:
    """Count distinct prime factors (little omega)."""
    return len(vf)


def big_omega(vf: List[FactorPair]) -> int:
    """Count prime factors with multiplicity (big Omega)."""
    return sum(e for _, e in vf)


def divisor_count(vf: List[FactorPair]) -> int:
    """Number of divisors: product of (exponent + 1)."""
    count = 1
    for _, e in vf:
        count *= e + 1
    return count

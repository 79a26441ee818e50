"""
Derived tables over [0, N).

Responsibility: the four sieve-derived tables, cleanly separated.
Every builder takes (N, flags, primes) from the base sieve and returns a
fresh array of length N. Builders never look at each other's output.
"""

from enum import Enum

import numpy as np
from numba import njit


class TableKind(Enum):
    """Tag for each derived table the engine can build."""
    LARGEST_FACTOR = 'largest_factor'
    PRIME_PI = 'prime_pi'
    EULER_PHI = 'euler_phi'
    MOEBIUS_MU = 'moebius_mu'


def largest_factor_table(N: int, flags: np.ndarray, primes: np.ndarray) -> np.ndarray:
    """
    Compute the largest prime factor for all integers below N.

    Parameters
    ----------
    N : int
        Upper bound (exclusive).
    flags : np.ndarray
        Primality flags from linear_sieve (unused, kept for a uniform
        builder signature).
    primes : np.ndarray
        Ascending primes < N.

    Returns
    -------
    np.ndarray
        Array where pf[i] is the largest prime dividing i.
        pf[0] = 1, pf[1] = 1, and pf[p] = p for primes.

    Note
    ----
    Primes are visited in ascending order, so the last write to each
    multiple is its largest prime factor.
    """
    pf = np.ones(N, dtype=np.int64)
    for p in primes:
        pf[p::p] = p
    return pf


def prime_pi_table(N: int, flags: np.ndarray, primes: np.ndarray) -> np.ndarray:
    """
    Compute the prime-counting function pi(i) for all i below N.

    pi[i] is the number of primes <= i, so pi[i] - pi[i-1] is 1 exactly
    when i is prime.
    """
    return np.cumsum(flags, dtype=np.int64)


@njit
def _euler_phi_kernel(n, flags, primes, phi):
    for i in range(2, n):
        if flags[i]:
            phi[i] = i - 1
        for j in range(primes.shape[0]):
            p = primes[j]
            if i * p >= n:
                break
            if i % p == 0:
                phi[i * p] = phi[i] * p
                break
            phi[i * p] = phi[i] * (p - 1)


def euler_phi_table(N: int, flags: np.ndarray, primes: np.ndarray) -> np.ndarray:
    """
    Compute Euler's totient for all integers below N.

    Parameters
    ----------
    N : int
        Upper bound (exclusive).
    flags : np.ndarray
        Primality flags from linear_sieve.
    primes : np.ndarray
        Ascending primes < N.

    Returns
    -------
    np.ndarray
        Array where phi[i] counts the integers in [1, i] coprime to i.
        phi[0] = 0 and phi[1] = 1.
    """
    phi = np.zeros(N, dtype=np.int64)
    if N > 1:
        phi[1] = 1
    _euler_phi_kernel(N, flags, primes, phi)
    return phi


@njit
def _moebius_mu_kernel(n, flags, primes, mu):
    for i in range(2, n):
        if flags[i]:
            mu[i] = -1
        for j in range(primes.shape[0]):
            p = primes[j]
            if i * p >= n:
                break
            if i % p == 0:
                mu[i * p] = 0
                break
            mu[i * p] = -mu[i]


def moebius_mu_table(N: int, flags: np.ndarray, primes: np.ndarray) -> np.ndarray:
    """
    Compute the Moebius function for all integers below N.

    Returns
    -------
    np.ndarray
        int8 array with values in {-1, 0, 1}. mu[0] = 0 and mu[1] = 1;
        mu[i] = 0 whenever a squared prime divides i.
    """
    mu = np.zeros(N, dtype=np.int8)
    if N > 1:
        mu[1] = 1
    _moebius_mu_kernel(N, flags, primes, mu)
    return mu


BUILDERS = {
    TableKind.LARGEST_FACTOR: largest_factor_table,
    TableKind.PRIME_PI: prime_pi_table,
    TableKind.EULER_PHI: euler_phi_table,
    TableKind.MOEBIUS_MU: moebius_mu_table,
}


def build_table(kind: TableKind, N: int, flags: np.ndarray, primes: np.ndarray) -> np.ndarray:
    """Build the table for `kind` from the base sieve output."""
    return BUILDERS[kind](N, flags, primes)

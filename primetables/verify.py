"""
Verify sieve tables against brute force.

Compares:
1. Prime flags and prime count against trial division
2. Largest prime factor, pi, totient, and Moebius for every n < N
3. Totient-sum and Moebius-sum identities over divisors
4. Factorization round trips and divisor counts

Run at small N; every check is quadratic or worse.
"""

import math
import time
from typing import List

from .holder import PrimeHolder
from .factorization import reconstruct, divisor_count


def is_prime_trial(n: int) -> bool:
    """Trial division primality test."""
    if n < 2:
        return False
    for d in range(2, math.isqrt(n) + 1):
        if n % d == 0:
            return False
    return True


def prime_factors_trial(n: int) -> List[int]:
    """Prime factors of n with multiplicity, ascending, by trial division."""
    factors = []
    d = 2
    while d * d <= n:
        while n % d == 0:
            factors.append(d)
            n //= d
        d += 1
    if n > 1:
        factors.append(n)
    return factors


def divisors_trial(n: int) -> List[int]:
    """All divisors of n, ascending."""
    return [d for d in range(1, n + 1) if n % d == 0]


def totient_trial(n: int) -> int:
    """Count of k in [1, n] with gcd(k, n) == 1."""
    return sum(1 for k in range(1, n + 1) if math.gcd(k, n) == 1)


def mobius_trial(n: int) -> int:
    """Moebius mu by trial factorization."""
    if n < 1:
        return 0
    factors = prime_factors_trial(n)
    if len(set(factors)) != len(factors):
        return 0
    return -1 if len(factors) % 2 else 1


def _report(name: str, errors: int, total: int, verbose: bool) -> bool:
    if verbose:
        if errors == 0:
            print(f"  ✓ {name}: all {total:,} values match")
        else:
            print(f"  ✗ {name}: {errors:,} mismatches")
    return errors == 0


def verify_primes(holder: PrimeHolder, verbose: bool = True) -> bool:
    """Flags, prime list and prime count agree with trial division."""
    N = holder.size()
    expected = [n for n in range(N) if is_prime_trial(n)]
    errors = sum(1 for n in range(N) if holder.is_prime(n) != is_prime_trial(n))
    if holder.primes().tolist() != expected:
        errors += 1
    if holder.prime_count() != len(expected):
        errors += 1
    return _report('primes', errors, N, verbose)


def verify_tables(holder: PrimeHolder, verbose: bool = True) -> bool:
    """Every derived table agrees with its brute-force definition."""
    N = holder.size()
    errors = 0
    count = 0
    for n in range(N):
        if n >= 1:
            factors = prime_factors_trial(n)
            expected_pf = factors[-1] if factors else 1
            if holder.largest_prime_factor(n) != expected_pf:
                errors += 1
            if holder.totient(n) != totient_trial(n):
                errors += 1
        if holder.mobius(n) != mobius_trial(n):
            errors += 1
        if is_prime_trial(n):
            count += 1
        if holder.prime_pi(n) != count:
            errors += 1
    return _report('derived tables', errors, N, verbose)


def verify_identities(holder: PrimeHolder, verbose: bool = True) -> bool:
    """Sum of phi(d) over d | n is n; sum of mu(d) over d | n is [n == 1]."""
    errors = 0
    for n in range(1, holder.size()):
        ds = divisors_trial(n)
        if sum(holder.totient(d) for d in ds) != n:
            errors += 1
        if sum(holder.mobius(d) for d in ds) != (1 if n == 1 else 0):
            errors += 1
    return _report('divisor-sum identities', errors, max(holder.size() - 1, 0), verbose)


def verify_factorizations(holder: PrimeHolder, verbose: bool = True) -> bool:
    """factor() reconstructs n and divisors() matches trial division."""
    errors = 0
    for n in range(1, holder.size()):
        vf = holder.factor(n)
        primes = [p for p, _ in vf]
        if reconstruct(vf) != n or primes != sorted(set(primes)):
            errors += 1
        ds = holder.divisors(vf)
        if ds.tolist() != divisors_trial(n) or len(ds) != divisor_count(vf):
            errors += 1
    return _report('factorizations', errors, max(holder.size() - 1, 0), verbose)


def verify_all(N: int, verbose: bool = True) -> bool:
    """Build a fresh engine for N and run every check."""
    if verbose:
        print(f"\n=== Verifying tables for N={N:,} ===")

    t0 = time.time()
    holder = PrimeHolder(N)
    holder.warm()
    if verbose:
        print(f"  Built all tables in {time.time() - t0:.2f}s")

    results = [
        verify_primes(holder, verbose),
        verify_tables(holder, verbose),
        verify_identities(holder, verbose),
        verify_factorizations(holder, verbose),
    ]
    return all(results)


if __name__ == '__main__':
    for N in [0, 1, 2, 20, 1000]:
        ok = verify_all(N)
        assert ok, f"Verification failed for N={N}"

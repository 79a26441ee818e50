"""
Lazily built, shared sieve tables for [0, N).

Responsibility: owning every table for one bound N, building each at most
once on first use, and bounds-checking every lookup.

Tables are either absent (not built) or a complete read-only array of
length N. A builder runs to completion before its result is cached, so an
exception during a build leaves nothing behind.

Not thread-safe on first access. Call warm() before sharing an engine
across threads; built tables are read-only and safe to share.
"""

import operator
import time

import numpy as np
from typing import Dict, Iterable, List, Optional, Tuple

from .primes import linear_sieve
from .tables import TableKind, build_table
from .factorization import FactorPair, factor_integer, factor_integers, factor_each
from .divisors import divisors as expand_divisors


def _frozen(arr: np.ndarray) -> np.ndarray:
    arr.setflags(write=False)
    return arr


def _is_factorization(x) -> bool:
    if isinstance(x, np.ndarray):
        return x.ndim == 2
    return len(x) > 0 and all(isinstance(item, (tuple, list)) for item in x)


class PrimeHolder:
    """
    Sieve engine bound to the range [0, N).

    Parameters
    ----------
    N : int
        Upper bound (exclusive). N = 0 and N = 1 give empty tables.
    verbose : bool
        Print a line with timing each time a table is built.
    """

    def __init__(self, N: int, verbose: bool = False):
        N = operator.index(N)
        if N < 0:
            raise ValueError(f"N must be non-negative, got {N}")
        self._N = N
        self.verbose = verbose
        self._sieve: Optional[Tuple[np.ndarray, np.ndarray]] = None
        self._tables: Dict[TableKind, np.ndarray] = {}

    def __len__(self) -> int:
        return self._N

    def __repr__(self) -> str:
        built = [kind.value for kind in TableKind if kind in self._tables]
        return f"PrimeHolder(N={self._N}, sieved={self._sieve is not None}, built={built})"

    # ========== Base sieve ==========

    def _ensure_sieve(self) -> Tuple[np.ndarray, np.ndarray]:
        if self._sieve is None:
            t0 = time.time()
            flags, primes = linear_sieve(self._N)
            self._sieve = (_frozen(flags), _frozen(primes))
            if self.verbose:
                print(f"    Sieved N={self._N:,}: {len(primes):,} primes in {time.time() - t0:.2f}s")
        return self._sieve

    def size(self) -> int:
        """Return N."""
        return self._N

    def prime_count(self) -> int:
        """Number of primes < N."""
        return len(self.primes())

    def flags(self) -> np.ndarray:
        """Read-only primality flags for [0, N)."""
        return self._ensure_sieve()[0]

    def primes(self) -> np.ndarray:
        """Read-only ascending array of primes < N."""
        return self._ensure_sieve()[1]

    # ========== Derived tables ==========

    def table(self, kind: TableKind) -> np.ndarray:
        """
        Return the table for `kind`, building it on first access.

        Parameters
        ----------
        kind : TableKind
            Which derived table.

        Returns
        -------
        np.ndarray
            Read-only array of length N.
        """
        kind = TableKind(kind)
        if kind not in self._tables:
            flags, primes = self._ensure_sieve()
            t0 = time.time()
            arr = build_table(kind, self._N, flags, primes)
            self._tables[kind] = _frozen(arr)
            if self.verbose:
                print(f"    Built {kind.value} table for N={self._N:,} in {time.time() - t0:.2f}s")
        return self._tables[kind]

    def is_built(self, kind: TableKind) -> bool:
        """True once the table for `kind` has been built."""
        return TableKind(kind) in self._tables

    def warm(self, kinds: Optional[Iterable[TableKind]] = None) -> None:
        """Build the given tables (all of them by default) ahead of use."""
        self._ensure_sieve()
        for kind in (TableKind if kinds is None else kinds):
            self.table(kind)

    def largest_factors(self) -> np.ndarray:
        return self.table(TableKind.LARGEST_FACTOR)

    def prime_pis(self) -> np.ndarray:
        return self.table(TableKind.PRIME_PI)

    def totients(self) -> np.ndarray:
        return self.table(TableKind.EULER_PHI)

    def moebius(self) -> np.ndarray:
        return self.table(TableKind.MOEBIUS_MU)

    # ========== Bounds-checked lookups ==========

    @staticmethod
    def _at(arr: np.ndarray, i: int, what: str):
        i = operator.index(i)
        if i < 0 or i >= len(arr):
            raise IndexError(f"{what} index {i} out of range [0, {len(arr)})")
        return arr[i]

    def is_prime(self, i: int) -> bool:
        return bool(self._at(self.flags(), i, 'is_prime'))

    def prime_at(self, rank: int) -> int:
        """The prime at position `rank` (0-based) in ascending order."""
        return int(self._at(self.primes(), rank, 'prime_at'))

    def largest_prime_factor(self, i: int) -> int:
        return int(self._at(self.largest_factors(), i, 'largest_prime_factor'))

    def prime_pi(self, i: int) -> int:
        return int(self._at(self.prime_pis(), i, 'prime_pi'))

    def totient(self, i: int) -> int:
        return int(self._at(self.totients(), i, 'totient'))

    def mobius(self, i: int) -> int:
        return int(self._at(self.moebius(), i, 'mobius'))

    # ========== Factorization and divisors ==========

    def factor(self, n) -> List[FactorPair]:
        """
        Factor an integer, or the product of a batch of integers.

        Parameters
        ----------
        n : int or iterable of int
            A single integer 0 < n < N, or a batch of them. For a batch the
            primes of every element are pooled: the result is the
            factorization of the product, not a per-element breakdown.

        Returns
        -------
        list
            (prime, exponent) pairs, primes strictly ascending.
        """
        pf = self.largest_factors()
        if isinstance(n, (list, tuple, np.ndarray)):
            return factor_integers(n, pf)
        return factor_integer(n, pf)

    def factor_each(self, vn: Iterable[int]) -> List[List[FactorPair]]:
        """Factor each integer of a batch separately."""
        return factor_each(vn, self.largest_factors())

    def divisors(self, x, max_divisor: Optional[int] = None, dtype=np.int64) -> np.ndarray:
        """
        Enumerate divisors, ascending, optionally capped at max_divisor.

        Parameters
        ----------
        x : int, list of int, or list of (prime, exponent)
            An integer is factored first. A list of integers is factored
            as a batch (divisors of their product). A list of pairs is
            used as a factorization directly.
        max_divisor : int, optional
            Keep only divisors <= max_divisor. None or 0 means no cap.
        dtype : numpy dtype, optional
            Element type for the products; see divisors.divisors.

        Returns
        -------
        np.ndarray
            Sorted divisors with no duplicates.
        """
        if isinstance(x, (list, tuple, np.ndarray)) and _is_factorization(x):
            vf = [(int(p), int(e)) for p, e in x]
        else:
            vf = self.factor(x)
        return expand_divisors(vf, max_divisor, dtype)

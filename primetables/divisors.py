"""
Divisor enumeration from prime-power factorizations.

Responsibility: expanding (prime, exponent) pairs into sorted divisor
arrays, optionally capped. Knows nothing about sieves.

Overflow note: products are formed in the requested dtype. The caller must
choose a dtype wide enough for the largest divisor produced. For a single
n < N that is n itself; for a batch it is the product of the batch, which
can reach N**k for k elements. np.int64 covers N up to about 3e9 for
single integers. dtype=object uses Python ints and cannot overflow.
"""

import numpy as np
from typing import List, Optional, Tuple


def divisors(vf: List[Tuple[int, int]], max_divisor: Optional[int] = None,
             dtype=np.int64) -> np.ndarray:
    """
    Enumerate every divisor of the integer represented by vf.

    Parameters
    ----------
    vf : list
        (prime, exponent) pairs, e.g. from factor_integer.
    max_divisor : int, optional
        Keep only divisors <= max_divisor. None or 0 means no cap.
    dtype : numpy dtype, optional
        Element type of the result. Multiplication is done in this type.

    Returns
    -------
    np.ndarray
        Ascending array of divisors with no duplicates. Always contains 1.
    """
    if max_divisor is not None and max_divisor < 0:
        raise ValueError(f"max_divisor must be non-negative, got {max_divisor}")
    capped = bool(max_divisor)
    scalar = np.dtype(dtype).type

    vd = np.ones(1, dtype=dtype)

    for p, e in vf:
        if e < 1:
            raise ValueError(f"exponent of {p} must be >= 1, got {e}")
        p = scalar(p)
        parts = [vd]
        power = vd
        for _ in range(e):
            power = power * p
            if capped:
                power = power[power <= max_divisor]
                if len(power) == 0:
                    break
            parts.append(power)
        vd = np.concatenate(parts)

    return np.unique(vd)

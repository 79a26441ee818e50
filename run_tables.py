#!/usr/bin/env python3
"""
Build sieve tables and report on them.

Usage:
    python run_tables.py
    python run_tables.py --config config/custom.yaml
    python run_tables.py --N 100000 --verify
"""

import argparse
import time
from pathlib import Path

from primetables.config import load_config, validate_config
from primetables.holder import PrimeHolder
from primetables.tables import TableKind
from primetables.export import save_tables
from primetables.verify import verify_all

VERIFY_LIMIT = 2000


def main():
    parser = argparse.ArgumentParser(description='Build sieve tables over [0, N)')
    parser.add_argument('--config', type=str, default='config/default.yaml',
                        help='Path to config file')
    parser.add_argument('--N', type=int, default=None,
                        help='Override the sieve bound from the config')
    parser.add_argument('--verify', action='store_true',
                        help='Cross-check tables against trial division')
    parser.add_argument('--no-export', action='store_true',
                        help='Skip writing CSV files')
    args = parser.parse_args()

    config = load_config(args.config)
    if args.N is not None:
        config['N'] = args.N
        config['sample'] = [n for n in config['sample'] if n < args.N]
    if args.verify:
        config['verify'] = True
    validate_config(config)

    N = config['N']
    kinds = [TableKind(name) for name in config['tables']]

    print("=" * 60)
    print("Sieve Tables")
    print("=" * 60)
    print(f"\nConfiguration:")
    print(f"  N = {N:,}")
    print(f"  tables = {config['tables']}")
    print(f"  sample = {config['sample']}")
    print(f"  max_divisor = {config['max_divisor']}")
    print()

    total_start = time.time()

    # 1. Build tables
    print("-" * 60)
    print("1. Building tables")
    print("-" * 60)
    holder = PrimeHolder(N, verbose=True)
    holder.warm(kinds)
    print(f"   {holder.prime_count():,} primes below {N:,}")
    if holder.prime_count() > 0:
        print(f"   largest prime: {holder.prime_at(holder.prime_count() - 1):,}")
    print()

    # 2. Sample factorizations
    print("-" * 60)
    print("2. Sample factorizations")
    print("-" * 60)
    for n in config['sample']:
        vf = holder.factor(n)
        ds = holder.divisors(vf, config['max_divisor'])
        shown = ' * '.join(f"{p}^{e}" if e > 1 else str(p) for p, e in vf) or '1'
        print(f"  {n:,} = {shown}")
        print(f"    phi = {holder.totient(n):,}, mu = {holder.mobius(n)}, "
              f"pi = {holder.prime_pi(n):,}, divisors listed = {len(ds):,}")
    print()

    # 3. Verification (small N only)
    if config['verify']:
        print("-" * 60)
        print("3. Verification")
        print("-" * 60)
        verify_N = min(N, VERIFY_LIMIT)
        if verify_N < N:
            print(f"  Verifying a prefix: N={verify_N:,} (trial division is slow)")
        ok = verify_all(verify_N)
        print(f"  {'PASSED' if ok else 'FAILED'}")
        print()

    # 4. Export
    if not args.no_export:
        print("-" * 60)
        print("4. Writing CSV files")
        print("-" * 60)
        output_dir = Path(config['output_dir'])
        for path in save_tables(holder, output_dir, kinds):
            print(f"  - {path}")
        print()

    total_time = time.time() - total_start
    print("=" * 60)
    print("COMPLETE")
    print("=" * 60)
    print(f"\nTotal runtime: {total_time:.1f}s")


if __name__ == '__main__':
    main()

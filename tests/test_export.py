"""
Tests for DataFrame and CSV export of tables.
"""

import pandas as pd
import pytest

from primetables.holder import PrimeHolder
from primetables.tables import TableKind
from primetables.export import tables_frame, save_tables


class TestTablesFrame:

    def test_all_columns(self):
        df = tables_frame(PrimeHolder(20))
        assert list(df.columns) == ['n', 'is_prime', 'largest_factor', 'prime_pi',
                                    'euler_phi', 'moebius_mu']
        assert len(df) == 20

    def test_values_for_twelve(self):
        row = tables_frame(PrimeHolder(20)).iloc[12]
        assert row['n'] == 12
        assert not row['is_prime']
        assert row['largest_factor'] == 3
        assert row['prime_pi'] == 5
        assert row['euler_phi'] == 4
        assert row['moebius_mu'] == 0

    def test_subset_builds_only_requested(self):
        holder = PrimeHolder(50)
        df = tables_frame(holder, [TableKind.EULER_PHI])
        assert list(df.columns) == ['n', 'is_prime', 'euler_phi']
        assert not holder.is_built(TableKind.MOEBIUS_MU)

    def test_empty_range(self):
        df = tables_frame(PrimeHolder(0))
        assert len(df) == 0


class TestSaveTables:

    def test_writes_csv_files(self, tmp_path):
        holder = PrimeHolder(30)
        out = tmp_path / "results"
        paths = save_tables(holder, out)

        assert [p.name for p in paths] == ['tables.csv', 'primes.csv']
        assert all(p.exists() for p in paths)

        df = pd.read_csv(out / 'tables.csv')
        assert len(df) == 30
        assert df['euler_phi'].tolist() == holder.totients().tolist()

        primes = pd.read_csv(out / 'primes.csv')
        assert primes['prime'].tolist() == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


if __name__ == '__main__':
    pytest.main([__file__, '-v'])

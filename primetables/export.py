"""
Table export.

Responsibility: turning built tables into DataFrames and CSV files.
"""

import numpy as np
import pandas as pd
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .holder import PrimeHolder
from .tables import TableKind


def tables_frame(holder: PrimeHolder,
                 kinds: Optional[Iterable[TableKind]] = None) -> pd.DataFrame:
    """
    Collect tables into one DataFrame indexed by n.

    Parameters
    ----------
    holder : PrimeHolder
        Engine to read from. Missing tables are built.
    kinds : iterable of TableKind, optional
        Tables to include. Defaults to all.

    Returns
    -------
    pd.DataFrame
        Columns n, is_prime, then one column per table (named by its
        TableKind value). One row per n in [0, N).
    """
    kinds = list(TableKind) if kinds is None else [TableKind(k) for k in kinds]

    columns = {
        'n': np.arange(holder.size(), dtype=np.int64),
        'is_prime': holder.flags(),
    }
    for kind in kinds:
        columns[kind.value] = holder.table(kind)
    return pd.DataFrame(columns)


def save_tables(holder: PrimeHolder, output_dir: Union[str, Path],
                kinds: Optional[Iterable[TableKind]] = None) -> List[Path]:
    """
    Write tables.csv and primes.csv into output_dir.

    Returns
    -------
    list
        Paths of the written files.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    tables_path = output_dir / 'tables.csv'
    tables_frame(holder, kinds).to_csv(tables_path, index=False)

    primes_path = output_dir / 'primes.csv'
    pd.DataFrame({'prime': holder.primes()}).to_csv(primes_path, index=False)

    return [tables_path, primes_path]

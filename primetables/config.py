"""
Run configuration.

Responsibility: reading the YAML config for run_tables.py and checking it
before any sieving starts.
"""

import copy

import yaml
from pathlib import Path
from typing import Any, Dict, Union

from .tables import TableKind

DEFAULTS: Dict[str, Any] = {
    'N': 10**6,
    'tables': [kind.value for kind in TableKind],
    'sample': [12, 360, 997, 5040],
    'max_divisor': None,
    'verify': False,
    'output_dir': 'data/results',
}


def validate_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Check a merged config dict, raising ValueError on the first problem.

    Parameters
    ----------
    config : dict
        Config with every key in DEFAULTS present.

    Returns
    -------
    dict
        The same dict, for chaining.
    """
    unknown = set(config) - set(DEFAULTS)
    if unknown:
        raise ValueError(f"Unknown config keys: {sorted(unknown)}")

    N = config['N']
    if not isinstance(N, int) or isinstance(N, bool) or N < 0:
        raise ValueError(f"N must be a non-negative integer, got {N!r}")

    valid_tables = {kind.value for kind in TableKind}
    bad = [name for name in config['tables'] if name not in valid_tables]
    if bad:
        raise ValueError(f"Unknown tables {bad}; expected some of {sorted(valid_tables)}")

    for n in config['sample']:
        if not isinstance(n, int) or not 0 < n < N:
            raise ValueError(f"sample value {n!r} must be an integer in (0, {N})")

    max_divisor = config['max_divisor']
    if max_divisor is not None and (not isinstance(max_divisor, int) or max_divisor < 0):
        raise ValueError(f"max_divisor must be null or a non-negative integer, got {max_divisor!r}")

    return config


def load_config(path: Union[str, Path, None] = None) -> Dict[str, Any]:
    """
    Load a YAML config and merge it over DEFAULTS.

    Parameters
    ----------
    path : str or Path, optional
        Config file. None returns a copy of DEFAULTS.

    Returns
    -------
    dict
        Validated config.
    """
    config = copy.deepcopy(DEFAULTS)
    if path is not None:
        with open(path) as f:
            loaded = yaml.safe_load(f) or {}
        if not isinstance(loaded, dict):
            raise ValueError(f"{path}: expected a mapping at top level")
        config.update(loaded)
    return validate_config(config)

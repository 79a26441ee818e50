"""
Tests for YAML config loading and validation.
"""

from pathlib import Path

import pytest
import yaml

from primetables.config import DEFAULTS, load_config, validate_config

DEFAULT_CONFIG = Path(__file__).parent.parent / "config" / "default.yaml"


def write_config(tmp_path, data):
    path = tmp_path / "config.yaml"
    with open(path, 'w') as f:
        yaml.safe_dump(data, f)
    return path


class TestLoadConfig:

    def test_no_path_gives_defaults(self):
        config = load_config()
        assert config == DEFAULTS
        assert config is not DEFAULTS

    def test_defaults_not_shared(self):
        config = load_config()
        config['tables'].append('bogus')
        assert 'bogus' not in DEFAULTS['tables']

    def test_shipped_default_config(self):
        config = load_config(DEFAULT_CONFIG)
        assert config['N'] == 10**6
        assert 720720 in config['sample']
        assert config['max_divisor'] is None

    def test_file_overrides_defaults(self, tmp_path):
        path = write_config(tmp_path, {'N': 500, 'sample': [12], 'max_divisor': 4})
        config = load_config(path)
        assert config['N'] == 500
        assert config['sample'] == [12]
        assert config['max_divisor'] == 4
        assert config['tables'] == DEFAULTS['tables']

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == DEFAULTS

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_non_mapping_rejected(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ValueError):
            load_config(path)


class TestValidateConfig:

    def _config(self, **overrides):
        config = dict(DEFAULTS)
        config.update(overrides)
        return config

    def test_unknown_key(self):
        with pytest.raises(ValueError, match="Unknown config keys"):
            validate_config(self._config(colour='red'))

    @pytest.mark.parametrize("N", [-1, 2.5, "100", True])
    def test_bad_N(self, N):
        with pytest.raises(ValueError):
            validate_config(self._config(N=N, sample=[]))

    def test_unknown_table(self):
        with pytest.raises(ValueError, match="Unknown tables"):
            validate_config(self._config(tables=['prime_pi', 'sigma']))

    @pytest.mark.parametrize("n", [0, 100, -3])
    def test_sample_outside_range(self, n):
        with pytest.raises(ValueError):
            validate_config(self._config(N=100, sample=[n]))

    def test_negative_max_divisor(self):
        with pytest.raises(ValueError):
            validate_config(self._config(max_divisor=-1))

    def test_zero_N_with_empty_sample(self):
        config = validate_config(self._config(N=0, sample=[]))
        assert config['N'] == 0


if __name__ == '__main__':
    pytest.main([__file__, '-v'])

#!/usr/bin/env python3
"""
Tests for export configuration layering.
"""

import json
from pathlib import Path

import pytest

from tsexport.config import BASE_PATH, EXTENSION, ConfigurationError, ExportConfig


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Clear TSEXPORT_* variables so the host environment cannot leak in."""
    for var in ('TSEXPORT_BASE_PATH', 'TSEXPORT_EXTENSION', 'TSEXPORT_DATA_DIR'):
        monkeypatch.delenv(var, raising=False)


# =============================================================================
# EXPORTCONFIG TESTS
# =============================================================================

class TestExportConfig:
    """Tests for ExportConfig layering and serialization."""

    def test_defaults(self):
        """Without file or environment, the hardcoded defaults apply."""
        config = ExportConfig({})

        assert config.base_path == BASE_PATH == 'inst/extdata/'
        assert config.extension == EXTENSION == '.csv'
        assert config.data_dir is None

    def test_environment_overrides_defaults(self, monkeypatch, tmp_path):
        """TSEXPORT_* variables replace the defaults."""
        monkeypatch.setenv('TSEXPORT_BASE_PATH', 'out/')
        monkeypatch.setenv('TSEXPORT_DATA_DIR', str(tmp_path))

        config = ExportConfig({})

        assert config.base_path == 'out/'
        assert config.require_data_dir() == tmp_path

    def test_file_overrides_environment(self, monkeypatch):
        """config.json values win over environment variables."""
        monkeypatch.setenv('TSEXPORT_EXTENSION', '.tsv')

        config = ExportConfig({'extension': '.txt'})

        assert config.extension == '.txt'

    def test_load_from_file(self, tmp_path):
        """The 'export' section of the config file is read."""
        config_file = tmp_path / 'config.json'
        config_file.write_text(json.dumps({
            'export': {'base_path': 'exports/', 'data_dir': '/data/ts'}
        }))

        config = ExportConfig.load(config_file)

        assert config.base_path == 'exports/'
        assert config.extension == '.csv'
        assert config.data_dir == Path('/data/ts')

    def test_unreadable_file_falls_back_to_defaults(self, tmp_path):
        """A corrupt config file is ignored."""
        config_file = tmp_path / 'config.json'
        config_file.write_text('{not json')

        config = ExportConfig.load(config_file)

        assert config.base_path == BASE_PATH

    def test_missing_file_falls_back_to_defaults(self, tmp_path):
        """A missing config file is ignored."""
        config = ExportConfig.load(tmp_path / 'absent.json')

        assert config.to_dict() == {'base_path': BASE_PATH, 'extension': EXTENSION}

    def test_require_data_dir_raises(self):
        """require_data_dir() raises when unset."""
        with pytest.raises(ConfigurationError):
            ExportConfig({}).require_data_dir()

    def test_to_dict_round_trips(self):
        """to_dict() output rebuilds an equal config."""
        original = ExportConfig({'base_path': 'a/', 'extension': '.csv', 'data_dir': '/d'})

        assert ExportConfig(original.to_dict()).to_dict() == original.to_dict()

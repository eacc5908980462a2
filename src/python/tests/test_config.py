"""
===============================================================================
HAMILTON - Configuration Test Suite
===============================================================================
Tests for YAML configuration loading, validation of sections and keys, and
logging setup.
===============================================================================
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import logging

import pytest

from hamilton import config as config_module
from hamilton.config import (
    FormattingConfig,
    HamiltonConfig,
    LoggingConfig,
    load_config,
    setup_logging,
)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def write_yaml(tmp_path):
    """Return a helper that writes YAML text to a temporary file."""
    def _write(text):
        path = tmp_path / "hamilton.yaml"
        path.write_text(text)
        return path
    return _write


# =============================================================================
# Test: Defaults
# =============================================================================

class TestDefaults:
    """Tests for built-in defaults."""

    def test_default_sections(self):
        """HamiltonConfig() carries default logging and formatting sections."""
        cfg = HamiltonConfig()
        assert cfg.logging == LoggingConfig()
        assert cfg.logging.level == 'INFO'
        assert cfg.formatting.exponent_threshold == 6
        assert cfg.formatting.symbols == ['', 'i', 'j', 'k']

    def test_from_dict_none(self):
        """An empty document gives the defaults."""
        assert HamiltonConfig.from_dict(None) == HamiltonConfig()

    def test_default_file_matches_defaults(self):
        """The shipped config/hamilton.yaml restates the defaults."""
        assert load_config() == HamiltonConfig()

    def test_missing_default_file(self, monkeypatch, tmp_path):
        """Without a default file, load_config() falls back to defaults."""
        monkeypatch.setattr(config_module, 'DEFAULT_CONFIG_PATH', tmp_path / 'absent.yaml')
        assert load_config() == HamiltonConfig()

    def test_symbols_must_have_four_entries(self):
        """A basis needs exactly four symbols."""
        with pytest.raises(ValueError):
            FormattingConfig(symbols=['', 'i'])


# =============================================================================
# Test: Loading YAML
# =============================================================================

class TestLoadConfig:
    """Tests for load_config."""

    def test_load_full(self, write_yaml):
        """All keys are read from the file."""
        path = write_yaml(
            "logging:\n"
            "  level: DEBUG\n"
            "  format: '%(name)s %(message)s'\n"
            "formatting:\n"
            "  exponent_threshold: 21\n"
            "  symbols: ['', 'e1', 'e2', 'e3']\n"
        )
        cfg = load_config(path)
        assert cfg.logging.level == 'DEBUG'
        assert cfg.logging.format == '%(name)s %(message)s'
        assert cfg.formatting.exponent_threshold == 21
        assert cfg.formatting.symbols == ['', 'e1', 'e2', 'e3']

    def test_load_partial(self, write_yaml):
        """Missing sections and keys keep their defaults."""
        cfg = load_config(write_yaml("formatting:\n  exponent_threshold: 8\n"))
        assert cfg.formatting.exponent_threshold == 8
        assert cfg.formatting.symbols == ['', 'i', 'j', 'k']
        assert cfg.logging == LoggingConfig()

    def test_load_empty_file(self, write_yaml):
        """An empty file gives the defaults."""
        assert load_config(write_yaml("")) == HamiltonConfig()

    def test_accepts_str_path(self, write_yaml):
        """A plain string path works too."""
        path = write_yaml("logging:\n  level: WARNING\n")
        assert load_config(str(path)).logging.level == 'WARNING'

    def test_missing_file(self, tmp_path):
        """An explicit path that does not exist raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / 'nope.yaml')

    @pytest.mark.parametrize("text", [
        "- just\n- a list\n",
        "plotting:\n  dpi: 300\n",
        "formatting:\n  precision: 3\n",
        "logging: verbose\n",
    ])
    def test_invalid_documents(self, write_yaml, text):
        """Non-mappings, unknown sections and unknown keys raise ValueError."""
        with pytest.raises(ValueError):
            load_config(write_yaml(text))

    def test_loading_is_logged(self, write_yaml, caplog):
        """Loading a file leaves an INFO record naming it."""
        caplog.set_level(logging.INFO, logger="hamilton.config")
        path = write_yaml("")
        load_config(path)
        assert any(str(path) in rec.getMessage() for rec in caplog.records)


# =============================================================================
# Test: Logging setup
# =============================================================================

class TestSetupLogging:
    """Tests for setup_logging."""

    def test_passes_level_and_format(self, monkeypatch):
        """The logging section is handed to logging.basicConfig."""
        calls = []
        monkeypatch.setattr(logging, 'basicConfig', lambda **kw: calls.append(kw))
        cfg = HamiltonConfig(logging=LoggingConfig(level='debug', format='%(message)s'))
        setup_logging(cfg)
        assert calls == [{'level': 'DEBUG', 'format': '%(message)s'}]

    def test_numeric_level(self, monkeypatch):
        """Numeric levels are passed through unchanged."""
        calls = []
        monkeypatch.setattr(logging, 'basicConfig', lambda **kw: calls.append(kw))
        setup_logging(HamiltonConfig(logging=LoggingConfig(level=logging.WARNING)))
        assert calls[0]['level'] == logging.WARNING

    def test_defaults(self, monkeypatch):
        """Without a configuration the defaults are used."""
        calls = []
        monkeypatch.setattr(logging, 'basicConfig', lambda **kw: calls.append(kw))
        setup_logging()
        assert calls[0]['level'] == 'INFO'
        assert calls[0]['format'] == config_module.DEFAULT_LOG_FORMAT

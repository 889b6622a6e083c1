"""Tests for configuration loading and validation."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from genecache.config import load_config, load_config_with_overrides
from genecache.config.schema import WarmerConfig

DEFAULT_CONFIG = Path(__file__).parent.parent / "config" / "default.yaml"


def test_load_default_config():
    """Shipped default config matches the built-in defaults."""
    config = load_config(DEFAULT_CONFIG)

    assert isinstance(config, WarmerConfig)
    assert config.base_url == "http://dictybase.org"
    assert config.workers == 1
    assert config.http.timeout_seconds == 30
    assert config.log.level == "info"
    assert config.log.format == "json"
    assert config.log.file is None
    assert config.config_hash() == WarmerConfig().config_hash()


def test_load_without_path_uses_defaults():
    assert load_config(None) == WarmerConfig()


def test_empty_file_uses_defaults(tmp_path):
    config_file = tmp_path / "empty.yaml"
    config_file.write_text("")
    assert load_config(config_file) == WarmerConfig()


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_invalid_log_format(tmp_path):
    invalid_config = tmp_path / "invalid.yaml"
    invalid_config.write_text("""
log:
  format: xml
""")

    with pytest.raises(ValidationError) as exc_info:
        load_config(invalid_config)

    assert "format" in str(exc_info.value)


def test_invalid_workers(tmp_path):
    invalid_config = tmp_path / "invalid.yaml"
    invalid_config.write_text("workers: 0\n")

    with pytest.raises(ValidationError):
        load_config(invalid_config)


def test_empty_base_url_rejected():
    with pytest.raises(ValidationError):
        WarmerConfig(base_url="")


def test_log_level_mapping():
    assert WarmerConfig(log={"level": "warn"}).log.numeric_level == 30
    assert WarmerConfig(log={"level": "panic"}).log.numeric_level == 50


def test_config_hash_changes_with_config():
    config1 = WarmerConfig()
    config2 = WarmerConfig(base_url="http://example.test")

    assert config1.config_hash() == WarmerConfig().config_hash()
    assert config1.config_hash() != config2.config_hash()
    assert len(config1.config_hash()) == 64


def test_overrides_applied(tmp_path):
    """Dotted overrides reach nested models; None values are skipped."""
    config_file = tmp_path / "config.yaml"
    config_file.write_text("""
base_url: http://file.test
log:
  level: debug
""")

    config = load_config_with_overrides(config_file, {
        "base_url": "http://cli.test",
        "workers": 4,
        "log.format": "text",
        "log.level": None,
    })

    assert config.base_url == "http://cli.test"
    assert config.workers == 4
    assert config.log.format == "text"
    assert config.log.level == "debug"


def test_overrides_revalidated():
    with pytest.raises(ValidationError):
        load_config_with_overrides(None, {"log.level": "loud"})

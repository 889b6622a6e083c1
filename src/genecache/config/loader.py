"""Configuration loading with YAML parsing and validation."""

from pathlib import Path
from typing import Any, Optional

import pydantic_yaml

from .schema import WarmerConfig


def load_config(config_path: Optional[Path | str] = None) -> WarmerConfig:
    """
    Load and validate warmer configuration from a YAML file.

    Args:
        config_path: Path to YAML configuration file. None returns the
            built-in defaults.

    Returns:
        Validated WarmerConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        pydantic.ValidationError: If config is invalid
    """
    if config_path is None:
        return WarmerConfig()

    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        yaml_content = f.read()

    # An empty file means "all defaults"
    if not yaml_content.strip():
        return WarmerConfig()

    return pydantic_yaml.parse_yaml_raw_as(WarmerConfig, yaml_content)


def load_config_with_overrides(
    config_path: Optional[Path | str],
    overrides: dict[str, Any],
) -> WarmerConfig:
    """
    Load config from YAML and apply dictionary overrides.

    Used for CLI flags that override config file values. Overrides whose
    value is None are skipped, so unset flags keep the file value.

    Args:
        config_path: Path to YAML configuration file, or None for defaults
        overrides: Dictionary of values to override (dotted keys for nesting)

    Returns:
        Validated WarmerConfig with overrides applied

    Raises:
        FileNotFoundError: If config file doesn't exist
        pydantic.ValidationError: If final config is invalid
    """
    config_dict = load_config(config_path).model_dump()
    _merge_into(config_dict, _nest_overrides(overrides))
    return WarmerConfig.model_validate(config_dict)


def _nest_overrides(overrides: dict[str, Any]) -> dict[str, Any]:
    """Turn {"log.level": "debug"} into {"log": {"level": "debug"}}, dropping unset flags."""
    nested: dict[str, Any] = {}
    for dotted_key, value in overrides.items():
        if value is None:
            continue
        *sections, field_name = dotted_key.split(".")
        node = nested
        for section in sections:
            node = node.setdefault(section, {})
        node[field_name] = value
    return nested


def _merge_into(base: dict[str, Any], updates: dict[str, Any]) -> None:
    """Recursively overlay updates onto base, section by section."""
    for name, value in updates.items():
        current = base.get(name)
        if isinstance(value, dict) and isinstance(current, dict):
            _merge_into(current, value)
        else:
            base[name] = value

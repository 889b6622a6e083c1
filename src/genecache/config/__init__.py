from .loader import load_config, load_config_with_overrides
from .schema import WarmerConfig, HTTPConfig, LogConfig, LOG_LEVELS, DEFAULT_BASE_URL

__all__ = [
    "load_config",
    "load_config_with_overrides",
    "WarmerConfig",
    "HTTPConfig",
    "LogConfig",
    "LOG_LEVELS",
    "DEFAULT_BASE_URL",
]

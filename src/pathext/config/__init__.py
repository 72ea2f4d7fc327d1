"""Configuration loading for the pathext command line tool."""

from .config import Config, ConfigError, ConfigParseError, ConfigValidationError
from .paths import default_config_path, resolve_overridable_path

__all__ = [
    "Config",
    "ConfigError",
    "ConfigParseError",
    "ConfigValidationError",
    "default_config_path",
    "resolve_overridable_path",
]

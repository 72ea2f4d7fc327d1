"""Configuration management for pathext.

The TOML file only supplies defaults for the command line tool; the library
functions never read it.
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from pathext.config.paths import default_config_path, log_file_override
from pathext.platform.logging import logger

_LOG_LEVELS: frozenset[str] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the TOML document cannot be parsed."""


class ConfigValidationError(ConfigError):
    """Raised when the parsed document is semantically invalid."""


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects converted in ``__post_init__``."""

    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Runtime defaults for the ``pathext`` command line tool."""

    # Optional rotating log file
    log_file: Path | None = _path_field()

    # Console log level name
    log_level: str = "INFO"

    # Walk defaults
    follow_links: bool = False
    max_depth: int | None = None
    sort_entries: bool = True
    exclude: list[str] = field(default_factory=list)

    _instance: ClassVar[Config | None] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)

        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise ConfigValidationError(f"Unknown log_level '{self.log_level}'")
        if self.max_depth is not None and self.max_depth < 0:
            raise ConfigValidationError("max_depth must not be negative")

    @property
    def console_level(self) -> int:
        """The ``logging`` level matching ``log_level``."""

        return logging.getLevelNamesMapping()[self.log_level]

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Config:
        """Build a configuration from a parsed TOML document.

        Raises:
            ConfigValidationError: On unknown keys or mistyped values.
        """
        known = {f.name: f for f in fields(cls)}
        unknown = sorted(set(data) - set(known))
        if unknown:
            raise ConfigValidationError(f"Unknown configuration keys: {', '.join(unknown)}")

        values: dict[str, Any] = dict(data)
        _expect(values, "log_file", str)
        _expect(values, "log_level", str)
        _expect(values, "follow_links", bool)
        _expect(values, "sort_entries", bool)
        _expect(values, "max_depth", int)
        if isinstance(values.get("max_depth"), bool):
            raise ConfigValidationError("max_depth must be an integer")

        exclude = values.get("exclude")
        if exclude is not None:
            if not isinstance(exclude, list) or not all(isinstance(item, str) for item in exclude):
                raise ConfigValidationError("exclude must be a list of strings")
            values["exclude"] = list(exclude)

        return cls(**values)

    @classmethod
    def load(cls, config_file: Path | None = None) -> Config:
        """Load configuration, caching the first result.

        A missing file yields defaults; the file is never created. The
        ``PATHEXT_LOG_FILE`` environment variable overrides ``log_file``.

        Args:
            config_file: Explicit file to read. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object.

        Raises:
            ConfigParseError: If the file is not valid TOML.
            ConfigValidationError: If the document holds invalid values.
        """
        if cls._instance is not None and config_file in (None, cls._loaded_from):
            return cls._instance

        source = config_file or default_config_path()
        if source.exists():
            try:
                with open(source, "rb") as handle:
                    data = tomllib.load(handle)
            except tomllib.TOMLDecodeError as exc:
                logger.error("Failed to parse configuration %s: %s", source, exc)
                raise ConfigParseError(f"Invalid TOML in {source}: {exc}") from exc
            instance = cls.from_mapping(data)
            logger.debug("Configuration loaded from %s", source)
        else:
            instance = cls()
            logger.debug("No configuration at %s; using defaults", source)

        override = log_file_override()
        if override is not None:
            instance.log_file = override

        cls._instance = instance
        cls._loaded_from = source
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached configuration."""

        cls._instance = None
        cls._loaded_from = None


def _expect(values: Mapping[str, Any], key: str, expected: type) -> None:
    value = values.get(key)
    if value is not None and not isinstance(value, expected):
        raise ConfigValidationError(
            f"{key} must be of type {expected.__name__}, got {type(value).__name__}"
        )


__all__ = ["Config", "ConfigError", "ConfigParseError", "ConfigValidationError"]

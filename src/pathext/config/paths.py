"""Shared path utilities for configuration locations.

Policy:
- Config: ``PATHEXT_CONFIG`` when set, otherwise ``./pathext.toml``.
- Log file: ``PATHEXT_LOG_FILE`` when set, otherwise whatever the config says.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Final

ENV_CONFIG_PATH: Final[str] = "PATHEXT_CONFIG"
ENV_LOG_FILE: Final[str] = "PATHEXT_LOG_FILE"
CONFIG_FILE_NAME: Final[str] = "pathext.toml"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a configuration path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = (mapping.get(env_var) or "").strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    return default_factory().expanduser().resolve()


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the path of the TOML config file."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=ENV_CONFIG_PATH,
        default_factory=lambda: Path.cwd() / CONFIG_FILE_NAME,
    )


def log_file_override(env: Mapping[str, str] | None = None) -> Path | None:
    """Return the log file forced through the environment, if any."""

    mapping = env if env is not None else os.environ
    if not (mapping.get(ENV_LOG_FILE) or "").strip():
        return None
    return resolve_overridable_path(
        explicit_path=None,
        env=mapping,
        env_var=ENV_LOG_FILE,
        default_factory=Path.cwd,
    )


__all__ = [
    "CONFIG_FILE_NAME",
    "ENV_CONFIG_PATH",
    "ENV_LOG_FILE",
    "default_config_path",
    "log_file_override",
    "resolve_overridable_path",
]

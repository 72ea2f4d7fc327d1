"""Shared pytest fixtures for pathext tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from pathext.config import Config
from pathext.platform.logging import LOGGER_NAME


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point configuration discovery at an empty temporary location."""

    config_path = tmp_path / "config" / "pathext.toml"
    monkeypatch.setenv("PATHEXT_CONFIG", str(config_path))
    monkeypatch.delenv("PATHEXT_LOG_FILE", raising=False)
    Config.reset()
    try:
        yield config_path
    finally:
        Config.reset()


@pytest.fixture(autouse=True)
def restore_logger_handlers() -> Iterator[None]:
    """Undo handler changes made by ``setup_logger`` during a test."""

    logger = logging.getLogger(LOGGER_NAME)
    original_handlers = list(logger.handlers)
    original_level = logger.level
    try:
        yield None
    finally:
        for handler in list(logger.handlers):
            if handler not in original_handlers:
                handler.close()
        logger.handlers[:] = original_handlers
        logger.setLevel(original_level)


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create a depth-2 tree with five files and two subdirectories.

    Layout::

        tree/
            a.txt
            b.txt
            sub1/c.txt
            sub2/d.txt
            sub2/e.txt
    """

    root = tmp_path / "tree"
    (root / "sub1").mkdir(parents=True)
    (root / "sub2").mkdir()
    for relative in ("a.txt", "b.txt", "sub1/c.txt", "sub2/d.txt", "sub2/e.txt"):
        _ = (root / relative).write_text(relative, encoding="utf-8")
    return root

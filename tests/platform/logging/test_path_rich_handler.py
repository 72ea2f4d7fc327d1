"""Tests for the ``PathRichHandler`` path formatting and logger setup."""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.text import Text

from pathext.platform.logging import PathRichHandler, setup_logger


def _make_handler() -> PathRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return PathRichHandler(console=console)


def _build_record(msg: str = "", **extras: Any) -> logging.LogRecord:
    record = logging.LogRecord(
        name="pathext",
        level=logging.INFO,
        pathname="test",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_format_path_truncates_long_absolute_paths() -> None:
    """Only the trailing segments of deep paths are shown."""

    handler = _make_handler()

    rendered = handler.format_path("/srv/media/library/Show/Season 01/episode.mkv")

    assert rendered.plain == "/…/library/Show/Season 01/episode.mkv"


def test_format_path_relativizes_to_base() -> None:
    handler = _make_handler()

    rendered = handler.format_path("/srv/media/Show/episode.mkv", base="/srv/media")

    assert rendered.plain == "Show/episode.mkv"


def test_format_path_handles_windows_paths() -> None:
    """Backslash paths keep their separators and drive."""

    handler = _make_handler()

    assert handler.format_path("C:\\Movies\\Show\\episode.mkv").plain == "C:\\Movies\\Show\\episode.mkv"
    assert handler.format_path("D:\\archive\\Show", base="D:\\archive").plain == "Show"


def test_format_path_base_itself_is_kept() -> None:
    handler = _make_handler()

    assert handler.format_path("/srv/media", base="/srv/media").plain == "/srv/media"
    assert handler.format_path("", base=None).plain == "."


def test_render_message_formats_path_events() -> None:
    handler = _make_handler()
    record = _build_record(
        path_event="path.reset.remove",
        target_path="/tmp/output",
        entry_kind="directory",
    )

    rendered = handler.render_message(record, "")

    assert isinstance(rendered, Text)
    assert rendered.plain == "🧹 Removed /tmp/output (directory)"


def test_render_message_includes_error_details() -> None:
    handler = _make_handler()
    record = _build_record(
        path_event="path.error",
        target_path="/locked/output",
        error_message="Permission denied",
    )

    rendered = handler.render_message(record, "")

    assert isinstance(rendered, Text)
    assert "Failed /locked/output" in rendered.plain
    assert "(Permission denied)" in rendered.plain


def test_render_message_shows_walk_skips_relative_to_root() -> None:
    """Walk records carry their root, so skipped entries are shown below it."""

    handler = _make_handler()
    record = _build_record(
        path_event="path.walk.skip",
        target_path="/srv/media/library/Show/Season 01/extras",
        base_path="/srv/media/library",
        error_message="Permission denied",
    )

    rendered = handler.render_message(record, "")

    assert isinstance(rendered, Text)
    assert rendered.plain == "↪️ Skipped Show/Season 01/extras (Permission denied)"


def test_render_message_falls_back_for_plain_records() -> None:
    handler = _make_handler()

    rendered = handler.render_message(_build_record("plain message"), "plain message")

    assert isinstance(rendered, Text)
    assert rendered.plain == "plain message"


def test_setup_logger_writes_rotating_file(tmp_path: Path) -> None:
    """A configured log file receives debug records; the console only its level."""

    log_file = tmp_path / "logs" / "pathext.log"
    console_output = StringIO()

    logger = setup_logger(
        log_file=log_file,
        console_level=logging.WARNING,
        console=Console(file=console_output, width=200),
    )
    logger.debug("debug detail")
    logger.warning("careful now")
    for handler in logger.handlers:
        handler.flush()

    content = log_file.read_text(encoding="utf-8")
    assert "DEBUG - debug detail" in content
    assert "WARNING - careful now" in content
    assert "careful now" in console_output.getvalue()
    assert "debug detail" not in console_output.getvalue()


def test_setup_logger_replaces_previous_handlers() -> None:
    logger = setup_logger(console=Console(file=StringIO()))
    logger = setup_logger(console=Console(file=StringIO()))

    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], PathRichHandler)

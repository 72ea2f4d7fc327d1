"""Rich console handler that renders path events compactly."""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class PathRichHandler(RichHandler):
    """Rich handler that highlights filesystem paths carried on log records."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "path.parents.create": ("📁", "cyan"),
        "path.reset.remove": ("🧹", "yellow"),
        "path.reset.complete": ("✅", "green"),
        "path.walk.skip": ("↪️", "yellow"),
        "path.error": ("⛔", "red"),
    }
    _EVENT_LABELS: ClassVar[dict[str, str]] = {
        "path.parents.create": "Created parent directories ",
        "path.reset.remove": "Removed ",
        "path.reset.complete": "Reset directory ",
        "path.walk.skip": "Skipped ",
        "path.error": "Failed ",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def format_path(self, path: str, base: str | None = None) -> Text:
        """Format a path with coloured separators and compact rendering.

        Args:
            path: Absolute or relative path string to format.
            base: Optional base path used to relativize ``path`` when possible.

        Returns:
            Text: Formatted path, truncated to its trailing segments.
        """
        pure_path = self._to_pure_path(path)
        base_path = self._to_pure_path(base) if base else None

        display_path: PurePath = pure_path
        if base_path is not None and pure_path.is_relative_to(base_path):
            relative_path = pure_path.relative_to(base_path)
            if str(relative_path) not in {"", "."}:
                display_path = relative_path

        is_windows = isinstance(display_path, PureWindowsPath)
        separator = "\\" if is_windows else "/"
        anchor = display_path.anchor
        body_parts = [part for part in display_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display = ""
        if anchor:
            display = anchor.rstrip("\\/") + separator if is_windows else separator
        if truncated:
            display += "…"
            if body_parts:
                display += separator
        display += separator.join(body_parts)
        return self._style_path_string(display or ".", separator)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a flavour-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _style_path_string(path_string: str, separator: str) -> Text:
        text = Text()
        separator_chars = {separator}
        if separator == "\\":
            separator_chars.add("/")

        for char in path_string:
            if char in separator_chars or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_path_event(self, record: logging.LogRecord) -> Text | None:
        """Render records tagged with a ``path_event`` extra."""

        event = getattr(record, "path_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        label = self._EVENT_LABELS.get(event)
        if label:
            _ = body.append(label)

        target_path = getattr(record, "target_path", None)
        if target_path:
            _ = body.append_text(
                self.format_path(
                    str(target_path),
                    base=getattr(record, "base_path", None),
                )
            )

        details: list[str] = []
        kind = getattr(record, "entry_kind", None)
        if isinstance(kind, str):
            details.append(kind)
        error_message = getattr(record, "error_message", None)
        if error_message:
            details.append(str(error_message))
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render path events with dedicated styling, other records as usual."""

        event_text = self._render_path_event(record)
        if event_text is not None:
            return event_text
        return super().render_message(record, message)


__all__ = ["PathRichHandler"]

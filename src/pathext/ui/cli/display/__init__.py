"""Display helpers for the CLI."""

from pathext.ui.cli.display.path_display import PathDisplay

__all__ = ["PathDisplay"]

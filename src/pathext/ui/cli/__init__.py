"""Command line interface package."""

from pathext.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]

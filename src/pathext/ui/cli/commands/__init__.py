"""Command execution package for CLI."""

from pathext.ui.cli.commands.executor import CommandExecutor
from pathext.ui.cli.commands.query import InfoCommand, MergeCommand
from pathext.ui.cli.commands.mutate import MkparentsCommand, ResetCommand
from pathext.ui.cli.commands.walk import WalkCommand, build_name_filter

__all__ = [
    "CommandExecutor",
    "InfoCommand",
    "MergeCommand",
    "MkparentsCommand",
    "ResetCommand",
    "WalkCommand",
    "build_name_filter",
]

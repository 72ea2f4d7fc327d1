"""Command line argument parsing package."""

from pathext.ui.cli.args.options import (
    CLIArgs,
    InfoArgs,
    MergeArgs,
    MkparentsArgs,
    ResetArgs,
    WalkArgs,
)
from pathext.ui.cli.args.parser import ArgumentParser

__all__ = [
    "ArgumentParser",
    "CLIArgs",
    "InfoArgs",
    "MergeArgs",
    "MkparentsArgs",
    "ResetArgs",
    "WalkArgs",
]

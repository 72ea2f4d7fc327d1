"""Command line argument options."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True)
class InfoArgs:
    """Command line arguments for the ``info`` subcommand."""

    command: Literal["info"]
    path: str
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class MergeArgs:
    """Command line arguments for the ``merge`` subcommand."""

    command: Literal["merge"]
    base: Path
    append: Path
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class WalkArgs:
    """Command line arguments for the ``walk`` subcommand."""

    command: Literal["walk"]
    root: Path
    exclude: list[str] = field(default_factory=list)
    include_hidden: bool = False
    follow_links: bool = False
    max_depth: int | None = None
    sort: bool = True
    verbose: bool = False
    quiet: bool = False


@final
@dataclass(slots=True)
class ResetArgs:
    """Command line arguments for the ``reset`` subcommand."""

    command: Literal["reset"]
    path: Path
    force: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class MkparentsArgs:
    """Command line arguments for the ``mkparents`` subcommand."""

    command: Literal["mkparents"]
    path: Path
    verbose: bool
    quiet: bool


CLIArgs = InfoArgs | MergeArgs | WalkArgs | ResetArgs | MkparentsArgs

__all__ = ["CLIArgs", "InfoArgs", "MergeArgs", "MkparentsArgs", "ResetArgs", "WalkArgs"]

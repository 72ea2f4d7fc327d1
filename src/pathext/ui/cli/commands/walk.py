"""The ``walk`` command and its name-based entry filter."""

from __future__ import annotations

import fnmatch
from collections.abc import Sequence
from pathlib import Path
from typing import final, override

from pathext.core.filesystem import EntryFilter, walk_dir
from pathext.platform.logging import logger
from pathext.ui.cli.args.options import WalkArgs
from pathext.ui.cli.commands.executor import CommandExecutor


def build_name_filter(
    root: Path,
    patterns: Sequence[str],
    *,
    include_hidden: bool,
) -> EntryFilter:
    """Build a walk filter rejecting hidden names and glob matches below ``root``.

    The root itself is always accepted so a walk started inside a hidden
    directory still lists its contents.
    """

    def _accept(entry: Path) -> bool:
        if entry == root:
            return True
        name = entry.name
        if not include_hidden and name.startswith("."):
            return False
        return not any(fnmatch.fnmatch(name, pattern) for pattern in patterns)

    return _accept


@final
class WalkCommand(CommandExecutor[WalkArgs]):
    """List the entries below a directory."""

    @override
    def execute(self) -> int:
        args = self.args
        entry_filter = build_name_filter(
            args.root,
            args.exclude,
            include_hidden=args.include_hidden,
        )
        logger.debug(
            "Walking %s [exclude=%s, follow_links=%s, max_depth=%s]",
            args.root,
            args.exclude,
            args.follow_links,
            args.max_depth,
        )
        _ = self.display.show_walk(
            walk_dir(
                args.root,
                entry_filter,
                follow_links=args.follow_links,
                max_depth=args.max_depth,
                sort=args.sort,
            ),
            show_summary=args.verbose,
        )
        return 0

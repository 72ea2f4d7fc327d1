"""Commands that change the filesystem: ``reset`` and ``mkparents``."""

from __future__ import annotations

from pathlib import Path
from typing import final, override

from pathext.core.filesystem import create_parent_dir_all, is_dir, is_file, mkdir_after_remove
from pathext.platform.logging import logger
from pathext.ui.cli.args.options import MkparentsArgs, ResetArgs
from pathext.ui.cli.commands.executor import CommandExecutor


def _holds_content(path: Path) -> bool:
    """Return whether resetting ``path`` would delete anything."""

    if is_file(path):
        return True
    if not is_dir(path):
        return False
    try:
        return any(path.iterdir())
    except OSError:
        return True


@final
class ResetCommand(CommandExecutor[ResetArgs]):
    """Recreate a location as an empty directory."""

    @override
    def execute(self) -> int:
        target = self.args.path
        if not self.args.force and _holds_content(target):
            logger.error("Refusing to delete existing content at %s without --force", target)
            return 1

        created = mkdir_after_remove(target)
        if not self.args.quiet:
            self.display.show_path(created)
        return 0


@final
class MkparentsCommand(CommandExecutor[MkparentsArgs]):
    """Create the missing parents of a path."""

    @override
    def execute(self) -> int:
        create_parent_dir_all(self.args.path)
        if not self.args.quiet:
            self.display.show_path(self.args.path.parent)
        return 0

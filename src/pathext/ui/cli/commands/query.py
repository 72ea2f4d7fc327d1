"""Read-only commands: ``info`` and ``merge``."""

from typing import final, override

from pathext.path_ext import PathExt
from pathext.ui.cli.args.options import InfoArgs, MergeArgs
from pathext.ui.cli.commands.executor import CommandExecutor


@final
class InfoCommand(CommandExecutor[InfoArgs]):
    """Show the accessors and type checks of a single path."""

    @override
    def execute(self) -> int:
        self.display.show_info(PathExt(self.args.path))
        return 0


@final
class MergeCommand(CommandExecutor[MergeArgs]):
    """Print ``base`` merged with ``append``."""

    @override
    def execute(self) -> int:
        merged = PathExt(self.args.base).merge(self.args.append)
        self.display.show_path(merged)
        return 0

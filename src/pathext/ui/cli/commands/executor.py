"""src/pathext/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Keep each subcommand focused on the library call it wraps.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pathext.ui.cli.args.options import CLIArgs
from pathext.ui.cli.display import PathDisplay

ArgsT = TypeVar("ArgsT", bound=CLIArgs)


class CommandExecutor(ABC, Generic[ArgsT]):
    """Base class for command execution."""

    args: ArgsT
    display: PathDisplay

    def __init__(self, args: ArgsT, display: PathDisplay | None = None) -> None:
        """Initialize command executor.

        Args:
            args: Parsed command line arguments.
            display: Output renderer. Defaults to a stdout console.
        """
        self.args = args
        self.display = display or PathDisplay()

    @abstractmethod
    def execute(self) -> int:
        """Execute the command.

        Returns:
            int: Process exit code.
        """
        pass

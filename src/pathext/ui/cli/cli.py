"""Command line interface for pathext."""

import sys
from typing import Any, final

from pathext.config import ConfigError
from pathext.platform.logging import logger
from pathext.ui.cli.args import ArgumentParser
from pathext.ui.cli.args.options import (
    CLIArgs,
    InfoArgs,
    MergeArgs,
    MkparentsArgs,
    ResetArgs,
    WalkArgs,
)
from pathext.ui.cli.commands import (
    CommandExecutor,
    InfoCommand,
    MergeCommand,
    MkparentsCommand,
    ResetCommand,
    WalkCommand,
)
from pathext.ui.cli.display import PathDisplay


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def build_command(args: CLIArgs, display: PathDisplay | None = None) -> CommandExecutor[Any]:
        """Return the executor matching the parsed arguments."""

        command: CommandExecutor[Any]
        match args:
            case InfoArgs():
                command = InfoCommand(args, display)
            case MergeArgs():
                command = MergeCommand(args, display)
            case WalkArgs():
                command = WalkCommand(args, display)
            case ResetArgs():
                command = ResetCommand(args, display)
            case MkparentsArgs():
                command = MkparentsCommand(args, display)
        return command

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments and exit on failure.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args = ArgumentParser.process_args(args_list)
            exit_code = CommandProcessor.build_command(args).execute()
        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except ConfigError as e:
            logger.error("Invalid configuration: %s", e)
            sys.exit(1)
        except OSError as e:
            logger.error("Filesystem operation failed: %s", e)
            sys.exit(1)

        if exit_code != 0:
            sys.exit(exit_code)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit`` inside ``CommandProcessor.process_command``.
    """
    CommandProcessor.process_command()
    return 0

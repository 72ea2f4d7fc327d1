"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from pathext.config import Config
from pathext.platform.logging import logger, setup_logger
from pathext.ui.cli.args.options import (
    CLIArgs,
    InfoArgs,
    MergeArgs,
    MkparentsArgs,
    ResetArgs,
    WalkArgs,
)


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="pathext",
            description="pathext - inspect, merge, walk and reset filesystem paths.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        info_parser = subparsers.add_parser(
            "info",
            help="Show the name, stem, extension and type of a path",
        )
        _ = info_parser.add_argument("path", type=str, metavar="PATH", help="Path to inspect")
        ArgumentParser._add_verbosity(info_parser)

        merge_parser = subparsers.add_parser(
            "merge",
            help="Append a path beneath a base, dropping its absolute root",
        )
        _ = merge_parser.add_argument("base", type=str, metavar="BASE", help="Base path")
        _ = merge_parser.add_argument("append", type=str, metavar="APPEND", help="Path to append")
        ArgumentParser._add_verbosity(merge_parser)

        walk_parser = subparsers.add_parser(
            "walk",
            help="List every entry below a directory",
        )
        _ = walk_parser.add_argument("root", type=str, metavar="ROOT", help="Directory to walk")
        _ = walk_parser.add_argument(
            "--exclude",
            action="append",
            default=[],
            metavar="PATTERN",
            help="Skip entries whose name matches the glob pattern (repeatable)",
        )
        _ = walk_parser.add_argument(
            "--include-hidden",
            action="store_true",
            help="Also visit entries whose name starts with a dot",
        )
        _ = walk_parser.add_argument(
            "--follow-links",
            action=argparse.BooleanOptionalAction,
            default=None,
            help="Descend into symlinked directories",
        )
        _ = walk_parser.add_argument(
            "--max-depth",
            type=int,
            metavar="N",
            help="Do not list entries deeper than N levels below ROOT",
        )
        _ = walk_parser.add_argument(
            "--sort",
            action=argparse.BooleanOptionalAction,
            default=None,
            help="List siblings in name order",
        )
        ArgumentParser._add_verbosity(walk_parser)

        reset_parser = subparsers.add_parser(
            "reset",
            help="Remove a file or directory tree and recreate it as an empty directory",
        )
        _ = reset_parser.add_argument("path", type=str, metavar="PATH", help="Location to reset")
        _ = reset_parser.add_argument(
            "--force",
            action="store_true",
            help="Allow deleting an existing file or non-empty directory",
        )
        ArgumentParser._add_verbosity(reset_parser)

        mkparents_parser = subparsers.add_parser(
            "mkparents",
            help="Create every missing parent directory of a path",
        )
        _ = mkparents_parser.add_argument("path", type=str, metavar="PATH", help="Target path")
        ArgumentParser._add_verbosity(mkparents_parser)

        return parser

    @staticmethod
    def _add_verbosity(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed information",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If validation of the arguments fails.
            ConfigError: If the configuration file is invalid.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        # Errors while loading the config still need a console to land on.
        _ = setup_logger(console_level=logging.ERROR)
        configuration = Config.load()

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = configuration.console_level

        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        command: str = parsed_args.command

        if command == "info":
            return InfoArgs(
                command="info",
                path=parsed_args.path,
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
            )

        if command == "merge":
            return MergeArgs(
                command="merge",
                base=Path(parsed_args.base),
                append=Path(parsed_args.append),
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
            )

        if command == "walk":
            return ArgumentParser._process_walk(parsed_args, configuration)

        if command == "reset":
            return ResetArgs(
                command="reset",
                path=Path(parsed_args.path),
                force=parsed_args.force,
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
            )

        if command == "mkparents":
            return MkparentsArgs(
                command="mkparents",
                path=Path(parsed_args.path),
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _process_walk(parsed_args: argparse.Namespace, configuration: Config) -> WalkArgs:
        root = Path(parsed_args.root)
        if not root.exists():
            logger.error("Walk root does not exist: %s", root)
            sys.exit(1)

        max_depth = parsed_args.max_depth if parsed_args.max_depth is not None else configuration.max_depth
        if max_depth is not None and max_depth < 0:
            logger.error("Max depth must not be negative; received %s", max_depth)
            sys.exit(1)

        follow_links = parsed_args.follow_links
        if follow_links is None:
            follow_links = configuration.follow_links
        sort = parsed_args.sort
        if sort is None:
            sort = configuration.sort_entries

        return WalkArgs(
            command="walk",
            root=root,
            exclude=[*configuration.exclude, *parsed_args.exclude],
            include_hidden=parsed_args.include_hidden,
            follow_links=follow_links,
            max_depth=max_depth,
            sort=sort,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )

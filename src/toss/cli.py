# Filename: cli.py
# Author: Rich Lewis @RichLewis007
# Description: Command-line interface for toss. Parses arguments, lists the recycle bin, or
#              resolves operands into moves and hands them to the move worker.

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Sequence
from typing import NoReturn

from . import __version__
from .errors import EXIT_FAILURE, TossError, UsageError
from .models.conflicts import ConflictResolver
from .models.expander import DirectoryExpander
from .models.listing import BinLister, select_sort_mode
from .models.paths import Direction, PathResolver, TossEntry
from .services import config as config_service
from .services import logger as logger_service
from .workers.move_worker import MoveWorker

logger = logging.getLogger(__name__)


class TossArgumentParser(argparse.ArgumentParser):
    # argparse exits 2 on bad arguments; toss reports them as a UsageError instead.

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    # Create and configure the command-line argument parser.
    parser = TossArgumentParser(
        prog="toss",
        description="Move files into ~/recyclebin instead of deleting them, list, or recover them.",
    )
    parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="force toss or force recover files from recycle bin",
    )
    parser.add_argument(
        "-l",
        "--list",
        "--list-recent",
        dest="list_recent",
        action="store_true",
        help="list items in recycle bin by most recent",
    )
    parser.add_argument(
        "-ls",
        "--list-size",
        dest="list_size",
        action="store_true",
        help="list items in recycle bin by size",
    )
    parser.add_argument(
        "-ln",
        "--list-name",
        dest="list_name",
        action="store_true",
        help="list items in recycle bin by name",
    )
    parser.add_argument(
        "-g",
        "--regex",
        "--reg",
        dest="regex",
        action="store_true",
        help="enable regex matching for files to toss/recover (not implemented)",
    )
    parser.add_argument(
        "-r",
        "--recursive",
        action="store_true",
        help="recursively toss directories into the recycle bin",
    )
    parser.add_argument(
        "-c",
        "--recover",
        "--restore",
        dest="recover",
        action="store_true",
        help="recover or restore a file",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set console log level (default: %(default)s).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "files",
        nargs="*",
        help="files or directories to toss into recycle bin",
    )
    return parser


def collect_entries(
    operands: Sequence[str],
    direction: Direction,
    resolver: PathResolver,
    expander: DirectoryExpander,
    *,
    recursive: bool,
) -> list[TossEntry]:
    # Resolve every operand, expanding directories into per-file entries.
    entries: list[TossEntry] = []
    for operand in operands:
        entry = resolver.resolve(operand, direction)
        # A symlink to a directory is moved as the link itself.
        if os.path.isdir(entry.source) and not os.path.islink(entry.source):
            entries.extend(expander.expand(entry, direction, recursive=recursive))
        else:
            entries.append(entry)
    return entries


def _fail(error: TossError) -> int:
    print(error.diagnostic(), file=sys.stderr)
    return EXIT_FAILURE


def _usage_failure(parser: argparse.ArgumentParser, error: UsageError) -> int:
    parser.print_usage(sys.stderr)
    return _fail(error)


def main(argv: Sequence[str] | None = None) -> int:
    # Entry point for the toss command.
    parser = build_parser()
    try:
        args = parser.parse_intermixed_args(argv)
    except UsageError as exc:
        return _usage_failure(parser, exc)

    logger_service.configure(log_level=args.log_level)
    config = config_service.TossConfig.from_environ()

    try:
        config_service.ensure_bin_root(config)
    except TossError as exc:
        return _fail(exc)

    mode = select_sort_mode(recent=args.list_recent, name=args.list_name, size=args.list_size)
    if mode is not None:
        for line in BinLister(config).listing(mode):
            print(line)
        return 0

    if not args.files:
        return _usage_failure(parser, UsageError("No files provided"))

    if args.regex:
        logger.warning("Regex matching is not supported; operands are used literally.")

    direction = Direction.RECOVER if args.recover else Direction.TOSS
    try:
        entries = collect_entries(
            args.files,
            direction,
            PathResolver(config),
            DirectoryExpander(config),
            recursive=args.recursive,
        )
    except TossError as exc:
        return _fail(exc)

    logger.debug("all caught files")
    for entry in entries:
        logger.debug("src: %s ----- dest: %s", entry.source, entry.destination)

    result = MoveWorker(entries, direction, ConflictResolver(force=args.force)).run()
    if result.error is not None:
        return _fail(result.error)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

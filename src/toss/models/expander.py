# Filename: expander.py
# Author: Rich Lewis @RichLewis007
# Description: Expands a directory operand into one entry per regular file it contains.
#              The same walk serves tossing and recovering; direction only picks the mapping.

from __future__ import annotations

import os
from collections.abc import Iterator

from ..errors import DirectoryWithoutRecursiveError
from ..services.config import TossConfig
from .paths import Direction, TossEntry


class DirectoryExpander:
    # Flattens directory entries into per-file TossEntry pairs.

    def __init__(self, config: TossConfig) -> None:
        self.config = config

    def expand(self, entry: TossEntry, direction: Direction, *, recursive: bool) -> list[TossEntry]:
        # Return one entry per regular file under entry.source.
        if not recursive:
            raise DirectoryWithoutRecursiveError(
                f"{entry.source} is a directory. Use --recursive flag to include directories"
            )
        return [
            self.map_file(path, direction) for path in self.walk_files(entry.source, direction)
        ]

    def map_file(self, path: str, direction: Direction) -> TossEntry:
        # Pair a single file found during the walk with its counterpart.
        prefix = self.config.bin_prefix
        if direction is Direction.TOSS:
            return TossEntry(source=path, destination=prefix + path)
        return TossEntry(source=path, destination=path[len(prefix) :])

    def walk_files(self, root: str, direction: Direction) -> Iterator[str]:
        # Yield every regular file beneath root in filesystem walk order.
        # Tossing never descends into the bin itself.
        bin_prefix = self.config.bin_prefix
        for dirpath, dirnames, filenames in os.walk(root):
            if direction is Direction.TOSS:
                dirnames[:] = [
                    name for name in dirnames if os.path.join(dirpath, name) != bin_prefix
                ]
            for name in filenames:
                path = os.path.join(dirpath, name)
                if os.path.isfile(path):
                    yield path

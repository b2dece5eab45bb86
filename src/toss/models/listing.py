# Filename: listing.py
# Author: Rich Lewis @RichLewis007
# Description: Recycle bin listing. Scans the bin for tossed files, sorts them by recency,
#              name or size, and renders the table printed by ``toss --list``.

from __future__ import annotations

import enum
import logging
import os
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from ..services.config import TossConfig
from ..services.formatting import format_change_time, format_size

logger = logging.getLogger(__name__)

_DATE_WIDTH = 30
_NAME_WIDTH = 50
_RULE_WIDTH = 90


class SortMode(enum.Enum):
    RECENT = "recent"
    NAME = "name"
    SIZE = "size"


@dataclass(frozen=True, slots=True)
class BinItem:
    # A tossed file as seen at listing time.

    path: str
    relative_path: str
    change_time: float
    size: int


def select_sort_mode(*, recent: bool, name: bool, size: bool) -> SortMode | None:
    # Pick one sort mode; recency wins over name, name over size.
    if recent:
        return SortMode.RECENT
    if name:
        return SortMode.NAME
    if size:
        return SortMode.SIZE
    return None


class BinLister:
    # Reads the bin tree directly; nothing about tossed files is stored elsewhere.

    def __init__(self, config: TossConfig) -> None:
        self.config = config

    def items(self) -> list[BinItem]:
        # Return a BinItem for every regular file currently in the bin.
        prefix = self.config.bin_prefix
        found: list[BinItem] = []
        for dirpath, _dirnames, filenames in os.walk(prefix):
            for name in filenames:
                path = os.path.join(dirpath, name)
                if not os.path.isfile(path):
                    continue
                info = os.stat(path)
                found.append(
                    BinItem(
                        path=path,
                        relative_path=path[len(prefix) :],
                        change_time=info.st_ctime,
                        size=info.st_size,
                    )
                )
        logger.debug("Found %d files under %s", len(found), prefix)
        return found

    @staticmethod
    def sort(items: Sequence[BinItem], mode: SortMode) -> list[BinItem]:
        if mode is SortMode.RECENT:
            return sorted(items, key=lambda item: item.change_time, reverse=True)
        if mode is SortMode.NAME:
            return sorted(items, key=lambda item: item.relative_path)
        return sorted(items, key=lambda item: item.size, reverse=True)

    @staticmethod
    def render(items: Sequence[BinItem]) -> Iterator[str]:
        # Yield the header, a rule, then one row per item.
        yield f"{'Date Tossed':<{_DATE_WIDTH}}{'Filename':<{_NAME_WIDTH - 1}} Size"
        yield "=" * _RULE_WIDTH
        for item in items:
            yield (
                f"{format_change_time(item.change_time):<{_DATE_WIDTH}}"
                f"{item.relative_path:<{_NAME_WIDTH - 1}} "
                f"{format_size(item.size)}"
            )

    def listing(self, mode: SortMode) -> Iterator[str]:
        return self.render(self.sort(self.items(), mode))

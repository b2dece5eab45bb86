# Filename: move_worker.py
# Author: Rich Lewis @RichLewis007
# Description: Sequential worker that drains the queue of resolved entries. Checks each entry
#              for conflicts, asks before overwriting, and stops at the first failure.

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from toss.errors import FilesystemError, OverwriteDeclinedError, TossError
from toss.models.conflicts import Action, ConflictResolver, confirm_overwrite
from toss.models.paths import Direction, TossEntry
from toss.services.mover import move_entry

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class MoveResult:
    # Summary of a run: entries moved before the first failure, if any.

    moved: list[TossEntry] = field(default_factory=list)
    error: TossError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class MoveWorker:
    # Moves entries one by one; entries already moved stay moved on failure.

    def __init__(
        self,
        entries: Iterable[TossEntry],
        direction: Direction,
        resolver: ConflictResolver,
        *,
        confirm: Callable[[str], bool] = confirm_overwrite,
        mover: Callable[[TossEntry], None] = move_entry,
    ) -> None:
        self._entries = list(entries)
        self._direction = direction
        self._resolver = resolver
        self._confirm = confirm
        self._mover = mover

    def run(self) -> MoveResult:
        result = MoveResult()
        total = len(self._entries)

        for index, entry in enumerate(self._entries, start=1):
            decision = self._resolver.decide(entry, self._direction)

            if decision.action is Action.FAIL:
                result.error = decision.error
                break

            if decision.action is Action.PROMPT and not self._confirm(entry.destination):
                result.error = OverwriteDeclinedError("toss operation canceled")
                break

            try:
                self._mover(entry)
            except FilesystemError as exc:
                result.error = exc
                break

            logger.info(
                "[%d/%d] %s %s -> %s",
                index,
                total,
                self._direction.value,
                entry.source,
                entry.destination,
            )
            result.moved.append(entry)

        if result.error is not None:
            logger.info(
                "Stopped after %d of %d entries: %s", len(result.moved), total, result.error
            )
        return result

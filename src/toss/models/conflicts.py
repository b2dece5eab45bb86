# Filename: conflicts.py
# Author: Rich Lewis @RichLewis007
# Description: Conflict resolution for a single resolved entry. Decides whether a move can
#              proceed, needs the user's confirmation first, or must fail.

from __future__ import annotations

import enum
import os
from collections.abc import Callable
from dataclasses import dataclass

from ..errors import NotFoundError, TossError
from .paths import Direction, TossEntry

_YES_ANSWERS = frozenset({"y", "yes"})


class Action(enum.Enum):
    PROCEED = "proceed"
    PROMPT = "prompt"
    FAIL = "fail"


@dataclass(frozen=True, slots=True)
class ConflictDecision:
    # Outcome of checking one entry against the filesystem.

    action: Action
    entry: TossEntry
    error: TossError | None = None


class ConflictResolver:
    """Check a :class:`TossEntry` before it is moved.

    * Missing source: fail the entry with :class:`NotFoundError`.
    * Recovering onto an existing destination without ``force``: prompt.
    * Anything else proceeds, including a forced overwrite.
    """

    def __init__(self, *, force: bool = False) -> None:
        self.force = force

    def decide(self, entry: TossEntry, direction: Direction) -> ConflictDecision:
        if not os.path.exists(entry.source):
            if direction is Direction.RECOVER:
                message = f"failed to recover - file not found in recycle bin: {entry.source}"
            else:
                message = f"failed to toss - file not found: {entry.source}"
            return ConflictDecision(Action.FAIL, entry, NotFoundError(message))

        if (
            direction is Direction.RECOVER
            and not self.force
            and os.path.exists(entry.destination)
        ):
            return ConflictDecision(Action.PROMPT, entry)

        return ConflictDecision(Action.PROCEED, entry)


def is_yes(answer: str) -> bool:
    return answer.strip().lower() in _YES_ANSWERS


def confirm_overwrite(destination: str, reader: Callable[[str], str] = input) -> bool:
    # Ask whether destination may be replaced; end of input counts as "no".
    print(f"There currently exists a file you want to replace: {destination}")
    try:
        answer = reader("Are you sure you want to replace this? (y/n) ")
    except EOFError:
        return False
    return is_yes(answer)

# Filename: mover.py
# Author: Rich Lewis @RichLewis007
# Description: Moves a single resolved entry into or out of the recycle bin. Creates the
#              destination's parent directories on demand and renames in place.

from __future__ import annotations

import os

from ..errors import FilesystemError
from ..models.paths import TossEntry


def move_entry(entry: TossEntry) -> None:
    # Move entry.source to entry.destination, replacing an existing file.
    parent = os.path.dirname(entry.destination)
    try:
        if parent:
            os.makedirs(parent, exist_ok=True)
        os.replace(entry.source, entry.destination)
    except OSError as exc:
        raise FilesystemError(
            f"{exc.strerror or exc}: {entry.source!r} -> {entry.destination!r}"
        ) from exc

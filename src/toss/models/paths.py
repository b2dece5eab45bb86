# Filename: paths.py
# Author: Rich Lewis @RichLewis007
# Description: Path mapping between original locations and the recycle bin. Turns each
#              command-line operand into an absolute source/destination pair.

from __future__ import annotations

import enum
import os
from dataclasses import dataclass

from ..errors import PathConflictError, UsageError
from ..services.config import TossConfig

_ABSOLUTE_MARKERS = ("/", "~", "\\")


class Direction(enum.Enum):
    # Which way files travel for this invocation.

    TOSS = "toss"
    RECOVER = "recover"


@dataclass(frozen=True, slots=True)
class TossEntry:
    # One file move: absolute source path and absolute destination path.

    source: str
    destination: str

    def reversed(self) -> TossEntry:
        return TossEntry(source=self.destination, destination=self.source)


def is_relative(operand: str) -> bool:
    # Anything not rooted at "/", "~" or "\" is taken relative to the cwd.
    return not operand.startswith(_ABSOLUTE_MARKERS)


class PathResolver:
    """Map operands to mirrored recycle bin paths.

    Tossing ``/a/b.txt`` targets ``<bin_root>/a/b.txt``; recovering the same
    operand reverses the pair. Resolution is a pure string transformation, so
    neither side is checked for existence here.
    """

    def __init__(self, config: TossConfig) -> None:
        self.config = config

    @property
    def bin_prefix(self) -> str:
        return self.config.bin_prefix

    def absolute(self, operand: str, cwd: str | None = None) -> str:
        # Return the normalised absolute form of operand.
        if is_relative(operand):
            base = os.getcwd() if cwd is None else cwd
            path = f"{base.rstrip('/')}/{operand}"
        elif operand == "~" or operand.startswith("~/"):
            path = str(self.config.home) + operand[1:]
        elif operand.startswith("~"):
            path = os.path.expanduser(operand)
            if path.startswith("~"):
                raise UsageError(f"cannot expand home directory in: {operand}")
        elif operand.startswith("\\"):
            # "<bin>\x" would be a sibling of the bin, not a path inside it.
            raise UsageError(f"backslash-rooted paths are not supported: {operand}")
        else:
            path = operand
        return os.path.normpath(path)

    def is_inside_bin(self, path: str) -> bool:
        prefix = self.bin_prefix
        return path == prefix or path.startswith(prefix.rstrip("/") + "/")

    def resolve(self, operand: str, direction: Direction, cwd: str | None = None) -> TossEntry:
        # Resolve operand into a TossEntry for the requested direction.
        if operand.startswith(self.bin_prefix):
            raise self._conflict()

        abs_path = self.absolute(operand, cwd)
        if self.is_inside_bin(abs_path):
            raise self._conflict()

        mirrored = self.bin_prefix + abs_path
        if direction is Direction.TOSS:
            return TossEntry(source=abs_path, destination=mirrored)
        return TossEntry(source=mirrored, destination=abs_path)

    def _conflict(self) -> PathConflictError:
        return PathConflictError(
            f'do not include recycle directory: "{self.bin_prefix}" in the filename'
        )

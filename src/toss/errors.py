# Filename: errors.py
# Author: Rich Lewis @RichLewis007
# Description: Error types raised while resolving, expanding and moving toss operands. Every
#              error is terminal for the run and renders as a one-line diagnostic.

from __future__ import annotations

EXIT_FAILURE = 1


class TossError(Exception):
    """Base class for every failure the CLI reports to the user."""

    prefix = "toss error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def diagnostic(self) -> str:
        # Return the single line written to stderr.
        return f"{self.prefix}: {self.message}"


class UsageError(TossError):
    # Bad or missing command-line arguments.
    pass


class PathConflictError(TossError):
    # Operand points inside the recycle bin itself.
    pass


class NotFoundError(TossError):
    # Source is missing for the requested direction.
    pass


class DirectoryWithoutRecursiveError(TossError):
    # Directory operand given without --recursive.
    pass


class OverwriteDeclinedError(TossError):
    # User refused to replace an existing file during recovery.
    pass


class FilesystemError(TossError):
    # Directory creation or rename failed in the operating system.

    prefix = "filesystem error"


__all__ = [
    "EXIT_FAILURE",
    "DirectoryWithoutRecursiveError",
    "FilesystemError",
    "NotFoundError",
    "OverwriteDeclinedError",
    "PathConflictError",
    "TossError",
    "UsageError",
]

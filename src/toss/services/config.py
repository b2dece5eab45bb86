# Filename: config.py
# Author: Rich Lewis @RichLewis007
# Description: Runtime configuration for toss. Resolves the user's home directory, derives the
#              recycle bin root, and bootstraps the bin and application directories.

from __future__ import annotations

import errno
import os
import pwd
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from platformdirs import PlatformDirs

from ..errors import FilesystemError

APP_NAME = "toss"
ORG_NAME = "Rich Lewis"

BIN_DIRNAME = "recyclebin"
# rwxrwxr-x before the process umask is applied.
BIN_MODE = 0o775


def ensure_app_dirs() -> Path:
    # Ensure the application log directory exists and return it.
    dirs = PlatformDirs(appname=APP_NAME, appauthor=ORG_NAME)
    log_path = Path(dirs.user_log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    return log_path


def resolve_home(environ: Mapping[str, str] | None = None) -> Path:
    # Return $HOME, falling back to the password database when unset or empty.
    env = os.environ if environ is None else environ
    home = env.get("HOME", "")
    if home:
        return Path(home)
    return Path(pwd.getpwuid(os.getuid()).pw_dir)


@dataclass(frozen=True, slots=True)
class TossConfig:
    # Process-wide settings, built once at startup and passed to each component.

    home: Path
    bin_root: Path = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "bin_root", self.home / BIN_DIRNAME)

    @property
    def bin_prefix(self) -> str:
        # String form of the bin root, used for mirrored-path concatenation.
        return str(self.bin_root)

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> TossConfig:
        return cls(home=resolve_home(environ))


def ensure_bin_root(config: TossConfig) -> Path:
    """Create the recycle bin directory if it is missing.

    An already existing bin is fine; any other failure is fatal and surfaces as a
    :class:`FilesystemError`.
    """
    try:
        os.mkdir(config.bin_root, BIN_MODE)
    except FileExistsError:
        pass
    except OSError as exc:
        reason = exc.strerror or errno.errorcode.get(exc.errno or 0, str(exc))
        raise FilesystemError(f"Cannot create recyclebin for unknown reason: {reason}") from exc
    return config.bin_root

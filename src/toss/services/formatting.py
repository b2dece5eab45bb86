# Filename: formatting.py
# Author: Rich Lewis @RichLewis007
# Description: Formatting helpers for user-facing values. Provides functions to format
#              byte counts and change times for the recycle bin listing.

from __future__ import annotations

import math
import time
from typing import Final

_SIZE_UNITS: Final[str] = "BKMGTPE"


def format_size(num_bytes: int) -> str:
    """Return a compact, human-friendly string for a byte count.

    Uses binary multiples and picks the largest unit whose mantissa is at least
    one. The mantissa is rounded up to the next tenth, and the raw byte count is
    appended in parentheses whenever the unit is not plain bytes::

        >>> format_size(0)
        '0.0B'
        >>> format_size(1500000)
        '1.5M (1500000)'
    """
    num_bytes = max(int(num_bytes), 0)
    mantissa = float(num_bytes)
    index = 0
    while mantissa >= 1024 and index < len(_SIZE_UNITS) - 1:
        mantissa /= 1024
        index += 1

    mantissa = math.ceil(mantissa * 10) / 10
    text = f"{mantissa:.1f}{_SIZE_UNITS[index]}"
    if index == 0:
        return text
    return f"{text} ({num_bytes})"


def format_change_time(change_time: float) -> str:
    # Render a change time to whole seconds, e.g. "Mon Oct 19 16:20:01 2026".
    return time.ctime(int(change_time))


__all__ = ["format_change_time", "format_size"]

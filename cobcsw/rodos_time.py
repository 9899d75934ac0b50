"""Conversions between Unix time and the system time, which counts nanoseconds
since 01.01.2000 UTC."""

from __future__ import annotations

import sys
import time
from datetime import datetime, timedelta
from typing import TextIO

SECONDS = 1_000_000_000
#: Number of nanoseconds between 01.01.1970 and 01.01.2000
RODOS_UNIX_OFFSET = 946_684_800 * SECONDS

_EPOCH = datetime(2000, 1, 1)
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def _current_rodos_time() -> int:
    return time.time_ns() - RODOS_UNIX_OFFSET


def unix_to_rodos_time(unix_time_seconds: int) -> int:
    """Convert seconds since 01.01.1970 (a 32-bit value) to nanoseconds since 01.01.2000."""
    if not _INT32_MIN <= unix_time_seconds <= _INT32_MAX:
        raise ValueError(f"Unix time {unix_time_seconds} does not fit into 32 bits")
    return unix_time_seconds * SECONDS - RODOS_UNIX_OFFSET


def rodos_to_unix_time(rodos_time_ns: int | None = None) -> int:
    """Convert nanoseconds since 01.01.2000 to whole 32-bit seconds since 01.01.1970.

    Without an argument the current time is used.
    """
    if rodos_time_ns is None:
        rodos_time_ns = _current_rodos_time()
    total = rodos_time_ns + RODOS_UNIX_OFFSET
    seconds = abs(total) // SECONDS
    if total < 0:
        seconds = -seconds
    return (seconds - _INT32_MIN) % 2**32 + _INT32_MIN


def format_time(rodos_time_ns: int | None = None) -> str:
    """Render a system time as a human-readable UTC date, seconds truncated."""
    if rodos_time_ns is None:
        rodos_time_ns = _current_rodos_time()
    moment = _EPOCH + timedelta(seconds=rodos_time_ns // SECONDS)
    return (
        "DateUTC(DD/MM/YYYY HH:MIN:SS) : "
        f"{moment.day:02d}/{moment.month:02d}/{moment.year} "
        f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )


def print_time(rodos_time_ns: int | None = None, stream: TextIO | None = None) -> None:
    """Write :func:`format_time` followed by a newline to ``stream`` (stdout by default)."""
    out = sys.stdout if stream is None else stream
    out.write(format_time(rodos_time_ns) + "\n")
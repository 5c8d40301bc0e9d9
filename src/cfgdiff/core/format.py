"""Unified diff rendering"""

from datetime import datetime
from typing import Iterable

from cfgdiff.core.models import Hunk


def format_timestamp(mtime_ns: int) -> str:
    """Local time with nanoseconds and numeric UTC offset, e.g. '2024-05-01 12:00:00.000000000 +0200'."""
    seconds, nanos = divmod(mtime_ns, 1_000_000_000)
    local = datetime.fromtimestamp(seconds).astimezone()
    return f"{local:%Y-%m-%d %H:%M:%S}.{nanos:09d} {local:%z}"


def _range(start: int, end: int) -> str:
    """1-based '@@' range; a single line omits the count, an empty range names the line before it."""
    length = end - start
    first = end if length < 2 else start + 1
    return str(first) if length == 1 else f"{first},{length}"


def hunk_header(hunk: Hunk) -> str:
    return f"@@ -{_range(hunk.old_start, hunk.old_end)} +{_range(hunk.new_start, hunk.new_end)} @@"


def format_hunk(hunk: Hunk) -> str:
    return "\n".join([hunk_header(hunk), *hunk.lines]) + "\n"


def format_unified(
    old_label: str,
    old_timestamp: str,
    new_label: str,
    new_timestamp: str,
    hunks: Iterable[Hunk],
    ) -> str:
    """Render file headers and hunks. Returns '' when there are no hunks."""
    body = "".join(format_hunk(h) for h in hunks)
    if not body:
        return ""
    return f"--- {old_label}\t{old_timestamp}\n+++ {new_label}\t{new_timestamp}\n{body}"

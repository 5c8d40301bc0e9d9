"""Guard policy deciding whether a diff is safe and useful to compute"""

import logging
import unicodedata
from pathlib import Path
from typing import Union

from cfgdiff.config import Settings
from cfgdiff.core.models import GuardDecision


logger = logging.getLogger(__name__)

Source = Union[str, Path, bytes]

# Control (Cc), surrogate (Cs) and unassigned (Cn) code points are binary, apart from these.
_WHITESPACE = " \t\r\n\f\v"
_DROP_WHITESPACE = str.maketrans("", "", _WHITESPACE)
_BINARY_CATEGORIES = {"Cc", "Cs", "Cn"}


def _size(source: Source) -> int:
    if isinstance(source, bytes):
        return len(source)
    return Path(source).stat().st_size


def _content(source: Source) -> bytes:
    if isinstance(source, bytes):
        return source
    return Path(source).read_bytes()


def is_binary(data: bytes, encoding: str = "utf-8") -> bool:
    """True if data does not decode in `encoding` or holds a control, surrogate or unassigned char.

    The usual whitespace controls (space, tab, CR, LF, FF, VT) are text.
    """
    # Whole content is read; callers apply the size threshold first.
    try:
        text = data.decode(encoding)
    except UnicodeDecodeError:
        return True
    text = text.translate(_DROP_WHITESPACE)
    if text.isprintable():
        return False
    return any(unicodedata.category(c) in _BINARY_CATEGORIES for c in text)


def evaluate(old: Source, new: Source, settings: Settings) -> GuardDecision:
    """Classify a pair of inputs, cheapest check first. Output length is checked later."""
    if settings.diff_disabled:
        return GuardDecision.suppress("(diff output suppressed by config)")

    threshold = settings.diff_filesize_threshold
    if _size(old) > threshold or _size(new) > threshold:
        logger.debug("input larger than %d bytes, skipping diff", threshold)
        return GuardDecision.suppress(f"(file sizes exceed {threshold} bytes, diff output suppressed)")

    if is_binary(_content(old), settings.encoding):
        return GuardDecision.suppress("(current file is binary, diff output suppressed)")
    if is_binary(_content(new), settings.encoding):
        return GuardDecision.suppress("(new content is binary, diff output suppressed)")

    return GuardDecision.proceed()

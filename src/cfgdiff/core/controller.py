"""Diff orchestration: guard, compute, suppress and expose a single comparison"""

import logging
from pathlib import Path
from typing import Optional, Union

from cfgdiff.config import Settings
from cfgdiff.core.align import align
from cfgdiff.core.format import format_timestamp, format_unified
from cfgdiff.core.guard import evaluate
from cfgdiff.core.hunks import iter_hunks
from cfgdiff.core.models import Computed, DiffResult, LineSequence, Suppressed
from cfgdiff.util.fs import placeholder_if_missing


logger = logging.getLogger(__name__)

NO_DIFF = "(no diff)"
DIFF_AVAILABLE = "(diff available)"


def udiff(old_file: Path, new_file: Path, context: int = 3, encoding: str = "utf-8") -> str:
    """Unified diff text of two files, '' when they have no differences."""
    old = LineSequence.from_path(old_file, encoding)
    new = LineSequence.from_path(new_file, encoding)
    groups = align(old, new)
    if not any(g.is_change for g in groups):
        if old or new:
            logger.debug("%s and %s have identical content", old_file, new_file)
        else:
            logger.debug("%s and %s are both empty", old_file, new_file)
        return ""

    return format_unified(
        str(old_file), format_timestamp(old_file.stat().st_mtime_ns),
        str(new_file), format_timestamp(new_file.stat().st_mtime_ns),
        iter_hunks(groups, old, new, context),
    )


def repair_encoding(text: str, encoding: str) -> str:
    """Replace characters `encoding` cannot represent with '?'."""
    return text.encode(encoding, errors="replace").decode(encoding)


class DiffController:
    """One comparison between an old and a new file.

    Construct a fresh instance per comparison. `diff()` returns a short status;
    the detail stays on the instance for `for_output()` and `for_reporting()`.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        self.result: Optional[DiffResult] = None

    @property
    def status(self) -> Optional[str]:
        if self.result is None:
            return None
        if isinstance(self.result, Suppressed):
            return self.result.reason
        return DIFF_AVAILABLE

    def diff(self, old_path: Union[str, Path], new_path: Union[str, Path]) -> str:
        """Compare old_path to new_path; a missing side reads as empty (file creation or deletion)."""
        with placeholder_if_missing(old_path) as old_file:
            with placeholder_if_missing(new_path) as new_file:
                self.result = self._compute(old_file, new_file)
        return self.status

    def for_output(self) -> list[str]:
        """Diff lines for a terminal, or the status message when no detail was kept."""
        if self.result is None:
            return []
        if isinstance(self.result, Computed):
            return list(self.result.lines)
        return [self.result.reason]

    def for_reporting(self) -> Optional[str]:
        """Diff as a single line with literal '\\n' separators; None when no diff was computed."""
        # Callers must not report diffs for newly created files.
        if not isinstance(self.result, Computed):
            return None
        return "\\n".join(self.result.lines)

    def _compute(self, old_file: Path, new_file: Path) -> DiffResult:
        settings = self.settings
        try:
            decision = evaluate(old_file, new_file, settings)
            if not decision.allowed:
                logger.debug("diff suppressed: %s", decision.reason)
                return Suppressed(reason=decision.reason)

            logger.debug("computing unified diff of %s and %s", old_file, new_file)
            diff_str = udiff(old_file, new_file, settings.context_lines, settings.encoding)
            if not diff_str:
                return Suppressed(reason=NO_DIFF)
            if len(diff_str) > settings.diff_output_threshold:
                return Suppressed(
                    reason=f"(long diff of over {settings.diff_output_threshold} characters, diff output suppressed)"
                )
            diff_str = repair_encoding(diff_str, settings.output_encoding)
            return Computed(lines=diff_str.rstrip("\n").split("\n"))
        except Exception as e:
            logger.warning("could not diff %s against %s: %s", old_file, new_file, e)
            return Suppressed(reason=f"Could not determine diff. Error: {e}")

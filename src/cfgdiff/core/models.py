"""Data models for the diff engine: line sequences, change groups, hunks and results"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterator, Literal, Optional, Union

from pydantic import BaseModel


class ChangeTag(str, Enum):
    match = "match"
    insert = "insert"
    delete = "delete"
    replace = "replace"


@dataclass(frozen=True)
class LineSequence:
    """Ordered, immutable lines of one input with line terminators stripped."""
    lines: tuple[str, ...] = ()

    @classmethod
    def from_text(cls, text: str) -> LineSequence:
        """Split on '\\n' only; a trailing '\\r' is dropped with it, other control chars are kept."""
        parts = text.split("\n")
        if parts and parts[-1] == "":
            parts.pop()
        return cls(tuple(p[:-1] if p.endswith("\r") else p for p in parts))

    @classmethod
    def from_bytes(cls, data: bytes, encoding: str = "utf-8") -> LineSequence:
        return cls.from_text(data.decode(encoding))

    @classmethod
    def from_path(cls, path: Path, encoding: str = "utf-8") -> LineSequence:
        return cls.from_bytes(Path(path).read_bytes(), encoding)

    def __len__(self) -> int:
        return len(self.lines)

    def __getitem__(self, index):
        return self.lines[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines)


@dataclass(frozen=True)
class ChangeGroup:
    """A contiguous run of the edit script over half-open old/new index ranges."""
    tag: ChangeTag
    old_start: int
    old_end: int
    new_start: int
    new_end: int

    @property
    def is_change(self) -> bool:
        return self.tag != ChangeTag.match

    @property
    def length_difference(self) -> int:
        return (self.new_end - self.new_start) - (self.old_end - self.old_start)


@dataclass
class Hunk:
    """A context window around one or more change groups.

    Bounds are half-open. `file_length_difference` is the cumulative new-minus-old
    line count through the last group in this hunk; the next hunk is built from it.
    """
    old: LineSequence
    new: LineSequence
    groups: list[ChangeGroup]
    old_start: int
    old_end: int
    new_start: int
    new_end: int
    file_length_difference: int = 0
    lines: list[str] = field(default_factory=list)

    def render_body(self) -> None:
        """Rebuild `lines` from the groups over the current window."""
        body = []
        cursor = self.old_start
        for group in self.groups:
            body.extend(" " + line for line in self.old[cursor:group.old_start])
            body.extend("-" + line for line in self.old[group.old_start:group.old_end])
            body.extend("+" + line for line in self.new[group.new_start:group.new_end])
            cursor = group.old_end
        body.extend(" " + line for line in self.old[cursor:self.old_end])
        self.lines = body


@dataclass(frozen=True)
class GuardDecision:
    allowed: bool
    reason: Optional[str] = None     # set iff suppressed

    @classmethod
    def proceed(cls) -> GuardDecision:
        return cls(allowed=True)

    @classmethod
    def suppress(cls, reason: str) -> GuardDecision:
        return cls(allowed=False, reason=reason)


class Suppressed(BaseModel):
    """No detail retained; `reason` is the short status or error shown instead."""
    kind: Literal["suppressed"] = "suppressed"
    reason: str


class Computed(BaseModel):
    """Rendered unified diff, one entry per output line."""
    kind: Literal["computed"] = "computed"
    lines: list[str]


DiffResult = Union[Suppressed, Computed]

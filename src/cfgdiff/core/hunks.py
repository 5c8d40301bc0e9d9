"""Context hunk construction and merging"""

from typing import Iterable, Iterator

from cfgdiff.core.models import ChangeGroup, Hunk, LineSequence


def build_hunk(
    group: ChangeGroup,
    old: LineSequence,
    new: LineSequence,
    context: int,
    offset: int,
    ) -> Hunk:
    """Wrap one change group in `context` unchanged lines per side.

    `offset` is the new-minus-old line count of all earlier groups. New-side bounds
    follow from the old-side window shifted by the offset before and after this group.
    """
    after = offset + group.length_difference
    old_start = max(group.old_start - context, 0)
    old_end = min(group.old_end + context, len(old))
    hunk = Hunk(
        old=old,
        new=new,
        groups=[group],
        old_start=old_start,
        old_end=old_end,
        new_start=old_start + offset,
        new_end=old_end + after,
        file_length_difference=after,
    )
    hunk.render_body()
    return hunk


def merge_hunk(current: Hunk, previous: Hunk) -> bool:
    """Fold `previous` into `current` if their windows touch or overlap; False if disjoint."""
    if current.old_start > previous.old_end:
        return False
    current.old_start = previous.old_start
    current.new_start = previous.new_start
    current.groups[:0] = previous.groups
    current.render_body()
    return True


def iter_hunks(
    groups: Iterable[ChangeGroup],
    old: LineSequence,
    new: LineSequence,
    context: int = 3,
    ) -> Iterator[Hunk]:
    """Yield final hunks in order; a pending hunk is flushed once its successor cannot merge."""
    offset = 0
    pending = None
    for group in groups:
        if not group.is_change:
            continue
        hunk = build_hunk(group, old, new, context, offset)
        offset = hunk.file_length_difference
        if pending is not None and not merge_hunk(hunk, pending):
            yield pending
        pending = hunk
    if pending is not None:
        yield pending

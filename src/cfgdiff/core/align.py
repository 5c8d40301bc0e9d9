"""Minimal edit script between two line sequences (Myers O(N·D) algorithm, linear space).

Each call trims the common prefix and suffix, then searches forward from the start
and backward from the end at the same time until the two searches meet on a shortest
edit path. It splits there and solves both halves the same way. Only the two
furthest-reach frontiers are kept, so memory stays linear in the input length.

The script is returned as ChangeGroups that partition both sequences in order:
MATCH runs of equal lines and INSERT/DELETE/REPLACE runs for everything between them.
"""

from __future__ import annotations

from itertools import groupby
from typing import Sequence

from cfgdiff.core.models import ChangeGroup, ChangeTag, LineSequence


EQUAL, DELETE, INSERT = "=", "-", "+"


def _common_prefix(a: Sequence[str], b: Sequence[str]) -> int:
    n = min(len(a), len(b))
    i = 0
    while i < n and a[i] == b[i]:
        i += 1
    return i


def _common_suffix(a: Sequence[str], b: Sequence[str], floor: int) -> int:
    n = min(len(a), len(b)) - floor
    i = 0
    while i < n and a[-1 - i] == b[-1 - i]:
        i += 1
    return i


def _bisect(a: Sequence[str], b: Sequence[str]) -> tuple[int, int]:
    """Return a point (x, y) on a shortest edit path from a to b, or (-1, -1) if they share no line.

    `forward[k]` is the furthest x reached from the start on diagonal k = x - y,
    `reverse[k]` the same measured from the end.
    """
    n, m = len(a), len(b)
    max_d = (n + m + 1) // 2
    offset = max_d
    forward = [-1] * (2 * max_d + 2)
    forward[offset + 1] = 0
    reverse = list(forward)
    delta = n - m
    odd = delta % 2 != 0
    # Diagonals whose path left the grid are dropped from either end of the scan.
    f_start = f_end = r_start = r_end = 0

    for d in range(max_d):
        for k in range(-d + f_start, d + 1 - f_end, 2):
            i = offset + k
            if k == -d or (k != d and forward[i - 1] < forward[i + 1]):
                x = forward[i + 1]
            else:
                x = forward[i - 1] + 1
            y = x - k
            while x < n and y < m and a[x] == b[y]:
                x, y = x + 1, y + 1
            forward[i] = x
            if x > n:
                f_end += 2
            elif y > m:
                f_start += 2
            elif odd:
                j = offset + delta - k
                if 0 <= j < len(reverse) and reverse[j] != -1 and x >= n - reverse[j]:
                    return x, y

        for k in range(-d + r_start, d + 1 - r_end, 2):
            i = offset + k
            if k == -d or (k != d and reverse[i - 1] < reverse[i + 1]):
                x = reverse[i + 1]
            else:
                x = reverse[i - 1] + 1
            y = x - k
            while x < n and y < m and a[n - 1 - x] == b[m - 1 - y]:
                x, y = x + 1, y + 1
            reverse[i] = x
            if x > n:
                r_end += 2
            elif y > m:
                r_start += 2
            elif not odd:
                j = offset + delta - k
                if 0 <= j < len(forward) and forward[j] != -1 and forward[j] >= n - x:
                    return forward[j], forward[j] - (delta - k)

    return -1, -1


def _edit_ops(a: Sequence[str], b: Sequence[str], ops: list[str]) -> None:
    """Append the operations ('=', '-', '+') of a shortest edit script from a to b."""
    prefix = _common_prefix(a, b)
    suffix = _common_suffix(a, b, prefix)
    a, b = a[prefix:len(a) - suffix], b[prefix:len(b) - suffix]
    ops.extend([EQUAL] * prefix)

    x, y = _bisect(a, b) if a and b else (-1, -1)
    if x < 0:
        ops.extend([DELETE] * len(a))
        ops.extend([INSERT] * len(b))
    else:
        _edit_ops(a[:x], b[:y], ops)
        _edit_ops(a[x:], b[y:], ops)

    ops.extend([EQUAL] * suffix)


def _tag(deleted: int, inserted: int) -> ChangeTag:
    if deleted and inserted:
        return ChangeTag.replace
    return ChangeTag.delete if deleted else ChangeTag.insert


def align(old: LineSequence, new: LineSequence) -> list[ChangeGroup]:
    """Align old against new and return the ordered ChangeGroups covering both sequences."""
    ops: list[str] = []
    _edit_ops(old.lines, new.lines, ops)

    groups = []
    i = j = 0
    for is_equal, run in groupby(ops, key=lambda op: op == EQUAL):
        run = list(run)
        if is_equal:
            groups.append(ChangeGroup(ChangeTag.match, i, i + len(run), j, j + len(run)))
            i, j = i + len(run), j + len(run)
            continue
        deleted, inserted = run.count(DELETE), run.count(INSERT)
        groups.append(ChangeGroup(_tag(deleted, inserted), i, i + deleted, j, j + inserted))
        i, j = i + deleted, j + inserted
    return groups

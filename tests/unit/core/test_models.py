"""Unit tests for core/models.py"""

import pytest

from cfgdiff.core.models import ChangeGroup, ChangeTag, Computed, LineSequence, Suppressed


@pytest.mark.parametrize("text,expected", [
    ("", ()),
    ("a", ("a",)),
    ("a\n", ("a",)),
    ("a\nb\n", ("a", "b")),
    ("a\r\nb\r\n", ("a", "b")),
    ("a\n\nb", ("a", "", "b")),
    ("a\x0cb\n", ("a\x0cb",)),
])
def test_line_sequence_from_text(text, expected):
    """Only '\\n' splits lines; the terminator (and a preceding '\\r') is stripped."""
    assert LineSequence.from_text(text).lines == expected


def test_line_sequence_from_path(tmp_path):
    """from_path decodes with the given encoding."""
    p = tmp_path / "f.txt"
    p.write_bytes("caf\xe9\n".encode("latin-1"))
    assert LineSequence.from_path(p, "latin-1").lines == ("caf\xe9",)


def test_line_sequence_is_immutable():
    """LineSequence is frozen."""
    seq = LineSequence(("a",))
    with pytest.raises(AttributeError):
        seq.lines = ("b",)


def test_change_group_length_difference():
    """length_difference is new length minus old length."""
    assert ChangeGroup(ChangeTag.insert, 3, 3, 4, 6).length_difference == 2
    assert ChangeGroup(ChangeTag.delete, 3, 6, 4, 4).length_difference == -3
    assert not ChangeGroup(ChangeTag.match, 0, 2, 0, 2).is_change


def test_diff_result_serializes():
    """Both result variants dump with a discriminating kind field."""
    assert Suppressed(reason="(no diff)").model_dump() == {"kind": "suppressed", "reason": "(no diff)"}
    assert Computed(lines=["+a"]).model_dump() == {"kind": "computed", "lines": ["+a"]}

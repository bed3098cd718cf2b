from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from vnscript.scanner import Speekable
from vnscript.spans import Pos
from vnscript.symbol import intern


FILE = intern("scan.vns")


@given(st.text())
def test_peek_is_idempotent_and_matches_next(src: str) -> None:
    s = Speekable(src, FILE)
    out = []
    while True:
        first = s.peek()
        assert s.peek() == first
        assert s.peek_with_pos() == s.peek_with_pos()
        got = next(s, None)
        assert got == first
        if got is None:
            break
        out.append(got)
    assert "".join(out) == src


@given(st.text())
def test_offsets_count_consumed_characters(src: str) -> None:
    s = Speekable(src, FILE)
    for i, ch in enumerate(src):
        item = s.next_with_pos()
        assert item is not None
        pos, got = item
        assert got == ch
        assert pos.offset == i
    assert s.next_with_pos() is None
    assert s.last_pos().offset == len(src)


def test_peek_with_pos_reports_position_of_the_character() -> None:
    s = Speekable("ab\ncd", FILE)
    assert s.peek_with_pos() == (Pos(row=1, col=1, offset=0, file=FILE), "a")
    assert next(s) == "a"
    assert next(s) == "b"
    pos, ch = s.peek_with_pos()
    assert ch == "\n"
    assert (pos.row, pos.col) == (1, 3)
    next(s)
    pos, ch = s.peek_with_pos()
    assert ch == "c"
    assert (pos.row, pos.col, pos.offset) == (2, 1, 3)


def test_last_pos_follows_the_consumed_character() -> None:
    s = Speekable("xy", FILE)
    assert s.last_pos() == Pos(row=1, col=1, offset=0, file=FILE)
    next(s)
    assert s.last_pos() == Pos(row=1, col=2, offset=1, file=FILE)
    # Buffering the lookahead does not move last_pos past it.
    s.peek()
    assert s.last_pos() == Pos(row=1, col=2, offset=1, file=FILE)
    next(s)
    assert s.last_pos().col == 3
    assert s.peek() is None
    assert s.last_pos().col == 3


def test_exhaustion_is_not_an_error() -> None:
    s = Speekable(iter(""), "empty.vns")
    assert s.peek() is None
    assert s.peek_with_pos() is None
    assert next(s, None) is None
    assert list(s) == []


def test_wraps_any_character_iterator() -> None:
    s = Speekable((c for c in "hi"), FILE)
    assert list(s) == ["h", "i"]

from __future__ import annotations

from dataclasses import dataclass

from .symbol import Symbol


@dataclass(frozen=True, slots=True, eq=False)
class Pos:
    """A source position.

    Row and column are 1-based; offset is the 0-based count of characters
    consumed before this position. Offset takes no part in equality or
    ordering, and positions in different files are neither equal nor ordered.
    """

    row: int
    col: int
    offset: int
    file: Symbol

    @classmethod
    def start_of(cls, file: Symbol) -> Pos:
        return cls(row=1, col=1, offset=0, file=file)

    def advance(self, ch: str) -> Pos:
        if ch == "\n":
            return Pos(row=self.row + 1, col=1, offset=self.offset + 1, file=self.file)
        return Pos(row=self.row, col=self.col + 1, offset=self.offset + 1, file=self.file)

    def compare(self, other: Pos) -> int | None:
        """Return -1, 0 or 1, or None when the positions are in different files."""
        if self.file != other.file:
            return None
        a = (self.row, self.col)
        b = (other.row, other.col)
        return (a > b) - (a < b)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pos):
            return NotImplemented
        return self.compare(other) == 0

    def __hash__(self) -> int:
        return hash((self.file, self.row, self.col))

    def __lt__(self, other: Pos) -> bool:
        c = self.compare(other)
        return c is not None and c < 0

    def __le__(self, other: Pos) -> bool:
        c = self.compare(other)
        return c is not None and c <= 0

    def __gt__(self, other: Pos) -> bool:
        c = self.compare(other)
        return c is not None and c > 0

    def __ge__(self, other: Pos) -> bool:
        c = self.compare(other)
        return c is not None and c >= 0

    def __repr__(self) -> str:
        return f"{self.row}:{self.col}"


def advance(pos: Pos, ch: str) -> Pos:
    return pos.advance(ch)


def compare(a: Pos, b: Pos) -> int | None:
    return a.compare(b)


@dataclass(frozen=True, slots=True)
class Span:
    """Closed span [start, end] in a single file.

    `end` is the position of the last character covered, so a one-character
    token has start == end.
    """

    start: Pos
    end: Pos

    @classmethod
    def point(cls, pos: Pos) -> Span:
        return cls(start=pos, end=pos)

    @classmethod
    def cover(cls, first: Span, last: Span) -> Span:
        return cls(start=first.start, end=last.end)

    @property
    def file(self) -> Symbol:
        return self.start.file

    def __repr__(self) -> str:
        return f"({self.start!r} - {self.end!r})"

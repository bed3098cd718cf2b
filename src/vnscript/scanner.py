from __future__ import annotations

from collections.abc import Iterable, Iterator

from .spans import Pos
from .symbol import Symbol, intern


class Speekable:
    """Character iterator with one character of lookahead and its position.

    `peek_with_pos()` reports where the buffered character sits in the
    source, not where the cursor lands after it. Exhaustion is signalled by
    `None` (or `StopIteration` through the iterator protocol), never an error.
    """

    __slots__ = ("_inner", "_peeked", "_pos")

    def __init__(self, chars: Iterable[str], file: Symbol | str) -> None:
        if isinstance(file, str):
            file = intern(file)
        self._inner: Iterator[str] = iter(chars)
        self._peeked: tuple[Pos, str] | None = None
        self._pos = Pos.start_of(file)

    def _tick(self) -> None:
        if self._peeked is not None:
            return
        ch = next(self._inner, None)
        if ch is None:
            return
        self._peeked = (self._pos, ch)
        self._pos = self._pos.advance(ch)

    def peek(self) -> str | None:
        self._tick()
        return self._peeked[1] if self._peeked is not None else None

    def peek_with_pos(self) -> tuple[Pos, str] | None:
        self._tick()
        return self._peeked

    def next_with_pos(self) -> tuple[Pos, str] | None:
        self._tick()
        item, self._peeked = self._peeked, None
        return item

    def last_pos(self) -> Pos:
        """Position right after the most recently consumed character."""
        if self._peeked is not None:
            return self._peeked[0]
        return self._pos

    def __iter__(self) -> Speekable:
        return self

    def __next__(self) -> str:
        item = self.next_with_pos()
        if item is None:
            raise StopIteration
        return item[1]

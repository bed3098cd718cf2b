from __future__ import annotations

import threading
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Symbol:
    """Interned handle for a string (a script file name).

    Handles compare and hash by index only; the string behind one is held by
    the `Interner` that issued it.
    """

    index: int

    def __repr__(self) -> str:
        return f"Symbol({self.index})"


class Interner:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._names: list[str] = []
        self._index: dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._names)

    def intern(self, name: str) -> Symbol:
        with self._lock:
            i = self._index.get(name)
            if i is None:
                i = len(self._names)
                self._names.append(name)
                self._index[name] = i
        return Symbol(i)

    def resolve(self, sym: Symbol) -> str:
        try:
            return self._names[sym.index]
        except IndexError:
            raise KeyError(f"symbol not issued by this interner: {sym!r}") from None


_INTERNER: Interner | None = None
_INIT_LOCK = threading.Lock()


def init() -> Interner:
    """Create the process-wide interner. Safe to call more than once."""
    global _INTERNER
    with _INIT_LOCK:
        if _INTERNER is None:
            _INTERNER = Interner()
        return _INTERNER


def intern(name: str) -> Symbol:
    return (_INTERNER or init()).intern(name)


def resolve(sym: Symbol) -> str:
    return (_INTERNER or init()).resolve(sym)

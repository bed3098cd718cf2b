from __future__ import annotations

from dataclasses import dataclass, fields

from .spans import Pos, Span
from .tokens import TokenKind


@dataclass(slots=True)
class ScriptError(Exception):
    span: Span
    message: str
    hint: str | None = None

    def __str__(self) -> str:
        base = f"{self.span.start!r}: {self.message}"
        if self.hint:
            return f"{base}\nhint: {self.hint}"
        return base

    def __reduce__(self):
        # Rebuild from the dataclass fields; Exception.args is never set.
        return (type(self), tuple(getattr(self, f.name) for f in fields(self)))


@dataclass(slots=True)
class LexError(ScriptError):
    """A character that cannot begin or continue any token."""

    @property
    def pos(self) -> Pos:
        return self.span.start


@dataclass(slots=True)
class UnterminatedError(ScriptError):
    """A string, comment or grouping still open when its input ran out.

    `span` marks where input ran out; `opened` is where the construct began.
    """

    opened: Pos | None = None


@dataclass(slots=True)
class UnexpectedTokenError(ScriptError):
    found: TokenKind | None = None
    expected: str = ""


@dataclass(slots=True)
class NestingError(ScriptError):
    """Parentheses, prefix operators or assignments nested past the parser's limit."""

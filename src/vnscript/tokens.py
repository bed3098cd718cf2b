from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .spans import Span


class TokenKind(str, Enum):
    # Identifiers and literals
    IDENT = "IDENT"
    INT = "INT"
    FLOAT = "FLOAT"
    STRING = "STRING"

    # Keywords
    TRUE = "true"
    FALSE = "false"

    # Delimiters
    LPAREN = "("
    RPAREN = ")"

    # Arithmetic / bitwise / logical
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    AMP = "&"
    PIPE = "|"
    CARET = "^"
    AMP_AMP = "&&"
    PIPE_PIPE = "||"
    SHL = "<<"
    SHR = ">>"
    BANG = "!"

    # Assignment
    EQ = "="
    PLUS_EQ = "+="
    MINUS_EQ = "-="
    STAR_EQ = "*="
    SLASH_EQ = "/="
    AMP_EQ = "&="
    PIPE_EQ = "|="
    CARET_EQ = "^="
    SHL_EQ = "<<="
    SHR_EQ = ">>="

    # Comparison
    EQ_EQ = "=="
    BANG_EQ = "!="
    LT = "<"
    GT = ">"
    LT_EQ = "<="
    GT_EQ = ">="

    EOF = "EOF"

    def describe(self) -> str:
        if self is TokenKind.EOF:
            return "end of input"
        if self.value.isalpha() and self.value.isupper():
            return self.name.lower()
        return repr(self.value)


KEYWORDS: dict[str, TokenKind] = {
    "true": TokenKind.TRUE,
    "false": TokenKind.FALSE,
}

# Every token spelled with punctuation; each prefix of one is itself one.
PUNCTUATION: dict[str, TokenKind] = {k.value: k for k in TokenKind if not k.value.isalpha()}


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    lexeme: str
    span: Span
    value: object = None  # decoded literal value or identifier name

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.lexeme!r}, {self.span!r})"

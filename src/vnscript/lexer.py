from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterable, Iterator

from .errors import LexError, UnterminatedError
from .scanner import Speekable
from .spans import Pos, Span
from .symbol import Symbol
from .tokens import KEYWORDS, PUNCTUATION, Token, TokenKind


logger = logging.getLogger(__name__)

_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "0": "\0",
    "\\": "\\",
    '"': '"',
}


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_ident_start(ch: str) -> bool:
    return ch == "_" or ch.isalpha()


def _is_ident_continue(ch: str) -> bool:
    return ch == "_" or ch.isalnum()


class Lexer:
    """Groups the characters of a `Speekable` into tokens.

    Iterating a lexer yields tokens up to and including the final EOF token.
    """

    def __init__(self, chars: Iterable[str], *, file: Symbol | str = "<memory>") -> None:
        self._scan = Speekable(chars, file)

    def __iter__(self) -> Iterator[Token]:
        while True:
            tok = self.next_token()
            yield tok
            if tok.kind is TokenKind.EOF:
                return

    def next_token(self) -> Token:
        while True:
            self._skip_whitespace()
            item = self._scan.next_with_pos()
            if item is None:
                return Token(TokenKind.EOF, "", Span.point(self._scan.last_pos()))
            start, ch = item

            if ch == "/" and self._scan.peek() in ("/", "*"):
                self._skip_comment(start)
                continue

            if _is_digit(ch):
                return self._number(start, ch)
            if ch == '"':
                return self._string(start)
            if _is_ident_start(ch):
                return self._ident(start, ch)
            return self._punctuation(start, ch)

    def _take_while(self, pred: Callable[[str], bool], buf: list[str]) -> Pos | None:
        """Consume characters matching `pred` into `buf`; return the last one's position."""
        last = None
        while True:
            item = self._scan.peek_with_pos()
            if item is None or not pred(item[1]):
                return last
            last, ch = item
            buf.append(ch)
            self._scan.next_with_pos()

    def _skip_whitespace(self) -> None:
        while True:
            ch = self._scan.peek()
            if ch is None or not ch.isspace():
                return
            next(self._scan)

    def _skip_comment(self, start: Pos) -> None:
        # The opening '/' is consumed; the lookahead is '/' or '*'.
        if next(self._scan) == "/":
            while self._scan.peek() not in (None, "\n"):
                next(self._scan)
            return

        prev = ""
        for ch in self._scan:
            if prev == "*" and ch == "/":
                return
            prev = ch
        raise UnterminatedError(
            span=Span.point(self._scan.last_pos()),
            message="unterminated block comment",
            hint="add closing */",
            opened=start,
        )

    def _number(self, start: Pos, first: str) -> Token:
        buf = [first]
        end = self._take_while(_is_digit, buf) or start
        kind = TokenKind.INT

        item = self._scan.peek_with_pos()
        if item is not None and item[1] == ".":
            kind = TokenKind.FLOAT
            end = item[0]
            buf.append(".")
            self._scan.next_with_pos()
            end = self._take_while(_is_digit, buf) or end

        item = self._scan.peek_with_pos()
        if item is not None and _is_ident_continue(item[1]):
            raise LexError(
                span=Span.point(item[0]),
                message=f"unexpected character {item[1]!r} after number literal",
                hint="separate the number from the following name",
            )

        lexeme = "".join(buf)
        try:
            value: int | float = int(lexeme) if kind is TokenKind.INT else float(lexeme)
        except ValueError:
            # int() refuses strings past sys.get_int_max_str_digits().
            value = math.inf
        if isinstance(value, float) and math.isinf(value):
            raise LexError(
                span=Span(start, end),
                message="number literal out of range",
                hint="use a smaller number",
            )
        return Token(kind, lexeme, Span(start, end), value)

    def _string(self, start: Pos) -> Token:
        lexeme = ['"']
        buf: list[str] = []
        while True:
            item = self._scan.next_with_pos()
            if item is None:
                raise UnterminatedError(
                    span=Span.point(self._scan.last_pos()),
                    message="unterminated string literal",
                    hint="close the quote",
                    opened=start,
                )
            pos, ch = item
            if ch == "\n":
                raise UnterminatedError(
                    span=Span.point(pos),
                    message="unterminated string literal",
                    hint="close the quote before the end of the line",
                    opened=start,
                )
            lexeme.append(ch)
            if ch == '"':
                return Token(TokenKind.STRING, "".join(lexeme), Span(start, pos), "".join(buf))
            if ch == "\\":
                esc = self._scan.next_with_pos()
                if esc is None:
                    raise UnterminatedError(
                        span=Span.point(self._scan.last_pos()),
                        message="unterminated string escape",
                        opened=start,
                    )
                esc_pos, esc_ch = esc
                decoded = _ESCAPES.get(esc_ch)
                if decoded is None:
                    raise LexError(
                        span=Span(pos, esc_pos),
                        message=f"unknown escape sequence '\\{esc_ch}'",
                        hint="valid escapes: " + " ".join("\\" + e for e in _ESCAPES),
                    )
                lexeme.append(esc_ch)
                buf.append(decoded)
                continue
            buf.append(ch)

    def _ident(self, start: Pos, first: str) -> Token:
        buf = [first]
        end = self._take_while(_is_ident_continue, buf) or start
        name = "".join(buf)
        kind = KEYWORDS.get(name)
        if kind is not None:
            return Token(kind, name, Span(start, end), kind is TokenKind.TRUE)
        return Token(TokenKind.IDENT, name, Span(start, end), name)

    def _punctuation(self, start: Pos, first: str) -> Token:
        text = first
        end = start
        # Maximal munch: every prefix of an operator is an operator, so one
        # character of lookahead is enough.
        while True:
            item = self._scan.peek_with_pos()
            if item is None or text + item[1] not in PUNCTUATION:
                break
            end, ch = item
            text += ch
            self._scan.next_with_pos()

        kind = PUNCTUATION.get(text)
        if kind is None:
            raise LexError(
                span=Span.point(start),
                message=f"unexpected character {first!r}",
                hint="remove the character or replace with a valid operator",
            )
        return Token(kind, text, Span(start, end))


def tokenize(src: Iterable[str], *, file: Symbol | str = "<memory>") -> list[Token]:
    tokens = list(Lexer(src, file=file))
    logger.debug("lexed %d tokens from %s", len(tokens), file)
    return tokens

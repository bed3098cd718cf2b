from __future__ import annotations

from .ast import Binary, Expr, Grouping, Identifier, Literal, Unary
from .errors import NestingError, UnexpectedTokenError, UnterminatedError
from .ops import BINARY_OPS, UNARY_OPS, Assoc, Precedence
from .spans import Span
from .tokens import Token, TokenKind


# Each level costs at most three Python frames, which keeps a parse well
# inside the default recursion limit.
MAX_NESTING = 200

_LITERAL_KINDS: dict[TokenKind, str] = {
    TokenKind.INT: "int",
    TokenKind.FLOAT: "float",
    TokenKind.STRING: "string",
    TokenKind.TRUE: "bool",
    TokenKind.FALSE: "bool",
}


class Parser:
    """Precedence-climbing parser over a token list ending in EOF."""

    def __init__(self, tokens: list[Token]) -> None:
        if not tokens or tokens[-1].kind is not TokenKind.EOF:
            raise ValueError("token list must end with an EOF token")
        self._tokens = tokens
        self._i = 0
        self._depth = 0

    def _peek(self) -> Token:
        return self._tokens[self._i]

    def _advance(self) -> Token:
        tok = self._tokens[self._i]
        if tok.kind is not TokenKind.EOF:
            self._i += 1
        return tok

    def _descend(self) -> None:
        self._depth += 1
        if self._depth > MAX_NESTING:
            tok = self._peek()
            raise NestingError(
                span=tok.span,
                message=f"expression nested deeper than {MAX_NESTING} levels",
                hint="split the expression or assign parts of it to names first",
            )

    def parse(self) -> Expr:
        expr = self.parse_expr()
        tok = self._peek()
        if tok.kind is TokenKind.RPAREN:
            raise UnexpectedTokenError(
                span=tok.span,
                message="unmatched ')'",
                hint="remove it or add a matching '('",
                found=tok.kind,
                expected="end of input",
            )
        if tok.kind is not TokenKind.EOF:
            raise UnexpectedTokenError(
                span=tok.span,
                message=f"expected an operator or end of input, found {tok.kind.describe()}",
                found=tok.kind,
                expected="operator",
            )
        return expr

    def parse_expr(self, min_prec: int = Precedence.ASSIGNMENT) -> Expr:
        try:
            self._descend()
            lhs = self._parse_unary()
            while True:
                op = BINARY_OPS.get(self._peek().kind)
                if op is None or op.precedence < min_prec:
                    return lhs
                self._advance()
                next_min = op.precedence if op.assoc is Assoc.RIGHT else op.precedence + 1
                rhs = self.parse_expr(next_min)
                lhs = Binary(span=Span.cover(lhs.span, rhs.span), op=op, lhs=lhs, rhs=rhs)
        finally:
            self._depth -= 1

    def _parse_unary(self) -> Expr:
        tok = self._peek()
        op = UNARY_OPS.get(tok.kind)
        if op is None:
            return self._parse_primary()
        try:
            self._descend()
            self._advance()
            operand = self._parse_unary()
        finally:
            self._depth -= 1
        return Unary(span=Span.cover(tok.span, operand.span), op=op, operand=operand)

    def _parse_primary(self) -> Expr:
        tok = self._peek()

        kind = _LITERAL_KINDS.get(tok.kind)
        if kind is not None:
            self._advance()
            return Literal(span=tok.span, kind=kind, value=tok.value)

        if tok.kind is TokenKind.IDENT:
            self._advance()
            return Identifier(span=tok.span, name=tok.lexeme)

        if tok.kind is TokenKind.LPAREN:
            self._advance()
            inner = self.parse_expr()
            close = self._peek()
            if close.kind is TokenKind.RPAREN:
                self._advance()
                return Grouping(span=Span.cover(tok.span, close.span), inner=inner)
            if close.kind is TokenKind.EOF:
                raise UnterminatedError(
                    span=close.span,
                    message="unclosed '(' at end of input",
                    hint=f"'(' opened at {tok.span.start!r}",
                    opened=tok.span.start,
                )
            raise UnexpectedTokenError(
                span=close.span,
                message=f"expected ')', found {close.kind.describe()}",
                found=close.kind,
                expected="')'",
            )

        if tok.kind is TokenKind.EOF:
            raise UnexpectedTokenError(
                span=tok.span,
                message="unexpected end of input, expected an expression",
                found=tok.kind,
                expected="expression",
            )
        if tok.kind is TokenKind.RPAREN:
            raise UnexpectedTokenError(
                span=tok.span,
                message="unmatched ')'",
                hint="expected an expression before ')'",
                found=tok.kind,
                expected="expression",
            )
        raise UnexpectedTokenError(
            span=tok.span,
            message=f"expected an expression, found {tok.kind.describe()}",
            found=tok.kind,
            expected="expression",
        )

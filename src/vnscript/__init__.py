from __future__ import annotations

from .api import parse_expression, parse_file
from .ast import Binary, Expr, Grouping, Identifier, Literal, Unary
from .diagnostics import format_diagnostic
from .errors import LexError, NestingError, ScriptError, UnexpectedTokenError, UnterminatedError
from .format import dump_expr, format_expr
from .lexer import Lexer, tokenize
from .ops import BinaryOp, Precedence, UnaryOp
from .parser import Parser
from .scanner import Speekable
from .spans import Pos, Span
from .symbol import Symbol, intern

__all__ = [
    "Binary",
    "BinaryOp",
    "Expr",
    "Grouping",
    "Identifier",
    "LexError",
    "Lexer",
    "Literal",
    "NestingError",
    "Parser",
    "Pos",
    "Precedence",
    "ScriptError",
    "Span",
    "Speekable",
    "Symbol",
    "Unary",
    "UnaryOp",
    "UnexpectedTokenError",
    "UnterminatedError",
    "dump_expr",
    "format_diagnostic",
    "format_expr",
    "intern",
    "parse_expression",
    "parse_file",
    "tokenize",
]

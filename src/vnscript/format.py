from __future__ import annotations

import math
from decimal import Decimal

from . import ast as A
from .ops import Assoc, Precedence


_UNESCAPES = {
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
    "\0": "\\0",
    "\\": "\\\\",
    '"': '\\"',
}


def _format_literal(lit: A.Literal) -> str:
    if lit.kind == "bool":
        return "true" if lit.value else "false"
    if lit.kind == "string":
        return '"' + "".join(_UNESCAPES.get(c, c) for c in str(lit.value)) + '"'
    if lit.kind == "float":
        return _format_float(float(lit.value))
    return repr(lit.value)


def _format_float(value: float) -> str:
    # No exponent syntax in the lexer: always print positional digits.
    if not math.isfinite(value):
        raise ValueError(f"float literal has no source form: {value!r}")
    text = format(Decimal(repr(value)), "f")
    if "." not in text:
        text += ".0"
    return text


def _precedence(expr: A.Expr) -> int:
    if isinstance(expr, A.Binary):
        return expr.op.precedence
    if isinstance(expr, A.Unary):
        return Precedence.UNARY
    # Atoms never need parentheses.
    return Precedence.UNARY + 1


def format_expr(expr: A.Expr) -> str:
    """Render an expression as canonical source text.

    Trees from the parser already carry their parentheses as `Grouping`
    nodes; parentheses are only added for hand-built trees that need them.
    """
    if isinstance(expr, A.Literal):
        return _format_literal(expr)
    if isinstance(expr, A.Identifier):
        return expr.name
    if isinstance(expr, A.Grouping):
        return f"({format_expr(expr.inner)})"
    if isinstance(expr, A.Unary):
        operand = _wrap(expr.operand, _precedence(expr.operand) < Precedence.UNARY)
        if isinstance(expr.operand, A.Unary):
            # "- -x" rather than "--x" keeps the operators apart when read back.
            return f"{expr.op.value} {operand}"
        return f"{expr.op.value}{operand}"
    if isinstance(expr, A.Binary):
        prec = expr.op.precedence
        right_assoc = expr.op.assoc is Assoc.RIGHT
        lhs_prec = _precedence(expr.lhs)
        rhs_prec = _precedence(expr.rhs)
        lhs = _wrap(expr.lhs, lhs_prec < prec or (lhs_prec == prec and right_assoc))
        rhs = _wrap(expr.rhs, rhs_prec < prec or (rhs_prec == prec and not right_assoc))
        return f"{lhs} {expr.op.value} {rhs}"
    raise TypeError(f"not an expression node: {type(expr)!r}")


def _wrap(expr: A.Expr, parens: bool) -> str:
    text = format_expr(expr)
    return f"({text})" if parens else text


def dump_expr(expr: A.Expr) -> str:
    """S-expression view of the tree: `(= a (= b c))`, `(group ...)`."""
    if isinstance(expr, A.Literal):
        return _format_literal(expr)
    if isinstance(expr, A.Identifier):
        return expr.name
    if isinstance(expr, A.Grouping):
        return f"(group {dump_expr(expr.inner)})"
    if isinstance(expr, A.Unary):
        return f"({expr.op.value} {dump_expr(expr.operand)})"
    if isinstance(expr, A.Binary):
        return f"({expr.op.value} {dump_expr(expr.lhs)} {dump_expr(expr.rhs)})"
    raise TypeError(f"not an expression node: {type(expr)!r}")

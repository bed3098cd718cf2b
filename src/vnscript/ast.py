from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .ops import BinaryOp, UnaryOp
from .spans import Span


@dataclass(frozen=True, slots=True)
class Node:
    span: Span


@dataclass(frozen=True, slots=True)
class Literal(Node):
    kind: str  # "int" | "float" | "string" | "bool"
    value: int | float | str | bool


@dataclass(frozen=True, slots=True)
class Identifier(Node):
    name: str


@dataclass(frozen=True, slots=True)
class Unary(Node):
    op: UnaryOp
    operand: Expr


@dataclass(frozen=True, slots=True)
class Binary(Node):
    op: BinaryOp
    lhs: Expr
    rhs: Expr


@dataclass(frozen=True, slots=True)
class Grouping(Node):
    """A parenthesized expression, kept so spans include the parentheses."""

    inner: Expr


Expr = Literal | Identifier | Unary | Binary | Grouping


def children(expr: Expr) -> tuple[Expr, ...]:
    if isinstance(expr, Unary):
        return (expr.operand,)
    if isinstance(expr, Binary):
        return (expr.lhs, expr.rhs)
    if isinstance(expr, Grouping):
        return (expr.inner,)
    return ()


def walk(expr: Expr) -> Iterator[Expr]:
    """Yield every node of the tree, parents before children."""
    stack = [expr]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(children(node)))

from __future__ import annotations

from enum import Enum, IntEnum

from .tokens import TokenKind


class Precedence(IntEnum):
    ASSIGNMENT = 1
    LOGIC_OR = 2
    LOGIC_AND = 3
    BIT_OR = 4
    BIT_XOR = 5
    BIT_AND = 6
    EQUALITY = 7
    RELATIONAL = 8
    SHIFT = 9
    ADDITIVE = 10
    MULTIPLICATIVE = 11
    UNARY = 12


class Assoc(str, Enum):
    LEFT = "left"
    RIGHT = "right"


class BinaryOp(str, Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    BIT_AND = "&"
    BIT_OR = "|"
    BIT_XOR = "^"
    LOGIC_AND = "&&"
    LOGIC_OR = "||"
    LEFT_SHIFT = "<<"
    RIGHT_SHIFT = ">>"
    ASSIGN = "="
    ADD_ASSIGN = "+="
    SUB_ASSIGN = "-="
    MUL_ASSIGN = "*="
    DIV_ASSIGN = "/="
    BIT_AND_ASSIGN = "&="
    BIT_OR_ASSIGN = "|="
    BIT_XOR_ASSIGN = "^="
    LEFT_SHIFT_ASSIGN = "<<="
    RIGHT_SHIFT_ASSIGN = ">>="
    CMP_EQ = "=="
    CMP_NE = "!="
    CMP_LT = "<"
    CMP_GT = ">"
    CMP_LE = "<="
    CMP_GE = ">="

    @property
    def precedence(self) -> Precedence:
        return _BINARY_PRECEDENCE[self]

    @property
    def is_assignment(self) -> bool:
        return self.precedence is Precedence.ASSIGNMENT

    @property
    def assoc(self) -> Assoc:
        # Assignment yields a value and chains to the right: a = (b = c).
        return Assoc.RIGHT if self.is_assignment else Assoc.LEFT


class UnaryOp(str, Enum):
    NEG = "-"
    NOT = "!"

    @property
    def precedence(self) -> Precedence:
        return Precedence.UNARY


_BINARY_PRECEDENCE: dict[BinaryOp, Precedence] = {
    BinaryOp.ASSIGN: Precedence.ASSIGNMENT,
    BinaryOp.ADD_ASSIGN: Precedence.ASSIGNMENT,
    BinaryOp.SUB_ASSIGN: Precedence.ASSIGNMENT,
    BinaryOp.MUL_ASSIGN: Precedence.ASSIGNMENT,
    BinaryOp.DIV_ASSIGN: Precedence.ASSIGNMENT,
    BinaryOp.BIT_AND_ASSIGN: Precedence.ASSIGNMENT,
    BinaryOp.BIT_OR_ASSIGN: Precedence.ASSIGNMENT,
    BinaryOp.BIT_XOR_ASSIGN: Precedence.ASSIGNMENT,
    BinaryOp.LEFT_SHIFT_ASSIGN: Precedence.ASSIGNMENT,
    BinaryOp.RIGHT_SHIFT_ASSIGN: Precedence.ASSIGNMENT,
    BinaryOp.LOGIC_OR: Precedence.LOGIC_OR,
    BinaryOp.LOGIC_AND: Precedence.LOGIC_AND,
    BinaryOp.BIT_OR: Precedence.BIT_OR,
    BinaryOp.BIT_XOR: Precedence.BIT_XOR,
    BinaryOp.BIT_AND: Precedence.BIT_AND,
    BinaryOp.CMP_EQ: Precedence.EQUALITY,
    BinaryOp.CMP_NE: Precedence.EQUALITY,
    BinaryOp.CMP_LT: Precedence.RELATIONAL,
    BinaryOp.CMP_GT: Precedence.RELATIONAL,
    BinaryOp.CMP_LE: Precedence.RELATIONAL,
    BinaryOp.CMP_GE: Precedence.RELATIONAL,
    BinaryOp.LEFT_SHIFT: Precedence.SHIFT,
    BinaryOp.RIGHT_SHIFT: Precedence.SHIFT,
    BinaryOp.ADD: Precedence.ADDITIVE,
    BinaryOp.SUB: Precedence.ADDITIVE,
    BinaryOp.MUL: Precedence.MULTIPLICATIVE,
    BinaryOp.DIV: Precedence.MULTIPLICATIVE,
}

# Operator enums share their source text with the token kinds.
BINARY_OPS: dict[TokenKind, BinaryOp] = {TokenKind(op.value): op for op in BinaryOp}
UNARY_OPS: dict[TokenKind, UnaryOp] = {TokenKind(op.value): op for op in UnaryOp}

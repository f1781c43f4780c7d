"""Shared definitions for AST operation identifiers and precedence levels.

This module centralizes the operator constants used by the parser and
interpreter to label prefix and infix nodes in the abstract syntax tree, and
the precedence levels the expression parser climbs through. Keeping them in
one place prevents the two components from drifting apart when new operators
are added.


File: operations.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum, IntEnum


class Op(str, Enum):
    """
    Enumeration of supported AST operation names.
    """

    # Arithmetic
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"

    # Bitwise
    AND_BITS = "&"
    OR_BITS = "|"
    XOR_BITS = "^"
    SHL = "<<"
    SHR = ">>"

    # Comparison
    EQ = "=="
    NE = "!="
    GT = ">"
    LT = "<"
    GE = ">="
    LE = "<="

    # Membership
    IN = "~"

    # Prefix only
    NOT = "!"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the operator symbol for error messages and debug output.
        """
        return self.value


class Precedence(IntEnum):
    """
    Binding power of infix, call and index operators, lowest first.
    """
    LOWEST = 1
    EQUALS = 2
    RELATIONAL = 3
    ADDITIVE = 4
    MULTIPLICATIVE = 5
    PREFIX = 6
    CALL = 7
    INDEX = 8
    MEMBERSHIP = 9
    BITWISE_OR = 10
    BITWISE_XOR = 11
    BITWISE_AND = 12
    SHIFT_LEFT = 13
    SHIFT_RIGHT = 14


# Infix token types mapped to the operator they build.
INFIX_OPS: dict[str, Op] = {
    'PLUS': Op.ADD,
    'MINUS': Op.SUB,
    'ASTERISK': Op.MUL,
    'SLASH': Op.DIV,
    'PERCENT': Op.MOD,
    'EQ': Op.EQ,
    'NE': Op.NE,
    'LT': Op.LT,
    'GT': Op.GT,
    'LE': Op.LE,
    'GE': Op.GE,
    'AMP': Op.AND_BITS,
    'PIPE': Op.OR_BITS,
    'CARET': Op.XOR_BITS,
    'LSHIFT': Op.SHL,
    'RSHIFT': Op.SHR,
    'IN': Op.IN,
}

PREFIX_OPS: dict[str, Op] = {
    'BANG': Op.NOT,
    'MINUS': Op.SUB,
    'PLUS': Op.ADD,
}

PRECEDENCES: dict[str, Precedence] = {
    'EQ': Precedence.EQUALS,
    'NE': Precedence.EQUALS,
    'LT': Precedence.RELATIONAL,
    'GT': Precedence.RELATIONAL,
    'LE': Precedence.RELATIONAL,
    'GE': Precedence.RELATIONAL,
    'PLUS': Precedence.ADDITIVE,
    'MINUS': Precedence.ADDITIVE,
    'ASTERISK': Precedence.MULTIPLICATIVE,
    'SLASH': Precedence.MULTIPLICATIVE,
    'PERCENT': Precedence.MULTIPLICATIVE,
    'LPAREN': Precedence.CALL,
    'LBRACKET': Precedence.INDEX,
    'IN': Precedence.MEMBERSHIP,
    'PIPE': Precedence.BITWISE_OR,
    'CARET': Precedence.BITWISE_XOR,
    'AMP': Precedence.BITWISE_AND,
    'LSHIFT': Precedence.SHIFT_LEFT,
    'RSHIFT': Precedence.SHIFT_RIGHT,
}


def precedence_of(token_type: str) -> Precedence:
    """
    Return the binding power of a token type, ``LOWEST`` for non-operators.
    """
    return PRECEDENCES.get(token_type, Precedence.LOWEST)


__all__ = ["Op", "Precedence", "INFIX_OPS", "PREFIX_OPS", "PRECEDENCES", "precedence_of"]

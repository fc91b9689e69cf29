"""Token type definitions for arithmetic expressions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from typing import Optional


class TokenType(Enum):
    # Literals
    NUM = auto()

    # Operators
    ADD = auto()           # +
    SUBTRACT = auto()      # -
    MULTIPLY = auto()      # *
    DIVIDE = auto()        # /
    CARET = auto()         # ^

    # Delimiters
    LPAREN = auto()        # (
    RPAREN = auto()        # )

    # Special
    EOF = auto()


class OperPrec(IntEnum):
    """Operator precedence, lowest to highest."""
    DEFAULT_ZERO = 0
    ADD_SUB = 1
    MUL_DIV = 2
    POWER = 3
    NEGATIVE = 4


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: Optional[float] = None

    @property
    def precedence(self) -> OperPrec:
        return PRECEDENCE.get(self.type, OperPrec.DEFAULT_ZERO)

    def __repr__(self):
        if self.type == TokenType.NUM:
            return f"Token({self.type.name}, {self.value!r})"
        return f"Token({self.type.name})"


# Single-character symbols: string -> TokenType
SYMBOLS: dict[str, TokenType] = {
    "+": TokenType.ADD,
    "-": TokenType.SUBTRACT,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
    "^": TokenType.CARET,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}

# Binding power of infix operators; every other token type ranks DEFAULT_ZERO
PRECEDENCE: dict[TokenType, OperPrec] = {
    TokenType.ADD: OperPrec.ADD_SUB,
    TokenType.SUBTRACT: OperPrec.ADD_SUB,
    TokenType.MULTIPLY: OperPrec.MUL_DIV,
    TokenType.DIVIDE: OperPrec.MUL_DIV,
    TokenType.CARET: OperPrec.POWER,
}

DIGITS = frozenset("0123456789")
DECIMAL_POINT = "."

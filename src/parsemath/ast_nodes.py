"""AST node definitions for arithmetic expressions.

Nodes are frozen dataclasses compared by structure. A tree is built bottom-up
by the parser and never mutated afterwards, so children are never shared and
cycles cannot occur.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Number:
    value: float


@dataclass(frozen=True)
class Negative:
    operand: Node


@dataclass(frozen=True)
class BinaryNode:
    left: Node
    right: Node


@dataclass(frozen=True)
class Add(BinaryNode):
    pass


@dataclass(frozen=True)
class Subtract(BinaryNode):
    pass


@dataclass(frozen=True)
class Multiply(BinaryNode):
    pass


@dataclass(frozen=True)
class Divide(BinaryNode):
    pass


@dataclass(frozen=True)
class Caret(BinaryNode):
    """Exponentiation: ``left`` is the base, ``right`` the exponent."""


Node = Union[Number, Negative, Add, Subtract, Multiply, Divide, Caret]

"""Primary expression parsing: numbers, unary minus, parenthesized groups."""

from ..ast_nodes import Multiply, Negative, Number
from ..tokens import OperPrec, TokenType
from .core import UnableToParse


class PrimaryMixin:

    def _parse_number(self):
        tok = self.current

        if tok.type == TokenType.SUBTRACT:
            self._advance()
            # Binds tighter than ^, so -1^2 is (-1)^2
            operand = self._generate_ast(OperPrec.NEGATIVE)
            return Negative(operand)

        if tok.type == TokenType.NUM:
            self._advance()
            return Number(tok.value)

        if tok.type == TokenType.LPAREN:
            return self._parse_group()

        raise UnableToParse("Unable to parse")

    def _parse_group(self):
        self._advance()  # (
        expr = self._generate_ast(OperPrec.DEFAULT_ZERO)
        self._check_paren()

        # Implicit multiplication: (a)(b)
        if self._check(TokenType.LPAREN):
            right = self._generate_ast(OperPrec.MUL_DIV)
            return Multiply(expr, right)
        return expr

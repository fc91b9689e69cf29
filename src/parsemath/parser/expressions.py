"""Expression parsing: precedence climbing over the binary operators."""

from ..ast_nodes import Add, Caret, Divide, Multiply, Subtract
from ..tokens import OperPrec, TokenType
from .core import InvalidOperator

# Operator token -> (node class, precedence its right operand is parsed at)
BINARY_OPS = {
    TokenType.ADD: (Add, OperPrec.ADD_SUB),
    TokenType.SUBTRACT: (Subtract, OperPrec.ADD_SUB),
    TokenType.MULTIPLY: (Multiply, OperPrec.MUL_DIV),
    TokenType.DIVIDE: (Divide, OperPrec.MUL_DIV),
    TokenType.CARET: (Caret, OperPrec.POWER),
}


class ExpressionsMixin:

    def _generate_ast(self, oper_prec: OperPrec):
        """Parse an operand, then fold in every operator that binds tighter
        than ``oper_prec``."""
        left = self._parse_number()
        while oper_prec < self.current.precedence:
            if self._check(TokenType.EOF):
                break
            left = self._convert_token_to_node(left)
        return left

    def _convert_token_to_node(self, left):
        op = BINARY_OPS.get(self.current.type)
        if op is None:
            raise InvalidOperator(f"Please enter valid operator {self.current!r}")
        node_class, right_prec = op
        self._advance()
        right = self._generate_ast(right_prec)
        return node_class(left, right)

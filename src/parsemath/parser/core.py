"""Parser core: token manipulation, error types, and parse() entry point."""

import logging

from ..tokenizer import Tokenizer
from ..tokens import OperPrec, Token, TokenType

logger = logging.getLogger(__name__)


class ParseError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UnableToParse(ParseError):
    """The current token cannot begin an expression."""


class InvalidOperator(ParseError):
    """An operator or closing parenthesis was missing or unexpected, or the
    source contains a character the tokenizer does not recognize."""


class ParserBase:
    def __init__(self, source: str):
        self.source = source
        self.tokenizer = Tokenizer(source)
        self.current: Token = self._next_token()

    def parse(self):
        logger.debug("parsing %r", self.source)
        ast = self._generate_ast(OperPrec.DEFAULT_ZERO)
        logger.debug("parsed %r -> %r", self.source, ast)
        return ast

    # ---- Token helpers ----

    def _next_token(self) -> Token:
        tok = next(self.tokenizer, None)
        if tok is None:
            raise InvalidOperator("Invalid character")
        return tok

    def _advance(self) -> Token:
        tok = self.current
        self.current = self._next_token()
        return tok

    def _check(self, *types: TokenType) -> bool:
        return self.current.type in types

    def _check_paren(self):
        if self._check(TokenType.RPAREN):
            self._advance()
            return
        raise InvalidOperator(
            f"Expected {Token(TokenType.RPAREN)!r}, got {self.current!r}"
        )

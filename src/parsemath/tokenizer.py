"""Tokenizer for arithmetic expressions.

Produces tokens lazily, one per call to ``next()``. The input grammar has no
whitespace: any character that is not a digit, a decimal point inside a
number, or one of ``+ - * / ^ ( )`` ends the sequence without a token. Callers
must treat that as a lexical failure, not as end of input.
"""

import logging

from .tokens import DECIMAL_POINT, DIGITS, SYMBOLS, Token, TokenType

logger = logging.getLogger(__name__)


class Tokenizer:
    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self._exhausted = False

    def __iter__(self):
        return self

    def __next__(self) -> Token:
        if self._exhausted:
            raise StopIteration

        if self.pos >= len(self.source):
            # EOF is emitted exactly once
            self._exhausted = True
            return Token(TokenType.EOF)

        ch = self.source[self.pos]

        if ch in DIGITS:
            return self._read_number()

        token_type = SYMBOLS.get(ch)
        if token_type is not None:
            self._advance()
            return Token(token_type)

        logger.debug("unrecognized character %r at offset %d", ch, self.pos)
        self._exhausted = True
        raise StopIteration

    # --- Character helpers ---

    def _peek(self, offset: int = 0) -> str:
        pos = self.pos + offset
        if pos < len(self.source):
            return self.source[pos]
        return '\0'

    def _advance(self) -> str:
        ch = self.source[self.pos]
        self.pos += 1
        return ch

    # --- Literals ---

    def _read_number(self) -> Token:
        start = self.pos
        self._advance()
        while self._peek() in DIGITS or self._peek() == DECIMAL_POINT:
            self._advance()
        # "1.2.3" is not rejected here; float() raises ValueError for it
        return Token(TokenType.NUM, float(self.source[start:self.pos]))


def tokenize(source: str) -> list[Token]:
    """Drain a tokenizer into a list.

    Stops at the first unrecognized character, so a list that does not end
    with an EOF token means the source did not scan cleanly.
    """
    return list(Tokenizer(source))

"""Parser assembly: combines the parsing mixins into the final Parser class."""

from .core import InvalidOperator, ParseError, ParserBase, UnableToParse
from .expressions import ExpressionsMixin
from .primary import PrimaryMixin


class Parser(
    PrimaryMixin,
    ExpressionsMixin,
    ParserBase,
):
    """Precedence-climbing recursive descent parser for arithmetic expressions."""
    pass


def parse(source: str):
    return Parser(source).parse()


__all__ = ["Parser", "parse", "ParseError", "UnableToParse", "InvalidOperator"]

from .parser import InvalidOperator, ParseError, Parser, UnableToParse, parse

__all__ = ["Parser", "parse", "ParseError", "UnableToParse", "InvalidOperator"]

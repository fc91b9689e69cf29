"""parsemath: arithmetic expression tokenizer and parser."""

from .tokens import OperPrec as OperPrec, Token as Token, TokenType as TokenType
from .tokenizer import Tokenizer as Tokenizer, tokenize as tokenize
from .ast_nodes import (
    Add as Add,
    Caret as Caret,
    Divide as Divide,
    Multiply as Multiply,
    Negative as Negative,
    Node as Node,
    Number as Number,
    Subtract as Subtract,
)
from .parser import (
    InvalidOperator as InvalidOperator,
    ParseError as ParseError,
    Parser as Parser,
    UnableToParse as UnableToParse,
    parse as parse,
)

__version__ = "0.1.0"

"""
exprparser Package

A small operator-precedence parser that turns arithmetic expressions
(integers, + - * /, parentheses) into an abstract syntax tree.

Architecture:
    exprparser/
    ├── lexer/           # Tokenization
    └── parser/          # Pratt parsing and AST nodes

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import (
    Lexer, Token, TokenType, SourceLocation, tokenize_string,
    ExpressionError, LexerError, UnexpectedCharacterError, NumberOverflowError,
)
from .parser import (
    Parser, Expression, Literal, BinaryOp, binding_power, parse_string, parse_tokens,
    ParseError, UnexpectedTokenError, UnexpectedEndOfInputError,
    UnmatchedParenthesisError, TrailingTokensError, NestingTooDeepError,
)

__all__ = [
    # Core classes
    "Lexer",
    "Parser",
    "Token",
    "TokenType",
    "SourceLocation",
    "Expression",
    "Literal",
    "BinaryOp",

    # Convenience functions
    "tokenize_string",
    "parse_string",
    "parse_tokens",
    "binding_power",

    # Errors
    "ExpressionError",
    "LexerError",
    "UnexpectedCharacterError",
    "NumberOverflowError",
    "ParseError",
    "UnexpectedTokenError",
    "UnexpectedEndOfInputError",
    "UnmatchedParenthesisError",
    "TrailingTokensError",
    "NestingTooDeepError",

    # Version info
    "__version__",
    "__license__",
]

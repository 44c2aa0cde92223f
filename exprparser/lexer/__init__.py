"""
Expression Lexer Package

Converts arithmetic source text into a lazy stream of tokens: integer
literals, the four arithmetic operators and parentheses.

Key Features:
- Lazy, single-pass tokenization (the lexer is an iterator)
- Multi-digit integer literals with overflow detection
- Source location tracking for diagnostics
- Unrecognized characters raise instead of ending the stream
"""

from .tokens import Token, TokenType, SourceLocation
from .lexer import Lexer, tokenize_string, tokenize_file
from .errors import (
    Diagnostic, ExpressionError, LexerError,
    UnexpectedCharacterError, NumberOverflowError,
)

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    "tokenize_string",
    "tokenize_file",
    "Diagnostic",
    "ExpressionError",
    "LexerError",
    "UnexpectedCharacterError",
    "NumberOverflowError",
]

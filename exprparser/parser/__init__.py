"""
Expression Parser Package

Implements a Pratt (top-down operator precedence) parser for arithmetic
expressions and the AST it produces.

Key Features:
- Binding power table with left-associative binary operators
- Prefix (nud) and infix (led) rule tables keyed by token type
- Works on a Lexer or on any pre-built token sequence
- One exception class per structural error
"""

from .ast_nodes import (
    ASTNodeType, ASTVisitor, Expression, Literal, BinaryOp, SourceSpan,
)
from .parser import (
    Parser, Precedence, PRECEDENCES, TokenStream, binding_power,
    parse_string, parse_tokens, parse_file,
)
from .errors import (
    ParseError, UnexpectedTokenError, UnexpectedEndOfInputError,
    UnmatchedParenthesisError, TrailingTokensError, NestingTooDeepError,
)

__all__ = [
    # Core parser
    "Parser",
    "Precedence",
    "PRECEDENCES",
    "TokenStream",
    "binding_power",
    "parse_string",
    "parse_tokens",
    "parse_file",

    # AST nodes
    "ASTNodeType", "ASTVisitor", "Expression", "Literal", "BinaryOp", "SourceSpan",

    # Error handling
    "ParseError", "UnexpectedTokenError", "UnexpectedEndOfInputError",
    "UnmatchedParenthesisError", "TrailingTokensError", "NestingTooDeepError",
]

"""
Token definitions for the expression lexer.

The token set is closed: integer literals, the four arithmetic operators
and the two grouping parentheses. There is no end-of-input or "unknown"
token; the lexer stops iterating at end of input and raises on anything
it does not recognize.
"""

from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Any, Optional


class TokenType(Enum):
    """Enumeration of all token types."""

    # Literals
    NUMBER = auto()                 # 42, 1000

    # Arithmetic operators
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    STAR = auto()                   # *
    SLASH = auto()                  # /

    # Grouping
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the input.

    Used for error reporting. Line and column are 1-based, offset is the
    0-based character position from the start of the input.
    """
    filename: str
    line: int
    column: int
    offset: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    A lexical token.

    The location is carried for diagnostics only and is ignored by
    equality, so a hand-built token list compares equal to lexed tokens.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    value: Any = None               # int for NUMBER, None otherwise
    location: Optional[SourceLocation] = field(default=None, compare=False)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.type.name}({self.value!r})"
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.value!r}, {self.location!r})")

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type == TokenType.NUMBER

    @property
    def end_offset(self) -> Optional[int]:
        """Offset just past the last character of this token, if known."""
        if self.location is None:
            return None
        return self.location.offset + len(self.lexeme)

    @property
    def end_location(self) -> Optional[SourceLocation]:
        """Location just past the last character of this token, if known."""
        if self.location is None:
            return None
        return SourceLocation(
            self.location.filename,
            self.location.line,
            self.location.column + len(self.lexeme),
            self.location.offset + len(self.lexeme)
        )

    @classmethod
    def number(cls, value: int, location: Optional[SourceLocation] = None) -> "Token":
        """Build a NUMBER token for a known value."""
        return cls(TokenType.NUMBER, str(value), value, location)

    @classmethod
    def symbol(cls, token_type: TokenType, location: Optional[SourceLocation] = None) -> "Token":
        """Build an operator or parenthesis token from its type."""
        return cls(token_type, SYMBOL_LEXEMES[token_type], None, location)


# Single-character operators and punctuation
OPERATORS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
}

SYMBOL_LEXEMES = {token_type: lexeme for lexeme, token_type in OPERATORS.items()}

ARITHMETIC_OPERATORS = frozenset({
    TokenType.PLUS,
    TokenType.MINUS,
    TokenType.STAR,
    TokenType.SLASH,
})

DIGITS = frozenset("0123456789")

# Largest literal accepted, the range of a signed 64-bit integer
INTEGER_MAX = 2 ** 63 - 1

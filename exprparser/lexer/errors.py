"""
Error handling for the expression lexer.

Every lexing failure is fatal for its input: the lexer raises on the first
problem and does not try to continue.
"""

from typing import Optional, List
from dataclasses import dataclass

from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """Base class for diagnostics (errors, warnings)."""
    message: str
    location: Optional[SourceLocation]
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        if self.location is not None:
            result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class ExpressionError(Exception):
    """
    Base class for every lexing and parsing failure.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation],
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def location(self) -> Optional[SourceLocation]:
        return self.diagnostic.location

    @property
    def position(self) -> Optional[int]:
        """0-based offset of the failure, or None when it is unknown."""
        if self.diagnostic.location is None:
            return None
        return self.diagnostic.location.offset

    def __str__(self) -> str:
        return str(self.diagnostic)


class LexerError(ExpressionError):
    """Exception raised when the lexer cannot produce the next token."""


class UnexpectedCharacterError(LexerError):
    """A character outside digits, whitespace, operators and parentheses."""

    def __init__(self, character: str, location: SourceLocation, **kwargs):
        super().__init__(f"Unexpected character: {character!r}", location, **kwargs)
        self.character = character


class NumberOverflowError(LexerError):
    """A digit run whose value does not fit the supported integer range."""

    def __init__(self, lexeme: str, location: SourceLocation, **kwargs):
        super().__init__(f"Number literal overflow: '{lexeme}'", location, **kwargs)
        self.lexeme = lexeme


# Look-alike characters often pasted from documents
ASCII_ALTERNATIVES = {
    "×": "*",
    "⋅": "*",
    "÷": "/",
    "−": "-",
    "–": "-",
    "（": "(",
    "）": ")",
}


def create_unexpected_character_error(char: str, location: SourceLocation) -> UnexpectedCharacterError:
    """Create an error for a character the lexer does not recognize."""
    alternative = ASCII_ALTERNATIVES.get(char)
    suggestions = []

    if alternative:
        help_text = f"Did you mean the ASCII operator '{alternative}'?"
        suggestions.append(f"Replace '{char}' with '{alternative}'")
    elif char.isprintable():
        help_text = "Only digits, whitespace, '+', '-', '*', '/', '(' and ')' are allowed."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return UnexpectedCharacterError(
        char,
        location,
        code="L001",
        help_text=help_text,
        suggestions=suggestions
    )


def create_number_overflow_error(lexeme: str, location: SourceLocation, limit: int) -> NumberOverflowError:
    """Create an error for an integer literal that is too large."""
    return NumberOverflowError(
        lexeme,
        location,
        code="L007",
        help_text=f"Integer literals must not exceed {limit}."
    )

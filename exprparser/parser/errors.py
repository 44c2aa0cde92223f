"""
Error handling for the expression parser.

Each structural failure has its own exception class so callers can tell
them apart. Parsing stops at the first error; there is no recovery.
"""

from typing import Optional

from ..lexer.tokens import Token, SourceLocation
from ..lexer.errors import ExpressionError


class ParseError(ExpressionError):
    """
    Exception raised when the token stream does not form an expression.

    Carries the offending token, when there is one.
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation],
        token: Optional[Token] = None,
        **kwargs
    ):
        super().__init__(message, location, **kwargs)
        self.token = token


class UnexpectedTokenError(ParseError):
    """A token that cannot start an operand appeared in prefix position."""


class UnexpectedEndOfInputError(ParseError):
    """The input ended where an operand was required."""


class UnmatchedParenthesisError(ParseError):
    """An opened group was never closed, or ')' has no matching '('."""

    def __init__(self, message: str, location: Optional[SourceLocation],
                 token: Optional[Token] = None,
                 open_location: Optional[SourceLocation] = None, **kwargs):
        super().__init__(message, location, token, **kwargs)
        self.open_location = open_location


class TrailingTokensError(ParseError):
    """A complete expression was parsed but input remains."""


class NestingTooDeepError(ParseError):
    """Parentheses or operators nest deeper than the parser can recurse."""


# Helper functions for creating common parser errors

def create_unexpected_token_error(found: Token) -> UnexpectedTokenError:
    """Create an error for a token that cannot start an operand."""
    return UnexpectedTokenError(
        message=f"Expected a number or '(', found {found.type.name} '{found.lexeme}'",
        location=found.location,
        token=found,
        code="P001",
        help_text="Every operator needs an operand on both sides.",
        suggestions=["Check for a missing operand", "Check for a doubled operator"]
    )


def create_unexpected_eof_error(location: Optional[SourceLocation]) -> UnexpectedEndOfInputError:
    """Create an error for input that ends where an operand was required."""
    return UnexpectedEndOfInputError(
        message="Unexpected end of input, expected a number or '('",
        location=location,
        code="P010",
        help_text="The expression ended while an operand was still expected.",
        suggestions=["Add the missing operand", "Remove the dangling operator"]
    )


def create_unclosed_delimiter_error(open_token: Token, found: Optional[Token],
                                    current_location: Optional[SourceLocation]) -> UnmatchedParenthesisError:
    """Create an error for a '(' that is never closed."""
    found_str = f"{found.type.name} '{found.lexeme}'" if found is not None else "end of input"
    help_text = "The opening '(' was never closed."
    if open_token.location is not None:
        help_text = f"The opening '(' at {open_token.location} was never closed."

    return UnmatchedParenthesisError(
        message=f"Unclosed delimiter '(', found {found_str}",
        location=current_location,
        token=found,
        open_location=open_token.location,
        code="P012",
        help_text=help_text,
        suggestions=["Add a closing ')'", "Check for missing delimiters"]
    )


def create_unopened_delimiter_error(close_token: Token) -> UnmatchedParenthesisError:
    """Create an error for a ')' without a matching '('."""
    return UnmatchedParenthesisError(
        message="Unmatched closing delimiter ')'",
        location=close_token.location,
        token=close_token,
        code="P012",
        help_text="This ')' has no matching '('.",
        suggestions=["Remove the extra ')'", "Add the missing '('"]
    )


def create_trailing_tokens_error(found: Token) -> TrailingTokensError:
    """Create an error for input left over after a complete expression."""
    return TrailingTokensError(
        message=f"Unexpected {found.type.name} '{found.lexeme}' after complete expression",
        location=found.location,
        token=found,
        code="P013",
        help_text="The expression is complete; the remaining input cannot extend it.",
        suggestions=["Check for a missing operator between operands"]
    )


def create_invalid_literal_error(found: Token) -> UnexpectedTokenError:
    """Create an error for a NUMBER token whose text is not an integer."""
    return UnexpectedTokenError(
        message=f"Invalid integer literal '{found.lexeme}'",
        location=found.location,
        token=found,
        code="P001",
        help_text="NUMBER tokens without a value must spell a decimal integer.",
        suggestions=["Build the token with Token.number(value)"]
    )


def create_nesting_too_deep_error(location: Optional[SourceLocation]) -> NestingTooDeepError:
    """Create an error for input nested beyond the recursion limit."""
    return NestingTooDeepError(
        message="Expression is nested too deeply",
        location=location,
        code="P014",
        help_text="The parser ran out of recursion depth at this position.",
        suggestions=["Remove redundant parentheses", "Split the expression into smaller parts"]
    )

"""
Pratt Parser Implementation

Implements a top-down operator precedence (Pratt) parser for arithmetic
expressions. Each token type may have a prefix rule (nud, for tokens that
start an operand) and an infix rule (led, for operators that extend a left
operand); the binding power table decides how far a recursive call may
reach into the remaining input.
"""

import logging
from dataclasses import replace
from enum import IntEnum
from typing import Callable, Dict, Iterable, Iterator, Optional

from ..lexer.lexer import Lexer
from ..lexer.tokens import Token, TokenType, SourceLocation, DIGITS
from ..lexer.errors import ExpressionError
from .ast_nodes import Expression, Literal, BinaryOp, SourceSpan
from .errors import (
    create_unexpected_token_error, create_unexpected_eof_error,
    create_unclosed_delimiter_error, create_unopened_delimiter_error,
    create_trailing_tokens_error, create_invalid_literal_error,
    create_nesting_too_deep_error
)

logger = logging.getLogger(__name__)


class Precedence(IntEnum):
    """Operator binding powers for Pratt parsing."""
    NONE = 0
    TERM = 10           # +, -
    FACTOR = 20         # *, /


# Operator precedence table. Tokens not listed never extend a left operand.
PRECEDENCES: Dict[TokenType, Precedence] = {
    TokenType.PLUS: Precedence.TERM,
    TokenType.MINUS: Precedence.TERM,
    TokenType.STAR: Precedence.FACTOR,
    TokenType.SLASH: Precedence.FACTOR,
}


def binding_power(token_type: TokenType) -> int:
    """Get the left binding power of a token type."""
    return PRECEDENCES.get(token_type, Precedence.NONE)


class TokenStream:
    """
    One-token lookahead over any iterable of tokens.

    Tokens are pulled from the underlying iterator only when peeked, so a
    Lexer is driven lazily and a lexing error surfaces exactly when the
    parser reaches the bad character.
    """

    def __init__(self, tokens: Iterable[Token]):
        self._tokens: Iterator[Token] = iter(tokens)
        self._lookahead: Optional[Token] = None
        self._peeked = False
        self.previous: Optional[Token] = None

        # A Lexer can say where its input ends even before yielding a token
        self._source_location: Optional[Callable[[], SourceLocation]] = getattr(
            tokens, "current_location", None
        )

    def peek(self) -> Optional[Token]:
        """Return the next token without consuming it, or None at the end."""
        if not self._peeked:
            self._lookahead = next(self._tokens, None)
            self._peeked = True
        return self._lookahead

    def next(self) -> Optional[Token]:
        """Consume and return the next token, or None at the end."""
        token = self.peek()
        self._lookahead = None
        self._peeked = False
        if token is not None:
            self.previous = token
        return token

    def at_end(self) -> bool:
        return self.peek() is None

    def end_location(self) -> Optional[SourceLocation]:
        """
        Location just past the last consumed token, if it is known.

        With no token consumed yet, falls back to the token source's own
        cursor when it has one.
        """
        if self.previous is not None:
            return self.previous.end_location
        if self._source_location is not None:
            return self._source_location()
        return None


class Parser:
    """
    Arithmetic expression Pratt parser.

    Consumes tokens on demand and builds an Expression tree. Parsing stops
    at the first error; nothing is recovered.
    """

    def __init__(self, tokens: Iterable[Token]):
        """
        Initialize parser with a token source.

        Args:
            tokens: A Lexer, a list of tokens, or any other iterable of tokens
        """
        self.tokens = TokenStream(tokens)

        # Initialize parsing tables
        self._init_parsing_tables()

    def _init_parsing_tables(self):
        """Initialize the prefix (nud) and infix (led) rule tables."""

        # Prefix parsing functions (for tokens that can start an operand)
        self.prefix_parsers: Dict[TokenType, Callable[[Token], Expression]] = {
            TokenType.NUMBER: self._parse_integer_literal,
            TokenType.LEFT_PAREN: self._parse_grouping,
        }

        # Infix parsing functions (for binary operators)
        self.infix_parsers: Dict[TokenType, Callable[[Expression, Token], Expression]] = {
            TokenType.PLUS: self._parse_binary,
            TokenType.MINUS: self._parse_binary,
            TokenType.STAR: self._parse_binary,
            TokenType.SLASH: self._parse_binary,
        }

    def parse(self) -> Expression:
        """
        Parse the whole token stream as one expression.

        Returns:
            The expression tree

        Raises:
            LexerError: If the token source fails while being read
            ParseError: If the tokens do not form exactly one expression
        """
        try:
            expr = self.parse_expression(Precedence.NONE)
        except RecursionError:
            last = self.tokens.previous
            location = last.location if last is not None else None
            raise create_nesting_too_deep_error(location) from None

        leftover = self.tokens.peek()
        if leftover is not None:
            if leftover.type == TokenType.RIGHT_PAREN:
                raise create_unopened_delimiter_error(leftover)
            raise create_trailing_tokens_error(leftover)

        logger.debug("parsed expression %s", expr)
        return expr

    def parse_expression(self, rbp: int = Precedence.NONE) -> Expression:
        """
        Parse an expression whose operators all bind tighter than rbp.

        Called with rbp 0 for a full expression; the infix rules call it
        with the operator's own binding power to parse a right operand.
        Leftover input is not checked here.
        """
        token = self.tokens.next()
        if token is None:
            raise create_unexpected_eof_error(self.tokens.end_location())

        prefix_parser = self.prefix_parsers.get(token.type)
        if prefix_parser is None:
            raise create_unexpected_token_error(token)

        left = prefix_parser(token)

        while self._next_binds_tighter_than(rbp):
            operator_token = self.tokens.next()
            infix_parser = self.infix_parsers[operator_token.type]
            left = infix_parser(left, operator_token)

        return left

    def _next_binds_tighter_than(self, rbp: int) -> bool:
        token = self.tokens.peek()
        return token is not None and binding_power(token.type) > rbp

    # Prefix parsers (tokens that can start an operand)

    def _parse_integer_literal(self, token: Token) -> Literal:
        """Parse integer literal."""
        value = token.value
        if value is None:
            if not token.lexeme or not set(token.lexeme) <= DIGITS:
                raise create_invalid_literal_error(token)
            value = int(token.lexeme)
        return Literal(value, _token_span(token))

    def _parse_grouping(self, open_token: Token) -> Expression:
        """Parse parenthesized expression."""
        expr = self.parse_expression(Precedence.NONE)

        closing = self.tokens.peek()
        if closing is None or closing.type != TokenType.RIGHT_PAREN:
            location = closing.location if closing is not None else self.tokens.end_location()
            raise create_unclosed_delimiter_error(open_token, closing, location)
        self.tokens.next()

        # Parentheses only shape the tree; the span still covers them
        if open_token.location is not None and closing.location is not None:
            expr = replace(expr, span=SourceSpan(open_token.location, closing.end_location))
        return expr

    # Infix parsers (binary operators)

    def _parse_binary(self, left: Expression, operator_token: Token) -> BinaryOp:
        """Parse binary operation."""
        # The operator's own power keeps equal-precedence chains left associative
        right = self.parse_expression(binding_power(operator_token.type))

        span = None
        if left.span is not None and right.span is not None:
            span = SourceSpan(left.span.start, right.span.end)
        return BinaryOp(left, operator_token.type, right, span)


def _token_span(token: Token) -> Optional[SourceSpan]:
    if token.location is None:
        return None
    return SourceSpan(token.location, token.end_location)


def parse_tokens(tokens: Iterable[Token]) -> Expression:
    """
    Convenience function to parse a pre-built token sequence.

    Raises:
        ParseError: If parsing fails
    """
    return Parser(tokens).parse()


def parse_string(source: str, filename: str = "<string>") -> Expression:
    """
    Convenience function to parse a source string.

    Args:
        source: Expression text
        filename: Filename for error reporting

    Returns:
        Expression AST

    Raises:
        LexerError: If lexing fails
        ParseError: If parsing fails
    """
    try:
        return Parser(Lexer(source, filename)).parse()
    except ExpressionError as e:
        logger.debug("failed to parse %r: %s", source, e.diagnostic.message)
        raise


def parse_file(filepath: str) -> Expression:
    """
    Convenience function to parse a file holding one expression.

    Raises:
        LexerError: If lexing fails
        ParseError: If parsing fails
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return parse_string(source, filepath)

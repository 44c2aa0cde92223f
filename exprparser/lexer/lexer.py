"""
Expression lexer - turns arithmetic source text into tokens.

The lexer is a lazy, single-pass iterator: each call to next() scans just
far enough to produce one token. Lexing the same text again needs a new
Lexer instance.
"""

from typing import Iterator, List

from .tokens import Token, TokenType, SourceLocation, OPERATORS, DIGITS, INTEGER_MAX
from .errors import create_unexpected_character_error, create_number_overflow_error


class Lexer:
    """
    Arithmetic expression lexical analyzer.

    Skips whitespace, merges runs of digits into NUMBER tokens and emits
    one token per operator or parenthesis. Raises a LexerError on the first
    character it does not recognize.
    """

    def __init__(self, source: str, filename: str = "<input>", max_value: int = INTEGER_MAX):
        """
        Initialize the lexer with source text.

        Args:
            source: Expression text
            filename: Name used in diagnostics
            max_value: Largest integer literal accepted
        """
        self.source = source
        self.filename = filename
        self.max_value = max_value
        self.pos = 0
        self.line = 1
        self.column = 1

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        self._skip_whitespace()

        if self.pos >= len(self.source):
            raise StopIteration

        return self._next_token()

    def tokenize(self) -> List[Token]:
        """
        Tokenize the rest of the input.

        Returns:
            List of the remaining tokens

        Raises:
            LexerError: On the first unrecognized character or oversized literal
        """
        return list(self)

    def _next_token(self) -> Token:
        """Scan one token starting at the current position."""
        location = self.current_location()
        current_char = self.source[self.pos]

        if current_char in DIGITS:
            return self._tokenize_number(location)

        token_type = OPERATORS.get(current_char)
        if token_type is not None:
            self._advance()
            return Token(token_type, current_char, None, location)

        raise create_unexpected_character_error(current_char, location)

    def _tokenize_number(self, location: SourceLocation) -> Token:
        """Tokenize the maximal run of decimal digits."""
        start_pos = self.pos
        while self.pos < len(self.source) and self.source[self.pos] in DIGITS:
            self._advance()

        lexeme = self.source[start_pos:self.pos]
        value = int(lexeme)
        if value > self.max_value:
            raise create_number_overflow_error(lexeme, location, self.max_value)

        return Token(TokenType.NUMBER, lexeme, value, location)

    def _skip_whitespace(self):
        while self.pos < len(self.source) and self.source[self.pos].isspace():
            self._advance()

    def _advance(self):
        """Advance position by one character, updating line/column."""
        if self.pos < len(self.source):
            if self.source[self.pos] == '\n':
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def current_location(self) -> SourceLocation:
        """Location of the next unread character (or of the end of input)."""
        return SourceLocation(self.filename, self.line, self.column, self.pos)


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Expression text
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
    """
    return Lexer(source, filename).tokenize()


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a file holding one expression.

    Raises:
        LexerError: If lexing fails
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, filepath)

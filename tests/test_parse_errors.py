"""
Test suite for parser error reporting.

Tests cover:
- Each structural error kind
- First-error-wins ordering between lexer and parser failures
- Error locations and diagnostics
"""

import unittest
import sys
import os
import logging

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from exprparser.lexer.tokens import Token, TokenType
from exprparser.lexer.errors import ExpressionError, UnexpectedCharacterError, NumberOverflowError
from exprparser.parser.parser import parse_string, parse_tokens
from exprparser.parser.errors import (
    ParseError, UnexpectedTokenError, UnexpectedEndOfInputError,
    UnmatchedParenthesisError, TrailingTokensError, NestingTooDeepError
)


class TestParseErrors(unittest.TestCase):
    """Test cases for structural errors."""

    def test_dangling_operator(self):
        """Test that a trailing operator runs out of input."""
        with self.assertRaises(UnexpectedEndOfInputError) as ctx:
            parse_string("2+")

        error = ctx.exception
        self.assertEqual(error.position, 2)
        self.assertIsNone(error.token)
        self.assertEqual(error.diagnostic.code, "P010")

    def test_empty_input(self):
        """Test that empty input has no operand."""
        with self.assertRaises(UnexpectedEndOfInputError) as ctx:
            parse_string("")
        self.assertEqual(ctx.exception.position, 0)
        self.assertEqual(ctx.exception.diagnostic.code, "P010")

    def test_whitespace_only_input(self):
        """Test that the end of whitespace-only input is reported at its end."""
        with self.assertRaises(UnexpectedEndOfInputError) as ctx:
            parse_string("  \n ", filename="expr")

        location = ctx.exception.location
        self.assertEqual(location.offset, 4)
        self.assertEqual((location.line, location.column), (2, 2))
        self.assertEqual(location.filename, "expr")

    def test_unclosed_parenthesis(self):
        """Test a group that reaches end of input."""
        with self.assertRaises(UnmatchedParenthesisError) as ctx:
            parse_string("(2+3")

        error = ctx.exception
        self.assertIsNone(error.token)
        self.assertEqual(error.open_location.offset, 0)
        self.assertEqual(error.position, 4)
        self.assertEqual(error.diagnostic.code, "P012")

    def test_group_followed_by_number(self):
        """Test a group whose closing token is something else."""
        with self.assertRaises(UnmatchedParenthesisError) as ctx:
            parse_string("(2 3)")

        self.assertEqual(ctx.exception.token, Token.number(3))
        self.assertEqual(ctx.exception.position, 3)

    def test_unopened_parenthesis(self):
        """Test a ')' with no matching '('."""
        with self.assertRaises(UnmatchedParenthesisError) as ctx:
            parse_string("2+3)")

        self.assertEqual(ctx.exception.token.type, TokenType.RIGHT_PAREN)
        self.assertEqual(ctx.exception.position, 3)
        self.assertIsNone(ctx.exception.open_location)

    def test_trailing_tokens(self):
        """Test a complete expression followed by more input."""
        with self.assertRaises(TrailingTokensError) as ctx:
            parse_string("2 3")

        self.assertEqual(ctx.exception.token, Token.number(3))
        self.assertEqual(ctx.exception.position, 2)
        self.assertEqual(ctx.exception.diagnostic.code, "P013")

    def test_trailing_group(self):
        """Test that juxtaposed groups are not implicit multiplication."""
        with self.assertRaises(TrailingTokensError):
            parse_string("(1)(2)")

    def test_doubled_operator(self):
        """Test an operator in prefix position."""
        with self.assertRaises(UnexpectedTokenError) as ctx:
            parse_string("2 * * 3")

        self.assertEqual(ctx.exception.token.type, TokenType.STAR)
        self.assertEqual(ctx.exception.position, 4)
        self.assertEqual(ctx.exception.diagnostic.code, "P001")

    def test_unary_minus_not_supported(self):
        """Test that a leading minus is rejected."""
        with self.assertRaises(UnexpectedTokenError):
            parse_string("-1")

    def test_empty_group(self):
        """Test that '()' has no operand."""
        with self.assertRaises(UnexpectedTokenError) as ctx:
            parse_string("()")
        self.assertEqual(ctx.exception.token.type, TokenType.RIGHT_PAREN)

    def test_errors_from_token_lists(self):
        """Test errors for tokens without locations."""
        with self.assertRaises(UnexpectedEndOfInputError) as ctx:
            parse_tokens([Token.number(1), Token.symbol(TokenType.SLASH)])
        self.assertIsNone(ctx.exception.position)

        with self.assertRaises(TrailingTokensError) as ctx:
            parse_tokens([Token.number(1), Token.number(2)])
        self.assertIsNone(ctx.exception.position)

    def test_common_base_class(self):
        """Test that all errors share one base class."""
        for source in ("2+", "(2+3", "2 3", "2 * * 3", "2&3", "99999999999999999999"):
            with self.subTest(source=source):
                with self.assertRaises(ExpressionError):
                    parse_string(source)

    def test_parse_errors_are_parse_error(self):
        for error_class in (UnexpectedTokenError, UnexpectedEndOfInputError,
                            UnmatchedParenthesisError, TrailingTokensError,
                            NestingTooDeepError):
            self.assertTrue(issubclass(error_class, ParseError))


class TestNestingDepth(unittest.TestCase):
    """Test cases for input nested beyond the recursion limit."""

    def test_deep_parentheses(self):
        """Test that deep grouping is reported as a parse error."""
        source = "(" * 2000 + "1" + ")" * 2000

        with self.assertRaises(NestingTooDeepError) as ctx:
            parse_string(source, filename="deep")

        error = ctx.exception
        self.assertIsInstance(error, ParseError)
        self.assertIsInstance(error, ExpressionError)
        self.assertEqual(error.diagnostic.code, "P014")
        self.assertEqual(error.location.filename, "deep")
        self.assertGreater(error.position, 0)
        self.assertLess(error.position, 2000)

    def test_deep_right_operands(self):
        """Test that deep right nesting through operators is also reported."""
        source = "1+(" * 2000 + "1" + ")" * 2000
        with self.assertRaises(NestingTooDeepError):
            parse_string(source)

    def test_deep_token_list(self):
        """Test deep nesting from tokens without locations."""
        tokens = ([Token.symbol(TokenType.LEFT_PAREN)] * 2000 + [Token.number(1)]
                  + [Token.symbol(TokenType.RIGHT_PAREN)] * 2000)
        with self.assertRaises(NestingTooDeepError) as ctx:
            parse_tokens(tokens)
        self.assertIsNone(ctx.exception.position)

    def test_moderate_nesting_parses(self):
        self.assertEqual(parse_string("(" * 100 + "5" + ")" * 100), parse_string("5"))

    def test_parser_usable_after_deep_input(self):
        with self.assertRaises(NestingTooDeepError):
            parse_string("(" * 2000 + "1" + ")" * 2000)
        self.assertEqual(parse_string("(1+2)*3"), parse_string("(1 + 2) * 3"))


class TestErrorOrdering(unittest.TestCase):
    """Test that the first failure in left-to-right order is reported."""

    def test_lexer_error_after_valid_prefix(self):
        with self.assertRaises(UnexpectedCharacterError) as ctx:
            parse_string("1 + 2 & 3")
        self.assertEqual(ctx.exception.position, 6)

    def test_lexer_error_inside_open_group(self):
        """Test that a bad character wins over the missing ')' after it."""
        with self.assertRaises(UnexpectedCharacterError):
            parse_string("(1 + 2 #")

    def test_parse_error_before_bad_character(self):
        """Test that a structural error earlier in the input wins."""
        with self.assertRaises(UnexpectedTokenError):
            parse_string("1 + * 2 & 3")

    def test_overflow_while_parsing(self):
        with self.assertRaises(NumberOverflowError):
            parse_string("1 * (2 + 99999999999999999999)")


class TestDiagnostics(unittest.TestCase):
    """Test cases for rendered error reports."""

    def test_unclosed_report_mentions_opening(self):
        with self.assertRaises(UnmatchedParenthesisError) as ctx:
            parse_string("1 + (2", filename="expr")

        report = str(ctx.exception)
        self.assertIn("Unclosed delimiter '('", report)
        self.assertIn("expr:1:5", report)
        self.assertIn("Add a closing ')'", report)

    def test_failure_is_logged(self):
        """Test that failures are logged at debug level before propagating."""
        with self.assertLogs("exprparser.parser.parser", level=logging.DEBUG) as logs:
            with self.assertRaises(TrailingTokensError):
                parse_string("4 5")

        self.assertTrue(any("failed to parse" in line for line in logs.output))


if __name__ == '__main__':
    unittest.main()

"""
Test suite for the quantcalc lexer.

Tests cover:
- Operators, grouping, keywords and identifiers
- Decimal literals
- Statement separators
- Error recovery and diagnostics
- Source spans and locations

Author: xwest
"""

import unittest
from decimal import Decimal
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from quantcalc.lexer.lexer import Lexer, tokenize_string
from quantcalc.lexer.tokens import Token, TokenType, Span, SourceLocation


def token_types(source: str):
    return [token.type for token, _ in tokenize_string(source)]


class TestTokens(unittest.TestCase):
    """Test lexing of individual token kinds."""

    def test_assignment_statement(self):
        """Test a simple assignment lexes into names, operator and number."""
        tokens = tokenize_string("x = 5 m")

        self.assertEqual(
            [token for token, _ in tokens],
            [
                Token(TokenType.UNIT, "x"),
                Token(TokenType.ASSIGN),
                Token(TokenType.NUM, Decimal(5)),
                Token(TokenType.UNIT, "m"),
            ]
        )
        self.assertEqual(
            [span for _, span in tokens],
            [Span(0, 1), Span(2, 3), Span(4, 5), Span(6, 7)]
        )

    def test_operators(self):
        """Test every operator and compound assignment, longest match first."""
        self.assertEqual(
            token_types("* / + - ^ = += -= *= /= ^="),
            [
                TokenType.MUL, TokenType.DIV, TokenType.ADD, TokenType.SUB, TokenType.POW,
                TokenType.ASSIGN, TokenType.ADD_ASSIGN, TokenType.SUB_ASSIGN,
                TokenType.MUL_ASSIGN, TokenType.DIV_ASSIGN, TokenType.POW_ASSIGN,
            ]
        )

    def test_compound_operator_without_spaces(self):
        self.assertEqual(
            token_types("a+=b"),
            [TokenType.UNIT, TokenType.ADD_ASSIGN, TokenType.UNIT]
        )

    def test_grouping(self):
        self.assertEqual(
            token_types("({})"),
            [TokenType.LPAREN, TokenType.LCURLY, TokenType.RCURLY, TokenType.RPAREN]
        )

    def test_keywords_and_identifiers(self):
        """Test keywords only match whole words."""
        tokens = [token for token, _ in tokenize_string("def define if else elsewhere")]

        self.assertEqual(tokens, [
            Token(TokenType.DEF),
            Token(TokenType.UNIT, "define"),
            Token(TokenType.IF),
            Token(TokenType.ELSE),
            Token(TokenType.UNIT, "elsewhere"),
        ])
        self.assertTrue(tokens[0].is_keyword)
        self.assertTrue(tokens[1].is_identifier)

    def test_unicode_identifiers(self):
        """Test unit names outside ASCII."""
        tokens = [token for token, _ in tokenize_string("μ * Ω / ångström")]

        self.assertEqual(tokens, [
            Token(TokenType.UNIT, "μ"),
            Token(TokenType.MUL),
            Token(TokenType.UNIT, "Ω"),
            Token(TokenType.DIV),
            Token(TokenType.UNIT, "ångström"),
        ])

    def test_identifier_continuation(self):
        """Test digits and underscores continue a name but digits cannot start one."""
        tokens = [token for token, _ in tokenize_string("x2 x_tmp 2x")]

        self.assertEqual(tokens, [
            Token(TokenType.UNIT, "x2"),
            Token(TokenType.UNIT, "x_tmp"),
            Token(TokenType.NUM, Decimal(2)),
            Token(TokenType.UNIT, "x"),
        ])

    def test_decimal_literals(self):
        """Test literals parse into exact decimals."""
        tokens = [token for token, _ in tokenize_string("42 3.14 0.1")]

        self.assertEqual([token.value for token in tokens],
                         [Decimal("42"), Decimal("3.14"), Decimal("0.1")])
        for token in tokens:
            self.assertIsInstance(token.value, Decimal)
        self.assertEqual(str(tokens[1].value), "3.14")

    def test_trailing_dot_is_not_a_decimal(self):
        tokens = [token for token, _ in tokenize_string("1.")]

        self.assertEqual(tokens, [
            Token(TokenType.NUM, Decimal(1)),
            Token(TokenType.LEX_ERR, "."),
        ])

    def test_separators_are_interchangeable(self):
        """Test ';' and newline produce the same token."""
        tokens = tokenize_string("a;b\nc")

        self.assertEqual(tokens[1][0], Token(TokenType.NL))
        self.assertEqual(tokens[1][0], tokens[3][0])
        self.assertEqual(tokens[1][1], Span(1, 2))
        self.assertEqual(tokens[3][1], Span(3, 4))

    def test_whitespace_skipped(self):
        """Test spaces, tabs and form feeds separate tokens without producing any."""
        tokens = tokenize_string("\t1\f 2  ")

        self.assertEqual(tokens, [
            (Token(TokenType.NUM, Decimal(1)), Span(1, 2)),
            (Token(TokenType.NUM, Decimal(2)), Span(4, 5)),
        ])

    def test_empty_source(self):
        self.assertEqual(tokenize_string(""), [])
        self.assertEqual(tokenize_string("  \t"), [])


class TestLexerErrors(unittest.TestCase):
    """Test error recovery."""

    def test_invalid_character_recovers(self):
        """Test an unknown character becomes an error token and scanning continues."""
        lexer = Lexer("2 @ 3", "calc.qc")
        tokens = lexer.tokenize()

        self.assertEqual([token for token, _ in tokens], [
            Token(TokenType.NUM, Decimal(2)),
            Token(TokenType.LEX_ERR, "@"),
            Token(TokenType.NUM, Decimal(3)),
        ])
        self.assertEqual(tokens[1][1], Span(2, 3))
        self.assertTrue(tokens[1][0].is_error)

        self.assertTrue(lexer.has_errors())
        self.assertEqual(len(lexer.errors), 1)
        error = lexer.first_error()
        self.assertEqual(error.diagnostic.code, "L001")
        self.assertEqual(error.location, SourceLocation("calc.qc", 1, 3, 2))
        self.assertIn("calc.qc:1:3", str(error))

    def test_every_bad_character_is_reported(self):
        lexer = Lexer("a $ b\n# c")
        tokens = lexer.tokenize()

        errors = [token.value for token, _ in tokens if token.is_error]
        self.assertEqual(errors, ["$", "#"])
        self.assertEqual([e.location.line for e in lexer.errors], [1, 2])
        self.assertEqual(lexer.errors[1].location.column, 1)

    def test_suggestion_for_unicode_operator(self):
        lexer = Lexer("a × b")
        lexer.tokenize()

        self.assertEqual(lexer.errors[0].diagnostic.suggestions, ["*"])

    def test_leading_underscore_is_an_error(self):
        """Test a name cannot start with an underscore."""
        lexer = Lexer("_x")
        tokens = lexer.tokenize()

        self.assertEqual(tokens, [
            (Token(TokenType.LEX_ERR, "_"), Span(0, 1)),
            (Token(TokenType.UNIT, "x"), Span(1, 2)),
        ])
        self.assertEqual(len(lexer.errors), 1)

    def test_middle_dot_inside_and_between_names(self):
        """Test U+00B7 joins a name but is flagged with a hint on its own."""
        self.assertEqual(
            [token for token, _ in tokenize_string("kg·m")],
            [Token(TokenType.UNIT, "kg·m")]
        )

        lexer = Lexer("kg · m")
        tokens = lexer.tokenize()

        self.assertEqual(tokens[1][0], Token(TokenType.LEX_ERR, "·"))
        self.assertEqual(lexer.errors[0].diagnostic.suggestions, ["*"])

    def test_carriage_return_is_not_a_separator(self):
        tokens = [token for token, _ in tokenize_string("a\r\nb")]

        self.assertEqual(tokens, [
            Token(TokenType.UNIT, "a"),
            Token(TokenType.LEX_ERR, "\r"),
            Token(TokenType.NL),
            Token(TokenType.UNIT, "b"),
        ])

    def test_rescanning_resets_errors(self):
        lexer = Lexer("@")
        lexer.tokenize()
        lexer.tokenize()

        self.assertEqual(len(lexer.errors), 1)


class TestLexerInterface(unittest.TestCase):
    """Test laziness, locations and token display."""

    def test_lazy_iteration(self):
        stream = iter(Lexer("a b c"))

        self.assertEqual(next(stream), (Token(TokenType.UNIT, "a"), Span(0, 1)))
        self.assertEqual(next(stream), (Token(TokenType.UNIT, "b"), Span(2, 3)))

    def test_spans_slice_source(self):
        source = "speed = 12.5 km / h"
        for token, span in tokenize_string(source):
            if token.type == TokenType.UNIT:
                self.assertEqual(span.slice(source), token.value)
        self.assertEqual(tokenize_string(source)[2][1].slice(source), "12.5")

    def test_location(self):
        lexer = Lexer("a\nbc", "f.qc")

        self.assertEqual(lexer.location(0), SourceLocation("f.qc", 1, 1, 0))
        self.assertEqual(lexer.location(3), SourceLocation("f.qc", 2, 2, 3))
        self.assertEqual(str(lexer.location(3)), "f.qc:2:2")

    def test_token_display(self):
        self.assertEqual(str(Token(TokenType.ADD_ASSIGN)), "+=")
        self.assertEqual(str(Token(TokenType.LCURLY)), "{")
        self.assertEqual(str(Token(TokenType.DEF)), "def")
        self.assertEqual(str(Token.NUM), "NUM")
        self.assertEqual(str(Token.UNIT), "UNIT")
        self.assertEqual(str(Token(TokenType.NL)), r"(\n or ;)")
        self.assertEqual(str(Token(TokenType.LEX_ERR, "@")), "Lexer Error: @")

    def test_token_classification(self):
        self.assertTrue(Token(TokenType.POW).is_operator)
        self.assertTrue(Token(TokenType.POW_ASSIGN).is_assignment)
        self.assertFalse(Token(TokenType.POW).is_assignment)
        self.assertFalse(Token(TokenType.LPAREN).is_operator)
        self.assertFalse(Token.NUM.is_keyword)

    def test_placeholders(self):
        self.assertEqual(Token.NUM.type, TokenType.NUM)
        self.assertEqual(Token.UNIT, Token(TokenType.UNIT, "..."))


if __name__ == '__main__':
    unittest.main()

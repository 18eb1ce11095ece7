"""
Tests for token rendering and comparison.

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from sipit.lexer.tokens import Token, TokenType, SourcePosition
from sipit.lexer.lexer import format_tokens


class TestTokenRendering(unittest.TestCase):
    """Each token kind has a fixed display form."""

    def test_fixed_tokens(self):
        expected = {
            TokenType.PLUS: "PLUS",
            TokenType.MINUS: "MINUS",
            TokenType.MUL: "MULTIPLY",
            TokenType.DIV: "DIVIDE",
            TokenType.LPAREN: "LEFT-PAREN",
            TokenType.RPAREN: "RPAREN",
        }
        for token_type, text in expected.items():
            with self.subTest(token_type=token_type):
                self.assertEqual(str(Token(token_type)), text)

    def test_numeric_tokens(self):
        self.assertEqual(str(Token(TokenType.INT, 42)), "INT(42)")
        self.assertEqual(str(Token(TokenType.FLOAT, 3.14)), "FLOAT(3.14)")
        self.assertEqual(str(Token(TokenType.FLOAT, 3.0)), "FLOAT(3.0)")

    def test_int_rendering_is_lossless(self):
        value = 12345678901234567890
        rendered = str(Token(TokenType.INT, value))
        self.assertEqual(int(rendered[len("INT("):-1]), value)

    def test_format_tokens(self):
        tokens = [Token(TokenType.INT, 3), Token(TokenType.PLUS), Token(TokenType.INT, 4)]
        self.assertEqual(format_tokens(tokens), "[INT(3), PLUS, INT(4)]")
        self.assertEqual(format_tokens([]), "[]")


class TestTokenComparison(unittest.TestCase):

    def test_positions_ignored_in_equality(self):
        start = SourcePosition(0, 0, 0, "<stdin>", "7")
        end = SourcePosition(1, 0, 1, "<stdin>", "7")
        self.assertEqual(Token(TokenType.INT, 7, start, end), Token(TokenType.INT, 7))
        self.assertNotEqual(Token(TokenType.INT, 7), Token(TokenType.INT, 8))
        self.assertNotEqual(Token(TokenType.INT, 1), Token(TokenType.FLOAT, 1.0))

    def test_classification(self):
        self.assertTrue(Token(TokenType.FLOAT, 1.5).is_literal)
        self.assertTrue(Token(TokenType.DIV).is_operator)
        self.assertFalse(Token(TokenType.LPAREN).is_operator)
        self.assertFalse(Token(TokenType.LPAREN).is_literal)


if __name__ == '__main__':
    unittest.main()

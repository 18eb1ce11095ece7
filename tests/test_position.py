"""
Tests for SourcePosition, the cursor the lexer moves over its input.

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from sipit.lexer.tokens import SourcePosition


class TestSourcePosition(unittest.TestCase):
    """Test cases for position tracking."""

    def setUp(self):
        self.pos = SourcePosition(-1, 0, -1, "<stdin>", "1\n2")

    def test_advance_increments_offset_and_column(self):
        self.pos.advance(None)
        self.assertEqual(self.pos.offset, 0)
        self.assertEqual(self.pos.column, 0)
        self.assertEqual(self.pos.line, 0)

        self.pos.advance("1")
        self.assertEqual(self.pos.offset, 1)
        self.assertEqual(self.pos.column, 1)

    def test_newline_resets_column(self):
        self.pos.advance(None)
        self.pos.advance("1")
        self.pos.advance("\n")
        self.assertEqual(self.pos.offset, 2)
        self.assertEqual(self.pos.line, 1)
        self.assertEqual(self.pos.column, 0)

        self.pos.advance("2")
        self.assertEqual(self.pos.column, 1)

    def test_advance_returns_self(self):
        self.assertIs(self.pos.advance(None).advance("x"), self.pos)
        self.assertEqual(self.pos.offset, 1)

    def test_copy_is_independent(self):
        self.pos.advance(None)
        snapshot = self.pos.copy()
        self.pos.advance("1").advance("\n")

        self.assertEqual(snapshot.offset, 0)
        self.assertEqual(snapshot.line, 0)
        self.assertEqual(snapshot.column, 0)
        self.assertEqual(snapshot.source_name, "<stdin>")
        self.assertEqual(snapshot.full_text, "1\n2")
        self.assertIsNot(snapshot, self.pos)

    def test_str_is_one_based(self):
        self.pos.advance(None)
        self.assertEqual(str(self.pos), "<stdin>:1:1")


if __name__ == '__main__':
    unittest.main()

"""
Token definitions for the SipIt lexer.

This module defines the token types produced for arithmetic expressions:
- Literals (integers and floats)
- Arithmetic operators
- Parentheses

It also holds SourcePosition, the cursor the lexer drives over the input.

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass, field, replace
from typing import Optional, Union


DIGITS = "0123456789"


class TokenType(Enum):
    """Enumeration of all token types in SipIt."""

    # Literals
    INT = auto()                    # 42
    FLOAT = auto()                  # 3.14, 3.

    # Arithmetic operators
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    MUL = auto()                    # *
    DIV = auto()                    # /

    # Punctuation
    LPAREN = auto()                 # (
    RPAREN = auto()                 # )


# Fixed single-character tokens, looked up directly by the lexer
SINGLE_CHAR_TOKENS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MUL,
    "/": TokenType.DIV,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}

# Display names used when rendering tokens
TOKEN_NAMES = {
    TokenType.INT: "INT",
    TokenType.FLOAT: "FLOAT",
    TokenType.PLUS: "PLUS",
    TokenType.MINUS: "MINUS",
    TokenType.MUL: "MULTIPLY",
    TokenType.DIV: "DIVIDE",
    TokenType.LPAREN: "LEFT-PAREN",
    TokenType.RPAREN: "RPAREN",
}


@dataclass
class SourcePosition:
    """
    A cursor location in the source text.

    Starts one step before the first character (offset and column -1) and
    is moved forward with advance(). Tokens and errors keep copies, never
    the live cursor.
    """
    offset: int
    line: int
    column: int
    source_name: str
    full_text: str = field(repr=False)

    def advance(self, current_char: Optional[str] = None) -> "SourcePosition":
        """
        Move past one character.

        Args:
            current_char: The character being consumed, or None at end of input

        Returns:
            self, so calls can be chained
        """
        self.offset += 1
        self.column += 1

        if current_char == "\n":
            self.line += 1
            self.column = 0

        return self

    def copy(self) -> "SourcePosition":
        """Return an independent snapshot of this position."""
        return replace(self)

    def __str__(self) -> str:
        return f"{self.source_name}:{self.line + 1}:{self.column + 1}"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in an arithmetic expression.

    Only INT and FLOAT carry a value. Positions are kept for diagnostics
    and are ignored when comparing tokens.
    """
    type: TokenType
    value: Optional[Union[int, float]] = None
    pos_start: Optional[SourcePosition] = field(default=None, compare=False, repr=False)
    pos_end: Optional[SourcePosition] = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        # Values use repr, so 3. renders as FLOAT(3.0) rather than FLOAT(3)
        name = TOKEN_NAMES[self.type]
        if self.value is not None:
            return f"{name}({self.value!r})"
        return name

    def __repr__(self) -> str:
        if self.value is not None:
            return f"Token({self.type.name}, {self.value!r})"
        return f"Token({self.type.name})"

    @property
    def is_literal(self) -> bool:
        """Check if this token is a numeric literal."""
        return self.type in (TokenType.INT, TokenType.FLOAT)

    @property
    def is_operator(self) -> bool:
        """Check if this token is an arithmetic operator."""
        return self.type in (TokenType.PLUS, TokenType.MINUS, TokenType.MUL, TokenType.DIV)

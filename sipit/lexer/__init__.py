"""
SipIt Lexer Package

Lexical analyzer for arithmetic expressions: integers, floats, the four
arithmetic operators and parentheses. Reports the first illegal character
with its source position.

Author: xwest
"""

from .tokens import Token, TokenType, SourcePosition
from .lexer import Lexer, run, tokenize_string, tokenize_file, format_tokens
from .errors import LexError, IllegalCharError

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "SourcePosition",
    "LexError",
    "IllegalCharError",
    "run",
    "tokenize_string",
    "tokenize_file",
    "format_tokens",
]

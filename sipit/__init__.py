"""
SipIt Package

Front end of an arithmetic expression pipeline. Only the lexer lives
here; parsing and evaluation consume its token list.

Architecture:
    sipit/
    ├── lexer/           # Tokenization and lexical analysis
    └── repl.py          # Interactive shell around the lexer

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__email__ = "xwest@users.noreply.github.com"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, LexError, run

__all__ = [
    # Core
    "Lexer",
    "Token",
    "TokenType",
    "LexError",
    "run",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]

"""
Error handling for the SipIt lexer.

Errors carry the start and end positions of the offending span so callers
can point at it. They are exceptions, but the lexer hands them back as
values; only the convenience wrappers raise them.

Author: xwest
"""

from .tokens import SourcePosition


class LexError(Exception):
    """
    Base class for lexical errors.

    Rendered as two lines: the error name with its details, then the
    source name and the 1-based line where the error starts.
    """

    def __init__(
        self,
        error_name: str,
        pos_start: SourcePosition,
        pos_end: SourcePosition,
        details: str
    ):
        super().__init__(f"{error_name}: {details}")
        self.error_name = error_name
        self.pos_start = pos_start
        self.pos_end = pos_end
        self.details = details

    def __str__(self) -> str:
        return (f"{self.error_name}: {self.details}\n"
                f"File {self.pos_start.source_name}, line {self.pos_start.line + 1}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.details!r}, {self.pos_start}, {self.pos_end})"


class IllegalCharError(LexError):
    """Raised for a character that starts no token."""

    def __init__(self, pos_start: SourcePosition, pos_end: SourcePosition, details: str):
        super().__init__("Illegal Char Error", pos_start, pos_end, details)

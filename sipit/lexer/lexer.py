"""
SipIt Lexer - turns an arithmetic expression into tokens

One pass, left to right, one character of lookahead. The first character
that starts no token stops the scan and comes back as an error instead of
a token list.

xwest
"""

import logging
from typing import List, Optional, Tuple

from .tokens import Token, TokenType, SourcePosition, DIGITS, SINGLE_CHAR_TOKENS
from .errors import LexError, IllegalCharError


logger = logging.getLogger(__name__)


class Lexer:
    """
    SipIt lexical analyzer.

    Drives a SourcePosition over the text and classifies each character as
    whitespace, the start of a number, a fixed single-character token, or
    an illegal character.
    """

    def __init__(self, text: str, source_name: str = "<stdin>"):
        """
        Initialize the lexer and load the first character.

        Args:
            text: Expression text to scan
            source_name: Label used in error messages (a filename or "<stdin>")
        """
        self.source_name = source_name
        self.text = text
        self.pos = SourcePosition(-1, 0, -1, source_name, text)
        self.current_char: Optional[str] = None
        self.advance()

    def advance(self):
        """Consume the current character and load the next one."""
        self.pos.advance(self.current_char)
        if self.pos.offset < len(self.text):
            self.current_char = self.text[self.pos.offset]
        else:
            self.current_char = None

    def make_tokens(self) -> Tuple[List[Token], Optional[LexError]]:
        """
        Tokenize the whole text.

        Returns:
            (tokens, None) on success, ([], error) at the first illegal character
        """
        tokens: List[Token] = []

        while self.current_char is not None:
            if self.current_char.isspace():
                self.advance()
            elif self.current_char in DIGITS:
                tokens.append(self.make_number())
            elif self.current_char in SINGLE_CHAR_TOKENS:
                pos_start = self.pos.copy()
                token_type = SINGLE_CHAR_TOKENS[self.current_char]
                self.advance()
                tokens.append(Token(token_type, None, pos_start, self.pos.copy()))
            else:
                pos_start = self.pos.copy()
                char = self.current_char
                self.advance()
                error = IllegalCharError(pos_start, self.pos.copy(), char)
                logger.debug("illegal character %r at %s", char, pos_start)
                return [], error

        logger.debug("scanned %d tokens from %s", len(tokens), self.source_name)
        return tokens, None

    def make_number(self) -> Token:
        """
        Scan an INT or FLOAT starting at the current digit.

        INT values are plain Python ints and are not bounded to 64 bits;
        runs beyond the interpreter's int conversion limit raise ValueError.
        """
        pos_start = self.pos.copy()
        num_str = ""
        dot_count = 0

        while self.current_char is not None:
            if self.current_char in DIGITS:
                num_str += self.current_char
            elif self.current_char == ".":
                # A second dot is left for the main loop, which rejects it
                if dot_count == 1:
                    break
                dot_count += 1
                num_str += "."
            else:
                break
            self.advance()

        if dot_count == 0:
            return Token(TokenType.INT, int(num_str), pos_start, self.pos.copy())
        return Token(TokenType.FLOAT, float(num_str), pos_start, self.pos.copy())


def run(source_name: str, text: str) -> Tuple[List[Token], Optional[LexError]]:
    """
    Tokenize one piece of input.

    Args:
        source_name: Label used in error messages
        text: Expression text

    Returns:
        Either (tokens, None) or ([], error), never both
    """
    lexer = Lexer(text, source_name)
    return lexer.make_tokens()


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Raises:
        LexError: If an illegal character is found
    """
    tokens, error = run(filename, source)
    if error is not None:
        raise error
    return tokens


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Raises:
        LexError: If lexing fails
        OSError: If file cannot be read
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, filepath)


def format_tokens(tokens: List[Token]) -> str:
    """Render tokens as a bracketed list, e.g. [INT(3), PLUS, INT(4)]."""
    return "[" + ", ".join(str(token) for token in tokens) + "]"

#!/usr/bin/env python3
"""
Interactive shell for the SipIt lexer.

Reads one line at a time, tokenizes it and prints either the token list
or the error. Can also tokenize a single file and exit.
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from .lexer import run, tokenize_file, format_tokens, LexError


logger = logging.getLogger(__name__)


class Repl:
    """Read-tokenize-print loop over a pair of text streams."""

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        prompt: str = "sipit > ",
        source_name: str = "<stdin>"
    ):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.prompt = prompt
        self.source_name = source_name

    def run_line(self, line: str) -> bool:
        """Tokenize one line and print the result. Returns False on error."""
        tokens, error = run(self.source_name, line)
        if error is not None:
            self.stdout.write(f"{error}\n")
            return False
        self.stdout.write(format_tokens(tokens) + "\n")
        return True

    def loop(self) -> int:
        """Run until end of input."""
        while True:
            self.stdout.write(self.prompt)
            self.stdout.flush()
            try:
                line = self.stdin.readline()
            except KeyboardInterrupt:
                self.stdout.write("\n")
                break
            if not line:
                # EOF
                self.stdout.write("\n")
                break
            self.run_line(line)

        logger.debug("input exhausted, leaving shell")
        return 0


def run_file(path: str, stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None) -> int:
    """Tokenize a file once. Exit status 0 on success, 1 on lex error, 2 if unreadable."""
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    try:
        tokens = tokenize_file(path)
    except LexError as e:
        stdout.write(f"{e}\n")
        return 1
    except OSError as e:
        stderr.write(f"sipit: cannot read {path}: {e.strerror or e}\n")
        return 2
    except UnicodeDecodeError as e:
        stderr.write(f"sipit: cannot read {path}: not valid UTF-8 ({e.reason} at byte {e.start})\n")
        return 2

    stdout.write(format_tokens(tokens) + "\n")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the sipit shell"""

    parser = argparse.ArgumentParser(
        prog="sipit",
        description="Tokenize arithmetic expressions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    sipit                      # Interactive shell
    sipit expr.txt             # Tokenize a file and exit
    sipit --prompt '> ' -v     # Custom prompt with debug logging
        """
    )

    parser.add_argument('file', nargs='?',
                        help='Tokenize this file instead of reading stdin')
    parser.add_argument('--prompt', default="sipit > ",
                        help='Prompt shown before each line')
    parser.add_argument('--source-name', default="<stdin>",
                        help='Source name used in error messages')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.file:
        return run_file(args.file)

    return Repl(prompt=args.prompt, source_name=args.source_name).loop()


if __name__ == "__main__":
    sys.exit(main())

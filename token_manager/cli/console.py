"""
Console - Colored operator I/O

Module: cli.console
Date: 2026-10-19
Version: 0.1.0

CHANGELOG:
[2026-10-19 v0.1.0] Initial implementation
  - Success/error/warning/info message categories
  - Header banners
  - Prompts and acknowledgement pause

ARCHITECTURE:
Every operator-facing line goes through a Console. Input and output are
injectable so a whole session can be scripted in tests.
"""

import sys
from typing import Callable, Optional, TextIO

from ..core.constants import (
    COLOR_BLUE,
    COLOR_CYAN,
    COLOR_GREEN,
    COLOR_RED,
    COLOR_RESET,
    COLOR_YELLOW,
    GLYPH_ERROR,
    GLYPH_INFO,
    GLYPH_SUCCESS,
    GLYPH_WARNING,
    HEADER_WIDTH,
    RULE_WIDTH,
)


def colorize(text: str, color: str) -> str:
    return f"{color}{text}{COLOR_RESET}"


class Console:
    """
    Terminal front end

    Reading past the end of input raises EOFError, which the menu loop
    treats as the end of the session.
    """

    def __init__(
        self,
        input_func: Optional[Callable[[], str]] = None,
        stream: Optional[TextIO] = None,
    ):
        """
        Initialize console

        Args:
            input_func: Returns one raw input line, raises EOFError at
                end of input (defaults to reading stdin)
            stream: Output stream (defaults to stdout)
        """
        self._input = input_func or self._read_stdin
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so redirected stdout is honored
        return self._stream or sys.stdout

    @staticmethod
    def _read_stdin() -> str:
        line = sys.stdin.readline()
        if not line:
            raise EOFError("end of input")
        return line

    def write(self, text: str = "") -> None:
        """Print one line"""
        self.stream.write(text + "\n")
        self.stream.flush()

    def header(self, title: str) -> None:
        rule = colorize("=" * HEADER_WIDTH, COLOR_BLUE)
        self.write()
        self.write(rule)
        self.write(colorize(f" {title}", COLOR_BLUE))
        self.write(rule)
        self.write()

    def rule(self) -> None:
        self.write("-" * RULE_WIDTH)

    def success(self, message: str) -> None:
        self.write(f"{colorize(GLYPH_SUCCESS, COLOR_GREEN)} {message}")

    def error(self, message: str) -> None:
        self.write(f"{colorize(GLYPH_ERROR, COLOR_RED)} {message}")

    def warning(self, message: str) -> None:
        self.write(f"{colorize(GLYPH_WARNING, COLOR_YELLOW)} {message}")

    def info(self, message: str) -> None:
        self.write(f"{colorize(GLYPH_INFO, COLOR_CYAN)} {message}")

    def prompt(self, message: str) -> str:
        """
        Ask a question and read the answer

        Args:
            message: Question shown without a trailing newline

        Returns:
            Answer with surrounding whitespace removed
        """
        self.stream.write(colorize(message, COLOR_YELLOW))
        self.stream.flush()
        return self._input().strip()

    def pause(self) -> None:
        self.prompt("\nPress ENTER to continue...")

"""Scan error types."""

from __future__ import annotations

import sys
from typing import TextIO


class LexError(Exception):
    """Raised on the first scanning error, with the 1-based line it occurred on."""

    def __init__(self, message: str, line: int) -> None:
        self.message = message
        self.line = line
        super().__init__(self.format())

    def format(self) -> str:
        return f"[line {self.line}] Error: {self.message}"

    def report(self, *, file: TextIO | None = None) -> None:
        """Write the formatted diagnostic to *file* (default: stderr)."""
        print(self.format(), file=file if file is not None else sys.stderr)


class UnexpectedCharacterError(LexError):
    """A character that does not begin any token and is not whitespace."""

    def __init__(self, char: str, line: int) -> None:
        self.char = char
        super().__init__("Unexpected character.", line)


class UnterminatedStringError(LexError):
    """A string literal whose opening quote is never closed."""

    def __init__(self, line: int) -> None:
        super().__init__("Unterminated string.", line)

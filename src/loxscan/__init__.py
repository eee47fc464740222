"""Lexical scanner for the Lox scripting language."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from loxscan.tokens import Token

__version__ = "0.1.0"


def scan_tokens(source: str) -> list[Token]:
    """Scan Lox source text into a token list ending with EOF."""
    from loxscan.lexer import scan_tokens as _scan

    return _scan(source)

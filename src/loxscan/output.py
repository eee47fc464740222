"""Token stream printers for the CLI (text and JSON)."""

from __future__ import annotations

import json
import sys
from typing import Any, TextIO

from loxscan.tokens import Token

FORMATS = ("text", "json")


def token_to_dict(token: Token) -> dict[str, Any]:
    return {
        "type": token.type.name,
        "lexeme": token.lexeme,
        "literal": token.literal,
        "line": token.line,
    }


def write_tokens(tokens: list[Token], fmt: str = "text", *, file: TextIO | None = None) -> None:
    """Print *tokens* to *file* (default: stdout) in the given format."""
    if file is None:
        file = sys.stdout
    if fmt == "json":
        json.dump([token_to_dict(t) for t in tokens], file, indent=2)
        file.write("\n")
        return
    for token in tokens:
        file.write(f"{token}\n")

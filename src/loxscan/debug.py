"""Token dumps for inspecting scanner output."""

from __future__ import annotations

import json
import sys
from typing import Any, Iterable, TextIO

from loxscan.tokens import Token


def format_token(token: Token) -> str:
    """Render a token as ``TYPE lexeme literal`` (``null`` when there is no literal)."""
    literal = "null" if token.literal is None else str(token.literal)
    return f"{token.type.name} {token.lexeme} {literal}"


def token_to_dict(token: Token) -> dict[str, Any]:
    literal = None if token.literal is None else token.literal.value
    return {
        "type": token.type.name,
        "lexeme": token.lexeme,
        "literal": literal,
        "line": token.line,
    }


def dump_tokens(tokens: Iterable[Token], *, fmt: str = "text", file: TextIO = sys.stdout) -> None:
    """Write one line per token to *file*, as plain text or JSON objects."""
    for token in tokens:
        if fmt == "json":
            file.write(json.dumps(token_to_dict(token)))
        else:
            file.write(format_token(token))
        file.write("\n")

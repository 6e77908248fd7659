"""Lox scripting language scanner."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from loxscan.errors import Reporter
    from loxscan.tokens import Token

__version__ = "0.1.0"


def scan(source: str, reporter: Reporter | None = None) -> list[Token]:
    """Scan Lox source into tokens, ending with a single EOF token."""
    from loxscan.lexer import scan_all

    return scan_all(source, reporter)

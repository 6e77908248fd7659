"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from loxscan.errors import ErrorCollector
from loxscan.lexer import scan_all
from loxscan.tokens import Token, TokenType


@pytest.fixture
def lex():
    """Return a helper that scans source and returns tokens (excluding EOF)."""

    def _lex(source: str) -> list[Token]:
        tokens = scan_all(source)
        # Strip trailing EOF for convenience
        return [t for t in tokens if t.type != TokenType.EOF]

    return _lex


@pytest.fixture
def collector() -> ErrorCollector:
    return ErrorCollector()


def assert_types(tokens: list[Token], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_lexemes(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token lexemes match the expected list."""
    actual = [t.lexeme for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"

"""Token types, data structures, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType


class TokenType(Enum):
    # Single-character
    LEFT_PAREN = auto()  # (
    RIGHT_PAREN = auto()  # )
    LEFT_BRACE = auto()  # {
    RIGHT_BRACE = auto()  # }
    COMMA = auto()  # ,
    DOT = auto()  # .
    MINUS = auto()  # -
    PLUS = auto()  # +
    SEMICOLON = auto()  # ;
    SLASH = auto()  # /
    STAR = auto()  # *

    # One or two characters
    BANG = auto()  # !
    BANG_EQUAL = auto()  # !=
    EQUAL = auto()  # =
    EQUAL_EQUAL = auto()  # ==
    GREATER = auto()  # >
    GREATER_EQUAL = auto()  # >=
    LESS = auto()  # <
    LESS_EQUAL = auto()  # <=

    # Literals
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()

    # Reserved words
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    EOF = auto()


@dataclass(frozen=True, slots=True)
class TextLiteral:
    """Decoded body of a string literal, without the surrounding quotes."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class NumberLiteral:
    """Decoded value of a numeric literal."""

    value: float

    def __str__(self) -> str:
        return repr(self.value)


# A token's literal is one of these, or None when the token carries no value.
LiteralValue = TextLiteral | NumberLiteral


@dataclass(frozen=True, slots=True)
class Token:
    """A single scanned lexeme with its decoded literal and starting line."""

    type: TokenType
    lexeme: str
    literal: LiteralValue | None
    line: int


KEYWORDS: MappingProxyType[str, TokenType] = MappingProxyType(
    {
        "and": TokenType.AND,
        "class": TokenType.CLASS,
        "else": TokenType.ELSE,
        "false": TokenType.FALSE,
        "for": TokenType.FOR,
        "fun": TokenType.FUN,
        "if": TokenType.IF,
        "nil": TokenType.NIL,
        "or": TokenType.OR,
        "print": TokenType.PRINT,
        "return": TokenType.RETURN,
        "super": TokenType.SUPER,
        "this": TokenType.THIS,
        "true": TokenType.TRUE,
        "var": TokenType.VAR,
        "while": TokenType.WHILE,
    }
)


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return "0" <= ch <= "9"


def is_alpha(ch: str) -> bool:
    """Return True if ch may start an identifier (ASCII letter or underscore)."""
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z") or ch == "_"


def is_alpha_numeric(ch: str) -> bool:
    return is_alpha(ch) or is_digit(ch)

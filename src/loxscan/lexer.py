"""Lox scanner: converts source text into a flat token stream."""

from __future__ import annotations

from loxscan.errors import ErrorCollector, ErrorKind, Reporter
from loxscan.tokens import (
    KEYWORDS,
    LiteralValue,
    NumberLiteral,
    TextLiteral,
    Token,
    TokenType,
    is_alpha,
    is_alpha_numeric,
    is_digit,
)

_SINGLE_CHAR = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# Operators that become a two-character token when followed by "=".
# Maps first char -> (with "=", without).
_EQUAL_PAIRS = {
    "!": (TokenType.BANG_EQUAL, TokenType.BANG),
    "=": (TokenType.EQUAL_EQUAL, TokenType.EQUAL),
    "<": (TokenType.LESS_EQUAL, TokenType.LESS),
    ">": (TokenType.GREATER_EQUAL, TokenType.GREATER),
}


class Scanner:
    """Tokenize one unit of Lox source text in a single forward pass.

    Lexical errors go to the reporter and never stop the scan, so the
    returned list always ends with exactly one EOF token.
    """

    def __init__(self, source: str, reporter: Reporter | None = None) -> None:
        self._source = source
        self._reporter: Reporter = reporter if reporter is not None else ErrorCollector()
        self._start = 0
        self._current = 0
        self._line = 1
        self._start_line = 1
        self._tokens: list[Token] = []
        self._done = False

    def scan_tokens(self) -> list[Token]:
        """Scan the full source and return the token list."""
        if self._done:
            return self._tokens

        while not self._at_end():
            # Beginning of the next lexeme
            self._start = self._current
            self._start_line = self._line
            self._scan_token()

        self._tokens.append(Token(TokenType.EOF, "", None, self._line))
        self._done = True
        return self._tokens

    # ------------------------------------------------------------------
    # Cursor helpers
    # ------------------------------------------------------------------

    def _at_end(self) -> bool:
        return self._current >= len(self._source)

    def _advance(self) -> str:
        ch = self._source[self._current]
        self._current += 1
        return ch

    def _match(self, expected: str) -> bool:
        if self._at_end() or self._source[self._current] != expected:
            return False
        self._current += 1
        return True

    def _peek(self) -> str:
        if self._at_end():
            return "\0"
        return self._source[self._current]

    def _peek_next(self) -> str:
        if self._current + 1 >= len(self._source):
            return "\0"
        return self._source[self._current + 1]

    def _emit(self, tt: TokenType, literal: LiteralValue | None = None) -> None:
        text = self._source[self._start : self._current]
        self._tokens.append(Token(tt, text, literal, self._start_line))

    def _error(self, kind: ErrorKind) -> None:
        self._reporter.report(self._line, kind.message)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        ch = self._advance()

        if ch in _SINGLE_CHAR:
            self._emit(_SINGLE_CHAR[ch])
            return

        if ch in _EQUAL_PAIRS:
            paired, single = _EQUAL_PAIRS[ch]
            self._emit(paired if self._match("=") else single)
            return

        if ch == "/":
            if self._match("/"):
                # Comment runs to end of line; the newline itself is left
                # for the next pass so the line counter sees it.
                while self._peek() != "\n" and not self._at_end():
                    self._advance()
            else:
                self._emit(TokenType.SLASH)
            return

        if ch in " \r\t":
            return

        if ch == "\n":
            self._line += 1
            return

        if ch == '"':
            self._string()
            return

        if is_digit(ch):
            self._number()
            return

        if is_alpha(ch):
            self._identifier()
            return

        self._error(ErrorKind.UNEXPECTED_CHARACTER)

    # ------------------------------------------------------------------
    # Literals and words
    # ------------------------------------------------------------------

    def _string(self) -> None:
        while self._peek() != '"' and not self._at_end():
            if self._peek() == "\n":
                self._line += 1
            self._advance()

        if self._at_end():
            self._error(ErrorKind.UNTERMINATED_STRING)
            return

        self._advance()  # closing quote

        value = self._source[self._start + 1 : self._current - 1]
        self._emit(TokenType.STRING, TextLiteral(value))

    def _number(self) -> None:
        while is_digit(self._peek()):
            self._advance()

        # A "." only belongs to the number when a digit follows it
        if self._peek() == "." and is_digit(self._peek_next()):
            self._advance()
            while is_digit(self._peek()):
                self._advance()

        text = self._source[self._start : self._current]
        self._emit(TokenType.NUMBER, NumberLiteral(float(text)))

    def _identifier(self) -> None:
        while is_alpha_numeric(self._peek()):
            self._advance()

        text = self._source[self._start : self._current]
        self._emit(KEYWORDS.get(text, TokenType.IDENTIFIER))


def scan_all(source: str, reporter: Reporter | None = None) -> list[Token]:
    """Convenience function: scan source text and return the token list."""
    return Scanner(source, reporter).scan_tokens()

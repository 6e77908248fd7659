"""Lexical error taxonomy and the diagnostic reporter the scanner writes to."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, TextIO


class ErrorKind(Enum):
    UNEXPECTED_CHARACTER = "Unexpected character."
    UNTERMINATED_STRING = "Unterminated string."

    @property
    def message(self) -> str:
        return self.value


class Reporter(Protocol):
    """Anything the scanner can hand a (line, message) diagnostic to."""

    def report(self, line: int, message: str) -> None: ...


def line_text(source: str, line: int) -> str:
    """Return the text of 1-based *line*, counting lines the way the scanner does.

    Only a newline ends a line; a trailing carriage return is dropped. Lines past the end
    (an unterminated string reported after a final newline) are empty.
    """
    lines = source.split("\n")
    if 0 < line <= len(lines):
        return lines[line - 1].rstrip("\r")
    return ""


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A single reported lexical error."""

    line: int
    message: str

    def format(self) -> str:
        return f"[line {self.line}] Error: {self.message}"

    def format_context(self, source: str, filename: str = "<script>") -> str:
        source_line = line_text(source, self.line)

        line_num = str(self.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.line}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter}"
        )


@dataclass(slots=True)
class ErrorCollector:
    """Default reporter: records every diagnostic, optionally echoing it to a stream.

    When *source* is set, echoed diagnostics include the offending source line.
    """

    stream: TextIO | None = None
    source: str | None = None
    filename: str = "<script>"
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def report(self, line: int, message: str) -> None:
        diag = Diagnostic(line, message)
        self.diagnostics.append(diag)
        if self.stream is not None:
            if self.source is not None:
                print(diag.format_context(self.source, self.filename), file=self.stream)
            else:
                print(diag.format(), file=self.stream)

    @property
    def had_error(self) -> bool:
        return bool(self.diagnostics)

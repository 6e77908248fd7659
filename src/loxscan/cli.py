"""Command-line interface for the Lox scanner."""

from __future__ import annotations

import argparse
import sys
import tomllib
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Any, TextIO

from loxscan.debug import dump_tokens
from loxscan.errors import ErrorCollector
from loxscan.lexer import scan_all

OUTPUT_FORMATS = ("text", "json")
DEFAULT_PROMPT = "> "


class ExitCode(IntEnum):
    NO_ERROR = 0
    ERROR = 1
    BAD_ARGUMENTS = 2


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    script: Path | None
    fmt: str
    prompt: str


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="loxscan",
        description="Scan Lox source and print its tokens",
    )
    p.add_argument("script", nargs="?", help="Lox script (default: interactive prompt)")
    p.add_argument(
        "--format",
        default=None,
        metavar="FMT",
        help="Token output format: text or json (default: text)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover lox.toml)",
    )
    p.add_argument("--prompt", default=None, metavar="STR", help="Interactive prompt string")
    return p


def parse_format(s: str) -> str:
    """Validate an output format name."""
    if s not in OUTPUT_FORMATS:
        raise argparse.ArgumentTypeError(
            f"invalid output format {s!r} (expected one of: {', '.join(OUTPUT_FORMATS)})"
        )
    return s


def load_config(config_path: Path | None, base_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else base_dir / "lox.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    script = Path(args.script) if args.script else None
    base_dir = Path(".")
    if script is not None and script.parent.parts:
        base_dir = script.parent

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, base_dir)

    fmt = "text"
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict):
        cfg_fmt = cfg_output.get("format")
        if isinstance(cfg_fmt, str):
            fmt = cfg_fmt
    if args.format is not None:
        fmt = args.format
    fmt = parse_format(fmt)

    prompt = DEFAULT_PROMPT
    cfg_repl = config.get("repl")
    if isinstance(cfg_repl, dict):
        cfg_prompt = cfg_repl.get("prompt")
        if isinstance(cfg_prompt, str):
            prompt = cfg_prompt
    if args.prompt is not None:
        prompt = args.prompt

    return CliOptions(script=script, fmt=fmt, prompt=prompt)


def run(source: str, options: CliOptions, collector: ErrorCollector, out: TextIO) -> None:
    """Scan one source unit and print its tokens."""
    tokens = scan_all(source, collector)
    dump_tokens(tokens, fmt=options.fmt, file=out)


def run_prompt(
    options: CliOptions, collector: ErrorCollector, stdin: TextIO, stdout: TextIO
) -> None:
    """Read-scan-print loop; stops at end of input or on a blank line."""
    try:
        while True:
            stdout.write(options.prompt)
            stdout.flush()
            line = stdin.readline()
            if not line or not line.strip():
                break
            run(line.rstrip("\r\n"), options, collector, stdout)
    except KeyboardInterrupt:
        stdout.write("\n")


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return ExitCode.BAD_ARGUMENTS
    except (OSError, tomllib.TOMLDecodeError) as exc:
        print(f"error: cannot load config: {exc}", file=sys.stderr)
        return ExitCode.BAD_ARGUMENTS

    if options.script is None:
        collector = ErrorCollector(stream=sys.stderr)
        run_prompt(options, collector, sys.stdin, sys.stdout)
    else:
        if not options.script.is_file():
            print(f"error: no such file: {options.script}", file=sys.stderr)
            return ExitCode.BAD_ARGUMENTS
        try:
            # Bytes in, so "\r" reaches the scanner untouched; a UTF-8 BOM is dropped
            source = options.script.read_bytes().decode("utf-8-sig")
        except (OSError, UnicodeDecodeError) as exc:
            print(f"error: cannot read {options.script}: {exc}", file=sys.stderr)
            return ExitCode.BAD_ARGUMENTS
        collector = ErrorCollector(stream=sys.stderr, source=source, filename=str(options.script))
        run(source, options, collector, sys.stdout)

    if collector.had_error:
        return ExitCode.ERROR
    return ExitCode.NO_ERROR

"""Command-line interface for loxscan."""

from __future__ import annotations

import argparse
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TextIO

from loxscan.errors import LexError
from loxscan.lexer import scan_tokens
from loxscan.output import FORMATS, write_tokens

DEFAULT_PROMPT = "> "
CONFIG_NAME = "loxscan.toml"


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None
    repl: bool
    output_format: str
    prompt: str


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="loxscan",
        description="Scan Lox source into tokens",
    )
    p.add_argument("file", nargs="?", help="Input .lox file")
    p.add_argument("-f", "--file", dest="file_option", metavar="FILE", help="Input .lox file")
    p.add_argument("-r", "--repl", action="store_true", help="Start an interactive prompt")
    p.add_argument(
        "--format",
        choices=FORMATS,
        default=None,
        help="Token output format (default: text)",
    )
    p.add_argument("--prompt", default=None, help="REPL prompt string (default: '> ')")
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_NAME})",
    )
    return p


def load_config(config_path: Path | None, search_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else search_dir / CONFIG_NAME

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace, cwd: Path | None = None) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, cwd if cwd is not None else Path("."))

    # Output format: config < CLI
    output_format = "text"
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict):
        cfg_format = cfg_output.get("format")
        if cfg_format is not None:
            if cfg_format not in FORMATS:
                raise argparse.ArgumentTypeError(
                    f"invalid output format in config (expected one of {', '.join(FORMATS)}): "
                    f"{cfg_format}"
                )
            output_format = cfg_format
    if args.format is not None:
        output_format = args.format

    # Prompt: config < CLI
    prompt = DEFAULT_PROMPT
    cfg_repl = config.get("repl")
    if isinstance(cfg_repl, dict):
        cfg_prompt = cfg_repl.get("prompt")
        if isinstance(cfg_prompt, str):
            prompt = cfg_prompt
    if args.prompt is not None:
        prompt = args.prompt

    # Input file: -f/--file wins over the positional argument
    input_name = args.file_option or args.file

    return CliOptions(
        input_file=Path(input_name) if input_name else None,
        repl=args.repl,
        output_format=output_format,
        prompt=prompt,
    )


def run(source: str, options: CliOptions) -> None:
    """Scan *source* and print its tokens. Raises LexError on invalid input."""
    tokens = scan_tokens(source)
    write_tokens(tokens, options.output_format, file=sys.stdout)


def run_file(options: CliOptions) -> int:
    """Scan a whole file. Returns exit code 0, or 1 on a scan error."""
    assert options.input_file is not None
    # Decoded without newline translation so \r and \r\n reach the scanner verbatim
    source = options.input_file.read_bytes().decode("utf-8")
    try:
        run(source, options)
    except LexError as exc:
        exc.report(file=sys.stderr)
        return 1
    return 0


def run_prompt(options: CliOptions, stdin: TextIO | None = None) -> int:
    """Read, scan, and print one line at a time until end of input."""
    stream = stdin if stdin is not None else sys.stdin
    while True:
        sys.stdout.write(options.prompt)
        sys.stdout.flush()
        line = stream.readline()
        if not line:
            sys.stdout.write("\n")
            return 0
        try:
            run(line, options)
        except LexError as exc:
            exc.report(file=sys.stderr)
        sys.stdout.write("\n")


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except (OSError, tomllib.TOMLDecodeError) as exc:
        print(f"error: cannot load config: {exc}", file=sys.stderr)
        return 2

    if options.repl:
        return run_prompt(options)

    if options.input_file is None:
        print("error: no input file or --repl flag given", file=sys.stderr)
        return 2

    try:
        return run_file(options)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: cannot read {options.input_file}: {exc}", file=sys.stderr)
        return 2

"""Command-line interface for glscan."""

from __future__ import annotations

import argparse
import io
import json
import logging
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from glscan.errors import LexError

OUTPUT_FORMATS = ("text", "json")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    filename: str
    start_line: int
    output_format: str
    verbose: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="glscan",
        description="Tokenize a source file and print the token stream",
    )
    p.add_argument("input", help="Input source file")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover glscan.toml)",
    )
    p.add_argument(
        "--start-line",
        type=int,
        default=None,
        metavar="N",
        help="Line number of the first source line (default: 1)",
    )
    p.add_argument(
        "--filename",
        default=None,
        metavar="NAME",
        help="File name shown in diagnostics (default: input path)",
    )
    p.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Token output format (default: text)",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "glscan.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    input_file = Path(args.input)
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    cfg_scan = config.get("scan")
    if not isinstance(cfg_scan, dict):
        cfg_scan = {}
    cfg_output = config.get("output")
    if not isinstance(cfg_output, dict):
        cfg_output = {}

    start_line = 1
    cfg_start = cfg_scan.get("start_line")
    if isinstance(cfg_start, int) and not isinstance(cfg_start, bool):
        start_line = cfg_start
    if args.start_line is not None:
        start_line = args.start_line
    if start_line < 1:
        raise argparse.ArgumentTypeError(f"start line must be at least 1: {start_line}")

    filename = str(input_file)
    cfg_filename = cfg_scan.get("filename")
    if isinstance(cfg_filename, str):
        filename = cfg_filename
    if args.filename is not None:
        filename = args.filename

    output_format = "text"
    cfg_format = cfg_output.get("format")
    if cfg_format is not None:
        if cfg_format not in OUTPUT_FORMATS:
            raise argparse.ArgumentTypeError(f"invalid output format in config: {cfg_format}")
        output_format = cfg_format
    if args.format is not None:
        output_format = args.format

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        filename=filename,
        start_line=start_line,
        output_format=output_format,
        verbose=args.verbose,
    )


def scan_file(options: CliOptions) -> str:
    """Read and tokenize a source file, returning the formatted token stream."""
    from glscan.debug import dump_tokens, tokens_to_json
    from glscan.lexer import tokenize

    source = options.input_file.read_text(encoding="utf-8")
    tokens = tokenize(source, options.filename, options.start_line - 1)

    if options.output_format == "json":
        return json.dumps(tokens_to_json(tokens), indent=2) + "\n"

    buf = io.StringIO()
    dump_tokens(tokens, file=buf)
    return buf.getvalue()


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except tomllib.TOMLDecodeError as exc:
        print(f"error: invalid config file: {exc}", file=sys.stderr)
        return 2

    if options.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        output = scan_file(options)
    except LexError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: cannot read {options.input_file}: {exc}", file=sys.stderr)
        return 2

    if options.output_file:
        options.output_file.write_text(output, encoding="utf-8")
    else:
        sys.stdout.write(output)

    return 0

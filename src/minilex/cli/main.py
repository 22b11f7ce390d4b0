# Copyright 2026 minilex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the minilex command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from minilex.config.settings import (
    CONFIG_FILE_NAME,
    ConfigError,
    ScanSettings,
    find_settings,
    load_settings,
    with_overrides,
)
from minilex.output.display import OutputFormat, render
from minilex.scanner.lexer import DELIMITERS, KEYWORDS, OPERATORS, TokenKind, scan_with_diagnostics
from minilex.source.loader import SourceError, read_source

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the minilex CLI."""
    parser = argparse.ArgumentParser(
        prog="minilex",
        description="minilex: lexical analyzer for a small expression language",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # scan subcommand
    scan_parser = subparsers.add_parser(
        "scan",
        help="Tokenize a source file",
        description="Tokenize a source file and print the resulting tokens.",
    )
    scan_parser.add_argument(
        "file",
        help="Source file to scan ('-' reads standard input)",
    )
    scan_parser.add_argument(
        "--format",
        dest="output_format",
        choices=[fmt.value for fmt in OutputFormat],
        default=None,
        help="Output format (default: from config, otherwise 'text')",
    )
    scan_parser.add_argument(
        "--color",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Colour token kinds in table output",
    )
    scan_parser.add_argument(
        "--strict",
        action="store_const",
        const=True,
        default=None,
        help="Exit with status 1 when the scan reports any diagnostic",
    )
    scan_parser.add_argument(
        "--no-diagnostics",
        dest="show_diagnostics",
        action="store_const",
        const=False,
        default=None,
        help="Do not print diagnostics to stderr",
    )
    scan_parser.add_argument(
        "--encoding",
        default=None,
        help="Source file encoding (default: from config, otherwise utf-8)",
    )
    scan_parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Configuration file (default: nearest {CONFIG_FILE_NAME} from the current directory)",
    )

    # kinds subcommand
    subparsers.add_parser(
        "kinds",
        help="List token kinds and reserved words",
        description="List the token kinds, keywords, operators and delimiters the scanner knows.",
    )

    args = parser.parse_args()
    _configure_logging(args.verbose)
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################

_UNREACHABLE_KINDS = frozenset({TokenKind.UNARY_OPERATOR, TokenKind.FUNCTION, TokenKind.COMMENT})


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "scan":
        return _cmd_scan(args)
    if args.command == "kinds":
        return _cmd_kinds(args)
    return 0


def _resolve_settings(args: argparse.Namespace) -> ScanSettings:
    """Combine the configuration file (if any) with command line overrides."""
    config_path = args.config if args.config is not None else find_settings(Path.cwd())
    if config_path is None:
        settings = ScanSettings()
    else:
        logger.debug("Using config file %s", config_path)
        settings = load_settings(config_path)

    output_format = OutputFormat(args.output_format) if args.output_format is not None else None
    return with_overrides(
        settings,
        output_format=output_format,
        color=args.color,
        strict=args.strict,
        show_diagnostics=args.show_diagnostics,
        encoding=args.encoding,
    )


def _cmd_scan(args: argparse.Namespace) -> int:
    """Handle the scan subcommand."""
    try:
        settings = _resolve_settings(args)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        source = read_source(args.file, encoding=settings.encoding)
    except SourceError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    tokens, diagnostics = scan_with_diagnostics(source)
    print(render(tokens, settings.output_format, color=settings.color), end="")

    if settings.show_diagnostics:
        for diagnostic in diagnostics:
            print(
                f"Warning: {diagnostic.line}:{diagnostic.column}: {diagnostic.message}",
                file=sys.stderr,
            )

    if settings.strict and diagnostics:
        print(f"Error: scan reported {len(diagnostics)} diagnostic(s).", file=sys.stderr)
        return 1
    return 0


def _cmd_kinds(args: argparse.Namespace) -> int:
    """Handle the kinds subcommand."""
    print("Token kinds:")
    for kind in TokenKind:
        suffix = " (never produced)" if kind in _UNREACHABLE_KINDS else ""
        print(f"  {kind.value}{suffix}")
    print(f"Keywords: {' '.join(sorted(KEYWORDS))}")
    print(f"Operators: {' '.join(sorted(OPERATORS))}")
    print(f"Delimiters: {' '.join(sorted(DELIMITERS))}")
    return 0

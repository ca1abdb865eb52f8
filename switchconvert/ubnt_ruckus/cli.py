"""CLI entry point for Ubiquiti -> Ruckus conversion — standalone-capable."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from switchconvert.ubnt_ruckus.converter import UbiquitiToRuckusConverter
from switchconvert.ubnt_ruckus.exceptions import FormatError
from switchconvert.ubnt_ruckus.formatters import MarkdownFormatter, TerminalFormatter
from switchconvert.ubnt_ruckus.renderer import RuckusProfile

DEFAULT_OUTPUT = "ruckus_config.txt"
OUTPUT_FORMATS = ("ruckus", "summary", "markdown")


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Build argparse parser for the converter."""
    parser = argparse.ArgumentParser(
        description="Convert a Ubiquiti switch JSON export into a Ruckus ICX configuration.",
    )
    parser.add_argument(
        "input",
        help="Ubiquiti JSON export file ('-' reads stdin)",
    )
    parser.add_argument(
        "-o",
        "--output",
        nargs="?",
        const=DEFAULT_OUTPUT,
        help=f"Write output to file instead of stdout (default name: {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=OUTPUT_FORMATS,
        default="ruckus",
        help="Output format: ruckus config (default), summary, markdown",
    )
    parser.add_argument(
        "-p",
        "--profile",
        help="JSON file overriding target profile constants (hostname, addresses, modules, ...)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose logging",
    )
    return parser.parse_args(args)


def _read_input(source: str) -> bytes:
    # Raw bytes; decoding is left to ConfigParser
    if source == "-":
        return sys.stdin.buffer.read()
    return Path(source).read_bytes()


def _input_title(source: str) -> str:
    return "stdin" if source == "-" else Path(source).name


def _load_profile(path: str | None) -> RuckusProfile | None:
    if path is None:
        return None
    return RuckusProfile.model_validate_json(Path(path).read_text(encoding="utf-8"))


def main(args: list[str] | None = None) -> None:
    """Main entry point for the conversion CLI."""
    parsed = parse_args(args)

    logger.enable("switchconvert")
    if not parsed.verbose:
        logger.remove()
        logger.add(sys.stderr, level="INFO")

    try:
        profile = _load_profile(parsed.profile)
    except (OSError, ValidationError) as e:
        logger.error(f"Error loading profile {parsed.profile}: {e}")
        sys.exit(1)

    try:
        raw = _read_input(parsed.input)
    except OSError as e:
        logger.error(f"Error reading file {parsed.input}: {e}")
        sys.exit(1)

    converter = UbiquitiToRuckusConverter(profile)
    try:
        if parsed.format == "ruckus":
            output = converter.convert(raw)
        else:
            model = converter.extract(raw)
            if parsed.format == "markdown":
                output = MarkdownFormatter(model, title=_input_title(parsed.input)).format() + "\n"
            else:
                output = TerminalFormatter(model).format() + "\n"
    except FormatError as e:
        logger.error(f"Error converting configuration: {e}")
        sys.exit(1)

    if parsed.output:
        with open(parsed.output, "w", encoding="utf-8", newline="\n") as f:
            f.write(output)
        logger.info(f"Output written to {parsed.output}")
    else:
        sys.stdout.write(output)

"""Orchestrator CLI — dispatches to sub-CLIs.

Sub-commands:
  ubnt2ruckus  Convert a Ubiquiti JSON export into a Ruckus ICX configuration

A bare input path (or "-" for stdin) is converted with the default command.

Examples:
  switchconvert ubnt2ruckus export.json -o ruckus_config.txt

  switchconvert export.json --format summary

  cat export.json | switchconvert - -o
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from tabulate import tabulate

from switchconvert import __version__, configure_logging
from switchconvert import glogger

COMMANDS = {
    "ubnt2ruckus": ("switchconvert.ubnt_ruckus.cli", "Ubiquiti -> Ruckus ICX config conversion"),
}
DEFAULT_COMMAND = "ubnt2ruckus"


def _print_usage() -> None:
    print("usage: switchconvert <command> [options]")
    print(f"       switchconvert <export.json|-> [options]   (runs '{DEFAULT_COMMAND}')\n")
    print("Available commands:")
    for cmd, (_, desc) in COMMANDS.items():
        print(f"  {cmd:14s}  {desc}")
    print("\nRun 'switchconvert <command> --help' for command-specific options.")


def _print_startup_banner() -> None:
    startup_rows = [
        ["version", __version__],
        ["commands", ", ".join(COMMANDS)],
    ]

    for var in ("GITHUB_REF", "GITHUB_SHA", "BUILDTIME"):
        val = os.environ.get(var)
        if val and not val.endswith("_is_undefined"):
            startup_rows.append([var, val])

    table_str = tabulate(startup_rows, tablefmt="mixed_grid")
    lines = table_str.split("\n")
    table_width = len(lines[0])
    title = "switchconvert starting up"
    title_border = "┍" + "━" * (table_width - 2) + "┑"
    title_row = "│ " + title.center(table_width - 4) + " │"
    separator = lines[0].replace("┍", "┝").replace("┑", "┥").replace("┯", "┿")

    glogger.opt(raw=True).debug(
        "\n{}\n", title_border + "\n" + title_row + "\n" + separator + "\n" + "\n".join(lines[1:])
    )


def _is_input_path(arg: str) -> bool:
    """Return True if *arg* names an export to convert rather than a command."""
    return arg == "-" or Path(arg).is_file()


def main() -> None:
    """Main entry point — dispatch to sub-CLI."""
    configure_logging()
    _print_startup_banner()

    if len(sys.argv) < 2 or sys.argv[1] in ("-h", "--help"):
        _print_usage()
        sys.exit(0 if len(sys.argv) >= 2 else 1)

    command = sys.argv[1]
    sub_args = sys.argv[2:]
    if command not in COMMANDS and _is_input_path(command):
        command, sub_args = DEFAULT_COMMAND, sys.argv[1:]

    if command not in COMMANDS:
        print(f"switchconvert: unknown command '{command}'\n", file=sys.stderr)
        _print_usage()
        sys.exit(1)

    module_path, _ = COMMANDS[command]

    # Import and call the sub-CLI's main(), passing remaining args
    from importlib import import_module

    module = import_module(module_path)
    module.main(sub_args)


if __name__ == "__main__":
    main()

"""Command line for editing, filtering and printing PATH-like variables."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import TextIO

from pathtool.analysis import write_analysis
from pathtool.paths import (
    apply_filters,
    build_add,
    build_append,
    build_new,
    join_path,
    parse_path,
)

_VERSION = "0.3.0"


class Command(Enum):
    """The subcommands the tool understands."""

    PRINT = "print"
    NEW = "new"
    ADD = "add"
    APPEND = "append"
    ANALYZE = "analyze"


@dataclass
class Options:
    """Parsed command-line settings."""

    env: str = "PATH"
    filter: bool = False
    pretty: bool = False
    normalize: bool = False
    command: Command = Command.PRINT
    directories: list[str] = field(default_factory=list)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="path-tool",
        description="Utility to edit, filter, and print unix PATH-like strings.",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {_VERSION}")
    parser.add_argument("-e", "--env", default="PATH", help="Name of path environment variable")
    parser.add_argument(
        "-f", "--filter", action="store_true", help="Filter non-directories from path"
    )
    parser.add_argument(
        "-p", "--pretty", action="store_true", help="Print path one directory per line"
    )
    parser.add_argument(
        "-n", "--normalize", action="store_true", help="Normalize directory names in path"
    )
    commands = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)
    commands.add_parser("print", help="Print the current PATH one directory per line")
    for name, text in (
        ("new", "Build a new PATH from directories"),
        ("add", "Add directories to front of PATH"),
        ("append", "Add directories to back of PATH"),
    ):
        sub = commands.add_parser(name, help=text)
        sub.add_argument("directories", nargs="*")
    commands.add_parser("analyze", help="Analyze the current PATH")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> Options:
    """Parse command-line arguments into :class:`Options`."""
    namespace = _build_parser().parse_args(argv)
    return Options(
        env=namespace.env,
        filter=namespace.filter,
        pretty=namespace.pretty,
        normalize=namespace.normalize,
        command=Command(namespace.command),
        directories=list(getattr(namespace, "directories", [])),
    )


def run(
    options: Options, output: TextIO, environ: Mapping[str, str] | None = None
) -> None:
    """Carry out the command described by ``options``, writing to ``output``."""
    environ = os.environ if environ is None else environ
    current_str = environ.get(options.env, "")
    current = parse_path(current_str)
    pretty = options.pretty or options.command is Command.PRINT

    if options.command is Command.PRINT:
        path = current
    elif options.command is Command.NEW:
        path = build_new(options.directories)
    elif options.command is Command.ADD:
        path = build_add(current, options.directories)
    elif options.command is Command.APPEND:
        path = build_append(current, options.directories)
    else:
        write_analysis(current_str, output)
        path = []

    path = apply_filters(path, options.filter, options.normalize)
    if pretty:
        for directory in path:
            output.write(f"{directory}\n")
    else:
        output.write(f"{join_path(path)}\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the command line; returns the exit status."""
    options = parse_args(argv)
    try:
        run(options, sys.stdout)
    except OSError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0
# Jargs CLI Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Help page formatting for registered options.

The page is a `Usage:` line followed by one entry per option in registration
order. Each entry has a left-hand column (`  -x, --name ARG`) padded to a fixed
width and the description after it; columns wider than the padding put the
description on its own line, indented to the same position.

Example:
    Usage: example [args]
      -f, --flag                     Set flag
      --filename ARG                 Specify filename
      -p ARG                         Print something
      -h, --help                     Print help
"""
from __future__ import annotations

from typing import Iterable

from jargs.option import OptionSpec

COLUMN_WIDTH = 32


def format_option_column(spec: OptionSpec) -> str:
    """Return the left-hand column for one option, including the two-space margin."""
    column = "  "
    if spec.short_name:
        column += f"-{spec.short_name}"
    if spec.short_name and spec.long_name:
        column += ", "
    if spec.long_name:
        column += f"--{spec.long_name}"
    if spec.expects_value:
        column += " ARG"
    return column


def format_option(spec: OptionSpec) -> str:
    column = format_option_column(spec)
    if len(column) <= COLUMN_WIDTH:
        return f"{column:<{COLUMN_WIDTH}} {spec.description}\n"
    return f"{column}\n{'':<{COLUMN_WIDTH}} {spec.description}\n"


def format_help(usage: str, options: Iterable[OptionSpec]) -> str:
    """
    Render the full help page.

    Args:
        usage (str): Text shown after `Usage: `.
        options (Iterable[OptionSpec]): Options in display order.

    Returns:
        str: The help page, each line terminated by a newline.
    """
    lines = [f"Usage: {usage}\n"]
    lines.extend(format_option(spec) for spec in options)
    return "".join(lines)

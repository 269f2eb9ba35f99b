"""
Jargs CLI Option Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import sys
from typing import Sequence

from jargs.console import console
from jargs.parser import Parser, write_verbatim
from jargs.utils import get_program_name, setup_logging


def echo(text: str) -> None:
    write_verbatim(console, f"{text}\n")


def get_parser(state: dict[str, bool]) -> Parser:
    parser = Parser()

    def set_a_flag() -> None:
        state["a_flag"] = True
        echo("a")

    parser.add_flag("a", "ay", "A option", set_a_flag)
    parser.add_flag(None, "bee", "B option", lambda: echo("b"))
    parser.add_flag("c", None, "C option", lambda: echo("c"))
    parser.add_value("d", "dee", "D option", lambda value: echo(f"d: {value}"))
    parser.add_value(None, "ee", "E option", lambda value: echo(f"e: {value}"))
    parser.add_value("f", None, "F option", lambda value: echo(f"f: {value}"))
    parser.add_flag(
        "v",
        "verbose",
        "Enable debug logging",
        lambda: setup_logging(mode="cli", console_log_level=logging.DEBUG),
    )
    parser.add_help(f"{get_program_name()} [-abcv] [-def ARG]")
    return parser


def main(args: Sequence[str] | None = None) -> int:
    state = {"a_flag": False}
    parser = get_parser(state)
    parser.parse(sys.argv if args is None else args)
    echo(f"a_flag: {int(state['a_flag'])}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

# Jargs CLI Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `Parser`, the public entry point of jargs. It combines an
`OptionRegistry` with an `ArgumentScanner` and adds the help option and the
fail-fast reporting expected from a command-line program.

Public Interface:
- `add(spec)`: Register a prebuilt `OptionSpec`.
- `add_flag(...)` / `add_value(...)`: Register an option from its parts.
- `add_help(usage)`: Register `-h, --help`, which prints the help page.
- `parse_args(args)`: Scan and return a `ParseResult`, raising on failure.
- `parse(args)`: Scan, reporting failures to stderr and exiting with status 1.
- `format_help()` / `print_help()`: Render the help page.

Example Usage:
    state = {"flag": False, "filename": ""}

    parser = Parser()
    parser.add_flag("f", "flag", "Set flag", lambda: state.update(flag=True))
    parser.add_value(None, "filename", "Specify filename",
                     lambda value: state.update(filename=value))
    parser.add_help("example [args]")
    parser.parse(["example", "-f", "--filename=a.out"])

    # state == {"flag": True, "filename": "a.out"}
"""
from __future__ import annotations

import sys
from typing import Any, Callable, NoReturn, Sequence

from rich.console import Console

from jargs.console import console, error_console
from jargs.exceptions import ArgumentError
from jargs.help import format_help
from jargs.logger import logger
from jargs.option import OptionSpec
from jargs.registry import OptionRegistry
from jargs.scanner import ArgumentScanner, ParseResult
from jargs.signals import HelpSignal


def write_verbatim(target: Console, text: str) -> None:
    """Write pre-formatted text to a console's stream, bypassing rich rendering."""
    target.file.write(text)
    target.file.flush()


class Parser:
    """
    Command-line option parser.

    Registers options, scans argument vectors and, through `parse()`, reports
    errors and help requests the way a command-line program does: a message on
    the relevant stream followed by exit status 1.

    `register`-style calls must not run concurrently with a parse; a single parse
    call owns its scan position.
    """

    def __init__(
        self,
        program: str | None = None,
        exit_callback: Callable[[int], Any] = sys.exit,
        console: Console = console,
        error_console: Console = error_console,
    ) -> None:
        self.program: str | None = program
        self.exit_callback: Callable[[int], Any] = exit_callback
        self.console: Console = console
        self.error_console: Console = error_console
        self.usage: str = ""
        self.registry: OptionRegistry = OptionRegistry()
        self.scanner: ArgumentScanner = ArgumentScanner(self.registry)

    def add(self, spec: OptionSpec) -> OptionSpec:
        """Register an option and return it. See `OptionRegistry.register`."""
        self.registry.register(spec)
        return spec

    def add_flag(
        self,
        short_name: str | None,
        long_name: str | None,
        description: str,
        action: Callable[[], Any],
    ) -> OptionSpec:
        """Register an option that takes no value and return its spec."""
        return self.add(OptionSpec.flag(short_name, long_name, description, action))

    def add_value(
        self,
        short_name: str | None,
        long_name: str | None,
        description: str,
        action: Callable[[str], Any],
    ) -> OptionSpec:
        """Register an option that takes a value and return its spec."""
        return self.add(OptionSpec.value(short_name, long_name, description, action))

    def add_help(self, usage: str) -> OptionSpec:
        """
        Register `-h, --help`.

        When matched, the help page is printed to stdout and `HelpSignal` is raised,
        which `parse()` turns into exit status 1.
        """
        self.usage = usage
        return self.add_flag("h", "help", "Print help", self._help_requested)

    def _help_requested(self) -> NoReturn:
        self.print_help()
        raise HelpSignal()

    def format_help(self, usage: str | None = None) -> str:
        return format_help(self.usage if usage is None else usage, self.registry)

    def print_help(self, usage: str | None = None) -> None:
        """Write the help page to the output console verbatim."""
        write_verbatim(self.console, self.format_help(usage))

    def parse_args(self, args: Sequence[str] | None = None) -> ParseResult:
        """
        Scan an argument vector, invoking the action of every matched option.

        Args:
            args (Sequence[str] | None): Argument vector with the program name at
                index 0. Defaults to `sys.argv`.

        Returns:
            ParseResult: Matches and positional tokens.

        Raises:
            ArgumentError: On the first unknown option or missing/unexpected value.
            HelpSignal: If the help option was matched.
        """
        if args is None:
            args = sys.argv
        return self.scanner.scan(args)

    def parse(self, args: Sequence[str] | None = None) -> ParseResult | None:
        """
        Scan an argument vector, exiting with status 1 on error or help.

        Errors are written to stderr as `<program>: <message>`. Returns the
        `ParseResult` on success, or None if a non-terminating exit callback
        returned.
        """
        if args is None:
            args = sys.argv
        try:
            return self.parse_args(args)
        except ArgumentError as error:
            program = self.program or (args[0] if args else "")
            logger.debug("Parse failed: %s", error)
            write_verbatim(self.error_console, f"{program}: {error}\n")
            self.exit_callback(1)
        except HelpSignal:
            logger.debug("Help requested; exiting.")
            self.exit_callback(1)
        return None

    def __str__(self) -> str:
        return f"Parser(program={self.program!r}, options={len(self.registry)})"

    def __repr__(self) -> str:
        return str(self)

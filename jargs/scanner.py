# Jargs CLI Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ArgumentScanner`, the single-pass tokenizer that maps a raw
argument vector onto the options held by an `OptionRegistry`.

Token classes:
- Long form: `--name`, `--name=VALUE`, `--name VALUE` (token of 3+ characters
  starting with `--`).
- Short form: `-x`, clusters such as `-abc`, `-oVALUE`, `-o VALUE` (token of
  2+ characters starting with a single `-`).
- Anything else, including a bare `-` or `--`, is a positional token. It is
  recorded in the result and otherwise left alone.

The first mismatch raises an `ArgumentError` subclass and ends the scan; there is
no partial result. Actions run in the order their options appear on the
command line, as soon as each option is matched.

Scan state (current index and cluster offset) lives in local variables of
`scan()`, so one scanner can be reused for any number of sequential scans.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from jargs.exceptions import (
    MissingArgumentError,
    UnexpectedArgumentError,
    UnknownOptionError,
)
from jargs.logger import logger
from jargs.option import OptionSpec
from jargs.registry import OptionRegistry


@dataclass(frozen=True)
class OptionMatch:
    """One invoked action: the option, the value it received and its source token."""

    option: OptionSpec
    value: str
    token: str


@dataclass
class ParseResult:
    """
    Outcome of a successful scan.

    Attributes:
        program (str): The program name taken from `args[0]`.
        matches (list[OptionMatch]): Invoked actions in invocation order.
        positionals (list[str]): Tokens that were neither options nor values.
    """

    program: str = ""
    matches: list[OptionMatch] = field(default_factory=list)
    positionals: list[str] = field(default_factory=list)

    def values_for(self, name: str) -> list[str]:
        """Return the values received by the option with the given short or long name."""
        return [
            match.value
            for match in self.matches
            if name in (match.option.short_name, match.option.long_name)
        ]


def is_long_token(token: str) -> bool:
    return len(token) >= 3 and token.startswith("--")


def is_short_token(token: str) -> bool:
    return len(token) >= 2 and token.startswith("-") and not token.startswith("--")


class ArgumentScanner:
    """Scans an argument vector against an `OptionRegistry`, invoking matched actions."""

    def __init__(self, registry: OptionRegistry) -> None:
        self.registry = registry

    def _invoke(
        self, result: ParseResult, spec: OptionSpec, value: str, token: str
    ) -> None:
        logger.debug("Matched %s from %r with value %r", spec.display_name, token, value)
        spec.action(value)
        result.matches.append(OptionMatch(option=spec, value=value, token=token))

    def _next_value(self, args: Sequence[str], i: int, option: str) -> str:
        """Return the token after index `i` as a separate value."""
        if i + 1 >= len(args):
            logger.debug("No value follows '%s'", option)
            raise MissingArgumentError(option)
        return args[i + 1]

    def _scan_long(
        self, token: str, args: Sequence[str], i: int, result: ParseResult
    ) -> int:
        """Handle a long-form token. Returns the index of the last token consumed."""
        name, has_value, attached = token[2:].partition("=")
        option = f"--{name}"
        spec = self.registry.find_by_long(name)
        if spec is None:
            logger.debug("Unknown long option '%s'", option)
            raise UnknownOptionError(option)

        if not spec.expects_value:
            if has_value:
                logger.debug("Option '%s' was given %r", option, attached)
                raise UnexpectedArgumentError(option)
            self._invoke(result, spec, "", token)
        elif has_value:
            # --opt=arg
            if not attached:
                raise MissingArgumentError(option)
            self._invoke(result, spec, attached, token)
        else:
            # --opt arg
            value = self._next_value(args, i, option)
            self._invoke(result, spec, value, token)
            i += 1
        return i

    def _scan_short(
        self, token: str, args: Sequence[str], i: int, result: ParseResult
    ) -> int:
        """Handle a short-form token. Returns the index of the last token consumed."""
        cluster = token[1:]
        for j, char in enumerate(cluster):
            option = f"-{char}"
            spec = self.registry.find_by_short(char)
            if spec is None:
                logger.debug("Unknown short option '%s' in %r", option, token)
                raise UnknownOptionError(option)

            if not spec.expects_value:
                self._invoke(result, spec, "", token)
            elif j < len(cluster) - 1:
                # -oarg: the rest of the cluster is the value
                self._invoke(result, spec, cluster[j + 1 :], token)
                break
            else:
                # -o arg
                value = self._next_value(args, i, option)
                self._invoke(result, spec, value, token)
                i += 1
        return i

    def scan(self, args: Sequence[str]) -> ParseResult:
        """
        Scan `args` (with the program name at index 0) and invoke matched actions.

        Args:
            args (Sequence[str]): The full argument vector.

        Returns:
            ParseResult: Matches and positional tokens, in order.

        Raises:
            UnknownOptionError: If a token names an unregistered option.
            MissingArgumentError: If a value-taking option has no value.
            UnexpectedArgumentError: If a no-value long option is given `=VALUE`.
        """
        result = ParseResult(program=args[0] if args else "")
        i = 1
        while i < len(args):
            token = args[i]
            if is_long_token(token):
                i = self._scan_long(token, args, i, result)
            elif is_short_token(token):
                i = self._scan_short(token, args, i, result)
            else:
                result.positionals.append(token)
            i += 1
        logger.debug(
            "Scanned %d token(s): %d match(es), %d positional(s)",
            max(len(args) - 1, 0),
            len(result.matches),
            len(result.positionals),
        )
        return result

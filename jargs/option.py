# Jargs CLI Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `OptionSpec` dataclass used by `OptionRegistry` and `ArgumentScanner`
to describe one command-line option.

Each `OptionSpec` names a short form (`-x`), a long form (`--name`) or both,
carries the help text shown by the help page, records whether the option takes a
value, and holds the action invoked when the option is matched.

Actions always receive a single string. Options that take no value are called
with an empty string; the `OptionSpec.flag()` constructor adapts a
zero-argument callable to that signature.

Example:
    OptionSpec.flag("f", "flag", "Set flag", lambda: flags.add("f"))
    OptionSpec.value(None, "filename", "Specify filename", names.append)
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable


@dataclass
class OptionSpec:
    """
    Represents a registered command-line option.

    Attributes:
        short_name (str | None): Single character for the `-x` form, or None.
        long_name (str | None): Name for the `--name` form, or None.
        description (str): Help text for the option.
        expects_value (bool): True if the option consumes a value.
        action (Callable[[str], Any]): Invoked with the value ("" for flags).
    """

    short_name: str | None
    long_name: str | None
    description: str
    expects_value: bool
    action: Callable[[str], Any]

    @classmethod
    def flag(
        cls,
        short_name: str | None,
        long_name: str | None,
        description: str,
        action: Callable[[], Any],
    ) -> OptionSpec:
        """Create an option that takes no value from a zero-argument callable."""

        def invoke(_value: str) -> Any:
            return action()

        invoke.__name__ = getattr(action, "__name__", "invoke")
        return cls(short_name, long_name, description, False, invoke)

    @classmethod
    def value(
        cls,
        short_name: str | None,
        long_name: str | None,
        description: str,
        action: Callable[[str], Any],
    ) -> OptionSpec:
        """Create an option that takes a value."""
        return cls(short_name, long_name, description, True, action)

    @property
    def display_name(self) -> str:
        """The preferred form for messages: `--long` if present, else `-x`."""
        if self.long_name:
            return f"--{self.long_name}"
        return f"-{self.short_name}"

    def __str__(self) -> str:
        return (
            f"OptionSpec(short={self.short_name!r}, long={self.long_name!r}, "
            f"expects_value={self.expects_value})"
        )

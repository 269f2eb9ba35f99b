# Jargs CLI Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Implements `OptionRegistry`, the ordered collection of `OptionSpec` entries
queried by `ArgumentScanner`.

Insertion order is preserved. It controls the order of the help page and which
entry wins when two options share a name: lookups return the first registered
match. Duplicates are therefore accepted (and logged), while malformed names
are rejected at registration time with `InvalidOptionError`.
"""
from __future__ import annotations

from typing import Iterator

from jargs.exceptions import InvalidOptionError
from jargs.logger import logger
from jargs.option import OptionSpec


class OptionRegistry:
    """Ordered, append-only store of option specifications."""

    def __init__(self) -> None:
        self._options: list[OptionSpec] = []

    def _validate(self, spec: OptionSpec) -> None:
        """Validate the names and action of an option before it is stored."""
        if spec.short_name is None and spec.long_name is None:
            raise InvalidOptionError("Option must have a short name or a long name")
        if spec.short_name is not None:
            if not isinstance(spec.short_name, str) or len(spec.short_name) != 1:
                raise InvalidOptionError(
                    f"Short name {spec.short_name!r} must be a single character"
                )
            if spec.short_name == "-":
                raise InvalidOptionError("Short name cannot be '-'")
        if spec.long_name is not None:
            if not isinstance(spec.long_name, str) or not spec.long_name:
                raise InvalidOptionError(
                    f"Long name {spec.long_name!r} must be a non-empty string"
                )
            if spec.long_name.startswith("-"):
                raise InvalidOptionError(
                    f"Long name '{spec.long_name}' must be given without leading dashes"
                )
            if "=" in spec.long_name:
                raise InvalidOptionError(
                    f"Long name '{spec.long_name}' cannot contain '='"
                )
        if not callable(spec.action):
            raise InvalidOptionError(f"Action for '{spec.display_name}' must be callable")

    def register(self, spec: OptionSpec) -> None:
        """
        Append an option to the registry.

        Args:
            spec (OptionSpec): The option to register.

        Raises:
            InvalidOptionError: If the option has no name, a malformed name,
                or a non-callable action.
        """
        self._validate(spec)
        short_name, long_name = spec.short_name, spec.long_name
        if short_name is not None and self.find_by_short(short_name) is not None:
            logger.warning(
                "Short option '-%s' is already registered; the first entry wins.",
                short_name,
            )
        if long_name is not None and self.find_by_long(long_name) is not None:
            logger.warning(
                "Long option '--%s' is already registered; the first entry wins.",
                long_name,
            )
        self._options.append(spec)
        logger.debug("Registered %s", spec)

    def find_by_long(self, name: str) -> OptionSpec | None:
        """Return the first option whose long name is exactly `name`."""
        return next((spec for spec in self._options if spec.long_name == name), None)

    def find_by_short(self, char: str) -> OptionSpec | None:
        """Return the first option whose short name is exactly `char`."""
        return next((spec for spec in self._options if spec.short_name == char), None)

    def __iter__(self) -> Iterator[OptionSpec]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)

    def __str__(self) -> str:
        return f"OptionRegistry(options={len(self._options)})"

    def __repr__(self) -> str:
        return str(self)

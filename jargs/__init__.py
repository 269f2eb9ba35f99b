"""
Jargs CLI Option Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .exceptions import (
    ArgumentError,
    InvalidOptionError,
    JargsError,
    MissingArgumentError,
    UnexpectedArgumentError,
    UnknownOptionError,
)
from .option import OptionSpec
from .parser import Parser
from .registry import OptionRegistry
from .scanner import ArgumentScanner, OptionMatch, ParseResult
from .signals import HelpSignal

__all__ = [
    "ArgumentError",
    "ArgumentScanner",
    "HelpSignal",
    "InvalidOptionError",
    "JargsError",
    "MissingArgumentError",
    "OptionMatch",
    "OptionRegistry",
    "OptionSpec",
    "ParseResult",
    "Parser",
    "UnexpectedArgumentError",
    "UnknownOptionError",
]

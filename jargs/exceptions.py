# Jargs CLI Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by the jargs option parser.

Exception Hierarchy:
- JargsError
    ├── InvalidOptionError
    ├── ConfigError
    └── ArgumentError
        ├── UnknownOptionError
        ├── MissingArgumentError
        └── UnexpectedArgumentError

`InvalidOptionError` is raised while options are being registered.
`ArgumentError` subclasses are raised while an argument vector is scanned;
they carry the offending option text (e.g. `--name` or `-x`) and render a
message without the program-name prefix, which `Parser.parse` adds when it
reports the failure.
"""


class JargsError(Exception):
    """Base exception for the jargs option parser."""


class InvalidOptionError(JargsError):
    """Exception raised when an option specification is malformed."""


class ConfigError(JargsError):
    """Exception raised when option definitions cannot be loaded."""


class ArgumentError(JargsError):
    """Exception raised when the argument vector does not match the registered options."""

    template = "invalid option: '{option}'"

    def __init__(self, option: str):
        self.option = option
        super().__init__(self.template.format(option=option))


class UnknownOptionError(ArgumentError):
    """Exception raised when a token names an option that was never registered."""

    template = "unknown option: '{option}'"


class MissingArgumentError(ArgumentError):
    """Exception raised when a value-taking option has no value."""

    template = "option '{option}' requires an argument"


class UnexpectedArgumentError(ArgumentError):
    """Exception raised when a no-value long option is given `=VALUE`."""

    template = "option '{option}' doesn't allow an argument"

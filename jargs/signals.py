# Jargs CLI Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals raised while parsing.

Signals inherit from `FlowSignal`, a subclass of `BaseException`, so they pass
through `except Exception` blocks in user actions and reach the caller of
`Parser.parse_args`.

Signals:
- HelpSignal: The help page was rendered and parsing should stop.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in jargs.

    These are not errors. They end a parse early on explicit user request.
    """


class HelpSignal(FlowSignal):
    """Raised after the help page has been displayed."""

    def __init__(self, message: str = "Help signal received."):
        super().__init__(message)

"""
Error taxonomy.

Recoverable errors derive from MuteError and surface to the caller of
Logger.send(). UnimplementedDestinationError is deliberately outside the
Exception hierarchy: it marks a destination that does not exist yet and
must halt the caller rather than be handled.
"""

from typing import Any


class MuteError(Exception):
    """Base class for recoverable delivery errors."""


class InvalidFormatError(MuteError, ValueError):
    """Format value outside {json, text}."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            'Attempted to convert an invalid log type, only accept "json" and '
            f'"text" values: {value!r}'
        )


class SerializationError(MuteError):
    """An event could not be encoded as JSON."""

    def __init__(self, event_message: str):
        self.event_message = event_message
        super().__init__(f'Failed to convert an event to JSON: "{event_message}"')


class UnimplementedDestinationError(BaseException):
    """
    File delivery is not implemented.

    Raised by Route.deliver() for any route with a non-empty file path.
    Derives from BaseException so `except Exception` blocks do not absorb it.
    """

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"File delivery is not implemented: {path}")

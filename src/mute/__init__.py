"""
mute: a minimal event-logging facade.

Events (a message plus string context) are rendered as JSON or text and
delivered to every route of a logger. The in-memory sink is the only
implemented destination; file routes are declared but not implemented.
"""

import logging

from mute.core import Logger, init
from mute.errors import (
    InvalidFormatError,
    MuteError,
    SerializationError,
    UnimplementedDestinationError,
)
from mute.events import Event
from mute.formatters import (
    EventFormatter,
    Format,
    JsonFormatter,
    TextFormatter,
    convert,
    formatter_for,
)
from mute.routing import Route

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "Event",
    "Format",
    "Route",
    "Logger",
    "init",
    "convert",
    "formatter_for",
    "EventFormatter",
    "JsonFormatter",
    "TextFormatter",
    "MuteError",
    "InvalidFormatError",
    "SerializationError",
    "UnimplementedDestinationError",
]

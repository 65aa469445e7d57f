"""
Event formatters.

Two closed formats, chosen per route:
  - json: {"Message": "...", "Data": {"k": "v"}} for machine parsing
  - text: "message [k: v] [k2: v2]" for humans

convert() is the functional entry point used by Route.deliver().
"""

import json
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any

from mute.errors import InvalidFormatError, SerializationError
from mute.events import Event


class Format(str, Enum):
    """Rendering format. Closed set: anything else is an error."""
    JSON = "json"
    TEXT = "text"

    @classmethod
    def from_value(cls, value: Any) -> "Format":
        """Resolve a member or its exact string value."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        raise InvalidFormatError(value)


class EventFormatter(ABC):
    """Base formatter. Transforms Event → string."""

    @abstractmethod
    def format(self, event: Event) -> str: ...


class JsonFormatter(EventFormatter):
    """
    One compact JSON object per event.
    Example: {"Message":"x","Data":{"k":"v"}}

    Data keys are sorted; an event without data renders "Data":{}.
    """

    def format(self, event: Event) -> str:
        try:
            obj = {
                "Message": event.message,
                "Data": {k: event.data[k] for k in sorted(event.data)},
            }
            return json.dumps(obj, separators=(",", ":"), ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            raise SerializationError(event.message) from exc


class TextFormatter(EventFormatter):
    """
    Message followed by one bracketed segment per data entry.
    Example: Fetched page [status: 200] [url: /index]
    """

    def format(self, event: Event) -> str:
        parts = [event.message]
        for key in sorted(event.data):
            parts.append(f" [{key}: {event.data[key]}]")
        return "".join(parts)


_FORMATTERS: dict[Format, EventFormatter] = {
    Format.JSON: JsonFormatter(),
    Format.TEXT: TextFormatter(),
}


def formatter_for(fmt: Format | str) -> EventFormatter:
    """Formatter instance for a format value. Raises InvalidFormatError."""
    return _FORMATTERS[Format.from_value(fmt)]


def convert(event: Event, fmt: Format | str) -> str:
    """Render an event in the requested format. Pure; never mutates the event."""
    return formatter_for(fmt).format(event)

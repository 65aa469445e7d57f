"""
Event value type.

An Event is one loggable occurrence: a short message plus optional
string key/value context. Created by callers, rendered by routes.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True, eq=False)
class Event:
    """
    Immutable event. Passed to Logger.send(), never stored by it.

    Only the rendered form is retained, inside a route's memory sink.
    The data mapping is copied on construction and exposed read-only.
    """
    message: str = ""
    data: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        data = dict(self.data) if self.data else {}
        object.__setattr__(self, "data", MappingProxyType(data))

    @classmethod
    def create(cls, message: str, /, **data: str) -> "Event":
        """Factory taking context as keyword arguments."""
        return cls(message=message, data=data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return self.message == other.message and dict(self.data) == dict(other.data)

    def __hash__(self) -> int:
        return hash((self.message, frozenset(self.data.items())))

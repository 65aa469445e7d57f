"""
Routes (delivery strategies).

A Route pairs a destination with the format events are rendered in:
  - memory: caller-owned list of rendered strings, appended to in place
  - file:   declared, not implemented; delivering to it halts the caller

Routes are plain values. The memory sink is shared by reference between
the caller and the route, with no locking: concurrent delivery to the
same sink must be synchronized by the caller.
"""

from dataclasses import dataclass
from typing import Any, MutableSequence

from mute.errors import UnimplementedDestinationError
from mute.events import Event
from mute.formatters import Format, convert


@dataclass(frozen=True, eq=False)
class Route:
    """
    A destination plus the format used to render events for it.

    Equality and hashing use the identity of the memory sink, not its contents.
    """
    format: Format | str
    memory: MutableSequence[str] | None = None
    file: str = ""
    name: str | None = None

    def deliver(self, event: Event) -> None:
        """
        Render the event and hand it to every destination on this route.

        Rendering errors propagate unchanged and nothing is appended.
        A non-empty file path raises UnimplementedDestinationError after
        the memory append (if any) has happened.
        """
        message = convert(event, self.format)

        if self.memory is not None:
            self.memory.append(message)

        if self.file:
            raise UnimplementedDestinationError(self.file)

    def _key(self) -> tuple:
        sink = id(self.memory) if self.memory is not None else None
        return (self.format, sink, self.file, self.name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Route):
            return NotImplemented
        return self.memory is other.memory and self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def describe(self) -> dict[str, Any]:
        """Summary for Logger.status()."""
        fmt = self.format.value if isinstance(self.format, Format) else self.format
        return {
            "name": self.name,
            "format": fmt,
            "memory": self.memory is not None,
            "file": self.file or None,
        }

"""
Logger: ordered fan-out of events to routes.

One logger, many routes. Every event goes to every route; routes are
visited in registration order and events in call order. The first
delivery error aborts the rest of the batch and reaches the caller
unchanged. There is no partial-result reporting.
"""

import logging
from typing import Any, Iterator

from mute.events import Event
from mute.routing import Route

_log = logging.getLogger(__name__)


class Logger:
    """
    Fixed, ordered collection of routes.

    Usage:
        lines: list[str] = []
        log = init(Route(Format.TEXT, memory=lines))
        log.send(Event("started", {"service": "ingest"}))
        lines  # ["started [service: ingest]"]
    """

    def __init__(self, *routes: Route) -> None:
        self._routes: tuple[Route, ...] = tuple(routes)

    @property
    def routes(self) -> tuple[Route, ...]:
        return self._routes

    def __len__(self) -> int:
        return len(self._routes)

    def __iter__(self) -> Iterator[Route]:
        return iter(self._routes)

    # ── Delivery ──────────────────────────────────────────────────

    def send(self, *events: Event) -> None:
        """
        Deliver every event to every route.

        Outer loop over routes, inner loop over events, so an earlier route
        has received the whole batch before a later route sees any of it.
        Stops at the first error; events and routes not yet reached are
        skipped.
        """
        if not events or not self._routes:
            return

        _log.debug("sending %d event(s) to %d route(s)", len(events), len(self._routes))
        for index, route in enumerate(self._routes):
            for event in events:
                try:
                    route.deliver(event)
                except Exception as exc:
                    _log.debug("delivery aborted at route %d (%s): %s", index, route.name, exc)
                    raise

    def log(self, message: str, /, **data: str) -> None:
        """Send a single event built from a message and keyword context."""
        self.send(Event.create(message, **data))

    # ── Status ────────────────────────────────────────────────────

    def status(self) -> dict[str, Any]:
        """Describe the configured routes, in delivery order."""
        return {
            "route_count": len(self._routes),
            "routes": [route.describe() for route in self._routes],
        }


def init(*routes: Route) -> Logger:
    """Create a logger. Routes are not validated until delivery."""
    return Logger(*routes)

"""
Ordered, ID-addressable route storage.
"""

import logging
import threading
from collections.abc import Iterator

from bifrost.exceptions import EmptyStore, NotFound, TypeViolation
from bifrost.types import RouteLike

logger = logging.getLogger("bifrost.store")


class RouteStore:
    """
    Keeps routes in insertion order under integer IDs.

    The first route added gets ID 0; every following route gets the next
    integer. IDs are never reused. Iterating yields ``(id, route)`` pairs
    in insertion order and can be restarted at any time.
    """

    def __init__(self) -> None:
        self._routes: dict[int, RouteLike] = {}
        self._next_id: int = 0
        self._lock = threading.Lock()

    def add(self, route: RouteLike) -> int:
        """Store *route* and return its ID."""
        if not isinstance(route, RouteLike):
            raise TypeViolation(route)

        with self._lock:
            route_id = self._next_id
            self._routes[route_id] = route
            self._next_id += 1

        logger.debug("Stored route %r under id %d", route.pattern, route_id)
        return route_id

    def find(self, route_id: int) -> RouteLike:
        if not _is_id(route_id) or route_id not in self._routes:
            raise NotFound(route_id)
        return self._routes[route_id]

    def last_id(self) -> int:
        """ID of the most recently added route."""
        if not self._routes:
            raise EmptyStore()
        return self._next_id - 1

    def ids(self) -> list[int]:
        return list(self._routes)

    def __iter__(self) -> Iterator[tuple[int, RouteLike]]:
        # Snapshot so routes added mid-iteration do not break the loop
        yield from list(self._routes.items())

    def __len__(self) -> int:
        return len(self._routes)

    def __contains__(self, route_id: object) -> bool:
        return _is_id(route_id) and route_id in self._routes


def _is_id(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)

"""
Bifrost exceptions.
Each exception handles one kind of failure and is raised at the call boundary.
"""

from typing import Any


class BifrostException(Exception):
    """Base exception for all Bifrost errors."""

    def __init__(self, message: str = "An error occurred") -> None:
        self.message = message
        super().__init__(self.message)


class InvalidArgument(BifrostException, TypeError):
    """A setter, getter or compiler received a value of the wrong type."""

    @classmethod
    def expected(cls, what: str, kind: str, value: Any) -> "InvalidArgument":
        return cls(f"{what} must be {kind}. {type(value).__name__} given.")


class InvalidPattern(InvalidArgument):
    """A route pattern could not be compiled."""

    def __init__(self, message: str, pattern: Any = None) -> None:
        self.pattern = pattern
        super().__init__(message)


class TypeViolation(BifrostException, TypeError):
    """A value that is not a route was offered to a route store."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(
            f"Route store only accepts routes. {type(value).__name__} given."
        )


class NoCurrentRoute(BifrostException):
    """A group operation needs a route but none has been created yet."""

    def __init__(self, detail: str = "No route has been created yet") -> None:
        super().__init__(detail)


class RoutingError(BifrostException):
    """Routing-time errors."""
    pass


class NoRouteMatched(RoutingError):
    """No registered route satisfies the target and method."""

    def __init__(self, target: str, method: str | None = None) -> None:
        self.target = target
        self.method = method
        super().__init__(f"Unable to match target '{target}' to any patterns")


class NotFound(RoutingError, LookupError):
    """No route is stored under the requested ID."""

    def __init__(self, route_id: Any) -> None:
        self.route_id = route_id
        super().__init__(f"No route stored with id {route_id!r}")


class EmptyStore(RoutingError, LookupError):
    """The route store holds no routes."""

    def __init__(self, detail: str = "Route store is empty") -> None:
        super().__init__(detail)

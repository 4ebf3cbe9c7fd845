"""
Fluent route registration.

A ``RouteGroup`` creates routes through a factory, registers them with a
router and keeps per-group defaults. Defaults and the prefix only apply
to routes created after they are set.
"""

import logging
from collections.abc import Callable, Iterable

from bifrost.exceptions import InvalidArgument, NoCurrentRoute
from bifrost.factory import RouteFactory
from bifrost.router import Router
from bifrost.types import Action, RouteLike

logger = logging.getLogger("bifrost.group")


class RouteGroup:
    """
    Builder for registering routes that share defaults.

    Usage:
        group = RouteGroup(router)
        group.set_prefix("/admin").set_default_methods(["GET"])
        group.route("/users").to_action(list_users)
        group.route("/users/:id", show_user)

        @group.post("/users")
        def create_user(request): ...
    """

    def __init__(self, router: Router, factory: RouteFactory | None = None) -> None:
        self._router = router
        self._factory = factory if factory is not None else RouteFactory()
        self._current_route: RouteLike | None = None
        self._current_id: int | None = None
        self._default_action: Action = None
        self._default_methods: tuple[str, ...] = ()
        self._prefix: str = ""

    @property
    def router(self) -> Router:
        return self._router

    @property
    def current_route(self) -> RouteLike | None:
        return self._current_route

    @property
    def current_id(self) -> int | None:
        return self._current_id

    @property
    def prefix(self) -> str:
        return self._prefix

    def route(
        self,
        pattern: str,
        action: Action = None,
        methods: Iterable[str] | None = None,
    ) -> "RouteGroup":
        """Create and register a route; it becomes the current route."""
        if not isinstance(pattern, str):
            raise InvalidArgument.expected("Route pattern", "a string", pattern)

        if self._prefix:
            pattern = self._prefix + pattern

        # A rejected call must leave the router unchanged
        route = self._factory.make(
            pattern,
            action if action is not None else self._default_action,
            methods if methods else self._default_methods,
        )
        route_id = self._router.add_route(route)

        self._current_route = route
        self._current_id = route_id
        logger.debug("Group created route %d for %s", route_id, pattern)
        return self

    def to_action(self, action: Action) -> "RouteGroup":
        self._require_current("update the action").action = action
        return self

    def from_methods(self, methods: Iterable[str]) -> "RouteGroup":
        self._require_current("update method(s)").methods = methods
        return self

    def from_method(self, method: str) -> "RouteGroup":
        route = self._require_current("update method(s)")
        if not isinstance(method, str):
            raise InvalidArgument.expected("Method", "a string", method)
        route.methods = (method,)
        return self

    def set_default_action(self, action: Action) -> "RouteGroup":
        self._default_action = action
        return self

    def set_default_methods(self, methods: Iterable[str]) -> "RouteGroup":
        if isinstance(methods, (str, bytes)) or not isinstance(methods, Iterable):
            raise InvalidArgument.expected(
                "Default methods", "an iterable of method names", methods
            )
        self._default_methods = tuple(methods)
        return self

    def set_prefix(self, prefix: str) -> "RouteGroup":
        if not isinstance(prefix, str):
            raise InvalidArgument.expected("Prefix", "a string", prefix)
        self._prefix = prefix
        return self

    def create_group(self) -> "RouteGroup":
        """A new, default-free group registering into the same router."""
        return type(self)(self._router, self._factory)

    def _require_current(self, operation: str) -> RouteLike:
        if self._current_route is None:
            raise NoCurrentRoute(
                f"Unable to {operation} because no route has been created yet."
            )
        return self._current_route

    # ------------------------------------------------------------------
    # Decorator shortcuts
    # ------------------------------------------------------------------

    def handle(
        self,
        pattern: str,
        methods: list[str] | None = None,
    ) -> Callable[[Callable], Callable]:
        """Decorator registering the decorated callable as a route's action."""
        def decorator(handler: Callable) -> Callable:
            self.route(pattern, handler, methods)
            return handler
        return decorator

    def get(self, pattern: str) -> Callable[[Callable], Callable]:
        """Decorator for GET routes."""
        return self.handle(pattern, methods=["GET"])

    def post(self, pattern: str) -> Callable[[Callable], Callable]:
        """Decorator for POST routes."""
        return self.handle(pattern, methods=["POST"])

    def put(self, pattern: str) -> Callable[[Callable], Callable]:
        """Decorator for PUT routes."""
        return self.handle(pattern, methods=["PUT"])

    def patch(self, pattern: str) -> Callable[[Callable], Callable]:
        """Decorator for PATCH routes."""
        return self.handle(pattern, methods=["PATCH"])

    def delete(self, pattern: str) -> Callable[[Callable], Callable]:
        """Decorator for DELETE routes."""
        return self.handle(pattern, methods=["DELETE"])

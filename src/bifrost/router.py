"""
Routing system for Bifrost.
Resolves a request target and method to a registered route.

Matching is a linear scan over the route store in insertion order: the
first route that answers the method and whose pattern fully matches the
target wins, and no later route is examined.
"""

import logging
from dataclasses import dataclass
from typing import Any

from bifrost.exceptions import InvalidArgument, InvalidPattern, NoRouteMatched
from bifrost.params import Parameters
from bifrost.patterns import PatternCompiler
from bifrost.store import RouteStore
from bifrost.types import RouteLike

logger = logging.getLogger("bifrost.routing")


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Result of a successful match: the route plus this request's parameters."""

    route: RouteLike
    route_id: int
    target: str
    method: str
    parameters: Parameters

    @property
    def named_parameters(self) -> dict[str, Any]:
        return self.parameters.named

    def get_parameter(self, index: int) -> Any:
        return self.parameters.get(index)

    def get_named_parameter(self, name: str) -> Any:
        return self.parameters.get_named(name)


class Router:
    """
    Request router.

    Usage:
        router = Router()
        router.add_route(Route("/books/:id", show_book, ["GET"]))

        result = router.match("/books/42", "GET")
        result.route.action       # show_book
        result.get_named_parameter("id")   # "42"

    Args:
        store: Route store to register into. A fresh one by default;
            several routers or groups may share one store.
        compiler: Pattern compiler used while matching.
    """

    def __init__(
        self,
        store: RouteStore | None = None,
        compiler: PatternCompiler | None = None,
    ) -> None:
        self._store = store if store is not None else RouteStore()
        self._compiler = compiler if compiler is not None else PatternCompiler()

    @property
    def store(self) -> RouteStore:
        return self._store

    @property
    def compiler(self) -> PatternCompiler:
        return self._compiler

    @property
    def routes(self) -> dict[int, RouteLike]:
        """All registered routes by ID, in insertion order."""
        return dict(self._store)

    def add_route(self, route: RouteLike) -> int:
        """
        Register *route* and return its ID.

        Raises ``InvalidPattern`` if the route's pattern does not compile;
        nothing is stored in that case.
        """
        if isinstance(route, RouteLike):
            self._compiler.compile(route.pattern)
        route_id = self._store.add(route)
        logger.debug(
            "Registered route %d: %s %s",
            route_id,
            ",".join(route.methods) or "-",
            route.pattern,
        )
        return route_id

    def get_route(self, route_id: int) -> RouteLike:
        return self._store.find(route_id)

    def match(self, target: str, method: str = "GET") -> MatchResult:
        """
        Find the first route answering *method* whose pattern matches *target*.

        The matched route itself is left untouched; parameters for this
        request are carried by the returned ``MatchResult``.
        Raises ``NoRouteMatched`` if no route matches.
        """
        if not isinstance(target, str):
            raise InvalidArgument.expected("Target", "a string", target)
        if not isinstance(method, str):
            raise InvalidArgument.expected("Method", "a string", method)

        method = method.upper()

        for route_id, route in self._store:
            if not _accepts(route, method):
                continue

            try:
                compiled = self._compiler.compile(route.pattern)
            except InvalidPattern:
                logger.warning(
                    "Skipping route %d: pattern %r does not compile",
                    route_id,
                    route.pattern,
                )
                continue
            if not compiled.matches(target):
                continue

            parameters = Parameters.from_input(compiled.bind(target))
            logger.debug(
                "Matched %s %s to route %d (%s)",
                method,
                target,
                route_id,
                route.pattern,
            )
            return MatchResult(
                route=route,
                route_id=route_id,
                target=target,
                method=method,
                parameters=parameters,
            )

        logger.debug("No route matched %s %s", method, target)
        raise NoRouteMatched(target, method)

    def match_route(self, target: str, method: str = "GET") -> RouteLike:
        """
        Match like ``match`` but write the parameters onto the route itself.

        The route object is shared by every request that resolves to it, so
        only use this from a single thread.
        """
        result = self.match(target, method)
        result.route.set_parameters(result.parameters)
        return result.route

    def __len__(self) -> int:
        return len(self._store)


def _accepts(route: RouteLike, method: str) -> bool:
    return any(
        isinstance(allowed, str) and allowed.upper() == method
        for allowed in route.methods
    )

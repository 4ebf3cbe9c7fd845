"""
Route factory.
"""

from collections.abc import Iterable

from bifrost.route import Route
from bifrost.types import Action, ParameterInput


class RouteFactory:
    """Creates routes for a ``RouteGroup``. Subclass to build custom route types."""

    def make(
        self,
        pattern: str,
        action: Action = None,
        methods: Iterable[str] = (),
        parameters: ParameterInput = (),
    ) -> Route:
        return Route(pattern, action, methods, parameters)

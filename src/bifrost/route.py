"""
Route definition.

A route pairs a pattern with the HTTP methods it answers, an opaque
action and a set of parameters. It does no parsing of its own: the
pattern is compiled by the router when matching.
"""

from collections.abc import Iterable
from typing import Any

from bifrost.exceptions import InvalidArgument
from bifrost.params import Parameters
from bifrost.types import Action, ParameterInput


class Route:
    """
    A single registered route.

    Usage:
        route = Route("/books/:id", "BooksController@show", ["GET"])
        route.set_parameters({"id": "42"})
        route.get_named_parameter("id")   # "42"
        route.get_parameter(0)            # "42"
    """

    __slots__ = ("_pattern", "_action", "_methods", "_parameters")

    def __init__(
        self,
        pattern: str,
        action: Action = None,
        methods: Iterable[str] = (),
        parameters: ParameterInput = (),
    ) -> None:
        self.pattern = pattern
        self.action = action
        self.methods = methods
        self.set_parameters(parameters)

    @property
    def pattern(self) -> str:
        return self._pattern

    @pattern.setter
    def pattern(self, pattern: str) -> None:
        if not isinstance(pattern, str):
            raise InvalidArgument.expected("Route pattern", "a string", pattern)
        self._pattern = pattern

    @property
    def action(self) -> Action:
        return self._action

    @action.setter
    def action(self, action: Action) -> None:
        self._action = action

    @property
    def methods(self) -> tuple[str, ...]:
        return self._methods

    @methods.setter
    def methods(self, methods: Iterable[str]) -> None:
        if isinstance(methods, (str, bytes)) or not isinstance(methods, Iterable):
            raise InvalidArgument.expected(
                "Route methods", "an iterable of method names", methods
            )
        self._methods = tuple(methods)

    def set_pattern(self, pattern: str) -> "Route":
        self.pattern = pattern
        return self

    def set_action(self, action: Action) -> "Route":
        self.action = action
        return self

    def set_methods(self, methods: Iterable[str]) -> "Route":
        self.methods = methods
        return self

    # ------------------------------------------------------------------
    # Parameters
    # ------------------------------------------------------------------

    def set_parameters(self, parameters: ParameterInput) -> "Route":
        """
        Replace all parameters.

        Values are re-indexed from 0 in input order; string keys also
        register the value by name.
        """
        self._parameters = Parameters.from_input(parameters)
        return self

    @property
    def parameters(self) -> tuple[Any, ...]:
        return self._parameters.positional

    @property
    def named_parameters(self) -> dict[str, Any]:
        return self._parameters.named

    def get_parameter(self, index: int) -> Any:
        """Positional parameter at *index*, or ``None``."""
        return self._parameters.get(index)

    def get_named_parameter(self, name: str) -> Any:
        """Parameter registered under *name*, or ``None``."""
        return self._parameters.get_named(name)

    def __repr__(self) -> str:
        return (
            f"Route(pattern={self._pattern!r}, action={self._action!r}, "
            f"methods={list(self._methods)!r})"
        )

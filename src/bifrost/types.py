"""
Type definitions for Bifrost.
"""

from collections.abc import Iterable, Mapping
from typing import Any, Protocol, TypeAlias, runtime_checkable

# Whatever the caller wants to run for a route: a callable, a handler name, ...
Action: TypeAlias = Any

# Segment index -> parameter name, as produced by the pattern compiler
ParameterMap: TypeAlias = Mapping[int, str]

# Target segments keyed by parameter name, or by index when unnamed
BoundSegments: TypeAlias = dict[int | str, str]

ParameterInput: TypeAlias = Mapping[int | str, Any] | Iterable[Any]


@runtime_checkable
class RouteLike(Protocol):
    """Protocol for objects a route store accepts."""

    pattern: str
    methods: tuple[str, ...]
    action: Action

    @property
    def parameters(self) -> tuple[Any, ...]: ...

    @property
    def named_parameters(self) -> dict[str, Any]: ...

    def set_parameters(self, parameters: ParameterInput) -> "RouteLike": ...

    def get_parameter(self, index: int) -> Any: ...

    def get_named_parameter(self, name: str) -> Any: ...

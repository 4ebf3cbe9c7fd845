"""
Bifrost - ordered path routing

Resolves a request path and HTTP method to the first registered route whose
pattern matches, extracting positional and named segment values.
"""

from bifrost.exceptions import (
    BifrostException,
    EmptyStore,
    InvalidArgument,
    InvalidPattern,
    NoCurrentRoute,
    NoRouteMatched,
    NotFound,
    RoutingError,
    TypeViolation,
)
from bifrost.factory import RouteFactory
from bifrost.group import RouteGroup
from bifrost.params import Parameters
from bifrost.patterns import CompiledPattern, PatternCompiler, compile_pattern
from bifrost.route import Route
from bifrost.router import MatchResult, Router
from bifrost.store import RouteStore
from bifrost.types import RouteLike

__version__ = "0.1.0"
__all__ = [
    "Router",
    "MatchResult",
    "Route",
    "RouteLike",
    "RouteStore",
    "RouteFactory",
    "RouteGroup",
    "Parameters",
    "PatternCompiler",
    "CompiledPattern",
    "compile_pattern",
    "BifrostException",
    "InvalidArgument",
    "InvalidPattern",
    "TypeViolation",
    "NoCurrentRoute",
    "RoutingError",
    "NoRouteMatched",
    "NotFound",
    "EmptyStore",
]

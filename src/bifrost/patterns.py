"""
Route pattern compiler.

Turns a human-authored path pattern such as ``/books/[num]/:slug`` into an
anchored, case-insensitive regular expression plus a map of which target
segments carry a named parameter.

Pattern grammar::

    pattern      := "/" | "/" segment ("/" segment)*
    segment      := literal | rule-token+ | <text> ":" identifier
    identifier   := letter (letter | digit)*
    rule-token   := "[alpha]" | "[num]" | "[alnum]" | "[slug]"

A named marker is always the suffix of its segment. Segments emptied by
removing the marker match anything (``.+``).
"""

import functools
import re
from collections.abc import Iterator
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from bifrost.exceptions import InvalidArgument, InvalidPattern
from bifrost.types import BoundSegments, ParameterMap


# Rule name -> shorthand token used inside patterns
RULE_TOKENS: dict[str, str] = {
    "alphabetic": "[alpha]",
    "numeric": "[num]",
    "alphanumeric": "[alnum]",
    "slug": "[slug]",
}

# Rule name -> regular expression fragment the token stands for
RULE_EXPRESSIONS: dict[str, str] = {
    "alphabetic": r"[a-zA-Z]+",
    "numeric": r"[0-9]+",
    "alphanumeric": r"[a-zA-Z0-9]+",
    "slug": r"[a-zA-Z0-9]+[a-zA-Z0-9\-]+",
}

# Fallback for segments that consist of a named marker only
CATCH_ALL: str = ".+"

NAMED_MARKER_PATTERN: re.Pattern[str] = re.compile(r":([A-Za-z][A-Za-z0-9]*)\Z")


def translate_rules(segment: str) -> str:
    """Replace every known rule token in *segment* with its expression."""
    for name, token in RULE_TOKENS.items():
        segment = segment.replace(token, RULE_EXPRESSIONS[name])
    return segment


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """
    Result of compiling a route pattern.

    Unpacks as ``(expression, parameter_map)``.
    """

    pattern: str
    expression: str
    parameter_map: ParameterMap
    regex: re.Pattern[str]

    def __iter__(self) -> Iterator[Any]:
        yield self.expression
        yield self.parameter_map

    def matches(self, target: str) -> bool:
        """Full, case-insensitive match of *target* against the pattern."""
        return self.regex.fullmatch(target) is not None

    def bind(self, target: str) -> BoundSegments:
        """
        Key each segment of *target* by its parameter name, or by its
        index when the pattern names no parameter there.
        """
        path = target[1:] if target.startswith("/") else target
        if not path:
            return {}

        bound: BoundSegments = {}
        for index, value in enumerate(path.split("/")):
            bound[self.parameter_map.get(index, index)] = value
        return bound


def compile_pattern(pattern: str) -> CompiledPattern:
    """
    Compile *pattern* into a matchable expression and parameter map.

    Raises ``InvalidPattern`` if *pattern* is not a string or the
    resulting expression is not a valid regular expression.
    """
    if not isinstance(pattern, str):
        raise InvalidPattern(
            f"Pattern to parse must be a string. {type(pattern).__name__} given.",
            pattern,
        )
    return _compile(pattern)


def _compile(pattern: str) -> CompiledPattern:
    parameter_map: dict[int, str] = {}

    if pattern == "/":
        expression = pattern
    else:
        segments = (pattern[1:] if pattern.startswith("/") else pattern).split("/")
        for index, segment in enumerate(segments):
            marker = NAMED_MARKER_PATTERN.search(segment)
            if marker:
                parameter_map[index] = marker.group(1)
                segment = segment[: marker.start()]

            segments[index] = translate_rules(segment) if segment else CATCH_ALL

        expression = "/" + "/".join(segments)

    try:
        regex = re.compile(expression, re.IGNORECASE)
    except re.error as exc:
        raise InvalidPattern(
            f"Pattern '{pattern}' is not a valid expression: {exc}", pattern
        ) from exc

    return CompiledPattern(
        pattern=pattern,
        expression=expression,
        parameter_map=MappingProxyType(parameter_map),
        regex=regex,
    )


class PatternCompiler:
    """
    Compiles route patterns, remembering the most recent results.

    Patterns are plain strings, so caching by pattern text can never hand
    out a matcher for a pattern a route no longer has.

    Args:
        cache_size: Number of compiled patterns kept. ``0`` disables the
            cache, ``None`` keeps everything.
    """

    def __init__(self, cache_size: int | None = 256) -> None:
        if cache_size is not None and (
            not isinstance(cache_size, int) or cache_size < 0
        ):
            raise InvalidArgument.expected(
                "cache_size", "a non-negative integer or None", cache_size
            )
        self.cache_size = cache_size
        self._compile = functools.lru_cache(maxsize=cache_size)(_compile)

    def compile(self, pattern: str) -> CompiledPattern:
        """Compile *pattern*, reusing a cached result when there is one."""
        if not isinstance(pattern, str):
            # Unhashable input would otherwise fail inside the cache
            return compile_pattern(pattern)
        return self._compile(pattern)

    def cache_info(self) -> Any:
        """Hit, miss and size statistics of the compiled-pattern cache."""
        return self._compile.cache_info()

    def cache_clear(self) -> None:
        """Forget every cached compiled pattern."""
        self._compile.cache_clear()

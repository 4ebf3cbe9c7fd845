"""
Route parameter storage.

Values are kept once, in order. Names point at positions in that sequence,
so the positional and named views always agree.
"""

from collections.abc import Iterator, Mapping
from typing import Any

from bifrost.exceptions import InvalidArgument
from bifrost.types import ParameterInput


class Parameters:
    """
    Ordered parameter values with an optional name for each position.

    Every input value receives the next index starting at 0, whatever key
    it arrived under. String keys additionally make the value reachable
    by name.

        >>> params = Parameters.from_input({0: "show", 1: "books", "id": 5})
        >>> params.positional
        ('show', 'books', 5)
        >>> params.get_named("id")
        5
    """

    __slots__ = ("_values", "_names")

    def __init__(
        self,
        values: tuple[Any, ...] = (),
        names: Mapping[str, int] | None = None,
    ) -> None:
        self._values = tuple(values)
        self._names: dict[str, int] = dict(names or {})
        for name, index in self._names.items():
            if not 0 <= index < len(self._values):
                raise InvalidArgument(
                    f"Named parameter '{name}' points outside the parameters."
                )

    @classmethod
    def from_input(cls, parameters: ParameterInput) -> "Parameters":
        """Build storage from a mapping, another ``Parameters`` or a plain iterable."""
        if isinstance(parameters, Parameters):
            return parameters
        if isinstance(parameters, (str, bytes)):
            raise InvalidArgument.expected(
                "Parameters", "a mapping or an iterable of values", parameters
            )
        if isinstance(parameters, Mapping):
            values: list[Any] = []
            names: dict[str, int] = {}
            for key, value in parameters.items():
                if isinstance(key, str):
                    names[key] = len(values)
                elif not isinstance(key, int) or isinstance(key, bool):
                    raise InvalidArgument.expected(
                        "Parameter key", "an integer or a string", key
                    )
                values.append(value)
            return cls(tuple(values), names)
        try:
            return cls(tuple(parameters))
        except TypeError:
            raise InvalidArgument.expected(
                "Parameters", "a mapping or an iterable of values", parameters
            ) from None

    @property
    def positional(self) -> tuple[Any, ...]:
        return self._values

    @property
    def named(self) -> dict[str, Any]:
        return {name: self._values[index] for name, index in self._names.items()}

    def get(self, index: int, default: Any = None) -> Any:
        """Value at *index*, or *default* when there is none."""
        if not isinstance(index, int) or isinstance(index, bool):
            raise InvalidArgument.expected(
                "Parameter key", "an integer", index
            )
        if 0 <= index < len(self._values):
            return self._values[index]
        return default

    def get_named(self, name: str, default: Any = None) -> Any:
        """Value registered under *name*, or *default* when there is none."""
        if not isinstance(name, str):
            raise InvalidArgument.expected(
                "Named parameter key", "a string", name
            )
        index = self._names.get(name)
        if index is None:
            return default
        return self._values[index]

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Parameters):
            return NotImplemented
        return self._values == other._values and self._names == other._names

    def __hash__(self) -> int:
        # Unhashable values make the whole set unhashable
        return hash((self._values, frozenset(self._names.items())))

    def __repr__(self) -> str:
        return f"Parameters(positional={self._values!r}, named={self.named!r})"

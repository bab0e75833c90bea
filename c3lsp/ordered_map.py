"""A string-keyed mapping that remembers insertion order."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Generic, TypeVar

T = TypeVar("T")


class OrderedMap(Mapping, Generic[T]):
    """Mapping from strings to values, iterated in first-insertion order.

    Overwriting an existing key keeps its original position.
    """

    def __init__(self) -> None:
        self._values: dict[str, T] = {}

    def __setitem__(self, key: str, value: T) -> None:
        self._values[key] = value

    def __getitem__(self, key: str) -> T:
        return self._values[key]

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def keys(self) -> list[str]:  # type: ignore[override]
        """Return the keys in insertion order."""
        return list(self._values)

    def values(self) -> list[T]:  # type: ignore[override]
        """Return the values in key insertion order."""
        return list(self._values.values())

    def __repr__(self) -> str:
        return f"OrderedMap({self._values!r})"
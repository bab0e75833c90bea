"""Result of a symbol search, with the context needed for completions."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Optional


class DistinctOrigin(IntEnum):
    """Whether a result was reached through a distinct type, and how."""

    NOT_FROM_DISTINCT = 0
    NON_INLINE_DISTINCT = 1
    INLINE_DISTINCT = 2


@dataclass
class SearchResult:
    """Outcome of a search.

    ``members_readable`` is True when a type was searched for and found, so
    its members are accessible; False when a variable was resolved into its
    type, so only the type's methods apply. ``from_distinct`` records
    whether the result came through a distinct, which limits what members
    and methods are accessible.
    """

    members_readable: bool = True
    from_distinct: DistinctOrigin = DistinctOrigin.NOT_FROM_DISTINCT
    result: Optional[Any] = None
    traversed_modules: set[str] = field(default_factory=set)

    @classmethod
    def from_tracked_modules(cls, tracked_modules: Iterable[str]) -> "SearchResult":
        """Create an empty result that has already traversed ``tracked_modules``."""
        return cls(traversed_modules=set(tracked_modules))

    def is_some(self) -> bool:
        return self.result is not None

    def is_none(self) -> bool:
        return self.result is None

    def get(self) -> Any:
        """Return the found symbol, raising LookupError if there is none."""
        if self.result is None:
            raise LookupError("search result is empty")
        return self.result

    def set(self, symbol: Any) -> None:
        self.result = symbol

    def track_traversed_module(self, module: str) -> None:
        self.traversed_modules.add(module)
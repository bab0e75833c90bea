"""Completion items offered to the editor, and helpers to build and order them."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from c3lsp.completion_text import Position
from c3lsp.keywords import keywords_with_prefix


class CompletionItemKind(IntEnum):
    """Kinds of completion items, numbered as the protocol numbers them."""

    TEXT = 1
    METHOD = 2
    FUNCTION = 3
    CONSTRUCTOR = 4
    FIELD = 5
    VARIABLE = 6
    CLASS = 7
    INTERFACE = 8
    MODULE = 9
    PROPERTY = 10
    UNIT = 11
    VALUE = 12
    ENUM = 13
    KEYWORD = 14
    SNIPPET = 15
    COLOR = 16
    FILE = 17
    REFERENCE = 18
    FOLDER = 19
    ENUM_MEMBER = 20
    CONSTANT = 21
    STRUCT = 22
    EVENT = 23
    OPERATOR = 24
    TYPE_PARAMETER = 25


@dataclass(frozen=True)
class CompletionItem:
    """A single suggestion.

    ``documentation`` holds markdown text, or None when there is nothing
    worth showing. ``new_text`` and ``edit_range`` describe a text edit that
    replaces ``edit_range`` (start, end) with ``new_text`` when accepted.
    """

    label: str
    kind: CompletionItemKind
    detail: Optional[str] = None
    documentation: Optional[str] = None
    new_text: Optional[str] = None
    edit_range: Optional[tuple[Position, Position]] = None

    def __post_init__(self) -> None:
        if self.detail == "":
            object.__setattr__(self, "detail", None)
        if self.documentation == "":
            object.__setattr__(self, "documentation", None)
        if (self.new_text is None) != (self.edit_range is None):
            raise ValueError("a text edit needs both new_text and edit_range")


def keyword_completions(prefix: str) -> list[CompletionItem]:
    """Return a keyword suggestion for every keyword starting with ``prefix``."""
    return [
        CompletionItem(label=keyword, kind=CompletionItemKind.KEYWORD)
        for keyword in keywords_with_prefix(prefix)
    ]


def filter_by_prefix(
    items: Iterable[CompletionItem], prefix: str
) -> list[CompletionItem]:
    """Keep the items whose label starts with ``prefix``."""
    return [item for item in items if item.label.startswith(prefix)]


def sort_completion_items(items: Iterable[CompletionItem]) -> list[CompletionItem]:
    """Return the items ordered by label, ignoring case."""
    return sorted(items, key=lambda item: item.label.lower())
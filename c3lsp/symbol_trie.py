"""Prefix tree of symbols keyed by their fully qualified names."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Optional, Protocol

_SEPARATORS = re.compile(r"[:.]")


class Indexable(Protocol):
    """A symbol that can be stored in a :class:`Trie`."""

    @property
    def fqn(self) -> str: ...

    @property
    def document_uri(self) -> str: ...


def split_fqn(fqn: str) -> list[str]:
    """Split a qualified name on ``:`` and ``.``, dropping empty parts."""
    return [part for part in _SEPARATORS.split(fqn) if part]


@dataclass
class TrieNode:
    """A node of the trie, optionally holding a symbol."""

    name: str
    children: dict[str, "TrieNode"] = field(default_factory=dict)
    symbol: Optional[Indexable] = None

    def iter_symbols(self, include_self: bool = True) -> Iterator[Indexable]:
        """Yield the symbols of this node (optionally) and all descendants."""
        if include_self and self.symbol is not None:
            yield self.symbol
        for child in self.children.values():
            yield from child.iter_symbols(True)


class Trie:
    """Stores symbols by the parts of their qualified name.

    Accepted queries:

    - ``mod::path``    the symbol at that path
    - ``mod::path.``   every symbol below that path
    - ``mod::path.t*`` every symbol below children of path starting with ``t``
    """

    def __init__(self) -> None:
        self.root = TrieNode("root")

    def insert(self, symbol: Indexable) -> None:
        """Store ``symbol`` at the path given by its qualified name."""
        node = self.root
        for part in split_fqn(symbol.fqn):
            node = node.children.setdefault(part, TrieNode(part))
        node.symbol = symbol

    def search(self, query: str) -> list[Indexable]:
        """Return the symbols matching ``query``."""
        if query.endswith("."):
            node = self._search_exact(query[:-1])
            if node is None:
                return []
            return list(node.iter_symbols(include_self=False))

        if "*" in query:
            parts = split_fqn(query)
            prefix = parts[-1] if parts else ""
            node = self._search_exact(query.removesuffix(prefix))
            if node is None:
                return []
            prefix = prefix.removesuffix("*")
            return [
                symbol
                for key, child in node.children.items()
                if key.startswith(prefix)
                for symbol in child.iter_symbols(True)
            ]

        node = self._search_exact(query)
        if node is not None and node.symbol is not None:
            return [node.symbol]
        return []

    def clear_by_tag(self, tag: str) -> None:
        """Remove every symbol whose document is ``tag``, pruning empty nodes."""
        self._clear(self.root, tag)

    def _search_exact(self, query: str) -> Optional[TrieNode]:
        node = self.root
        for part in split_fqn(query):
            child = node.children.get(part)
            if child is None:
                return None
            node = child
        return node

    def _clear(self, node: TrieNode, tag: str) -> bool:
        for key, child in list(node.children.items()):
            if self._clear(child, tag):
                del node.children[key]

        if node.symbol is not None and node.symbol.document_uri == tag:
            node.symbol = None

        return node.symbol is None and not node.children
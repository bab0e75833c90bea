"""Building blocks for a C3 language server: keywords, symbol trie, completion text helpers, diagnostics parsing and type sizes."""

__version__ = "0.1.0"
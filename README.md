# c3lsp

Pure-Python building blocks for a language server for the C3 programming
language. The package has no runtime dependencies.

## Modules

### `c3lsp.keywords`

- `KEYWORDS`: a frozenset of every C3 keyword. It includes the
  `$`-prefixed compile-time keywords.
- `is_language_keyword(symbol)`: returns True if `symbol` is a keyword.
- `keywords_with_prefix(prefix)`: returns the keywords that start with
  `prefix`, in sorted order.

### `c3lsp.ordered_map`

`OrderedMap` is a read-only `Mapping` from strings to values that also
supports item assignment. Keys are iterated in the order they were first
inserted, and overwriting a key does not move it. `keys()` and `values()`
return lists.

### `c3lsp.dedent`

`dedent(text)` removes the leading spaces and tabs that all lines share.
Lines that hold only whitespace are emptied first. If the first line has no
indent, it is ignored when the margin is worked out.

### `c3lsp.symbol_trie`

- `split_fqn(fqn)`: splits a qualified name on `:` and `.` and drops empty
  parts.
- `TrieNode`: holds a name, its children and an optional symbol.
- `Trie`: stores any object that has `fqn` and `document_uri` attributes.
  - `insert(symbol)` adds a symbol.
  - `search(query)` accepts three kinds of query:
    - `app::Foo` returns the symbol at that path.
    - `app::Foo.` returns every symbol below that path.
    - `app::Foo.t*` returns the symbols under the children of `app::Foo`
      whose names start with `t`.
  - `clear_by_tag(tag)` removes every symbol whose `document_uri` equals
    `tag`, then prunes nodes that are left empty.

### `c3lsp.search_result`

`SearchResult` records the outcome of a symbol search:

- the symbol that was found;
- `members_readable`;
- `from_distinct`, a `DistinctOrigin` whose values are
  `NOT_FROM_DISTINCT`, `NON_INLINE_DISTINCT` and `INLINE_DISTINCT`;
- the set of modules that were traversed.

`get()` raises `LookupError` when nothing was found. The classmethod
`from_tracked_modules(modules)` creates an empty result that is already
marked as having traversed those modules.

### `c3lsp.completion_text`

`Position(line, character)` is zero-based on both axes.

- `index_in(text)` returns the offset of the position in `text`. It raises
  `IndexError` when the text has too few lines.
- `rewind_character()` moves the position one character to the left. It
  raises `ValueError` at column 0.

The helpers below look at the run of identifier, `.` and `:` characters
that ends just before the cursor:

- `is_completing_a_module_path(text, cursor)` returns `(verdict, sentence)`.
  The verdict is True when the sentence contains no `.`.
- `is_completing_a_chain(text, cursor)` returns `(verdict, position)`. When
  the sentence contains `.` or `:`, it returns True and the position just
  behind the previous component. Otherwise it returns `(False, None)`.
- `extract_explicit_module_path(s)` returns the text before the last `::`
  that follows the last `.`, or None if there is no such `::`.
- `count_written_arguments(text, start)` counts the commas after `start`.
  It returns None if a `)` follows, because the argument list is then
  already closed.

### `c3lsp.completion_items`

- `CompletionItemKind`: an `IntEnum` numbered as the protocol numbers
  completion kinds.
- `CompletionItem`: a frozen record with these fields:
  - `label`
  - `kind`
  - `detail`
  - `documentation`
  - `new_text`
  - `edit_range`

  An empty `detail` or `documentation` becomes None. Giving only one of
  `new_text` and `edit_range` raises `ValueError`.
- `keyword_completions(prefix)`: returns a `KEYWORD` item for each keyword
  that starts with `prefix`.
- `filter_by_prefix(items, prefix)`: keeps the items whose label starts
  with `prefix`.
- `sort_completion_items(items)`: orders items by label, ignoring case.

### `c3lsp.diagnostics`

`extract_error_diagnostics(output)` reads compiler output whose error lines
have the form `Error|file|line|column|message`, with one-based line and
column numbers.

- Only the first line that starts with `Error` is considered.
- That line becomes an `ErrorInfo(file, Diagnostic)`. The diagnostic has
  zero-based positions, its end is at character 99 of the same line, its
  severity is `SEVERITY_ERROR` and its source is `DIAGNOSTIC_SOURCE`.
- The function returns `(errors, disabled)`. `disabled` is True when an
  `Error` line does not have exactly five fields, which is the output
  format of an older compiler.

`has_diagnostic_for_file(file, errors)` tells whether any of the errors
concerns `file`.

### `c3lsp.type_size`

- `SymbolCategory`: the kinds of symbol that a size can be asked for.
- `language_type_size(type_name, pointer_size=None)`: returns the size in
  bytes of a built-in type.
  - It returns 0 for unknown types and for `isz`/`usz`.
  - `iptr` and `uptr` take `pointer_size`. If that is not given, they take
    the size of a pointer on this machine.
- `has_size(category)`: True for every category except `UNKNOWN`.
- `describe_size(category, type_name, is_pointer, is_base_type,
  pointer_size=None)`: returns the size as text, or `"?"`. Only variables
  and struct members are sized.

## Example

```python
from c3lsp.keywords import keywords_with_prefix
from c3lsp.completion_text import Position, count_written_arguments, extract_explicit_module_path

keywords_with_prefix("fo")                       # ['for', 'foreach', 'foreach_r']
extract_explicit_module_path("aModule::A")       # 'aModule'
count_written_arguments("f(a, b", Position(0, 2))  # 1
```

## What this package does not do

This is a library of parts. It does not provide:

- a running language server or a command to start one;
- a protocol transport over stdio;
- a C3 parser or a symbol index built from source files;
- any way of invoking the compiler.

Diagnostics are parsed from compiler output that you supply.

## Running the tests

```
pip install -e .[test]
pytest
```
"""Inspection of source text around the cursor for completion and signature help."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

_CHAIN_PUNCTUATION = frozenset(".:")


@dataclass(frozen=True)
class Position:
    """A zero-based line and character offset in a document."""

    line: int
    character: int

    def index_in(self, text: str) -> int:
        """Return the offset of this position within ``text``.

        Raises IndexError if ``text`` has fewer lines than the position needs.
        """
        lines = text.split("\n")
        if self.line >= len(lines):
            raise IndexError(
                f"line {self.line} is beyond the {len(lines)} lines of the text"
            )
        return sum(len(line) + 1 for line in lines[: self.line]) + self.character

    def rewind_character(self) -> "Position":
        """Return the position one character to the left on the same line."""
        if self.character == 0:
            raise ValueError("cannot rewind before the start of a line")
        return Position(self.line, self.character - 1)


def _is_identifier_char(char: str) -> bool:
    return char == "_" or (char.isascii() and char.isalnum())


def _sentence_before(text: str, cursor: Position) -> tuple[str, Position]:
    """Return the run of identifier and separator characters ending at the cursor.

    The cursor sits just after the last typed character, so the position is
    first moved back one place. The (possibly rewound) position is returned
    alongside the sentence.
    """
    position = cursor.rewind_character() if cursor.character > 0 else cursor
    end = position.index_in(text)
    if end < 0:
        return "", position
    if end >= len(text):
        raise IndexError(f"offset {end} is beyond the end of the text")

    start = end
    while start > 0:
        previous = text[start - 1]
        if not (_is_identifier_char(previous) or previous in _CHAIN_PUNCTUATION):
            break
        start -= 1

    current = text[end]
    if not (_is_identifier_char(current) or current in _CHAIN_PUNCTUATION):
        start = end
    return text[start : end + 1], position


def is_completing_a_module_path(text: str, cursor: Position) -> tuple[bool, str]:
    """Tell whether the text being typed may be a module path.

    Returns the verdict together with the sentence that was inspected. A
    sentence without any ``.`` qualifies; a ``.`` means a member chain.
    """
    sentence, _ = _sentence_before(text, cursor)
    return "." not in sentence, sentence


def is_completing_a_chain(text: str, cursor: Position) -> tuple[bool, Optional[Position]]:
    """Tell whether the text being typed is a chain such as ``aStruct.aMember``.

    When it is, the position of the last character of the previous component
    is returned as well; otherwise the position is None.
    """
    sentence, position = _sentence_before(text, cursor)
    if "." not in sentence and ":" not in sentence:
        return False, None

    last_index = len(sentence) - 1
    if "." in sentence:
        last_index = sentence.rfind(".")
    elif "::" in sentence:
        last_index = sentence.rfind("::")

    behind = len(sentence) - last_index
    return True, Position(position.line, cursor.character - behind - 1)


def extract_explicit_module_path(possible_module_path: str) -> Optional[str]:
    """Return the module path written before the last ``::``, if any.

    Only the part after the last ``.`` is considered.
    """
    segment_start = possible_module_path.rfind(".") + 1
    separator = possible_module_path.rfind("::", segment_start)
    if separator == -1:
        return None
    return possible_module_path[:separator]


def count_written_arguments(text: str, start: Position) -> Optional[int]:
    """Count the commas written after ``start``.

    Returns None when a closing parenthesis follows, as the argument list is
    then already closed.
    """
    rest = text[start.index_in(text) :]
    if ")" in rest:
        return None
    return rest.count(",")
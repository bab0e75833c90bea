"""Removal of common leading whitespace from multi-line text."""

from __future__ import annotations

import re

_WHITESPACE_ONLY = re.compile(r"^[ \t]+$", re.MULTILINE)
_LEADING_WHITESPACE = re.compile(r"(^[ \t]*)(?:[^ \t\n])", re.MULTILINE)


def dedent(text: str) -> str:
    """Remove whitespace common to the start of every line of ``text``.

    Whitespace-only lines are emptied first. An unindented first line is
    ignored when working out the margin, so text whose body is indented
    below a flush first line is still dedented.
    """
    text = _WHITESPACE_ONLY.sub("", text)
    indents = _LEADING_WHITESPACE.findall(text)

    margin = ""
    first_indented_line = 0
    for position, indent in enumerate(indents):
        if position == 0 and indent == "":
            first_indented_line = 1
        elif position == first_indented_line:
            margin = indent
        elif indent.startswith(margin):
            continue
        elif margin.startswith(indent):
            margin = indent
        else:
            margin = ""
            break

    if margin:
        text = re.sub("^" + re.escape(margin), "", text, flags=re.MULTILINE)
    return text
"""Reading compiler error output into editor diagnostics."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from c3lsp.completion_text import Position

SEVERITY_ERROR = 1
DIAGNOSTIC_SOURCE = "c3c build --test"
_END_CHARACTER = 99
_FIELD_COUNT = 5
_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Diagnostic:
    """A problem reported in a document."""

    start: Position
    end: Position
    message: str
    severity: int = SEVERITY_ERROR
    source: str = DIAGNOSTIC_SOURCE


@dataclass(frozen=True)
class ErrorInfo:
    """A diagnostic together with the file it belongs to."""

    file: str
    diagnostic: Diagnostic


def _parse_int(text: str) -> int | None:
    return int(text) if _INTEGER.fullmatch(text) else None


def extract_error_diagnostics(output: str) -> tuple[list[ErrorInfo], bool]:
    """Parse compiler error output.

    Errors are expected as ``Error|file|line|column|message`` with one-based
    line and column. Only the first error is reported. Returns the errors
    found and whether diagnostics should be disabled because the output
    format is not understood (an older compiler).
    """
    errors: list[ErrorInfo] = []
    disabled = False

    for line in output.split("\n"):
        if not line.startswith("Error"):
            continue
        parts = line.split("|")
        if parts[0] == "Error":
            if len(parts) != _FIELD_COUNT:
                disabled = True
            else:
                line_number = _parse_int(parts[2])
                if line_number is None:
                    continue
                column = _parse_int(parts[3])
                if column is None:
                    continue
                line_number -= 1
                column -= 1
                errors.append(
                    ErrorInfo(
                        file=parts[1],
                        diagnostic=Diagnostic(
                            start=Position(line_number, column),
                            end=Position(line_number, _END_CHARACTER),
                            message=parts[4],
                        ),
                    )
                )
        break

    return errors, disabled


def has_diagnostic_for_file(file: str, errors_info: Iterable[ErrorInfo]) -> bool:
    """Return True if any of ``errors_info`` concerns ``file``."""
    return any(info.file == file for info in errors_info)
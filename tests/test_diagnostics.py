from c3lsp.completion_text import Position
from c3lsp.diagnostics import (
    DIAGNOSTIC_SOURCE,
    SEVERITY_ERROR,
    Diagnostic,
    ErrorInfo,
    extract_error_diagnostics,
    has_diagnostic_for_file,
)


def test_parses_single_error_line():
    output = "Compiling\nError|src/main.c3|3|5|Unexpected token\n"
    errors, disabled = extract_error_diagnostics(output)
    assert disabled is False
    assert len(errors) == 1
    info = errors[0]
    assert info.file == "src/main.c3"
    assert info.diagnostic.message == "Unexpected token"
    assert info.diagnostic.start == Position(2, 4)
    assert info.diagnostic.end.line == info.diagnostic.start.line
    assert info.diagnostic.end.character == 99
    assert info.diagnostic.source == "c3c build --test"
    assert info.diagnostic.severity == SEVERITY_ERROR


def test_empty_output_has_no_errors():
    assert extract_error_diagnostics("") == ([], False)


def test_old_format_disables_diagnostics():
    errors, disabled = extract_error_diagnostics("Error|src/main.c3|oops\n")
    assert errors == []
    assert disabled is True


def test_only_first_error_is_reported():
    output = "Error|a.c3|1|1|first\nError|b.c3|2|2|second"
    errors, _ = extract_error_diagnostics(output)
    assert [info.file for info in errors] == ["a.c3"]


def test_unparsable_numbers_skip_to_next_error():
    output = "Error|a.c3|x|1|bad\nError|b.c3|4|1|good"
    errors, disabled = extract_error_diagnostics(output)
    assert disabled is False
    assert [info.diagnostic.message for info in errors] == ["good"]


def test_error_prefix_without_separator_stops_parsing():
    output = "Error: something went wrong\nError|b.c3|4|1|later"
    assert extract_error_diagnostics(output) == ([], False)


def test_line_and_column_are_one_based_in_input():
    errors, _ = extract_error_diagnostics("Error|f.c3|1|1|m")
    assert errors[0].diagnostic.start == Position(0, 0)


def test_has_diagnostic_for_file():
    position = Position(0, 0)
    info = ErrorInfo(
        file="main.c3",
        diagnostic=Diagnostic(start=position, end=position, message="m"),
    )
    assert has_diagnostic_for_file("main.c3", [info]) is True
    assert has_diagnostic_for_file("other.c3", [info]) is False
    assert has_diagnostic_for_file("main.c3", []) is False


def test_default_source_is_compiler_check():
    position = Position(0, 0)
    diagnostic = Diagnostic(start=position, end=position, message="m")
    assert diagnostic.source == DIAGNOSTIC_SOURCE
    assert diagnostic.severity == SEVERITY_ERROR
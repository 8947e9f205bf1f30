"""Tests for the diagnostics package.

Covers DiagnosticCode values, SourceSpan validation, ErrorTemplate
messages, DiagnosticFormatter output styles and the exception hierarchy.

Python 3.13+.
"""

from __future__ import annotations

import json

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from regexnfa.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    OutputFormat,
    PatternSyntaxError,
    RegexNfaError,
    SourceSpan,
)

# ============================================================================
# Codes and Spans
# ============================================================================


class TestDiagnosticCode:
    """Test DiagnosticCode numbering."""

    def test_code_values(self) -> None:
        """Codes fall in their documented ranges."""
        assert DiagnosticCode.MAX_DEPTH_EXCEEDED.value == 2001
        assert DiagnosticCode.UNEXPECTED_CHARACTER.value == 3001

    def test_codes_are_unique(self) -> None:
        """No two codes share a value."""
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))


class TestSourceSpan:
    """Test SourceSpan validation."""

    def test_empty_span_allowed(self) -> None:
        """start == end marks a point such as end of input."""
        span = SourceSpan(start=3, end=3)

        assert span.start == span.end == 3

    def test_negative_start_rejected(self) -> None:
        """Negative offsets raise ValueError."""
        with pytest.raises(ValueError, match="start must be >= 0"):
            SourceSpan(start=-1, end=0)

    def test_end_before_start_rejected(self) -> None:
        """end < start raises ValueError."""
        with pytest.raises(ValueError, match=r"end \(1\) must be >= start \(2\)"):
            SourceSpan(start=2, end=1)


class TestDiagnostic:
    """Test Diagnostic presentation helpers."""

    def test_str_is_message(self) -> None:
        """str() returns the bare message."""
        diagnostic = ErrorTemplate.unexpected_character("*", 0)

        assert str(diagnostic) == "Unexpected character '*' at position 0"

    def test_format_error_uses_rust_style(self) -> None:
        """format_error() delegates to the default formatter."""
        diagnostic = ErrorTemplate.unexpected_character(")", 2)

        assert diagnostic.format_error() == DiagnosticFormatter().format(diagnostic)
        assert diagnostic.format_error().startswith("error[UNEXPECTED_CHARACTER]")


# ============================================================================
# Templates
# ============================================================================


class TestUnexpectedCharacterTemplate:
    """Test ErrorTemplate.unexpected_character()."""

    def test_character_message_and_span(self) -> None:
        """A found character yields a one-character span."""
        diagnostic = ErrorTemplate.unexpected_character(")", 2)

        assert diagnostic.code is DiagnosticCode.UNEXPECTED_CHARACTER
        assert diagnostic.message == "Unexpected character ')' at position 2"
        assert diagnostic.span == SourceSpan(start=2, end=3)
        assert diagnostic.found == ")"
        assert diagnostic.severity == "error"

    def test_end_of_input_message_and_span(self) -> None:
        """None means the input was exhausted; the span is empty."""
        diagnostic = ErrorTemplate.unexpected_character(None, 3)

        assert diagnostic.message == "Unexpected end of input at position 3"
        assert diagnostic.span == SourceSpan(start=3, end=3)
        assert diagnostic.found is None
        assert diagnostic.hint is not None
        assert "unclosed group" in diagnostic.hint

    @pytest.mark.parametrize(
        ("found", "fragment"),
        [
            (")", "matching '('"),
            ("?", "quantifier"),
            ("*", "quantifier"),
            ("+", "quantifier"),
            ("|", "Each side of '|'"),
            ("x", "Check the pattern syntax"),
        ],
    )
    def test_hint_depends_on_character(self, found: str, fragment: str) -> None:
        """Each kind of offending character gets its own hint."""
        hint = ErrorTemplate.unexpected_character(found, 0).hint

        assert hint is not None
        assert fragment in hint

    @given(st.characters(), st.integers(min_value=0, max_value=10_000))
    def test_message_names_character_and_position(self, found: str, position: int) -> None:
        """PROPERTY: the message always contains repr(found) and the position."""
        event(f"meta={found in '|()?*+'}")
        diagnostic = ErrorTemplate.unexpected_character(found, position)

        assert repr(found) in diagnostic.message
        assert diagnostic.message.endswith(f"at position {position}")


class TestMaxDepthTemplate:
    """Test ErrorTemplate.max_depth_exceeded()."""

    def test_message(self) -> None:
        """Message names the configured limit and has no span."""
        diagnostic = ErrorTemplate.max_depth_exceeded(100)

        assert diagnostic.code is DiagnosticCode.MAX_DEPTH_EXCEEDED
        assert diagnostic.message == "Maximum group nesting depth (100) exceeded"
        assert diagnostic.span is None
        assert diagnostic.hint is not None


# ============================================================================
# Formatter
# ============================================================================


class TestDiagnosticFormatter:
    """Test DiagnosticFormatter output styles."""

    def test_rust_format(self) -> None:
        """Rust style shows code, location and help lines."""
        diagnostic = ErrorTemplate.unexpected_character(")", 0)

        assert DiagnosticFormatter().format(diagnostic) == (
            "error[UNEXPECTED_CHARACTER]: Unexpected character ')' at position 0\n"
            "  --> position 0\n"
            "  = help: Remove the ')' or add a matching '(' before it"
        )

    def test_rust_format_without_span_or_hint(self) -> None:
        """Optional lines are omitted when the diagnostic lacks them."""
        diagnostic = Diagnostic(code=DiagnosticCode.MAX_DEPTH_EXCEEDED, message="too deep")

        assert DiagnosticFormatter().format(diagnostic) == "error[MAX_DEPTH_EXCEEDED]: too deep"

    def test_rust_format_with_color(self) -> None:
        """color=True wraps the severity in ANSI codes."""
        diagnostic = ErrorTemplate.unexpected_character("*", 0)
        output = DiagnosticFormatter(color=True).format(diagnostic)

        assert output.startswith("\033[1;31merror\033[0m[UNEXPECTED_CHARACTER]")

    def test_warning_color(self) -> None:
        """Warnings use yellow instead of red."""
        diagnostic = Diagnostic(
            code=DiagnosticCode.UNEXPECTED_CHARACTER, message="m", severity="warning"
        )
        output = DiagnosticFormatter(color=True).format(diagnostic)

        assert output.startswith("\033[1;33mwarning\033[0m")

    def test_simple_format(self) -> None:
        """Simple style is a single line."""
        diagnostic = ErrorTemplate.unexpected_character(None, 1)
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)

        assert formatter.format(diagnostic) == (
            "UNEXPECTED_CHARACTER: Unexpected end of input at position 1"
        )

    def test_json_format_character(self) -> None:
        """JSON carries code, span, found and hint."""
        diagnostic = ErrorTemplate.unexpected_character("|", 4)
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)

        data = json.loads(formatter.format(diagnostic))

        assert data["code"] == "UNEXPECTED_CHARACTER"
        assert data["code_value"] == 3001
        assert data["start"] == 4
        assert data["end"] == 5
        assert data["found"] == "|"
        assert data["severity"] == "error"
        assert "hint" in data

    def test_json_format_end_of_input(self) -> None:
        """At end of input, found is present and null."""
        diagnostic = ErrorTemplate.unexpected_character(None, 0)
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)

        data = json.loads(formatter.format(diagnostic))

        assert "found" in data
        assert data["found"] is None

    def test_json_format_without_span(self) -> None:
        """Depth errors have no position fields."""
        diagnostic = ErrorTemplate.max_depth_exceeded(3)
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)

        data = json.loads(formatter.format(diagnostic))

        assert data["code"] == "MAX_DEPTH_EXCEEDED"
        assert "start" not in data
        assert "found" not in data

    def test_format_all_separates_with_blank_line(self) -> None:
        """format_all() joins diagnostics with an empty line."""
        diagnostics = [
            ErrorTemplate.unexpected_character("*", 0),
            ErrorTemplate.max_depth_exceeded(1),
        ]
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)

        assert formatter.format_all(diagnostics) == (
            "UNEXPECTED_CHARACTER: Unexpected character '*' at position 0\n\n"
            "MAX_DEPTH_EXCEEDED: Maximum group nesting depth (1) exceeded"
        )

    def test_output_format_is_str(self) -> None:
        """OutputFormat members compare equal to their names."""
        assert OutputFormat("json") is OutputFormat.JSON
        assert OutputFormat.RUST == "rust"


# ============================================================================
# Exceptions
# ============================================================================


class TestExceptions:
    """Test RegexNfaError and PatternSyntaxError."""

    def test_plain_message(self) -> None:
        """A string message leaves diagnostic unset."""
        error = RegexNfaError("plain")

        assert str(error) == "plain"
        assert error.diagnostic is None

    def test_syntax_error_from_diagnostic(self) -> None:
        """PatternSyntaxError exposes position and found from its diagnostic."""
        diagnostic = ErrorTemplate.unexpected_character(")", 2)
        error = PatternSyntaxError(diagnostic, pattern="ab)")

        assert str(error) == "Unexpected character ')' at position 2"
        assert error.diagnostic is diagnostic
        assert error.pattern == "ab)"
        assert error.position == 2
        assert error.found == ")"

    def test_syntax_error_without_diagnostic(self) -> None:
        """Without a diagnostic, position and found are None."""
        error = PatternSyntaxError("bad pattern")

        assert error.position is None
        assert error.found is None
        assert error.pattern == ""

    def test_hierarchy(self) -> None:
        """PatternSyntaxError is a RegexNfaError."""
        assert issubclass(PatternSyntaxError, RegexNfaError)
        assert issubclass(RegexNfaError, Exception)

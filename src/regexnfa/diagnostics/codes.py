"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        2000-2999: Resource limit errors (parser safety boundaries)
        3000-3999: Syntax errors (parser failures)

    The grammar itself reports exactly one kind of failure,
    UNEXPECTED_CHARACTER. MAX_DEPTH_EXCEEDED is raised by the depth guard
    when nesting exceeds the configured limit, independently of syntax.
    """

    # Resource limit errors (2000-2999)
    MAX_DEPTH_EXCEEDED = 2001

    # Syntax errors (3000-3999)
    UNEXPECTED_CHARACTER = 3001


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Pattern location for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative or end precedes start.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Pattern location (None for errors without a position)
        hint: Suggestion for fixing the error
        found: Offending character, or None when the input was exhausted
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    found: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[UNEXPECTED_CHARACTER]: Unexpected character ')' at position 2
              --> position 2
              = help: Remove the ')' or add a matching '(' before it

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)

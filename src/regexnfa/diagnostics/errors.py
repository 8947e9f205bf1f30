"""regexnfa exception hierarchy with structured diagnostics.

All exceptions can carry a Diagnostic object for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = ["PatternSyntaxError", "RegexNfaError"]


class RegexNfaError(Exception):
    """Base exception for all regexnfa errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize RegexNfaError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class PatternSyntaxError(RegexNfaError):
    """Pattern could not be parsed.

    Parsing stops at the first failure; there is no recovery and no
    partially built automaton is returned.

    Attributes:
        pattern: The pattern that failed to parse
        position: Zero-based offset of the offending character
        found: Offending character, or None at end of input
    """

    def __init__(self, message: str | Diagnostic, *, pattern: str = "") -> None:
        """Initialize PatternSyntaxError.

        Args:
            message: Error message string OR Diagnostic object
            pattern: The pattern that failed to parse
        """
        super().__init__(message)
        self.pattern = pattern

    @property
    def position(self) -> int | None:
        """Offset of the failure, if the diagnostic carries a span."""
        if self.diagnostic is None or self.diagnostic.span is None:
            return None
        return self.diagnostic.span.start

    @property
    def found(self) -> str | None:
        """Offending character (None at end of input or without diagnostic)."""
        if self.diagnostic is None:
            return None
        return self.diagnostic.found

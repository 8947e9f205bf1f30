"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from regexnfa.constants import END_OF_INPUT, GROUP_CLOSE_TOKEN, GROUP_OPEN_TOKEN

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def unexpected_character(found: str | None, position: int) -> Diagnostic:
        """Required token or term did not match.

        Args:
            found: The character at the failure position, or None at end of input
            position: Zero-based offset of the failure

        Returns:
            Diagnostic for UNEXPECTED_CHARACTER
        """
        if found is None:
            msg = f"Unexpected {END_OF_INPUT} at position {position}"
            span = SourceSpan(start=position, end=position)
            hint = "The pattern ended early; check for an unclosed group or a trailing '|'"
        else:
            msg = f"Unexpected character {found!r} at position {position}"
            span = SourceSpan(start=position, end=position + 1)
            hint = ErrorTemplate._unexpected_character_hint(found)
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_CHARACTER,
            message=msg,
            span=span,
            hint=hint,
            found=found,
        )

    @staticmethod
    def _unexpected_character_hint(found: str) -> str:
        match found:
            case ")":
                return f"Remove the '{GROUP_CLOSE_TOKEN}' or add a matching '{GROUP_OPEN_TOKEN}' before it"
            case "?" | "*" | "+":
                return "A quantifier must follow a literal or a group, and cannot be repeated"
            case "|":
                return "Each side of '|' needs at least one literal or group"
            case _:
                return "Check the pattern syntax near this position"

    @staticmethod
    def max_depth_exceeded(max_depth: int) -> Diagnostic:
        """Group nesting exceeded the configured limit.

        Args:
            max_depth: The configured maximum nesting depth

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum group nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            span=None,
            hint="Reduce the nesting of parenthesized groups or raise max_nesting_depth",
        )

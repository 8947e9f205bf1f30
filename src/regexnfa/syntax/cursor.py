"""Cursor infrastructure for single-pass pattern parsing.

The cursor is the only component that touches the raw pattern string.
Grammar rules ask it to *accept* something (consume on match, do nothing
otherwise) or to *peek* (never consume). Because nothing else can move the
position, it only ever moves forward.

Design:
    - Accept operations return bool and never raise
    - Position is read-only from outside; it advances by at most one per call
    - EOF is a state (is_eof), and peek() reports it as (None, len(source))
    - Classification of literal vs meta characters happens here, inline,
      so there is no separate lexer stage

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from regexnfa.constants import META_CHARACTERS
from regexnfa.diagnostics import Diagnostic, ErrorTemplate

__all__ = ["Cursor", "ParseError"]


class Cursor:
    """Forward-only position tracker over an immutable pattern.

    Example:
        >>> cursor = Cursor("a(b")
        >>> cursor.accept_char()
        True
        >>> cursor.last_accepted
        'a'
        >>> cursor.accept_char()  # '(' is a meta character
        False
        >>> cursor.accept_token("(")
        True
        >>> cursor.peek()
        ('b', 2)
        >>> cursor.pos  # peek() did not consume
        2
    """

    __slots__ = ("_last_accepted", "_pos", "_source")

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._last_accepted: str | None = None

    def __repr__(self) -> str:
        return f"Cursor(pos={self._pos}, length={len(self._source)})"

    @property
    def source(self) -> str:
        """The pattern being parsed."""
        return self._source

    @property
    def pos(self) -> int:
        """Zero-based offset of the next unconsumed character."""
        return self._pos

    @property
    def is_eof(self) -> bool:
        """Check if the whole pattern has been consumed."""
        return self._pos >= len(self._source)

    @property
    def last_accepted(self) -> str | None:
        """Character most recently consumed by accept_token() or accept_char().

        None before any successful accept, and after accept_end() succeeds.
        """
        return self._last_accepted

    def accept_end(self) -> bool:
        """Succeed iff the whole pattern has been consumed.

        Clears last_accepted on success; no side effect on failure.
        """
        if self.is_eof:
            self._last_accepted = None
            return True
        return False

    def accept_token(self, token: str) -> bool:
        """Consume the current character if it equals token.

        Args:
            token: Single character to match (literal or meta)

        Returns:
            True if consumed, False if no match or at EOF
        """
        if self.is_eof or self._source[self._pos] != token:
            return False
        self._last_accepted = token
        self._pos += 1
        return True

    def accept_char(self) -> bool:
        """Consume the current character if it is a literal.

        Returns:
            True if consumed, False if at EOF or the character is one of
            the meta characters | ( ) ? * +
        """
        if self.is_eof:
            return False
        char = self._source[self._pos]
        if char in META_CHARACTERS:
            return False
        self._last_accepted = char
        self._pos += 1
        return True

    def peek(self) -> tuple[str | None, int]:
        """Return the current character and its position without consuming.

        Returns:
            (char, pos), or (None, len(source)) at end of input
        """
        if self.is_eof:
            return None, len(self._source)
        return self._source[self._pos], self._pos


@dataclass(frozen=True, slots=True)
class ParseError:
    """Failure value returned by grammar rules.

    Rules return either a fragment or a ParseError, and a rule receiving a
    ParseError from a sub-rule returns it unchanged. The first error
    therefore travels to the top without wrapping.

    Example:
        >>> cursor = Cursor("a)")
        >>> cursor.accept_char()
        True
        >>> error = ParseError.unexpected_character(cursor)
        >>> error.format_error()
        "Unexpected character ')' at position 1"
        >>> print(error.format_with_context())
        Unexpected character ')' at position 1
        <BLANKLINE>
          | a)
          |  ^
    """

    diagnostic: Diagnostic
    source: str

    @classmethod
    def unexpected_character(cls, cursor: Cursor) -> ParseError:
        """Build an UNEXPECTED_CHARACTER error at the cursor's position."""
        found, position = cursor.peek()
        return cls(ErrorTemplate.unexpected_character(found, position), cursor.source)

    @property
    def position(self) -> int:
        """Zero-based offset of the failure."""
        span = self.diagnostic.span
        return span.start if span is not None else len(self.source)

    @property
    def found(self) -> str | None:
        """Offending character, or None at end of input."""
        return self.diagnostic.found

    @property
    def message(self) -> str:
        """Human-readable description."""
        return self.diagnostic.message

    def format_error(self) -> str:
        """Single-line description naming the character and position."""
        return self.diagnostic.message

    def format_with_context(self) -> str:
        """Format error with the pattern line and a caret under the failure.

        Example:
            Unexpected end of input at position 3
            <BLANKLINE>
              | (ab
              |    ^
        """
        position = self.position
        line_start = self.source.rfind("\n", 0, position) + 1
        line_end = self.source.find("\n", position)
        if line_end == -1:
            line_end = len(self.source)
        line = self.source[line_start:line_end]
        pointer = " " * (position - line_start) + "^"
        return "\n".join([self.format_error(), "", f"  | {line}", f"  | {pointer}"])

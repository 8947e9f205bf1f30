"""Core pattern parser implementation.

This module provides the NfaParser class that turns a pattern string into a
finite automaton using the grammar rules in :mod:`regexnfa.syntax.parser.rules`.

Architecture:
    Each call to :meth:`NfaParser.parse` creates a fresh automaton (from the
    injected factory), a :class:`~regexnfa.syntax.cursor.Cursor` and a
    :class:`~regexnfa.syntax.parser.rules.ParseContext`, then runs the Start
    rule. Nothing is shared between calls.

    On success the resulting fragment's entry becomes the automaton's root
    and its exit is marked accepting, so the automaton is complete without
    any convention between caller and automaton implementation.

Security:
    Includes configurable pattern size and group nesting limits to prevent
    unbounded memory allocation and stack exhaustion from untrusted input.

See Also:
    - :mod:`regexnfa.automata` - Reference automaton and construction protocols
    - :mod:`regexnfa.syntax.cursor` - Cursor and ParseError types
"""

import logging
from collections.abc import Callable
from typing import Any

from regexnfa.automata import AutomatonBuilder, FiniteAutomaton
from regexnfa.constants import MAX_DEPTH, MAX_PATTERN_SIZE
from regexnfa.core.depth_guard import DepthGuard
from regexnfa.diagnostics import PatternSyntaxError, RegexNfaError
from regexnfa.syntax.cursor import Cursor, ParseError
from regexnfa.syntax.parser.rules import ParseContext, parse_start

__all__ = ["NfaParser"]

logger = logging.getLogger(__name__)


class NfaParser[A: AutomatonBuilder[Any]]:
    """Pattern parser producing a Thompson NFA.

    Design:
    - Automaton implementation is injected as a zero-argument factory
    - Rules return Fragment | ParseError; this class turns the error into
      a PatternSyntaxError at the public boundary
    - First error aborts; no partial automaton is ever returned

    Security:
    - Configurable max_pattern_size bounds the number of states created
    - Configurable max_nesting_depth prevents stack exhaustion via ((((...))))

    Attributes:
        max_pattern_size: Maximum allowed pattern length (default: 1,000,000)
        max_nesting_depth: Maximum allowed group nesting depth (default: 100)
    """

    __slots__ = ("_automaton_factory", "_max_nesting_depth", "_max_pattern_size")

    def __init__(
        self,
        automaton_factory: Callable[[], A] = FiniteAutomaton,  # type: ignore[assignment]
        *,
        max_pattern_size: int | None = None,
        max_nesting_depth: int | None = None,
    ) -> None:
        """Initialize parser with an automaton factory and optional limits.

        Args:
            automaton_factory: Creates an empty automaton for each parse call
                (default: FiniteAutomaton).
            max_pattern_size: Maximum pattern length in characters.
                Set to None for the default or 0 to disable (not recommended).
            max_nesting_depth: Maximum group nesting depth (default: 100).
        """
        self._automaton_factory = automaton_factory
        self._max_pattern_size = (
            max_pattern_size if max_pattern_size is not None else MAX_PATTERN_SIZE
        )
        self._max_nesting_depth = (
            max_nesting_depth if max_nesting_depth is not None else MAX_DEPTH
        )

    @property
    def max_pattern_size(self) -> int:
        """Maximum allowed pattern length in characters."""
        return self._max_pattern_size

    @property
    def max_nesting_depth(self) -> int:
        """Maximum allowed group nesting depth."""
        return self._max_nesting_depth

    def parse(self, pattern: str) -> A:
        """Parse a pattern into a new automaton.

        Args:
            pattern: Pattern text, e.g. "(ab)*|c+"

        Returns:
            Fresh automaton with root state set and the accepting state marked

        Raises:
            ValueError: If pattern exceeds max_pattern_size
            PatternSyntaxError: At the first unexpected character
            DepthLimitExceededError: If groups nest deeper than max_nesting_depth

        Example:
            >>> automaton = NfaParser().parse("(ab)*")
            >>> automaton.accepts("abab")
            True
            >>> automaton.accepts("aba")
            False
        """
        if self._max_pattern_size > 0 and len(pattern) > self._max_pattern_size:
            msg = (
                f"Pattern length ({len(pattern):,} characters) exceeds maximum "
                f"({self._max_pattern_size:,} characters). "
                "Configure max_pattern_size in NfaParser constructor to increase limit."
            )
            raise ValueError(msg)

        logger.debug("Parsing pattern of length %d", len(pattern))

        automaton = self._automaton_factory()
        context = ParseContext(
            cursor=Cursor(pattern),
            automaton=automaton,
            depth_guard=DepthGuard(max_depth=self._max_nesting_depth),
        )

        result = parse_start(context)
        if isinstance(result, ParseError):
            raise PatternSyntaxError(result.diagnostic, pattern=pattern)

        automaton.set_root_state(result.entry)
        automaton.mark_accepting(result.exit)

        logger.debug("Parsed pattern %r", pattern)
        return automaton

    def try_parse(self, pattern: str) -> tuple[A | None, tuple[RegexNfaError, ...]]:
        """Parse a pattern, returning errors instead of raising them.

        Failures are logged at WARNING level and returned; no automaton is
        produced for a rejected pattern.

        Returns:
            (automaton, ()) on success, (None, (error,)) on failure

        Raises:
            ValueError: If pattern exceeds max_pattern_size

        Example:
            >>> automaton, errors = NfaParser().try_parse("(ab")
            >>> automaton is None
            True
            >>> str(errors[0])
            'Unexpected end of input at position 3'
        """
        try:
            return self.parse(pattern), ()
        except RegexNfaError as error:
            logger.warning("Pattern %r rejected: %s", pattern, error)
            return None, (error,)

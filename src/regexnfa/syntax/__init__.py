"""Pattern syntax package.

Provides the cursor, fragment type, grammar rules and parser. Depends on
the automata package only through its construction protocols.

Python 3.13+.
"""

from regexnfa.automata import FiniteAutomaton

from .cursor import Cursor, ParseError
from .fragment import Fragment
from .parser import NfaParser, ParseContext

__all__ = [
    "Cursor",
    "Fragment",
    "NfaParser",
    "ParseContext",
    "ParseError",
    "parse",
]


def parse(pattern: str, *, max_nesting_depth: int | None = None) -> FiniteAutomaton:
    """Parse a pattern into a FiniteAutomaton.

    Convenience function for NfaParser().parse().

    Args:
        pattern: Pattern text
        max_nesting_depth: Maximum group nesting depth (default: 100)

    Returns:
        Automaton with root and accepting state set

    Raises:
        PatternSyntaxError: At the first unexpected character

    Example:
        >>> from regexnfa.syntax import parse
        >>> automaton = parse("a|b")
        >>> automaton.accepts("b")
        True
    """
    parser = NfaParser(FiniteAutomaton, max_nesting_depth=max_nesting_depth)
    return parser.parse(pattern)

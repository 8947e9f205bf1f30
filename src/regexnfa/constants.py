"""Shared constants for regexnfa.

This module provides centralized configuration constants used across
the syntax and automata packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Token classes: Characters with grammatical meaning in a pattern
- Depth limits: Recursion protection for nested groups
- Input limits: Memory bounds via pattern size constraints

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Token classes
    "ALTERNATION_TOKEN",
    "GROUP_OPEN_TOKEN",
    "GROUP_CLOSE_TOKEN",
    "META_CHARACTERS",
    "TERM_TERMINATORS",
    "END_OF_INPUT",
    # Depth limits
    "MAX_DEPTH",
    # Input limits
    "MAX_PATTERN_SIZE",
]

# ============================================================================
# TOKEN CLASSES
# ============================================================================
#
# There is no separate lexer stage. Every character of a pattern is either a
# literal (matched verbatim) or one of the six meta characters below, and the
# classification happens inline while the cursor consumes input.

ALTERNATION_TOKEN: str = "|"
GROUP_OPEN_TOKEN: str = "("
GROUP_CLOSE_TOKEN: str = ")"

# Characters that can never be consumed as a literal.
META_CHARACTERS: frozenset[str] = frozenset("|()?*+")

# Characters that cannot begin a new term. '(' is absent: it opens a group.
TERM_TERMINATORS: frozenset[str] = frozenset("|)?*+")

# Marker used in diagnostics when the offending "character" is the end.
END_OF_INPUT: str = "end of input"

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum group nesting depth: ((((a)))) is depth 4.
# Each group costs a fixed number of Python frames in the recursive descent
# (Term -> Alternation -> Concatenation -> Quantifier -> Term), so 100 levels
# stays well inside the default recursion limit of 1000.
MAX_DEPTH: int = 100

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum pattern length in characters.
# Every literal character allocates an automaton state, so the limit bounds
# memory use for untrusted patterns.
MAX_PATTERN_SIZE: int = 1_000_000

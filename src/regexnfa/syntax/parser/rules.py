"""Grammar rules for the pattern parser.

This module provides all parsing rules of the pattern grammar, each building
its part of the automaton with Thompson's construction as it goes:

    Start         : Alternation END
    Alternation   : Concatenation ( '|' Concatenation )*
    Concatenation : Quantifier Quantifier*
    Quantifier    : Term ( '?' | '*' | '+' )?
    Term          : CHAR CHAR* | '(' Alternation ')'

Precedence falls out of the layering: '|' binds loosest, then juxtaposition,
then the postfix quantifiers. A literal run is a single term, so a quantifier
after it applies to the whole run ("ab*" repeats "ab").

All grammar rules are co-located in a single module so the mutually
recursive functions can call each other directly.

Result Convention:
    Every rule returns ``Fragment | ParseError``. A rule receiving a
    ParseError from a sub-rule returns it unchanged; there is no recovery
    and no partial result.

Lookahead Patterns:
    Concatenation keeps parsing while can_start_concatenation() holds, i.e.
    while the next character exists and is not one of | ) ? * +. The
    predicates only peek and never consume.

Security:
    Group nesting is bounded by the context's DepthGuard, which raises
    DepthLimitExceededError instead of letting Python hit RecursionError.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import pairwise

from regexnfa.automata.protocol import AutomatonBuilder, StateBuilder
from regexnfa.constants import (
    ALTERNATION_TOKEN,
    GROUP_CLOSE_TOKEN,
    GROUP_OPEN_TOKEN,
    TERM_TERMINATORS,
)
from regexnfa.core.depth_guard import DepthGuard
from regexnfa.enums import QuantifierKind
from regexnfa.syntax.cursor import Cursor, ParseError
from regexnfa.syntax.fragment import Fragment

__all__ = [
    "ParseContext",
    "can_start_concatenation",
    "can_start_quantifier",
    "can_start_term",
    "parse_alternation",
    "parse_concatenation",
    "parse_quantifier",
    "parse_start",
    "parse_term",
]


@dataclass(slots=True)
class ParseContext[S: StateBuilder]:
    """Explicit context for one parse call.

    Replaces module-level singletons with explicit parameter passing for:
    - Thread safety without global state
    - Injecting any automaton implementation (or a recording test double)
    - Clear dependency flow

    Attributes:
        cursor: Position in the pattern
        automaton: Owner of every state the rules create
        depth_guard: Group nesting limit
    """

    cursor: Cursor
    automaton: AutomatonBuilder[S]
    depth_guard: DepthGuard = field(default_factory=DepthGuard)

    def new_state(self) -> S:
        """Create a state in the context's automaton."""
        return self.automaton.new_state()


# =============================================================================
# Productions
# =============================================================================


def parse_start[S: StateBuilder](context: ParseContext[S]) -> Fragment[S] | ParseError:
    """Parse a complete pattern: Alternation END

    The pattern must be consumed exactly; leftover input such as a stray ')'
    fails at the first unconsumed character.
    """
    result = parse_alternation(context)
    if isinstance(result, ParseError):
        return result

    if not context.cursor.accept_end():
        return ParseError.unexpected_character(context.cursor)

    return result


def parse_alternation[S: StateBuilder](
    context: ParseContext[S],
) -> Fragment[S] | ParseError:
    """Parse branches separated by '|'.

    A single branch is returned as-is. Two or more branches get a fresh
    entry state with an epsilon edge to every branch, and a fresh exit state
    with an epsilon edge from every branch, in left-to-right order.

    Examples:
        a      -> the fragment of 'a' (no new states)
        a|b|c  -> new entry -> {a, b, c} -> new exit
    """
    first = parse_concatenation(context)
    if isinstance(first, ParseError):
        return first

    branches = [first]
    while context.cursor.accept_token(ALTERNATION_TOKEN):
        branch = parse_concatenation(context)
        if isinstance(branch, ParseError):
            return branch
        branches.append(branch)

    if len(branches) == 1:
        return first

    entry = context.new_state()
    exit_ = context.new_state()
    for branch in branches:
        entry.add_epsilon_transition(branch.entry)
        branch.exit.add_epsilon_transition(exit_)

    return Fragment(entry, exit_)


def parse_concatenation[S: StateBuilder](
    context: ParseContext[S],
) -> Fragment[S] | ParseError:
    """Parse one or more juxtaposed quantifiers.

    Each fragment's exit gets an epsilon edge to the next fragment's entry.
    A single fragment is returned as-is.
    """
    first = parse_quantifier(context)
    if isinstance(first, ParseError):
        return first

    pieces = [first]
    while can_start_concatenation(context.cursor):
        piece = parse_quantifier(context)
        if isinstance(piece, ParseError):
            return piece
        pieces.append(piece)

    if len(pieces) == 1:
        return first

    for previous, following in pairwise(pieces):
        previous.exit.add_epsilon_transition(following.entry)

    return Fragment(first.entry, pieces[-1].exit)


def parse_quantifier[S: StateBuilder](
    context: ParseContext[S],
) -> Fragment[S] | ParseError:
    """Parse a term and at most one following modifier.

    Edges are added to the term's own entry and exit; no states are created:
        ?  entry -> exit
        *  entry -> exit, exit -> entry
        +  exit -> entry
    """
    term = parse_term(context)
    if isinstance(term, ParseError):
        return term

    kind = _accept_quantifier(context.cursor)
    if kind is None:
        return term

    if kind.allows_skip:
        term.entry.add_epsilon_transition(term.exit)
    if kind.allows_repeat:
        term.exit.add_epsilon_transition(term.entry)

    return term


def parse_term[S: StateBuilder](context: ParseContext[S]) -> Fragment[S] | ParseError:
    """Parse a literal run or a parenthesized group.

    A literal run of n characters becomes a chain of n + 1 states joined by
    labeled edges. A group returns its inner fragment unchanged; parentheses
    only scope precedence.

    Raises:
        DepthLimitExceededError: If groups nest deeper than the context allows
    """
    cursor = context.cursor
    run_start = cursor.pos

    if cursor.accept_char():
        while cursor.accept_char():
            pass
        return _build_literal_run(context, cursor.source[run_start : cursor.pos])

    if cursor.accept_token(GROUP_OPEN_TOKEN):
        with context.depth_guard:
            inner = parse_alternation(context)
        if isinstance(inner, ParseError):
            return inner
        if not cursor.accept_token(GROUP_CLOSE_TOKEN):
            return ParseError.unexpected_character(cursor)
        return inner

    return ParseError.unexpected_character(cursor)


def _accept_quantifier(cursor: Cursor) -> QuantifierKind | None:
    for kind in QuantifierKind:
        if cursor.accept_token(kind.value):
            return kind
    return None


def _build_literal_run[S: StateBuilder](context: ParseContext[S], run: str) -> Fragment[S]:
    first = context.new_state()
    last = first
    for char in run:
        state = context.new_state()
        last.add_transition(char, state)
        last = state
    return Fragment(first, last)


# =============================================================================
# Lookahead Predicates
# =============================================================================


def can_start_concatenation(cursor: Cursor) -> bool:
    """Check whether another concatenation piece begins at the cursor."""
    return can_start_quantifier(cursor)


def can_start_quantifier(cursor: Cursor) -> bool:
    """Check whether a quantifier (and so a term) begins at the cursor."""
    return can_start_term(cursor)


def can_start_term(cursor: Cursor) -> bool:
    """Check whether a term begins at the cursor, without consuming.

    True iff the next character exists and is not one of | ) ? * +.
    '(' counts as a term start because it opens a group.
    """
    char, _ = cursor.peek()
    return char is not None and char not in TERM_TERMINATORS

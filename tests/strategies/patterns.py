"""Hypothesis strategies for pattern syntax.

Provides strategies generating well-formed patterns together with an
equivalent Python ``re`` expression, for comparing the language of a built
automaton against ``re.fullmatch``, plus unstructured strategies for
exercising the parser's error paths.

Valid patterns only quantify a parenthesized literal run or a group with
two or more branches. Both shapes have an entry state without incoming
edges and an exit state without outgoing edges, which is what the in-place
quantifier construction needs to preserve the usual semantics.

Event-Emitting Strategies (HypoFuzz-Optimized):
    - pattern_pairs: Emits ``strategy=pattern_{shape}``
    - nested_group_patterns: Emits ``strategy=nesting_{band}``

Python 3.13+.
"""

from __future__ import annotations

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

__all__ = [
    "PATTERN_ALPHABET",
    "literal_runs",
    "nested_group_patterns",
    "pattern_pairs",
    "pattern_soup",
    "quantifier_suffixes",
    "subject_texts",
]

# Small alphabet keeps generated subjects likely to hit the pattern.
PATTERN_ALPHABET = "abc"

literal_runs: st.SearchStrategy[str] = st.text(
    alphabet=st.sampled_from(PATTERN_ALPHABET),
    min_size=1,
    max_size=3,
)

quantifier_suffixes: st.SearchStrategy[str] = st.sampled_from(["", "?", "*", "+"])

subject_texts: st.SearchStrategy[str] = st.text(
    alphabet=st.sampled_from(PATTERN_ALPHABET),
    max_size=8,
)

# Meta characters are over-represented so that most draws are near misses.
pattern_soup: st.SearchStrategy[str] = st.text(
    alphabet=st.sampled_from("ab|()?*+"),
    max_size=12,
)

type PatternPair = tuple[str, str]


def _draw_alternation(draw: st.DrawFn, depth: int, min_branches: int) -> PatternPair:
    count = draw(st.integers(min_value=min_branches, max_value=3))
    branches = [_draw_concatenation(draw, depth) for _ in range(count)]
    pattern = "|".join(branch for branch, _ in branches)
    python = "(?:" + "|".join(python for _, python in branches) + ")"
    return pattern, python


def _draw_concatenation(draw: st.DrawFn, depth: int) -> PatternPair:
    count = draw(st.integers(min_value=1, max_value=2))
    pieces = [_draw_quantified(draw, depth) for _ in range(count)]
    return "".join(piece for piece, _ in pieces), "".join(python for _, python in pieces)


def _draw_quantified(draw: st.DrawFn, depth: int) -> PatternPair:
    suffix = draw(quantifier_suffixes)
    if depth > 0 and draw(st.booleans()):
        inner, inner_python = _draw_alternation(draw, depth - 1, min_branches=2)
        return f"({inner}){suffix}", f"{inner_python}{suffix}"
    run = draw(literal_runs)
    return f"({run}){suffix}", f"(?:{run}){suffix}"


@composite
def pattern_pairs(draw: st.DrawFn, *, max_depth: int = 2) -> PatternPair:
    """Generate (pattern, python_regex) pairs accepting the same language.

    Args:
        draw: Hypothesis draw function.
        max_depth: Maximum nesting of alternation groups.

    Events emitted:
        - ``strategy=pattern_{shape}``: Top-level shape (alternation or sequence).
    """
    pattern, python = _draw_alternation(draw, max_depth, min_branches=1)
    shape = "alternation" if "|" in pattern else "sequence"
    event(f"strategy=pattern_{shape}")
    return pattern, python


@composite
def nested_group_patterns(draw: st.DrawFn, *, max_depth: int = 20) -> tuple[str, int]:
    """Generate a literal wrapped in N groups, returning (pattern, N).

    Events emitted:
        - ``strategy=nesting_{band}``: shallow (< 5) or deep.
    """
    depth = draw(st.integers(min_value=0, max_value=max_depth))
    run = draw(literal_runs)
    event(f"strategy=nesting_{'shallow' if depth < 5 else 'deep'}")
    return "(" * depth + run + ")" * depth, depth

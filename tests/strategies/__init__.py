"""Hypothesis strategies for regexnfa property-based testing.

Usage:
    from tests.strategies import pattern_pairs, subject_texts
"""

from .patterns import (
    PATTERN_ALPHABET,
    literal_runs,
    nested_group_patterns,
    pattern_pairs,
    pattern_soup,
    quantifier_suffixes,
    subject_texts,
)

__all__ = [
    "PATTERN_ALPHABET",
    "literal_runs",
    "nested_group_patterns",
    "pattern_pairs",
    "pattern_soup",
    "quantifier_suffixes",
    "subject_texts",
]

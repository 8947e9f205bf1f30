"""Enumerations for regexnfa type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so a member compares equal to the
pattern character it stands for.

Python 3.13+.
"""

from enum import StrEnum

__all__ = ["QuantifierKind"]


class QuantifierKind(StrEnum):
    """Modifier that may follow a term.

    StrEnum provides automatic string conversion: str(QuantifierKind.STAR) == "*"
    """

    OPTIONAL = "?"
    """Zero or one: a?  (adds skip edge entry -> exit)"""

    STAR = "*"
    """Zero or more: a*  (adds skip edge and repeat edge exit -> entry)"""

    PLUS = "+"
    """One or more: a+  (adds repeat edge exit -> entry only)"""

    @property
    def allows_skip(self) -> bool:
        """True if the quantified term may be matched zero times."""
        return self is not QuantifierKind.PLUS

    @property
    def allows_repeat(self) -> bool:
        """True if the quantified term may be matched more than once."""
        return self is not QuantifierKind.OPTIONAL

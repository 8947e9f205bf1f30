"""Finite automaton package.

Separates the automaton representation from pattern parsing: the parser
depends only on the construction protocols, while FiniteAutomaton is the
reference implementation used by default.

Python 3.13+.
"""

from .automaton import EPSILON_LABEL, FiniteAutomaton, FiniteAutomatonState
from .protocol import AutomatonBuilder, StateBuilder

__all__ = [
    "EPSILON_LABEL",
    "AutomatonBuilder",
    "FiniteAutomaton",
    "FiniteAutomatonState",
    "StateBuilder",
]

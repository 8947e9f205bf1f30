"""Construction capability consumed by the pattern parser.

The grammar never depends on a concrete automaton class. It only needs to
create states, connect them, and finally designate the root and accepting
states. Any object satisfying these protocols can be injected, for example
a test double that records every edge for later assertions.

Python 3.13+.
"""

from __future__ import annotations

from typing import Protocol, Self

__all__ = ["AutomatonBuilder", "StateBuilder"]


class StateBuilder(Protocol):
    """A state that outgoing edges can be added to."""

    def add_transition(self, symbol: str, target: Self) -> None:
        """Add an edge taken when the next input character equals symbol."""
        ...

    def add_epsilon_transition(self, target: Self) -> None:
        """Add an edge taken without consuming input."""
        ...


class AutomatonBuilder[S: StateBuilder](Protocol):
    """An automaton that owns the states it creates.

    Lifecycle:
        1. new_state() any number of times while the grammar runs
        2. set_root_state() exactly once, after construction completes
        3. mark_accepting() for the final fragment's exit state
    """

    def new_state(self) -> S:
        """Create a state owned by this automaton."""
        ...

    def set_root_state(self, state: S) -> None:
        """Designate the start state. Called exactly once."""
        ...

    def mark_accepting(self, state: S) -> None:
        """Designate an accepting state."""
        ...

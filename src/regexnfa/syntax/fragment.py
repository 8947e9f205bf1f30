"""Automaton fragment value type.

A fragment is the piece of an automaton recognizing one sub-pattern: it is
entered at ``entry`` and completes on reaching ``exit``. Every fragment has
exactly one of each, however many states lie between them.

Fragments hold references into the automaton's state arena and own nothing;
a rule hands its fragment to the parent rule, which wires it in with epsilon
edges and then discards it.

Python 3.13+.
"""

from dataclasses import dataclass

from regexnfa.automata.protocol import StateBuilder

__all__ = ["Fragment"]


@dataclass(frozen=True, slots=True)
class Fragment[S: StateBuilder]:
    """Single-entry, single-exit automaton piece.

    Attributes:
        entry: State where the sub-pattern starts
        exit: State reached when the sub-pattern has been matched
    """

    entry: S
    exit: S

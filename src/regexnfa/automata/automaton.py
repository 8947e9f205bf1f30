"""Reference finite automaton.

The automaton is an arena: it creates and owns every state, numbers them in
creation order, and is the only place where root and accepting states are
recorded. States hold their own outgoing edges, in insertion order, so the
same pattern always produces the same graph shape.

Besides the construction capability required by the parser
(:mod:`regexnfa.automata.protocol`), the automaton offers epsilon-closure,
simulation against an input string, and a plain-text debugging view.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

__all__ = ["EPSILON_LABEL", "FiniteAutomaton", "FiniteAutomatonState"]

# Label used for unconditional edges in pretty_print() output.
EPSILON_LABEL = "ε"


@dataclass(eq=False, slots=True)
class FiniteAutomatonState:
    """Automaton node with labeled and epsilon outgoing edges.

    Identity-unique: two states are equal only if they are the same object.
    Create states with FiniteAutomaton.new_state(), never directly.

    Attributes:
        automaton: Owning automaton
        id: Sequential number assigned by the owner (0 = first created)
        transitions: (symbol, target) pairs in insertion order
        epsilon_transitions: Targets reachable without consuming input
        is_accepting: True once the owner marks this state accepting
    """

    automaton: FiniteAutomaton = field(repr=False)
    id: int
    transitions: list[tuple[str, FiniteAutomatonState]] = field(
        default_factory=list, repr=False
    )
    epsilon_transitions: list[FiniteAutomatonState] = field(
        default_factory=list, repr=False
    )
    is_accepting: bool = False

    @property
    def name(self) -> str:
        """Display name used in pretty_print() output."""
        return f"s{self.id}"

    def add_transition(self, symbol: str, target: FiniteAutomatonState) -> None:
        """Add an edge consuming exactly one character.

        Raises:
            ValueError: If symbol is not a single character or target
                belongs to another automaton
        """
        if len(symbol) != 1:
            msg = f"Transition symbol must be a single character, got {symbol!r}"
            raise ValueError(msg)
        self.automaton.check_owned(target)
        self.transitions.append((symbol, target))

    def add_epsilon_transition(self, target: FiniteAutomatonState) -> None:
        """Add an edge taken without consuming input.

        Raises:
            ValueError: If target belongs to another automaton
        """
        self.automaton.check_owned(target)
        self.epsilon_transitions.append(target)

    def targets(self, symbol: str) -> list[FiniteAutomatonState]:
        """States reached from this one by consuming symbol."""
        return [target for label, target in self.transitions if label == symbol]


class FiniteAutomaton:
    """Nondeterministic finite automaton built state by state.

    Example:
        >>> automaton = FiniteAutomaton()
        >>> start, end = automaton.new_state(), automaton.new_state()
        >>> start.add_transition("a", end)
        >>> automaton.set_root_state(start)
        >>> automaton.mark_accepting(end)
        >>> automaton.accepts("a")
        True
        >>> automaton.accepts("")
        False
    """

    __slots__ = ("_accepting", "_root", "_states")

    def __init__(self) -> None:
        self._states: list[FiniteAutomatonState] = []
        self._root: FiniteAutomatonState | None = None
        self._accepting: list[FiniteAutomatonState] = []

    def __repr__(self) -> str:
        root = self._root.name if self._root is not None else None
        return (
            f"FiniteAutomaton(states={self.state_count}, "
            f"transitions={self.transition_count}, root={root})"
        )

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def new_state(self) -> FiniteAutomatonState:
        """Create a state owned by this automaton."""
        state = FiniteAutomatonState(automaton=self, id=len(self._states))
        self._states.append(state)
        return state

    def set_root_state(self, state: FiniteAutomatonState) -> None:
        """Designate the start state.

        Raises:
            ValueError: If the root was already set or state belongs to
                another automaton
        """
        self.check_owned(state)
        if self._root is not None:
            msg = f"Root state already set to {self._root.name}"
            raise ValueError(msg)
        self._root = state

    def mark_accepting(self, state: FiniteAutomatonState) -> None:
        """Designate an accepting state. Marking twice is a no-op.

        Raises:
            ValueError: If state belongs to another automaton
        """
        self.check_owned(state)
        if not state.is_accepting:
            state.is_accepting = True
            self._accepting.append(state)

    def check_owned(self, state: FiniteAutomatonState) -> None:
        """Raise ValueError unless state was created by this automaton."""
        if state.automaton is not self:
            msg = f"State {state.name} belongs to a different automaton"
            raise ValueError(msg)

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @property
    def root_state(self) -> FiniteAutomatonState | None:
        """Start state, or None before set_root_state()."""
        return self._root

    @property
    def accepting_states(self) -> tuple[FiniteAutomatonState, ...]:
        """Accepting states in the order they were marked."""
        return tuple(self._accepting)

    @property
    def states(self) -> tuple[FiniteAutomatonState, ...]:
        """All owned states in creation order."""
        return tuple(self._states)

    @property
    def state_count(self) -> int:
        """Number of owned states."""
        return len(self._states)

    @property
    def transition_count(self) -> int:
        """Number of edges, labeled and epsilon."""
        return sum(
            len(state.transitions) + len(state.epsilon_transitions) for state in self._states
        )

    @property
    def alphabet(self) -> frozenset[str]:
        """Characters appearing on labeled edges."""
        return frozenset(
            symbol for state in self._states for symbol, _ in state.transitions
        )

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def epsilon_closure(
        self, states: Iterable[FiniteAutomatonState]
    ) -> frozenset[FiniteAutomatonState]:
        """All states reachable from states through epsilon edges alone."""
        closure = set(states)
        stack = list(closure)
        while stack:
            state = stack.pop()
            for target in state.epsilon_transitions:
                if target not in closure:
                    closure.add(target)
                    stack.append(target)
        return frozenset(closure)

    def step(
        self, states: Iterable[FiniteAutomatonState], symbol: str
    ) -> frozenset[FiniteAutomatonState]:
        """Epsilon-closed set of states reached by consuming symbol."""
        moved = [target for state in states for target in state.targets(symbol)]
        return self.epsilon_closure(moved)

    def accepts(self, text: str) -> bool:
        """Check whether the whole of text is in the automaton's language.

        Simulates all paths at once (set-of-states), so runtime is
        O(len(text) * transitions) without backtracking.

        Raises:
            ValueError: If no root state has been set
        """
        if self._root is None:
            msg = "Cannot simulate an automaton without a root state"
            raise ValueError(msg)
        current = self.epsilon_closure((self._root,))
        for char in text:
            current = self.step(current, char)
            if not current:
                return False
        return any(state.is_accepting for state in current)

    # ------------------------------------------------------------------
    # Debugging view
    # ------------------------------------------------------------------

    def pretty_print(self) -> str:
        """Render states and edges as text.

        Example (pattern "a|b"):
              s0
                'a' -> s1
              s1
                ε -> s5
              s2
                'b' -> s3
              s3
                ε -> s5
            > s4
                ε -> s0
                ε -> s2
              s5 (accepting)

        The root is marked with '>'; edges are listed in insertion order.
        """
        lines: list[str] = []
        for state in self._states:
            marker = ">" if state is self._root else " "
            suffix = " (accepting)" if state.is_accepting else ""
            lines.append(f"{marker} {state.name}{suffix}")
            lines.extend(
                f"    {symbol!r} -> {target.name}" for symbol, target in state.transitions
            )
            lines.extend(
                f"    {EPSILON_LABEL} -> {target.name}" for target in state.epsilon_transitions
            )
        return "\n".join(lines)

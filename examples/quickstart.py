"""Quickstart - Compile patterns to NFAs and inspect them.

Demonstrates:

1. Parse a pattern and test membership
2. Inspect the automaton (states, edges, pretty_print)
3. Handle syntax errors with positions and formatted diagnostics
4. Configure limits and collect errors without exceptions
5. Plug in a custom automaton implementation

Python 3.13+.
"""

from __future__ import annotations


def example_1_membership() -> None:
    """Parse a pattern and test which strings it accepts."""
    from regexnfa import parse_pattern

    print("=" * 60)
    print("Example 1: Membership")
    print("=" * 60)

    automaton = parse_pattern("(a|b)*c")
    for text in ["c", "abac", "ab", ""]:
        print(f"  {text!r:8} -> {automaton.accepts(text)}")
    print()


def example_2_inspection() -> None:
    """Look at the states and edges Thompson's construction produced."""
    from regexnfa import parse_pattern

    print("=" * 60)
    print("Example 2: Inspection")
    print("=" * 60)

    automaton = parse_pattern("a|b")
    print(repr(automaton))
    print(automaton.pretty_print())
    print(f"Alphabet: {sorted(automaton.alphabet)}")
    print()


def example_3_errors() -> None:
    """Report syntax errors with their position."""
    from regexnfa import PatternSyntaxError, parse_pattern

    print("=" * 60)
    print("Example 3: Syntax Errors")
    print("=" * 60)

    for pattern in ["(ab", "a**", "a|", "()"]:
        try:
            parse_pattern(pattern)
        except PatternSyntaxError as error:
            print(f"  {pattern!r:6} -> {error} (found={error.found!r})")
            if error.diagnostic is not None:
                print(error.diagnostic.format_error())
    print()


def example_4_limits() -> None:
    """Bound nesting depth and collect errors instead of raising them."""
    from regexnfa import NfaParser

    print("=" * 60)
    print("Example 4: Limits and try_parse")
    print("=" * 60)

    parser = NfaParser(max_nesting_depth=2, max_pattern_size=100)
    for pattern in ["((a))", "(((a)))", "a)"]:
        automaton, errors = parser.try_parse(pattern)
        status = "ok" if automaton is not None else f"error: {errors[0]}"
        print(f"  {pattern!r:10} -> {status}")
    print()


def example_5_custom_automaton() -> None:
    """Count construction calls with a minimal AutomatonBuilder."""
    from regexnfa import NfaParser

    print("=" * 60)
    print("Example 5: Custom Automaton")
    print("=" * 60)

    class CountingState:
        def __init__(self, counter: CountingAutomaton) -> None:
            self.counter = counter

        def add_transition(self, symbol: str, target: CountingState) -> None:
            self.counter.labeled += 1

        def add_epsilon_transition(self, target: CountingState) -> None:
            self.counter.epsilon += 1

    class CountingAutomaton:
        def __init__(self) -> None:
            self.states = 0
            self.labeled = 0
            self.epsilon = 0

        def new_state(self) -> CountingState:
            self.states += 1
            return CountingState(self)

        def set_root_state(self, state: CountingState) -> None:
            pass

        def mark_accepting(self, state: CountingState) -> None:
            pass

    counts = NfaParser(CountingAutomaton).parse("x(y|z)+")
    print(f"  states={counts.states} labeled={counts.labeled} epsilon={counts.epsilon}")
    print()


def main() -> None:
    """Run all quickstart examples."""
    print()
    print("regexnfa Quickstart")
    print()

    example_1_membership()
    example_2_inspection()
    example_3_errors()
    example_4_limits()
    example_5_custom_automaton()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()

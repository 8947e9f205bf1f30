"""regexnfa - Regular expression to NFA compiler.

Parses a small pattern grammar (alternation, concatenation, the ? * +
quantifiers, grouping and literals) with a recursive-descent parser and
builds the equivalent nondeterministic finite automaton using Thompson's
construction.

Public API:
    parse_pattern - Parse a pattern into a FiniteAutomaton
    NfaParser - Configurable parser (automaton factory, size and depth limits)
    FiniteAutomaton - Reference automaton with simulation and pretty-printing
    AutomatonBuilder - Protocol for plugging in another automaton implementation

Exceptions:
    RegexNfaError - Base exception class
    PatternSyntaxError - Unexpected character (or end of input) in a pattern
    DepthLimitExceededError - Groups nested beyond the configured limit

Submodules:
    regexnfa.syntax - Cursor, fragments, grammar rules and parser
    regexnfa.automata - Automaton protocols and reference implementation
    regexnfa.diagnostics - Diagnostic codes, templates and formatting
"""

from .automata import AutomatonBuilder, FiniteAutomaton, FiniteAutomatonState
from .core import DepthLimitExceededError
from .diagnostics import PatternSyntaxError, RegexNfaError
from .syntax import NfaParser
from .syntax import parse as parse_pattern

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("regexnfa")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "AutomatonBuilder",
    "DepthLimitExceededError",
    "FiniteAutomaton",
    "FiniteAutomatonState",
    "NfaParser",
    "PatternSyntaxError",
    "RegexNfaError",
    "__version__",
    "parse_pattern",
]

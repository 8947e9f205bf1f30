"""Pattern parser module.

Module Organization:
- core.py: Main NfaParser class (orchestrates one parse call)
- rules.py: All grammar rules and lookahead predicates

Public API:
    NfaParser: Main parser class
    ParseContext: Parse context for depth tracking (advanced usage)
"""

from regexnfa.syntax.parser.core import NfaParser
from regexnfa.syntax.parser.rules import ParseContext

__all__ = ["NfaParser", "ParseContext"]

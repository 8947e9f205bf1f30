"""Fuzz testing infrastructure for regexnfa.

This package contains:
- test_syntax_parser_fuzz: Arbitrary input, depth exhaustion and a
  heavier differential run against Python's re module

Python 3.13+.
"""

"""Core utilities shared across syntax and automata layers.

Exports:
    DepthGuard: Context manager for recursion depth limiting
    DepthLimitExceededError: Exception raised when depth limit exceeded

Python 3.13+.
"""

from .depth_guard import DepthGuard, DepthLimitExceededError

__all__ = ["DepthGuard", "DepthLimitExceededError"]

"""Toolbox for multi-threaded programs: scoped locks, thread-local storage, visitor results, text and type helpers."""

__version__ = "1.17.0"
__all__ = ["locks", "text", "tls", "types", "visitor"]
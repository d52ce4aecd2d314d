"""A lock that a thread cannot take twice, with a context-manager guard."""

__all__ = ["sync"]
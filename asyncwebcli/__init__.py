"""A line-oriented command interpreter and a small thread lock."""

__version__ = "1.0.9"
__all__ = ["cli", "web"]
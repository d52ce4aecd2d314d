"""Parse text into commands with named, positional and flag arguments."""

__all__ = ["argument", "command", "comparator", "errors", "parser", "simplecli"]
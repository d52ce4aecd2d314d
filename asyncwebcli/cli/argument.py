"""Command arguments: named, positional and flag arguments with defaults."""

from __future__ import annotations

import enum

from asyncwebcli.cli.comparator import compare


class ArgumentType(enum.Enum):
    """How an argument is given on the command line."""

    NORMAL = 0
    POSITIONAL = 1
    FLAG = 2


class UnclosedQuoteError(ValueError):
    """Raised when an argument value opens a quote that is never closed."""


def _unquote(raw: str) -> str:
    """Drop unescaped quotes and escaping backslashes from ``raw``."""
    chars: list[str] = []
    escaped = False
    quoted = False
    for ch in raw:
        if ch == "\\" and not escaped:
            escaped = True
        elif ch == '"' and not escaped:
            quoted = not quoted
        else:
            chars.append(ch)
            escaped = False
    if quoted:
        raise UnclosedQuoteError(f"unclosed quote in {raw!r}")
    return "".join(chars)


class Argument:
    """One argument of a command, with its parsed value or its default."""

    def __init__(
        self,
        name: str | None,
        default: str | None = None,
        arg_type: ArgumentType = ArgumentType.NORMAL,
        required: bool = False,
    ) -> None:
        self.name = name
        self.default = default
        self.type = arg_type
        self._required = required
        self._value: str | None = None
        self.is_set = False

    @classmethod
    def optional(cls, name: str | None, default: str | None = None) -> Argument:
        """A ``-name value`` argument that falls back to ``default``."""
        return cls(name, default, ArgumentType.NORMAL, required=False)

    @classmethod
    def required(cls, name: str | None) -> Argument:
        """A ``-name value`` argument that must be given."""
        return cls(name, None, ArgumentType.NORMAL, required=True)

    @classmethod
    def optional_positional(cls, name: str | None, default: str | None = None) -> Argument:
        """A positional argument that falls back to ``default``."""
        return cls(name, default, ArgumentType.POSITIONAL, required=False)

    @classmethod
    def required_positional(cls, name: str | None) -> Argument:
        """A positional argument that must be given."""
        return cls(name, None, ArgumentType.POSITIONAL, required=True)

    @classmethod
    def flag(cls, name: str | None, default: str | None = "") -> Argument:
        """A ``-name`` switch without a value."""
        return cls(name, default, ArgumentType.FLAG, required=False)

    @property
    def value(self) -> str:
        """The parsed value, else the default, else ``""``."""
        if self._value is not None:
            return self._value
        if self.default is not None:
            return self.default
        return ""

    @property
    def is_required(self) -> bool:
        return self._required

    @property
    def is_optional(self) -> bool:
        return not self._required

    def set_value(self, raw: str | None) -> None:
        """Set the value from raw input, removing quotes and escapes.

        An empty or missing ``raw`` only marks the argument as set.
        Raises :class:`UnclosedQuoteError` if a quote is left open; the
        argument is then left unset.
        """
        if raw:
            if self.is_set:
                self.reset()
            self._value = _unquote(raw)
        self.is_set = True

    def reset(self) -> None:
        """Forget the parsed value."""
        self._value = None
        self.is_set = False

    def copy(self) -> Argument:
        """Return an independent copy, value included."""
        other = Argument(self.name, self.default, self.type, self._required)
        other.is_set = self.is_set
        if self._value is not None:
            other._value = self._value
            other.is_set = True
        return other

    def name_equals(self, name: str | None, case_sensitive: bool = False) -> bool:
        """Return True if ``name`` matches this argument's name template."""
        if name is None:
            return False
        return compare(name, self.name, case_sensitive)

    def matches(self, other: Argument, case_sensitive: bool = False) -> bool:
        """Return True if ``other`` is this argument or has a matching name."""
        if other is self:
            return True
        return compare(other.name, self.name, case_sensitive)

    def __str__(self) -> str:
        name = self.name or ""
        if self.type is ArgumentType.FLAG:
            text = f"-{name}"
        else:
            shown = self.value or "value"
            text = f"-{name} <{shown}>"
        if self.is_optional:
            return f"[{text}]"
        return text

    def __repr__(self) -> str:
        return (
            f"Argument(name={self.name!r}, default={self.default!r}, "
            f"type={self.type.name}, required={self._required}, value={self._value!r})"
        )
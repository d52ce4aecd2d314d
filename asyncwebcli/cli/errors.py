"""Errors reported while matching input lines against commands."""

from __future__ import annotations

import enum
from typing import Any


class ErrorType(enum.IntEnum):
    """Kinds of parse result, ordered by how far parsing got."""

    NULL_POINTER = -2
    EMPTY_LINE = -1
    PARSE_SUCCESSFUL = 0
    COMMAND_NOT_FOUND = 1
    UNKNOWN_ARGUMENT = 2
    MISSING_ARGUMENT = 3
    MISSING_ARGUMENT_VALUE = 4
    UNCLOSED_QUOTE = 5


_MESSAGES = {
    ErrorType.NULL_POINTER: "NULL Pointer",
    ErrorType.EMPTY_LINE: "Empty input",
    ErrorType.PARSE_SUCCESSFUL: "No error",
    ErrorType.COMMAND_NOT_FOUND: "Command not found",
    ErrorType.UNKNOWN_ARGUMENT: "Unknown argument",
    ErrorType.MISSING_ARGUMENT: "Missing argument",
    ErrorType.MISSING_ARGUMENT_VALUE: "Missing argument value",
    ErrorType.UNCLOSED_QUOTE: "Unclosed quote",
}


class CommandError:
    """The outcome of parsing one line: its kind and where it happened.

    ``command`` is the command that was being parsed (anything with a
    ``name``), ``argument`` the argument concerned and ``data`` the piece
    of input the error refers to. A successful result is falsy.
    """

    def __init__(
        self,
        error_type: ErrorType,
        command: Any = None,
        argument: Any = None,
        data: str | None = None,
    ) -> None:
        self.error_type = ErrorType(error_type)
        self.command = command
        self.argument = argument
        self.data = data or None

    @property
    def has_command(self) -> bool:
        return self.command is not None

    @property
    def has_argument(self) -> bool:
        return self.argument is not None

    @property
    def has_data(self) -> bool:
        return self.data is not None

    @property
    def message(self) -> str:
        """A short human-readable description of the error kind."""
        return _MESSAGES[self.error_type]

    def __str__(self) -> str:
        parts = [self.message]
        if self.has_command:
            parts.append(f" at command '{self.command.name}'")
        if self.has_argument:
            parts.append(f" at argument '{self.argument}'")
        if self.has_data:
            parts.append(f" at '{self.data}'")
        return "".join(parts)

    def __repr__(self) -> str:
        return (
            f"CommandError({self.error_type.name}, command={self.command!r}, "
            f"argument={self.argument!r}, data={self.data!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CommandError):
            return NotImplemented
        return (
            self.error_type == other.error_type
            and self.command is other.command
            and self.argument is other.argument
            and self.data == other.data
        )

    def __hash__(self) -> int:
        return hash((self.error_type, id(self.command), id(self.argument), self.data))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CommandError):
            return NotImplemented
        return self.error_type < other.error_type

    def __le__(self, other: object) -> bool:
        if not isinstance(other, CommandError):
            return NotImplemented
        return self.error_type <= other.error_type

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, CommandError):
            return NotImplemented
        return self.error_type > other.error_type

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, CommandError):
            return NotImplemented
        return self.error_type >= other.error_type

    def __bool__(self) -> bool:
        return self.error_type != ErrorType.PARSE_SUCCESSFUL
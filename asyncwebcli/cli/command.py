"""Commands: a name template with arguments, matched against input lines."""

from __future__ import annotations

import contextlib
import enum
from collections.abc import Callable, Iterator

from asyncwebcli.cli.argument import Argument, ArgumentType, UnclosedQuoteError
from asyncwebcli.cli.comparator import compare
from asyncwebcli.cli.errors import CommandError, ErrorType
from asyncwebcli.cli.parser import Line


class CommandType(enum.Enum):
    """How a command takes its arguments."""

    NORMAL = 0
    BOUNDLESS = 1
    SINGLE = 2


class Command:
    """A command with its arguments, description and optional callback.

    A ``NORMAL`` command takes declared named, positional and flag
    arguments. A ``BOUNDLESS`` command turns every word after its name
    into a positional argument. A ``SINGLE`` command keeps the rest of
    the line as one value.
    """

    def __init__(self, name: str, command_type: CommandType = CommandType.NORMAL) -> None:
        if name is None:
            raise ValueError("a command needs a name")
        self.name = name
        self.type = CommandType(command_type)
        self.case_sensitive = False
        self.callback: Callable[[Command], None] | None = None
        self.description: str | None = None
        self._args: list[Argument] = []
        if self.type is CommandType.SINGLE:
            self._args.append(Argument.optional_positional(None, None))

    def _add(self, argument: Argument) -> Argument:
        if self.type is not CommandType.NORMAL:
            raise ValueError(f"arguments can only be added to normal commands, not {self.type.name}")
        self._args.append(argument)
        return argument

    def add_arg(self, name: str, default: str | None = None) -> Argument:
        """Add a ``-name value`` argument; without a default it is required."""
        if default is None:
            return self._add(Argument.required(name))
        return self._add(Argument.optional(name, default))

    def add_pos_arg(self, name: str, default: str | None = None) -> Argument:
        """Add a positional argument; without a default it is required."""
        if default is None:
            return self._add(Argument.required_positional(name))
        return self._add(Argument.optional_positional(name, default))

    def add_flag_arg(self, name: str, default: str = "") -> Argument:
        """Add a ``-name`` switch."""
        return self._add(Argument.flag(name, default))

    def name_equals(self, name: str | None) -> bool:
        """Return True if ``name`` matches this command's name template."""
        if name is None:
            return False
        return compare(name, self.name, self.case_sensitive)

    def get_argument(self, key: int | str | Argument) -> Argument | None:
        """Look an argument up by position, by name or by another argument's name."""
        if isinstance(key, Argument):
            key = key.name
            if key is None:
                return None
        if isinstance(key, int):
            if 0 <= key < len(self._args):
                return self._args[key]
            return None
        if key is None:
            return None
        return next(
            (arg for arg in self._args if arg.name_equals(key, self.case_sensitive)),
            None,
        )

    def __len__(self) -> int:
        return len(self._args)

    def __iter__(self) -> Iterator[Argument]:
        return iter(self._args)

    def _success(self) -> CommandError:
        return CommandError(ErrorType.PARSE_SUCCESSFUL, self)

    def parse(self, line: Line) -> CommandError:
        """Match ``line`` against this command and fill in its arguments.

        Returns a :class:`CommandError`, which is falsy on success.
        """
        words = line.words
        if not words:
            return CommandError(ErrorType.EMPTY_LINE, self)

        name, rest = words[0], words[1:]
        if not compare(name, self.name, self.case_sensitive):
            return CommandError(ErrorType.COMMAND_NOT_FOUND, self, data=name)

        if self.type is CommandType.BOUNDLESS:
            self._args = []
            for word in rest:
                argument = Argument.required_positional(None)
                with contextlib.suppress(UnclosedQuoteError):
                    argument.set_value(word)
                self._args.append(argument)
            return self._success()

        if self.type is CommandType.SINGLE:
            if not self._args:
                self._args.append(Argument.optional_positional(None, None))
            if rest:
                start = line.offsets[1]
                length = len(line.text) - len(name) - 1
                with contextlib.suppress(UnclosedQuoteError):
                    self._args[0].set_value(line.text[start:start + length])
            return self._success()

        index = 0
        while index < len(rest):
            word = rest[index]
            is_named = word.startswith("-")
            argument = next(
                (
                    arg
                    for arg in self._args
                    if not arg.is_set
                    and (
                        (not is_named and arg.type is ArgumentType.POSITIONAL)
                        or (is_named and compare(word[1:], arg.name, self.case_sensitive))
                    )
                ),
                None,
            )
            if argument is None:
                return CommandError(ErrorType.UNKNOWN_ARGUMENT, self, data=word)

            if argument.type is ArgumentType.FLAG:
                argument.set_value(None)
            elif argument.type is ArgumentType.POSITIONAL and not is_named:
                with contextlib.suppress(UnclosedQuoteError):
                    argument.set_value(word)
            else:
                if index + 1 >= len(rest):
                    return CommandError(ErrorType.MISSING_ARGUMENT, self, argument)
                value = rest[index + 1]
                try:
                    argument.set_value(value)
                except UnclosedQuoteError:
                    return CommandError(ErrorType.UNCLOSED_QUOTE, self, argument, value)
                index += 1
            index += 1

        for argument in self._args:
            if argument.is_required and not argument.is_set:
                return CommandError(ErrorType.MISSING_ARGUMENT, self, argument)

        return self._success()

    def reset(self) -> None:
        """Forget parsed values; a boundless command drops its arguments."""
        if self.type is CommandType.BOUNDLESS:
            self._args = []
        else:
            for argument in self._args:
                argument.reset()

    def copy(self) -> Command:
        """Return an independent copy, parsed values included."""
        other = Command.__new__(Command)
        other.name = self.name
        other.type = self.type
        other.case_sensitive = self.case_sensitive
        other.callback = self.callback
        other.description = self.description
        other._args = [argument.copy() for argument in self._args]
        return other

    def run(self) -> None:
        """Call the callback, if there is one, with this command."""
        if self.callback is not None:
            self.callback(self)

    def to_string(self, description: bool = True) -> str:
        """Usage line, followed by the description if asked for and present."""
        parts = [self.name]
        if self.type is CommandType.BOUNDLESS:
            parts.append(" <value> <value> ...")
        elif self.type is CommandType.SINGLE:
            parts.append(" <...>")
        else:
            parts.extend(f" {argument}" for argument in self._args)
        if description and self.description:
            parts.append("\r\n" + self.description)
        return "".join(parts)

    def __str__(self) -> str:
        return self.to_string(True)

    def __repr__(self) -> str:
        return f"Command(name={self.name!r}, type={self.type.name}, args={self._args!r})"
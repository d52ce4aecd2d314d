"""The command-line front end: registered commands, parsing and queues."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable
from typing import TypeVar

from asyncwebcli.cli.command import Command, CommandType
from asyncwebcli.cli.errors import CommandError, ErrorType
from asyncwebcli.cli.parser import parse_lines

CommandCallback = Callable[[Command], None]
ErrorCallback = Callable[[CommandError], None]

_T = TypeVar("_T")


def _push(queue: deque[_T], item: _T, max_size: int) -> None:
    """Append to a bounded queue; the oldest entry goes once it overflows."""
    if max_size < 1:
        queue.clear()
        return
    had = len(queue)
    queue.append(item)
    if had > max_size:
        queue.popleft()


class SimpleCLI:
    """Matches input lines against registered commands.

    A matched command with a callback runs straight away; one without is
    queued (as a copy holding its values) for :meth:`pop_command`. Lines
    that name a command but are otherwise wrong, and lines that match no
    command, produce a :class:`CommandError` that goes to the error
    callback, or to the error queue if there is none.
    """

    def __init__(self, command_queue_size: int = 10, error_queue_size: int = 10) -> None:
        self.command_queue_size = command_queue_size
        self.error_queue_size = error_queue_size
        self.case_sensitive = False
        self._commands: list[Command] = []
        self._command_queue: deque[Command] = deque()
        self._error_queue: deque[CommandError] = deque()
        self._on_error: ErrorCallback | None = None

    def _report(self, error: CommandError) -> None:
        if self._on_error is not None:
            self._on_error(error)
        else:
            _push(self._error_queue, error, self.error_queue_size)

    def parse(self, text: str) -> None:
        """Parse every line of ``text`` and dispatch the results."""
        for line in parse_lines(text):
            success = False
            errored = False
            for command in self._commands:
                result = command.parse(line)
                if result.error_type == ErrorType.PARSE_SUCCESSFUL:
                    if command.callback is not None:
                        command.run()
                    else:
                        _push(self._command_queue, command.copy(), self.command_queue_size)
                    success = True
                elif result.error_type > ErrorType.COMMAND_NOT_FOUND:
                    self._report(result)
                    errored = True
                command.reset()
                if success or errored:
                    break

            if not success and not errored:
                first = line.words[0] if line.words else None
                self._report(CommandError(ErrorType.COMMAND_NOT_FOUND, None, data=first))

    def available(self) -> bool:
        """True if a parsed command is waiting in the queue."""
        return bool(self._command_queue)

    def errored(self) -> bool:
        """True if an error is waiting in the queue."""
        return bool(self._error_queue)

    def command_count(self) -> int:
        return len(self._command_queue)

    def error_count(self) -> int:
        return len(self._error_queue)

    def pop_command(self) -> Command | None:
        """Take the oldest parsed command, or None if there is none."""
        return self._command_queue.popleft() if self._command_queue else None

    def pop_error(self) -> CommandError | None:
        """Take the oldest error, or None if there is none."""
        return self._error_queue.popleft() if self._error_queue else None

    def find_command(self, name: str | None) -> Command | None:
        """Return the registered command whose name template matches ``name``."""
        if name is None:
            return None
        return next((command for command in self._commands if command.name_equals(name)), None)

    def _register(self, name: str, command_type: CommandType, callback: CommandCallback | None) -> Command:
        command = Command(name, command_type)
        if callback is not None:
            command.callback = callback
        command.case_sensitive = self.case_sensitive
        self._commands.append(command)
        return command

    def add_command(self, name: str, callback: CommandCallback | None = None) -> Command:
        """Register a command with declared arguments."""
        return self._register(name, CommandType.NORMAL, callback)

    def add_boundless_command(self, name: str, callback: CommandCallback | None = None) -> Command:
        """Register a command that takes any number of positional values."""
        return self._register(name, CommandType.BOUNDLESS, callback)

    def add_single_argument_command(self, name: str, callback: CommandCallback | None = None) -> Command:
        """Register a command that takes the rest of the line as one value."""
        return self._register(name, CommandType.SINGLE, callback)

    def set_case_sensitive(self, case_sensitive: bool = True) -> None:
        """Set case sensitivity for all commands, present and future."""
        self.case_sensitive = case_sensitive
        for command in self._commands:
            command.case_sensitive = case_sensitive

    def set_on_error(self, callback: ErrorCallback | None) -> None:
        """Send errors to ``callback`` instead of the error queue."""
        self._on_error = callback

    def to_string(self, descriptions: bool = True) -> str:
        """Usage of all registered commands, one block per command."""
        parts: list[str] = []
        for command in self._commands:
            parts.append(command.to_string(descriptions))
            if descriptions:
                parts.append("\r\n")
            parts.append("\r\n")
        return "".join(parts)

    def __str__(self) -> str:
        return self.to_string(True)
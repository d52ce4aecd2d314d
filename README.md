# asyncwebcli

A line-oriented command interpreter (`asyncwebcli.cli`) and a small
thread lock with a context-manager guard (`asyncwebcli.web.sync`).

It has no dependencies beyond the standard library.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command interpreter

Register commands on a `SimpleCLI`, feed it raw text with `parse`, and
either let callbacks run or collect parsed commands and errors from its
queues.

```python
from asyncwebcli.cli.simplecli import SimpleCLI

cli = SimpleCLI()

ping = cli.add_command("ping")
ping.add_arg("host", "localhost")
ping.add_flag_arg("verbose")

cli.parse("ping -host example.com -verbose")

while cli.available():
    command = cli.pop_command()
    print(command.get_argument("host").value)      # example.com
    print(command.get_argument("verbose").is_set)  # True

cli.parse("pong")
if cli.errored():
    print(cli.pop_error())                          # Command not found at 'pong'
```

### Input

- Several commands may be given at once, separated by line breaks or by
  `;;` (outside quotes).
- Words are split on spaces. A value may be quoted with `"` to keep its
  spaces, and a character may be escaped with `\`; quotes and escaping
  backslashes are removed from argument values.
- The lower-level splitting is available as
  `asyncwebcli.cli.parser.parse_lines` (returning `Line` objects) and
  `parse_words`.

### Commands and arguments

`SimpleCLI` offers three kinds of command:

- `add_command(name, callback=None)` — a command with declared arguments:
  - `add_arg(name, default=None)` — a `-name value` argument, required when
    there is no default;
  - `add_pos_arg(name, default=None)` — a positional argument, required
    when there is no default;
  - `add_flag_arg(name, default="")` — a `-name` switch.
- `add_boundless_command(name, callback=None)` — every word after the name
  becomes a positional value.
- `add_single_argument_command(name, callback=None)` — the rest of the line
  is kept as one value, available as `command.get_argument(0).value`.

Adding arguments to a boundless or single-argument command raises
`ValueError`.

A `Command` can be iterated over its `Argument`s, has a length, and looks
arguments up with `get_argument` by position, by name, or by another
argument. Each `Argument` has `name`, `value` (the parsed value, else the
default, else `""`), `is_set`, `is_required` and `is_optional`.

Command and argument names are templates: `,` separates alternatives and
`/` marks where an abbreviation may stop. A command named `reboot,restart`
answers to both words, and `conn/ect` answers to `conn` and `connect`.
Matching ignores ASCII case unless `set_case_sensitive(True)` is called; the
matcher itself is `asyncwebcli.cli.comparator.compare`.

`find_command(name)` returns a registered command by name, and
`to_string(descriptions=True)` renders a usage summary of all commands,
for example `ping [-host <localhost>] [-verbose]`. Set a command's
`description` to have it included.

### Callbacks and queues

A command registered with a callback is run with the parsed `Command` as
soon as a line matches it. Otherwise a copy holding the parsed values is
queued; use `available()`, `command_count()` and `pop_command()`.

Errors are `CommandError` objects: they carry an `error_type`
(`ErrorType.COMMAND_NOT_FOUND`, `UNKNOWN_ARGUMENT`, `MISSING_ARGUMENT`,
`UNCLOSED_QUOTE`, …), the `command`, `argument` and `data` involved, a
`message`, and a readable `str()`. They are queued (`errored()`,
`error_count()`, `pop_error()`) unless a handler is set with
`set_on_error(callback)`.

Both queues are bounded by the `command_queue_size` and `error_queue_size`
given to `SimpleCLI` (10 each by default) and drop their oldest entries
when they overflow.

## Lock

```python
from asyncwebcli.web.sync import WebLock, WebLockGuard

lock = WebLock()
with WebLockGuard(lock) as guard:
    ...  # guard.acquired is False if this thread already held the lock
```

`WebLock.lock()` waits for the lock and returns `True`, or returns `False`
straight away if the calling thread already holds it. `WebLockGuard`
releases the lock on leaving the block only if it was the one that took it.

## What this package does not do

The `asyncwebcli.web` subpackage holds only the lock above. There is no
HTTP server, no request routing or handlers, and no response objects:
nothing here listens on a network or speaks HTTP.
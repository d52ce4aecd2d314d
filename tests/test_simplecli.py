from asyncwebcli.cli.errors import ErrorType
from asyncwebcli.cli.simplecli import SimpleCLI


def test_parsed_command_is_queued():
    cli = SimpleCLI()
    cli.add_command("ping")
    cli.parse("ping")
    assert cli.available()
    assert cli.command_count() == 1
    command = cli.pop_command()
    assert command.name == "ping"
    assert not cli.available()


def test_callback_runs_instead_of_queueing():
    seen = []
    cli = SimpleCLI()
    cli.add_command("ping", lambda c: seen.append(c.name))
    cli.parse("ping")
    assert seen == ["ping"]
    assert cli.command_count() == 0


def test_unknown_command_reports_not_found():
    cli = SimpleCLI()
    cli.add_command("ping")
    cli.parse("foo bar")
    assert cli.errored()
    error = cli.pop_error()
    assert error.error_type == ErrorType.COMMAND_NOT_FOUND
    assert error.data == "foo"
    assert error.command is None


def test_missing_argument_is_reported():
    cli = SimpleCLI()
    cmd = cli.add_command("set")
    cmd.add_arg("v")
    cli.parse("set")
    error = cli.pop_error()
    assert error.error_type == ErrorType.MISSING_ARGUMENT
    assert error.command is cmd
    assert cli.command_count() == 0


def test_on_error_callback_takes_errors():
    errors = []
    cli = SimpleCLI()
    cli.set_on_error(errors.append)
    cli.parse("nothing")
    assert [e.error_type for e in errors] == [ErrorType.COMMAND_NOT_FOUND]
    assert cli.error_count() == 0


def test_queue_is_first_in_first_out():
    cli = SimpleCLI()
    cli.add_command("a")
    cli.add_command("b")
    cli.parse("a;;b\nb")
    names = [cli.pop_command().name for _ in range(cli.command_count())]
    assert names == ["a", "b", "b"]


def test_popped_copy_keeps_value_while_registered_command_resets():
    cli = SimpleCLI()
    cmd = cli.add_command("set")
    cmd.add_arg("v")
    cli.parse("set -v 5")
    popped = cli.pop_command()
    assert popped.get_argument("v").value == "5"
    assert not cli.find_command("set").get_argument("v").is_set


def test_queue_size_zero_keeps_nothing():
    cli = SimpleCLI(command_queue_size=0)
    cli.add_command("ping")
    cli.parse("ping\nping")
    assert cli.command_count() == 0


def test_queue_drops_oldest_when_full():
    cli = SimpleCLI(command_queue_size=2)
    cmd = cli.add_command("n")
    cmd.add_pos_arg("x")
    cli.parse("n 1\nn 2\nn 3\nn 4\nn 5")
    values = [cli.pop_command().get_argument("x").value for _ in range(cli.command_count())]
    assert values[-1] == "5"
    assert values == sorted(values)
    assert len(values) == 3


def test_case_sensitivity():
    cli = SimpleCLI()
    cli.add_command("ping")
    cli.parse("PING")
    assert cli.command_count() == 1
    cli.set_case_sensitive(True)
    cli.parse("PING")
    assert cli.pop_error().error_type == ErrorType.COMMAND_NOT_FOUND


def test_blank_line_reports_not_found_without_data():
    cli = SimpleCLI()
    cli.add_command("ping")
    cli.parse("   ")
    error = cli.pop_error()
    assert error.error_type == ErrorType.COMMAND_NOT_FOUND
    assert error.data is None


def test_empty_input_does_nothing():
    cli = SimpleCLI()
    cli.add_command("ping")
    cli.parse("")
    assert not cli.available()
    assert not cli.errored()


def test_pop_from_empty_queues():
    cli = SimpleCLI()
    assert cli.pop_command() is None
    assert cli.pop_error() is None


def test_find_command_uses_template():
    cli = SimpleCLI()
    cmd = cli.add_command("ping,p")
    assert cli.find_command("p") is cmd
    assert cli.find_command("q") is None
    assert cli.find_command(None) is None


def test_boundless_and_single_commands():
    cli = SimpleCLI()
    cli.add_boundless_command("sum")
    cli.add_single_argument_command("say")
    cli.parse("sum 1 2 3\nsay hello world")
    total = cli.pop_command()
    assert [a.value for a in total] == ["1", "2", "3"]
    said = cli.pop_command()
    assert said.get_argument(0).value == "hello world"


def test_to_string_with_descriptions():
    cli = SimpleCLI()
    cmd = cli.add_command("ping")
    cmd.description = "Pong"
    assert cli.to_string(True) == "ping\r\nPong\r\n\r\n"
    assert cli.to_string(False) == "ping\r\n"
import io

from hshell.output import not_found_message, write_not_found, write_prompt


def test_prompt_written_when_interactive():
    out = io.StringIO()
    write_prompt(out, True)
    assert out.getvalue() == "$ "


def test_prompt_omitted_when_not_interactive():
    out = io.StringIO()
    write_prompt(out, False)
    assert out.getvalue() == ""


def test_interactive_message_prefix():
    message = not_found_message("frob", 3, True)
    assert message.startswith("hsh: ")
    assert not message.startswith("./hsh")


def test_non_interactive_message_prefix():
    message = not_found_message("frob", 3, False)
    assert message.startswith("./hsh: ")
    assert message.endswith(": not found\n")


def test_message_carries_counter_and_command():
    message = not_found_message("frob", 42, False)
    assert ": 42: frob: " in message
    assert "-3" in not_found_message("frob", -3, True)


def test_write_not_found_returns_status_and_writes_message():
    err = io.StringIO()
    status = write_not_found(err, "frob", 7, False)
    assert status == 127
    assert err.getvalue() == not_found_message("frob", 7, False)
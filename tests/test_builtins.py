import io

import pytest

from hshell.builtins import ExitRequested, is_builtin, run_builtin


def test_is_builtin():
    assert is_builtin("exit") is True
    assert is_builtin("env") is True
    assert is_builtin("ls") is False


def test_exit_raises_with_current_status():
    with pytest.raises(ExitRequested) as info:
        run_builtin(["exit"], 5, {}, io.StringIO())
    assert info.value.status == 5


def test_exit_ignores_extra_arguments():
    with pytest.raises(ExitRequested) as info:
        run_builtin(["exit", "9"], 2, {}, io.StringIO())
    assert info.value.status == 2


def test_non_builtin_not_handled():
    out = io.StringIO()
    assert run_builtin(["ls", "-l"], 0, {"A": "1"}, out) is False
    assert out.getvalue() == ""


def test_env_prints_environment():
    out = io.StringIO()
    assert run_builtin(["env"], 0, {"A": "1", "B": "two"}, out) is True
    lines = out.getvalue().splitlines()
    assert "A=1" in lines
    assert "B=two" in lines
    assert len(lines) == 2


def test_env_without_environment_prints_nothing():
    out = io.StringIO()
    assert run_builtin(["env"], 0, None, out) is True
    assert out.getvalue() == ""
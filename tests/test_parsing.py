from hshell.parsing import split_arguments


def test_splits_simple_command():
    assert split_arguments("ls -l /tmp\n") == ["ls", "-l", "/tmp"]


def test_blank_input_has_no_arguments():
    assert split_arguments("\t  \r\n") == []
    assert split_arguments("") == []


def test_runs_of_separators_collapse():
    assert split_arguments("  echo\t\thello \r world  ") == ["echo", "hello", "world"]


def test_other_whitespace_is_kept():
    assert split_arguments("a\vb c\fd") == ["a\vb", "c\fd"]


def test_rejoining_round_trip():
    words = ["cat", "file.txt", "-n"]
    assert split_arguments(" ".join(words) + "\n") == words
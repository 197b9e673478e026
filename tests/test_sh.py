import os

import pytest

from xv6util.sh import (
    BackCmd,
    ExecCmd,
    ListCmd,
    PipeCmd,
    RedirCmd,
    ShellSyntaxError,
    parse_cmd,
)


def test_simple_exec():
    assert parse_cmd("echo hi\n") == ExecCmd(["echo", "hi"])


def test_empty_line():
    assert parse_cmd("   \n") == ExecCmd([])


def test_redirections_nest_in_order():
    cmd = parse_cmd("cat < in > out")
    assert cmd == RedirCmd(
        RedirCmd(ExecCmd(["cat"]), "in", os.O_RDONLY, 0),
        "out",
        os.O_WRONLY | os.O_CREAT | os.O_TRUNC,
        1,
    )


def test_append_redirection():
    cmd = parse_cmd("echo x >> log")
    assert cmd == RedirCmd(ExecCmd(["echo", "x"]), "log", os.O_WRONLY | os.O_CREAT, 1)


def test_redirection_before_arguments():
    cmd = parse_cmd("<in wc -l")
    assert cmd == RedirCmd(ExecCmd(["wc", "-l"]), "in", os.O_RDONLY, 0)


def test_pipe_is_right_associative():
    cmd = parse_cmd("a | b | c")
    assert cmd == PipeCmd(ExecCmd(["a"]), PipeCmd(ExecCmd(["b"]), ExecCmd(["c"])))


def test_list_and_background():
    cmd = parse_cmd("a & ; b")
    assert cmd == ListCmd(BackCmd(ExecCmd(["a"])), ExecCmd(["b"]))


def test_double_background():
    assert parse_cmd("a&&") == BackCmd(BackCmd(ExecCmd(["a"])))


def test_block_with_redirection():
    cmd = parse_cmd("(a; b) > f")
    assert cmd == RedirCmd(
        ListCmd(ExecCmd(["a"]), ExecCmd(["b"])),
        "f",
        os.O_WRONLY | os.O_CREAT | os.O_TRUNC,
        1,
    )


def test_words_split_on_symbols():
    assert parse_cmd("ls|wc") == PipeCmd(ExecCmd(["ls"]), ExecCmd(["wc"]))


def test_leftovers():
    with pytest.raises(ShellSyntaxError, match="leftovers"):
        parse_cmd("a )")


def test_missing_close_paren():
    with pytest.raises(ShellSyntaxError, match="missing \\)"):
        parse_cmd("(a")


def test_missing_redirection_file():
    with pytest.raises(ShellSyntaxError, match="missing file"):
        parse_cmd("a >")


def test_too_many_args():
    with pytest.raises(ShellSyntaxError, match="too many args"):
        parse_cmd(" ".join(["x"] * 10))
    assert parse_cmd(" ".join(["x"] * 9)) == ExecCmd(["x"] * 9)


def test_unexpected_paren_in_arguments():
    with pytest.raises(ShellSyntaxError, match="syntax"):
        parse_cmd("echo (")
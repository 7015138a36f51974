import pytest

from xvtools.shell import (
    BackCmd,
    ExecCmd,
    ListCmd,
    PipeCmd,
    RedirCmd,
    RedirMode,
    ShellSyntaxError,
    parse_command,
    tokenize,
)


def test_tokenize_kinds():
    tokens = tokenize("ls | wc > out")
    assert [kind for kind, _ in tokens] == ["word", "|", "word", ">", "word"]
    assert [text for _, text in tokens] == ["ls", "|", "wc", ">", "out"]


def test_tokenize_append_and_symbols():
    tokens = tokenize("a>>b;(c)&")
    assert [text for _, text in tokens] == ["a", ">>", "b", ";", "(", "c", ")", "&"]
    assert tokens[1][0] == ">>"


def test_tokenize_skips_whitespace():
    assert tokenize(" \t echo\vhi\r\n") == [("word", "echo"), ("word", "hi")]


def test_tokenize_empty():
    assert tokenize("   ") == []


def test_simple_exec():
    assert parse_command("echo hi\n") == ExecCmd(["echo", "hi"])


def test_empty_line():
    assert parse_command("\n") == ExecCmd([])


def test_redirections_nest_in_order():
    cmd = parse_command("cat < in > out")
    assert cmd == RedirCmd(
        RedirCmd(ExecCmd(["cat"]), "in", RedirMode.READ, 0),
        "out",
        RedirMode.WRITE,
        1,
    )


def test_append_redirection():
    cmd = parse_command("echo x >> log")
    assert cmd == RedirCmd(ExecCmd(["echo", "x"]), "log", RedirMode.APPEND, 1)


def test_redirection_before_arguments_collects_arguments():
    cmd = parse_command("< in cat -n")
    assert isinstance(cmd, RedirCmd)
    assert cmd.cmd == ExecCmd(["cat", "-n"])


def test_pipe_is_right_associative():
    cmd = parse_command("a | b | c")
    assert cmd == PipeCmd(ExecCmd(["a"]), PipeCmd(ExecCmd(["b"]), ExecCmd(["c"])))


def test_list():
    assert parse_command("a ; b") == ListCmd(ExecCmd(["a"]), ExecCmd(["b"]))


def test_background():
    assert parse_command("a &") == BackCmd(ExecCmd(["a"]))


def test_background_then_list():
    cmd = parse_command("a & ; b")
    assert cmd == ListCmd(BackCmd(ExecCmd(["a"])), ExecCmd(["b"]))


def test_block_with_redirection():
    cmd = parse_command("(a ; b) > f")
    assert cmd == RedirCmd(
        ListCmd(ExecCmd(["a"]), ExecCmd(["b"])), "f", RedirMode.WRITE, 1
    )


def test_missing_redirection_file():
    with pytest.raises(ShellSyntaxError, match="missing file for redirection"):
        parse_command("echo >")


def test_redirection_to_symbol():
    with pytest.raises(ShellSyntaxError, match="missing file for redirection"):
        parse_command("echo > |")


def test_missing_close_paren():
    with pytest.raises(ShellSyntaxError, match="missing \\)"):
        parse_command("(a ; b")


def test_too_many_args():
    with pytest.raises(ShellSyntaxError, match="too many args"):
        parse_command("a b c d e f g h i j")


def test_nine_args_allowed():
    words = "a b c d e f g h i".split()
    assert parse_command(" ".join(words)) == ExecCmd(words)


def test_leftovers():
    with pytest.raises(ShellSyntaxError) as info:
        parse_command("a ) b")
    assert info.value.leftovers == ") b"


def test_background_followed_by_word_is_leftover():
    with pytest.raises(ShellSyntaxError) as info:
        parse_command("a & b")
    assert info.value.leftovers == "b"


def test_paren_inside_arguments():
    with pytest.raises(ShellSyntaxError, match="syntax"):
        parse_command("a (")


def test_nul_ends_line():
    assert parse_command("echo hi\0 | wc") == ExecCmd(["echo", "hi"])
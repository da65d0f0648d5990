import io

import pytest

from compilerlab.listparser import ListSyntaxError, main, parse_list


@pytest.mark.parametrize("text", ["a", "(a)", "(a,a)", "(a,(a,a))", "((a),a,(a,(a)))"])
def test_valid_lists_parse(text):
    assert parse_list(text) is None


@pytest.mark.parametrize("text", ["(a", "(a,", "(a,(a)", "((a,a)"])
def test_unfinished_input_fails_at_end(text):
    with pytest.raises(ListSyntaxError) as info:
        parse_list(text)
    assert info.value.position == len(text)


@pytest.mark.parametrize("text", ["", "b", ")", ",a"])
def test_bad_start_fails_at_zero(text):
    with pytest.raises(ListSyntaxError) as info:
        parse_list(text)
    assert info.value.position == 0


@pytest.mark.parametrize("valid", ["a", "(a,a)"])
def test_trailing_input_fails_after_valid_prefix(valid):
    with pytest.raises(ListSyntaxError) as info:
        parse_list(valid + "a")
    assert info.value.position == len(valid)


def test_space_is_not_allowed():
    with pytest.raises(ListSyntaxError) as info:
        parse_list("(a, a)")
    assert info.value.position == "(a, a)".index(" ")


def test_error_message():
    with pytest.raises(ListSyntaxError, match="Error at position"):
        parse_list("x")


def test_main_success(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("(a,(a,a))\n"))
    assert main() == 0
    assert "String is successfully parsed." in capsys.readouterr().out


def test_main_failure(monkeypatch, capsys):
    text = "(a,a"
    monkeypatch.setattr("sys.stdin", io.StringIO(text + "\n"))
    assert main() == 1
    assert f"Error at position {len(text)}" in capsys.readouterr().out
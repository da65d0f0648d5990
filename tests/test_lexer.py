import io

import pytest

from compilerlab.lexer import KEYWORDS, ScanResult, WordKind, classify_word, main, scan


@pytest.mark.parametrize("word", sorted(KEYWORDS))
def test_keywords_are_classified(word):
    assert classify_word(word) is WordKind.KEYWORD


@pytest.mark.parametrize("word", ["main", "x", "_tmp", "For", "integer"])
def test_other_words_are_identifiers(word):
    assert classify_word(word) is WordKind.IDENTIFIER


def test_scan_splits_tokens():
    result = scan("int x = 10;")
    assert result.words == (("int", WordKind.KEYWORD), ("x", WordKind.IDENTIFIER))
    assert result.numbers == (10,)
    assert result.special_characters == "=;"


def test_numbers_keep_order():
    result = scan("a[3] = 42 + 7")
    assert result.numbers == (3, 42, 7)


def test_word_with_digits_and_underscores_is_one_word():
    result = scan("var_1 2x")
    assert [w for w, _ in result.words] == ["var_1", "x"]
    assert result.numbers == (2,)


def test_whitespace_is_not_special():
    result = scan(" \t\n\r{}")
    assert result.special_characters == "{}"
    assert result.words == ()


def test_text_without_newlines_has_no_lines():
    result = scan("for (i = 0; i < 5; i++)")
    assert result.line_count == 0


def test_newline_after_punctuation_counted_once():
    assert scan("x;\n").line_count == 1


def test_newline_ending_a_word_counted_twice():
    assert scan("x\n").line_count == 2


def test_empty_text():
    assert scan("") == ScanResult((), (), "", 0)


def test_describe_messages():
    assert WordKind.KEYWORD.describe("int") == "int is a keyword"
    assert WordKind.IDENTIFIER.describe("foo") == "foo is an identifier"


def test_main_writes_files_and_reports(monkeypatch, capsys, tmp_path):
    text = "int x = 10;\nwhile (x) x--;\n"
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main() == 0
    out = capsys.readouterr().out
    assert "int is a keyword" in out
    assert "x is an identifier" in out
    assert "The numbers in the program are: 10 " in out
    assert f"The program has {scan(text).line_count} lines" in out
    assert (tmp_path / "test.txt").read_text() == text
    assert (tmp_path / "identifiers.txt").read_text() == ""
    assert (tmp_path / "specialcharacters.txt").read_text() == scan(text).special_characters
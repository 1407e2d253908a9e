"""Tests for the CSV tokenizer."""

from bean_board.tokenizer import tokenize


def test_quoted_field_keeps_embedded_comma():
    assert tokenize('a,"b,c",d') == [["a", "b,c", "d"]]


def test_doubled_quote_is_literal():
    rows = tokenize('"He said ""hi"""')

    assert rows == [['He said "hi"']]


def test_quoted_field_spanning_lines_keeps_newline():
    rows = tokenize('name,notes\nBean,"cherry\nchocolate"\n')

    assert rows == [["name", "notes"], ["Bean", "cherry\nchocolate"]]


def test_fields_are_trimmed():
    assert tokenize("  a ,  b  ") == [["a", "b"]]


def test_crlf_line_endings():
    rows = tokenize("h1,h2\r\nx,y\r\n")

    assert rows == [["h1", "h2"], ["x", "y"]]


def test_trailing_newline_adds_no_row():
    assert tokenize("a,b\n") == [["a", "b"]]


def test_whitespace_only_trailing_line_trims_to_single_empty_field():
    rows = tokenize("a,b\n   \n")

    assert rows == [["a", "b"], [""]]


def test_unterminated_quote_flushes_pending_content():
    rows = tokenize('a,"unfinished, still going')

    assert rows == [["a", "unfinished, still going"]]


def test_empty_input():
    assert tokenize("") == []

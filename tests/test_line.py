import io

import pytest

from minihttpd.line import backslash_representation, read_http_line


@pytest.mark.parametrize(
    "ch, expected",
    [("\0", "\\0"), ("\n", "\\n"), ("\r", "\\r"), ("\t", "\\t"), ("a", "\\?")],
)
def test_backslash_representation(ch, expected):
    assert backslash_representation(ch) == expected


def test_reads_crlf_line():
    stream = io.BytesIO(b"GET / HTTP/1.1\r\n")
    assert read_http_line(stream) == "GET / HTTP/1.1"


def test_reads_lf_only_line():
    stream = io.BytesIO(b"Host: x\n")
    assert read_http_line(stream) == "Host: x"


def test_strips_leading_and_trailing_spaces():
    stream = io.BytesIO(b"   abc  \r \r\n")
    assert read_http_line(stream) == "abc"


def test_inner_spaces_kept():
    stream = io.BytesIO(b"a  b\r\n")
    assert read_http_line(stream) == "a  b"


def test_empty_line_is_empty_string():
    assert read_http_line(io.BytesIO(b"\r\n")) == ""
    assert read_http_line(io.BytesIO(b"\n")) == ""


def test_eof_returns_none():
    assert read_http_line(io.BytesIO(b"")) is None


def test_partial_line_without_newline_returns_none():
    assert read_http_line(io.BytesIO(b"incomplete")) is None


def test_successive_lines():
    stream = io.BytesIO(b"first\r\nsecond\n\r\nrest")
    assert read_http_line(stream) == "first"
    assert read_http_line(stream) == "second"
    assert read_http_line(stream) == ""
    assert read_http_line(stream) is None


def test_stops_right_after_newline():
    stream = io.BytesIO(b"one\r\nBODY")
    read_http_line(stream)
    assert stream.read() == b"BODY"
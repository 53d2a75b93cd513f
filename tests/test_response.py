import io

import pytest

from minihttpd.response import Response, http_code_to_string


@pytest.mark.parametrize(
    "code, reason",
    [
        (200, "OK"),
        (400, "Bad Request"),
        (404, "Not Found"),
        (500, "Internal Server Error"),
        (302, "Unknown"),
    ],
)
def test_http_code_to_string(code, reason):
    assert http_code_to_string(code) == reason


def test_defaults():
    rsp = Response()
    assert rsp.status_code == 0
    assert rsp.version == "HTTP/1.1"
    assert rsp.headers == []
    assert rsp.body == b""


def test_set_body_text_and_bytes():
    rsp = Response()
    rsp.set_body("Bad request\n")
    assert rsp.body == b"Bad request\n"
    rsp.set_body(b"\x00\x01")
    assert rsp.body == b"\x00\x01"


def test_add_header_replaces_same_name():
    rsp = Response()
    rsp.add_header("Content-Disposition", "inline")
    rsp.add_header("Content-Type", "text/plain")
    rsp.add_header("Content-Disposition", 'inline; filename="a.png"')
    assert rsp.headers == [
        ("Content-Disposition", 'inline; filename="a.png"'),
        ("Content-Type", "text/plain"),
    ]


def test_to_bytes_wire_format():
    rsp = Response(status_code=200)
    rsp.add_header("Content-Type", "text/plain")
    rsp.set_body("Stats go here\n")
    assert rsp.to_bytes() == (
        b"HTTP/1.1 200 OK\r\nContent-Type: text/plain\r\n\r\nStats go here\n"
    )


def test_to_bytes_without_headers_or_body():
    rsp = Response(status_code=404)
    assert rsp.to_bytes() == b"HTTP/1.1 404 Not Found\r\n\r\n"


def test_send_writes_serialised_form():
    rsp = Response(status_code=400)
    rsp.set_body("Bad request\n")
    out = io.BytesIO()
    rsp.send(out)
    assert out.getvalue() == rsp.to_bytes()


def test_format_dump():
    rsp = Response(status_code=404)
    rsp.add_header("Content-Type", "text/html")
    lines = rsp.format().splitlines()
    assert lines[0] == "vvv Response vvv"
    assert lines[1] == "HTTP/1.1 404"
    assert "Content-Type: text/html" in lines
    assert lines[-1] == "^^^ Response ^^^"
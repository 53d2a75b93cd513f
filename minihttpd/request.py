"""HTTP request parsing."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import BinaryIO

from .line import read_http_line

logger = logging.getLogger(__name__)

ALLOWED_METHODS = ("GET", "POST")

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class RequestError(Exception):
    """Raised when a request cannot be read or parsed."""


@dataclass
class Request:
    """A parsed HTTP request."""

    method: str
    path: str
    version: str
    headers: list[tuple[str, str]] = field(default_factory=list)
    body: bytes = b""

    def header(self, name: str) -> str | None:
        """Return the value of the first header called ``name``, if any."""
        wanted = name.lower()
        for key, value in self.headers:
            if key.lower() == wanted:
                return value
        return None

    def format(self) -> str:
        """Return a human-readable dump of the request."""
        lines = ["vvv Request vvv"]
        if self.method:
            lines.append(f"Method: {self.method}")
        if self.path:
            lines.append(f"Path: {self.path}")
        if self.version:
            lines.append(f"Version: {self.version}")
        lines.extend(f"{key}: {value}" for key, value in self.headers)
        lines.append("^^^ Request ^^^")
        return "\n".join(lines)


def _read_request_line(stream: BinaryIO) -> tuple[str, str, str]:
    while True:
        line = read_http_line(stream)
        if line is None:
            raise RequestError("Failed to read request line")
        if line:
            break

    parts = line.split()
    if len(parts) != 3 or line != line.rstrip():
        raise RequestError(f"Failed to parse request line: {line!r}")
    method, path, version = parts
    if method not in ALLOWED_METHODS:
        raise RequestError(f"Invalid method: {method}")
    return method, path, version


def _read_headers(stream: BinaryIO) -> list[tuple[str, str]]:
    headers: list[tuple[str, str]] = []
    while True:
        line = read_http_line(stream)
        if line is None:
            raise RequestError("Failed to read headers")
        if not line:
            return headers
        key, sep, value = line.partition(":")
        if not sep or not key.strip():
            raise RequestError(f"Malformed header line: {line!r}")
        headers.append((key.strip(), value.strip()))


def _read_body(stream: BinaryIO, content_length: str | None) -> bytes:
    if content_length is None:
        return b""
    match = _LEADING_INT.match(content_length)
    if match is None:
        raise RequestError("Failed to parse content length")
    length = int(match.group(1))
    if length < 0:
        raise RequestError("Negative content length")
    if length == 0:
        return b""
    body = stream.read(length)
    if body is None or len(body) != length:
        raise RequestError("Failed to read body")
    return body


def read_request(stream: BinaryIO) -> Request:
    """Read one complete request from ``stream``.

    Raises :class:`RequestError` on end of stream or malformed input.
    """
    method, path, version = _read_request_line(stream)
    request = Request(method, path, version, _read_headers(stream))
    request.body = _read_body(stream, request.header("Content-Length"))
    logger.info("%s", request.format())
    return request
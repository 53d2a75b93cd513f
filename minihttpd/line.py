"""Reading of CRLF- or LF-terminated protocol lines from a byte stream."""

from __future__ import annotations

import logging
from typing import BinaryIO

logger = logging.getLogger(__name__)

_BACKSLASH_NAMES = {
    "\0": "\\0",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def backslash_representation(ch: str) -> str:
    """Return the backslash escape for a control character, or ``\\?``."""
    return _BACKSLASH_NAMES.get(ch, "\\?")


def read_http_line(stream: BinaryIO) -> str | None:
    """Read one line from ``stream`` without its line terminator.

    Leading spaces are skipped, trailing spaces and carriage returns are
    removed.  Returns ``None`` if the stream ends before a newline is seen,
    and an empty string for a bare line terminator.
    """
    chars: list[str] = []
    while True:
        byte = stream.read(1)
        if not byte:
            return None
        ch = byte.decode("latin-1")
        if not chars and ch == " ":
            continue
        if ch == "\n":
            break
        chars.append(ch)
    line = "".join(chars).rstrip("\r ")
    logger.info("Read line: %r", line)
    return line
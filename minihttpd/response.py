"""HTTP response building and serialisation."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import BinaryIO

logger = logging.getLogger(__name__)

_REASONS = {
    200: "OK",
    400: "Bad Request",
    404: "Not Found",
    500: "Internal Server Error",
}


def http_code_to_string(code: int) -> str:
    """Return the reason phrase for an HTTP status code."""
    return _REASONS.get(code, "Unknown")


@dataclass
class Response:
    """An HTTP response waiting to be sent."""

    status_code: int = 0
    version: str = "HTTP/1.1"
    headers: list[tuple[str, str]] = field(default_factory=list)
    body: bytes = b""

    def add_header(self, key: str, value: str) -> None:
        """Set a header, replacing any earlier header of the same name."""
        wanted = key.lower()
        for index, (existing, _) in enumerate(self.headers):
            if existing.lower() == wanted:
                self.headers[index] = (key, value)
                return
        self.headers.append((key, value))

    def set_body(self, body: str | bytes) -> None:
        """Replace the body; text is encoded as UTF-8."""
        self.body = body.encode("utf-8") if isinstance(body, str) else bytes(body)

    def to_bytes(self) -> bytes:
        """Serialise the status line, headers and body."""
        head = [
            f"{self.version} {self.status_code} "
            f"{http_code_to_string(self.status_code)}\r\n"
        ]
        head.extend(f"{key}: {value}\r\n" for key, value in self.headers)
        head.append("\r\n")
        return "".join(head).encode("latin-1") + self.body

    def send(self, stream: BinaryIO) -> None:
        """Write the response to ``stream``; I/O errors propagate."""
        stream.write(self.to_bytes())
        stream.flush()

    def format(self) -> str:
        """Return a human-readable dump of the response head."""
        lines = ["vvv Response vvv", f"{self.version} {self.status_code}"]
        lines.extend(f"{key}: {value}" for key, value in self.headers)
        lines.append("^^^ Response ^^^")
        return "\n".join(lines)
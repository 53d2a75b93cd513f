"""HTTP/1.1 request parsing, routing and response building."""

__version__ = "0.1.0"
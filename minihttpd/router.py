"""Dispatch of requests to handlers and the handlers themselves."""

from __future__ import annotations

import os
import re
import stat
from dataclasses import dataclass
from typing import Callable

from .request import Request
from .response import Response

_CALC_PATTERN = re.compile(r"([^/]{1,9})/\s*([+-]?\d+)/\s*([+-]?\d+)")


@dataclass(frozen=True)
class ContentType:
    """How a file with a given extension is served."""

    extension: str
    content_type: str
    as_file: bool


CONTENT_TYPES = (
    ContentType(".html", "text/html", False),
    ContentType(".css", "text/css", False),
    ContentType(".js", "application/javascript", False),
    ContentType(".jpg", "image/jpeg", True),
    ContentType(".png", "image/png", True),
    ContentType(".gif", "image/gif", True),
    ContentType(".md", "text/markdown", True),
)

DEFAULT_CONTENT_TYPE = ContentType("", "text/plain", True)


@dataclass(frozen=True)
class Route:
    """A method and path pattern bound to a handler."""

    method: str
    path: str
    full_match: bool
    handler: Callable[[Request], Response]


def content_type_for_file(path: str) -> ContentType:
    """Return the content type for ``path``, judged by its last dot."""
    dot = path.rfind(".")
    if dot == -1:
        return DEFAULT_CONTENT_TYPE
    extension = path[dot:]
    for candidate in CONTENT_TYPES:
        if candidate.extension == extension:
            return candidate
    return DEFAULT_CONTENT_TYPE


def _text_response(status_code: int, body: str) -> Response:
    response = Response(status_code=status_code)
    response.set_body(body)
    return response


def get_stats_handler(request: Request) -> Response:
    """Serve the statistics page."""
    return _text_response(200, "Stats go here\n")


def bad_request_handler(request: Request) -> Response:
    """Answer with 400 Bad Request."""
    return _text_response(400, "Bad request\n")


def no_resource_handler(request: Request) -> Response:
    """Answer with 404 for the requested path."""
    return _text_response(404, f"Resource not found: {request.path}\n")


def internal_error(request: Request) -> Response:
    """Answer a server-side failure; reported to the client as not found."""
    return _text_response(404, f"Resource not found: {request.path}\n")


def get_static_handler(request: Request) -> Response:
    """Serve a regular file named by the path, relative to the working directory."""
    path = request.path
    if "../" in path or "/.." in path:
        return bad_request_handler(request)

    try:
        fd = os.open(path[1:], os.O_RDONLY)
    except (OSError, ValueError):
        return no_resource_handler(request)

    with os.fdopen(fd, "rb") as handle:
        try:
            info = os.fstat(handle.fileno())
        except OSError:
            return no_resource_handler(request)
        if not stat.S_ISREG(info.st_mode):
            return bad_request_handler(request)
        try:
            body = handle.read(info.st_size)
        except OSError:
            return internal_error(request)

    if len(body) != info.st_size:
        return internal_error(request)

    response = Response(body=body)
    response.add_header("Content-Length", str(len(body)))
    content_type = content_type_for_file(path)
    if content_type.as_file:
        response.add_header("Content-Disposition", "inline")
        slash = path.rfind("/")
        if slash == -1:
            return internal_error(request)
        filename = path[slash + 1:]
        response.add_header("Content-Disposition", f'inline; filename="{filename}"')
    response.add_header("Content-Type", content_type.content_type)
    response.status_code = 200
    return response


def _truncating_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def get_calc_handler(request: Request) -> Response:
    """Evaluate ``/calc/<op>/<a>/<b>`` for the operations add, mul and div."""
    match = _CALC_PATTERN.match(request.path[len("/calc/"):])
    if match is None:
        return bad_request_handler(request)
    operation = match.group(1)
    if not (operation.isascii() and operation.isalnum()):
        return bad_request_handler(request)
    first, second = int(match.group(2)), int(match.group(3))

    if operation == "add":
        result = first + second
    elif operation == "mul":
        result = first * second
    elif operation == "div":
        if second == 0:
            return bad_request_handler(request)
        result = _truncating_div(first, second)
    else:
        return bad_request_handler(request)

    return _text_response(200, f"Result: {result}\n")


ROUTES = (
    Route("GET", "/stats", True, get_stats_handler),
    Route("GET", "/static/", False, get_static_handler),
    Route("GET", "/calc/", False, get_calc_handler),
    Route("GET", "", False, no_resource_handler),
)


def _matches(route: Route, request: Request) -> bool:
    if route.method != request.method:
        return False
    if route.full_match:
        return route.path == request.path
    return request.path.startswith(route.path)


def route_request(request: Request) -> Response | None:
    """Return the response of the first matching route, or ``None`` if none matches."""
    for route in ROUTES:
        if _matches(route, request):
            return route.handler(request)
    return None
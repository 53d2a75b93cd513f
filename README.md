# minihttpd

The request and response side of a small HTTP/1.1 server: reading request
lines, headers and bodies from a byte stream, routing requests to handlers,
and serialising responses.

## Installing

```
pip install .
```

## Quick start

```python
import io

from minihttpd.request import read_request
from minihttpd.router import route_request

stream = io.BytesIO(b"GET /calc/add/2/3 HTTP/1.1\r\n\r\n")
request = read_request(stream)
response = route_request(request)
print(response.to_bytes())
# b'HTTP/1.1 200 OK\r\n\r\nResult: 5\n'
```

Any binary file-like object works as a stream, for example the result of
`socket.makefile("rwb")`.

## Modules

### `minihttpd.line`

- `read_http_line(stream)` reads one line terminated by LF or CRLF and returns
  it without the terminator. Leading spaces are skipped; trailing spaces and
  carriage returns are removed. It returns `None` if the stream ends before a
  newline, and `""` for an empty line.
- `backslash_representation(ch)` gives the escape (`\0`, `\n`, `\r`, `\t`) for
  a control character, or `\?` for anything else.

### `minihttpd.request`

- `read_request(stream)` reads a full request and returns a `Request`. Empty
  lines before the request line are skipped. The request line must be exactly
  three words, and the method must be `GET` or `POST`. Headers are read up to
  the blank line. If a `Content-Length` header is present, that many bytes are
  read as the body. Any failure, including the end of the stream, raises
  `RequestError`.
- `Request` holds `method`, `path`, `version`, `headers` (a list of
  `(name, value)` pairs) and `body` (bytes). `Request.header(name)` looks up
  a header case-insensitively. `Request.format()` returns a readable dump.

### `minihttpd.response`

- `Response` holds `status_code`, `version` (default `HTTP/1.1`), `headers`
  and `body`.
  - `add_header(key, value)` sets a header and replaces any earlier header
    with the same name.
  - `set_body(body)` takes text (encoded as UTF-8) or bytes.
  - `to_bytes()` serialises the status line, headers, blank line and body.
  - `send(stream)` writes `to_bytes()` to a stream and flushes it.
  - `format()` returns a readable dump of the status and headers.
- `http_code_to_string(code)` gives the reason phrase for 200, 400, 404 and
  500, and `Unknown` for any other code.

### `minihttpd.router`

`route_request(request)` returns the response of the first matching route in
`ROUTES`, or `None` when no route matches. Only `GET` requests are routed, so
a `POST` request gets `None`.

| Path | Response |
|------|----------|
| `/stats` | `200` with a placeholder stats body |
| `/static/<path>` | The file `static/<path>`, relative to the working directory |
| `/calc/<op>/<a>/<b>` | `Result: <n>` for `op` one of `add`, `mul`, `div` |
| anything else | `404 Resource not found: <path>` |

The handlers are also available on their own: `get_stats_handler`,
`get_static_handler`, `get_calc_handler`, `bad_request_handler`,
`no_resource_handler` and `internal_error`. `internal_error` answers with
`404` and the same body as `no_resource_handler`.

#### Static files

- A path that contains `../` or `/..` gets `400`.
- A path that is not a regular file gets `400`.
- A file that cannot be opened gets `404`.

The response carries `Content-Length` and a `Content-Type` chosen by
`content_type_for_file(path)` from the text after the last dot:

| Extension | Content-Type |
|-----------|--------------|
| `.html` | `text/html` |
| `.css` | `text/css` |
| `.js` | `application/javascript` |
| `.jpg` | `image/jpeg` |
| `.png` | `image/png` |
| `.gif` | `image/gif` |
| `.md` | `text/markdown` |
| anything else | `text/plain` |

For images, Markdown and plain-text files the response also carries
`Content-Disposition: inline; filename="<name>"`.

#### Calculator

```
GET /calc/add/2/3   ->  Result: 5
GET /calc/mul/4/5   ->  Result: 20
GET /calc/div/7/2   ->  Result: 3
```

Division truncates towards zero. Division by zero, an unknown operation, or a
malformed path gets `400 Bad request`.

## What this package does not do

There is no network server and no command to start one: the package does not
open, bind or listen on sockets, accept connections, or run handlers in
threads. To serve clients, accept connections yourself, wrap each socket in a
binary stream, and loop over `read_request`, `route_request` and
`Response.send` until `read_request` raises `RequestError` or
`route_request` returns `None`.

## Running the tests

```
pip install .[test]
pytest
```
"""Strip insignificant whitespace from JSON documents."""

import re

from compress_bench.errors import PreprocessError

# Same nesting limit as Go's encoding/json scanner.
MAX_DEPTH = 10000

_TOKEN_RE = re.compile(
    rb'(?P<ws>[ \t\r\n]+)'
    rb'|(?P<string>"(?:[^"\\\x00-\x1f]|\\["\\/bfnrt]|\\u[0-9a-fA-F]{4})*")'
    rb'|(?P<number>-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?)'
    rb'|(?P<literal>true|false|null)'
    rb'|(?P<punct>[{}\[\]:,])'
)

# What the scanner accepts next.
_VALUE = "value"
_VALUE_OR_CLOSE = "value or ']'"
_KEY = "object key"
_KEY_OR_CLOSE = "object key or '}'"
_COLON = "':'"
_COMMA_OR_CLOSE = "',' or closing bracket"
_END = "end of input"


def _invalid(message: str) -> PreprocessError:
    return PreprocessError(f"Invalid JSON: {message}")


def _compact(data: bytes) -> bytes:
    """Validate ``data`` token by token, returning it without whitespace."""
    stack = []
    expect = _VALUE
    out = []
    pos = 0

    while pos < len(data):
        m = _TOKEN_RE.match(data, pos)
        if m is None:
            raise _invalid(f"unexpected byte {data[pos:pos + 1]!r} at offset {pos}")
        kind, token = m.lastgroup, m.group()
        if kind != "ws":
            if kind == "punct" and token in b"{[":
                if expect not in (_VALUE, _VALUE_OR_CLOSE):
                    raise _invalid(f"expected {expect} at offset {pos}")
                stack.append(token)
                if len(stack) > MAX_DEPTH:
                    raise _invalid(f"nesting deeper than {MAX_DEPTH} at offset {pos}")
                expect = _KEY_OR_CLOSE if token == b"{" else _VALUE_OR_CLOSE
            elif kind == "punct" and token in b"}]":
                opener = b"{" if token == b"}" else b"["
                allowed = (_KEY_OR_CLOSE if token == b"}" else _VALUE_OR_CLOSE, _COMMA_OR_CLOSE)
                if expect not in allowed or not stack or stack[-1] != opener:
                    raise _invalid(f"expected {expect} at offset {pos}")
                stack.pop()
                expect = _COMMA_OR_CLOSE if stack else _END
            elif token == b":":
                if expect != _COLON:
                    raise _invalid(f"expected {expect} at offset {pos}")
                expect = _VALUE
            elif token == b",":
                if expect != _COMMA_OR_CLOSE:
                    raise _invalid(f"expected {expect} at offset {pos}")
                expect = _KEY if stack[-1] == b"{" else _VALUE
            elif kind == "string" and expect in (_KEY, _KEY_OR_CLOSE):
                expect = _COLON
            elif expect in (_VALUE, _VALUE_OR_CLOSE):
                expect = _COMMA_OR_CLOSE if stack else _END
            else:
                raise _invalid(f"expected {expect} at offset {pos}")
            out.append(token)
        pos = m.end()

    if expect != _END:
        raise _invalid(f"unexpected end of input, expected {expect}")
    return b"".join(out)


def minify_json(data: bytes) -> bytes:
    """
    Remove whitespace outside string literals from a JSON document.

    Everything else (number spellings, string escapes, key order) is kept
    byte for byte. The document is scanned without building Python objects,
    so neither nesting depth nor integer length hits interpreter limits.
    Empty input is returned unchanged.

    Raises:
        PreprocessError: If the input is not valid UTF-8 JSON
    """
    if not data:
        return b""

    data = bytes(data)
    try:
        data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise _invalid(str(e)) from e

    return _compact(data)

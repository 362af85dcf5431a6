"""Percent-encoding and decoding of URI components.

Each component has its own set of characters that stay unescaped on top of
the RFC 3986 unreserved set (A-Z, a-z, 0-9, "-", ".", "_", "~"):

- path keeps "/" (segment separator)
- query keeps "&", "=" and "+" (query-string structure)
- fragment keeps "/" and "?"
- authority (host, password) keeps "[", "]" and ":"
- user name keeps nothing extra

Escapes always use upper-case hex, and a space is always "%20", never "+".
Lone surrogates in a path, as produced by os.fsdecode() for undecodable
filename bytes, are encoded back to the original byte. Anywhere else text
must be valid Unicode.
"""

import re
from enum import Enum
from types import MappingProxyType
from urllib.parse import quote, unquote

from .errors import DecodeError


class Component(Enum):
    """URI component kinds with distinct safe-character sets."""

    PATH = "path"
    QUERY = "query"
    FRAGMENT = "fragment"
    AUTHORITY = "authority"
    USERINFO = "userinfo"


SAFE_CHARS = MappingProxyType(
    {
        Component.PATH: "/",
        Component.QUERY: "&=+",
        Component.FRAGMENT: "/?",
        Component.AUTHORITY: "[]:",
        Component.USERINFO: "",
    }
)

_ESCAPE = re.compile(r"%[0-9A-Fa-f]{2}")
_PERCENT = re.compile(r"%(?![0-9A-Fa-f]{2})")


def encode(component: Component, raw: str) -> str:
    """Percent-encode every character outside the component's safe set.

    Args:
        component: Component kind selecting the safe set
        raw: Decoded (human-readable) component value

    Returns:
        Encoded value with upper-case hex escapes

    Raises:
        DecodeError: If the value holds a lone surrogate that cannot be
            encoded (invalid_text)

    Example:
        >>> encode(Component.PATH, "/c:/my file.txt")
        '/c%3A/my%20file.txt'
    """
    errors = "surrogateescape" if component is Component.PATH else "strict"
    try:
        return quote(raw, safe=SAFE_CHARS[component], errors=errors)
    except UnicodeEncodeError as e:
        raise _unencodable(raw, e) from e


def decode(raw: str) -> str:
    """Reverse percent-encoding.

    A string without "%" is returned unchanged, so decoding already-decoded
    text is a no-op.

    Args:
        raw: Encoded component value

    Returns:
        Decoded text

    Raises:
        DecodeError: If a "%" is not followed by two hex digits
            (malformed_escape) or the escaped bytes are not valid UTF-8
            (invalid_text)
    """
    if "%" not in raw:
        return raw
    _check_escapes(raw)
    try:
        return unquote(raw, errors="strict")
    except UnicodeDecodeError as e:
        raise DecodeError(
            "invalid_text", f"Escaped bytes are not valid UTF-8 in {raw!r}: {e.reason}"
        ) from e


def normalize_escapes(component: Component, raw: str) -> str:
    """Encode a raw value while keeping its existing escapes.

    Existing escapes are upper-cased, everything else outside the safe set
    is encoded. The result decodes to the same text as the input.

    Raises:
        DecodeError: On a malformed escape, escapes that do not decode
            to valid UTF-8, or a lone surrogate
    """
    decode(raw)
    safe = SAFE_CHARS[component]
    parts = []
    last = 0
    try:
        for match in _ESCAPE.finditer(raw):
            parts.append(quote(raw[last : match.start()], safe=safe))
            parts.append(match.group().upper())
            last = match.end()
        parts.append(quote(raw[last:], safe=safe))
    except UnicodeEncodeError as e:
        raise _unencodable(raw, e) from e
    return "".join(parts)


def encode_minimal(raw: str) -> str:
    """Escape only the "#" and "?" delimiters, for display output."""
    return raw.replace("#", "%23").replace("?", "%3F")


def _unencodable(raw: str, error: UnicodeEncodeError) -> DecodeError:
    return DecodeError(
        "invalid_text",
        f"Cannot encode {raw!r} as UTF-8: {error.reason}",
    )


def _check_escapes(raw: str) -> None:
    match = _PERCENT.search(raw)
    if match is not None:
        bad = raw[match.start() : match.start() + 3]
        raise DecodeError(
            "malformed_escape",
            f"Malformed percent-escape {bad!r} at offset {match.start()} in {raw!r}",
        )

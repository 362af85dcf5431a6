"""Split URI strings into components.

Splitting uses the regular expression from RFC 3986 Appendix B. Path is
decoded eagerly; authority, query and fragment keep their encoded form with
escapes normalized to upper-case hex. Parsing is a pure string transform.
"""

import re

from . import codec
from .codec import Component
from .errors import DecodeError, ParseError
from .logging_config import get_logger
from .uri import URI, build_uri, normalize_authority

logger = get_logger("parser")

_URI_REGEX = re.compile(
    r"^(([^:/?#]+?):)?(//([^/?#]*))?([^?#]*)(\?([^#]*))?(#(.*))?", re.DOTALL
)


def split_components(value: str) -> tuple[str, str, str, str, str]:
    """Split a URI string into raw (undecoded) components.

    Args:
        value: URI string

    Returns:
        Tuple of (scheme, authority, path, query, fragment); absent
        components are empty strings

    Example:
        >>> split_components("http://api/files/test.me?t=1234")
        ('http', 'api', '/files/test.me', 't=1234', '')
    """
    match = _URI_REGEX.match(value)
    if match is None:
        return ("", "", "", "", "")
    return (
        match.group(2) or "",
        match.group(4) or "",
        match.group(5) or "",
        match.group(7) or "",
        match.group(9) or "",
    )


def parse(value: str, strict: bool = False) -> URI:
    """Parse a string into a URI.

    Args:
        value: URI string, e.g. "https://host/path?q#frag"
        strict: Reject input without a scheme

    Returns:
        Parsed and normalized URI

    Raises:
        ParseError: If the scheme is invalid (invalid_scheme), an escape is
            malformed or the text cannot be encoded (malformed_escape), the
            scheme is missing in strict mode (missing_scheme), the path holds
            an unencodable character (invalid_text), or authority and path do
            not fit together (invalid_authority_path,
            invalid_path_without_authority)

    Example:
        >>> uri = parse("file:///C:/Users/me")
        >>> uri.path
        '/c:/Users/me'
    """
    scheme, authority, path, query, fragment = split_components(value)

    try:
        encoded_authority = normalize_authority(authority)
        path = codec.decode(path)
        encoded_query = codec.normalize_escapes(Component.QUERY, query)
        encoded_fragment = codec.normalize_escapes(Component.FRAGMENT, fragment)
    except DecodeError as e:
        logger.debug(
            f"Rejected URI: {e.message}",
            extra={"uri": value, "error_code": e.error_code},
        )
        raise ParseError("malformed_escape", e.message) from e

    try:
        return build_uri(
            scheme,
            encoded_authority,
            path,
            encoded_query,
            encoded_fragment,
            strict=strict,
            error_cls=ParseError,
        )
    except ParseError as e:
        logger.debug(
            f"Rejected URI: {e.message}",
            extra={"uri": value, "scheme": scheme, "error_code": e.error_code},
        )
        raise

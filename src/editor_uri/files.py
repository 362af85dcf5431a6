"""Filesystem path and file URI conversion.

Handles both path conventions without looking at the host platform:
- POSIX: /home/user/file.py <-> file:///home/user/file.py
- Windows drive letters: C:\\Users\\file.py <-> file:///c%3A/Users/file.py
- UNC shares: \\\\server\\share\\file.py <-> file://server/share/file.py

Which form a URI maps back to is decided by the shape of its path and
authority alone.
"""

import os
import re

from . import codec
from .codec import Component
from .errors import BridgeError, DecodeError, ValidationError
from .logging_config import get_logger
from .uri import URI, build_uri

logger = get_logger("files")

_DRIVE_LETTER = re.compile(r"^[a-zA-Z]:")
_DRIVE_LETTER_PATH = re.compile(r"^/[a-zA-Z]:")


def from_file_path(path: str | os.PathLike[str]) -> URI:
    """Convert a filesystem path to a file URI.

    Backslashes are treated as separators, a leading "\\\\server" becomes
    the authority, and a drive letter is lower-cased and rooted at "/".
    Relative paths are rooted at "/" without further normalization.
    Filename bytes that os.fsdecode() could not decode are serialized as
    their original byte escapes.

    Args:
        path: POSIX or Windows path

    Returns:
        URI with scheme "file"

    Raises:
        ValidationError: If the UNC server name cannot be encoded (invalid_text)

    Example:
        >>> from_file_path("C:\\\\Users\\\\me").path
        '/c:/Users/me'
        >>> str(from_file_path("/users/me/proj/"))
        'file:///users/me/proj/'
    """
    value = os.fspath(path).replace("\\", "/")
    server = ""

    # UNC path: //server/share/...
    if value.startswith("//"):
        end = value.find("/", 2)
        if end == -1:
            server = value[2:]
            value = "/"
        else:
            server = value[2:end]
            value = value[end:] or "/"
        logger.debug(f"UNC path mapped to authority {server!r}")

    if _DRIVE_LETTER.match(value):
        value = "/" + value[0].lower() + value[1:]

    # a server name is a bare host; "@" and ":" in it are not delimiters
    try:
        authority = codec.encode(Component.AUTHORITY, server).replace(":", "%3A")
    except DecodeError as e:
        raise ValidationError(e.error_code, e.message) from e

    return build_uri("file", authority, value)


def to_file_path(uri: URI) -> str:
    """Convert a file URI to a filesystem path string.

    - A non-empty authority yields a UNC path: \\\\server\\share\\file
    - A drive-letter path yields a Windows path: c:\\Users\\file
    - Any other path is returned as-is: /home/user/file

    Args:
        uri: URI with scheme "file"

    Returns:
        Path string in the form implied by the URI

    Raises:
        BridgeError: If the URI scheme is not "file" (unsupported_scheme)

    Example:
        >>> to_file_path(URI.parse("file:///c:/Users/me"))
        'c:\\\\Users\\\\me'
    """
    if uri.scheme != "file":
        logger.debug(
            "No filesystem path for non-file URI",
            extra={"uri": uri.to_string(), "scheme": uri.scheme},
        )
        raise BridgeError(
            "unsupported_scheme", f"Expected file URI, got: {uri.to_string()}"
        )

    if uri.authority:
        return "\\\\" + uri.authority + uri.path.replace("/", "\\")

    if _DRIVE_LETTER_PATH.match(uri.path):
        return uri.path[1].lower() + uri.path[2:].replace("/", "\\")

    return uri.path

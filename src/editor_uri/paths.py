"""Path utilities operating on the path component of a URI.

"/" is the only separator, whatever the URI scheme or host platform.
Scheme, authority, query and fragment are carried through unchanged.
"""

from .uri import URI, URIChange


def join_path(uri: URI, *paths: str) -> URI:
    """Append path segments to the path of a URI.

    Redundant "/" at each boundary is collapsed to one. "." and ".."
    segments are kept as given; use resolve_path() to normalize them.

    Args:
        uri: Base URI
        *paths: Segments to append in order

    Returns:
        URI with the joined path

    Raises:
        ValidationError: If the joined path is invalid for the URI

    Example:
        >>> base = URI.parse("https://example.com/path/to/file.txt")
        >>> join_path(base, "subdir", "file.js").path
        '/path/to/file.txt/subdir/file.js'
    """
    result = uri.path
    for segment in paths:
        if not segment:
            continue
        if result:
            result = result.rstrip("/") + "/" + segment.lstrip("/")
        elif uri.authority:
            result = "/" + segment.lstrip("/")
        else:
            result = segment
    return uri.with_(URIChange(path=result))


def resolve_path(uri: URI, *paths: str) -> URI:
    """Resolve path segments against the path of a URI.

    The result is normalized: "." and empty segments are dropped, ".."
    removes the preceding segment but never climbs above the root, and
    trailing separators are removed. A segment starting with "/" restarts
    from the root. A URI without authority whose path is relative keeps a
    relative path.

    Args:
        uri: Base URI
        *paths: Segments to resolve in order

    Returns:
        URI with the resolved path

    Raises:
        ValidationError: If the resolved path is invalid for the URI

    Example:
        >>> resolve_path(URI.parse("foo://a/b"), "x/..//y/.").path
        '/b/y'
    """
    stack: list[str] = []
    _push_segments(stack, uri.path)
    for path in paths:
        if path.startswith("/"):
            stack = []
        _push_segments(stack, path)

    result = "/" + "/".join(stack)
    if not uri.authority and not uri.path.startswith("/"):
        result = result[1:]
    return uri.with_(URIChange(path=result))


def dirname(uri: URI) -> str:
    """Return the directory part of the URI path, like Unix dirname.

    Trailing separators are ignored, so the dirname of "/a/b/" is "/a".
    An empty path or "/" is returned unchanged, and a relative path with a
    single segment yields "".

    Example:
        >>> dirname(URI.parse("foo://a/some/file/"))
        '/some'
    """
    path = uri.path
    if not path or path == "/":
        return path

    trimmed = path.rstrip("/") or "/"
    index = trimmed.rfind("/")
    if index == 0:
        return "/"
    return trimmed[:index] if index > 0 else ""


def basename(uri: URI) -> str:
    """Return the last non-empty segment of the URI path.

    Example:
        >>> basename(URI.parse("foo://a/some/file///"))
        'file'
    """
    trimmed = uri.path.rstrip("/")
    return trimmed[trimmed.rfind("/") + 1 :]


def extname(uri: URI) -> str:
    """Return the extension of the URI basename, including the dot.

    Dotfiles such as ".bashrc" have no extension.
    """
    base = basename(uri)
    index = base.rfind(".")
    if index <= 0:
        return ""
    return base[index:]


def _push_segments(stack: list[str], path: str) -> None:
    for segment in path.split("/"):
        if segment in ("", "."):
            continue
        if segment == "..":
            if stack:
                stack.pop()
        else:
            stack.append(segment)

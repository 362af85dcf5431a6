"""Immutable URI value with validation, serialization and sparse updates.

Components are stored so that equality is structural:

- scheme is lower-cased
- path is stored decoded and encoded on serialization
- authority, query and fragment are stored in their encoded form with
  upper-case hex escapes and decoded on read, so an escaped delimiter such
  as "%40" in a host never turns into a real one

Absent components are always the empty string, never None.
"""

from __future__ import annotations

import re
from dataclasses import asdict, astuple, dataclass
from typing import Any, Callable

from . import codec
from .codec import Component
from .errors import DecodeError, URIError, ValidationError

_SCHEME_PATTERN = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*$")
_DRIVE_LETTER_PATH = re.compile(r"^/[a-zA-Z]:")
_ESCAPE = re.compile(r"%[0-9A-Fa-f]{2}")
_PORT = re.compile(r"[0-9]+")

# Schemes whose paths are always absolute
_ABSOLUTE_PATH_SCHEMES = ("http", "https")


@dataclass(frozen=True)
class URIComponents:
    """Decoded URI components.

    Attributes:
        scheme: Scheme token (e.g. "file", "https")
        authority: Decoded authority ("user@host:port")
        path: Decoded path
        query: Decoded query, without the leading "?"
        fragment: Decoded fragment, without the leading "#"
    """

    scheme: str = ""
    authority: str = ""
    path: str = ""
    query: str = ""
    fragment: str = ""

    def to_dict(self) -> dict[str, str]:
        """Convert to a plain dict of component name to decoded value."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "URIComponents":
        """Create URIComponents from a dict, treating missing keys as empty.

        Example:
            >>> URIComponents.from_dict({"scheme": "file", "path": "/x"}).authority
            ''
        """
        return cls(
            scheme=data.get("scheme") or "",
            authority=data.get("authority") or "",
            path=data.get("path") or "",
            query=data.get("query") or "",
            fragment=data.get("fragment") or "",
        )


@dataclass
class URIChange:
    """Sparse update for URI.with_().

    Fields left as None keep the corresponding component unchanged. Values
    are decoded (human-readable) forms; use "" to remove a component.
    """

    scheme: str | None = None
    authority: str | None = None
    path: str | None = None
    query: str | None = None
    fragment: str | None = None


@dataclass(frozen=True, repr=False)
class URI:
    """A parsed, normalized URI.

    Build instances with parse(), from_file_path(), URI.from_components()
    or URI.with_(); the constructor itself does not validate.

    Attributes:
        scheme: Lower-case scheme, "" only for relative references
        encoded_authority: Authority in normalized percent-encoded form
        path: Decoded path
        encoded_query: Query in normalized percent-encoded form
        encoded_fragment: Fragment in normalized percent-encoded form
    """

    scheme: str = ""
    encoded_authority: str = ""
    path: str = ""
    encoded_query: str = ""
    encoded_fragment: str = ""

    @property
    def authority(self) -> str:
        """Decoded authority."""
        return codec.decode(self.encoded_authority)

    @property
    def query(self) -> str:
        """Decoded query."""
        return codec.decode(self.encoded_query)

    @property
    def fragment(self) -> str:
        """Decoded fragment."""
        return codec.decode(self.encoded_fragment)

    @property
    def fs_path(self) -> str:
        """Filesystem path for a file URI.

        Raises:
            BridgeError: If the scheme is not "file"
        """
        from .files import to_file_path

        return to_file_path(self)

    @classmethod
    def parse(cls, value: str, strict: bool = False) -> "URI":
        """Parse a URI string. See editor_uri.parser.parse()."""
        from .parser import parse

        return parse(value, strict=strict)

    @classmethod
    def file(cls, path: Any) -> "URI":
        """Create a file URI from a filesystem path. See editor_uri.files.from_file_path()."""
        from .files import from_file_path

        return from_file_path(path)

    @classmethod
    def from_components(cls, components: URIComponents, strict: bool = False) -> "URI":
        """Create a URI from decoded components.

        Args:
            components: Decoded component values
            strict: Reject an empty scheme

        Returns:
            Validated URI

        Raises:
            ValidationError: If the components describe an invalid URI
        """
        return build_uri(
            components.scheme,
            encode_authority(components.authority),
            components.path,
            _encode_text(Component.QUERY, components.query),
            _encode_text(Component.FRAGMENT, components.fragment),
            strict=strict,
        )

    def to_components(self) -> URIComponents:
        """Return the decoded components of this URI."""
        return URIComponents(
            scheme=self.scheme,
            authority=self.authority,
            path=self.path,
            query=self.query,
            fragment=self.fragment,
        )

    @staticmethod
    def is_uri(thing: object) -> bool:
        """Check whether an object is a URI or has the same shape.

        Duck-typed objects qualify when they expose the five components as
        strings along with callable to_string() and with_().
        """
        if isinstance(thing, URI):
            return True
        for name in ("scheme", "authority", "path", "query", "fragment"):
            if not isinstance(getattr(thing, name, None), str):
                return False
        return callable(getattr(thing, "to_string", None)) and callable(
            getattr(thing, "with_", None)
        )

    def with_(self, change: URIChange) -> "URI":
        """Apply a sparse change and re-validate.

        Args:
            change: Components to replace; None fields are kept

        Returns:
            The same instance if nothing changed, otherwise a new URI

        Raises:
            ValidationError: If the result would be an invalid URI

        Example:
            >>> uri = URI.parse("before:some/file/path")
            >>> str(uri.with_(URIChange(scheme="after")))
            'after:some/file/path'
        """
        scheme = self.scheme if change.scheme is None else change.scheme
        encoded_authority = (
            self.encoded_authority
            if change.authority is None
            else encode_authority(change.authority)
        )
        path = self.path if change.path is None else change.path
        encoded_query = (
            self.encoded_query
            if change.query is None
            else _encode_text(Component.QUERY, change.query)
        )
        encoded_fragment = (
            self.encoded_fragment
            if change.fragment is None
            else _encode_text(Component.FRAGMENT, change.fragment)
        )

        updated = (scheme, encoded_authority, path, encoded_query, encoded_fragment)
        if updated == astuple(self):
            return self

        return build_uri(*updated)

    def to_string(self, skip_encoding: bool = False) -> str:
        """Serialize to "scheme:[//authority]path[?query][#fragment]".

        Args:
            skip_encoding: Emit the human-readable form. Only "#" and "?"
                are escaped where they would be ambiguous; the result is
                meant for display and may not parse back to an equal URI.

        Returns:
            URI string
        """
        parts: list[str] = []

        if self.scheme:
            parts.append(self.scheme)
            parts.append(":")

        if self.encoded_authority or self.scheme == "file":
            parts.append("//")

        if self.encoded_authority:
            parts.append(_format_authority(self.encoded_authority, skip_encoding))

        if self.path:
            path = _lower_drive_letter(self.path)
            if skip_encoding:
                parts.append(codec.encode_minimal(path))
            else:
                parts.append(codec.encode(Component.PATH, path))

        if self.encoded_query:
            parts.append("?")
            if skip_encoding:
                parts.append(self.query.replace("#", "%23"))
            else:
                parts.append(self.encoded_query)

        if self.encoded_fragment:
            parts.append("#")
            parts.append(self.fragment if skip_encoding else self.encoded_fragment)

        return "".join(parts)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"URI({self.to_string()!r})"


def build_uri(
    scheme: str,
    encoded_authority: str,
    path: str,
    encoded_query: str = "",
    encoded_fragment: str = "",
    *,
    strict: bool = False,
    error_cls: type[URIError] = ValidationError,
) -> URI:
    """Validate and normalize components into a URI.

    Args:
        scheme: Scheme token, any case
        encoded_authority: Normalized encoded authority
        path: Decoded path
        encoded_query: Normalized encoded query
        encoded_fragment: Normalized encoded fragment
        strict: Reject an empty scheme
        error_cls: Exception class raised on invalid input

    Returns:
        Normalized URI

    Raises:
        URIError: error_cls instance describing the first violated rule
    """
    if not scheme:
        if strict:
            raise error_cls(
                "missing_scheme",
                f"Scheme is missing: {{authority: {encoded_authority!r}, path: {path!r}}}",
            )
    elif not _SCHEME_PATTERN.match(scheme):
        raise error_cls(
            "invalid_scheme", f"Scheme contains illegal characters: {scheme!r}"
        )

    scheme = scheme.lower()
    path = _resolve_reference(scheme, encoded_authority, path)

    if path:
        if encoded_authority and not path.startswith("/"):
            raise error_cls(
                "invalid_authority_path",
                "If a URI contains an authority component, then the path component "
                'must either be empty or begin with a slash ("/") character',
            )
        if not encoded_authority and path.startswith("//"):
            raise error_cls(
                "invalid_path_without_authority",
                "If a URI does not contain an authority component, then the path "
                'cannot begin with two slash characters ("//")',
            )

    _encode_text(Component.PATH, path, error_cls)

    return URI(scheme, encoded_authority, path, encoded_query, encoded_fragment)


def _resolve_reference(scheme: str, authority: str, path: str) -> str:
    if scheme == "file":
        if not path.startswith("/"):
            path = "/" + path
        if not authority and _DRIVE_LETTER_PATH.match(path):
            path = "/" + path[1].lower() + path[2:]
    elif scheme in _ABSOLUTE_PATH_SCHEMES and path and not path.startswith("/"):
        path = "/" + path
    return path


def _lower_drive_letter(path: str) -> str:
    if len(path) >= 3 and path[0] == "/" and path[2] == ":" and "A" <= path[1] <= "Z":
        return "/" + path[1].lower() + path[2:]
    if len(path) >= 2 and path[1] == ":" and "A" <= path[0] <= "Z":
        return path[0].lower() + path[1:]
    return path


def encode_authority(
    authority: str, error_cls: type[URIError] = ValidationError
) -> str:
    """Encode a decoded authority, keeping its "@" and ":" delimiters.

    Userinfo ends at the last "@" and the password starts at its first ":".
    A trailing ":<digits>" after the host is the port and is kept verbatim.

    Raises:
        URIError: error_cls instance if the text cannot be encoded
            (invalid_text)

    Example:
        >>> encode_authority("föö@[::1]:8080")
        'f%C3%B6%C3%B6@[::1]:8080'
    """

    def encode(component: Component) -> Callable[[str], str]:
        return lambda value: _encode_text(component, value, error_cls)

    return _rebuild_authority(
        authority,
        encode(Component.USERINFO),
        encode(Component.AUTHORITY),
        encode(Component.AUTHORITY),
    )


def normalize_authority(raw: str) -> str:
    """Normalize the escapes of an authority as written in a URI string.

    Raises:
        DecodeError: On a malformed escape or undecodable text
    """

    def normalize(component: Component) -> Callable[[str], str]:
        return lambda value: codec.normalize_escapes(component, value)

    return _rebuild_authority(
        raw,
        normalize(Component.USERINFO),
        normalize(Component.AUTHORITY),
        normalize(Component.AUTHORITY),
    )


def _encode_text(
    component: Component, value: str, error_cls: type[URIError] = ValidationError
) -> str:
    try:
        return codec.encode(component, value)
    except DecodeError as e:
        raise error_cls(e.error_code, e.message) from e


def _rebuild_authority(
    authority: str,
    user_fn: Callable[[str], str],
    password_fn: Callable[[str], str],
    host_fn: Callable[[str], str],
) -> str:
    parts: list[str] = []
    userinfo, at, host = authority.rpartition("@")
    if at:
        user, colon, password = userinfo.partition(":")
        parts.append(user_fn(user))
        if colon:
            parts.append(":")
            parts.append(password_fn(password))
        parts.append("@")

    # "[::1]" has no port; "[::1]:80" and "host:80" do
    name, colon, port = host.rpartition(":")
    bracketed = name.startswith("[")
    if colon and _PORT.fullmatch(port) and (not bracketed or name.endswith("]")):
        parts.append(host_fn(name))
        parts.append(":" + port)
    else:
        parts.append(host_fn(host))
    return "".join(parts)


def _format_authority(encoded_authority: str, skip_encoding: bool) -> str:
    if skip_encoding:

        def readable(value: str) -> str:
            return codec.encode_minimal(codec.decode(value))

        return _rebuild_authority(
            encoded_authority,
            readable,
            readable,
            lambda host: codec.encode_minimal(codec.decode(host).lower()),
        )

    return _rebuild_authority(
        encoded_authority,
        lambda user: user,
        lambda password: password,
        lambda host: _ESCAPE.sub(lambda m: m.group().upper(), host.lower()),
    )

"""URI parsing, normalization and file path conversion for editor tooling."""

from .codec import Component, decode, encode
from .errors import BridgeError, DecodeError, ParseError, URIError, ValidationError
from .files import from_file_path, to_file_path
from .logging_config import get_logger, setup_logging
from .parser import parse
from .paths import basename, dirname, extname, join_path, resolve_path
from .uri import URI, URIChange, URIComponents

__all__ = [
    "URI",
    "BridgeError",
    "Component",
    "DecodeError",
    "ParseError",
    "URIChange",
    "URIComponents",
    "URIError",
    "ValidationError",
    "basename",
    "decode",
    "dirname",
    "encode",
    "extname",
    "from_file_path",
    "get_logger",
    "join_path",
    "parse",
    "resolve_path",
    "setup_logging",
    "to_file_path",
]

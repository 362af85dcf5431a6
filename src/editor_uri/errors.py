"""Error taxonomy for URI parsing, decoding, validation and path bridging."""


class URIError(Exception):
    """Base exception for all editor_uri errors."""

    def __init__(self, error_code: str, message: str) -> None:
        """Initialize URI error.

        Args:
            error_code: Machine-readable error kind (e.g. "invalid_scheme")
            message: Human-readable description of what went wrong
        """
        super().__init__(message)
        self.error_code = error_code
        self.message = message

    def to_error_response(self) -> dict[str, str]:
        """Convert to an error response dict.

        Returns:
            Error dict with status, error_code, and message fields
        """
        return {
            "status": "error",
            "error_code": self.error_code,
            "message": self.message,
        }


class DecodeError(URIError):
    """Malformed percent-escape or undecodable byte sequence.

    Error codes: malformed_escape, invalid_text
    """


class ParseError(URIError):
    """Input string cannot be split into a valid URI.

    Error codes: invalid_scheme, malformed_escape, missing_scheme, invalid_text,
    invalid_authority_path, invalid_path_without_authority
    """


class ValidationError(URIError):
    """A change or set of components describes a structurally invalid URI.

    Uses the same error codes as ParseError, except malformed_escape.
    """


class BridgeError(URIError):
    """URI cannot be mapped to a filesystem path.

    Error codes: unsupported_scheme
    """

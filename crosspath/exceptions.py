# crosspath/exceptions.py
"""crosspath exception hierarchy.

All exceptions inherit from CrossPathError for consistent error handling.
"""

from crosspath.models import ViolationKind


class CrossPathError(Exception):
    """Base exception for all crosspath errors."""

    pass


class EncodingError(CrossPathError):
    """Raised when path bytes cannot be decoded (or text cannot be encoded)."""

    def __init__(self, message: str, data: bytes | None = None):
        self.data = data
        super().__init__(message)


class SecurityViolation(CrossPathError):  # noqa: N818
    """Raised when a path matches a dangerous pattern.

    Attributes:
        kind: Which check failed
        fragment: The offending part of the path
        path: The full path that was checked
    """

    def __init__(self, kind: ViolationKind, fragment: str, path: str = ""):
        self.kind = kind
        self.fragment = fragment
        self.path = path
        super().__init__(f"{kind.value}: '{fragment}' in path '{path}'")

    def to_dict(self) -> dict[str, str]:
        return {"kind": self.kind.value, "fragment": self.fragment, "path": self.path}


class ConversionError(CrossPathError):
    """Raised when a path cannot be converted between styles."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot convert '{path}': {reason}")


class AmbiguousStyle(ConversionError):  # noqa: N818
    """Raised when the source style cannot be sniffed and a decision is required."""

    def __init__(self, path: str):
        super().__init__(path, "path style is ambiguous (mixed separators, no prefix)")


class InvalidDriveMapping(ConversionError):  # noqa: N818
    """Raised when a required drive mapping is absent and no fallback is configured."""

    def __init__(self, path: str, prefix: str):
        self.prefix = prefix
        super().__init__(path, f"no drive mapping for '{prefix}' and no default fallback")


class MalformedPathError(ConversionError):
    """Raised when a path cannot be parsed structurally."""

    pass


class InvalidConfigError(CrossPathError, ValueError):
    """Raised when a PathConfig (or config file) is malformed."""

    def __init__(self, field_name: str, reason: str):
        self.field_name = field_name
        self.reason = reason
        super().__init__(f"Invalid config field '{field_name}': {reason}")

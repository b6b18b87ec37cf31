# crosspath/__init__.py
"""crosspath - Cross-platform path conversion.

Converts path strings between Windows and Unix conventions, detects the
encoding of raw path bytes and rejects dangerous path constructs. No
filesystem access happens anywhere in the package.

Public API:
    CrossPath: Immutable path object running the full pipeline
    PathConfig: Validated, serializable conversion settings
    PathStyleConverter: Style conversion engine
    PathSecurityChecker: Traversal / injection checks and sanitizing
    EncodingDetector: Encoding detection for raw path bytes
"""

from crosspath.config import DriveTable, PathConfig, load_config, save_config
from crosspath.converter import PathStyleConverter, convert, normalize_path
from crosspath.cross_path import CrossPath, convert_path, to_unix_path, to_windows_path
from crosspath.encoding import (
    EncodingDetector,
    decode_path_bytes,
    detect_encoding,
    encode_path,
    to_utf8,
)
from crosspath.exceptions import (
    AmbiguousStyle,
    ConversionError,
    CrossPathError,
    EncodingError,
    InvalidConfigError,
    InvalidDriveMapping,
    MalformedPathError,
    SecurityViolation,
)
from crosspath.models import DecodeResult, DetectedEncoding, PathKind, PathStyle, ViolationKind
from crosspath.parser import ParsedPath, detect_style, parse_path
from crosspath.platform import current_style
from crosspath.security import PathSecurityChecker, sanitize_path

__version__ = "0.1.0"

__all__ = [
    # Core
    "CrossPath",
    "to_unix_path",
    "to_windows_path",
    "convert_path",
    # Configuration
    "PathConfig",
    "DriveTable",
    "load_config",
    "save_config",
    # Conversion
    "PathStyleConverter",
    "convert",
    "normalize_path",
    "ParsedPath",
    "parse_path",
    "detect_style",
    "current_style",
    # Encoding
    "EncodingDetector",
    "detect_encoding",
    "decode_path_bytes",
    "to_utf8",
    "encode_path",
    # Security
    "PathSecurityChecker",
    "sanitize_path",
    # Models
    "PathStyle",
    "PathKind",
    "DetectedEncoding",
    "DecodeResult",
    "ViolationKind",
    # Exceptions
    "CrossPathError",
    "EncodingError",
    "SecurityViolation",
    "ConversionError",
    "AmbiguousStyle",
    "InvalidDriveMapping",
    "MalformedPathError",
    "InvalidConfigError",
]

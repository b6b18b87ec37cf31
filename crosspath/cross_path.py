# crosspath/cross_path.py
"""CrossPath: the conversion pipeline behind one immutable object.

Construction runs encoding detection, structural parsing and (optionally)
the security check. Conversions are computed on demand from the stored
canonical text and never change the instance.

Usage:
    path = CrossPath(r"C:\\Users\\John\\file.txt")
    path.to_unix()          # "/mnt/c/Users/John/file.txt"

    to_windows_path("/home/john/file.txt")  # "C:\\home\\john\\file.txt"
"""

import logging
import os
from typing import Any

from crosspath.config import PathConfig
from crosspath.converter import PathStyleConverter, normalize_path
from crosspath.encoding import decode_path_bytes, encode_path, ensure_text
from crosspath.exceptions import InvalidConfigError, SecurityViolation
from crosspath.models import DecodeResult, DetectedEncoding, PathStyle
from crosspath.parser import ParsedPath, parse_path, separator_style
from crosspath.platform import current_style
from crosspath.security import PathSecurityChecker

logger = logging.getLogger(__name__)

PathInput = str | bytes | os.PathLike


class CrossPath:
    """A path in canonical form plus the config used to convert it.

    Raises on construction:
        EncodingError: Raw bytes cannot be decoded (strict encoding mode)
        MalformedPathError: The text is empty or has a broken UNC prefix
        SecurityViolation: A dangerous pattern was found (security_check on)
        InvalidConfigError: config is not a PathConfig
    """

    __slots__ = ("_original", "_decoded", "_parsed", "_config")

    def __init__(self, path: PathInput, config: PathConfig | None = None) -> None:
        if config is None:
            config = PathConfig()
        elif not isinstance(config, PathConfig):
            raise InvalidConfigError("<config>", f"expected PathConfig, got {type(config).__name__}")

        raw = os.fspath(path) if isinstance(path, os.PathLike) else path
        if isinstance(raw, bytes):
            decoded = decode_path_bytes(raw, preserve_encoding=config.preserve_encoding)
        elif isinstance(raw, str):
            decoded = ensure_text(raw, preserve_encoding=config.preserve_encoding)
        else:
            raise TypeError(f"path must be str, bytes or os.PathLike, not {type(path).__name__}")

        parsed = parse_path(decoded.text)
        if config.security_check:
            PathSecurityChecker.from_config(config).check(parsed)

        object.__setattr__(self, "_original", raw)
        object.__setattr__(self, "_decoded", decoded)
        object.__setattr__(self, "_parsed", parsed)
        object.__setattr__(self, "_config", config)

    @classmethod
    def new(cls, path: PathInput) -> "CrossPath":
        """Create a CrossPath with the default configuration."""
        return cls(path)

    @classmethod
    def with_config(cls, path: PathInput, config: PathConfig) -> "CrossPath":
        """Create a CrossPath with a custom configuration."""
        return cls(path, config)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("CrossPath is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("CrossPath is immutable")

    @property
    def original(self) -> str | bytes:
        """The raw input, bytes included, exactly as given."""
        return self._original

    @property
    def canonical(self) -> str:
        """Decoded text before any style conversion."""
        return self._decoded.text

    @property
    def encoding(self) -> DetectedEncoding:
        return self._decoded.encoding

    @property
    def decode_result(self) -> DecodeResult:
        return self._decoded

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._decoded.warnings

    @property
    def is_lossy(self) -> bool:
        return self._decoded.lossy

    @property
    def config(self) -> PathConfig:
        return self._config

    @property
    def parsed(self) -> ParsedPath:
        return self._parsed

    @property
    def is_absolute(self) -> bool:
        return self._parsed.is_absolute

    @property
    def original_style(self) -> PathStyle:
        """Style the input was written in (AUTO when it cannot be told)."""
        if self._parsed.style is not PathStyle.AUTO:
            return self._parsed.style
        return separator_style(self.canonical) or PathStyle.AUTO

    def to_style(self, style: PathStyle) -> str:
        """Convert to the given style (AUTO: the other style of the source)."""
        return PathStyleConverter(self._config).convert_parsed(self._parsed, style)

    def to_unix(self) -> str:
        return self.to_style(PathStyle.UNIX)

    def to_windows(self) -> str:
        return self.to_style(PathStyle.WINDOWS)

    def convert(self) -> str:
        """Convert to the style named in the config."""
        return self.to_style(self._config.style)

    def to_platform(self) -> str:
        """Convert to the config style, or to the host's style when it is AUTO."""
        style = self._config.style
        if style is PathStyle.AUTO:
            style = current_style()
        return self.to_style(style)

    def normalized(self) -> str:
        """Lexically normalized canonical text, in its own style."""
        return normalize_path(self.canonical)

    def security_violation(self) -> SecurityViolation | None:
        """Run the security checks regardless of config.security_check."""
        return PathSecurityChecker.from_config(self._config).find_violation(self._parsed)

    def is_safe(self) -> bool:
        return self.security_violation() is None

    def to_bytes(self, encoding: DetectedEncoding | None = None) -> bytes:
        """Encode the path back to bytes.

        Without an explicit encoding, raw bytes input is returned unchanged
        when preserve_encoding is on; otherwise the canonical text is encoded
        in the detected encoding.

        Raises:
            EncodingError: If the text cannot be represented
        """
        if encoding is None:
            if isinstance(self._original, bytes) and self._config.preserve_encoding:
                return self._original
            encoding = self.encoding
        return encode_path(self.canonical, encoding)

    def __fspath__(self) -> str:
        return self.canonical

    def __str__(self) -> str:
        return self.canonical

    def __repr__(self) -> str:
        return f"CrossPath({self.canonical!r}, style={self.original_style.value})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CrossPath):
            return NotImplemented
        return self.canonical == other.canonical and self._config == other._config

    def __hash__(self) -> int:
        return hash((self.canonical, self._config))


def to_unix_path(path: PathInput, config: PathConfig | None = None) -> str:
    """Convert a path to Unix style through the full CrossPath pipeline."""
    return CrossPath(path, config).to_unix()


def to_windows_path(path: PathInput, config: PathConfig | None = None) -> str:
    """Convert a path to Windows style through the full CrossPath pipeline."""
    return CrossPath(path, config).to_windows()


def convert_path(path: PathInput, style: PathStyle, config: PathConfig | None = None) -> str:
    """Convert a path to any style through the full CrossPath pipeline."""
    return CrossPath(path, config).to_style(style)

"""Core data models for crosspath."""

from dataclasses import dataclass, field
from enum import Enum


class PathStyle(str, Enum):
    """Path conventions understood by the converter.

    As a conversion target, AUTO means "the other style of the source".
    As a detection result, AUTO means the path is structurally ambiguous.
    """

    WINDOWS = "Windows"
    UNIX = "Unix"
    AUTO = "Auto"

    @property
    def separator(self) -> str:
        """Separator used when rendering in this style."""
        return "\\" if self is PathStyle.WINDOWS else "/"

    def opposite(self) -> "PathStyle":
        """Return the other concrete style (AUTO stays AUTO)."""
        if self is PathStyle.WINDOWS:
            return PathStyle.UNIX
        if self is PathStyle.UNIX:
            return PathStyle.WINDOWS
        return PathStyle.AUTO


class DetectedEncoding(str, Enum):
    """Encodings recognised in raw path bytes."""

    UTF8 = "UTF8"
    UTF16LE = "UTF16LE"
    WINDOWS1252 = "Windows1252"
    UNKNOWN = "Unknown"

    @property
    def display_name(self) -> str:
        """Human-readable encoding name."""
        return _DISPLAY_NAMES[self]

    @property
    def codec(self) -> str | None:
        """Python codec used to decode this encoding, None when unknown."""
        return _CODECS[self]

    def decode(self, data: bytes, errors: str = "strict") -> str:
        """Convert bytes in this encoding to canonical text.

        Raises:
            UnicodeDecodeError: If data is not valid in this encoding
            LookupError: For UNKNOWN, which has no codec
        """
        if self.codec is None:
            raise LookupError("no codec for unknown encoding")
        bom = _BOMS.get(self)
        if bom and data.startswith(bom):
            data = data[len(bom):]
        return data.decode(self.codec, errors=errors)


_DISPLAY_NAMES = {
    DetectedEncoding.UTF8: "UTF-8",
    DetectedEncoding.UTF16LE: "UTF-16LE",
    DetectedEncoding.WINDOWS1252: "Windows-1252",
    DetectedEncoding.UNKNOWN: "Unknown",
}

_CODECS = {
    DetectedEncoding.UTF8: "utf-8",
    DetectedEncoding.UTF16LE: "utf-16-le",
    DetectedEncoding.WINDOWS1252: "cp1252",
    DetectedEncoding.UNKNOWN: None,
}

_BOMS = {
    DetectedEncoding.UTF8: b"\xef\xbb\xbf",
    DetectedEncoding.UTF16LE: b"\xff\xfe",
}


class ViolationKind(str, Enum):
    """Classification of a security violation."""

    TRAVERSAL_ATTEMPT = "TraversalAttempt"
    RESERVED_NAME = "ReservedName"
    DANGEROUS_CHARACTER = "DangerousCharacter"
    SYSTEM_DIRECTORY_ACCESS = "SystemDirectoryAccess"


class PathKind(Enum):
    """Structural shape of a parsed path."""

    DRIVE = "drive"  # C:\Users
    UNC = "unc"  # \\server\share or //server/share
    ROOTED = "rooted"  # /home or \Windows
    RELATIVE = "relative"


@dataclass(frozen=True)
class DecodeResult:
    """Immutable result of decoding raw path bytes.

    Attributes:
        text: Canonical Unicode text
        encoding: Encoding the bytes were classified as
        lossy: True when undecodable bytes were replaced with U+FFFD
        warnings: Human-readable warnings raised while decoding
    """

    text: str
    encoding: DetectedEncoding
    lossy: bool = False
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def clean(cls, text: str, encoding: DetectedEncoding) -> "DecodeResult":
        """Create a result for a strict, lossless decode."""
        return cls(text=text, encoding=encoding)

    @classmethod
    def replaced(cls, text: str, encoding: DetectedEncoding, warning: str) -> "DecodeResult":
        """Create a result for a best-effort decode with placeholders."""
        return cls(text=text, encoding=encoding, lossy=True, warnings=(warning,))

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "encoding": self.encoding.value,
            "lossy": self.lossy,
            "warnings": list(self.warnings),
        }

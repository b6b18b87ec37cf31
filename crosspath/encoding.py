"""
Encoding detection and handling for raw path bytes.

Paths coming from Windows tools, archives or network transfers may be
UTF-8, UTF-16LE or legacy Windows-1252. This module classifies the bytes
with a fixed priority order of heuristics and converts them to canonical
Unicode text.

Short byte sequences are inherently ambiguous; ties are resolved by the
priority order (UTF-16LE, UTF-8, Windows-1252) and nothing smarter.
"""

import logging

from crosspath.exceptions import EncodingError
from crosspath.models import DecodeResult, DetectedEncoding

logger = logging.getLogger(__name__)

UTF16LE_BOM = b"\xff\xfe"

# Minimum share of NUL high bytes for BOM-less UTF-16LE detection
UTF16_NULL_RATIO = 0.75

# Bytes with no mapping in Windows-1252
_CP1252_UNDEFINED = frozenset({0x81, 0x8D, 0x8F, 0x90, 0x9D})

_CP1252_PRINTABLE = frozenset(
    b for b in range(0x20, 0x100) if b != 0x7F and b not in _CP1252_UNDEFINED
)

PLACEHOLDER = "\ufffd"


class EncodingDetector:
    """Classifies raw path bytes and decodes them to canonical text."""

    def __init__(self, null_ratio: float = UTF16_NULL_RATIO):
        """
        Initialize the encoding detector.

        Args:
            null_ratio: Share of NUL high bytes needed to treat BOM-less
                input as UTF-16LE.
        """
        self.null_ratio = null_ratio

    def detect(self, data: bytes) -> DetectedEncoding:
        """
        Classify a byte sequence, first matching heuristic wins.

        Args:
            data: Raw path bytes.

        Returns:
            The detected encoding (UNKNOWN if nothing matches).
        """
        if data.startswith(UTF16LE_BOM) or self.looks_like_utf16le(data):
            return DetectedEncoding.UTF16LE

        try:
            data.decode("utf-8")
            return DetectedEncoding.UTF8
        except UnicodeDecodeError:
            pass

        if self.is_cp1252_printable(data):
            return DetectedEncoding.WINDOWS1252

        return DetectedEncoding.UNKNOWN

    def decode(self, data: bytes, preserve_encoding: bool = False) -> DecodeResult:
        """
        Decode path bytes to canonical text.

        Args:
            data: Raw path bytes.
            preserve_encoding: When True, undecodable bytes are replaced with
                U+FFFD and a warning is attached instead of failing.

        Returns:
            DecodeResult with the text, detected encoding and any warnings.

        Raises:
            EncodingError: If the bytes cannot be decoded and
                preserve_encoding is False.
        """
        encoding = self.detect(data)
        if encoding is DetectedEncoding.UNKNOWN:
            return self._fallback(
                data, encoding, "bytes do not match any supported encoding", preserve_encoding
            )

        try:
            text = encoding.decode(data)
        except UnicodeDecodeError as e:
            return self._fallback(
                data,
                encoding,
                f"invalid {encoding.display_name} sequence at byte {e.start}",
                preserve_encoding,
            )

        logger.debug(f"Decoded {len(data)} path bytes as {encoding.display_name}")
        return DecodeResult.clean(text, encoding)

    def _fallback(
        self, data: bytes, encoding: DetectedEncoding, reason: str, preserve_encoding: bool
    ) -> DecodeResult:
        if not preserve_encoding:
            raise EncodingError(f"Unable to decode path bytes: {reason}", data)

        if encoding.codec is None:
            text = data.decode("utf-8", errors="replace")
        else:
            text = encoding.decode(data, errors="replace")

        warning = f"{reason}; undecodable bytes replaced with U+FFFD"
        logger.warning(f"Lossy path decode: {warning}")
        return DecodeResult.replaced(text, encoding, warning)

    def looks_like_utf16le(self, data: bytes) -> bool:
        """
        Check for ASCII-range UTF-16LE text without a BOM.

        ASCII characters in UTF-16LE are followed by a NUL high byte, so a
        dominant run of alternating NULs gives the encoding away.
        """
        if len(data) < 4 or len(data) % 2:
            return False

        low = data[0::2]
        high = data[1::2]
        high_nulls = high.count(0)
        low_nulls = low.count(0)

        return high_nulls >= len(high) * self.null_ratio and low_nulls <= len(low) // 4

    @staticmethod
    def is_cp1252_printable(data: bytes) -> bool:
        """Check that every byte is a printable Windows-1252 character."""
        return all(b in _CP1252_PRINTABLE for b in data)


_default_detector = EncodingDetector()


def detect_encoding(data: bytes) -> DetectedEncoding:
    """Classify raw path bytes with the default detector."""
    return _default_detector.detect(data)


def decode_path_bytes(data: bytes, preserve_encoding: bool = False) -> DecodeResult:
    """Decode raw path bytes with the default detector."""
    return _default_detector.decode(data, preserve_encoding=preserve_encoding)


def to_utf8(data: bytes) -> str:
    """
    Strictly convert raw path bytes to text.

    Raises:
        EncodingError: If the bytes are not in a supported encoding.
    """
    return _default_detector.decode(data).text


def ensure_text(text: str, preserve_encoding: bool = False) -> DecodeResult:
    """
    Validate that text is well-formed Unicode.

    Strings produced with the surrogateescape handler (os.fsdecode) carry
    lone surrogates standing in for undecodable bytes.

    Raises:
        EncodingError: If text holds lone surrogates and preserve_encoding
            is False.
    """
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        if not preserve_encoding:
            raise EncodingError(
                f"Path text contains undecodable characters at position {e.start}"
            ) from e
        cleaned = "".join(PLACEHOLDER if 0xD800 <= ord(c) <= 0xDFFF else c for c in text)
        warning = "lone surrogates replaced with U+FFFD"
        logger.warning(f"Lossy path text: {warning}")
        return DecodeResult.replaced(cleaned, DetectedEncoding.UTF8, warning)

    return DecodeResult.clean(text, DetectedEncoding.UTF8)


def encode_path(text: str, encoding: DetectedEncoding) -> bytes:
    """
    Encode canonical text back into one of the supported encodings.

    Raises:
        EncodingError: If the encoding is UNKNOWN or cannot represent the text.
    """
    if encoding.codec is None:
        raise EncodingError("Cannot encode path into an unknown encoding")

    try:
        return text.encode(encoding.codec)
    except UnicodeEncodeError as e:
        raise EncodingError(
            f"Path cannot be represented in {encoding.display_name} "
            f"(character {text[e.start]!r} at position {e.start})"
        ) from e

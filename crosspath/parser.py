# crosspath/parser.py
"""Structural path parsing.

Splits a canonical path string into its prefix token (drive letter, UNC
server/share or root) and its segments. Both separators are recognised
everywhere; the prefix alone decides which style a path is written in.
"""

import re
from dataclasses import dataclass, replace

from crosspath.exceptions import MalformedPathError
from crosspath.models import PathKind, PathStyle

_DRIVE_RE = re.compile(r"^([A-Za-z]):")
_SEPARATOR_RE = re.compile(r"[\\/]")

SEPARATORS = ("\\", "/")


@dataclass(frozen=True)
class ParsedPath:
    """Immutable structural view of a path.

    Attributes:
        original: The text that was parsed
        kind: Prefix shape (drive, UNC, rooted or relative)
        style: Style implied by the prefix (AUTO for relative paths)
        segments: Path segments after the prefix, empty ones included
        drive: Upper-cased drive token such as "C:" (DRIVE only)
        server: UNC server name (UNC only)
        share: UNC share name (UNC only)
    """

    original: str
    kind: PathKind
    style: PathStyle
    segments: tuple[str, ...]
    drive: str | None = None
    server: str | None = None
    share: str | None = None

    @property
    def is_absolute(self) -> bool:
        return self.kind is not PathKind.RELATIVE

    @property
    def basename(self) -> str:
        """Last non-empty segment, or "" for a bare prefix."""
        for segment in reversed(self.segments):
            if segment:
                return segment
        return ""

    def normalized(self) -> "ParsedPath":
        """Return a copy with empty and dot segments resolved lexically."""
        segments, _ = resolve_segments(self.segments, absolute=self.is_absolute)
        return replace(self, segments=segments)


def detect_style(text: str) -> PathStyle:
    """Sniff the style of a path from its prefix.

    Drive letters, UNC prefixes and a leading backslash mean Windows; a
    leading slash means Unix. Anything else is ambiguous and reported as AUTO.
    """
    if not text:
        return PathStyle.AUTO
    if text.startswith("\\") or _DRIVE_RE.match(text):
        return PathStyle.WINDOWS
    if text.startswith("/"):
        return PathStyle.UNIX
    return PathStyle.AUTO


def separator_style(text: str) -> PathStyle | None:
    """Guess a style from the separators alone.

    Returns:
        WINDOWS for backslashes only, UNIX for slashes only, AUTO when the
        text has no separator, None when both kinds are mixed.
    """
    has_back = "\\" in text
    has_forward = "/" in text
    if has_back and has_forward:
        return None
    if has_back:
        return PathStyle.WINDOWS
    if has_forward:
        return PathStyle.UNIX
    return PathStyle.AUTO


def split_segments(rest: str) -> tuple[str, ...]:
    """Split on either separator, keeping empty segments."""
    if not rest:
        return ()
    return tuple(_SEPARATOR_RE.split(rest))


def resolve_segments(segments, absolute: bool) -> tuple[tuple[str, ...], bool]:
    """Lexically resolve "." and ".." and drop empty segments.

    ".." never crosses the root of an absolute path; at the head of a
    relative path it is kept.

    Returns:
        Tuple of (resolved segments, whether any ".." went above the start).
    """
    resolved: list[str] = []
    escaped = False
    for segment in segments:
        if segment in ("", "."):
            continue
        if segment == "..":
            if resolved and resolved[-1] != "..":
                resolved.pop()
            else:
                escaped = True
                if not absolute:
                    resolved.append("..")
            continue
        resolved.append(segment)
    return tuple(resolved), escaped


def _is_double_separator(prefix: str) -> bool:
    return len(prefix) == 2 and prefix[0] in SEPARATORS and prefix[1] in SEPARATORS


def parse_path(text: str) -> ParsedPath:
    """Parse a canonical path string.

    Raises:
        MalformedPathError: For empty input or a backslash UNC prefix
            without a share name.
    """
    if not text:
        raise MalformedPathError(text, "empty path")

    # UNC: two separators followed by a server name
    if len(text) > 2 and text[2] not in SEPARATORS and _is_double_separator(text[:2]):
        style = PathStyle.WINDOWS if text[0] == "\\" else PathStyle.UNIX
        parts = split_segments(text[2:])
        if len(parts) >= 2 and parts[1]:
            return ParsedPath(
                original=text,
                kind=PathKind.UNC,
                style=style,
                segments=parts[2:],
                server=parts[0],
                share=parts[1],
            )
        if style is PathStyle.WINDOWS:
            raise MalformedPathError(text, "UNC path needs both a server and a share name")
        # POSIX allows a bare //name; treat it as an ordinary rooted path

    match = _DRIVE_RE.match(text)
    if match:
        rest = text[2:]
        if rest[:1] in SEPARATORS:
            rest = rest[1:]
        return ParsedPath(
            original=text,
            kind=PathKind.DRIVE,
            style=PathStyle.WINDOWS,
            segments=split_segments(rest),
            drive=f"{match.group(1).upper()}:",
        )

    if text[0] in SEPARATORS:
        return ParsedPath(
            original=text,
            kind=PathKind.ROOTED,
            style=PathStyle.WINDOWS if text[0] == "\\" else PathStyle.UNIX,
            segments=split_segments(text[1:]),
        )

    return ParsedPath(
        original=text,
        kind=PathKind.RELATIVE,
        style=PathStyle.AUTO,
        segments=split_segments(text),
    )

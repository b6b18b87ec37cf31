# crosspath/converter.py
"""Windows <-> Unix path style conversion.

One closed set of styles, one conversion function. The converter rewrites
the prefix token (drive letter, UNC server/share, root) through the drive
tables and translates separators in the rest of the path. Relative paths
only ever get separator translation.
"""

import logging

from crosspath.config import DriveTable, PathConfig, mount_segments
from crosspath.exceptions import AmbiguousStyle, InvalidDriveMapping
from crosspath.models import PathKind, PathStyle
from crosspath.parser import ParsedPath, parse_path, separator_style

logger = logging.getLogger(__name__)


class PathStyleConverter:
    """Converts canonical path text between styles.

    Holds only the immutable config and the drive tables built from it, so
    one converter can serve any number of threads.

    Usage:
        converter = PathStyleConverter(PathConfig())
        converter.convert(r"C:\\Users\\john", PathStyle.UNIX)  # "/mnt/c/Users/john"
    """

    def __init__(self, config: PathConfig | None = None) -> None:
        self.config = config if config is not None else PathConfig()
        self.table = DriveTable.from_config(self.config)

    def convert(
        self, text: str, target: PathStyle, source: PathStyle = PathStyle.AUTO
    ) -> str:
        """Convert path text to the target style.

        Args:
            text: Canonical path text
            target: Style to produce; AUTO means the other style of the source
            source: Style of the input; AUTO sniffs it from the path

        Returns:
            The converted path

        Raises:
            AmbiguousStyle: AUTO target on a relative path with mixed separators
            InvalidDriveMapping: A needed mapping is absent with no fallback
            MalformedPathError: The text cannot be parsed
        """
        return self.convert_parsed(parse_path(text), target, source)

    def convert_parsed(
        self, parsed: ParsedPath, target: PathStyle, source: PathStyle = PathStyle.AUTO
    ) -> str:
        target = self.resolve_target(parsed, target, source)
        if self.config.normalize:
            parsed = parsed.normalized()

        if target is PathStyle.WINDOWS:
            result = self._to_windows(parsed)
        else:
            result = self._to_unix(parsed)

        logger.debug(f"Converted {parsed.original!r} -> {result!r} ({target.value})")
        return result

    def resolve_target(
        self, parsed: ParsedPath, target: PathStyle, source: PathStyle = PathStyle.AUTO
    ) -> PathStyle:
        """Turn an AUTO target into a concrete style."""
        if target is not PathStyle.AUTO:
            return target

        if source is PathStyle.AUTO:
            source = parsed.style
        if source is PathStyle.AUTO:
            source = separator_style(parsed.original)
            if source is None:
                raise AmbiguousStyle(parsed.original)
            if source is PathStyle.AUTO:
                # No separators at all: both styles render the same text
                return PathStyle.UNIX
        return source.opposite()

    def _to_unix(self, parsed: ParsedPath) -> str:
        if parsed.kind is not PathKind.DRIVE:
            return render(parsed, "/")

        mount = self.table.mount_for(parsed.drive)
        if mount is None:
            if self.config.default_mount_root is None:
                raise InvalidDriveMapping(parsed.original, parsed.drive)
            mount = f"{self.config.default_mount_root.rstrip('/')}/{parsed.drive[0].lower()}"
        # A root mount ("/") must not double the leading separator
        return mount.rstrip("/") + _tail(parsed.segments, "/") or "/"

    def _to_windows(self, parsed: ParsedPath) -> str:
        if parsed.kind is not PathKind.ROOTED or parsed.style is PathStyle.WINDOWS:
            return render(parsed, "\\")

        segments = parsed.segments
        hit = self.table.drive_for(segments)
        if hit is None:
            hit = self._default_scheme_drive(segments)
        if hit is not None:
            drive, consumed = hit
            return drive + "\\" + "\\".join(segments[consumed:])

        # Unmapped absolute Unix path: lossy, rooted under the default drive
        if self.config.default_drive is None:
            prefix = "/" + (segments[0] if segments else "")
            raise InvalidDriveMapping(parsed.original, prefix)
        return self.config.default_drive + "\\" + "\\".join(segments)

    def _default_scheme_drive(self, segments: tuple[str, ...]) -> tuple[str, int] | None:
        """Reverse the <default_mount_root>/<letter> fallback scheme."""
        if self.config.default_mount_root is None:
            return None
        root = mount_segments(self.config.default_mount_root)
        if len(segments) <= len(root) or tuple(segments[: len(root)]) != root:
            return None
        letter = segments[len(root)]
        if len(letter) == 1 and letter.isascii() and letter.isalpha():
            return f"{letter.upper()}:", len(root) + 1
        return None


def _tail(segments: tuple[str, ...], sep: str) -> str:
    return sep + sep.join(segments) if segments else ""


def render(parsed: ParsedPath, sep: str) -> str:
    """Render a parsed path with the given separator, keeping its prefix as is."""
    if parsed.kind is PathKind.DRIVE:
        return parsed.drive + sep + sep.join(parsed.segments)
    if parsed.kind is PathKind.UNC:
        return sep * 2 + parsed.server + sep + parsed.share + _tail(parsed.segments, sep)
    if parsed.kind is PathKind.ROOTED:
        return sep + sep.join(parsed.segments)
    return sep.join(parsed.segments) or "."


def convert(
    text: str,
    source_style: PathStyle,
    target_style: PathStyle,
    config: PathConfig | None = None,
) -> str:
    """Convert path text between styles with a one-off converter."""
    return PathStyleConverter(config).convert(text, target_style, source_style)


def normalize_path(text: str, style: PathStyle = PathStyle.AUTO) -> str:
    """Lexically normalize a path without changing its style.

    Collapses repeated separators, drops "." segments and resolves ".."
    without crossing the root. Drive letters are never mapped here.
    Idempotent: normalize_path(normalize_path(p)) == normalize_path(p).

    Args:
        text: Path text
        style: Separator style to render with; AUTO keeps the path's own
    """
    parsed = parse_path(text).normalized()
    if style is PathStyle.AUTO:
        style = parsed.style
        if style is PathStyle.AUTO:
            style = separator_style(text) or PathStyle.UNIX
    return render(parsed, style.separator)

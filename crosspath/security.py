# crosspath/security.py
"""Path security checks.

PathSecurityChecker is pure logic: it looks only at the text of a path,
never at a live filesystem. Checks run in a fixed order and the first
failure wins:

    1. traversal (".." escaping the root, or any ".." in a relative path)
    2. dangerous characters (Windows-illegal filename characters)
    3. reserved device names (CON, NUL, COM1, ...)
    4. system directory access (configurable denylist)
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from crosspath.config import DEFAULT_SYSTEM_DIRS, DriveTable, PathConfig, mount_segments
from crosspath.exceptions import SecurityViolation
from crosspath.models import PathKind, ViolationKind
from crosspath.parser import SEPARATORS, ParsedPath, parse_path, resolve_segments

logger = logging.getLogger(__name__)

DANGEROUS_CHARACTERS = frozenset('<>:"|?*\x00')

RESERVED_NAMES = frozenset(
    {"CON", "PRN", "AUX", "NUL"}
    | {f"COM{i}" for i in range(1, 10)}
    | {f"LPT{i}" for i in range(1, 10)}
)

MAX_SEGMENT_LENGTH = 255


@dataclass(frozen=True)
class _DeniedPrefix:
    """A denylist entry reduced to comparable parts."""

    source: str
    kind: PathKind
    anchor: str | None
    segments: tuple[str, ...]
    ignore_case: bool

    def covers(self, parsed: ParsedPath, segments: tuple[str, ...]) -> bool:
        if parsed.kind is not self.kind:
            return False
        if self.kind is PathKind.DRIVE:
            anchor = parsed.drive
        elif self.kind is PathKind.UNC:
            anchor = f"{parsed.server}/{parsed.share}"
        else:
            anchor = None
        if not _same(anchor, self.anchor, self.ignore_case):
            return False
        if len(segments) < len(self.segments):
            return False
        return all(
            _same(have, want, self.ignore_case)
            for have, want in zip(segments, self.segments)
        )


def _same(left: str | None, right: str | None, ignore_case: bool) -> bool:
    if left is None or right is None:
        return left is right
    return left.casefold() == right.casefold() if ignore_case else left == right


def _denied_prefix(entry: str, ignore_case: bool | None = None) -> _DeniedPrefix:
    parsed = parse_path(entry.strip())
    segments, _ = resolve_segments(parsed.segments, absolute=parsed.is_absolute)
    if parsed.kind is PathKind.DRIVE:
        anchor = parsed.drive
    elif parsed.kind is PathKind.UNC:
        anchor = f"{parsed.server}/{parsed.share}"
    else:
        anchor = None
    if ignore_case is None:
        ignore_case = parsed.kind in (PathKind.DRIVE, PathKind.UNC)
    return _DeniedPrefix(
        source=entry,
        kind=parsed.kind,
        anchor=anchor,
        segments=segments,
        ignore_case=ignore_case,
    )


class PathSecurityChecker:
    """Validates canonical path text against dangerous patterns.

    The checker holds only immutable data and can be shared across threads.

    Usage:
        checker = PathSecurityChecker()
        checker.check("../../etc/passwd")  # raises SecurityViolation
        if not checker.is_safe(user_path):
            user_path = PathSecurityChecker.sanitize_path(user_path)
    """

    def __init__(self, system_dirs: Iterable[str] | None = None, strict: bool = True) -> None:
        """Initialize the checker.

        Args:
            system_dirs: Sensitive prefixes to deny; the default list when None
            strict: Reject Windows-illegal characters in path segments
        """
        entries = DEFAULT_SYSTEM_DIRS if system_dirs is None else tuple(system_dirs)
        self._denied = tuple(_denied_prefix(entry) for entry in entries)
        self.strict = strict

    @classmethod
    def from_config(cls, config: PathConfig, strict: bool = True) -> "PathSecurityChecker":
        """Build a checker from a config's denylist.

        Denied drive prefixes (C:\\Windows\\System32) are also denied at their
        mapped Unix location (/mnt/c/Windows/System32).
        """
        checker = cls(system_dirs=config.system_dirs, strict=strict)
        table = DriveTable.from_config(config)

        mapped = []
        for prefix in checker._denied:
            mount = table.mount_for(prefix.anchor) if prefix.kind is PathKind.DRIVE else None
            if mount:
                unix_path = "/" + "/".join(mount_segments(mount) + prefix.segments)
                # Mapped Windows locations live on case-insensitive filesystems
                mapped.append(_denied_prefix(unix_path, ignore_case=True))

        checker._denied += tuple(mapped)
        return checker

    @property
    def system_dirs(self) -> tuple[str, ...]:
        return tuple(prefix.source for prefix in self._denied)

    def check(self, path: str | ParsedPath) -> None:
        """Validate a path.

        Raises:
            SecurityViolation: On the first failed check
            MalformedPathError: If the path cannot be parsed
        """
        violation = self.find_violation(path)
        if violation is not None:
            raise violation

    def is_safe(self, path: str | ParsedPath) -> bool:
        return self.find_violation(path) is None

    def find_violation(self, path: str | ParsedPath) -> SecurityViolation | None:
        """Run every check in order and return the first violation, if any."""
        parsed = path if isinstance(path, ParsedPath) else parse_path(path)
        text = parsed.original

        for finder in (
            self._find_traversal,
            self._find_dangerous_character,
            self._find_reserved_name,
            self._find_system_directory,
        ):
            found = finder(parsed)
            if found is not None:
                kind, fragment = found
                logger.debug(f"Security check failed for {text!r}: {kind.value} ({fragment!r})")
                return SecurityViolation(kind, fragment, text)
        return None

    def _find_traversal(self, parsed: ParsedPath) -> tuple[ViolationKind, str] | None:
        depth = 0
        for index, segment in enumerate(parsed.segments):
            if segment in ("", "."):
                continue
            if segment != "..":
                depth += 1
                continue
            # Relative paths may not use ".." at all; absolute ones may not pop the root
            if not parsed.is_absolute or depth == 0:
                fragment = "/".join(s for s in parsed.segments[: index + 1] if s)
                return ViolationKind.TRAVERSAL_ATTEMPT, fragment
            depth -= 1
        return None

    def _find_dangerous_character(self, parsed: ParsedPath) -> tuple[ViolationKind, str] | None:
        if not self.strict:
            return None
        names = list(parsed.segments)
        if parsed.kind is PathKind.UNC:
            names = [parsed.server, parsed.share] + names
        for name in names:
            if any(ch in DANGEROUS_CHARACTERS for ch in name):
                return ViolationKind.DANGEROUS_CHARACTER, name
        return None

    def _find_reserved_name(self, parsed: ParsedPath) -> tuple[ViolationKind, str] | None:
        basename = parsed.basename
        if basename and _reserved_stem(basename):
            return ViolationKind.RESERVED_NAME, basename
        return None

    def _find_system_directory(self, parsed: ParsedPath) -> tuple[ViolationKind, str] | None:
        if not parsed.is_absolute:
            return None
        segments, _ = resolve_segments(parsed.segments, absolute=True)
        for prefix in self._denied:
            if prefix.covers(parsed, segments):
                return ViolationKind.SYSTEM_DIRECTORY_ACCESS, prefix.source
        return None

    @staticmethod
    def sanitize_path(segment: str) -> str:
        """Make a single path segment safe to use as a filename.

        Never fails: traversal sequences are removed, dangerous characters,
        separators and control characters become "_", reserved device names
        get a "_" suffix, and the result is capped at 255 characters.
        """
        sanitized = segment.replace("../", "").replace("..\\", "")
        if sanitized in (".", ".."):
            return "_" * len(sanitized)

        sanitized = "".join(
            "_" if ch in DANGEROUS_CHARACTERS or ch in SEPARATORS or ord(ch) < 0x20 else ch
            for ch in sanitized
        )

        stem, dot, rest = sanitized.partition(".")
        if _reserved_stem(sanitized):
            sanitized = f"{stem}_{dot}{rest}"

        return sanitized[:MAX_SEGMENT_LENGTH]


def _reserved_stem(name: str) -> bool:
    stem = name.split(".", 1)[0].rstrip(" ")
    return stem.upper() in RESERVED_NAMES


def sanitize_path(segment: str) -> str:
    """Module-level shortcut for PathSecurityChecker.sanitize_path."""
    return PathSecurityChecker.sanitize_path(segment)

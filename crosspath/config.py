# crosspath/config.py
"""Configuration management for crosspath.

PathConfig is immutable and validated when it is built, so malformed
settings (an empty drive letter, a relative mount point) fail before any
path is converted. Configs serialize to plain dicts, JSON and YAML with the
field names and enum tags used throughout the library.
"""

import json
import logging
import os
import re
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from crosspath.exceptions import InvalidConfigError
from crosspath.models import PathStyle

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "CROSSPATH_CONFIG"

DEFAULT_DRIVE_MAPPINGS: tuple[tuple[str, str], ...] = (
    ("C:", "/mnt/c"),
    ("D:", "/mnt/d"),
    ("E:", "/mnt/e"),
)

DEFAULT_SYSTEM_DIRS: tuple[str, ...] = (
    "/etc",
    "/sys",
    "/proc",
    "/dev",
    "/boot",
    "/bin",
    "/sbin",
    "/usr/bin",
    "/usr/sbin",
    "/root",
    r"C:\Windows\System32",
    r"C:\Windows\SysWOW64",
)

_DRIVE_RE = re.compile(r"^([A-Za-z]):?$")


def default_config_path() -> Path:
    """Location of the user config file (~/.crosspath/config.yaml)."""
    return Path.home() / ".crosspath" / "config.yaml"


@dataclass(frozen=True)
class PathConfig:
    """Settings for path conversion.

    Attributes:
        style: Target style used by CrossPath.convert(); AUTO targets the
            other style of the source path
        preserve_encoding: Decode undecodable input lossily (with a warning)
            instead of failing
        security_check: Reject dangerous paths when a CrossPath is built
        drive_mappings: Ordered (drive, mount) pairs, first match wins
        normalize: Collapse separators and resolve "." / ".." lexically
        system_dirs: Sensitive prefixes rejected by the security check
        default_drive: Drive that unmapped absolute Unix paths are rooted
            under; None disables the fallback
        default_mount_root: Mount root for unmapped drives (X: -> root/x);
            None disables the fallback
    """

    style: PathStyle = PathStyle.AUTO
    preserve_encoding: bool = True
    security_check: bool = True
    drive_mappings: tuple[tuple[str, str], ...] = DEFAULT_DRIVE_MAPPINGS
    normalize: bool = True
    system_dirs: tuple[str, ...] = DEFAULT_SYSTEM_DIRS
    default_drive: str | None = "C:"
    default_mount_root: str | None = "/mnt"

    def __post_init__(self) -> None:
        object.__setattr__(self, "style", _coerce_style(self.style))
        for name in ("preserve_encoding", "security_check", "normalize"):
            if not isinstance(getattr(self, name), bool):
                raise InvalidConfigError(name, f"expected a boolean, got {getattr(self, name)!r}")

        object.__setattr__(self, "drive_mappings", _coerce_mappings(self.drive_mappings))
        object.__setattr__(self, "system_dirs", _coerce_system_dirs(self.system_dirs))

        if self.default_drive is not None:
            object.__setattr__(
                self, "default_drive", validate_drive(self.default_drive, "default_drive")
            )
        if self.default_mount_root is not None:
            object.__setattr__(
                self,
                "default_mount_root",
                validate_mount(self.default_mount_root, "default_mount_root"),
            )

    def replace(self, **changes: Any) -> "PathConfig":
        """Return a validated copy with some fields changed."""
        return replace(self, **changes)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PathConfig":
        """Create config from a dictionary (for YAML/JSON loading).

        Missing keys take their defaults; unknown keys are rejected.

        Raises:
            InvalidConfigError: If data is not a mapping or holds bad values
        """
        if not isinstance(data, dict):
            raise InvalidConfigError("<root>", f"expected a mapping, got {type(data).__name__}")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise InvalidConfigError(unknown[0], "unknown configuration key")

        kwargs = {key: value for key, value in data.items() if value is not None}
        # None is meaningful for the fallbacks
        for key in ("default_drive", "default_mount_root"):
            if key in data:
                kwargs[key] = data[key]
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Convert config to a dictionary of plain types."""
        return {
            "style": self.style.value,
            "preserve_encoding": self.preserve_encoding,
            "security_check": self.security_check,
            "drive_mappings": [[drive, mount] for drive, mount in self.drive_mappings],
            "normalize": self.normalize,
            "system_dirs": list(self.system_dirs),
            "default_drive": self.default_drive,
            "default_mount_root": self.default_mount_root,
        }

    def to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_json(cls, text: str) -> "PathConfig":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise InvalidConfigError("<json>", str(e)) from e
        return cls.from_dict(data)

    def to_yaml(self) -> str:
        return yaml.safe_dump(self.to_dict(), sort_keys=False, allow_unicode=True)

    @classmethod
    def from_yaml(cls, text: str) -> "PathConfig":
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise InvalidConfigError("<yaml>", str(e)) from e
        return cls.from_dict(data or {})


@dataclass(frozen=True)
class DriveTable:
    """Bidirectional drive lookup built once from a PathConfig.

    Attributes:
        forward: (drive, mount) pairs in config order, first match wins
        reverse: (mount, drive) pairs, longest mount first
    """

    forward: tuple[tuple[str, str], ...]
    reverse: tuple[tuple[str, str], ...]

    @classmethod
    def from_config(cls, config: PathConfig) -> "DriveTable":
        forward = tuple(config.drive_mappings)
        # sorted() is stable, so equal-length mounts keep config order
        reverse = tuple(
            sorted(
                ((mount, drive) for drive, mount in forward),
                key=lambda pair: -len(mount_segments(pair[0])),
            )
        )
        return cls(forward=forward, reverse=reverse)

    def mount_for(self, drive: str) -> str | None:
        """Find the mount point for a drive token such as "C:"."""
        drive = drive.upper()
        for mapped_drive, mount in self.forward:
            if mapped_drive == drive:
                return mount
        return None

    def drive_for(self, segments: tuple[str, ...]) -> tuple[str, int] | None:
        """Find the drive whose mount prefixes an absolute Unix path.

        Args:
            segments: Segments of the Unix path after the root

        Returns:
            Tuple of (drive, number of segments the mount consumed), or None
        """
        for mount, drive in self.reverse:
            prefix = mount_segments(mount)
            if tuple(segments[: len(prefix)]) == prefix:
                return drive, len(prefix)
        return None


def mount_segments(mount: str) -> tuple[str, ...]:
    return tuple(segment for segment in mount.split("/") if segment)


def validate_drive(value: Any, field_name: str) -> str:
    """Normalize a drive token ("c", "C:") to "C:"."""
    if not isinstance(value, str):
        raise InvalidConfigError(field_name, f"drive must be a string, got {value!r}")
    match = _DRIVE_RE.match(value.strip())
    if not match:
        raise InvalidConfigError(field_name, f"'{value}' is not a drive letter such as 'C:'")
    return f"{match.group(1).upper()}:"


def validate_mount(value: Any, field_name: str) -> str:
    """Check that a mount point is an absolute Unix path and strip trailing slashes.

    The root "/" is a valid mount: it matches every rooted Unix path.
    """
    if not isinstance(value, str):
        raise InvalidConfigError(field_name, f"mount point must be a string, got {value!r}")
    mount = value.strip()
    if len(mount) > 1:
        mount = mount.rstrip("/") or "/"
    if not mount.startswith("/") or "\\" in mount:
        raise InvalidConfigError(
            field_name, f"'{value}' is not an absolute Unix mount point such as '/mnt/c'"
        )
    return mount


def _coerce_style(value: Any) -> PathStyle:
    if isinstance(value, PathStyle):
        return value
    if isinstance(value, str):
        for style in PathStyle:
            if value.lower() in (style.value.lower(), style.name.lower()):
                return style
    raise InvalidConfigError("style", f"expected one of Windows, Unix, Auto; got {value!r}")


def _coerce_mappings(value: Any) -> tuple[tuple[str, str], ...]:
    if isinstance(value, dict):
        value = list(value.items())
    if isinstance(value, (str, bytes)) or not hasattr(value, "__iter__"):
        raise InvalidConfigError("drive_mappings", "expected a sequence of (drive, mount) pairs")

    mappings = []
    for index, pair in enumerate(value):
        field_name = f"drive_mappings[{index}]"
        if isinstance(pair, (str, bytes)) or len(pair) != 2:
            raise InvalidConfigError(field_name, f"expected a (drive, mount) pair, got {pair!r}")
        drive, mount = pair
        mappings.append((validate_drive(drive, field_name), validate_mount(mount, field_name)))
    return tuple(mappings)


def _coerce_system_dirs(value: Any) -> tuple[str, ...]:
    if isinstance(value, (str, bytes)) or not hasattr(value, "__iter__"):
        raise InvalidConfigError("system_dirs", "expected a sequence of path prefixes")
    dirs = tuple(value)
    for entry in dirs:
        if not isinstance(entry, str) or not entry.strip():
            raise InvalidConfigError("system_dirs", f"invalid prefix {entry!r}")
    return dirs


def load_config(path: str | Path | None = None) -> PathConfig:
    """Load a PathConfig from a YAML or JSON file.

    Resolution order: explicit path > $CROSSPATH_CONFIG > ~/.crosspath/config.yaml.
    A missing default file yields the defaults; a missing explicit file is an
    error. A single top-level "crosspath" key is unwrapped.

    Raises:
        InvalidConfigError: If the file is missing (explicit path) or malformed
    """
    explicit = path is not None
    if path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            path, explicit = env_path, True
        else:
            path = default_config_path()

    config_path = Path(path).expanduser()
    if not config_path.exists():
        if explicit:
            raise InvalidConfigError("<file>", f"config file not found: {config_path}")
        logger.debug(f"No config file at {config_path}, using defaults")
        return PathConfig()

    try:
        text = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise InvalidConfigError("<file>", f"cannot read {config_path}: {e}") from e

    if config_path.suffix.lower() == ".json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise InvalidConfigError("<json>", f"{config_path}: {e}") from e
    else:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise InvalidConfigError("<yaml>", f"{config_path}: {e}") from e

    data = data or {}
    if isinstance(data, dict) and set(data) == {"crosspath"}:
        data = data["crosspath"] or {}

    logger.debug(f"Loaded config from {config_path}")
    return PathConfig.from_dict(data)


def save_config(config: PathConfig, path: str | Path) -> Path:
    """Write a config as YAML (or JSON for a .json suffix)."""
    config_path = Path(path).expanduser()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    if config_path.suffix.lower() == ".json":
        config_path.write_text(config.to_json() + "\n", encoding="utf-8")
    else:
        config_path.write_text(config.to_yaml(), encoding="utf-8")
    return config_path

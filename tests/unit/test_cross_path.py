# tests/unit/test_cross_path.py
from pathlib import PurePosixPath, PureWindowsPath

import pytest

from crosspath import (
    CrossPath,
    PathConfig,
    convert_path,
    to_unix_path,
    to_windows_path,
)
from crosspath import cross_path
from crosspath.encoding import UTF16LE_BOM
from crosspath.exceptions import (
    EncodingError,
    InvalidConfigError,
    MalformedPathError,
    SecurityViolation,
)
from crosspath.models import DetectedEncoding, PathStyle, ViolationKind


class TestConstruction:
    def test_text_input(self):
        path = CrossPath(r"C:\Users\John\file.txt")
        assert path.canonical == r"C:\Users\John\file.txt"
        assert path.original == r"C:\Users\John\file.txt"
        assert path.encoding is DetectedEncoding.UTF8
        assert path.original_style is PathStyle.WINDOWS
        assert path.is_absolute

    def test_factories(self):
        config = PathConfig(style="Unix")
        assert CrossPath.new("/tmp").config == PathConfig()
        assert CrossPath.with_config("/tmp", config).config is config

    def test_utf16le_bytes(self):
        """Raw UTF-16LE bytes with a BOM are decoded before parsing."""
        data = UTF16LE_BOM + r"C:\Users\John\file.txt".encode("utf-16-le")
        path = CrossPath(data)
        assert path.encoding is DetectedEncoding.UTF16LE
        assert path.canonical == r"C:\Users\John\file.txt"
        assert path.to_unix() == "/mnt/c/Users/John/file.txt"

    def test_windows1252_bytes(self):
        path = CrossPath(b"C:\\caf\xe9")
        assert path.encoding is DetectedEncoding.WINDOWS1252
        assert path.to_unix() == "/mnt/c/café"

    def test_pathlike_input(self):
        assert CrossPath(PurePosixPath("/home/john")).to_windows() == r"C:\home\john"
        assert CrossPath(PureWindowsPath(r"D:\data")).to_unix() == "/mnt/d/data"

    def test_undecodable_bytes_are_lossy_by_default(self):
        path = CrossPath(b"/tmp/\x81\x9d")
        assert path.is_lossy
        assert path.warnings
        assert path.canonical.startswith("/tmp/")

    def test_strict_encoding_raises(self):
        config = PathConfig(preserve_encoding=False)
        with pytest.raises(EncodingError):
            CrossPath(b"/tmp/\x81\x9d", config)

    def test_empty_path(self):
        with pytest.raises(MalformedPathError):
            CrossPath("")

    def test_security_check_on_construction(self):
        with pytest.raises(SecurityViolation) as exc_info:
            CrossPath("../../etc/passwd")
        assert exc_info.value.kind is ViolationKind.TRAVERSAL_ATTEMPT

    def test_security_check_can_be_disabled(self):
        path = CrossPath("../../etc/passwd", PathConfig(security_check=False))
        assert not path.is_safe()
        assert path.security_violation().kind is ViolationKind.TRAVERSAL_ATTEMPT

    def test_config_must_be_a_path_config(self):
        with pytest.raises(InvalidConfigError):
            CrossPath("/tmp", config={"style": "Unix"})

    def test_unsupported_input_type(self):
        with pytest.raises(TypeError):
            CrossPath(42)


class TestImmutability:
    def test_attributes_cannot_be_set(self):
        path = CrossPath("/tmp/x")
        with pytest.raises(AttributeError):
            path._parsed = None
        with pytest.raises(AttributeError):
            path.anything = 1

    def test_attributes_cannot_be_deleted(self):
        path = CrossPath("/tmp/x")
        with pytest.raises(AttributeError):
            del path._config

    def test_conversion_does_not_change_the_path(self):
        path = CrossPath(r"C:\Users\John")
        path.to_unix()
        path.to_windows()
        assert path.canonical == r"C:\Users\John"

    def test_module_keeps_no_converter_cache(self):
        """Converters and checkers come from the instance config, not a shared cache."""
        assert not any(hasattr(value, "cache_info") for value in vars(cross_path).values())


class TestConversion:
    def test_to_unix_and_back(self):
        path = CrossPath(r"C:\Users\John\file.txt")
        unix = path.to_unix()
        assert unix == "/mnt/c/Users/John/file.txt"
        assert CrossPath(unix).to_windows() == r"C:\Users\John\file.txt"

    def test_to_windows(self):
        assert CrossPath("/home/john/file.txt").to_windows() == r"C:\home\john\file.txt"

    def test_custom_mapping(self):
        config = PathConfig(drive_mappings=[("D:", "/mnt/data")])
        assert CrossPath(r"D:\projects", config).to_unix() == "/mnt/data/projects"
        assert CrossPath("/mnt/data/projects", config).to_windows() == r"D:\projects"

    def test_convert_uses_configured_style(self):
        config = PathConfig(style=PathStyle.UNIX)
        assert CrossPath(r"C:\x", config).convert() == "/mnt/c/x"

    def test_convert_auto_flips_style(self):
        assert CrossPath(r"C:\x").convert() == "/mnt/c/x"
        assert CrossPath("/mnt/c/x").convert() == r"C:\x"

    def test_to_platform(self, monkeypatch):
        """An AUTO config style converts to the host's style."""
        monkeypatch.setattr("crosspath.cross_path.current_style", lambda: PathStyle.WINDOWS)
        assert CrossPath("/mnt/c/x").to_platform() == r"C:\x"
        monkeypatch.setattr("crosspath.cross_path.current_style", lambda: PathStyle.UNIX)
        assert CrossPath(r"C:\x").to_platform() == "/mnt/c/x"

    def test_normalized(self):
        assert CrossPath("/home/john/../jane/./x").normalized() == "/home/jane/x"

    def test_original_style_of_relative_paths(self):
        assert CrossPath("docs/file.txt").original_style is PathStyle.UNIX
        assert CrossPath(r"docs\file.txt").original_style is PathStyle.WINDOWS
        assert CrossPath("file.txt").original_style is PathStyle.AUTO


class TestBytesOutput:
    def test_original_bytes_are_preserved(self):
        data = b"C:\\caf\xe9"
        assert CrossPath(data).to_bytes() == data

    def test_text_input_encodes_as_utf8(self):
        assert CrossPath("/tmp/café").to_bytes() == "/tmp/café".encode("utf-8")

    def test_explicit_encoding(self):
        path = CrossPath("/tmp/ab")
        assert path.to_bytes(DetectedEncoding.UTF16LE) == "/tmp/ab".encode("utf-16-le")

    def test_unrepresentable_text(self):
        with pytest.raises(EncodingError):
            CrossPath("/tmp/日本").to_bytes(DetectedEncoding.WINDOWS1252)


class TestProtocols:
    def test_str_and_fspath(self):
        path = CrossPath("/tmp/x")
        assert str(path) == "/tmp/x"
        assert PurePosixPath(path) == PurePosixPath("/tmp/x")

    def test_repr(self):
        assert repr(CrossPath("/tmp/x")) == "CrossPath('/tmp/x', style=Unix)"

    def test_equality_and_hash(self):
        assert CrossPath("/tmp/x") == CrossPath(b"/tmp/x")
        assert hash(CrossPath("/tmp/x")) == hash(CrossPath("/tmp/x"))
        assert CrossPath("/tmp/x") != CrossPath("/tmp/x", PathConfig(normalize=False))
        assert CrossPath("/tmp/x") != "/tmp/x"


class TestModuleFunctions:
    def test_to_unix_path(self):
        assert to_unix_path(r"C:\Users\John\file.txt") == "/mnt/c/Users/John/file.txt"

    def test_to_windows_path(self):
        assert to_windows_path("/home/john/file.txt") == r"C:\home\john\file.txt"

    def test_convert_path(self):
        config = PathConfig(drive_mappings=[("D:", "/mnt/data")])
        assert convert_path(r"D:\x", PathStyle.UNIX, config) == "/mnt/data/x"
        assert convert_path("/mnt/data/x", PathStyle.AUTO, config) == r"D:\x"

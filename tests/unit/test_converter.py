# tests/unit/test_converter.py
import pytest

from crosspath.config import PathConfig
from crosspath.converter import PathStyleConverter, convert, normalize_path
from crosspath.exceptions import AmbiguousStyle, InvalidDriveMapping
from crosspath.models import PathStyle


@pytest.fixture
def converter():
    return PathStyleConverter()


class TestWindowsToUnix:
    def test_mapped_drive(self, converter):
        result = converter.convert(r"C:\Users\John\file.txt", PathStyle.UNIX)
        assert result == "/mnt/c/Users/John/file.txt"

    def test_lowercase_drive(self, converter):
        assert converter.convert(r"d:\data", PathStyle.UNIX) == "/mnt/d/data"

    def test_bare_drive(self, converter):
        assert converter.convert("C:", PathStyle.UNIX) == "/mnt/c"
        assert converter.convert("C:\\", PathStyle.UNIX) == "/mnt/c"

    def test_unmapped_drive_uses_mount_root(self, converter):
        assert converter.convert(r"X:\foo", PathStyle.UNIX) == "/mnt/x/foo"

    def test_root_as_mount_root(self):
        converter = PathStyleConverter(PathConfig(default_mount_root="/"))
        assert converter.convert(r"X:\foo", PathStyle.UNIX) == "/x/foo"
        assert converter.convert("/x/foo", PathStyle.WINDOWS) == r"X:\foo"

    def test_unmapped_drive_without_fallback(self):
        converter = PathStyleConverter(PathConfig(default_mount_root=None))
        with pytest.raises(InvalidDriveMapping) as exc_info:
            converter.convert(r"X:\foo", PathStyle.UNIX)
        assert exc_info.value.prefix == "X:"

    def test_custom_mapping(self):
        config = PathConfig(drive_mappings=[("D:", "/mnt/data")])
        converter = PathStyleConverter(config)
        assert converter.convert(r"D:\projects\app", PathStyle.UNIX) == "/mnt/data/projects/app"

    def test_unc_path(self, converter):
        assert converter.convert(r"\\server\share\a\b", PathStyle.UNIX) == "//server/share/a/b"

    def test_rooted_windows_path(self, converter):
        """A drive-less rooted path only has its separators translated."""
        assert converter.convert(r"\Temp\x", PathStyle.UNIX) == "/Temp/x"

    def test_relative_path(self, converter):
        assert converter.convert(r"docs\file.txt", PathStyle.UNIX) == "docs/file.txt"


class TestUnixToWindows:
    def test_mounted_path(self, converter):
        assert converter.convert("/mnt/c/Users/John", PathStyle.WINDOWS) == r"C:\Users\John"

    def test_mount_root_itself(self, converter):
        assert converter.convert("/mnt/c", PathStyle.WINDOWS) == "C:\\"

    def test_unmapped_path_goes_under_default_drive(self, converter):
        """Unmapped absolute Unix paths are rooted under the default drive."""
        result = converter.convert("/home/john/file.txt", PathStyle.WINDOWS)
        assert result == r"C:\home\john\file.txt"

    def test_default_mount_scheme_is_reversed(self, converter):
        assert converter.convert("/mnt/x/foo", PathStyle.WINDOWS) == r"X:\foo"

    def test_mount_scheme_needs_a_single_letter(self, converter):
        assert converter.convert("/mnt/data/foo", PathStyle.WINDOWS) == r"C:\mnt\data\foo"

    def test_no_default_drive(self):
        converter = PathStyleConverter(PathConfig(default_drive=None))
        with pytest.raises(InvalidDriveMapping) as exc_info:
            converter.convert("/home/x", PathStyle.WINDOWS)
        assert exc_info.value.prefix == "/home"

    def test_custom_mapping(self):
        config = PathConfig(drive_mappings=[("D:", "/mnt/data")])
        converter = PathStyleConverter(config)
        assert converter.convert("/mnt/data/projects", PathStyle.WINDOWS) == r"D:\projects"

    def test_nested_mounts(self):
        """The longest matching mount point wins."""
        config = PathConfig(drive_mappings=[("C:", "/mnt"), ("D:", "/mnt/data")])
        converter = PathStyleConverter(config)
        assert converter.convert("/mnt/data/x", PathStyle.WINDOWS) == r"D:\x"
        assert converter.convert("/mnt/other", PathStyle.WINDOWS) == r"C:\other"

    def test_unc_path(self, converter):
        assert converter.convert("//server/share/a/b", PathStyle.WINDOWS) == r"\\server\share\a\b"

    def test_root_mount(self):
        """A drive mounted at '/' takes every rooted path, after longer mounts."""
        config = PathConfig(drive_mappings=[("C:", "/"), ("D:", "/mnt/data")])
        converter = PathStyleConverter(config)
        assert converter.convert("/home/x", PathStyle.WINDOWS) == r"C:\home\x"
        assert converter.convert("/mnt/data/x", PathStyle.WINDOWS) == r"D:\x"
        assert converter.convert(r"C:\Users", PathStyle.UNIX) == "/Users"
        assert converter.convert("C:", PathStyle.UNIX) == "/"

    def test_relative_path(self, converter):
        assert converter.convert("docs/file.txt", PathStyle.WINDOWS) == r"docs\file.txt"

    def test_windows_path_stays_windows(self, converter):
        assert converter.convert("C:/Users/John", PathStyle.WINDOWS) == r"C:\Users\John"


class TestAutoTarget:
    def test_flips_absolute_paths(self, converter):
        assert converter.convert(r"C:\x", PathStyle.AUTO) == "/mnt/c/x"
        assert converter.convert("/mnt/c/x", PathStyle.AUTO) == r"C:\x"

    def test_relative_paths_use_separators(self, converter):
        assert converter.convert(r"a\b", PathStyle.AUTO) == "a/b"
        assert converter.convert("a/b", PathStyle.AUTO) == r"a\b"

    def test_mixed_separators_are_ambiguous(self, converter):
        with pytest.raises(AmbiguousStyle):
            converter.convert("a\\b/c", PathStyle.AUTO)

    def test_mixed_separators_with_explicit_source(self, converter):
        result = converter.convert("a\\b/c", PathStyle.AUTO, source=PathStyle.UNIX)
        assert result == r"a\b\c"

    def test_no_separators(self, converter):
        assert converter.convert("file.txt", PathStyle.AUTO) == "file.txt"


class TestNormalization:
    def test_dot_segments_are_resolved(self, converter):
        result = converter.convert(r"C:\a\.\b\..\c", PathStyle.UNIX)
        assert result == "/mnt/c/a/c"

    def test_repeated_separators_collapse(self, converter):
        assert converter.convert("/mnt/c//Users///John/", PathStyle.WINDOWS) == r"C:\Users\John"

    def test_normalization_can_be_disabled(self):
        converter = PathStyleConverter(PathConfig(normalize=False))
        assert converter.convert(r"C:\a\.\b\..\c", PathStyle.UNIX) == "/mnt/c/a/./b/../c"

    def test_relative_collapses_to_dot(self, converter):
        assert converter.convert("a/..", PathStyle.WINDOWS) == "."


class TestRoundTrip:
    @pytest.mark.parametrize(
        "path",
        [r"C:\Users\John\file.txt", r"D:\data", r"\\server\share\dir", r"E:\a b\c.d"],
    )
    def test_windows_round_trip(self, converter, path):
        unix = converter.convert(path, PathStyle.UNIX)
        assert converter.convert(unix, PathStyle.WINDOWS) == path

    def test_drive_letter_case_is_normalized(self, converter):
        unix = converter.convert(r"c:\Users", PathStyle.UNIX)
        assert converter.convert(unix, PathStyle.WINDOWS) == r"C:\Users"


class TestModuleFunctions:
    def test_convert(self):
        assert convert(r"C:\x", PathStyle.WINDOWS, PathStyle.UNIX) == "/mnt/c/x"

    def test_convert_with_config(self):
        config = PathConfig(drive_mappings=[("D:", "/mnt/data")])
        assert convert("/mnt/data/x", PathStyle.UNIX, PathStyle.WINDOWS, config) == r"D:\x"

    def test_normalize_path_keeps_style(self):
        assert normalize_path("a//b/./c/..") == "a/b"
        assert normalize_path(r"C:\a\..\..\b") == r"C:\b"
        assert normalize_path("/x/../..") == "/"

    def test_normalize_path_does_not_map_drives(self):
        assert normalize_path("C:/Users/./John") == r"C:\Users\John"

    def test_normalize_path_with_style(self):
        assert normalize_path(r"a\b\..\c", PathStyle.UNIX) == "a/c"

    @pytest.mark.parametrize("path", ["a//b/./c/..", r"C:\a\..\b", "../../x", "/", "."])
    def test_normalize_path_is_idempotent(self, path):
        once = normalize_path(path)
        assert normalize_path(once) == once

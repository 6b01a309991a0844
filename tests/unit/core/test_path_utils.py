"""Tests for core path utilities."""

import logging

import pytest

from localhistory.core.errors import NullInputError
from localhistory.core.path_utils import (
    get_full_path,
    is_absolute_path,
    is_sub_path_of,
    normalize_path,
)


class TestNormalizePath:
    """Tests for normalize_path function."""

    def test_converts_backslashes(self):
        """normalize_path turns backslashes into forward slashes."""
        assert normalize_path("C:\\foo\\bar.txt") == "C:/foo/bar.txt"

    def test_collapses_repeated_separators(self):
        """normalize_path collapses runs of separators."""
        assert normalize_path("/foo//bar\\\\baz") == "/foo/bar/baz"

    def test_removes_trailing_separator(self):
        """normalize_path drops a trailing separator."""
        assert normalize_path("C:\\foo\\") == "C:/foo"
        assert normalize_path("/foo/") == "/foo"

    def test_keeps_root(self):
        """normalize_path keeps the root separator."""
        assert normalize_path("/") == "/"
        assert normalize_path("C:\\") == "C:/"

    def test_resolves_dot_segments(self):
        """normalize_path resolves . and .. segments."""
        assert normalize_path("C:\\foo\\.\\baz\\..\\bar") == "C:/foo/bar"

    def test_keeps_unc_prefix(self):
        """normalize_path keeps the double slash of UNC paths."""
        assert normalize_path("\\\\server\\share\\dir") == "//server/share/dir"

    def test_keeps_drive_only(self):
        """normalize_path leaves a bare drive untouched."""
        assert normalize_path("C:") == "C:"

    def test_empty_string(self):
        """normalize_path returns empty string for empty input."""
        assert normalize_path("") == ""

    def test_none_raises(self):
        """normalize_path rejects None."""
        with pytest.raises(NullInputError):
            normalize_path(None)


class TestIsAbsolutePath:
    """Tests for is_absolute_path function."""

    @pytest.mark.parametrize("path", ["/foo", "C:/foo", "c:", "//server/share"])
    def test_absolute(self, path):
        """is_absolute_path recognizes rooted and drive paths."""
        assert is_absolute_path(path) is True

    @pytest.mark.parametrize("path", ["foo", "foo/bar", "", "."])
    def test_relative(self, path):
        """is_absolute_path rejects relative paths."""
        assert is_absolute_path(path) is False


class TestGetFullPath:
    """Tests for get_full_path function."""

    def test_absolute_path_is_normalized(self):
        """get_full_path normalizes an absolute path."""
        assert get_full_path("C:\\foo\\..\\bar\\") == "C:/bar"

    def test_relative_path_uses_cwd(self):
        """get_full_path joins relative paths to cwd."""
        assert get_full_path("docs\\a.txt", cwd="/home/user") == "/home/user/docs/a.txt"

    def test_relative_path_with_parent(self):
        """get_full_path resolves .. against cwd."""
        assert get_full_path("../other", cwd="C:\\work\\repo") == "C:/work/other"

    def test_defaults_to_process_cwd(self, tmp_path, monkeypatch):
        """get_full_path uses os.getcwd() without cwd."""
        monkeypatch.chdir(tmp_path)
        expected = normalize_path(str(tmp_path)) + "/file.txt"
        assert get_full_path("file.txt") == expected


class TestIsSubPathOf:
    """Tests for is_sub_path_of function."""

    def test_file_inside_base(self):
        """is_sub_path_of finds a file directly inside the base."""
        assert is_sub_path_of("C:\\foo\\bar.txt", "C:\\foo") is True

    def test_nested_file(self):
        """is_sub_path_of finds deeply nested files."""
        assert is_sub_path_of("C:\\foo\\a\\b\\c.txt", "C:\\foo") is True

    def test_equal_paths(self):
        """is_sub_path_of treats a path as a sub-path of itself."""
        assert is_sub_path_of("C:\\foo", "C:\\foo") is True

    def test_case_insensitive(self):
        """is_sub_path_of ignores case."""
        assert is_sub_path_of("c:\\FOO\\Bar.txt", "C:\\foo") is True

    def test_mixed_separators(self):
        """is_sub_path_of treats / and \\ alike."""
        assert is_sub_path_of("C:/foo/bar.txt", "C:\\foo\\") is True
        assert is_sub_path_of("/srv/data/file", "\\srv\\data") is True

    def test_different_tree(self):
        """is_sub_path_of rejects paths outside the base."""
        assert is_sub_path_of("C:\\other\\bar.txt", "C:\\foo") is False

    def test_parent_is_not_sub_path(self):
        """is_sub_path_of rejects the parent of the base."""
        assert is_sub_path_of("C:\\", "C:\\foo") is False

    def test_root_base(self):
        """is_sub_path_of accepts anything below a root base."""
        assert is_sub_path_of("/etc/hosts", "/") is True
        assert is_sub_path_of("C:\\foo", "C:\\") is True

    def test_strict_rejects_partial_folder_name(self):
        """Strict mode requires an exact folder-name match."""
        assert is_sub_path_of("C:\\foobar\\file.txt", "C:\\foo") is False
        assert is_sub_path_of("C:\\foobarX", "C:\\foobar") is False

    def test_prefix_only_accepts_partial_folder_name(self):
        """Prefix-only mode keeps the raw prefix comparison."""
        assert (
            is_sub_path_of("C:\\foobar\\file.txt", "C:\\foo", strict_boundary=False)
            is True
        )
        assert is_sub_path_of("C:\\foobarX", "C:\\foobar", strict_boundary=False) is True

    def test_prefix_only_still_rejects_other_trees(self):
        """Prefix-only mode still rejects paths that do not share the prefix."""
        assert (
            is_sub_path_of("C:\\other\\bar.txt", "C:\\foo", strict_boundary=False)
            is False
        )

    def test_dot_segments_resolved(self):
        """is_sub_path_of compares normalized paths."""
        assert is_sub_path_of("C:\\foo\\..\\bar\\x.txt", "C:\\foo") is False
        assert is_sub_path_of("C:\\bar\\..\\foo\\x.txt", "C:\\foo") is True

    def test_relative_base_resolved_against_cwd(self, tmp_path, monkeypatch):
        """is_sub_path_of resolves a relative base against the working directory."""
        monkeypatch.chdir(tmp_path)
        path = str(tmp_path / "repo" / "file.txt")
        assert is_sub_path_of(path, "repo") is True

    def test_uses_injected_collaborators(self):
        """is_sub_path_of calls the supplied normalize and resolve functions."""
        calls = []

        def normalize(p):
            calls.append(("normalize", p))
            return p.lower()

        def resolve(p):
            calls.append(("resolve", p))
            return "/mnt/" + p

        assert is_sub_path_of(
            "/mnt/base/x", "BASE", normalize=normalize, resolve=resolve
        ) is True
        assert calls == [
            ("normalize", "/mnt/base/x"),
            ("normalize", "BASE"),
            ("resolve", "base"),
        ]

    def test_logs_boundary_rejection(self, caplog):
        """is_sub_path_of logs when the boundary check rejects a prefix."""
        with caplog.at_level(logging.DEBUG, logger="localhistory.core.path_utils"):
            is_sub_path_of("C:\\foobar", "C:\\foo")
        assert "not on a folder boundary" in caplog.text

    @pytest.mark.parametrize(("path", "base"), [(None, "C:\\"), ("C:\\", None)])
    def test_none_raises(self, path, base):
        """is_sub_path_of rejects None arguments."""
        with pytest.raises(NullInputError):
            is_sub_path_of(path, base)

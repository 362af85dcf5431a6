"""Unit tests for URI path utilities."""

import pytest

from editor_uri.files import from_file_path, to_file_path
from editor_uri.parser import parse
from editor_uri.paths import basename, dirname, extname, join_path, resolve_path
from editor_uri.uri import URI, URIComponents


def uri_with_path(path: str) -> URI:
    return URI.from_components(URIComponents(scheme="file", path=path))


class TestJoinPath:
    """Tests for join_path() function."""

    @pytest.mark.parametrize(
        ("value", "paths", "expected"),
        [
            ("foo://a/foo/bar", ["x"], "foo://a/foo/bar/x"),
            ("foo://a/foo/bar/", ["x"], "foo://a/foo/bar/x"),
            ("foo://a/foo/bar/", ["/x"], "foo://a/foo/bar/x"),
            ("foo://a/foo/bar/", ["x/"], "foo://a/foo/bar/x/"),
            ("foo://a/foo/bar/", ["x", "y"], "foo://a/foo/bar/x/y"),
            ("foo://a/foo/bar/", ["x/", "/y"], "foo://a/foo/bar/x/y"),
            ("foo://a", ["x"], "foo://a/x"),
            ("foo://a/", ["x"], "foo://a/x"),
            ("untitled:", ["foo"], "untitled:foo"),
            ("untitled:untitled-1", ["x"], "untitled:untitled-1/x"),
        ],
    )
    def test_join_path(self, value: str, paths: list[str], expected: str):
        """Test segments are appended with one "/" at each boundary."""
        assert str(join_path(parse(value), *paths)) == expected

    def test_join_path_https(self):
        """Test joining onto an https URI."""
        uri = parse("https://example.com/path/to/file.txt")
        assert join_path(uri, "subdir", "file.js").path == "/path/to/file.txt/subdir/file.js"

    def test_join_path_keeps_dot_segments(self):
        """Test "." and ".." segments are not resolved."""
        uri = parse("foo://a/foo/bar/")
        assert join_path(uri, ".", "/y").path == "/foo/bar/./y"
        assert join_path(uri, "x/y/z", "..").path == "/foo/bar/x/y/z/.."

    def test_join_path_carries_other_components(self):
        """Test scheme, authority, query and fragment are kept."""
        uri = join_path(parse("https://h/a?q=1#f"), "b")
        assert str(uri) == "https://h/a/b?q=1#f"

    def test_join_path_no_segments_returns_same_uri(self):
        """Test joining nothing returns the input unchanged."""
        uri = parse("foo://a/x")
        assert join_path(uri) is uri
        assert join_path(uri, "") is uri

    def test_join_path_file_uri(self):
        """Test joining onto file URIs in both path forms."""
        assert to_file_path(join_path(from_file_path("/home/me"), "src", "main.py")) == (
            "/home/me/src/main.py"
        )
        assert to_file_path(join_path(from_file_path("c:\\proj"), "src")) == "c:\\proj\\src"


class TestResolvePath:
    """Tests for resolve_path() function."""

    @pytest.mark.parametrize(
        ("value", "path", "expected"),
        [
            ("foo://a/foo/bar", "x", "foo://a/foo/bar/x"),
            ("foo://a/foo/bar/", "x", "foo://a/foo/bar/x"),
            ("foo://a/foo/bar/", "/x", "foo://a/x"),
            ("foo://a/foo/bar/", "x/", "foo://a/foo/bar/x"),
            ("foo://a", "x/", "foo://a/x"),
            ("foo://a", "/x/", "foo://a/x"),
            ("foo://a/b", "/x/..//y/.", "foo://a/y"),
            ("foo://a/b", "x/..//y/.", "foo://a/b/y"),
            ("untitled:untitled-1", "../foo", "untitled:foo"),
            ("untitled:", "foo", "untitled:foo"),
            ("untitled:", "..", "untitled:"),
            ("untitled:", "/foo", "untitled:foo"),
            ("untitled:/", "/foo", "untitled:/foo"),
        ],
    )
    def test_resolve_path(self, value: str, path: str, expected: str):
        """Test segments are resolved and the result normalized."""
        assert str(resolve_path(parse(value), path)) == expected

    def test_resolve_path_never_escapes_root(self):
        """Test ".." above the root stays at the root."""
        assert resolve_path(uri_with_path("/a"), "..", "..").path == "/"
        assert str(resolve_path(parse("foo://a/b/c"), "../../..")) == "foo://a/"

    def test_resolve_path_normalizes_base(self):
        """Test dot segments already in the base path are resolved."""
        assert resolve_path(uri_with_path("/a/./b/../c//"), "d").path == "/a/c/d"

    def test_resolve_path_multiple_segments(self):
        """Test segments are applied left to right."""
        assert resolve_path(uri_with_path("/a/b"), "c", "../d", "e/").path == "/a/b/d/e"

    def test_resolve_path_windows_file(self):
        """Test resolving keeps the drive letter segment."""
        uri = resolve_path(from_file_path("c:\\proj\\src"), "..", "docs")
        assert to_file_path(uri) == "c:\\proj\\docs"


class TestDirname:
    """Tests for dirname() function."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("foo://a/some/file/test.txt", "/some/file"),
            ("foo://a/some/file/", "/some"),
            ("foo://a/some/file///", "/some"),
            ("foo://a/some/file", "/some"),
            ("foo://a/some", "/"),
            ("foo://a/", "/"),
            ("foo://a", ""),
            ("foo://", ""),
            ("untitled:untitled-1", ""),
            ("untitled:dir/untitled-1", "dir"),
        ],
    )
    def test_dirname(self, value: str, expected: str):
        """Test dirname() drops the last segment."""
        assert dirname(parse(value)) == expected

    def test_dirname_file(self):
        """Test dirname() of a file path."""
        assert dirname(uri_with_path("/a/b/c.txt")) == "/a/b"
        assert dirname(uri_with_path("/a/b/")) == "/a"


class TestBasename:
    """Tests for basename() function."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("foo://a/some/file/test.txt", "test.txt"),
            ("foo://a/some/file/", "file"),
            ("foo://a/some/file///", "file"),
            ("foo://a/some/file", "file"),
            ("foo://a/some", "some"),
            ("foo://a/", ""),
            ("foo://a", ""),
            ("untitled:untitled-1", "untitled-1"),
        ],
    )
    def test_basename(self, value: str, expected: str):
        """Test basename() returns the last non-empty segment."""
        assert basename(parse(value)) == expected

    def test_basename_file(self):
        """Test basename() of a file path."""
        assert basename(uri_with_path("/a/b/c.txt")) == "c.txt"


class TestExtname:
    """Tests for extname() function."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("foo://a/foo/bar", ""),
            ("foo://a/foo/bar.foo", ".foo"),
            ("foo://a/foo/.foo", ""),
            ("foo://a/foo/.foo.bar", ".bar"),
            ("foo://a/foo/a.foo/", ".foo"),
            ("foo://a/foo/a.foo//", ".foo"),
            ("foo://a/foo/archive.tar.gz", ".gz"),
            ("untitled:untitled-1", ""),
        ],
    )
    def test_extname(self, value: str, expected: str):
        """Test extname() returns the extension including the dot."""
        assert extname(parse(value)) == expected

    def test_extname_file(self):
        """Test extname() of a file path."""
        assert extname(uri_with_path("/a/b/c.txt")) == ".txt"

"""
Tests for the PathResolver.
"""

import os

import pytest

from fshell.entities.session import Session
from fshell.exceptions import UsageError
from fshell.use_cases.paths.resolve_path import PathResolver


class TestPathResolver:
    """Test cases for the PathResolver."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("docs", "/home/user/docs"),
            ("./docs/", "/home/user/docs"),
            ("..", "/home"),
            ("../../..", "/"),
            ("a/./b/../c", "/home/user/a/c"),
            ("/etc/../var", "/var"),
        ],
    )
    def test_resolve(self, raw, expected):
        assert PathResolver().resolve("/home/user", raw) == expected

    @pytest.mark.parametrize("path", ["/", "/home/user", "/var/log/syslog"])
    def test_resolve_is_idempotent_for_normalized_absolute_paths(self, path):
        resolver = PathResolver()

        once = resolver.resolve("/somewhere/else", path)

        assert once == path
        assert resolver.resolve("/another", once) == once

    def test_resolve_does_not_require_existence(self):
        assert (
            PathResolver().resolve("/nonexistent", "missing/child")
            == "/nonexistent/missing/child"
        )

    def test_resolve_expands_home(self):
        assert PathResolver().resolve("/tmp", "~") == os.path.expanduser("~")

    @pytest.mark.parametrize("raw", ["", "   "])
    def test_resolve_rejects_empty_input(self, raw):
        with pytest.raises(UsageError, match="Missing path argument"):
            PathResolver().resolve("/tmp", raw)

    def test_resolve_for_session(self):
        assert PathResolver().resolve_for(Session("/srv"), "app") == "/srv/app"

    @pytest.mark.parametrize(
        "path, root, expected",
        [
            ("/a/b", "/a", True),
            ("/a", "/a", True),
            ("/ab", "/a", False),
            ("/a", "/a/b", False),
            ("/anything", "/", True),
        ],
    )
    def test_is_within(self, path, root, expected):
        assert PathResolver.is_within(path, root) is expected

"""
Tests for the TreeWalker and PostOrderWalk.
"""

import os
from unittest.mock import MagicMock

import pytest

from fshell.entities.tree_entry import TreeEntry
from fshell.exceptions import IOFailure, NotFoundError
from fshell.ports.files.filesystem_port import FileSystemPort
from fshell.use_cases.tree.tree_walker import TreeWalker

# /r
# ├── a/
# │   ├── b/
# │   │   └── f3
# │   └── f2
# └── f1
FAKE_TREE = {
    "/r": [TreeEntry("/r/a", True), TreeEntry("/r/f1", False)],
    "/r/a": [TreeEntry("/r/a/b", True), TreeEntry("/r/a/f2", False)],
    "/r/a/b": [TreeEntry("/r/a/b/f3", False)],
}


@pytest.fixture
def fake_fs():
    fs = MagicMock(spec=FileSystemPort)
    fs.list_dir.side_effect = lambda path: FAKE_TREE[path]
    fs.is_dir.return_value = True
    fs.is_symlink.return_value = False
    return fs


class TestListingMode:
    def test_direct_children_only(self, fake_fs, mock_logger):
        walker = TreeWalker(fake_fs, mock_logger)

        entries = list(walker.iter_listing("/r"))

        assert [e.path for e in entries] == ["/r/a", "/r/f1"]
        assert all(e.depth == 1 for e in entries)
        fake_fs.list_dir.assert_called_once_with("/r")

    def test_recursive_is_pre_order(self, fake_fs, mock_logger):
        walker = TreeWalker(fake_fs, mock_logger)

        entries = list(walker.iter_listing("/r", recursive=True))

        assert [(e.path, e.depth) for e in entries] == [
            ("/r/a", 1),
            ("/r/a/b", 2),
            ("/r/a/b/f3", 3),
            ("/r/a/f2", 2),
            ("/r/f1", 1),
        ]

    def test_listing_is_lazy(self, fake_fs, mock_logger):
        walker = TreeWalker(fake_fs, mock_logger)

        entries = walker.iter_listing("/r", recursive=True)
        fake_fs.list_dir.assert_not_called()

        assert next(entries).path == "/r/a"
        fake_fs.list_dir.assert_called_once_with("/r")

    def test_each_call_walks_again(self, fake_fs, mock_logger):
        walker = TreeWalker(fake_fs, mock_logger)

        list(walker.iter_listing("/r"))
        list(walker.iter_listing("/r"))

        assert fake_fs.list_dir.call_count == 2

    def test_listing_error_propagates(self, fake_fs, mock_logger):
        fake_fs.list_dir.side_effect = NotFoundError("No such file or directory: /r")
        walker = TreeWalker(fake_fs, mock_logger)

        with pytest.raises(NotFoundError):
            list(walker.iter_listing("/r"))


class TestPostOrderWalk:
    def test_children_before_parents(self, fake_fs, mock_logger):
        walk = TreeWalker(fake_fs, mock_logger).iter_post_order("/r")

        assert [e.path for e in walk] == [
            "/r/a/b/f3",
            "/r/a/b",
            "/r/a/f2",
            "/r/a",
            "/r/f1",
            "/r",
        ]
        assert walk.errors == []

    def test_walk_can_be_resumed(self, fake_fs, mock_logger):
        walk = TreeWalker(fake_fs, mock_logger).iter_post_order("/r")

        first = [next(walk).path, next(walk).path]
        rest = [e.path for e in walk]

        assert first + rest == [
            "/r/a/b/f3",
            "/r/a/b",
            "/r/a/f2",
            "/r/a",
            "/r/f1",
            "/r",
        ]

    def test_root_file_yields_only_root(self, fake_fs, mock_logger):
        fake_fs.is_dir.return_value = False
        walk = TreeWalker(fake_fs, mock_logger).iter_post_order("/r/f1")

        entries = list(walk)

        assert entries == [TreeEntry("/r/f1", False, 0)]
        fake_fs.list_dir.assert_not_called()

    def test_symlinked_directory_root_is_not_descended(self, fake_fs, mock_logger):
        fake_fs.is_symlink.return_value = True
        walk = TreeWalker(fake_fs, mock_logger).iter_post_order("/r")

        assert [e.path for e in walk] == ["/r"]
        assert not walk.root.is_directory

    def test_failure_skips_ancestors_but_not_siblings(self, fake_fs, mock_logger):
        walk = TreeWalker(fake_fs, mock_logger).iter_post_order("/r")
        produced = []
        error = IOFailure("Permission denied: /r/a/b/f3")

        for entry in walk:
            produced.append(entry.path)
            if entry.path == "/r/a/b/f3":
                walk.mark_failed(entry, error)

        # /r/a/b, /r/a and /r are never offered once f3 could not be removed
        assert produced == ["/r/a/b/f3", "/r/a/f2", "/r/f1"]
        assert walk.errors == [error]

    def test_unlistable_directory_is_reported_once(self, fake_fs, mock_logger):
        def list_dir(path):
            if path == "/r/a":
                raise IOFailure("Permission denied: /r/a")
            return FAKE_TREE[path]

        fake_fs.list_dir.side_effect = list_dir
        walk = TreeWalker(fake_fs, mock_logger).iter_post_order("/r")

        produced = [e.path for e in walk]

        assert produced == ["/r/f1"]
        assert len(walk.errors) == 1
        assert "/r/a" in str(walk.errors[0])

    def test_depth_is_tracked(self, fake_fs, mock_logger):
        walk = TreeWalker(fake_fs, mock_logger).iter_post_order("/r")

        depths = {e.path: e.depth for e in walk}

        assert depths["/r"] == 0
        assert depths["/r/a/b/f3"] == 3


class TestWalkerOnDisk:
    def test_post_order_allows_full_deletion(self, temp_directory, walker, file_system):
        nested = os.path.join(temp_directory, "subdir", "x", "y", "z")
        os.makedirs(nested)
        with open(os.path.join(nested, "deep.txt"), "w") as f:
            f.write("deep\n")
        root = os.path.join(temp_directory, "subdir")

        for entry in walker.iter_post_order(root):
            if entry.is_directory:
                file_system.remove_dir(entry.path)
            else:
                file_system.remove_file(entry.path)

        assert not os.path.exists(root)

    def test_recursive_listing_includes_hidden(self, temp_directory, walker):
        names = [e.name for e in walker.iter_listing(temp_directory, recursive=True)]

        assert names == [".hidden", "subdir", "test3.md", "test1.txt", "test2.py"]

"""
Lazy depth-first walks over a directory tree.
"""

import logging
import os
from collections.abc import Iterator
from typing import Optional

from fshell.entities.tree_entry import TreeEntry
from fshell.exceptions import ShellError
from fshell.ports.files.filesystem_port import FileSystemPort


class PostOrderWalk(Iterator[TreeEntry]):
    """
    Post-order iterator used for deleting a tree.

    Every entry is produced after all of its descendants, the root last. The
    walk keeps an explicit stack of pending entries, so it can be paused and
    resumed at any point. Each directory is listed (and its handle released)
    only when the walk reaches it.

    When the consumer fails to process an entry it calls ``mark_failed``; the
    error is recorded once and none of that entry's ancestors are produced
    afterwards, since they can no longer be emptied. Sibling subtrees are
    still walked. A directory that cannot be listed is handled the same way.
    """

    def __init__(
        self,
        file_system: FileSystemPort,
        root: TreeEntry,
        logger: Optional[logging.Logger] = None,
    ):
        self._fs = file_system
        self._root = root
        self._logger = logger or logging.getLogger(__name__)
        # (entry, children_pushed)
        self._stack: list[tuple[TreeEntry, bool]] = [(root, False)]
        self._blocked: set[str] = set()
        self.errors: list[ShellError] = []

    @property
    def root(self) -> TreeEntry:
        return self._root

    def __iter__(self) -> "PostOrderWalk":
        return self

    def __next__(self) -> TreeEntry:
        while self._stack:
            entry, expanded = self._stack.pop()
            if entry.is_directory and not expanded:
                try:
                    children = self._fs.list_dir(entry.path)
                except ShellError as e:
                    self._record(entry, e)
                    continue
                self._stack.append((entry, True))
                for child in reversed(children):
                    self._stack.append(
                        (
                            TreeEntry(
                                path=child.path,
                                is_directory=child.is_directory,
                                depth=entry.depth + 1,
                            ),
                            False,
                        )
                    )
                continue
            if entry.path in self._blocked:
                continue
            return entry
        raise StopIteration

    def mark_failed(self, entry: TreeEntry, error: ShellError) -> None:
        """Record that ``entry`` could not be processed."""
        self._record(entry, error)

    def _record(self, entry: TreeEntry, error: ShellError) -> None:
        self._logger.warning(f"Tree walk failure at {entry.path}: {error}")
        self.errors.append(error)
        if entry.path == self._root.path:
            return
        parent = os.path.dirname(entry.path)
        while parent not in self._blocked:
            self._blocked.add(parent)
            if parent == self._root.path:
                break
            next_parent = os.path.dirname(parent)
            if next_parent == parent:
                break
            parent = next_parent


class TreeWalker:
    """Produces lazy sequences of TreeEntry values rooted at a path."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the walker.

        Args:
            file_system: Port used to list directories
            logger: Logger instance to use for logging
        """
        self._fs = file_system
        self._logger = logger or logging.getLogger(__name__)

    def root_entry(self, path: str) -> TreeEntry:
        """Describe ``path`` as a walk root. Symlinked directories count as files."""
        is_directory = self._fs.is_dir(path) and not self._fs.is_symlink(path)
        return TreeEntry(path=path, is_directory=is_directory, depth=0)

    def iter_listing(self, root: str, recursive: bool = False) -> Iterator[TreeEntry]:
        """
        Yield the entries below ``root`` in pre-order.

        A directory is produced before its contents. The root itself is not
        produced; its children have depth 1. Each call walks the filesystem
        again.

        Args:
            root: Absolute directory path
            recursive: Descend into subdirectories when True

        Raises:
            ShellError: From the port, the first time a directory cannot be listed
        """
        self._logger.info(f"Listing {root} (recursive={recursive})")
        stack: list[TreeEntry] = [
            TreeEntry(path=child.path, is_directory=child.is_directory, depth=1)
            for child in reversed(self._fs.list_dir(root))
        ]
        while stack:
            entry = stack.pop()
            yield entry
            if recursive and entry.is_directory:
                for child in reversed(self._fs.list_dir(entry.path)):
                    stack.append(
                        TreeEntry(
                            path=child.path,
                            is_directory=child.is_directory,
                            depth=entry.depth + 1,
                        )
                    )

    def iter_post_order(self, root: str) -> PostOrderWalk:
        """
        Walk ``root`` and everything below it children-first.

        If ``root`` is a plain file (or a symlink) the walk produces only the
        root itself.
        """
        return PostOrderWalk(self._fs, self.root_entry(root), self._logger)

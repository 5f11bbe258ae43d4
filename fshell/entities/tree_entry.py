"""
Tree entry entity produced by the tree walker.
"""

import os
from dataclasses import dataclass

from fshell.utils.text import printable


@dataclass(frozen=True)
class TreeEntry:
    """
    A single filesystem entry visited during a tree walk.

    Attributes:
        path: Absolute path of the entry
        is_directory: Whether the entry is a directory (symlinks are not followed)
        depth: Distance from the walk root (root is 0); used only for formatting
    """

    path: str
    is_directory: bool
    depth: int = 0

    @property
    def name(self) -> str:
        return os.path.basename(self.path)

    def display_name(self) -> str:
        """Entry name, safe to print, with a trailing slash for directories."""
        name = printable(self.name)
        return f"{name}/" if self.is_directory else name

    def __str__(self) -> str:
        return f"TreeEntry(path='{self.path}', dir={self.is_directory}, depth={self.depth})"

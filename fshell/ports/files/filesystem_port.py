"""
Filesystem port interface defining the contract for the primitives the shell uses.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator

from fshell.entities.tree_entry import TreeEntry


class FileSystemPort(ABC):
    """
    Port interface for host filesystem operations.

    All paths are absolute. Implementations raise the ``ShellError`` subclasses
    from ``fshell.exceptions`` and never leak raw ``OSError``.
    """

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Return True if something (including a dangling symlink) is at ``path``."""
        pass

    @abstractmethod
    def is_dir(self, path: str) -> bool:
        """Return True if ``path`` is a directory, following symlinks."""
        pass

    @abstractmethod
    def is_file(self, path: str) -> bool:
        """Return True if ``path`` is a regular file, following symlinks."""
        pass

    @abstractmethod
    def is_symlink(self, path: str) -> bool:
        pass

    @abstractmethod
    def list_dir(self, path: str) -> list[TreeEntry]:
        """
        List the direct children of a directory.

        The directory handle is released before this method returns.

        Args:
            path: Directory to list

        Returns:
            Entries sorted by name, with depth 0. Symlinks are reported as
            non-directories.

        Raises:
            NotFoundError: If the directory does not exist
            WrongTypeError: If the path is not a directory
            IOFailure: On any other failure
        """
        pass

    @abstractmethod
    def make_dir(self, path: str) -> None:
        """
        Create a single directory. The parent must exist.

        Raises:
            AlreadyExistsError: If something already exists at ``path``
            NotFoundError: If the parent directory is missing
            IOFailure: On any other failure
        """
        pass

    @abstractmethod
    def remove_dir(self, path: str) -> None:
        """
        Remove an empty directory.

        Raises:
            NotEmptyError: If the directory still has entries
            NotFoundError, WrongTypeError, IOFailure
        """
        pass

    @abstractmethod
    def remove_file(self, path: str) -> None:
        """Remove a file or symlink."""
        pass

    @abstractmethod
    def create_file(self, path: str) -> None:
        """
        Create an empty file, failing if it exists.

        Raises:
            AlreadyExistsError: If something already exists at ``path``
        """
        pass

    @abstractmethod
    def move(self, source: str, destination: str) -> None:
        """Move ``source`` to exactly ``destination``, replacing an existing file."""
        pass

    @abstractmethod
    def read_lines(self, path: str) -> Iterator[str]:
        """
        Lazily yield the lines of a UTF-8 text file without line terminators.

        The file is opened on first iteration and closed when the iterator is
        exhausted or discarded.
        """
        pass

    @abstractmethod
    def write_text(self, path: str, content: str, append: bool = False) -> None:
        """
        Write UTF-8 text to a file, truncating it unless ``append`` is True.

        The file handle is closed on every exit path.
        """
        pass

"""
Local file system adapter implementation of the filesystem port.
"""

import errno
import logging
import os
import shutil
from collections.abc import Iterator

from typing_extensions import override

from fshell.entities.tree_entry import TreeEntry
from fshell.exceptions import (
    AlreadyExistsError,
    IOFailure,
    NotEmptyError,
    NotFoundError,
    ShellError,
    UsageError,
    WrongTypeError,
)
from fshell.ports.files.filesystem_port import FileSystemPort


class LocalFileSystemAdapter(FileSystemPort):
    """Host file system implementation of the filesystem port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def _translate(self, exc: OSError, path: str) -> ShellError:
        """
        Map an ``OSError`` raised by the host onto the shell error taxonomy.

        Args:
            exc: The error raised by the os/shutil call
            path: Path the operation was applied to

        Returns:
            The matching ShellError (not raised)
        """
        if isinstance(exc, FileNotFoundError):
            return NotFoundError(f"No such file or directory: {path}")
        if isinstance(exc, FileExistsError):
            return AlreadyExistsError(f"Already exists: {path}")
        if isinstance(exc, NotADirectoryError):
            return WrongTypeError(f"Not a directory: {path}")
        if isinstance(exc, IsADirectoryError):
            return WrongTypeError(f"Is a directory: {path}")
        if exc.errno == errno.ENOTEMPTY:
            return NotEmptyError(f"Directory is not empty: {path}")
        reason = exc.strerror or str(exc)
        self._logger.warning(f"I/O failure on {path}: {reason}")
        return IOFailure(f"{reason}: {path}")

    def _invalid(self, exc: ValueError, path: str) -> ShellError:
        """
        Map a ``ValueError`` raised by the host onto the shell error taxonomy.

        ``os`` functions raise it for paths holding a NUL character, and the
        UTF-8 codec raises its ``UnicodeError`` subclasses for text it cannot
        encode.
        """
        if isinstance(exc, UnicodeError):
            return IOFailure(f"Text cannot be stored as UTF-8: {path!r}")
        return UsageError(f"Invalid path: {path!r}")

    @override
    def exists(self, path: str) -> bool:
        return os.path.lexists(path)

    @override
    def is_dir(self, path: str) -> bool:
        return os.path.isdir(path)

    @override
    def is_file(self, path: str) -> bool:
        return os.path.isfile(path)

    @override
    def is_symlink(self, path: str) -> bool:
        return os.path.islink(path)

    @override
    def list_dir(self, path: str) -> list[TreeEntry]:
        try:
            with os.scandir(path) as it:
                entries = [
                    TreeEntry(
                        path=os.path.join(path, item.name),
                        is_directory=item.is_dir(follow_symlinks=False),
                    )
                    for item in it
                ]
        except OSError as e:
            raise self._translate(e, path) from e
        except ValueError as e:
            raise self._invalid(e, path) from e
        entries.sort(key=lambda entry: entry.name)
        self._logger.debug(f"Listed {len(entries)} entries in {path}")
        return entries

    @override
    def make_dir(self, path: str) -> None:
        try:
            os.mkdir(path)
        except OSError as e:
            raise self._translate(e, path) from e
        except ValueError as e:
            raise self._invalid(e, path) from e

    @override
    def remove_dir(self, path: str) -> None:
        try:
            os.rmdir(path)
        except OSError as e:
            # some platforms report a populated directory as EEXIST
            if e.errno == errno.EEXIST:
                raise NotEmptyError(f"Directory is not empty: {path}") from e
            raise self._translate(e, path) from e
        except ValueError as e:
            raise self._invalid(e, path) from e

    @override
    def remove_file(self, path: str) -> None:
        try:
            os.unlink(path)
        except OSError as e:
            raise self._translate(e, path) from e
        except ValueError as e:
            raise self._invalid(e, path) from e

    @override
    def create_file(self, path: str) -> None:
        try:
            with open(path, "x", encoding="utf-8"):
                pass
        except OSError as e:
            raise self._translate(e, path) from e
        except ValueError as e:
            raise self._invalid(e, path) from e

    @override
    def move(self, source: str, destination: str) -> None:
        try:
            os.replace(source, destination)
        except OSError as e:
            if e.errno != errno.EXDEV:
                raise self._translate(e, source) from e
            # different filesystems: copy then delete
            self._logger.info(f"Cross-device move from {source} to {destination}")
            try:
                if os.path.isfile(destination) and not os.path.isdir(source):
                    os.unlink(destination)
                shutil.move(source, destination)
            except OSError as inner:
                raise self._translate(inner, source) from inner
            except ValueError as inner:
                raise self._invalid(inner, destination) from inner
        except ValueError as e:
            raise self._invalid(e, destination) from e

    @override
    def read_lines(self, path: str) -> Iterator[str]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                for line in f:
                    yield line.rstrip("\r\n")
        except UnicodeDecodeError as e:
            raise IOFailure(f"File is not valid UTF-8 text: {path}") from e
        except OSError as e:
            raise self._translate(e, path) from e
        except ValueError as e:
            raise self._invalid(e, path) from e

    @override
    def write_text(self, path: str, content: str, append: bool = False) -> None:
        mode = "a" if append else "w"
        try:
            with open(path, mode, encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            raise self._translate(e, path) from e
        except ValueError as e:
            raise self._invalid(e, path) from e

"""
Pytest configuration and shared fixtures.
"""

import io
import os
import tempfile
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from fshell.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from fshell.container import DependencyContainer
from fshell.entities.session import Session
from fshell.use_cases.paths.resolve_path import PathResolver
from fshell.use_cases.tree.tree_walker import TreeWalker


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for testing file operations.

    Layout::

        test1.txt
        test2.py
        .hidden
        subdir/
            test3.md

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_dir = os.path.realpath(temp_dir)
        with open(os.path.join(temp_dir, "test1.txt"), "w") as f:
            f.write("This is a test file.\nSecond line\n")

        with open(os.path.join(temp_dir, "test2.py"), "w") as f:
            f.write("print('Hello, world!')\n")

        with open(os.path.join(temp_dir, ".hidden"), "w") as f:
            f.write("secret\n")

        subdir = os.path.join(temp_dir, "subdir")
        os.makedirs(subdir)
        with open(os.path.join(subdir, "test3.md"), "w") as f:
            f.write("# Test Markdown\n\nThis is a test.\n")

        yield temp_dir


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def session(temp_directory):
    return Session(temp_directory)


@pytest.fixture
def file_system(mock_logger):
    return LocalFileSystemAdapter(mock_logger)


@pytest.fixture
def resolver():
    return PathResolver()


@pytest.fixture
def walker(file_system):
    return TreeWalker(file_system)


@pytest.fixture
def console():
    """Console writing plain text into a StringIO buffer."""
    return Console(
        file=io.StringIO(), color_system=None, soft_wrap=True, highlight=False, width=200
    )


@pytest.fixture
def console_lines(console):
    """Return a callable giving the lines written to the test console so far."""

    def _lines() -> list[str]:
        return console.file.getvalue().splitlines()

    return _lines


@pytest.fixture
def dependency_container(mock_logger):
    """
    Create a dependency container with a mocked logger for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer()
    container._logger = mock_logger
    return container


@pytest.fixture
def dispatcher(dependency_container, console, session):
    return dependency_container.get_dispatcher(console, session)

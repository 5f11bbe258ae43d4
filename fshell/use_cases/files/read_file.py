"""
Use cases that stream the lines of a text file (cat, grep).
"""

import logging
from collections.abc import Iterator
from typing import Optional

from fshell.entities.command import ParsedCommand
from fshell.entities.command_result import CommandResult
from fshell.entities.session import Session
from fshell.exceptions import NotFoundError, ShellError, UsageError, WrongTypeError
from fshell.ports.files.filesystem_port import FileSystemPort
from fshell.ports.shell.command_handler_port import CommandHandlerPort, CommandUsage
from fshell.use_cases.paths.resolve_path import PathResolver


def _checked_file(
    file_system: FileSystemPort, resolver: PathResolver, session: Session, name: str, verb: str
) -> str:
    """Resolve ``name`` and make sure it is a readable regular file."""
    path = resolver.resolve_for(session, name)
    if not file_system.exists(path):
        raise NotFoundError(f"No such file: {name}", verb)
    if file_system.is_dir(path):
        raise WrongTypeError(f"Is a directory: {name}", verb)
    if not file_system.is_file(path):
        # devices, fifos and dangling links
        raise WrongTypeError(f"Not a regular file: {name}", verb)
    return path


class ReadFileUseCase(CommandHandlerPort):
    """Use case for ``cat <file> [<file> ...]``."""

    verb = "cat"
    usage: list[CommandUsage] = [
        {"syntax": "cat <file>", "description": "Display the content of the specified file"}
    ]

    def __init__(
        self,
        file_system: FileSystemPort,
        path_resolver: PathResolver,
        logger: Optional[logging.Logger] = None,
    ):
        self._fs = file_system
        self._resolver = path_resolver
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session, command: ParsedCommand) -> CommandResult:
        if not command.arguments:
            return CommandResult.failure(UsageError("Missing file argument", self.verb))
        try:
            paths = [
                _checked_file(self._fs, self._resolver, session, name, self.verb)
                for name in command.arguments
            ]
        except ShellError as e:
            return CommandResult.failure(e)
        self._logger.info(f"Reading {len(paths)} file(s)")
        return CommandResult.streamed(self._lines(paths))

    def _lines(self, paths: list[str]) -> Iterator[str]:
        for path in paths:
            try:
                yield from self._fs.read_lines(path)
            except ShellError as e:
                raise e.for_command(self.verb)


class SearchLinesUseCase(CommandHandlerPort):
    """
    Use case for ``grep <pattern> <file>``.

    The pattern is a literal substring, not a regular expression. Matching
    lines are streamed in file order.
    """

    verb = "grep"
    usage: list[CommandUsage] = [
        {
            "syntax": "grep <pattern> <file>",
            "description": "Print the lines of <file> that contain <pattern>",
        }
    ]

    def __init__(
        self,
        file_system: FileSystemPort,
        path_resolver: PathResolver,
        logger: Optional[logging.Logger] = None,
    ):
        self._fs = file_system
        self._resolver = path_resolver
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session, command: ParsedCommand) -> CommandResult:
        if len(command.arguments) < 2:
            return CommandResult.failure(
                UsageError("Usage: grep <pattern> <filename>", self.verb)
            )
        pattern, name = command.arguments[0], command.arguments[1]
        try:
            path = _checked_file(self._fs, self._resolver, session, name, self.verb)
        except ShellError as e:
            return CommandResult.failure(e)
        self._logger.info(f"Searching for '{pattern}' in {path}")
        return CommandResult.streamed(self._matches(pattern, path))

    def _matches(self, pattern: str, path: str) -> Iterator[str]:
        try:
            for line in self._fs.read_lines(path):
                if pattern in line:
                    yield line
        except ShellError as e:
            raise e.for_command(self.verb)

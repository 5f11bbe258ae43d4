"""
Use case for removing an empty directory.
"""

import logging
from typing import Optional

from fshell.entities.command import ParsedCommand
from fshell.entities.command_result import CommandResult
from fshell.entities.session import Session
from fshell.exceptions import (
    NotEmptyError,
    NotFoundError,
    ShellError,
    UsageError,
    WrongTypeError,
)
from fshell.ports.files.filesystem_port import FileSystemPort
from fshell.ports.shell.command_handler_port import CommandHandlerPort, CommandUsage
from fshell.use_cases.paths.resolve_path import PathResolver


class RemoveDirectoryUseCase(CommandHandlerPort):
    """Use case for ``rmdir <dir>``; only empty directories are removed."""

    verb = "rmdir"
    usage: list[CommandUsage] = [
        {
            "syntax": "rmdir <dir>",
            "description": "Remove an empty directory with the specified name",
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
        name = command.argument(0)
        if name is None:
            return CommandResult.failure(
                UsageError("Missing directory argument (name)", self.verb)
            )

        path = self._resolver.resolve_for(session, name)
        if not self._fs.exists(path):
            return CommandResult.failure(
                NotFoundError(f"Directory does not exist: '{name}'", self.verb)
            )
        if not self._fs.is_dir(path):
            return CommandResult.failure(
                WrongTypeError(f"Not a directory: '{name}'", self.verb)
            )
        if PathResolver.is_within(session.current_directory, path):
            return CommandResult.failure(
                UsageError(
                    f"Refusing to remove the current directory or one of its parents: '{name}'",
                    self.verb,
                )
            )

        try:
            self._fs.remove_dir(path)
        except NotEmptyError:
            return CommandResult.failure(
                NotEmptyError(f"Directory is not empty: {name}", self.verb)
            )
        except ShellError as e:
            self._logger.error(f"Error deleting directory {path}: {e}")
            return CommandResult.failure(e.for_command(self.verb))

        self._logger.info(f"Deleted directory {path}")
        return CommandResult.ok(f"Directory deleted: {path}")

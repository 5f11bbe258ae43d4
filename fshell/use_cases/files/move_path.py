"""
Use case for moving or renaming a file or directory.
"""

import logging
import os
from typing import Optional

from fshell.entities.command import ParsedCommand
from fshell.entities.command_result import CommandResult
from fshell.entities.session import Session
from fshell.exceptions import NotFoundError, ShellError, UsageError
from fshell.ports.files.filesystem_port import FileSystemPort
from fshell.ports.shell.command_handler_port import CommandHandlerPort, CommandUsage
from fshell.use_cases.paths.resolve_path import PathResolver


class MovePathUseCase(CommandHandlerPort):
    """Use case for ``mv <src> <dest>``."""

    verb = "mv"
    usage: list[CommandUsage] = [
        {
            "syntax": "mv <src> <dest>",
            "description": "Move or rename a file or directory from <src> to <dest>",
        }
    ]

    def __init__(
        self,
        file_system: FileSystemPort,
        path_resolver: PathResolver,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_system: Port performing the move
            path_resolver: Resolves both arguments against the current directory
            logger: Logger instance to use for logging
        """
        self._fs = file_system
        self._resolver = path_resolver
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session, command: ParsedCommand) -> CommandResult:
        """
        Move the source to the destination.

        An existing directory destination means "move into": the source keeps
        its base name under that directory. An existing destination file is
        replaced.
        """
        if len(command.arguments) < 2:
            return CommandResult.failure(
                UsageError("Missing source or destination argument", self.verb)
            )

        source_arg, destination_arg = command.arguments[0], command.arguments[1]
        source = self._resolver.resolve_for(session, source_arg)
        destination = self._resolver.resolve_for(session, destination_arg)

        if not self._fs.exists(source):
            return CommandResult.failure(
                NotFoundError(
                    f"Source file or directory does not exist: {source_arg}", self.verb
                )
            )
        if PathResolver.is_within(session.current_directory, source):
            return CommandResult.failure(
                UsageError(
                    f"Refusing to move the current directory or one of its parents: {source_arg}",
                    self.verb,
                )
            )
        if self._fs.is_dir(destination):
            destination = os.path.join(destination, os.path.basename(source))

        try:
            self._logger.info(f"Moving {source} to {destination}")
            self._fs.move(source, destination)
        except ShellError as e:
            self._logger.error(f"Failed to move {source} to {destination}: {e}")
            return CommandResult.failure(e.for_command(self.verb))
        return CommandResult.ok(f"Moved {os.path.basename(source)} to {destination}")

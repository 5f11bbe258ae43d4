"""
Use case for changing the session's current directory.
"""

import logging
from typing import Optional

from fshell.entities.command import ParsedCommand
from fshell.entities.command_result import CommandResult
from fshell.entities.session import Session
from fshell.exceptions import NotFoundError, UsageError
from fshell.ports.files.filesystem_port import FileSystemPort
from fshell.ports.shell.command_handler_port import CommandHandlerPort, CommandUsage
from fshell.use_cases.paths.resolve_path import PathResolver


class ChangeDirectoryUseCase(CommandHandlerPort):
    """Use case for ``cd <dir>``."""

    verb = "cd"
    usage: list[CommandUsage] = [
        {"syntax": "cd <dir>", "description": "Change to the specified directory"}
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
            file_system: Port used to check the target is a directory
            path_resolver: Resolves the argument against the current directory
            logger: Logger instance to use for logging
        """
        self._fs = file_system
        self._resolver = path_resolver
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session, command: ParsedCommand) -> CommandResult:
        """
        Resolve the target and commit it only if it is an existing directory.

        Returns:
            A result carrying the new session on success; on failure the
            result has no session, so the current one is kept.
        """
        target = command.argument(0)
        if target is None:
            return CommandResult.failure(UsageError("Missing directory argument", self.verb))

        path = self._resolver.resolve_for(session, target)
        if not self._fs.is_dir(path):
            self._logger.info(f"cd rejected, not a directory: {path}")
            return CommandResult.failure(
                NotFoundError(f"No such directory: {target}", self.verb)
            )

        self._logger.info(f"Changing directory to {path}")
        return CommandResult(session=session.with_directory(path))

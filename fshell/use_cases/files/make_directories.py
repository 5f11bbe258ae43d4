"""
Use case for creating one or more directories.
"""

import logging
from typing import Optional

from fshell.entities.command import ParsedCommand
from fshell.entities.command_result import CommandResult
from fshell.entities.session import Session
from fshell.exceptions import AlreadyExistsError, ShellError, UsageError
from fshell.ports.files.filesystem_port import FileSystemPort
from fshell.ports.shell.command_handler_port import CommandHandlerPort, CommandUsage
from fshell.use_cases.paths.resolve_path import PathResolver


class MakeDirectoriesUseCase(CommandHandlerPort):
    """Use case for ``mkdir <dir> [<dir> ...]``."""

    verb = "mkdir"
    usage: list[CommandUsage] = [
        {
            "syntax": "mkdir <dir> ...",
            "description": "Create a new directory with each specified name",
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
        """
        Create every named directory, reporting each one on its own.

        A failure for one name never prevents the remaining names from being
        attempted.
        """
        if not command.arguments:
            return CommandResult.failure(
                UsageError("Missing directory argument (name)", self.verb)
            )

        lines: list[str] = []
        errors: list[ShellError] = []
        for name in command.arguments:
            path = self._resolver.resolve_for(session, name)
            try:
                self._fs.make_dir(path)
            except AlreadyExistsError:
                errors.append(
                    AlreadyExistsError(
                        f"Failed to create directory '{name}': "
                        "A directory with the same name already exists.",
                        self.verb,
                    )
                )
                continue
            except ShellError as e:
                self._logger.error(f"Error creating directory {path}: {e}")
                errors.append(
                    type(e)(
                        f"An error occurred while creating the directory '{name}': {e.message}",
                        self.verb,
                    )
                )
                continue
            self._logger.info(f"Created directory {path}")
            lines.append(f"Directory created: {path}")
        return CommandResult(output=lines, errors=errors)

import logging
from typing import Optional

from fshell.entities.command import ParsedCommand
from fshell.entities.command_result import CommandResult
from fshell.entities.session import Session
from fshell.exceptions import AlreadyExistsError, ShellError, UsageError
from fshell.ports.files.filesystem_port import FileSystemPort
from fshell.ports.shell.command_handler_port import CommandHandlerPort, CommandUsage
from fshell.use_cases.paths.resolve_path import PathResolver


class TouchFileUseCase(CommandHandlerPort):
    """Creates empty files; existing files are left untouched."""

    verb = "touch"
    usage: list[CommandUsage] = [
        {"syntax": "touch <file>", "description": "Create a new file with the specified name"}
    ]

    def __init__(
        self,
        file_system: FileSystemPort,
        path_resolver: PathResolver,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._fs = file_system
        self._resolver = path_resolver
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session, command: ParsedCommand) -> CommandResult:
        if not command.arguments:
            return CommandResult.failure(
                UsageError("Usage: touch <filename>", self.verb)
            )

        lines: list[str] = []
        errors: list[ShellError] = []
        for name in command.arguments:
            path = self._resolver.resolve_for(session, name)
            try:
                self._fs.create_file(path)
            except AlreadyExistsError:
                errors.append(AlreadyExistsError(f"File already exists: {name}", self.verb))
                continue
            except ShellError as e:
                self._logger.error(f"Error creating file {path}: {e}")
                errors.append(e.for_command(self.verb))
                continue
            self._logger.info(f"Created file {path}")
            lines.append(f"File created: {name}")
        return CommandResult(output=lines, errors=errors)

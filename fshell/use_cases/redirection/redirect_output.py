"""
Output redirection: ``echo <text> > file`` and ``echo <text> >> file``.
"""

import logging
from typing import Optional

from fshell.entities.command import REDIRECT_APPEND, REDIRECT_OVERWRITE, RedirectionSpec
from fshell.entities.command_result import CommandResult
from fshell.entities.session import Session
from fshell.exceptions import FormatError, ShellError, UnknownCommandError
from fshell.ports.files.filesystem_port import FileSystemPort
from fshell.ports.shell.command_handler_port import CommandUsage
from fshell.use_cases.paths.resolve_path import PathResolver

REDIRECTABLE_COMMANDS = ("echo",)


def has_redirection(line: str) -> bool:
    return REDIRECT_OVERWRITE in line


class RedirectionParser:
    """Splits an input line around its redirection operator."""

    def parse(self, line: str) -> RedirectionSpec:
        """
        Parse a redirection line.

        ``>>`` is looked for first because every ``>>`` also contains ``>``.
        The line is split around the first operator only; text before it is the
        producing command and text after it is the target, both trimmed.

        Raises:
            FormatError: If there is no operator, an empty side, or more than
                one operator
        """
        if REDIRECT_APPEND in line:
            append = True
            operator = REDIRECT_APPEND
        elif REDIRECT_OVERWRITE in line:
            append = False
            operator = REDIRECT_OVERWRITE
        else:
            raise FormatError(f"Invalid command format: {line}")

        before, _, after = line.partition(operator)
        command_text = before.strip()
        target = after.strip()
        if not command_text or not target:
            raise FormatError(f"Invalid command format: {line}")
        if REDIRECT_OVERWRITE in command_text or REDIRECT_OVERWRITE in target:
            raise FormatError(f"Invalid command format: {line}")
        return RedirectionSpec(
            producing_command_text=command_text,
            target_path=target,
            append_mode=append,
        )


class RedirectOutputUseCase:
    """Runs a redirection line against the session's current directory."""

    usage: list[CommandUsage] = [
        {
            "syntax": "echo <text> > <file>",
            "description": "Redirects the output of 'echo' to a file (overwrites)",
        },
        {
            "syntax": "echo <text> >> <file>",
            "description": "Redirects the output of 'echo' to a file (appends)",
        },
    ]

    def __init__(
        self,
        file_system: FileSystemPort,
        path_resolver: PathResolver,
        parser: Optional[RedirectionParser] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_system: Port used to write the target file
            path_resolver: Resolves the target against the current directory
            parser: Line parser, a default one is created when None
            logger: Logger instance to use for logging
        """
        self._fs = file_system
        self._resolver = path_resolver
        self._parser = parser or RedirectionParser()
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session, line: str) -> CommandResult:
        try:
            spec = self._parser.parse(line)
        except FormatError as e:
            self._logger.info(f"Rejected redirection: {line}")
            return CommandResult.failure(e)

        tokens = spec.producing_command_text.split()
        if tokens[0] not in REDIRECTABLE_COMMANDS:
            return CommandResult.failure(
                UnknownCommandError(f"Unknown command: {spec.producing_command_text}")
            )

        body = " ".join(tokens[1:]) + "\n"
        target = self._resolver.resolve_for(session, spec.target_path)
        try:
            self._logger.info(
                f"Writing {len(body)} characters to {target} ({spec.operator})"
            )
            self._fs.write_text(target, body, append=spec.append_mode)
        except ShellError as e:
            self._logger.error(f"Error writing to file: {e}")
            return CommandResult.failure(e.for_command(tokens[0]))
        return CommandResult.ok(f"Message written to file: {spec.target_path}")

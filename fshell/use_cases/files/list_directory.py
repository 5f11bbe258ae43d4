"""
Use case for listing directory contents (ls, ls-a, ls-r).
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
from fshell.use_cases.tree.tree_walker import TreeWalker

INDENT = "  "


class ListDirectoryUseCase(CommandHandlerPort):
    """
    Lists a directory (the current one unless a path is given).

    The same class backs three verbs:
      - ``ls``: direct children, dot-entries hidden
      - ``ls-a``: direct children, including dot-entries
      - ``ls-r``: every descendant, pre-order, indented by depth

    Directories are printed with a trailing ``/``.
    """

    def __init__(
        self,
        file_system: FileSystemPort,
        path_resolver: PathResolver,
        tree_walker: TreeWalker,
        show_hidden: bool = False,
        recursive: bool = False,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_system: Port used to validate the target
            path_resolver: Resolves the optional path argument
            tree_walker: Produces the entries to print
            show_hidden: Include names starting with a dot
            recursive: Descend into subdirectories
            logger: Logger instance to use for logging
        """
        self._fs = file_system
        self._resolver = path_resolver
        self._walker = tree_walker
        self._show_hidden = show_hidden or recursive
        self._recursive = recursive
        self._logger = logger or logging.getLogger(__name__)

        if recursive:
            self.verb = "ls-r"
            self.usage = [
                {"syntax": "ls-r [dir]", "description": "Recursively list all files and directories"}
            ]
        elif show_hidden:
            self.verb = "ls-a"
            self.usage = [
                {
                    "syntax": "ls-a [dir]",
                    "description": "List all files, including hidden files, in the current directory",
                }
            ]
        else:
            self.verb = "ls"
            self.usage = [
                {"syntax": "ls [dir]", "description": "List files in the current directory"}
            ]

    def execute(self, session: Session, command: ParsedCommand) -> CommandResult:
        if len(command.arguments) > 1:
            return CommandResult.failure(
                UsageError(f"Usage: {self.verb} [dir]", self.verb)
            )
        raw = command.argument(0)
        directory = (
            self._resolver.resolve_for(session, raw)
            if raw is not None
            else session.current_directory
        )
        if not self._fs.exists(directory):
            return CommandResult.failure(
                NotFoundError(f"No such directory: {raw}", self.verb)
            )
        if not self._fs.is_dir(directory):
            return CommandResult.failure(WrongTypeError(f"Not a directory: {raw}", self.verb))

        if self._recursive:
            return CommandResult.streamed(self._tree_lines(directory))

        try:
            entries = list(self._walker.iter_listing(directory))
        except ShellError as e:
            self._logger.error(f"Error listing {directory}: {e}")
            return CommandResult.failure(e.for_command(self.verb))
        lines = [
            entry.display_name()
            for entry in entries
            if self._show_hidden or not entry.name.startswith(".")
        ]
        self._logger.info(f"Found {len(lines)} entries in {directory}")
        return CommandResult.ok(*lines)

    def _tree_lines(self, directory: str) -> Iterator[str]:
        try:
            for entry in self._walker.iter_listing(directory, recursive=True):
                yield INDENT * (entry.depth - 1) + entry.display_name()
        except ShellError as e:
            raise e.for_command(self.verb)

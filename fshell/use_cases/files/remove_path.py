"""
Use case for removing a file or a whole directory tree.
"""

import logging
from typing import Optional

from fshell.entities.command import ParsedCommand
from fshell.entities.command_result import CommandResult
from fshell.entities.session import Session
from fshell.exceptions import NotFoundError, ShellError, UsageError
from fshell.ports.files.filesystem_port import FileSystemPort
from fshell.ports.shell.command_handler_port import CommandHandlerPort, CommandUsage
from fshell.use_cases.paths.resolve_path import PathResolver
from fshell.use_cases.tree.tree_walker import TreeWalker


class RemovePathUseCase(CommandHandlerPort):
    """
    Use case for ``rm <path>``.

    Files are deleted directly. Directories are deleted children-first by
    consuming a post-order walk; when one entry cannot be deleted the error
    is recorded, its ancestors are left in place and the rest of the tree is
    still processed.
    """

    verb = "rm"
    usage: list[CommandUsage] = [
        {
            "syntax": "rm <path>",
            "description": "Remove a file, or a directory and everything in it",
        }
    ]

    def __init__(
        self,
        file_system: FileSystemPort,
        path_resolver: PathResolver,
        tree_walker: TreeWalker,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_system: Port used to delete entries
            path_resolver: Resolves the argument against the current directory
            tree_walker: Provides the post-order deletion walk
            logger: Logger instance to use for logging
        """
        self._fs = file_system
        self._resolver = path_resolver
        self._walker = tree_walker
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session, command: ParsedCommand) -> CommandResult:
        name = command.argument(0)
        if name is None:
            return CommandResult.failure(UsageError("Usage: rm <filename>", self.verb))

        path = self._resolver.resolve_for(session, name)
        if not self._fs.exists(path):
            return CommandResult.failure(
                NotFoundError(f"File or directory does not exist: {name}", self.verb)
            )
        if PathResolver.is_within(session.current_directory, path):
            return CommandResult.failure(
                UsageError(
                    f"Refusing to remove the current directory or one of its parents: {name}",
                    self.verb,
                )
            )

        walk = self._walker.iter_post_order(path)
        if not walk.root.is_directory:
            try:
                self._fs.remove_file(path)
            except ShellError as e:
                self._logger.error(f"Failed to delete {path}: {e}")
                return CommandResult.failure(e.for_command(self.verb))
            self._logger.info(f"Deleted file {path}")
            return CommandResult.ok(f"File deleted successfully: {name}")

        removed = 0
        for entry in walk:
            try:
                if entry.is_directory:
                    self._fs.remove_dir(entry.path)
                else:
                    self._fs.remove_file(entry.path)
            except ShellError as e:
                walk.mark_failed(entry, e.for_command(self.verb))
                continue
            removed += 1

        if walk.errors:
            self._logger.error(
                f"Partial delete of {path}: {removed} removed, {len(walk.errors)} failed"
            )
            return CommandResult(errors=walk.errors)
        self._logger.info(f"Deleted tree {path} ({removed} entries)")
        return CommandResult.ok(f"Directory and its contents deleted successfully: {name}")

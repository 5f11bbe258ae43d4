"""
Dependency injection container for managing shell dependencies.
"""

import logging
from typing import Optional

from rich.console import Console

from fshell.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from fshell.config.settings import Settings
from fshell.entities.session import Session
from fshell.ports.files.filesystem_port import FileSystemPort
from fshell.ports.shell.command_handler_port import CommandHandlerPort
from fshell.shell.dispatcher import CommandDispatcher
from fshell.use_cases.files.list_directory import ListDirectoryUseCase
from fshell.use_cases.files.make_directories import MakeDirectoriesUseCase
from fshell.use_cases.files.move_path import MovePathUseCase
from fshell.use_cases.files.read_file import ReadFileUseCase, SearchLinesUseCase
from fshell.use_cases.files.remove_directory import RemoveDirectoryUseCase
from fshell.use_cases.files.remove_path import RemovePathUseCase
from fshell.use_cases.files.touch_file import TouchFileUseCase
from fshell.use_cases.navigation.change_directory import ChangeDirectoryUseCase
from fshell.use_cases.navigation.print_directory import PrintDirectoryUseCase
from fshell.use_cases.paths.resolve_path import PathResolver
from fshell.use_cases.redirection.redirect_output import RedirectOutputUseCase
from fshell.use_cases.shell.session_commands import ExitUseCase, HelpUseCase
from fshell.use_cases.tree.tree_walker import TreeWalker


class DependencyContainer:
    """
    Container for managing shell dependencies using dependency injection.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_settings(self) -> Settings:
        if self._settings is None:
            self._settings = Settings()
        return self._settings

    def get_file_system(self) -> FileSystemPort:
        """
        Get file system adapter instance.

        Returns:
            FileSystemPort implementation
        """
        if "file_system" not in self._instances:
            self._instances["file_system"] = LocalFileSystemAdapter(self._logger)
        return self._instances["file_system"]

    def get_path_resolver(self) -> PathResolver:
        if "path_resolver" not in self._instances:
            self._instances["path_resolver"] = PathResolver(self._logger)
        return self._instances["path_resolver"]

    def get_tree_walker(self) -> TreeWalker:
        if "tree_walker" not in self._instances:
            self._instances["tree_walker"] = TreeWalker(
                self.get_file_system(), self._logger
            )
        return self._instances["tree_walker"]

    def get_redirect_output_use_case(self) -> RedirectOutputUseCase:
        """
        Get redirection use case with injected dependencies.

        Returns:
            Configured RedirectOutputUseCase
        """
        if "redirect_output_use_case" not in self._instances:
            self._instances["redirect_output_use_case"] = RedirectOutputUseCase(
                self.get_file_system(), self.get_path_resolver(), logger=self._logger
            )
        return self._instances["redirect_output_use_case"]

    def get_command_handlers(self) -> list[CommandHandlerPort]:
        """
        Build every command handler except ``help``, in help display order.

        Returns:
            List of handlers sharing the same port, resolver and walker
        """
        if "command_handlers" not in self._instances:
            fs = self.get_file_system()
            resolver = self.get_path_resolver()
            walker = self.get_tree_walker()
            self._instances["command_handlers"] = [
                PrintDirectoryUseCase(),
                ChangeDirectoryUseCase(fs, resolver, self._logger),
                ListDirectoryUseCase(fs, resolver, walker, logger=self._logger),
                ListDirectoryUseCase(
                    fs, resolver, walker, show_hidden=True, logger=self._logger
                ),
                ListDirectoryUseCase(
                    fs, resolver, walker, recursive=True, logger=self._logger
                ),
                MakeDirectoriesUseCase(fs, resolver, self._logger),
                RemoveDirectoryUseCase(fs, resolver, self._logger),
                TouchFileUseCase(fs, resolver, self._logger),
                MovePathUseCase(fs, resolver, self._logger),
                RemovePathUseCase(fs, resolver, walker, self._logger),
                ReadFileUseCase(fs, resolver, self._logger),
                SearchLinesUseCase(fs, resolver, self._logger),
                ExitUseCase(),
            ]
        return self._instances["command_handlers"]

    def get_dispatcher(
        self, console: Console, session: Optional[Session] = None
    ) -> CommandDispatcher:
        """
        Get the command dispatcher, wiring ``help`` to the dispatcher's own usage table.

        Args:
            console: Console the shell writes to
            session: Initial session; defaults to the configured start directory

        Returns:
            Configured CommandDispatcher
        """
        if "dispatcher" not in self._instances:
            settings = self.get_settings()
            dispatcher: Optional[CommandDispatcher] = None

            def usage():
                return dispatcher.usage() if dispatcher is not None else []

            handlers = [*self.get_command_handlers(), HelpUseCase(usage)]
            dispatcher = CommandDispatcher(
                handlers,
                self.get_redirect_output_use_case(),
                session or Session(settings.start_directory),
                console,
                legacy_double_dispatch=settings.legacy_double_dispatch,
                logger=self._logger,
            )
            self._instances["dispatcher"] = dispatcher
        return self._instances["dispatcher"]

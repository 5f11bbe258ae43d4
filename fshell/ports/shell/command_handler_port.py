"""
Port and types describing a shell command handler.
"""

from abc import ABC, abstractmethod
from typing import TypedDict

from fshell.entities.command import ParsedCommand
from fshell.entities.command_result import CommandResult
from fshell.entities.session import Session


class CommandUsage(TypedDict):
    """One line of the help table."""

    syntax: str
    description: str


class CommandHandlerPort(ABC):
    """
    Port interface for a command the dispatcher can route a verb to.

    Handlers never raise for expected failures; they return a CommandResult
    carrying the errors instead.
    """

    verb: str
    usage: list[CommandUsage] = []

    @abstractmethod
    def execute(self, session: Session, command: ParsedCommand) -> CommandResult:
        """
        Run the command.

        Args:
            session: Session the command runs in
            command: Tokenized input line whose verb matched this handler

        Returns:
            Result holding output lines, errors and an optional new session
        """
        pass

"""
Commands that act on the shell itself rather than on the filesystem.
"""

from collections.abc import Callable

from fshell.entities.command import ParsedCommand
from fshell.entities.command_result import CommandResult
from fshell.entities.session import Session
from fshell.ports.shell.command_handler_port import CommandHandlerPort, CommandUsage

SYNTAX_COLUMN = 21


class HelpUseCase(CommandHandlerPort):
    """Prints one line per supported command."""

    verb = "help"
    usage: list[CommandUsage] = [
        {"syntax": "help", "description": "Display this help message"}
    ]

    def __init__(self, usage_source: Callable[[], list[CommandUsage]]):
        """
        Args:
            usage_source: Returns the usage rows to print, in display order
        """
        self._usage_source = usage_source

    def execute(self, session: Session, command: ParsedCommand) -> CommandResult:
        lines = ["Available Commands:"]
        for row in self._usage_source():
            lines.append(f"{row['syntax']:<{SYNTAX_COLUMN}}: {row['description']}")
        return CommandResult.ok(*lines)


class ExitUseCase(CommandHandlerPort):
    verb = "exit"
    usage: list[CommandUsage] = [
        {"syntax": "exit", "description": "Terminate the command line interpreter"}
    ]

    def execute(self, session: Session, command: ParsedCommand) -> CommandResult:
        return CommandResult(output=["Exiting CLI..."], terminate=True)

from fshell.entities.command import ParsedCommand
from fshell.entities.command_result import CommandResult
from fshell.entities.session import Session
from fshell.ports.shell.command_handler_port import CommandHandlerPort, CommandUsage


class PrintDirectoryUseCase(CommandHandlerPort):
    verb = "pwd"
    usage: list[CommandUsage] = [
        {"syntax": "pwd", "description": "Display current directory"}
    ]

    def execute(self, session: Session, command: ParsedCommand) -> CommandResult:
        return CommandResult.ok(session.current_directory)

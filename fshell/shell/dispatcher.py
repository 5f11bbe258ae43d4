"""
The interactive read/dispatch loop.
"""

import logging
from collections.abc import Callable, Iterable
from enum import Enum
from typing import Optional

from rich.console import Console
from rich.text import Text

from fshell.entities.command import ParsedCommand
from fshell.entities.command_result import CommandResult
from fshell.entities.session import Session
from fshell.exceptions import FormatError, IOFailure, ShellError, UnknownCommandError
from fshell.ports.shell.command_handler_port import CommandHandlerPort, CommandUsage
from fshell.use_cases.redirection.redirect_output import (
    RedirectOutputUseCase,
    has_redirection,
)
from fshell.utils.text import printable

# "ls -a" / "ls -r" spellings accepted for the dashed verbs
VERB_ALIASES: dict[tuple[str, str], str] = {
    ("ls", "-a"): "ls-a",
    ("ls", "-r"): "ls-r",
}


class ShellState(Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


class CommandDispatcher:
    """
    Owns the session and routes each input line to a command handler.

    The dispatcher is the error boundary of the shell: every failure is turned
    into a single line on the console and the loop keeps going. Only ``exit``
    (or end of input) moves it to ``TERMINATED``, and nothing leaves that state.
    """

    def __init__(
        self,
        handlers: Iterable[CommandHandlerPort],
        redirect_output: RedirectOutputUseCase,
        session: Session,
        console: Console,
        read_line: Optional[Callable[[str], str]] = None,
        legacy_double_dispatch: bool = False,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the dispatcher.

        Args:
            handlers: Command handlers, in help display order
            redirect_output: Handles lines containing a redirect operator
            session: Initial session
            console: Where output and errors are written
            read_line: Reads one line given the prompt; defaults to console input
            legacy_double_dispatch: Also dispatch the verb of a redirection line
            logger: Logger instance to use for logging
        """
        self._handlers: dict[str, CommandHandlerPort] = {}
        for handler in handlers:
            self._handlers[handler.verb] = handler
        self._redirect = redirect_output
        self._session = session
        self._console = console
        self._read_line = read_line or self._console_read_line
        self._legacy_double_dispatch = legacy_double_dispatch
        self._logger = logger or logging.getLogger(__name__)
        self._state = ShellState.RUNNING

    @property
    def session(self) -> Session:
        return self._session

    @property
    def state(self) -> ShellState:
        return self._state

    def usage(self) -> list[CommandUsage]:
        """Usage rows of every handler followed by the redirection forms."""
        rows: list[CommandUsage] = []
        for handler in self._handlers.values():
            rows.extend(handler.usage)
        rows.extend(self._redirect.usage)
        return rows

    def run(self) -> int:
        """
        Read and dispatch lines until the shell terminates.

        Returns:
            Process exit status (always 0)
        """
        while self._state is ShellState.RUNNING:
            try:
                line = self._read_line(self._session.prompt())
            except EOFError:
                self._console.print()
                self._logger.info("End of input, terminating")
                self._state = ShellState.TERMINATED
                break
            except KeyboardInterrupt:
                self._console.print()
                continue
            except UnicodeDecodeError as e:
                self._logger.warning(f"Undecodable input line: {e}")
                self._print_error(FormatError("Input is not valid UTF-8 text"))
                continue
            self.dispatch_line(line)
        return 0

    def dispatch_line(self, line: str) -> ShellState:
        """
        Process one input line.

        Empty lines are ignored. A line containing ``>`` goes to the
        redirection handler; unless legacy double dispatch is enabled, that is
        all that happens to it. Otherwise the first token selects the handler.
        """
        if self._state is ShellState.TERMINATED:
            return self._state

        text = line.strip()
        command = self._normalize(ParsedCommand.from_line(text))
        if command.is_empty():
            return self._state

        if has_redirection(text):
            self._logger.info(f"Redirection: {text}")
            self._guarded(lambda: self._redirect.execute(self._session, text))
            if not self._legacy_double_dispatch:
                return self._state

        handler = self._handlers.get(command.verb)
        if handler is None:
            self._report(
                CommandResult.failure(
                    UnknownCommandError(
                        f"Unknown command: '{command.verb}' , please try again "
                        "or use 'help' to browse available commands."
                    )
                )
            )
            return self._state

        self._logger.info(f"Dispatching '{command.verb}' with {command.arguments}")
        self._guarded(lambda: handler.execute(self._session, command))
        return self._state

    def _normalize(self, command: ParsedCommand) -> ParsedCommand:
        first = command.argument(0)
        if first is not None and (command.verb, first) in VERB_ALIASES:
            return ParsedCommand(
                verb=VERB_ALIASES[(command.verb, first)],
                arguments=command.arguments[1:],
            )
        return command

    def _guarded(self, run: Callable[[], CommandResult]) -> None:
        try:
            result = run()
        except ShellError as e:
            self._logger.error(f"Command failed: {e}")
            self._print_error(e)
            return
        except OSError as e:
            self._logger.error(f"Unexpected I/O error: {e}")
            self._print_error(IOFailure(str(e)))
            return
        self._report(result)

    def _report(self, result: CommandResult) -> None:
        try:
            for line in result.output:
                self._console.print(Text(printable(line)))
        except ShellError as e:
            self._logger.error(f"Output stream failed: {e}")
            self._print_error(e)
        except OSError as e:
            self._logger.error(f"Output stream failed: {e}")
            self._print_error(IOFailure(str(e)))
        except UnicodeError as e:
            self._logger.error(f"Output stream failed: {e}")
            self._print_error(IOFailure("Output is not valid text"))

        if not result.succeeded:
            self._logger.info(f"Command reported {len(result.errors)} error(s)")
        for error in result.errors:
            self._print_error(error)

        if result.session is not None:
            self._session = result.session
        if result.terminate:
            self._state = ShellState.TERMINATED

    def _print_error(self, error: ShellError) -> None:
        self._console.print(Text(printable(error.render()), style="red"))

    def _console_read_line(self, prompt: str) -> str:
        return self._console.input(Text(prompt, style="bold"))

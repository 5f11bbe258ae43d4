"""
Result value returned by every command handler.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from fshell.entities.session import Session
from fshell.exceptions import ShellError


@dataclass
class CommandResult:
    """
    Outcome of one command.

    Attributes:
        output: Lines to print. May be a lazy iterable for streaming commands
            (``cat``, ``grep``, ``ls-r``); such iterables can raise ``ShellError``
            while being consumed.
        errors: Failures collected while running the command, in order.
        session: Replacement session when the command changed it, else None.
        terminate: True only for ``exit``.
    """

    output: Iterable[str] = ()
    errors: list[ShellError] = field(default_factory=list)
    session: Session | None = None
    terminate: bool = False

    @classmethod
    def ok(cls, *lines: str) -> "CommandResult":
        return cls(output=list(lines))

    @classmethod
    def failure(cls, error: ShellError) -> "CommandResult":
        return cls(errors=[error])

    @classmethod
    def streamed(cls, lines: Iterable[str]) -> "CommandResult":
        return cls(output=lines)

    @property
    def succeeded(self) -> bool:
        return not self.errors

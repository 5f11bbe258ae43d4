"""
Custom exceptions for the shell.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class ShellError(BaseAppError):
    """
    Base class for errors produced while running a shell command.

    The ``command`` attribute names the verb that failed (e.g. ``"rmdir"``) and
    is used as a prefix when the error is rendered for the user.
    """

    def __init__(self, message: str, command: str | None = None):
        super().__init__(message)
        self.message = message
        self.command = command

    def for_command(self, command: str) -> "ShellError":
        """Attach the failing verb unless one is already set, and return self."""
        if not self.command:
            self.command = command
        return self

    def render(self) -> str:
        """Format the error as a single user-facing line."""
        if self.command:
            return f"{self.command}: {self.message}"
        return self.message


class UsageError(ShellError):
    """A required argument is missing or malformed."""

    pass


class NotFoundError(ShellError):
    """The target path does not exist."""

    pass


class WrongTypeError(ShellError):
    """Expected a directory and got a file, or the reverse."""

    pass


class AlreadyExistsError(ShellError):
    """A create operation collided with an existing entry."""

    pass


class NotEmptyError(ShellError):
    """Attempted to remove a directory that still has entries."""

    pass


class IOFailure(ShellError):
    """Any other failure reported by the host filesystem."""

    pass


class FormatError(ShellError):
    """A redirection line could not be split into command and target."""

    pass


class UnknownCommandError(ShellError):
    """The verb (or redirection producer) is not supported."""

    pass

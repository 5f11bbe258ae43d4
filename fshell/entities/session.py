"""
Session domain entity.
"""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Session:
    """
    State carried between shell commands.

    The only attribute is the current directory, an absolute normalized path.
    Sessions are immutable; a successful ``cd`` produces a new one.
    """

    current_directory: str

    def __post_init__(self) -> None:
        if not os.path.isabs(self.current_directory):
            raise ValueError(
                f"Session directory must be absolute: {self.current_directory}"
            )

    def with_directory(self, directory: str) -> "Session":
        """Return a copy of this session pointing at another directory."""
        return Session(current_directory=os.path.normpath(directory))

    def prompt(self) -> str:
        return f"{self.current_directory} > "

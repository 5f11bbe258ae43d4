"""
Path resolution against the session's current directory.
"""

import logging
import os
from typing import Optional

from fshell.entities.session import Session
from fshell.exceptions import UsageError


class PathResolver:
    """Turns user-typed path strings into absolute, normalized paths."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(__name__)

    def resolve(self, current_directory: str, raw: str) -> str:
        """
        Resolve ``raw`` relative to ``current_directory``.

        Resolution is purely lexical: ``.`` and ``..`` segments are collapsed
        without touching the filesystem, so the target does not need to exist.
        A leading ``~`` is expanded to the user's home directory.

        Args:
            current_directory: Absolute directory relative paths start from
            raw: Path as typed by the user

        Returns:
            Absolute normalized path

        Raises:
            UsageError: If ``raw`` is empty or only whitespace
        """
        text = (raw or "").strip()
        if not text:
            raise UsageError("Missing path argument")
        text = os.path.expanduser(text)
        if not os.path.isabs(text):
            text = os.path.join(current_directory, text)
        resolved = os.path.normpath(text)
        self._logger.debug(f"Resolved '{raw}' from {current_directory} to {resolved}")
        return resolved

    def resolve_for(self, session: Session, raw: str) -> str:
        return self.resolve(session.current_directory, raw)

    @staticmethod
    def is_within(path: str, root: str) -> bool:
        """Return True if ``path`` equals ``root`` or lies below it (both absolute)."""
        try:
            return os.path.commonpath([root, path]) == root
        except ValueError:
            return False

"""
Configuration settings for the shell.
"""

import logging
import os

from dotenv import find_dotenv, load_dotenv

from fshell.exceptions import ConfigurationError

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings:
    """Shell settings loaded from environment variables."""

    def __init__(self):
        self.start_directory: str = self._get_directory("FSHELL_START_DIR")
        self.log_level: str = self._get_log_level("FSHELL_LOG_LEVEL", "WARNING")
        self.log_file: str | None = os.getenv("FSHELL_LOG_FILE") or None
        self.legacy_double_dispatch: bool = self._get_bool(
            "FSHELL_LEGACY_DOUBLE_DISPATCH", False
        )
        self.color: bool = not os.getenv("NO_COLOR")

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_bool(self, key: str, default: bool) -> bool:
        val = self._get_env(key, "1" if default else "0").strip().lower()
        return val not in ("0", "false", "no", "")

    def _get_log_level(self, key: str, default: str) -> str:
        value = self._get_env(key, default).strip().upper()
        return validate_log_level(value)

    def _get_directory(self, key: str) -> str:
        """Get a directory from the environment, defaulting to the process cwd."""
        value = os.getenv(key)
        if not value:
            return os.path.abspath(os.getcwd())
        return validate_start_directory(value)

    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)


def validate_log_level(value: str) -> str:
    level = value.strip().upper()
    if level not in LOG_LEVELS:
        raise ConfigurationError(
            f"Invalid log level '{value}', expected one of {', '.join(LOG_LEVELS)}"
        )
    return level


def validate_start_directory(value: str) -> str:
    path = os.path.normpath(os.path.abspath(os.path.expanduser(value)))
    if not os.path.isdir(path):
        raise ConfigurationError(f"Start directory is not a directory: {value}")
    return path


def load_settings() -> Settings:
    """Load a .env file from the working directory (or a parent), then read the environment."""
    _ = load_dotenv(find_dotenv(usecwd=True))
    return Settings()

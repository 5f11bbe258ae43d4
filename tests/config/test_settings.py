"""
Tests for Settings.
"""

import os

import pytest

from fshell.config.settings import Settings, load_settings, validate_log_level
from fshell.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in (
        "FSHELL_START_DIR",
        "FSHELL_LOG_LEVEL",
        "FSHELL_LOG_FILE",
        "FSHELL_LEGACY_DOUBLE_DISPATCH",
        "NO_COLOR",
    ):
        monkeypatch.delenv(key, raising=False)


class TestSettings:
    def test_defaults(self):
        settings = Settings()

        assert settings.start_directory == os.path.abspath(os.getcwd())
        assert settings.log_level == "WARNING"
        assert settings.log_file is None
        assert settings.legacy_double_dispatch is False
        assert settings.color is True

    def test_values_from_environment(self, monkeypatch, temp_directory):
        monkeypatch.setenv("FSHELL_START_DIR", temp_directory)
        monkeypatch.setenv("FSHELL_LOG_LEVEL", "debug")
        monkeypatch.setenv("FSHELL_LOG_FILE", "/tmp/fshell.log")
        monkeypatch.setenv("FSHELL_LEGACY_DOUBLE_DISPATCH", "true")
        monkeypatch.setenv("NO_COLOR", "1")

        settings = Settings()

        assert settings.start_directory == temp_directory
        assert settings.log_level == "DEBUG"
        assert settings.log_level_value() == 10
        assert settings.log_file == "/tmp/fshell.log"
        assert settings.legacy_double_dispatch is True
        assert settings.color is False

    @pytest.mark.parametrize("value", ["0", "false", "no", ""])
    def test_falsey_flags(self, monkeypatch, value):
        monkeypatch.setenv("FSHELL_LEGACY_DOUBLE_DISPATCH", value)

        assert Settings().legacy_double_dispatch is False

    def test_start_directory_must_exist(self, monkeypatch, temp_directory):
        monkeypatch.setenv("FSHELL_START_DIR", os.path.join(temp_directory, "test1.txt"))

        with pytest.raises(ConfigurationError, match="Start directory is not a directory"):
            Settings()

    def test_invalid_log_level(self):
        with pytest.raises(ConfigurationError, match="Invalid log level"):
            validate_log_level("LOUD")

    def test_load_settings_reads_dotenv(self, monkeypatch, temp_directory):
        with open(os.path.join(temp_directory, ".env"), "w") as f:
            f.write("FSHELL_LOG_LEVEL=ERROR\n")
        monkeypatch.chdir(temp_directory)

        try:
            settings = load_settings()
        finally:
            os.environ.pop("FSHELL_LOG_LEVEL", None)

        assert settings.log_level == "ERROR"

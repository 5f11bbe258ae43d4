"""
Tests for the Session, ParsedCommand, RedirectionSpec and TreeEntry entities.
"""

import dataclasses

import pytest

from fshell.entities.command import ParsedCommand, RedirectionSpec
from fshell.entities.command_result import CommandResult
from fshell.entities.session import Session
from fshell.entities.tree_entry import TreeEntry
from fshell.exceptions import NotFoundError


class TestSession:
    def test_prompt_shows_current_directory(self):
        assert Session("/tmp/work").prompt() == "/tmp/work > "

    def test_rejects_relative_directory(self):
        with pytest.raises(ValueError, match="must be absolute"):
            Session("relative/dir")

    def test_with_directory_returns_new_session(self):
        session = Session("/tmp")
        moved = session.with_directory("/tmp/a/../b")

        assert moved.current_directory == "/tmp/b"
        assert session.current_directory == "/tmp"

    def test_is_immutable(self):
        session = Session("/tmp")
        with pytest.raises(dataclasses.FrozenInstanceError):
            session.current_directory = "/"  # type: ignore[misc]


class TestParsedCommand:
    def test_from_line_splits_on_whitespace(self):
        command = ParsedCommand.from_line("  mkdir   a\tb  ")

        assert command.verb == "mkdir"
        assert command.arguments == ["a", "b"]

    def test_from_blank_line_is_empty(self):
        assert ParsedCommand.from_line("   ").is_empty()

    def test_argument_out_of_range(self):
        command = ParsedCommand.from_line("cd")

        assert command.argument(0) is None


class TestRedirectionSpec:
    def test_operator(self):
        assert RedirectionSpec("echo hi", "f", append_mode=True).operator == ">>"
        assert RedirectionSpec("echo hi", "f", append_mode=False).operator == ">"


class TestTreeEntry:
    def test_display_name(self):
        assert TreeEntry("/a/b", is_directory=True).display_name() == "b/"
        assert TreeEntry("/a/c.txt", is_directory=False).display_name() == "c.txt"

    def test_display_name_replaces_undecodable_bytes(self):
        entry = TreeEntry("/a/bad\udcffname", is_directory=True)

        assert entry.name == "bad\udcffname"
        assert entry.display_name() == "bad\ufffdname/"


class TestCommandResult:
    def test_ok_has_no_errors(self):
        result = CommandResult.ok("one", "two")

        assert result.succeeded
        assert list(result.output) == ["one", "two"]
        assert result.session is None
        assert not result.terminate

    def test_failure_renders_command_prefix(self):
        result = CommandResult.failure(NotFoundError("No such directory: x", "cd"))

        assert not result.succeeded
        assert result.errors[0].render() == "cd: No such directory: x"

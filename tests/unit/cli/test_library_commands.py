"""
Tests for the library CLI commands.
"""

from __future__ import annotations

from typing import Iterator
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from awashtube.cli.main import app
from awashtube.container import Container
from awashtube.exceptions import LibraryStorageError
from awashtube.models.enums import LibraryTab

runner = CliRunner()


@pytest.fixture
def cli_container(test_container: Container) -> Iterator[Container]:
    """Patch the library commands to use the test container."""
    with patch("awashtube.cli.library_commands.container", test_container):
        yield test_container


class TestShowCommand:
    """Test displaying the library."""

    def test_empty_library(self, cli_container: Container) -> None:
        result = runner.invoke(app, ["library", "show"])

        assert result.exit_code == 0
        assert "The library is empty" in result.output

    def test_lists_entries(self, cli_container: Container) -> None:
        cli_container.library_service.toggle_watch_later("aaaaaaaaaaa")

        result = runner.invoke(app, ["library", "show"])

        assert result.exit_code == 0
        assert "Watch Later" in result.output
        assert "aaaaaaaaaaa" in result.output


class TestToggleCommands:
    """Test adding and removing entries."""

    @pytest.mark.parametrize(
        "command,label,attr",
        [
            ("favorite", "Favorites", "favorites"),
            ("playlist", "Playlist", "playlist"),
            ("watch-later", "Watch Later", "watch_later"),
        ],
    )
    def test_toggle_adds_then_removes(
        self, cli_container: Container, command: str, label: str, attr: str
    ) -> None:
        """Test the first call adds and the second removes, both persisted."""
        added = runner.invoke(app, ["library", command, "aaaaaaaaaaa"])

        assert added.exit_code == 0
        assert f"Added aaaaaaaaaaa to {label}" in added.output
        assert getattr(cli_container.library_store.load(), attr) == ["aaaaaaaaaaa"]

        removed = runner.invoke(app, ["library", command, "aaaaaaaaaaa"])

        assert removed.exit_code == 0
        assert f"Removed aaaaaaaaaaa from {label}" in removed.output
        assert getattr(cli_container.library_store.load(), attr) == []


class TestTabCommand:
    """Test selecting the active tab."""

    def test_selects_tab(self, cli_container: Container) -> None:
        result = runner.invoke(app, ["library", "tab", "watchLater"])

        assert result.exit_code == 0
        assert "Selected tab: Watch Later" in result.output
        assert cli_container.library_store.load().active_tab is LibraryTab.WATCH_LATER

    def test_invalid_tab(self, cli_container: Container) -> None:
        result = runner.invoke(app, ["library", "tab", "archive"])

        assert result.exit_code == 2


class TestClearCommand:
    """Test clearing the library."""

    def test_clear_with_yes(self, cli_container: Container) -> None:
        """Test --yes clears the lists and deletes the file."""
        cli_container.library_service.toggle_favorite("aaaaaaaaaaa")

        result = runner.invoke(app, ["library", "clear", "--yes"])

        assert result.exit_code == 0
        assert "Library cleared" in result.output
        assert cli_container.library_service.favorites == []
        assert not cli_container.library_store.path.exists()

    def test_declined_confirmation(self, cli_container: Container) -> None:
        """Test answering no keeps the data."""
        cli_container.library_service.toggle_favorite("aaaaaaaaaaa")

        result = runner.invoke(app, ["library", "clear"], input="n\n")

        assert result.exit_code == 0
        assert "Nothing cleared" in result.output
        assert cli_container.library_service.favorites == ["aaaaaaaaaaa"]

    def test_confirmed_prompt(self, cli_container: Container) -> None:
        cli_container.library_service.toggle_favorite("aaaaaaaaaaa")

        result = runner.invoke(app, ["library", "clear"], input="y\n")

        assert result.exit_code == 0
        assert cli_container.library_service.favorites == []

    def test_storage_failure(self, cli_container: Container) -> None:
        """Test a file that cannot be deleted exits with code 1."""
        with patch.object(
            cli_container.library_store,
            "clear",
            side_effect=LibraryStorageError("permission denied"),
        ):
            result = runner.invoke(app, ["library", "clear", "--yes"])

        assert result.exit_code == 1
        assert "permission denied" in result.output

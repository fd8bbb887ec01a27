"""Unit tests for check command."""

from pathlib import Path
from unittest.mock import patch

import pytest
from fakes import FakeQuery
from typer.testing import CliRunner
from vmprov import __version__
from vmprov.cli.main import app
from vmprov.utils.formatting import console, err_console

runner = CliRunner()


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Config with three packages."""
    path = tmp_path / "provision.toml"
    path.write_text('[packages]\ninstall = ["git", "vim", "nginx"]\n')
    return path


class TestMainApp:
    """Tests for global options."""

    def test_version(self) -> None:
        """--version prints the version and exits."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"vmprov version {__version__}" in result.output

    def test_help_lists_commands(self) -> None:
        """Top-level help lists every command."""
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        for command in ("run", "check", "init"):
            assert command in result.output

    def test_no_color(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """--no-color switches both consoles to plain output."""
        monkeypatch.setattr(console, "no_color", False)
        monkeypatch.setattr(err_console, "no_color", False)

        result = runner.invoke(app, ["--no-color", "init", "--dry-run"])

        assert result.exit_code == 0
        assert console.no_color is True
        assert err_console.no_color is True


class TestCheckCommand:
    """Tests for vmprov check command."""

    def test_lists_missing(self, config_file: Path) -> None:
        """Missing packages are summarized after the per-package lines."""
        query = FakeQuery(installed={"git": "1:2.43.0"})

        with (
            patch("vmprov.cli.commands.check.get_query", return_value=query),
            patch("vmprov.cli.commands.check.configure_logging"),
        ):
            result = runner.invoke(app, ["check", "-c", str(config_file)])

        assert result.exit_code == 0
        assert "1:2.43.0" in result.output
        assert "vim [not installed]" in result.output
        assert "2 of 3 package(s) not installed" in result.output
        assert query.queried == ["git", "vim", "nginx"]

    def test_all_installed(self, config_file: Path) -> None:
        """A fully provisioned machine reports success."""
        query = FakeQuery(installed={"git": "1", "vim": "2", "nginx": "3"})

        with (
            patch("vmprov.cli.commands.check.get_query", return_value=query),
            patch("vmprov.cli.commands.check.configure_logging"),
        ):
            result = runner.invoke(app, ["check", "-c", str(config_file)])

        assert result.exit_code == 0
        assert "All 3 package(s) are installed." in result.output

    def test_never_mutates(self, config_file: Path) -> None:
        """Check never runs apt-get."""
        with (
            patch("vmprov.cli.commands.check.get_query", return_value=FakeQuery()),
            patch("vmprov.cli.commands.check.configure_logging"),
            patch("vmprov.operators.apt.run_command") as mock_run,
        ):
            result = runner.invoke(app, ["check", "-c", str(config_file)])

        assert result.exit_code == 0
        mock_run.assert_not_called()

    def test_invalid_config_exits_one(self, tmp_path: Path) -> None:
        """An invalid config is reported and exits with code 1."""
        path = tmp_path / "provision.toml"
        path.write_text('[packages]\ninstall = "git"\n')

        with patch("vmprov.cli.commands.check.configure_logging"):
            result = runner.invoke(app, ["check", "-c", str(path)])

        assert result.exit_code == 1
        assert "Failed to load config" in result.output

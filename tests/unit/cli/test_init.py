"""Unit tests for init command.

Tests for the CLI init command implementation.
"""

import tomllib
from pathlib import Path

from typer.testing import CliRunner
from vmprov.cli.main import app
from vmprov.core.config import load_config
from vmprov.core.paths import get_config_path

runner = CliRunner()


class TestInitCommand:
    """Tests for vmprov init command."""

    def test_init_help(self) -> None:
        """Init command shows help."""
        result = runner.invoke(app, ["init", "--help"])
        assert result.exit_code == 0
        assert "--force" in result.output

    def test_writes_default_location(self) -> None:
        """Init writes provision.toml under the XDG config directory."""
        result = runner.invoke(app, ["init"])

        assert result.exit_code == 0
        assert get_config_path().exists()
        assert load_config().profile.user == "vagrant"

    def test_writes_custom_path(self, tmp_path: Path) -> None:
        """--config selects where the file is written."""
        path = tmp_path / "p.toml"

        result = runner.invoke(app, ["init", "-c", str(path)])

        assert result.exit_code == 0
        with open(path, "rb") as f:
            data = tomllib.load(f)
        assert "git" in data["packages"]["install"]

    def test_refuses_overwrite(self, tmp_path: Path) -> None:
        """An existing config is kept unless --force is given."""
        path = tmp_path / "p.toml"
        path.write_text("# mine\n")

        result = runner.invoke(app, ["init", "-c", str(path)])

        assert result.exit_code == 1
        assert "Config already exists" in result.output
        assert path.read_text() == "# mine\n"

    def test_force_overwrites(self, tmp_path: Path) -> None:
        """--force replaces an existing config."""
        path = tmp_path / "p.toml"
        path.write_text("# mine\n")

        result = runner.invoke(app, ["init", "-c", str(path), "--force"])

        assert result.exit_code == 0
        assert "[packages]" in path.read_text()

    def test_dry_run_writes_nothing(self, tmp_path: Path) -> None:
        """--dry-run prints the config instead of writing it."""
        path = tmp_path / "p.toml"

        result = runner.invoke(app, ["init", "-c", str(path), "--dry-run"])

        assert result.exit_code == 0
        assert "[network]" in result.output
        assert not path.exists()

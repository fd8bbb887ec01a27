"""Unit tests for provisioning config I/O."""

import tomllib
from pathlib import Path

import pytest
from vmprov.core.config import (
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
    load_config,
    load_config_or_default,
    save_config,
)
from vmprov.core.paths import get_config_path
from vmprov.models.config import DEFAULT_PACKAGES, PackagesConfig, ProvisionConfig


class TestLoadConfig:
    """Tests for load_config."""

    def test_loads_valid_file(self, tmp_path: Path) -> None:
        """A valid TOML file is parsed into ProvisionConfig."""
        path = tmp_path / "provision.toml"
        path.write_text(
            """
[packages]
install = ["git", "vim"]

[network]
url = "https://deb.debian.org"
attempts = 2
timeout_seconds = 3

[profile]
user = "dev"
"""
        )

        config = load_config(path)

        assert config.packages.install == ["git", "vim"]
        assert config.network.url == "https://deb.debian.org"
        assert config.network.attempts == 2
        assert config.profile.home_dir == Path("/home/dev")

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file raises ConfigNotFoundError."""
        with pytest.raises(ConfigNotFoundError):
            load_config(tmp_path / "nope.toml")

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Broken TOML raises ConfigParseError."""
        path = tmp_path / "provision.toml"
        path.write_text("[packages\ninstall = ")

        with pytest.raises(ConfigParseError):
            load_config(path)

    def test_unknown_key_rejected(self, tmp_path: Path) -> None:
        """Unknown keys fail validation."""
        path = tmp_path / "provision.toml"
        path.write_text('[packages]\ninstall = ["git"]\nremove = ["nano"]\n')

        with pytest.raises(ConfigValidationError):
            load_config(path)

    def test_out_of_range_attempts_rejected(self, tmp_path: Path) -> None:
        """Probe attempts must be between 1 and 10."""
        path = tmp_path / "provision.toml"
        path.write_text("[network]\nattempts = 0\n")

        with pytest.raises(ConfigValidationError):
            load_config(path)


class TestLoadConfigOrDefault:
    """Tests for load_config_or_default."""

    def test_defaults_when_no_file(self) -> None:
        """Without a config at the default path, built-in defaults are used."""
        config, from_file = load_config_or_default()

        assert from_file is False
        assert config.packages.install == list(DEFAULT_PACKAGES)

    def test_explicit_missing_path_raises(self, tmp_path: Path) -> None:
        """An explicit path must exist."""
        with pytest.raises(ConfigNotFoundError):
            load_config_or_default(tmp_path / "nope.toml")


class TestSaveConfig:
    """Tests for save_config."""

    def test_round_trip(self) -> None:
        """A saved config loads back unchanged."""
        config = ProvisionConfig(packages=PackagesConfig(install=["git", "curl"]))

        path = save_config(config)

        assert path == get_config_path()
        assert load_config(path) == config

    def test_omits_unset_home(self, tmp_path: Path) -> None:
        """TOML output leaves out unset optional values."""
        path = save_config(ProvisionConfig(), tmp_path / "provision.toml")

        with open(path, "rb") as f:
            data = tomllib.load(f)

        assert "home" not in data["profile"]
        assert data["profile"]["user"] == "vagrant"
        assert data["installers"][0]["name"] == "programming fonts"

    def test_no_temp_files_left(self, tmp_path: Path) -> None:
        """Only the config file remains after saving."""
        save_config(ProvisionConfig(), tmp_path / "provision.toml")

        assert [p.name for p in tmp_path.iterdir()] == ["provision.toml"]

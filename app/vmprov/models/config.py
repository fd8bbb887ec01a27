"""Provisioning configuration models.

This module defines the Pydantic models representing the provision.toml
structure that describes what a first-boot run should do.
"""

from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_PACKAGES: tuple[str, ...] = (
    # Base packages
    "git",
    "vim",
    "build-essential",
    "wget",
    "curl",
    "gdebi",
    "aptitude",
    # Development
    "nginx",
    "python3-dev",
    "virtualenvwrapper",
    "gettext",
    # Window manager
    "i3",
    "rxvt-unicode",
    "xinit",
    "x11-xserver-utils",
    "conky",
    "fonts-font-awesome",
    "xclip",
    "xsel",
    # Apps
    "transmission-gtk",
    "pcmanfm",
    "lxappearance",
    "unzip",
)


class PackagesConfig(BaseModel):
    """Package section: the desired package set.

    Attributes:
        install: Package names that should be installed, in display order.
    """

    model_config = ConfigDict(extra="forbid")

    install: Annotated[
        list[str],
        Field(default_factory=lambda: list(DEFAULT_PACKAGES), description="Desired packages"),
    ]

    @field_validator("install")
    @classmethod
    def validate_names(cls, v: list[str]) -> list[str]:
        """Reject blank package names."""
        for name in v:
            if not name.strip():
                msg = "Package names cannot be empty"
                raise ValueError(msg)
            if any(ch.isspace() for ch in name.strip()):
                msg = f"Package name cannot contain whitespace: {name!r}"
                raise ValueError(msg)
        return [name.strip() for name in v]


class NetworkConfig(BaseModel):
    """Network gate settings.

    Attributes:
        url: URL probed to decide whether outside access is available.
        attempts: Number of probe attempts before giving up.
        timeout_seconds: Timeout of each attempt.
    """

    model_config = ConfigDict(extra="forbid")

    url: Annotated[str, Field(description="URL used for the reachability probe")] = (
        "http://google.com"
    )
    attempts: Annotated[int, Field(ge=1, le=10, description="Probe attempts (1-10)")] = 3
    timeout_seconds: Annotated[
        float,
        Field(gt=0, le=60, description="Per-attempt timeout in seconds"),
    ] = 5.0

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Require an http(s) URL."""
        if not v.startswith(("http://", "https://")):
            msg = f"Probe URL must start with http:// or https://, got {v!r}"
            raise ValueError(msg)
        return v


class DotfileEntry(BaseModel):
    """A file copied into the user's home directory.

    Attributes:
        source: Absolute path of the file on the provisioning host.
        target: Destination path relative to the user's home directory.
    """

    model_config = ConfigDict(extra="forbid")

    source: Annotated[str, Field(description="Source file path")]
    target: Annotated[str, Field(description="Target path relative to home")]

    @field_validator("target")
    @classmethod
    def validate_target(cls, v: str) -> str:
        """Keep targets inside the home directory."""
        target = Path(v)
        if target.is_absolute() or ".." in target.parts:
            msg = f"Dotfile target must be a relative path inside home: {v!r}"
            raise ValueError(msg)
        return v


def _default_dotfiles() -> list[DotfileEntry]:
    return [DotfileEntry(source="/srv/config/bash_prompt", target=".bash_prompt")]


class ProfileConfig(BaseModel):
    """Profile section: the provisioned user and its dotfiles.

    Attributes:
        user: Login name owning the copied files.
        home: Home directory; derived from the user name when unset.
        dotfiles: Files copied into the home directory.
    """

    model_config = ConfigDict(extra="forbid")

    user: Annotated[str, Field(min_length=1, description="Provisioned user")] = "vagrant"
    home: Annotated[str | None, Field(description="Home directory override")] = None
    dotfiles: Annotated[
        list[DotfileEntry],
        Field(default_factory=_default_dotfiles, description="Dotfiles to copy"),
    ]

    @property
    def home_dir(self) -> Path:
        """Resolved home directory of the profile user."""
        if self.home:
            return Path(self.home)
        return Path("/home") / self.user


class InstallerEntry(BaseModel):
    """A remote installer script fetched and run through bash.

    Attributes:
        name: Human-readable name printed before running.
        url: Script URL.
    """

    model_config = ConfigDict(extra="forbid")

    name: Annotated[str, Field(min_length=1, description="Installer name")]
    url: Annotated[str, Field(description="Installer script URL")]

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Require an https URL for anything piped into a shell."""
        if not v.startswith("https://"):
            msg = f"Installer URL must use https://, got {v!r}"
            raise ValueError(msg)
        return v


def _default_installers() -> list[InstallerEntry]:
    return [
        InstallerEntry(
            name="programming fonts",
            url="https://github.com/hbin/top-programming-fonts/raw/master/install.sh",
        ),
        InstallerEntry(
            name="dotfiles",
            url="https://github.com/tbui/urxvt-config/raw/master/install.sh",
        ),
    ]


class DisplayConfig(BaseModel):
    """Column widths of the per-package status lines.

    Attributes:
        name_width: Width of the package name column.
        version_width: Width of the right-aligned version column.
    """

    model_config = ConfigDict(extra="forbid")

    name_width: Annotated[int, Field(ge=1, le=120, description="Name column width")] = 20
    version_width: Annotated[int, Field(ge=1, le=120, description="Version column width")] = 30


class ProvisionConfig(BaseModel):
    """Complete first-boot provisioning configuration.

    Attributes:
        packages: Desired package set.
        network: Network gate settings.
        profile: Provisioned user and dotfiles.
        installers: Remote installer scripts run after package installation.
        display: Output column widths.
    """

    model_config = ConfigDict(extra="forbid")

    packages: Annotated[PackagesConfig, Field(default_factory=PackagesConfig)]
    network: Annotated[NetworkConfig, Field(default_factory=NetworkConfig)]
    profile: Annotated[ProfileConfig, Field(default_factory=ProfileConfig)]
    installers: Annotated[
        list[InstallerEntry],
        Field(default_factory=_default_installers, description="Remote installers"),
    ]
    display: Annotated[DisplayConfig, Field(default_factory=DisplayConfig)]

"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import io
import os
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest
from rich.console import Console


@pytest.fixture(autouse=True)
def isolated_xdg(tmp_path: Path) -> Iterator[Path]:
    """Point XDG config and state directories into a temporary directory."""
    with patch.dict(
        os.environ,
        {
            "XDG_CONFIG_HOME": str(tmp_path / "config"),
            "XDG_STATE_HOME": str(tmp_path / "state"),
        },
    ):
        yield tmp_path


@pytest.fixture
def output() -> io.StringIO:
    """Buffer receiving console output."""
    return io.StringIO()


@pytest.fixture
def test_console(output: io.StringIO) -> Console:
    """Plain console writing into the output buffer."""
    return Console(file=output, width=200, color_system=None, highlight=False)


@pytest.fixture
def mock_dpkg_status_output() -> str:
    """Sample dpkg -s output for an installed package."""
    return """Package: git
Status: install ok installed
Priority: optional
Section: vcs
Installed-Size: 44040
Maintainer: Jonathan Nieder <jrnieder@gmail.com>
Architecture: amd64
Version: 1:2.43.0-1ubuntu7.1
Depends: libc6 (>= 2.38), libcurl3t64-gnutls (>= 7.56.1)
Description: fast, scalable, distributed revision control system"""


@pytest.fixture
def mock_dpkg_config_files_output() -> str:
    """Sample dpkg -s output for a removed package with leftover config."""
    return """Package: nginx
Status: deinstall ok config-files
Priority: optional
Section: httpd
Architecture: amd64
Version: 1.24.0-2ubuntu7
Config-Version: 1.24.0-2ubuntu7
Description: small, powerful, scalable web/proxy server"""


@pytest.fixture
def mock_policy_installed_output() -> str:
    """Sample apt-cache policy output for an installed package."""
    return """git:
  Installed: 1:2.43.0-1ubuntu7.1
  Candidate: 1:2.43.0-1ubuntu7.1
  Version table:
 *** 1:2.43.0-1ubuntu7.1 500
        500 http://archive.ubuntu.com/ubuntu noble-updates/main amd64 Packages
        100 /var/lib/dpkg/status"""


@pytest.fixture
def mock_policy_none_output() -> str:
    """Sample apt-cache policy output for a package that is not installed."""
    return """nginx:
  Installed: (none)
  Candidate: 1.24.0-2ubuntu7
  Version table:
     1.24.0-2ubuntu7 500
        500 http://archive.ubuntu.com/ubuntu noble/main amd64 Packages"""

"""User profile setup: dotfile copies and remote installer scripts."""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path
from typing import TYPE_CHECKING

from vmprov.models.result import ExtraResult
from vmprov.utils.shell import as_user, is_root, run_command

if TYPE_CHECKING:
    from rich.console import Console

    from vmprov.models.config import InstallerEntry, ProfileConfig

logger = logging.getLogger(__name__)

_DOWNLOAD_TIMEOUT: float = 120.0
_INSTALLER_TIMEOUT: float = 1800.0


def copy_dotfiles(profile: ProfileConfig, console: Console) -> list[ExtraResult]:
    """Copy configured dotfiles into the profile user's home directory.

    Sources that don't exist are skipped. When running as root, copied
    files are handed over to the profile user.

    Args:
        profile: Profile configuration.
        console: Console receiving one line per copied file.

    Returns:
        ExtraResult for every dotfile whose source exists.
    """
    results: list[ExtraResult] = []
    home = profile.home_dir

    for entry in profile.dotfiles:
        source = Path(entry.source)
        if not source.is_file():
            logger.debug("Dotfile source %s not present, skipping", source)
            continue

        target = home / entry.target
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(source, target)
            if is_root():
                shutil.chown(target, user=profile.user, group=profile.user)
        except (OSError, LookupError) as e:
            logger.warning("Failed to copy %s to %s: %s", source, target, e)
            results.append(ExtraResult(name=str(target), success=False, detail=str(e)))
            continue

        console.print(f" * Copied {source} to {target}", markup=False, highlight=False)
        results.append(ExtraResult(name=str(target), success=True))

    return results


def run_installer(installer: InstallerEntry, user: str, console: Console) -> ExtraResult:
    """Download an installer script and run it through bash as a user.

    Args:
        installer: Installer to run.
        user: Login name the script runs as.
        console: Console receiving progress lines.

    Returns:
        ExtraResult for the installer. Failures are reported, not raised.
    """
    console.print(f"Installing {installer.name}", markup=False, highlight=False)

    try:
        download = run_command(
            ["curl", "-fsSL", installer.url],
            timeout=_DOWNLOAD_TIMEOUT,
        )
        if not download.success:
            return _installer_failed(installer, f"download failed: {download.error_text}")

        result = run_command(
            as_user(user, ["bash", "-s"]),
            input_text=download.stdout,
            timeout=_INSTALLER_TIMEOUT,
        )
    except subprocess.TimeoutExpired:
        return _installer_failed(installer, "timed out")
    except OSError as e:
        return _installer_failed(installer, f"could not be run: {e}")

    if not result.success:
        return _installer_failed(installer, result.error_text)

    logger.info("Installer %s completed", installer.name)
    return ExtraResult(name=installer.name, success=True)


def _installer_failed(installer: InstallerEntry, detail: str) -> ExtraResult:
    logger.warning("Installer %s failed: %s", installer.name, detail)
    return ExtraResult(name=installer.name, success=False, detail=detail)

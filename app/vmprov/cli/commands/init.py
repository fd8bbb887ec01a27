"""Init command implementation.

Writes the default provisioning configuration to disk.
"""

from typing import Annotated

import tomli_w
import typer

from vmprov.cli.types import ConfigOption
from vmprov.core.config import ConfigError, config_to_dict, save_config
from vmprov.core.paths import get_config_path
from vmprov.models.config import ProvisionConfig
from vmprov.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Write the default provisioning config.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def init_config(
    ctx: typer.Context,
    config_path: ConfigOption = None,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite an existing config.",
        ),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            "-n",
            help="Show the config without writing it.",
        ),
    ] = False,
) -> None:
    """Write the default provisioning config.

    The config lists the packages to install, the network probe settings,
    the dotfiles to copy, and the installer scripts to run.

    Examples:
        vmprov init                 # Write ~/.config/vmprov/provision.toml
        vmprov init --dry-run       # Print the default config
        vmprov init -c ./p.toml -f  # Overwrite a specific file
    """
    if ctx.invoked_subcommand is not None:
        return

    path = config_path or get_config_path()
    config = ProvisionConfig()

    if dry_run:
        console.print(tomli_w.dumps(config_to_dict(config)), markup=False, highlight=False)
        print_info("Dry-run mode: No files were written.")
        return

    if path.exists() and not force:
        print_error(f"Config already exists: {path}")
        print_info("Use --force to overwrite it.")
        raise typer.Exit(code=1)

    try:
        saved = save_config(config, path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")
    print_info(f"{len(config.packages.install)} package(s) configured.")

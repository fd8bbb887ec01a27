"""Run command implementation.

Provisions the machine: network gate, package reconciliation, dotfiles,
and installer scripts.
"""

from typing import Annotated

import typer

from vmprov.cli.types import ConfigOption, get_operator, get_query
from vmprov.core.config import require_config
from vmprov.core.provision import Provisioner
from vmprov.core.reconciler import InstallBatchError, ReconcileError
from vmprov.utils.formatting import console, print_error, print_info, print_warning
from vmprov.utils.logging_setup import configure_logging

app = typer.Typer(
    help="Provision this machine.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def run_provision(
    ctx: typer.Context,
    config_path: ConfigOption = None,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            "-n",
            help="Simulate package changes; skip dotfiles and installers.",
        ),
    ] = False,
    skip_network_check: Annotated[
        bool,
        typer.Option(
            "--skip-network-check",
            help="Do not probe for network access before provisioning.",
        ),
    ] = False,
    no_extras: Annotated[
        bool,
        typer.Option(
            "--no-extras",
            help="Only reconcile packages; skip dotfiles and installers.",
        ),
    ] = False,
) -> None:
    """Provision this machine.

    Checks that the network is reachable, installs every configured
    package that is missing in one apt-get call, removes orphaned
    packages, clears the apt cache, copies dotfiles, and runs installer
    scripts. Running it again with nothing missing changes nothing.

    Without network access nothing is done and the command still
    succeeds.

    Examples:
        vmprov run                      # Provision with the default config
        vmprov run --dry-run            # Preview package changes
        vmprov run -c provision.toml    # Use a specific config
    """
    if ctx.invoked_subcommand is not None:
        return

    obj = ctx.obj or {}
    configure_logging(
        verbose=obj.get("verbose", False),
        quiet=obj.get("quiet", False),
        log_file=not dry_run,
    )

    config = require_config(config_path)
    provisioner = Provisioner(config, get_query(), get_operator(dry_run=dry_run), console=console)

    try:
        report = provisioner.run(
            check_network=not skip_network_check,
            extras=not (dry_run or no_extras),
        )
    except InstallBatchError as e:
        print_error(str(e))
        print_info(f"Batch: {', '.join(e.packages)}")
        raise typer.Exit(code=1) from e
    except ReconcileError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    except RuntimeError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if report.packages is not None:
        for step in report.packages.cleanup_failures:
            print_warning(f"apt-get {step.step.value} failed: {step.error}")

    for extra in report.extra_failures:
        print_warning(f"{extra.name}: {extra.detail}")

    if dry_run:
        print_info("\nDry-run mode: No changes were made.")

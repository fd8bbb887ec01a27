"""Check command implementation.

Shows which configured packages are installed without changing anything.
"""

import typer

from vmprov.cli.types import ConfigOption, get_query
from vmprov.core.config import require_config
from vmprov.core.reconciler import Reconciler
from vmprov.operators.apt import AptOperator
from vmprov.utils.formatting import console, print_info, print_success
from vmprov.utils.logging_setup import configure_logging

app = typer.Typer(
    help="Check which configured packages are missing.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def check_packages(
    ctx: typer.Context,
    config_path: ConfigOption = None,
) -> None:
    """Check which configured packages are missing.

    Prints one line per configured package, with its installed version
    or a not-installed marker. Never changes the system.

    Examples:
        vmprov check
        vmprov check -c provision.toml
    """
    if ctx.invoked_subcommand is not None:
        return

    obj = ctx.obj or {}
    configure_logging(
        verbose=obj.get("verbose", False),
        quiet=obj.get("quiet", False),
        log_file=False,
    )

    config = require_config(config_path)
    reconciler = Reconciler(
        get_query(),
        AptOperator(dry_run=True),
        name_width=config.display.name_width,
        version_width=config.display.version_width,
        console=console,
    )

    report = reconciler.check(config.packages.install)

    missing = report.missing
    if not missing:
        print_success(f"\nAll {len(report.statuses)} package(s) are installed.")
        return

    print_info(f"\n{len(missing)} of {len(report.statuses)} package(s) not installed:")
    print_info(", ".join(missing))

"""vmprov command line entry point."""

from typing import Annotated

import typer

from vmprov import __version__
from vmprov.cli.commands import check, init, run
from vmprov.utils.formatting import console, err_console

app = typer.Typer(
    name="vmprov",
    help="First-boot provisioning for virtual machines.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)

for _module, _name in ((run, "run"), (check, "check"), (init, "init")):
    app.add_typer(_module.app, name=_name)


def _show_version(value: bool) -> None:
    if value:
        typer.echo(f"vmprov version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version", "-V", callback=_show_version, is_eager=True, help="Show version and exit."
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show debug log records.")
    ] = False,
    quiet: Annotated[
        bool, typer.Option("--quiet", "-q", help="Only show error log records.")
    ] = False,
    no_color: Annotated[
        bool, typer.Option("--no-color", help="Disable colored output.")
    ] = False,
) -> None:
    """Check network access, install the missing packages of a declared
    package set in one batch, and set up the user's profile.
    """
    if no_color:
        console.no_color = True
        err_console.no_color = True

    # Subcommands read logging verbosity from here
    ctx.ensure_object(dict)
    ctx.obj.update(verbose=verbose, quiet=quiet)


if __name__ == "__main__":
    app()

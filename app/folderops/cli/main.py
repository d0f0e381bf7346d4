"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from typing import Annotated

import typer

from folderops import __version__
from folderops.cli.commands import clear, clone, config
from folderops.core.log import setup_logging

# Create main Typer app
app = typer.Typer(
    name="folderops",
    help="Clone and clear directory trees.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"folderops version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log every copied or deleted entry.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
) -> None:
    """folderops - Clone and clear directory trees.

    Copy one directory's contents into another, or delete a directory
    tree while reporting what could not be removed.
    """
    setup_logging(verbose=verbose, quiet=quiet)
    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet


# Register commands
app.command(name="clone")(clone.clone)
app.command(name="clear")(clear.clear)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()

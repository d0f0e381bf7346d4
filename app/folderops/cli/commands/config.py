"""Configuration commands.

Shows the effective CLI settings and writes a default config file.
"""

from typing import Annotated

import tomli_w
import typer

from folderops.core.config import (
    ConfigError,
    ConfigNotFoundError,
    FolderopsConfig,
    load_config,
    save_config,
)
from folderops.core.paths import get_config_path
from folderops.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or create the folderops configuration.",
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Print the effective configuration as TOML."""
    config_path = get_config_path()
    try:
        config = load_config(config_path)
        print_info(f"Loaded from {config_path}")
    except ConfigNotFoundError:
        config = FolderopsConfig()
        print_info(f"No config at {config_path}, showing defaults")
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    console.print(tomli_w.dumps(config.model_dump()), markup=False, highlight=False)


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file with default settings."""
    config_path = get_config_path()
    if config_path.exists() and not force:
        print_error(f"Config already exists: {config_path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        saved = save_config(FolderopsConfig(), config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Wrote default config to {saved}")

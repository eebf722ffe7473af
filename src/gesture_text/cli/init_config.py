from __future__ import annotations

import sys
from pathlib import Path

import typer

from ..config import Config
from .common import DEFAULT_USER_CONFIG_PATH, app


@app.command("init-config")
def init_config_cmd(
    path: Path | None = typer.Argument(  # noqa: B008
        None, help=f"Where to write the config file. Default: {DEFAULT_USER_CONFIG_PATH}"
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
) -> None:
    """Write the default configuration, to be tweaked by hand."""
    target = Config.validate_path(path)
    if target.exists() and not force:
        print(f"Error: {target} already exists, use --force to overwrite it", file=sys.stderr)
        raise typer.Exit(1)

    print(f"Default config written to {Config().save(target)}")

from __future__ import annotations

import logging
import sys
from pathlib import Path

import typer

from ..config import Config, ConfigurationError

app = typer.Typer(help="Turn hand gestures into text.")

DEFAULT_USER_CONFIG_PATH = Config.get_user_path()

logger = logging.getLogger("gesture_text")


def setup_logging(verbose: bool) -> None:
    """Send the library logs to stderr, at DEBUG level if `verbose`."""
    level = logging.DEBUG if verbose else logging.INFO
    logger.setLevel(level)

    # Configure handler if logger doesn't have one
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False  # Don't propagate to root logger
    for handler in logger.handlers:
        handler.setLevel(level)


def load_config(config_path: Path | None) -> Config:
    """Load the configuration, exiting with an error message if it is invalid."""
    try:
        return Config.load(config_path)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise typer.Exit(1) from exc

#!/usr/bin/env python3

"""Command line interface, mostly to try gestures with a camera or a recording."""


from .common import app
from .init_config import init_config_cmd  # noqa: F401
from .replay import replay_cmd  # noqa: F401
from .run import run_cmd  # noqa: F401


def main() -> None:
    """Entry point for the application."""
    app()


if __name__ == "__main__":
    main()

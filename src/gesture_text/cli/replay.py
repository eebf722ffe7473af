from __future__ import annotations

import json
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import typer

from ..models.landmarks import HandObservation
from ..session import Session
from .common import DEFAULT_USER_CONFIG_PATH, app, load_config


def read_recording(path: Path, fps: float) -> Iterator[tuple[float, list[HandObservation]]]:
    """Read a JSON lines recording, one frame per line.

    Each line is `{"timestamp": 1.5, "hands": [{"handedness": "Right", "landmarks": [[x, y, z], ...]}]}`, the
    timestamp (seconds) being optional: frames without one are spaced by `1 / fps` seconds.
    """
    with path.open(encoding="utf-8") as lines:
        for line_number, line in enumerate(lines):
            if not line.strip():
                continue
            try:
                frame: dict[str, Any] = json.loads(line)
                if not isinstance(frame, dict):
                    raise TypeError(f"expected an object, got {type(frame).__name__}")
                observations = [HandObservation.from_data(hand) for hand in frame.get("hands") or []]
                timestamp = float(frame.get("timestamp", line_number / fps))
            except (ValueError, KeyError, TypeError, AttributeError) as exc:
                raise ValueError(f"Invalid frame at line {line_number + 1} of {path}: {exc}") from exc
            yield timestamp, observations


@app.command("replay")
def replay_cmd(
    recording: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON lines landmarks recording"),  # noqa: B008
    fps: float = typer.Option(30.0, "--fps", min=0.1, help="Frame rate used for frames without timestamp"),
    show_frames: bool = typer.Option(False, "--show-frames", help="Print the classification of every frame"),
    config_path: Path | None = typer.Option(  # noqa: B008
        None, "--config", "-c", help=f"Path to config file. Default: {DEFAULT_USER_CONFIG_PATH}"
    ),
) -> None:
    """Compose text from a recording of hand landmarks."""
    session = Session(load_config(config_path))

    try:
        for timestamp, observations in read_recording(recording, fps):
            result = session.process(observations, timestamp)
            if show_frames:
                label = result.classification.label if result.classification is not None else "No hands detected"
                print(f"{timestamp:8.3f}s  {label}")
            if result.accepted is not None:
                print(f"{timestamp:8.3f}s  Accepted: {result.accepted.label}")
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise typer.Exit(1) from exc

    print(f"Text: {session.text}")

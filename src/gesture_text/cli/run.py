from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import typer

from ..config import Config
from ..session import FrameResult, Session
from .common import DEFAULT_USER_CONFIG_PATH, app, load_config, setup_logging

if TYPE_CHECKING:
    from ..recognizer import OpenCVImage, StreamInfo

WINDOW_NAME = "Gesture Text"


def print_frame_info(result: FrameResult, stream_info: StreamInfo) -> None:
    """Print the current gesture and text on a single console line."""
    metrics = f"Recognition FPS: {stream_info.recognition_fps:.1f} | Latency: {stream_info.latency * 1000:.1f}ms"
    gesture = result.feedback.display if result.feedback is not None else "No gesture detected"
    print(f"\r{metrics} | {gesture} | Text: {result.text}\033[K", end="")
    if result.accepted is not None:
        print(f"\nAccepted: {result.accepted.label}")


def draw_frame_info(frame: OpenCVImage, result: FrameResult) -> OpenCVImage:
    """Write the current gesture and text on the frame."""
    import cv2

    gesture = result.feedback.label if result.feedback is not None else "No gesture detected"
    if result.feedback is not None:
        gesture = f"{gesture} ({result.feedback.confidence * 100:.1f}%)"
    cv2.putText(frame, gesture, (10, 30), cv2.FONT_HERSHEY_SIMPLEX, 0.8, (0, 255, 0), 2)
    cv2.putText(frame, result.text, (10, frame.shape[0] - 20), cv2.FONT_HERSHEY_SIMPLEX, 1.0, (255, 255, 255), 2)
    return frame


def run_session(config: Config, show_preview: bool, export_dir: Path) -> None:
    """Compose text from the gestures seen by the configured camera."""
    # The camera stack is only needed for live capture
    import cv2

    from ..recognizer import Recognizer

    session = Session(config)

    cap = cv2.VideoCapture(config.cli.camera)
    if not cap.isOpened():
        print(f"Error: Could not open camera {config.cli.camera}", file=sys.stderr)
        raise typer.Exit(1)

    cap.set(cv2.CAP_PROP_FRAME_WIDTH, config.cli.size)
    cap.set(cv2.CAP_PROP_FPS, 30)

    if show_preview:
        cv2.namedWindow(WINDOW_NAME, cv2.WINDOW_NORMAL)
        print("Press 'q' or ESC to quit, 'c' to clear the text, 'e' to export it")

    try:
        with Recognizer(
            os.getenv("HAND_LANDMARKER_MODEL_PATH", "").strip() or "hand_landmarker.task",
            use_gpu=config.cli.use_gpu,
            mirroring=config.cli.mirror,
        ) as recognizer:
            for frame, stream_info, observations in recognizer.handle_opencv_capture(cap):
                result = session.process(observations)

                if not show_preview:
                    print_frame_info(result, stream_info)
                    continue

                if config.cli.mirror:
                    frame = cv2.flip(frame, 1)
                cv2.imshow(WINDOW_NAME, draw_frame_info(frame, result))

                key = cv2.waitKey(1) & 0xFF
                if key == ord("q") or key == 27:  # 'q' or ESC
                    break
                if key == ord("c"):
                    session.clear()
                elif key == ord("e"):
                    print(f"\nText exported to {session.export(export_dir)}")

                # Check if window was closed
                try:
                    if cv2.getWindowProperty(WINDOW_NAME, cv2.WND_PROP_VISIBLE) < 1:
                        break
                except cv2.error:
                    break
    finally:
        session.stop()
        cap.release()
        if show_preview:
            cv2.destroyAllWindows()

    print(f"\nText: {session.text}")


@app.callback(invoke_without_command=True)
def run_cmd(
    ctx: typer.Context,
    camera: int | None = typer.Option(None, "--camera", "--cam", help="OpenCV camera index"),
    preview: bool = typer.Option(True, "--preview/--no-preview", help="Show visual preview window"),
    mirror: bool | None = typer.Option(None, "--mirror/--no-mirror", help="Mirror the video output"),
    export_dir: Path = typer.Option(Path("."), "--export-dir", help="Directory of the exported texts"),  # noqa: B008
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs"),
    config_path: Path | None = typer.Option(  # noqa: B008
        None, "--config", "-c", help=f"Path to config file. Default: {DEFAULT_USER_CONFIG_PATH}"
    ),
) -> None:
    """Compose text from the gestures seen by a camera.

    The default config location is platform-specific and will be shown if the config file is not found.
    """
    setup_logging(verbose)

    # If a subcommand is being invoked, don't run the default behavior
    if ctx.invoked_subcommand is not None:
        return

    config = load_config(config_path)

    # CLI options take precedence over config values
    if camera is not None:
        config.cli.camera = camera
    if mirror is not None:
        config.cli.mirror = mirror

    run_session(config, show_preview=preview, export_dir=export_dir)

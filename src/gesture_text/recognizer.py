from __future__ import annotations

import logging
import os
import time
import urllib.request
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, ClassVar, NamedTuple, TypeAlias

import cv2

from .mediapipe import (
    BaseOptions,
    HandLandmarker,
    HandLandmarkerOptions,
    HandLandmarkerResult,
    RunningMode,
    mp,
)
from .models.landmarks import HandObservation, Handedness, Point3

logger = logging.getLogger(__name__)

OpenCVImage: TypeAlias = cv2.typing.MatLike  # Type alias for images (numpy arrays)


@dataclass
class RecognizerResult:
    observations: list[HandObservation]
    timestamp: float  # Timestamp of the result


def observations_from_result(result: HandLandmarkerResult, mirroring: bool = False) -> list[HandObservation]:
    """Convert a MediaPipe hand landmarker result to our hand observations."""
    observations = []
    for hand_index, hand_landmarks in enumerate(result.hand_landmarks or []):
        handedness = Handedness.UNKNOWN
        if result.handedness and hand_index < len(result.handedness) and result.handedness[hand_index]:
            handedness = Handedness.from_data(result.handedness[hand_index][0].category_name)
        observations.append(
            HandObservation(
                landmarks=tuple(Point3.from_mediapipe(landmark, mirroring) for landmark in hand_landmarks),
                handedness=handedness,
            )
        )
    return observations


class Recognizer:
    """Run the MediaPipe hand landmarker on a stream of frames."""

    model_url: ClassVar[str] = (
        "https://storage.googleapis.com/mediapipe-models/hand_landmarker/hand_landmarker/float16/1/hand_landmarker.task"
    )

    def __init__(self, model_path: str, use_gpu: bool = False, mirroring: bool = False) -> None:
        self.last_result: RecognizerResult | None = None

        self.check_model(model_path)

        self.mirroring = mirroring

        self.landmarker: HandLandmarker | None = HandLandmarker.create_from_options(
            HandLandmarkerOptions(
                base_options=BaseOptions(
                    model_asset_path=model_path,
                    delegate=BaseOptions.Delegate.GPU if use_gpu else BaseOptions.Delegate.CPU,
                ),
                running_mode=RunningMode.LIVE_STREAM,
                num_hands=2,
                min_hand_detection_confidence=0.5,
                min_hand_presence_confidence=0.5,
                min_tracking_confidence=0.5,
                result_callback=self.save_result,
            )
        )

    def check_model(self, model_path: str) -> None:
        if os.path.exists(model_path):
            return
        logger.info("Model file %r not found, downloading it", model_path)
        try:
            urllib.request.urlretrieve(self.model_url, model_path)
        except OSError as exc:
            raise RuntimeError(f"Could not download model from {self.model_url}: {exc}") from exc
        logger.info("Model downloaded to %r", model_path)

    @staticmethod
    def convert_image_from_opencv(frame: OpenCVImage) -> mp.Image:
        # Convert frame to RGB (opencv BGR not supported by MediaPipe)
        rgb_frame = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
        return mp.Image(image_format=mp.ImageFormat.SRGB, data=rgb_frame)

    def recognize_image(self, image: mp.Image, timestamp: float) -> mp.Image:
        if self.landmarker is None:
            raise RuntimeError("Recognizer is closed")
        self.landmarker.detect_async(image, int(timestamp * 1000))  # Convert seconds to milliseconds
        return image

    def save_result(self, result: HandLandmarkerResult, input_image: mp.Image, timestamp_ms: int) -> None:
        """Save the latest hand landmarks result."""
        self.last_result = RecognizerResult(
            observations=observations_from_result(result, self.mirroring),
            timestamp=timestamp_ms / 1000,  # Convert milliseconds to seconds
        )

    def close(self) -> None:
        """Close the landmarker and release resources."""
        if self.landmarker:
            self.landmarker.close()
            self.landmarker = None

    def __enter__(self) -> Recognizer:
        return self

    def __exit__(self, exc_type: type[BaseException] | None, exc_val: BaseException | None, exc_tb: object) -> None:
        self.close()

    def handle_frames_from_opencv(
        self, frames: Iterator[OpenCVImage]
    ) -> Iterator[tuple[OpenCVImage, StreamInfo, list[HandObservation]]]:
        """Yield each frame having a new landmarks result, with the hands found in it.

        Only one result is yielded per detection, so the consumer never processes the same hands twice.
        """
        start_time = time.perf_counter()
        last_recognized_timestamp: float = -1
        frames_count = 0
        recognized_frames_count = 0

        for frame in frames:
            frames_count += 1
            current_time = time.perf_counter()
            elapsed_time = current_time - start_time

            self.recognize_image(self.convert_image_from_opencv(frame), elapsed_time)

            if self.last_result is None:
                continue
            if self.last_result.timestamp == last_recognized_timestamp:
                continue

            recognized_frames_count += 1
            last_recognized_timestamp = self.last_result.timestamp

            stream_info = StreamInfo(
                frames_count=frames_count,
                recognized_frames_count=recognized_frames_count,
                frames_fps=frames_count / elapsed_time if elapsed_time > 0 else 0,
                recognition_fps=recognized_frames_count / elapsed_time if elapsed_time > 0 else 0,
                latency=elapsed_time - self.last_result.timestamp,
            )

            yield frame, stream_info, self.last_result.observations

    def handle_opencv_capture(
        self, cap: cv2.VideoCapture
    ) -> Iterator[tuple[OpenCVImage, StreamInfo, list[HandObservation]]]:
        """Read frames from an OpenCV VideoCapture object."""

        def frames_provider() -> Iterator[OpenCVImage]:
            while True:
                ret, frame = cap.read()
                if not ret:
                    break
                yield frame

        return self.handle_frames_from_opencv(frames_provider())


class StreamInfo(NamedTuple):
    frames_count: int  # Total number of frames from iterator
    recognized_frames_count: int  # Number of frames that were recognized
    frames_fps: float  # FPS of the frame iterator
    recognition_fps: float  # FPS of recognition
    latency: float  # Time since last result (current time - last result timestamp)

    def to_dict(self) -> dict[str, Any]:
        return self._asdict()

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, Any, ClassVar, NamedTuple, TypeAlias

if TYPE_CHECKING:
    from ..mediapipe import NormalizedLandmark

NB_LANDMARKS = 21


class HandLandmark(IntEnum):
    """MediaPipe hand landmark indices."""

    WRIST = 0
    THUMB_CMC = 1
    THUMB_MCP = 2
    THUMB_IP = 3
    THUMB_TIP = 4
    INDEX_FINGER_MCP = 5
    INDEX_FINGER_PIP = 6
    INDEX_FINGER_DIP = 7
    INDEX_FINGER_TIP = 8
    MIDDLE_FINGER_MCP = 9
    MIDDLE_FINGER_PIP = 10
    MIDDLE_FINGER_DIP = 11
    MIDDLE_FINGER_TIP = 12
    RING_FINGER_MCP = 13
    RING_FINGER_PIP = 14
    RING_FINGER_DIP = 15
    RING_FINGER_TIP = 16
    PINKY_MCP = 17
    PINKY_PIP = 18
    PINKY_DIP = 19
    PINKY_TIP = 20


LandmarkGroup: TypeAlias = list[HandLandmark]


class LandmarkGroups:
    """Landmarks of each finger, from the base joint to the tip."""

    THUMB: ClassVar[LandmarkGroup] = [
        HandLandmark.THUMB_CMC,
        HandLandmark.THUMB_MCP,
        HandLandmark.THUMB_IP,
        HandLandmark.THUMB_TIP,
    ]
    INDEX: ClassVar[LandmarkGroup] = [
        HandLandmark.INDEX_FINGER_MCP,
        HandLandmark.INDEX_FINGER_PIP,
        HandLandmark.INDEX_FINGER_DIP,
        HandLandmark.INDEX_FINGER_TIP,
    ]
    MIDDLE: ClassVar[LandmarkGroup] = [
        HandLandmark.MIDDLE_FINGER_MCP,
        HandLandmark.MIDDLE_FINGER_PIP,
        HandLandmark.MIDDLE_FINGER_DIP,
        HandLandmark.MIDDLE_FINGER_TIP,
    ]
    RING: ClassVar[LandmarkGroup] = [
        HandLandmark.RING_FINGER_MCP,
        HandLandmark.RING_FINGER_PIP,
        HandLandmark.RING_FINGER_DIP,
        HandLandmark.RING_FINGER_TIP,
    ]
    PINKY: ClassVar[LandmarkGroup] = [
        HandLandmark.PINKY_MCP,
        HandLandmark.PINKY_PIP,
        HandLandmark.PINKY_DIP,
        HandLandmark.PINKY_TIP,
    ]


# Ordered thumb, index, middle, ring, pinky
FINGERS_LANDMARKS = [
    LandmarkGroups.THUMB,
    LandmarkGroups.INDEX,
    LandmarkGroups.MIDDLE,
    LandmarkGroups.RING,
    LandmarkGroups.PINKY,
]
PALM_CENTER_LANDMARKS = [
    HandLandmark.WRIST,
    HandLandmark.INDEX_FINGER_MCP,
    HandLandmark.MIDDLE_FINGER_MCP,
    HandLandmark.RING_FINGER_MCP,
    HandLandmark.PINKY_MCP,
]


class Point3(NamedTuple):
    """A landmark position, normalized ([0, 1]) or in pixels, y growing downward.

    `z` is the depth relative to the wrist (smaller is closer to the camera), 0 when unknown.
    """

    x: float
    y: float
    z: float = 0.0

    @classmethod
    def from_data(cls, data: Point3 | Sequence[float] | Mapping[str, float]) -> Point3:
        """Build a point from a `(x, y[, z])` sequence or a `{"x", "y"[, "z"]}` mapping."""
        if isinstance(data, Point3):
            return data
        if isinstance(data, Mapping):
            return cls(float(data["x"]), float(data["y"]), float(data.get("z", 0.0)))
        if len(data) not in (2, 3):
            raise ValueError(f"Expected 2 or 3 coordinates, got {len(data)}")
        return cls(*(float(value) for value in data))

    @classmethod
    def from_mediapipe(cls, landmark: NormalizedLandmark, mirroring: bool = False) -> Point3:
        """Create a point from a MediaPipe normalized landmark, mirroring the x axis if asked."""
        return cls(
            x=(landmark.x if not mirroring else 1 - landmark.x),
            y=landmark.y,
            z=landmark.z or 0.0,
        )

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y, "z": self.z}


LandmarkFrame: TypeAlias = Sequence[Point3]


class Handedness(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    UNKNOWN = "unknown"

    @classmethod
    def from_data(cls, handedness_str: str | None) -> Handedness:
        """Convert a handedness string ("Left", "right", ...) to the enum, `UNKNOWN` if not recognized."""
        if not handedness_str:
            return cls.UNKNOWN
        try:
            return cls(handedness_str.lower())
        except ValueError:
            return cls.UNKNOWN

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class HandObservation:
    """The landmarks of one hand for one frame, as given by the pose estimator."""

    landmarks: tuple[Point3, ...]
    handedness: Handedness = Handedness.UNKNOWN

    @property
    def is_complete(self) -> bool:
        """Only complete frames can be classified, others mean "no hand"."""
        return len(self.landmarks) == NB_LANDMARKS

    def __getitem__(self, landmark: HandLandmark | int) -> Point3:
        return self.landmarks[landmark]

    @classmethod
    def from_data(cls, data: Mapping[str, Any] | Sequence[Any]) -> HandObservation:
        """Build an observation from `{"landmarks": [...], "handedness": "Left"}` or a bare list of points."""
        if isinstance(data, Mapping):
            points = data.get("landmarks") or []
            handedness = Handedness.from_data(data.get("handedness"))
        else:
            points, handedness = data, Handedness.UNKNOWN
        return cls(landmarks=tuple(Point3.from_data(point) for point in points), handedness=handedness)

    def to_dict(self) -> dict[str, Any]:
        return {
            "handedness": self.handedness.value,
            "landmarks": [list(point) for point in self.landmarks],
        }

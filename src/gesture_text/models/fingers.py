from __future__ import annotations

from enum import IntEnum
from typing import NamedTuple, TypeAlias

from ..config import FingerStateConfig, FingerStateMethod
from .geometry import angle, distance
from .landmarks import FINGERS_LANDMARKS, HandLandmark, HandObservation

# One entry per finger, None meaning "extended or not"
FingerPattern: TypeAlias = tuple[bool | None, bool | None, bool | None, bool | None, bool | None]


class FingerIndex(IntEnum):
    """Finger index constants for easier reference."""

    THUMB = 0
    INDEX = 1
    MIDDLE = 2
    RING = 3
    PINKY = 4


class FingerStates(NamedTuple):
    """Extended (True) or flexed (False) state of each finger for one frame."""

    thumb: bool
    index: bool
    middle: bool
    ring: bool
    pinky: bool

    @property
    def extended_count(self) -> int:
        return sum(self)

    @property
    def all_extended(self) -> bool:
        return all(self)

    @property
    def none_extended(self) -> bool:
        return not any(self)

    def matches(self, pattern: FingerPattern) -> bool:
        return all(expected is None or state == expected for state, expected in zip(self, pattern, strict=True))


class FingerStateExtractor:
    """Compute the extended/flexed state of the five fingers of a hand."""

    def __init__(self, config: FingerStateConfig | None = None) -> None:
        self.config = config if config is not None else FingerStateConfig()

    def extract(self, observation: HandObservation) -> FingerStates:
        if not observation.is_complete:
            raise ValueError(f"Expected 21 landmarks, got {len(observation.landmarks)}")

        if self.config.method == FingerStateMethod.POSITION:
            return FingerStates(
                self._thumb_extended_by_position(observation),
                *(self._finger_extended_by_position(observation, finger) for finger in list(FingerIndex)[1:]),
            )
        return FingerStates(
            self._thumb_extended_by_angle(observation),
            *(self._finger_extended_by_angle(observation, finger) for finger in list(FingerIndex)[1:]),
        )

    def _thumb_extended_by_angle(self, observation: HandObservation) -> bool:
        _, mcp, ip, tip = (observation[landmark] for landmark in FINGERS_LANDMARKS[FingerIndex.THUMB])
        wrist = observation[HandLandmark.WRIST]
        threshold = self.config.thumb_extended_min_angle_degrees
        return angle(wrist, mcp, ip) > threshold and angle(mcp, ip, tip) > threshold

    def _finger_extended_by_angle(self, observation: HandObservation, finger: FingerIndex) -> bool:
        mcp, pip, dip, tip = (observation[landmark] for landmark in FINGERS_LANDMARKS[finger])
        threshold = self.config.extended_min_angle_degrees
        return angle(mcp, pip, dip) > threshold and angle(pip, dip, tip) > threshold

    def _thumb_extended_by_position(self, observation: HandObservation) -> bool:
        cmc, mcp, _, tip = (observation[landmark] for landmark in FINGERS_LANDMARKS[FingerIndex.THUMB])
        return distance(tip, cmc) > distance(mcp, cmc) * self.config.thumb_extension_ratio

    def _finger_extended_by_position(self, observation: HandObservation, finger: FingerIndex) -> bool:
        mcp, pip, _, tip = (observation[landmark] for landmark in FINGERS_LANDMARKS[finger])
        return (
            tip.y < pip.y - self.config.tip_above_joint_margin
            and pip.y < mcp.y + self.config.joint_below_knuckle_tolerance
        )

from __future__ import annotations

from functools import cached_property

from .fingers import FingerIndex, FingerStateExtractor, FingerStates
from .geometry import distance
from .landmarks import FINGERS_LANDMARKS, PALM_CENTER_LANDMARKS, HandLandmark, HandObservation, Handedness, Point3


class Hand:
    """One complete hand in one frame, with the measurements used by the gesture rules.

    Vertical comparisons follow the image convention: a smaller `y` is higher on screen.
    """

    def __init__(self, observation: HandObservation, extractor: FingerStateExtractor) -> None:
        self.observation = observation
        self.extractor = extractor

    def __getitem__(self, landmark: HandLandmark) -> Point3:
        return self.observation[landmark]

    @property
    def handedness(self) -> Handedness:
        return self.observation.handedness

    @property
    def wrist(self) -> Point3:
        return self.observation[HandLandmark.WRIST]

    @cached_property
    def fingers(self) -> FingerStates:
        return self.extractor.extract(self.observation)

    @cached_property
    def palm_center(self) -> Point3:
        """Mean position of the wrist and the four finger knuckles."""
        points = [self.observation[landmark] for landmark in PALM_CENTER_LANDMARKS]
        return Point3(
            x=sum(point.x for point in points) / len(points),
            y=sum(point.y for point in points) / len(points),
            z=sum(point.z for point in points) / len(points),
        )

    def base(self, finger: FingerIndex) -> Point3:
        """MCP joint for fingers, CMC for the thumb."""
        return self.observation[FINGERS_LANDMARKS[finger][0]]

    def middle_joint(self, finger: FingerIndex) -> Point3:
        """PIP joint for fingers, MCP for the thumb."""
        return self.observation[FINGERS_LANDMARKS[finger][1]]

    def tip(self, finger: FingerIndex) -> Point3:
        return self.observation[FINGERS_LANDMARKS[finger][-1]]

    def tips_distance(self, finger1: FingerIndex, finger2: FingerIndex) -> float:
        return distance(self.tip(finger1), self.tip(finger2))

    @staticmethod
    def is_above(point: Point3, reference: Point3, margin: float = 0.0) -> bool:
        return point.y < reference.y - margin

    @staticmethod
    def is_below(point: Point3, reference: Point3, margin: float = 0.0) -> bool:
        return point.y > reference.y + margin

    def finger_is_straight_up(self, finger: FingerIndex, margin: float) -> bool:
        """The tip is higher than the middle joint by at least `margin`."""
        return self.is_above(self.tip(finger), self.middle_joint(finger), margin)

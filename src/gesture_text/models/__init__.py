from .fingers import FingerIndex, FingerPattern, FingerStateExtractor, FingerStates
from .geometry import angle, distance
from .hand import Hand
from .hand_gestures import HandGestureRule
from .hands import Hands
from .hands_gestures import TwoHandsGestureRule
from .landmarks import HandLandmark, HandObservation, Handedness, LandmarkFrame, Point3

__all__ = [
    "angle",
    "distance",
    "FingerIndex",
    "FingerPattern",
    "FingerStateExtractor",
    "FingerStates",
    "Hand",
    "HandGestureRule",
    "Hands",
    "TwoHandsGestureRule",
    "HandLandmark",
    "HandObservation",
    "Handedness",
    "LandmarkFrame",
    "Point3",
]

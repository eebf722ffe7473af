"""Hand gesture recognition and stabilization turning hand landmarks into text."""

from .classifier import Classification, GestureClassifier
from .composer import TextComposer, label_for_index
from .config import Config, ConfigurationError
from .gestures import Gestures
from .models import FingerIndex, FingerStateExtractor, FingerStates, HandObservation, Handedness, Point3
from .session import FrameResult, Session
from .smoothing import AcceptedSymbol, MajorityVoteSmoother, Stabilizer

__all__ = [
    # Core classes
    "Session",
    "FrameResult",
    "GestureClassifier",
    "Classification",
    "Stabilizer",
    "AcceptedSymbol",
    "MajorityVoteSmoother",
    "TextComposer",
    "label_for_index",
    # Models
    "HandObservation",
    "Handedness",
    "Point3",
    "FingerIndex",
    "FingerStates",
    "FingerStateExtractor",
    # Gesture models
    "Gestures",
    # Configuration
    "Config",
    "ConfigurationError",
]

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import NamedTuple

from .config import Config
from .gestures import Gestures
from .models.fingers import FingerStateExtractor
from .models.hand import Hand
from .models.hand_gestures import HandGestureRule
from .models.hands import Hands
from .models.hands_gestures import TwoHandsGestureRule
from .models.landmarks import HandObservation

logger = logging.getLogger(__name__)


class Classification(NamedTuple):
    """Gesture label and confidence of one frame."""

    label: str
    confidence: float

    @property
    def display(self) -> str:
        """Label decorated for live feedback."""
        try:
            return Gestures(self.label).display
        except ValueError:
            return self.label


class GestureClassifier:
    """Stateless classification of the hands of one frame into a gesture.

    The same observations always give the same classification.
    """

    def __init__(self, config: Config | None = None) -> None:
        self.config = config if config is not None else Config()
        self.extractor = FingerStateExtractor(self.config.fingers)
        gestures_config = self.config.gestures
        self.hand_rules: list[HandGestureRule] = [
            rule_class(gestures_config)  # type: ignore[misc]
            for rule_class in HandGestureRule.ordered_rules()
            if not gestures_config.is_gesture_disabled(rule_class.gesture)
        ]
        self.hands_rules: list[TwoHandsGestureRule] = [
            rule_class(gestures_config)  # type: ignore[misc]
            for rule_class in TwoHandsGestureRule.ordered_rules()
        ]

    def classify(self, observations: Sequence[HandObservation]) -> Classification | None:
        """Classify the hands of one frame, None if there is no usable hand."""
        if not observations:
            return None

        if len(observations) > 2:
            logger.debug("%d hands given, only the first two are used", len(observations))
            observations = observations[:2]

        if not all(observation.is_complete for observation in observations):
            return None

        hands = [Hand(observation, self.extractor) for observation in observations]
        if len(hands) == 2:
            return self.classify_hands(Hands(*hands))
        return self.classify_hand(hands[0])

    def classify_hand(self, hand: Hand) -> Classification:
        for rule in self.hand_rules:
            if rule.matches(hand):
                return Classification(rule.gesture.value, rule.confidence)
        # The last fallback always matches, this is only reached with an empty rule table
        return Classification(Gestures.UNKNOWN.value, 0.5)

    def classify_hands(self, hands: Hands) -> Classification:
        for rule in self.hands_rules:
            if rule.matches(hands):
                return Classification(rule.gesture.value, rule.confidence)
        return Classification(Gestures.TWO_HANDS.value, 0.6)

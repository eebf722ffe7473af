from __future__ import annotations

from ..config import GesturesConfig
from ..gestures import TWO_HANDS_GESTURES, Gestures
from .base_gestures import BaseGestureRule
from .fingers import FingerIndex
from .hands import Hands


class TwoHandsGestureRule(BaseGestureRule[Hands]):
    gestures_set = TWO_HANDS_GESTURES

    def __init__(self, config: GesturesConfig) -> None:
        super().__init__(config)
        self.thresholds = config.two_hands


class PrayingHandsRule(TwoHandsGestureRule):
    gesture = Gestures.PRAYING_HANDS
    confidence = 0.9

    def matches(self, hands: Hands) -> bool:
        thresholds = self.thresholds
        return (
            hands.wrists_distance < thresholds.praying_max_wrist_distance
            and hands.tips_distance(FingerIndex.MIDDLE) < thresholds.praying_max_tip_distance
            and hands.wrists_height_diff < thresholds.praying_max_wrist_height_diff
            and all(hand.fingers.extended_count >= thresholds.praying_min_extended_fingers for hand in hands)
        )


class TwoHandsRule(TwoHandsGestureRule):
    gesture = Gestures.TWO_HANDS
    confidence = 0.6

    def matches(self, hands: Hands) -> bool:
        return True

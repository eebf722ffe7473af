from __future__ import annotations

from typing import ClassVar

from ..config import GesturesConfig
from ..gestures import SINGLE_HAND_GESTURES, Gestures
from .base_gestures import BaseGestureRule
from .fingers import FingerIndex, FingerPattern
from .geometry import angle, distance
from .hand import Hand
from .landmarks import HandLandmark

ALL_FLEXED: FingerPattern = (False, False, False, False, False)
ALL_EXTENDED: FingerPattern = (True, True, True, True, True)


class HandGestureRule(BaseGestureRule[Hand]):
    """Single hand rule: a finger states pattern plus optional geometric checks.

    Rules are evaluated in the order they are defined in this module, so the canonical gestures come first,
    then the secondary ones, then the fallbacks.
    """

    gestures_set = SINGLE_HAND_GESTURES

    # Expected finger states (thumb, index, middle, ring, pinky), None to skip the pattern
    fingers: ClassVar[FingerPattern | None] = None

    def __init__(self, config: GesturesConfig) -> None:
        super().__init__(config)
        self.thresholds = config.single

    def matches(self, hand: Hand) -> bool:
        if self.fingers is not None and not hand.fingers.matches(self.fingers):
            return False
        return self.check(hand)

    def check(self, hand: Hand) -> bool:
        """Geometric checks, once the finger states matched."""
        return True


class ThumbsUpRule(HandGestureRule):
    gesture = Gestures.THUMBS_UP
    confidence = 0.9
    fingers = (True, False, False, False, False)

    def check(self, hand: Hand) -> bool:
        return (
            angle(hand[HandLandmark.THUMB_MCP], hand[HandLandmark.THUMB_IP], hand[HandLandmark.THUMB_TIP])
            > self.thresholds.thumb_straight_min_angle_degrees
            and hand.is_above(hand.tip(FingerIndex.THUMB), hand.wrist, self.thresholds.thumb_vertical_margin)
        )


class ThumbsDownRule(HandGestureRule):
    gesture = Gestures.THUMBS_DOWN
    confidence = 0.85
    fingers = (True, False, False, False, False)

    def check(self, hand: Hand) -> bool:
        return hand.is_below(hand.tip(FingerIndex.THUMB), hand.wrist, self.thresholds.thumb_vertical_margin)


class FistRule(HandGestureRule):
    gesture = Gestures.FIST
    confidence = 0.95
    fingers = ALL_FLEXED

    def check(self, hand: Hand) -> bool:
        return all(
            distance(hand.tip(finger), hand.palm_center) < self.thresholds.fist_max_tip_palm_distance
            for finger in FingerIndex
        )


class OkRule(HandGestureRule):
    gesture = Gestures.OK
    confidence = 0.85
    fingers = (None, None, True, True, True)

    def check(self, hand: Hand) -> bool:
        return hand.tips_distance(FingerIndex.THUMB, FingerIndex.INDEX) < self.thresholds.ok_max_thumb_index_distance


class OpenPalmRule(HandGestureRule):
    gesture = Gestures.OPEN_PALM
    confidence = 0.9
    fingers = ALL_EXTENDED

    def check(self, hand: Hand) -> bool:
        # Fingers pinched together do not make an open palm
        spacings = [
            hand.tips_distance(FingerIndex.INDEX, FingerIndex.MIDDLE),
            hand.tips_distance(FingerIndex.MIDDLE, FingerIndex.RING),
            hand.tips_distance(FingerIndex.RING, FingerIndex.PINKY),
        ]
        return sum(spacings) / len(spacings) > self.thresholds.open_palm_min_tip_spacing


class PeaceRule(HandGestureRule):
    gesture = Gestures.PEACE
    confidence = 0.9
    fingers = (None, True, True, False, False)

    def check(self, hand: Hand) -> bool:
        margin = self.thresholds.finger_straight_margin
        return (
            hand.finger_is_straight_up(FingerIndex.INDEX, margin)
            and hand.finger_is_straight_up(FingerIndex.MIDDLE, margin)
            and hand.is_above(hand.tip(FingerIndex.INDEX), hand.wrist)
            and hand.is_above(hand.tip(FingerIndex.MIDDLE), hand.wrist)
            and hand.tips_distance(FingerIndex.INDEX, FingerIndex.MIDDLE) > self.thresholds.peace_min_tip_spacing
        )


class PointingUpRule(HandGestureRule):
    gesture = Gestures.POINTING_UP
    confidence = 0.9
    fingers = (None, True, False, False, False)

    def check(self, hand: Hand) -> bool:
        index_tip = hand.tip(FingerIndex.INDEX)
        return (
            hand.finger_is_straight_up(FingerIndex.INDEX, self.thresholds.finger_straight_margin)
            and hand.is_above(index_tip, hand.base(FingerIndex.INDEX), self.thresholds.pointing_knuckle_margin)
            and hand.is_above(index_tip, hand.wrist, self.thresholds.pointing_wrist_margin)
        )


# Secondary gestures, never ahead of the canonical ones


class LoveYouRule(HandGestureRule):
    gesture = Gestures.LOVE_YOU
    confidence = 0.85
    fingers = (True, True, False, False, True)

    def check(self, hand: Hand) -> bool:
        return hand.is_above(hand.tip(FingerIndex.INDEX), hand.wrist) and hand.is_above(
            hand.tip(FingerIndex.PINKY), hand.wrist
        )


class HornsRule(HandGestureRule):
    gesture = Gestures.HORNS
    confidence = 0.85
    fingers = (False, True, False, False, True)

    def check(self, hand: Hand) -> bool:
        return hand.tips_distance(FingerIndex.INDEX, FingerIndex.PINKY) > self.thresholds.horns_min_tip_spacing


class CallMeRule(HandGestureRule):
    gesture = Gestures.CALL_ME
    confidence = 0.85
    fingers = (True, False, False, False, True)

    def check(self, hand: Hand) -> bool:
        return hand.tips_distance(FingerIndex.THUMB, FingerIndex.PINKY) > self.thresholds.call_me_min_spread


class Number4Rule(HandGestureRule):
    gesture = Gestures.NUMBER_4
    confidence = 0.85
    fingers = (False, True, True, True, True)

    def check(self, hand: Hand) -> bool:
        return all(
            hand.is_above(hand.tip(finger), hand.wrist)
            for finger in (FingerIndex.INDEX, FingerIndex.MIDDLE, FingerIndex.RING, FingerIndex.PINKY)
        )


class PointingDownRule(HandGestureRule):
    gesture = Gestures.POINTING_DOWN
    confidence = 0.85
    fingers = (None, True, False, False, False)

    def check(self, hand: Hand) -> bool:
        index_tip = hand.tip(FingerIndex.INDEX)
        return hand.is_below(
            index_tip, hand.base(FingerIndex.INDEX), self.thresholds.pointing_knuckle_margin
        ) and hand.is_below(index_tip, hand.wrist)


class PointingAtViewerRule(HandGestureRule):
    gesture = Gestures.POINTING_AT_VIEWER
    confidence = 0.8
    fingers = (None, None, False, False, False)

    def check(self, hand: Hand) -> bool:
        # Smaller z is closer to the camera
        depth = hand.base(FingerIndex.INDEX).z - hand.tip(FingerIndex.INDEX).z
        return depth > self.thresholds.pointing_viewer_min_depth


class PinchedHandsRule(HandGestureRule):
    gesture = Gestures.PINCHED_HANDS
    confidence = 0.8

    def check(self, hand: Hand) -> bool:
        max_distance = self.thresholds.pinch_max_distance
        return (
            hand.tips_distance(FingerIndex.THUMB, FingerIndex.INDEX) < max_distance
            and hand.tips_distance(FingerIndex.THUMB, FingerIndex.MIDDLE) < max_distance
        )


# Fallbacks


class ClosedHandRule(HandGestureRule):
    gesture = Gestures.CLOSED_HAND
    confidence = 0.7
    fingers = ALL_FLEXED


class OpenHandRule(HandGestureRule):
    gesture = Gestures.OPEN_HAND
    confidence = 0.7
    fingers = ALL_EXTENDED


class UnknownRule(HandGestureRule):
    gesture = Gestures.UNKNOWN
    confidence = 0.5

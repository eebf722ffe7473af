from __future__ import annotations

from enum import Enum


class Gestures(str, Enum):
    # Canonical single hand gestures, in priority order
    THUMBS_UP = "Thumbs Up"
    THUMBS_DOWN = "Thumbs Down"
    FIST = "Fist"
    OK = "OK Sign"
    OPEN_PALM = "Open Palm"
    PEACE = "Peace Sign"
    POINTING_UP = "Pointing Up"
    # Secondary single hand gestures
    LOVE_YOU = "Love You"  # Thumb, index and pinky extended
    HORNS = "Horns"  # Index and pinky extended, thumb folded
    CALL_ME = "Call Me"  # Thumb and pinky spread apart
    NUMBER_4 = "Number 4"  # Four fingers up, thumb folded
    POINTING_DOWN = "Pointing Down"
    POINTING_AT_VIEWER = "Pointing At Viewer"  # Index tip toward the camera
    PINCHED_HANDS = "Pinched Hands"  # Fingertips gathered on the thumb tip
    # Fallbacks when no rule matches
    CLOSED_HAND = "Closed Hand"
    OPEN_HAND = "Open Hand"
    UNKNOWN = "Unknown"

    # Hands gestures (gestures implying both hands)
    PRAYING_HANDS = "Praying Hands"
    TWO_HANDS = "Two Hands Detected"

    def __str__(self) -> str:
        return self.value

    @property
    def display(self) -> str:
        """Label decorated for live feedback, never for composed text."""
        if decoration := GESTURE_DECORATIONS.get(self):
            return f"{decoration} {self.value}"
        return self.value


CANONICAL_GESTURES: set[Gestures] = {
    Gestures.THUMBS_UP,
    Gestures.THUMBS_DOWN,
    Gestures.FIST,
    Gestures.OK,
    Gestures.OPEN_PALM,
    Gestures.PEACE,
    Gestures.POINTING_UP,
}
FALLBACK_GESTURES: set[Gestures] = {
    Gestures.CLOSED_HAND,
    Gestures.OPEN_HAND,
    Gestures.UNKNOWN,
}
TWO_HANDS_GESTURES: set[Gestures] = {
    Gestures.PRAYING_HANDS,
    Gestures.TWO_HANDS,
}
SECONDARY_GESTURES: set[Gestures] = {
    gesture
    for gesture in Gestures
    if gesture not in CANONICAL_GESTURES and gesture not in FALLBACK_GESTURES and gesture not in TWO_HANDS_GESTURES
}
SINGLE_HAND_GESTURES: set[Gestures] = CANONICAL_GESTURES | SECONDARY_GESTURES | FALLBACK_GESTURES

GESTURE_DECORATIONS: dict[Gestures, str] = {
    Gestures.THUMBS_UP: "👍",
    Gestures.THUMBS_DOWN: "👎",
    Gestures.FIST: "✊",
    Gestures.OK: "👌",
    Gestures.OPEN_PALM: "✋",
    Gestures.PEACE: "✌️",
    Gestures.POINTING_UP: "☝️",
    Gestures.LOVE_YOU: "🤟",
    Gestures.HORNS: "🤘",
    Gestures.CALL_ME: "🤙",
    Gestures.NUMBER_4: "4️⃣",
    Gestures.POINTING_DOWN: "👇",
    Gestures.POINTING_AT_VIEWER: "🫵",
    Gestures.PINCHED_HANDS: "🤌",
    Gestures.PRAYING_HANDS: "🙏",
    Gestures.TWO_HANDS: "🙌",
}

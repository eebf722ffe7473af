"""Synthetic hands in normalized image coordinates (y grows downward, smaller z is closer)."""

from __future__ import annotations

from gesture_text.models.fingers import FingerIndex
from gesture_text.models.landmarks import FINGERS_LANDMARKS, HandLandmark, HandObservation, Handedness, Point3

WRIST = (0.5, 0.8, 0.0)

FINGER_BASES = {
    FingerIndex.INDEX: (0.44, 0.6, 0.0),
    FingerIndex.MIDDLE: (0.5, 0.58, 0.0),
    FingerIndex.RING: (0.56, 0.6, 0.0),
    FingerIndex.PINKY: (0.62, 0.63, 0.0),
}

# PIP, DIP and tip offsets from the finger MCP
FINGER_POSES = {
    "up": [(0.0, -0.06, 0.0), (0.0, -0.11, 0.0), (0.0, -0.15, 0.0)],
    "curled": [(0.0, -0.04, 0.0), (0.03, -0.04, 0.0), (0.03, -0.01, 0.0)],
    "down": [(0.0, 0.1, 0.0), (0.0, 0.18, 0.0), (0.0, 0.25, 0.0)],
    "toward_viewer": [(0.0, -0.005, -0.04), (0.0, -0.01, -0.08), (0.0, -0.015, -0.12)],
}

# CMC, MCP, IP and tip positions
THUMB_POSES = {
    "up": [(0.47, 0.74, 0.0), (0.44, 0.68, 0.0), (0.41, 0.62, 0.0), (0.38, 0.56, 0.0)],
    "down": [(0.49, 0.83, 0.0), (0.47, 0.86, 0.0), (0.455, 0.89, 0.0), (0.44, 0.92, 0.0)],
    "side": [(0.455, 0.77, 0.0), (0.41, 0.74, 0.0), (0.35, 0.70, 0.0), (0.29, 0.66, 0.0)],
    "curled": [(0.47, 0.75, 0.0), (0.44, 0.70, 0.0), (0.48, 0.68, 0.0), (0.51, 0.70, 0.0)],
}


def make_hand(
    thumb: str = "curled",
    index: str = "curled",
    middle: str = "curled",
    ring: str = "curled",
    pinky: str = "curled",
    overrides: dict[HandLandmark, tuple[float, float, float]] | None = None,
    offset: tuple[float, float] = (0.0, 0.0),
    handedness: Handedness = Handedness.RIGHT,
) -> HandObservation:
    """Build a 21 landmarks hand from a pose name per finger."""
    points: list[tuple[float, float, float]] = [WRIST] * 21

    for landmark, position in zip(FINGERS_LANDMARKS[FingerIndex.THUMB], THUMB_POSES[thumb], strict=True):
        points[landmark] = position

    poses = {FingerIndex.INDEX: index, FingerIndex.MIDDLE: middle, FingerIndex.RING: ring, FingerIndex.PINKY: pinky}
    for finger, pose in poses.items():
        base = FINGER_BASES[finger]
        mcp, *others = FINGERS_LANDMARKS[finger]
        points[mcp] = base
        for landmark, (dx, dy, dz) in zip(others, FINGER_POSES[pose], strict=True):
            points[landmark] = (base[0] + dx, base[1] + dy, base[2] + dz)

    for landmark, position in (overrides or {}).items():
        points[landmark] = position

    return HandObservation(
        landmarks=tuple(Point3(x + offset[0], y + offset[1], z) for x, y, z in points),
        handedness=handedness,
    )


def fist() -> HandObservation:
    return make_hand()


def open_palm(offset: tuple[float, float] = (0.0, 0.0), handedness: Handedness = Handedness.RIGHT) -> HandObservation:
    return make_hand(thumb="up", index="up", middle="up", ring="up", pinky="up", offset=offset, handedness=handedness)


def thumbs_up() -> HandObservation:
    return make_hand(thumb="up")


def thumbs_down() -> HandObservation:
    return make_hand(thumb="down")


def ok_sign() -> HandObservation:
    return make_hand(
        middle="up",
        ring="up",
        pinky="up",
        overrides={HandLandmark.THUMB_TIP: (0.48, 0.6, 0.0)},
    )


def peace_sign() -> HandObservation:
    return make_hand(index="up", middle="up")


def pointing_up() -> HandObservation:
    return make_hand(index="up")


def love_you() -> HandObservation:
    return make_hand(thumb="side", index="up", pinky="up")


def horns() -> HandObservation:
    return make_hand(index="up", pinky="up")


def call_me() -> HandObservation:
    return make_hand(thumb="side", pinky="up")


def number_4() -> HandObservation:
    return make_hand(index="up", middle="up", ring="up", pinky="up")


def pointing_down() -> HandObservation:
    return make_hand(index="down")


def pointing_at_viewer() -> HandObservation:
    return make_hand(index="toward_viewer")


def pinched_hands() -> HandObservation:
    return make_hand(
        ring="up",
        pinky="up",
        overrides={
            HandLandmark.THUMB_TIP: (0.5, 0.56, 0.0),
            HandLandmark.INDEX_FINGER_TIP: (0.5, 0.55, 0.0),
            HandLandmark.MIDDLE_FINGER_TIP: (0.51, 0.55, 0.0),
        },
    )


def unknown() -> HandObservation:
    return make_hand(index="up", ring="up")


def incomplete() -> HandObservation:
    return HandObservation(landmarks=open_palm().landmarks[:10], handedness=Handedness.RIGHT)

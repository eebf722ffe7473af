from __future__ import annotations

from collections.abc import Sequence
from math import acos, degrees
from typing import TypeAlias

import numpy as np

from .landmarks import Point3

AnyPoint: TypeAlias = Point3 | Sequence[float]

MIN_RAY_LENGTH = 1e-9


def _dimensions(*points: AnyPoint) -> int:
    # A point without depth makes the whole computation 2D
    return 3 if all(len(point) >= 3 for point in points) else 2


def _vector(point: AnyPoint, dimensions: int) -> np.ndarray:
    return np.array([float(value) for value in point[:dimensions]])


def distance(p1: AnyPoint, p2: AnyPoint) -> float:
    """Euclidean distance between two points, in 3D only if both points have a depth."""
    dimensions = _dimensions(p1, p2)
    return float(np.linalg.norm(_vector(p1, dimensions) - _vector(p2, dimensions)))


def angle(p1: AnyPoint, p2: AnyPoint, p3: AnyPoint) -> float:
    """Angle in degrees at `p2` between the rays to `p1` and `p3`.

    180 means the three points are aligned (straight joint), lower values mean a sharper bend.
    Returns 0 when one of the rays has no length (coincident points).
    """
    dimensions = _dimensions(p1, p2, p3)
    vertex = _vector(p2, dimensions)
    v1 = _vector(p1, dimensions) - vertex
    v2 = _vector(p3, dimensions) - vertex

    mag1 = np.linalg.norm(v1)
    mag2 = np.linalg.norm(v2)

    if mag1 < MIN_RAY_LENGTH or mag2 < MIN_RAY_LENGTH:
        return 0.0

    cos_angle = np.dot(v1, v2) / (mag1 * mag2)

    # Clamp to avoid numerical errors
    cos_angle = np.clip(cos_angle, -1.0, 1.0)

    return degrees(acos(float(cos_angle)))

from __future__ import annotations

from collections.abc import Iterator
from functools import cached_property

from .fingers import FingerIndex
from .geometry import distance
from .hand import Hand


class Hands:
    """The two hands of one frame, with the measurements used by the two hands rules."""

    def __init__(self, first: Hand, second: Hand) -> None:
        self.first = first
        self.second = second

    def __iter__(self) -> Iterator[Hand]:
        yield self.first
        yield self.second

    @cached_property
    def wrists_distance(self) -> float:
        return distance(self.first.wrist, self.second.wrist)

    @cached_property
    def wrists_height_diff(self) -> float:
        return abs(self.first.wrist.y - self.second.wrist.y)

    def tips_distance(self, finger: FingerIndex) -> float:
        """Distance between the tips of the same finger of both hands."""
        return distance(self.first.tip(finger), self.second.tip(finger))

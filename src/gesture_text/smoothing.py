"""Stabilization of the per-frame gesture labels."""

from __future__ import annotations

import logging
from collections import Counter, deque
from dataclasses import dataclass
from time import time

from .classifier import Classification
from .config import FeedbackConfig, StabilizerConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AcceptedSymbol:
    """A label that stayed stable long enough to be composed."""

    label: str
    timestamp: float


@dataclass
class StabilizerState:
    last_label: str | None = None
    run_length: int = 0
    last_accepted_at: float | None = None


class Stabilizer:
    """Turn a noisy per-frame label stream into rate-limited accepted symbols.

    A label is accepted once it was seen in `stable_threshold` consecutive frames and at least
    `cooldown_ms` passed since the previous accepted symbol. The run then restarts from zero, so a gesture
    held long enough is accepted again, once per full run, when the cooldown allows it.
    """

    def __init__(self, config: StabilizerConfig | None = None) -> None:
        self.config = config if config is not None else StabilizerConfig()
        self.state = StabilizerState()

    @property
    def cooldown(self) -> float:
        """Cooldown in seconds."""
        return self.config.cooldown_ms / 1000

    def update(self, label: str | None, timestamp: float | None = None) -> AcceptedSymbol | None:
        """Feed the label of a new frame, None when no hand was found."""
        if label is None:
            # Hand lost: the run is over, but not the cooldown
            if self.state.run_length:
                logger.debug("Hand lost, run of %r interrupted", self.state.last_label)
            self.reset()
            return None

        now = time() if timestamp is None else timestamp
        state = self.state

        if label == state.last_label:
            state.run_length += 1
        else:
            state.last_label = label
            state.run_length = 1

        if state.run_length < self.config.stable_threshold or not self._cooldown_elapsed(now):
            return None

        state.last_accepted_at = now
        state.run_length = 0
        logger.debug("Accepted symbol %r", label)
        return AcceptedSymbol(label, now)

    def _cooldown_elapsed(self, now: float) -> bool:
        if self.state.last_accepted_at is None:
            return True
        return now - self.state.last_accepted_at >= self.cooldown

    def reset(self, cooldown: bool = False) -> None:
        """Forget the current run, and the last acceptance time if `cooldown` is True."""
        self.state.last_label = None
        self.state.run_length = 0
        if cooldown:
            self.state.last_accepted_at = None


class MajorityVoteSmoother:
    """Smooths classifications for live feedback using a majority vote over the last frames.

    Not meant to be combined with a `Stabilizer` on the same stream: it only steadies what is shown.
    """

    def __init__(self, config: FeedbackConfig | None = None) -> None:
        self.config = config if config is not None else FeedbackConfig()
        self.history: deque[Classification] = deque(maxlen=self.config.window)

    def update(self, classification: Classification | None) -> Classification | None:
        """Update with a new classification and return the smoothed one."""
        if classification is None:
            return None

        self.history.append(classification)

        label, count = Counter(entry.label for entry in self.history).most_common(1)[0]
        share = count / len(self.history)

        if share >= self.config.vote_threshold:
            return Classification(label, share)
        return classification

    def reset(self) -> None:
        self.history.clear()

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from time import time
from typing import NamedTuple

from .classifier import Classification, GestureClassifier
from .composer import TextComposer
from .config import Config
from .models.landmarks import HandObservation
from .smoothing import AcceptedSymbol, MajorityVoteSmoother, Stabilizer

logger = logging.getLogger(__name__)


class FrameResult(NamedTuple):
    classification: Classification | None  # Raw classification of the frame
    feedback: Classification | None  # Smoothed classification to show, None if not confident enough
    accepted: AcceptedSymbol | None  # Symbol accepted on this frame, if any
    text: str  # Composed text after this frame


class Session:
    """Everything needed to turn the frames of one tracking session into text.

    Frames must be processed one at a time, from a single thread.
    """

    def __init__(self, config: Config | None = None) -> None:
        self.config = config if config is not None else Config()
        self.classifier = GestureClassifier(self.config)
        self.stabilizer = Stabilizer(self.config.stabilizer)
        self.feedback_smoother = MajorityVoteSmoother(self.config.feedback)
        self.composer = TextComposer(self.config.composer, stabilizer=self.stabilizer)

    @property
    def text(self) -> str:
        return self.composer.text

    def process(self, observations: Sequence[HandObservation], timestamp: float | None = None) -> FrameResult:
        """Classify the hands of a new frame, stabilize the label and compose accepted symbols."""
        now = time() if timestamp is None else timestamp

        classification = self.classifier.classify(observations)

        feedback = self.feedback_smoother.update(classification)
        if feedback is not None and feedback.confidence <= self.config.feedback.confidence_threshold:
            feedback = None

        accepted = self.stabilizer.update(None if classification is None else classification.label, now)
        if accepted is not None:
            self.composer.apply(accepted)
            logger.debug("Text is now %r", self.composer.text)

        return FrameResult(classification, feedback, accepted, self.composer.text)

    def clear(self) -> None:
        """Empty the text and restart stabilization from scratch."""
        self.composer.clear()
        self.feedback_smoother.reset()

    def stop(self) -> None:
        """End of the tracking session: drop the current run, keep the text."""
        self.stabilizer.reset()
        self.feedback_smoother.reset()

    def export(self, directory: Path | str) -> Path:
        return self.composer.export(directory)

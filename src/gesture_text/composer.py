from __future__ import annotations

import logging
import unicodedata
from datetime import datetime
from pathlib import Path

from .config import ComposerConfig
from .smoothing import AcceptedSymbol, Stabilizer

logger = logging.getLogger(__name__)

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
# Positions following the letters in alphabet-indexed classifiers
DELETE_INDEX = len(ALPHABET)
SPACE_INDEX = DELETE_INDEX + 1
NOTHING_INDEX = SPACE_INDEX + 1

EXPORT_FILENAME_FORMAT = "gesture-text-%Y-%m-%dT%H-%M-%S.txt"


# Emoji, their modifiers, variation selectors and joiners
DECORATION_CATEGORIES = {"So", "Sk", "Mn", "Me", "Cf"}


def strip_decorations(label: str) -> str:
    """Remove a leading decoration (emoji...) with the spaces following it, and all control characters."""
    position = 0
    while position < len(label) and unicodedata.category(label[position]) in DECORATION_CATEGORIES:
        position += 1
    if position:
        label = label[position:].lstrip(" ")
    return "".join(char for char in label if unicodedata.category(char)[0] != "C")


def label_for_index(index: int, config: ComposerConfig | None = None) -> str:
    """Label of an alphabet-indexed classifier output: letters, then delete, space and nothing."""
    config = config if config is not None else ComposerConfig()
    if 0 <= index < len(ALPHABET):
        return ALPHABET[index]
    if index == DELETE_INDEX:
        return config.delete_label
    if index == SPACE_INDEX:
        return config.space_label
    if index == NOTHING_INDEX:
        return config.ignore_labels[0] if config.ignore_labels else ""
    raise IndexError(f"No label for index {index}")


class TextComposer:
    """Compose a sentence from accepted symbols."""

    def __init__(self, config: ComposerConfig | None = None, stabilizer: Stabilizer | None = None) -> None:
        self.config = config if config is not None else ComposerConfig()
        self.stabilizer = stabilizer
        self._text = ""

    @property
    def text(self) -> str:
        return self._text

    def apply(self, symbol: AcceptedSymbol) -> str:
        """Apply an accepted symbol and return the new text."""
        label = self.config.aliases.get(symbol.label, symbol.label)

        if label in self.config.ignore_labels:
            return self._text

        if label == self.config.space_label:
            self._text += " "
        elif label == self.config.delete_label:
            self._text = self._text[:-1]
        elif cleaned := strip_decorations(label):
            self._text += cleaned
        else:
            logger.debug("Nothing to compose from label %r", label)

        return self._text

    def clear(self) -> None:
        """Empty the text, and restart stabilization so the next symbol is not blocked by a stale cooldown."""
        self._text = ""
        if self.stabilizer is not None:
            self.stabilizer.reset(cooldown=True)

    def export(self, directory: Path | str) -> Path:
        """Write the text in a new timestamped file of `directory`."""
        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / datetime.now().strftime(EXPORT_FILENAME_FORMAT)
        path.write_text(self._text, encoding="utf-8")
        logger.info("Text exported to %s", path)
        return path

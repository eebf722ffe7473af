from __future__ import annotations

import enum
import logging
from pathlib import Path
from typing import Any, TypeVar

import platformdirs
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .gestures import SECONDARY_GESTURES, Gestures

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Raised when thresholds or labels cannot produce a valid pipeline."""


BaseConfigType = TypeVar("BaseConfigType", bound="BaseConfig")


class BaseConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    def __init__(self, **values: Any) -> None:
        try:
            super().__init__(**values)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid {self.__class__.__name__}: {exc}") from exc

    def __setattr__(self, name: str, value: Any) -> None:
        try:
            super().__setattr__(name, value)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid {self.__class__.__name__}.{name}: {exc}") from exc

    @classmethod
    def build(cls: type[BaseConfigType], **values: Any) -> BaseConfigType:
        """Validate `values` and raise `ConfigurationError` instead of pydantic's error."""
        try:
            return cls.model_validate(values)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid {cls.__name__}: {exc}") from exc


class FingerStateMethod(str, enum.Enum):
    ANGLE = "angle"  # Joint angles, scale invariant
    POSITION = "position"  # Tip/joint vertical positions, depends on distance to camera

    def __str__(self) -> str:
        return self.value


class FingerStateConfig(BaseConfig):
    method: FingerStateMethod = Field(FingerStateMethod.ANGLE, description="How extended fingers are detected")
    extended_min_angle_degrees: float = Field(
        150.0, gt=0, le=180, description="Min PIP and DIP angle (degrees) for a finger to be extended"
    )
    thumb_extended_min_angle_degrees: float = Field(
        150.0, gt=0, le=180, description="Min MCP and IP angle (degrees) for the thumb to be extended"
    )
    # Only used by the position method
    tip_above_joint_margin: float = Field(0.02, ge=0, description="Min height of a tip above its PIP joint")
    joint_below_knuckle_tolerance: float = Field(
        0.01, ge=0, description="Max height of a PIP joint below its knuckle"
    )
    thumb_extension_ratio: float = Field(
        1.2, gt=0, description="Min ratio between CMC-to-tip and CMC-to-MCP distances for an extended thumb"
    )


class SingleHandConfig(BaseConfig):
    thumb_straight_min_angle_degrees: float = Field(
        150.0, gt=0, le=180, description="Min thumb MCP-IP-tip angle (degrees) for thumbs up"
    )
    thumb_vertical_margin: float = Field(0.05, ge=0, description="Min thumb tip height above/below the wrist")
    fist_max_tip_palm_distance: float = Field(
        0.15, gt=0, description="Max distance between each fingertip and the palm center for a fist"
    )
    ok_max_thumb_index_distance: float = Field(
        0.06, gt=0, description="Max distance between thumb and index tips for the OK sign"
    )
    open_palm_min_tip_spacing: float = Field(
        0.03, ge=0, description="Min average spacing between adjacent fingertips for an open palm"
    )
    finger_straight_margin: float = Field(0.02, ge=0, description="Min height of a tip above its PIP joint")
    peace_min_tip_spacing: float = Field(0.03, ge=0, description="Min spacing between index and middle tips")
    pointing_knuckle_margin: float = Field(0.05, ge=0, description="Min index tip height above/below its knuckle")
    pointing_wrist_margin: float = Field(0.03, ge=0, description="Min index tip height above the wrist")
    horns_min_tip_spacing: float = Field(0.06, ge=0, description="Min spacing between index and pinky tips")
    call_me_min_spread: float = Field(0.15, ge=0, description="Min distance between thumb and pinky tips")
    pointing_viewer_min_depth: float = Field(
        0.05, gt=0, description="Min depth difference between index knuckle and tip when pointing at the camera"
    )
    pinch_max_distance: float = Field(
        0.05, gt=0, description="Max distance between the thumb tip and the index and middle tips"
    )


class TwoHandsConfig(BaseConfig):
    praying_max_wrist_distance: float = Field(0.15, gt=0, description="Max distance between both wrists")
    praying_max_tip_distance: float = Field(0.1, gt=0, description="Max distance between both middle tips")
    praying_max_wrist_height_diff: float = Field(
        0.05, ge=0, description="Max vertical difference between both wrists"
    )
    praying_min_extended_fingers: int = Field(
        5, ge=0, le=5, description="Min extended fingers on each hand (5 includes the thumb)"
    )


class GesturesConfig(BaseConfig):
    single: SingleHandConfig = Field(
        default_factory=lambda: SingleHandConfig(), description="Thresholds for single hand gestures"
    )
    two_hands: TwoHandsConfig = Field(
        default_factory=lambda: TwoHandsConfig(), description="Thresholds for two hands gestures"
    )
    disable_secondary: bool = Field(False, description="Only keep the canonical gestures")
    disabled: list[Gestures] = Field(default_factory=list, description="Secondary gestures to disable")

    @model_validator(mode="after")
    def check_disabled(self) -> GesturesConfig:
        if forbidden := [gesture.value for gesture in self.disabled if gesture not in SECONDARY_GESTURES]:
            raise ValueError(f"Only secondary gestures can be disabled, not: {', '.join(forbidden)}")
        return self

    def is_gesture_disabled(self, gesture: Gestures) -> bool:
        if gesture not in SECONDARY_GESTURES:
            return False
        return self.disable_secondary or gesture in self.disabled


class StabilizerConfig(BaseConfig):
    stable_threshold: int = Field(15, ge=1, description="Consecutive identical frames before accepting a label")
    cooldown_ms: int = Field(1500, ge=0, description="Min time (milliseconds) between two accepted symbols")


class FeedbackConfig(BaseConfig):
    window: int = Field(5, ge=1, description="Number of frames in the majority vote")
    vote_threshold: float = Field(0.7, ge=0, le=1, description="Min share of the window for the majority label")
    confidence_threshold: float = Field(
        0.6, ge=0, le=1, description="Feedback is only shown above this confidence"
    )


class ComposerConfig(BaseConfig):
    space_label: str = Field("SPACE", min_length=1, description="Label appending a space")
    delete_label: str = Field("DELETE", min_length=1, description="Label removing the last character")
    ignore_labels: list[str] = Field(
        default_factory=lambda: ["NOTHING"], description="Labels dropped without changing the text"
    )
    aliases: dict[str, str] = Field(
        default_factory=dict, description="Labels translated before being composed, e.g. {'Open Palm': 'SPACE'}"
    )

    @model_validator(mode="after")
    def check_roles(self) -> ComposerConfig:
        if self.space_label == self.delete_label:
            raise ValueError("Space and delete labels must differ")
        if self.space_label in self.ignore_labels or self.delete_label in self.ignore_labels:
            raise ValueError("Space and delete labels cannot be ignored")
        return self


class CLIConfig(BaseConfig):
    """Configuration for CLI settings."""

    camera: int = Field(0, ge=0, description="OpenCV camera index")
    mirror: bool = Field(True, description="Mirror the video horizontally")
    size: int = Field(1280, gt=0, description="Maximum dimension for camera capture resolution")
    use_gpu: bool = Field(False, description="Run the landmark model on GPU")


class Config(BaseConfig):
    fingers: FingerStateConfig = Field(
        default_factory=lambda: FingerStateConfig(), description="Finger state detection"
    )
    gestures: GesturesConfig = Field(default_factory=lambda: GesturesConfig(), description="Gesture detection")
    stabilizer: StabilizerConfig = Field(
        default_factory=lambda: StabilizerConfig(), description="Accepted symbols stabilization"
    )
    feedback: FeedbackConfig = Field(default_factory=lambda: FeedbackConfig(), description="Live feedback smoothing")
    composer: ComposerConfig = Field(default_factory=lambda: ComposerConfig(), description="Text composition")
    cli: CLIConfig = Field(default_factory=lambda: CLIConfig(), description="CLI configuration")

    @classmethod
    def get_user_path(cls) -> Path:
        app_name = "gesture-text"
        config_dir = Path(platformdirs.user_config_dir(app_name))
        return config_dir / "config.json"

    @classmethod
    def validate_path(cls, path: Path | str | None) -> Path:
        if path is None:
            path = cls.get_user_path()
        elif isinstance(path, str):
            path = Path(path)

        return path.resolve()

    @classmethod
    def load(cls, path: Path | str | None = None) -> Config:
        path = cls.validate_path(path)

        if not path.exists():
            logger.info("Config file %s does not exist, using default config", path)
            return cls()

        if not path.is_file():
            raise ConfigurationError(f"Path {path} exists and is not a file.")

        try:
            return cls.model_validate_json(path.read_text())
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid config file {path}: {exc}") from exc

    def save(self, path: Path | str | None = None) -> Path:
        path = self.validate_path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        if path.exists() and not path.is_file():
            raise ConfigurationError(f"Path {path} exists and is not a file.")

        path.write_text(self.model_dump_json(indent=2))
        return path

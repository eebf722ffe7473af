from __future__ import annotations

from typing import Any, ClassVar, Generic, TypeVar

from ..config import GesturesConfig
from ..gestures import Gestures

RuleTarget = TypeVar("RuleTarget")


class BaseGestureRule(Generic[RuleTarget]):
    """A `(predicate, gesture, confidence)` entry of an ordered rule table.

    Base classes define `gestures_set`, final subclasses define `gesture` and `confidence` and are
    registered, in definition order, in the table of their base class. The table is evaluated from top
    to bottom and the first rule whose `matches` returns True wins.
    """

    # To be defined for a baseclass for each "RuleTarget"
    gestures_set: ClassVar[set[Gestures]]

    # To be defined for each final subclass
    gesture: ClassVar[Gestures]
    confidence: ClassVar[float]

    # Automatically defined for register classes
    _ordered_rules: ClassVar[list[type[BaseGestureRule[Any]]]]
    _register_classes: ClassVar[set[type[BaseGestureRule[Any]]]] = set()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)

        if "gesture" in cls.__dict__:
            # Look for the base class to use for registration
            register_class = cls._get_register_class()

            # Check if the gesture is in the set of gestures for the base class
            if cls.gesture not in register_class.gestures_set:
                raise ValueError(
                    f"Gesture {cls.gesture} is not in the set of gestures {register_class.gestures_set} "
                    f"for class {register_class.__name__}."
                )
            if not 0.0 <= cls.confidence <= 1.0:
                raise ValueError(f"Confidence of {cls.__name__} must be in [0, 1], got {cls.confidence}")

            # Init the registration if not already done
            if register_class not in BaseGestureRule._register_classes:
                BaseGestureRule._register_classes.add(register_class)
                register_class._ordered_rules = []

            if any(rule.gesture == cls.gesture for rule in register_class._ordered_rules):
                raise ValueError(f"Gesture {cls.gesture} already has a rule in {register_class.__name__}")

            register_class._ordered_rules.append(cls)

    @classmethod
    def _get_register_class(cls) -> type[BaseGestureRule[Any]]:
        """Get the class used for registering gesture rules."""
        for base in cls.__mro__[1:]:
            if not base.__name__.startswith("_") and "gestures_set" in base.__dict__:
                return base
        raise ValueError(f"Class {cls.__name__} must have a 'gestures_set' attribute defined in a base class.")

    @classmethod
    def ordered_rules(cls) -> list[type[BaseGestureRule[Any]]]:
        """The registered rules of this base class, in priority order."""
        if cls not in BaseGestureRule._register_classes:
            raise ValueError(f"Class {cls.__name__} is not a base class for gesture rules.")
        return list(cls._ordered_rules)

    def __init__(self, config: GesturesConfig) -> None:
        self.config = config

    def matches(self, target: RuleTarget) -> bool:
        raise NotImplementedError("This method should be implemented in subclasses.")

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.gesture.value!r} ({self.confidence})>"

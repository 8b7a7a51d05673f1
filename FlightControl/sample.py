"""Immutable per-frame hand tracking observations."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from config.gestures import FINGER_COUNT


@dataclass(frozen=True)
class HandPose:
    """Finger extension flags (thumb first) and orientation in radians."""

    fingers_extended: tuple[bool, ...]
    pitch: float
    roll: float
    yaw: float

    def __post_init__(self) -> None:
        if len(self.fingers_extended) != FINGER_COUNT:
            raise ValueError(
                f"Expected {FINGER_COUNT} finger flags, got {len(self.fingers_extended)}"
            )
        object.__setattr__(self, "fingers_extended", tuple(bool(f) for f in self.fingers_extended))


@dataclass(frozen=True)
class Sample:
    """One frame from the motion stream: zero or more tracked hands."""

    hands: tuple[HandPose, ...] = ()

    @property
    def has_hands(self) -> bool:
        return len(self.hands) > 0

    @property
    def primary_hand(self) -> Optional[HandPose]:
        return self.hands[0] if self.hands else None

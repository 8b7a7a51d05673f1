"""Gesture classification and hand pose extraction utilities."""

from __future__ import annotations
from collections.abc import Sequence
from math import sqrt
from typing import Protocol

import numpy as np

from config.gestures import (
    FINGER_JOINTS,
    FINGERTIPS,
    HAND_LANDMARK_COUNT,
    INDEX_MCP,
    MIDDLE_MCP,
    PINKY_MCP,
    WRIST,
)

from .States import Gesture
from .sample import HandPose

class _HasXYZ(Protocol):
    x: float
    y: float
    z: float


def classify_gesture(fingers_extended: Sequence[bool]) -> Gesture:
    """Classify a finger pattern as a take-off intent, a land intent, or neither.

    Only a unanimous pattern counts: every finger must share the first
    finger's flag. All extended is a take-off intent, all retracted a land
    intent. Anything else is ambiguous and must be ignored.
    """

    first = fingers_extended[0]
    if any(flag != first for flag in fingers_extended):
        return Gesture.AMBIGUOUS
    return Gesture.ALL_EXTENDED if first else Gesture.ALL_RETRACTED


def calculate_distance(reference_x: float, reference_y: float, distant_x: float, distant_y: float) -> float:
    """Compute Euclidean distance between two 2D points."""

    return sqrt((reference_x - distant_x) ** 2 + (reference_y - distant_y) ** 2)


def _landmark_distance(a: _HasXYZ, b: _HasXYZ) -> float:
    return calculate_distance(float(a.x), float(a.y), float(b.x), float(b.y))


def fingers_extended(hand_points: Sequence[_HasXYZ]) -> tuple[bool, ...]:
    """Compute the five extension flags (thumb first) from 21 hand landmarks.

    A finger is extended when its tip lies farther from the reference point
    than its middle joint. The reference is the wrist for the four fingers
    and the pinky knuckle for the thumb, which folds across the palm.
    """

    flags: list[bool] = []
    for finger, (tip, joint) in enumerate(zip(FINGERTIPS, FINGER_JOINTS)):
        reference = hand_points[PINKY_MCP] if finger == 0 else hand_points[WRIST]
        flags.append(
            _landmark_distance(reference, hand_points[tip])
            > _landmark_distance(reference, hand_points[joint])
        )
    return tuple(flags)


def _point(landmark: _HasXYZ) -> np.ndarray:
    return np.array([float(landmark.x), float(landmark.y), float(landmark.z)])


def hand_orientation(hand_points: Sequence[_HasXYZ]) -> tuple[float, float, float]:
    """Estimate (pitch, roll, yaw) in radians from 21 hand landmarks.

    Neutral is an upright open hand facing the camera, which gives zero on
    every axis. Landmarks use image coordinates (y grows downwards, smaller z
    is closer to the camera).

    - pitch: negative when the fingers tip towards the camera.
    - roll: positive when the hand leans to the right of the image.
    - yaw: positive when the pinky side turns away from the camera.
    """

    direction = _point(hand_points[MIDDLE_MCP]) - _point(hand_points[WRIST])
    span = _point(hand_points[PINKY_MCP]) - _point(hand_points[INDEX_MCP])

    pitch = float(np.arctan2(direction[2], -direction[1]))
    roll = float(np.arctan2(direction[0], -direction[1]))
    # abs() keeps the sign independent of handedness
    yaw = float(np.arctan2(span[2], abs(span[0])))
    return pitch, roll, yaw


def hand_pose(hand_points: Sequence[_HasXYZ]) -> HandPose:
    """Build a HandPose from 21 MediaPipe hand landmarks."""

    if len(hand_points) != HAND_LANDMARK_COUNT:
        raise ValueError(
            f"Expected {HAND_LANDMARK_COUNT} hand landmarks, got {len(hand_points)}"
        )
    pitch, roll, yaw = hand_orientation(hand_points)
    return HandPose(fingers_extended(hand_points), pitch, roll, yaw)

__all__ = [
    "classify_gesture",
    "calculate_distance",
    "fingers_extended",
    "hand_orientation",
    "hand_pose",
]

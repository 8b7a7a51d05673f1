"""MediaPipe hand landmark indices used for finger and orientation features."""
from __future__ import annotations
from typing import Final

FINGER_COUNT: Final[int] = 5
HAND_LANDMARK_COUNT: Final[int] = 21

WRIST: Final[int] = 0
INDEX_MCP: Final[int] = 5
MIDDLE_MCP: Final[int] = 9
PINKY_MCP: Final[int] = 17

# Thumb, index, middle, ring, pinky
FINGERTIPS: Final[tuple[int, ...]] = (4, 8, 12, 16, 20)
# Joint the tip is compared against (IP for the thumb, PIP for the others)
FINGER_JOINTS: Final[tuple[int, ...]] = (3, 6, 10, 14, 18)

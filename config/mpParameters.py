"""MediaPipe runtime parameters."""

from __future__ import annotations
from typing import Final

CAMERA_INDEX: Final[int] = 0
MAX_NUM_HANDS: Final[int] = 2
MIN_DETECTION_CONFIDENCE: Final[float] = 0.5
MIN_TRACKING_CONFIDENCE: Final[float] = 0.5

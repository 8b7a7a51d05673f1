"""Webcam hand tracking stream producing one Sample per frame."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator
from typing import Any, Optional

import cv2
import mediapipe as mp

from config.mpParameters import (
    CAMERA_INDEX,
    MAX_NUM_HANDS,
    MIN_DETECTION_CONFIDENCE,
    MIN_TRACKING_CONFIDENCE,
)

from .gestureRecognition import hand_pose
from .sample import Sample

logger = logging.getLogger(__name__)


def sample_from_results(results: Any) -> Sample:
    """Converts a MediaPipe Hands result into a Sample (hands in detection order)."""
    detected = results.multi_hand_landmarks or []
    return Sample(tuple(hand_pose(hand.landmark) for hand in detected))


class HandTrackingStream:
    """
    Lazy, endless stream of Samples read from a webcam through MediaPipe Hands.

    The stream ends only when the camera stops delivering frames. It can be
    iterated once; the camera is opened on first iteration.
    """

    def __init__(
        self,
        camera_index: int = CAMERA_INDEX,
        max_num_hands: int = MAX_NUM_HANDS,
        min_detection_confidence: float = MIN_DETECTION_CONFIDENCE,
        min_tracking_confidence: float = MIN_TRACKING_CONFIDENCE,
        mirror: bool = True,
    ) -> None:
        self.camera_index = camera_index
        self.max_num_hands = max_num_hands
        self.min_detection_confidence = min_detection_confidence
        self.min_tracking_confidence = min_tracking_confidence
        self.mirror = mirror

        self.camera: Optional[cv2.VideoCapture] = None
        self.hands: Any = None
        self._started = False

    def __aiter__(self) -> AsyncIterator[Sample]:
        if self._started:
            raise RuntimeError("HandTrackingStream cannot be restarted")
        self._started = True
        return self._samples()

    def _connect(self) -> None:
        self.camera = cv2.VideoCapture(self.camera_index)
        if not self.camera.isOpened():
            self.camera.release()
            self.camera = None
            raise RuntimeError(f"Could not open camera {self.camera_index}")

        self.hands = mp.solutions.hands.Hands(
            max_num_hands=self.max_num_hands,
            min_detection_confidence=self.min_detection_confidence,
            min_tracking_confidence=self.min_tracking_confidence,
        )
        logger.info("connection established with camera %d", self.camera_index)

    def _read(self) -> Optional[Sample]:
        ret, frame = self.camera.read()
        if not ret:
            return None
        if self.mirror:
            frame = cv2.flip(frame, 1)
        results = self.hands.process(cv2.cvtColor(frame, cv2.COLOR_BGR2RGB))
        return sample_from_results(results)

    async def _samples(self) -> AsyncIterator[Sample]:
        await asyncio.to_thread(self._connect)
        try:
            while True:
                sample = await asyncio.to_thread(self._read)
                if sample is None:
                    logger.warning("Error reading frame")
                    break
                yield sample
        finally:
            self.close()

    def close(self) -> None:
        """Releases the camera and the MediaPipe graph. Safe to call twice."""
        if self.hands is not None:
            self.hands.close()
            self.hands = None
        if self.camera is not None:
            self.camera.release()
            self.camera = None
            logger.info("disconnected from camera %d", self.camera_index)

    async def aclose(self) -> None:
        self.close()

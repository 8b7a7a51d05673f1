import pytest
from unittest.mock import MagicMock

from FlightControl.actuator import DebugActuator


def build_hand(extended=(True, True, True, True, True)):
    """21 landmark mocks of an upright hand facing the camera (image coordinates)."""
    points = [MagicMock(x=0.5, y=0.9, z=0.0) for _ in range(21)]

    # Thumb: CMC, MCP, IP, tip. A folded tip sits next to the pinky knuckle.
    points[1].x, points[1].y = 0.35, 0.85
    points[2].x, points[2].y = 0.30, 0.80
    points[3].x, points[3].y = 0.25, 0.75
    points[4].x, points[4].y = (0.20, 0.70) if extended[0] else (0.60, 0.75)

    # Index .. pinky: MCP, PIP, DIP, tip on a vertical line. A folded tip
    # curls back below the PIP joint.
    for finger, column in zip(range(1, 5), (0.4, 0.5, 0.6, 0.7)):
        mcp = 1 + 4 * finger
        for offset, y in enumerate((0.7, 0.6, 0.5, 0.4)):
            points[mcp + offset].x = column
            points[mcp + offset].y = y
        if not extended[finger]:
            points[mcp + 2].y = 0.65
            points[mcp + 3].y = 0.75
    return points


@pytest.fixture
def hand_landmarks():
    """Factory fixture: hand_landmarks(extended=(...)) -> list of 21 landmarks."""
    return build_hand


@pytest.fixture
def actuator():
    """Drone actuator mock. Every command is an AsyncMock."""
    return MagicMock(spec=DebugActuator)

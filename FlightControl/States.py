"""State, gesture and command enums used by the flight controller."""
from __future__ import annotations
from enum import Enum, auto

class FlightState(Enum):
    """Take-off / landing lifecycle of the drone."""
    LANDED = auto()
    TAKING_OFF = auto()
    FLYING = auto()
    LANDING = auto()


class Gesture(Enum):
    """Classification of a hand's finger pattern."""
    AMBIGUOUS = auto()
    ALL_EXTENDED = auto()
    ALL_RETRACTED = auto()


class MovementCommand(Enum):
    """Per-axis movement commands. Values name the actuator coroutine."""
    MOVE_FORWARD = "move_forward"
    MOVE_BACK = "move_back"
    RESET_PITCH = "reset_pitch"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    RESET_ROLL = "reset_roll"
    SPIN_LEFT = "spin_left"
    SPIN_RIGHT = "spin_right"
    RESET_YAW = "reset_yaw"

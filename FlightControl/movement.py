"""Maps hand orientation to per-axis movement commands."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from config.drone import DEAD_ZONE

from .States import MovementCommand
from .actuator import DroneActuator

logger = logging.getLogger(__name__)


def _map_axis(
    value: float,
    dead_zone: float,
    negative: MovementCommand,
    positive: MovementCommand,
    reset: MovementCommand,
) -> MovementCommand:
    # Strict comparisons: the dead zone boundaries themselves reset.
    if value < -dead_zone:
        return negative
    if value > dead_zone:
        return positive
    return reset


def map_pitch(pitch: float, dead_zone: float = DEAD_ZONE) -> MovementCommand:
    return _map_axis(
        pitch, dead_zone,
        MovementCommand.MOVE_FORWARD, MovementCommand.MOVE_BACK, MovementCommand.RESET_PITCH,
    )


def map_roll(roll: float, dead_zone: float = DEAD_ZONE) -> MovementCommand:
    return _map_axis(
        roll, dead_zone,
        MovementCommand.MOVE_LEFT, MovementCommand.MOVE_RIGHT, MovementCommand.RESET_ROLL,
    )


def map_yaw(yaw: float, dead_zone: float = DEAD_ZONE) -> MovementCommand:
    return _map_axis(
        yaw, dead_zone,
        MovementCommand.SPIN_LEFT, MovementCommand.SPIN_RIGHT, MovementCommand.RESET_YAW,
    )


def map_movement(
    pitch: float, roll: float, yaw: float, dead_zone: float = DEAD_ZONE
) -> tuple[MovementCommand, MovementCommand, MovementCommand]:
    """Returns one command per axis, in (pitch, roll, yaw) order."""
    return (
        map_pitch(pitch, dead_zone),
        map_roll(roll, dead_zone),
        map_yaw(yaw, dead_zone),
    )


async def dispatch_movement(
    actuator: DroneActuator, commands: Sequence[MovementCommand]
) -> list[object]:
    """
    Sends every command to the actuator concurrently.

    A failing axis is logged and does not prevent the others from being
    sent. Returns the per-command results (an exception for failed ones).
    """
    results = await asyncio.gather(
        *(getattr(actuator, command.value)() for command in commands),
        return_exceptions=True,
    )
    for command, result in zip(commands, results):
        if isinstance(result, BaseException):
            logger.error("%s failed: %r", command.name, result)
    return results

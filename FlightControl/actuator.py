"""Drone actuators: the asynchronous command surface used by the controller."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional, Protocol

from djitellopy import Tello, TelloException

from config.drone import (
    VELOCITY_FACTOR_X,
    VELOCITY_FACTOR_Z,
    VELOCITY_FACTOR_YAW,
)

logger = logging.getLogger(__name__)


class ActuatorError(RuntimeError):
    """A drone command was rejected or could not be delivered."""


class DroneActuator(Protocol):
    """Asynchronous drone commands. Each resolves once the drone acknowledged it."""

    async def connect(self) -> None: ...
    async def close(self) -> None: ...
    async def take_off(self) -> None: ...
    async def land(self) -> None: ...
    async def move_forward(self) -> None: ...
    async def move_back(self) -> None: ...
    async def reset_pitch(self) -> None: ...
    async def move_left(self) -> None: ...
    async def move_right(self) -> None: ...
    async def reset_roll(self) -> None: ...
    async def spin_left(self) -> None: ...
    async def spin_right(self) -> None: ...
    async def reset_yaw(self) -> None: ...


class TelloActuator:
    """
    Drives a DJI Tello through djitellopy.

    Movement commands set one RC channel and resend the whole RC vector, so
    the latest command on an axis always wins.
    """

    def __init__(
        self,
        drone: Optional[Tello] = None,
        velocity_x: float = VELOCITY_FACTOR_X,
        velocity_z: float = VELOCITY_FACTOR_Z,
        velocity_yaw: float = VELOCITY_FACTOR_YAW,
    ) -> None:
        self.drone = drone
        self.speed_lr = int(100 * velocity_x)
        self.speed_fb = int(100 * velocity_z)
        self.speed_yaw = int(100 * velocity_yaw)
        # left/right, forward/back, up/down (unused), yaw
        self.rc = {"lr": 0, "fb": 0, "ud": 0, "yv": 0}

    async def _call(self, method: str, *args: Any) -> Any:
        """Runs a blocking Tello SDK method off the event loop."""
        if self.drone is None:
            raise ActuatorError("Drone is not connected")
        try:
            return await asyncio.to_thread(getattr(self.drone, method), *args)
        except TelloException as e:
            raise ActuatorError(f"{method} failed: {e}") from e

    async def connect(self) -> None:
        """Initializes connection to the Tello drone."""
        if self.drone is None:
            self.drone = Tello()
        await self._call("connect")
        battery = await self._call("get_battery")
        logger.info("Connected to Tello, battery: %s%%", battery)

    async def close(self) -> None:
        """Lands if still airborne and releases the SDK resources."""
        if self.drone is None:
            return
        try:
            if self.drone.is_flying:
                await self._call("land")
        finally:
            await self._call("end")

    async def take_off(self) -> None:
        await self._call("takeoff")

    async def land(self) -> None:
        await self._call("land")

    async def _set_channel(self, channel: str, value: int) -> None:
        self.rc[channel] = value
        await self._call(
            "send_rc_control",
            self.rc["lr"], self.rc["fb"], self.rc["ud"], self.rc["yv"],
        )

    async def move_forward(self) -> None:
        await self._set_channel("fb", self.speed_fb)

    async def move_back(self) -> None:
        await self._set_channel("fb", -self.speed_fb)

    async def reset_pitch(self) -> None:
        await self._set_channel("fb", 0)

    async def move_left(self) -> None:
        await self._set_channel("lr", -self.speed_lr)

    async def move_right(self) -> None:
        await self._set_channel("lr", self.speed_lr)

    async def reset_roll(self) -> None:
        await self._set_channel("lr", 0)

    async def spin_left(self) -> None:
        await self._set_channel("yv", -self.speed_yaw)

    async def spin_right(self) -> None:
        await self._set_channel("yv", self.speed_yaw)

    async def reset_yaw(self) -> None:
        await self._set_channel("yv", 0)


class DebugActuator:
    """No drone connection, commands are only logged. Used with --debug."""

    def __init__(self) -> None:
        self.history: list[str] = []

    async def _record(self, command: str) -> None:
        self.history.append(command)
        logger.debug("DEBUG drone command: %s", command)

    async def connect(self) -> None:
        logger.info("Debug mode, no drone connection")

    async def close(self) -> None:
        logger.info("Debug drone closed after %d commands", len(self.history))

    async def take_off(self) -> None:
        await self._record("take_off")

    async def land(self) -> None:
        await self._record("land")

    async def move_forward(self) -> None:
        await self._record("move_forward")

    async def move_back(self) -> None:
        await self._record("move_back")

    async def reset_pitch(self) -> None:
        await self._record("reset_pitch")

    async def move_left(self) -> None:
        await self._record("move_left")

    async def move_right(self) -> None:
        await self._record("move_right")

    async def reset_roll(self) -> None:
        await self._record("reset_roll")

    async def spin_left(self) -> None:
        await self._record("spin_left")

    async def spin_right(self) -> None:
        await self._record("spin_right")

    async def reset_yaw(self) -> None:
        await self._record("reset_yaw")

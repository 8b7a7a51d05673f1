"""Take-off / landing state machine driven by classified gestures."""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Optional

from config.drone import RECOVER_ON_FAILURE, TRANSITION_TIMEOUT_SECONDS

from .States import FlightState, Gesture
from .actuator import DroneActuator

logger = logging.getLogger(__name__)


class FlightStateMachine:
    """
    Owns the flight state and runs the take-off / land actions.

    LANDED -> TAKING_OFF -> FLYING -> LANDING -> LANDED. A take-off intent is
    honored only while LANDED and a land intent only while FLYING; intents
    received in any other state are dropped. Leaving TAKING_OFF or LANDING is
    done exclusively by the completion of the action that entered it.

    If the action fails the machine stays in the transitional state unless
    ``recover_on_failure`` is set, in which case it falls back to the state it
    started from. Exceeding ``transition_timeout`` is only reported: the
    action keeps running and the state follows its actual outcome.
    """

    def __init__(
        self,
        actuator: DroneActuator,
        recover_on_failure: bool = RECOVER_ON_FAILURE,
        transition_timeout: Optional[float] = TRANSITION_TIMEOUT_SECONDS,
    ) -> None:
        self.actuator = actuator
        self.recover_on_failure = recover_on_failure
        self.transition_timeout = transition_timeout
        self.state = FlightState.LANDED
        self.pending: Optional[asyncio.Task] = None

    def apply(self, gesture: Gesture) -> Optional[asyncio.Task]:
        """Applies an intent. Returns the scheduled transition task, if any."""
        if gesture is Gesture.ALL_EXTENDED and self.state is FlightState.LANDED:
            return self._begin(FlightState.TAKING_OFF, self.actuator.take_off, FlightState.FLYING)

        if gesture is Gesture.ALL_RETRACTED and self.state is FlightState.FLYING:
            return self._begin(FlightState.LANDING, self.actuator.land, FlightState.LANDED)

        if gesture is not Gesture.AMBIGUOUS:
            logger.debug("Ignoring %s while %s", gesture.name, self.state.name)
        return None

    def _begin(
        self,
        transitional: FlightState,
        action: Callable[[], Awaitable[None]],
        settled: FlightState,
    ) -> asyncio.Task:
        origin = self.state
        self.state = transitional
        logger.info("%s -> %s", origin.name, transitional.name)
        self.pending = asyncio.get_running_loop().create_task(
            self._complete(action, origin, settled)
        )
        return self.pending

    async def _complete(
        self,
        action: Callable[[], Awaitable[None]],
        origin: FlightState,
        settled: FlightState,
    ) -> bool:
        transitional = self.state
        # Shielded: an SDK call running in a worker thread cannot be cancelled.
        action_task = asyncio.ensure_future(action())
        try:
            try:
                await asyncio.wait_for(asyncio.shield(action_task), timeout=self.transition_timeout)
            except asyncio.TimeoutError:
                if action_task.done():
                    raise
                logger.error(
                    "%s did not complete within %ss, still waiting for the drone",
                    transitional.name, self.transition_timeout,
                )
                await action_task
        except Exception:
            logger.exception("%s failed", transitional.name)
            self._fail(origin)
            return False

        self.state = settled
        logger.info("%s -> %s", transitional.name, settled.name)
        return True

    def _fail(self, origin: FlightState) -> None:
        if self.recover_on_failure:
            logger.warning("%s -> %s (recovered)", self.state.name, origin.name)
            self.state = origin
        else:
            logger.warning("Staying in %s", self.state.name)

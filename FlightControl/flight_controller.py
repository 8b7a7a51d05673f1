import asyncio
import logging
from collections.abc import AsyncIterable
from typing import Optional, Set

from config.drone import DEAD_ZONE, RECOVER_ON_FAILURE, TRANSITION_TIMEOUT_SECONDS

# --- LOCAL MODULES ---
from .States import FlightState
from .actuator import DroneActuator
from .gestureRecognition import classify_gesture
from .movement import dispatch_movement, map_movement
from .sample import HandPose, Sample
from .state_machine import FlightStateMachine

logger = logging.getLogger(__name__)


class FlightController:
    """
    Turns a stream of hand samples into drone commands.

    Every sample is handled synchronously up to the point where commands are
    handed to the actuator: gesture classification and the state machine run
    first, then, only while flying, the orientation is mapped to one command
    per axis and dispatched without waiting for the drone.
    """

    def __init__(
        self,
        stream: AsyncIterable[Sample],
        actuator: DroneActuator,
        dead_zone: float = DEAD_ZONE,
        recover_on_failure: bool = RECOVER_ON_FAILURE,
        transition_timeout: Optional[float] = TRANSITION_TIMEOUT_SECONDS,
    ) -> None:
        self.stream = stream
        self.actuator = actuator
        self.dead_zone = dead_zone
        self.state_machine = FlightStateMachine(
            actuator,
            recover_on_failure=recover_on_failure,
            transition_timeout=transition_timeout,
        )

        # Latest observations; the hand is only replaced when one is seen.
        self.sample: Optional[Sample] = None
        self.hand: Optional[HandPose] = None

        self.movement_tasks: Set[asyncio.Task] = set()

    @property
    def state(self) -> FlightState:
        return self.state_machine.state

    def on_sample(self, sample: Sample) -> Optional[asyncio.Task]:
        """Processes one sample. Returns the movement dispatch task, if any."""
        self.sample = sample
        if not sample.has_hands:
            return None

        self.hand = sample.primary_hand

        self.state_machine.apply(classify_gesture(self.hand.fingers_extended))

        if self.state_machine.state is not FlightState.FLYING:
            return None

        commands = map_movement(self.hand.pitch, self.hand.roll, self.hand.yaw, self.dead_zone)
        logger.debug("Movement: %s", ", ".join(command.name for command in commands))
        task = asyncio.get_running_loop().create_task(dispatch_movement(self.actuator, commands))
        self.movement_tasks.add(task)
        task.add_done_callback(self.movement_tasks.discard)
        return task

    async def run(self) -> None:
        """Connects the drone and consumes the stream until it ends."""
        await self.actuator.connect()
        try:
            async for sample in self.stream:
                self.on_sample(sample)
            if self.movement_tasks:
                await asyncio.gather(*self.movement_tasks)
        finally:
            # The drone must have settled before close() decides whether to land.
            if self.state_machine.pending is not None:
                await asyncio.gather(self.state_machine.pending, return_exceptions=True)
            await self._cleanup()

    async def _cleanup(self) -> None:
        """Releases the stream and the drone."""
        close_stream = getattr(self.stream, "aclose", None)
        if close_stream is not None:
            await close_stream()
        await self.actuator.close()

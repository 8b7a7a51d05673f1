import argparse
import asyncio
import logging

from djitellopy import Tello

from FlightControl.actuator import DebugActuator, TelloActuator
from FlightControl.flight_controller import FlightController
from FlightControl.motion_stream import HandTrackingStream
from config.mpParameters import CAMERA_INDEX


def main():
    parser = argparse.ArgumentParser(description="Drone Control via Hand gestures")
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Only hand tracking no Drone connection , debug purposes",
    )
    parser.add_argument(
        "-c",
        "--camera",
        type=int,
        default=CAMERA_INDEX,
        help="Webcam index used for hand tracking",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every movement command",
    )
    parser.add_argument(
        "--recover-on-failure",
        action="store_true",
        help="Return to the previous state when take-off or landing fails",
    )
    parser.add_argument(
        "--transition-timeout",
        type=float,
        default=None,
        metavar="SECONDS",
        help="Report a take-off or landing that takes longer (the drone is still awaited)",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    Tello.LOGGER.setLevel(logging.WARNING)

    controller = FlightController(
        HandTrackingStream(camera_index=args.camera),
        DebugActuator() if args.debug else TelloActuator(),
        recover_on_failure=args.recover_on_failure,
        transition_timeout=args.transition_timeout,
    )
    try:
        asyncio.run(controller.run())
    except KeyboardInterrupt:
        logging.getLogger(__name__).info("Interrupted, shutting down")


if __name__ == "__main__":
    main()

import sys
import asyncio
import pytest
from pathlib import Path
from unittest.mock import MagicMock, patch

# --- SETUP PATHS ---
if __name__ == "__main__":
    sys.path.append(str(Path(__file__).parents[2]))

from djitellopy import TelloException

from FlightControl.actuator import ActuatorError, DebugActuator, TelloActuator


class TestTelloActuator:

    @pytest.fixture
    def drone(self):
        drone = MagicMock()
        drone.get_battery.return_value = 87
        drone.is_flying = False
        return drone

    @pytest.fixture
    def tello(self, drone):
        return TelloActuator(drone, velocity_x=0.5, velocity_z=0.4, velocity_yaw=0.6)

    def test_connect_creates_drone(self):
        with patch("FlightControl.actuator.Tello") as mock_tello_cls:
            mock_tello_cls.return_value.get_battery.return_value = 55
            actuator = TelloActuator()
            asyncio.run(actuator.connect())

        mock_tello_cls.assert_called_once_with()
        mock_tello_cls.return_value.connect.assert_called_once()
        assert actuator.drone is mock_tello_cls.return_value

    def test_take_off_and_land(self, tello, drone):
        asyncio.run(tello.take_off())
        asyncio.run(tello.land())
        drone.takeoff.assert_called_once()
        drone.land.assert_called_once()

    def test_rc_channels(self, tello, drone):
        """Each axis command updates its channel; the vector is lr, fb, ud, yaw."""
        asyncio.run(tello.move_forward())
        drone.send_rc_control.assert_called_with(0, 40, 0, 0)

        asyncio.run(tello.move_left())
        drone.send_rc_control.assert_called_with(-50, 40, 0, 0)

        asyncio.run(tello.spin_right())
        drone.send_rc_control.assert_called_with(-50, 40, 0, 60)

        asyncio.run(tello.reset_pitch())
        asyncio.run(tello.reset_roll())
        asyncio.run(tello.reset_yaw())
        drone.send_rc_control.assert_called_with(0, 0, 0, 0)

    def test_opposite_directions(self, tello, drone):
        asyncio.run(tello.move_back())
        asyncio.run(tello.move_right())
        asyncio.run(tello.spin_left())
        drone.send_rc_control.assert_called_with(50, -40, 0, -60)

    def test_sdk_error_is_wrapped(self, tello, drone):
        drone.takeoff.side_effect = TelloException("Command 'takeoff' was unsuccessful")
        with pytest.raises(ActuatorError, match="takeoff failed"):
            asyncio.run(tello.take_off())

    def test_command_before_connect(self):
        with pytest.raises(ActuatorError):
            asyncio.run(TelloActuator().land())

    def test_close_lands_when_flying(self, tello, drone):
        drone.is_flying = True
        asyncio.run(tello.close())
        drone.land.assert_called_once()
        drone.end.assert_called_once()

    def test_close_on_ground(self, tello, drone):
        asyncio.run(tello.close())
        drone.land.assert_not_called()
        drone.end.assert_called_once()


class TestDebugActuator:

    def test_commands_are_recorded(self):
        actuator = DebugActuator()

        async def scenario():
            await actuator.connect()
            await actuator.take_off()
            await actuator.move_forward()
            await actuator.reset_yaw()
            await actuator.land()
            await actuator.close()

        asyncio.run(scenario())
        assert actuator.history == ["take_off", "move_forward", "reset_yaw", "land"]


def run_tests_directly() -> None:
    """Entry point for direct script execution."""
    print(f"--- Running tests for {Path(__file__).name} ---")
    exit_code = pytest.main(["-v", "-p", "no:cacheprovider", __file__])
    sys.exit(exit_code)

if __name__ == "__main__":
    run_tests_directly()

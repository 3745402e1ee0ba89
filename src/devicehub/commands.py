"""Command objects wrapping a single on/off action behind ``execute()``.

Two flavours exist:

- ``TurnOnCommand`` / ``TurnOffCommand`` are bound to one device at
  construction and switch that device.
- ``SharedTurnOnCommand`` / ``SharedTurnOffCommand`` hold no device and can be
  assigned onto any number of ``CommandedDevice`` instances. They only report
  that the action ran; they do not reach the device's implementation.
"""

import logging
from abc import ABC, abstractmethod

from devicehub.devices.device import Device

logger = logging.getLogger(__name__)

TURN_ON = "turn_on"
TURN_OFF = "turn_off"
COMMAND_ACTIONS = (TURN_ON, TURN_OFF)


class Command(ABC):
    """A single invocable action."""

    @property
    @abstractmethod
    def action(self) -> str:
        """Return the action name ('turn_on' or 'turn_off')."""
        pass

    @abstractmethod
    def execute(self) -> None:
        """Run the action."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class DeviceCommand(Command):
    """Command bound to the device it controls."""

    def __init__(self, device: Device):
        self._device = device

    @property
    def device(self) -> Device:
        return self._device

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._device!r})"


class TurnOnCommand(DeviceCommand):
    @property
    def action(self) -> str:
        return TURN_ON

    def execute(self) -> None:
        logger.debug(f"Executing {TURN_ON} on {self._device!r}")
        self._device.turn_on()


class TurnOffCommand(DeviceCommand):
    @property
    def action(self) -> str:
        return TURN_OFF

    def execute(self) -> None:
        logger.debug(f"Executing {TURN_OFF} on {self._device!r}")
        self._device.turn_off()


class SharedTurnOnCommand(Command):
    """Reusable turn-on command with no device reference."""

    @property
    def action(self) -> str:
        return TURN_ON

    def execute(self) -> None:
        logger.debug(f"Executing shared {TURN_ON}")
        print("Turn on command executed.")


class SharedTurnOffCommand(Command):
    """Reusable turn-off command with no device reference."""

    @property
    def action(self) -> str:
        return TURN_OFF

    def execute(self) -> None:
        logger.debug(f"Executing shared {TURN_OFF}")
        print("Turn off command executed.")

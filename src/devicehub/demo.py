"""Fixed demonstration sequence: a light and a fan switched through commands."""

import logging
from typing import Optional

from devicehub.commands import (
    SharedTurnOffCommand,
    SharedTurnOnCommand,
    TurnOffCommand,
    TurnOnCommand,
)
from devicehub.config import check_variant
from devicehub.devices import CommandedDevice, Device, create_implementation
from devicehub.registry import DeviceRegistry

logger = logging.getLogger(__name__)

LIGHT_ID = "Light1"
FAN_ID = "Fan1"
DEMO_DEVICES = {LIGHT_ID: "light", FAN_ID: "fan"}


def create_device(kind: str, variant: str) -> Device:
    """Create a device of the given kind for the given command variant."""
    check_variant(variant)
    implementation = create_implementation(kind)
    if variant == "shared":
        return CommandedDevice(
            implementation,
            on_command=SharedTurnOnCommand(),
            off_command=SharedTurnOffCommand(),
        )
    return Device(implementation)


def build_registry(
    variant: str = "bound", registry: Optional[DeviceRegistry] = None
) -> DeviceRegistry:
    """Register the demo light and fan into ``registry`` (a new one by default)."""
    if registry is None:
        registry = DeviceRegistry()
    for device_id, kind in DEMO_DEVICES.items():
        registry.add(device_id, create_device(kind, variant))
    logger.info(f"Registered demo devices: {', '.join(registry.list_device_ids())}")
    return registry


def run_demo(registry: DeviceRegistry, variant: str = "bound") -> None:
    """Turn the light on and the fan off.

    With the bound variant, fresh ``TurnOnCommand``/``TurnOffCommand`` objects
    are built around each device. With the shared variant, the devices run the
    commands already assigned to them.
    """
    check_variant(variant)
    light = registry.require(LIGHT_ID)
    fan = registry.require(FAN_ID)

    if variant == "shared":
        light.turn_on()
        fan.turn_off()
        return

    commands = [TurnOnCommand(light), TurnOffCommand(fan)]
    for command in commands:
        logger.info(f"Executing {command!r}")
        command.execute()

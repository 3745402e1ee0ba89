"""Smart device hub built around swappable device implementations and commands."""

from devicehub.commands import (
    Command,
    SharedTurnOffCommand,
    SharedTurnOnCommand,
    TurnOffCommand,
    TurnOnCommand,
)
from devicehub.devices import (
    CommandedDevice,
    Device,
    DeviceImplementation,
    FanImplementation,
    LightImplementation,
)
from devicehub.registry import DeviceRegistry, get_default_registry

__all__ = [
    "Command",
    "TurnOnCommand",
    "TurnOffCommand",
    "SharedTurnOnCommand",
    "SharedTurnOffCommand",
    "Device",
    "CommandedDevice",
    "DeviceImplementation",
    "LightImplementation",
    "FanImplementation",
    "DeviceRegistry",
    "get_default_registry",
]

"""Device modules for smart home control."""

from .base import DeviceImplementation
from .device import CommandedDevice, Device
from .fan import FanImplementation
from .light import LightImplementation
from .kinds import IMPLEMENTATIONS, create_implementation

__all__ = [
    "DeviceImplementation",
    "Device",
    "CommandedDevice",
    "LightImplementation",
    "FanImplementation",
    "IMPLEMENTATIONS",
    "create_implementation",
]

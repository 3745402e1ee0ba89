"""Exceptions raised by the device hub."""


class DeviceHubError(Exception):
    """Base class for all device hub errors."""


class DeviceNotFoundError(DeviceHubError, KeyError):
    """Raised when a device id is required but not registered."""

    def __init__(self, device_id: str):
        super().__init__(device_id)
        self.device_id = device_id

    def __str__(self) -> str:
        return f"Unknown device: {self.device_id}"


class DuplicateDeviceError(DeviceHubError, ValueError):
    """Raised when adding a device under an id that is already registered."""

    def __init__(self, device_id: str):
        super().__init__(f"Device already registered: {device_id}")
        self.device_id = device_id


class NotConfiguredError(DeviceHubError, RuntimeError):
    """Raised when a commanded device is switched before a command is bound."""


class UnknownDeviceKindError(DeviceHubError, ValueError):
    """Raised when no implementation exists for a device kind."""


class ConfigError(DeviceHubError, ValueError):
    """Raised for invalid configuration values."""

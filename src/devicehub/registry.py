"""Device registry for managing multiple smart home devices."""

import logging
import threading
from typing import Optional

from devicehub.devices.device import Device
from devicehub.errors import DeviceNotFoundError, DuplicateDeviceError

logger = logging.getLogger(__name__)


class DeviceRegistry:
    """Registry for managing multiple devices by ID.

    Ids are unique: adding an id twice raises ``DuplicateDeviceError`` rather
    than replacing the existing device. Not thread-safe; callers sharing a
    registry across threads must synchronise add/remove/get themselves.
    """

    def __init__(self):
        self._devices: dict[str, Device] = {}

    def add(self, device_id: str, device: Device) -> None:
        """Add a device under the given ID.

        Args:
            device_id: Unique identifier for the device
            device: Device instance

        Raises:
            DuplicateDeviceError: If a device with the same ID is already registered
        """
        if device_id in self._devices:
            raise DuplicateDeviceError(device_id)
        self._devices[device_id] = device
        logger.debug(f"Registered device {device_id} ({device.kind})")

    def remove(self, device_id: str) -> Optional[Device]:
        """Remove a device by ID.

        Removing an unknown ID is a no-op.

        Args:
            device_id: ID of device to remove

        Returns:
            The removed device, or None if not found
        """
        device = self._devices.pop(device_id, None)
        if device is not None:
            logger.debug(f"Removed device {device_id}")
        return device

    def get(self, device_id: str) -> Optional[Device]:
        """Get a device by ID.

        Args:
            device_id: ID of device to retrieve

        Returns:
            Device instance or None if not found
        """
        return self._devices.get(device_id)

    def require(self, device_id: str) -> Device:
        """Get a device by ID, treating a missing ID as an error.

        Raises:
            DeviceNotFoundError: If no device is registered under ``device_id``
        """
        device = self._devices.get(device_id)
        if device is None:
            raise DeviceNotFoundError(device_id)
        return device

    def get_all(self) -> dict[str, Device]:
        """Get all registered devices.

        Returns:
            Dictionary mapping device IDs to device instances
        """
        return dict(self._devices)

    def list_device_ids(self) -> list[str]:
        """List all registered device IDs."""
        return list(self._devices.keys())

    def __len__(self) -> int:
        """Return the number of registered devices."""
        return len(self._devices)

    def __contains__(self, device_id: str) -> bool:
        """Check if a device ID is registered."""
        return device_id in self._devices


_default_registry: Optional[DeviceRegistry] = None
_default_registry_lock = threading.Lock()


def get_default_registry() -> DeviceRegistry:
    """Return the process-wide registry, creating it on first use.

    Creation happens at most once even if several threads call this
    concurrently.
    """
    global _default_registry
    if _default_registry is not None:
        return _default_registry

    with _default_registry_lock:
        if _default_registry is None:
            _default_registry = DeviceRegistry()
            logger.debug("Created default device registry")
    return _default_registry


def reset_default_registry() -> None:
    """Drop the process-wide registry so the next access creates a new one."""
    global _default_registry
    with _default_registry_lock:
        _default_registry = None

"""Base implementation interface for smart home devices."""

from abc import ABC, abstractmethod


class DeviceImplementation(ABC):
    """Abstract base class for the behavior behind a device.

    A ``Device`` forwards its on/off operations to one of these. New device
    kinds are added by subclassing and implementing both operations; the
    device side stays unchanged.
    """

    @property
    @abstractmethod
    def kind(self) -> str:
        """Return device kind identifier (e.g., 'light', 'fan')."""
        pass

    @abstractmethod
    def activate(self) -> None:
        """Switch the device on.

        Writes exactly one line to standard output describing the action.
        """
        pass

    @abstractmethod
    def deactivate(self) -> None:
        """Switch the device off.

        Writes exactly one line to standard output describing the action.
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

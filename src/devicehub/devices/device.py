"""Devices: a uniform on/off surface over a swappable implementation."""

import logging
from typing import TYPE_CHECKING, Optional

from devicehub.devices.base import DeviceImplementation
from devicehub.errors import NotConfiguredError

if TYPE_CHECKING:
    from devicehub.commands import Command

logger = logging.getLogger(__name__)


class Device:
    """Device that forwards on/off directly to its implementation.

    There is one device type; what a device *is* (light, fan, ...) is decided
    by the implementation it is constructed with.
    """

    def __init__(self, implementation: DeviceImplementation):
        self._implementation = implementation

    @property
    def implementation(self) -> DeviceImplementation:
        return self._implementation

    @property
    def kind(self) -> str:
        """Return the kind of the installed implementation."""
        return self._implementation.kind

    def turn_on(self) -> None:
        logger.debug(f"Turning on {self.kind} device")
        self._implementation.activate()

    def turn_off(self) -> None:
        logger.debug(f"Turning off {self.kind} device")
        self._implementation.deactivate()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._implementation!r})"


class CommandedDevice(Device):
    """Device whose on/off operations run through assigned command objects.

    Commands can be bound at construction or later through the setters, and
    replaced at any time. Switching the device while the matching command is
    unbound raises ``NotConfiguredError``.

    The implementation is kept for ``kind`` and inspection; the shared
    commands in ``devicehub.commands`` do not call into it.
    """

    def __init__(
        self,
        implementation: DeviceImplementation,
        on_command: Optional["Command"] = None,
        off_command: Optional["Command"] = None,
    ):
        super().__init__(implementation)
        self._on_command = on_command
        self._off_command = off_command

    def set_on_command(self, command: "Command") -> None:
        """Bind (or replace) the command run by ``turn_on``."""
        self._on_command = command

    def set_off_command(self, command: "Command") -> None:
        """Bind (or replace) the command run by ``turn_off``."""
        self._off_command = command

    @property
    def on_command(self) -> Optional["Command"]:
        return self._on_command

    @property
    def off_command(self) -> Optional["Command"]:
        return self._off_command

    @property
    def has_on_command(self) -> bool:
        return self._on_command is not None

    @property
    def has_off_command(self) -> bool:
        return self._off_command is not None

    def turn_on(self) -> None:
        if self._on_command is None:
            raise NotConfiguredError(f"No on-command bound to {self.kind} device")
        logger.debug(f"Running on-command for {self.kind} device")
        self._on_command.execute()

    def turn_off(self) -> None:
        if self._off_command is None:
            raise NotConfiguredError(f"No off-command bound to {self.kind} device")
        logger.debug(f"Running off-command for {self.kind} device")
        self._off_command.execute()

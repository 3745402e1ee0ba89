"""Light implementation."""

import logging

from devicehub.devices.base import DeviceImplementation

logger = logging.getLogger(__name__)


class LightImplementation(DeviceImplementation):
    """Console-backed light. Holds no state."""

    @property
    def kind(self) -> str:
        return "light"

    def activate(self) -> None:
        logger.debug("Activating light")
        print("Light device turned on.")

    def deactivate(self) -> None:
        logger.debug("Deactivating light")
        print("Light device turned off.")

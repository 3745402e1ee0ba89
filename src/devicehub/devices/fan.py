"""Fan implementation."""

import logging

from devicehub.devices.base import DeviceImplementation

logger = logging.getLogger(__name__)


class FanImplementation(DeviceImplementation):
    """Console-backed fan. Holds no state."""

    @property
    def kind(self) -> str:
        return "fan"

    def activate(self) -> None:
        logger.debug("Activating fan")
        print("Fan device turned on.")

    def deactivate(self) -> None:
        logger.debug("Deactivating fan")
        print("Fan device turned off.")

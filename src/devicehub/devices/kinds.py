"""Lookup of implementation classes by device kind."""

from devicehub.devices.base import DeviceImplementation
from devicehub.devices.fan import FanImplementation
from devicehub.devices.light import LightImplementation
from devicehub.errors import UnknownDeviceKindError

IMPLEMENTATIONS: dict[str, type[DeviceImplementation]] = {
    "light": LightImplementation,
    "fan": FanImplementation,
}


def create_implementation(kind: str) -> DeviceImplementation:
    """Create an implementation for the given device kind.

    Raises:
        UnknownDeviceKindError: If no implementation is known for ``kind``
    """
    try:
        implementation_cls = IMPLEMENTATIONS[kind]
    except KeyError:
        known = ", ".join(sorted(IMPLEMENTATIONS))
        raise UnknownDeviceKindError(
            f"Unknown device kind: {kind} (known: {known})"
        ) from None
    return implementation_cls()

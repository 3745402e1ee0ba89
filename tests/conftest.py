"""Shared fixtures for device hub tests."""

import pytest

from devicehub.devices import DeviceImplementation, Device, FanImplementation, LightImplementation
from devicehub.registry import DeviceRegistry, reset_default_registry


class RecordingImplementation(DeviceImplementation):
    """Implementation that records calls instead of printing."""

    def __init__(self, kind: str = "recorder"):
        self._kind = kind
        self.calls: list[str] = []

    @property
    def kind(self) -> str:
        return self._kind

    def activate(self) -> None:
        self.calls.append("activate")

    def deactivate(self) -> None:
        self.calls.append("deactivate")


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path, monkeypatch):
    """Keep tests away from ~/.devicehub/ and the caller's environment."""
    monkeypatch.setenv("DEVICEHUB_ENV_FILE", str(tmp_path / "missing.env"))
    monkeypatch.delenv("DEVICEHUB_LOG_LEVEL", raising=False)
    monkeypatch.delenv("DEVICEHUB_VARIANT", raising=False)


@pytest.fixture(autouse=True)
def _reset_default_registry():
    """Make every test start without a process-wide registry."""
    reset_default_registry()
    yield
    reset_default_registry()


@pytest.fixture
def registry():
    """Create an empty device registry."""
    return DeviceRegistry()


@pytest.fixture
def recorder():
    """Return an implementation that records activate/deactivate calls."""
    return RecordingImplementation()


@pytest.fixture
def light():
    """Return a light device."""
    return Device(LightImplementation())


@pytest.fixture
def fan():
    """Return a fan device."""
    return Device(FanImplementation())

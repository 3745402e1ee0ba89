"""Tests for the demonstration sequence and CLI entry point."""

import logging

import pytest

from devicehub.cli import main
from devicehub.demo import FAN_ID, LIGHT_ID, build_registry, run_demo
from devicehub.devices import CommandedDevice, Device
from devicehub.errors import ConfigError


@pytest.fixture(autouse=True)
def _restore_root_level():
    """main() adjusts the root logger level; put it back afterwards."""
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


class TestBuildRegistry:
    """Tests for building the demo registry."""

    def test_bound_variant_devices(self):
        registry = build_registry("bound")

        assert set(registry.list_device_ids()) == {LIGHT_ID, FAN_ID}
        assert type(registry.get(LIGHT_ID)) is Device
        assert registry.get(LIGHT_ID).kind == "light"
        assert registry.get(FAN_ID).kind == "fan"

    def test_shared_variant_devices(self):
        registry = build_registry("shared")

        for device_id in (LIGHT_ID, FAN_ID):
            device = registry.get(device_id)
            assert isinstance(device, CommandedDevice)
            assert device.has_on_command
            assert device.has_off_command

    def test_fills_given_registry(self, registry):
        assert build_registry("bound", registry) is registry
        assert len(registry) == 2

    def test_unknown_variant_raises(self, registry):
        with pytest.raises(ConfigError):
            build_registry("broadcast", registry)

        assert len(registry) == 0


class TestRunDemo:
    """Tests for the fixed demonstration sequence."""

    def test_bound_output(self, capsys):
        registry = build_registry("bound")

        run_demo(registry, "bound")

        assert capsys.readouterr().out == (
            "Light device turned on.\nFan device turned off.\n"
        )
        assert LIGHT_ID in registry
        assert FAN_ID in registry

    def test_shared_output(self, capsys):
        registry = build_registry("shared")

        run_demo(registry, "shared")

        assert capsys.readouterr().out == (
            "Turn on command executed.\nTurn off command executed.\n"
        )
        assert len(registry) == 2

    def test_unknown_variant_raises(self, capsys):
        registry = build_registry("bound")

        with pytest.raises(ConfigError):
            run_demo(registry, "broadcast")

        assert capsys.readouterr().out == ""


class TestMain:
    """Tests for the CLI entry point."""

    def test_default_run(self, capsys):
        assert main([]) == 0

        assert capsys.readouterr().out == (
            "Light device turned on.\nFan device turned off.\n"
        )

    def test_shared_variant_flag(self, capsys):
        assert main(["--variant", "shared"]) == 0

        assert "Turn on command executed." in capsys.readouterr().out

    def test_variant_from_config(self, capsys, monkeypatch):
        monkeypatch.setenv("DEVICEHUB_VARIANT", "shared")

        assert main([]) == 0

        assert "Turn off command executed." in capsys.readouterr().out

    def test_invalid_config_exits_1(self, capsys, monkeypatch):
        monkeypatch.setenv("DEVICEHUB_VARIANT", "broadcast")

        assert main([]) == 1
        assert capsys.readouterr().out == ""

    def test_variant_flag_wins_over_invalid_environment(self, capsys, monkeypatch):
        monkeypatch.setenv("DEVICEHUB_VARIANT", "broadcast")

        assert main(["--variant", "bound"]) == 0

        assert "Light device turned on." in capsys.readouterr().out

    def test_debug_flag(self):
        assert main(["--debug"]) == 0

        assert logging.getLogger().level == logging.DEBUG

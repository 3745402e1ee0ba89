"""MCP server for switching the hub's registered devices."""

import io
import logging
from contextlib import redirect_stdout

from fastmcp import FastMCP

from devicehub.commands import TurnOffCommand, TurnOnCommand
from devicehub.config import load_config
from devicehub.demo import build_registry
from devicehub.errors import DeviceHubError
from devicehub.registry import DeviceRegistry, get_default_registry

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Initialize FastMCP server
app = FastMCP("Device Hub")

# Process-wide registry, set once it holds the demo devices
registry = None


def get_registry() -> DeviceRegistry:
    """Get the process-wide registry, adding the demo devices on first use."""
    global registry
    if registry is not None:
        return registry

    config = load_config()
    registry = build_registry(config.variant, get_default_registry())
    logger.info("Initialized registry with %s commands", config.variant)
    return registry


def _switch(device_id: str, command_cls, past_tense: str) -> str:
    """Run a bound command for the device, returning its console output.

    Device output is captured so it does not interleave with the stdio transport.
    """
    output = io.StringIO()
    try:
        device = get_registry().require(device_id)
        with redirect_stdout(output):
            command_cls(device).execute()
    except DeviceHubError as e:
        return f"✗ {e}"

    message = f"✓ {device_id} ({device.kind}) turned {past_tense}"
    lines = output.getvalue().strip()
    return f"{message}\n{lines}" if lines else message


@app.tool()
def list_devices() -> str:
    """List the registered devices.

    Returns:
        One line per device with its id and kind
    """
    logger.info("Tool called: list_devices")
    try:
        devices = get_registry().get_all()
    except DeviceHubError as e:
        return f"✗ {e}"
    if not devices:
        return "No devices registered"
    return "\n".join(f"{device_id}: {device.kind}" for device_id, device in devices.items())


@app.tool()
def turn_on(device_id: str) -> str:
    """Turn on a registered device.

    Args:
        device_id: Registry id of the device (e.g. 'Light1')

    Returns:
        A message confirming the device was turned on
    """
    logger.info("Tool called: turn_on(%s)", device_id)
    return _switch(device_id, TurnOnCommand, "on")


@app.tool()
def turn_off(device_id: str) -> str:
    """Turn off a registered device.

    Args:
        device_id: Registry id of the device (e.g. 'Fan1')

    Returns:
        A message confirming the device was turned off
    """
    logger.info("Tool called: turn_off(%s)", device_id)
    return _switch(device_id, TurnOffCommand, "off")


def main() -> None:
    app.run()


if __name__ == "__main__":
    main()

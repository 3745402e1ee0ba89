"""Configuration loader for the device hub."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import dotenv_values

from devicehub.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_ENV_FILE = "~/.devicehub/.env"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_VARIANT = "bound"

# "bound": commands hold their device; "shared": devices hold reusable commands
VARIANTS = ("bound", "shared")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def check_variant(variant: str) -> None:
    """Raise ConfigError unless ``variant`` is one of VARIANTS."""
    if variant not in VARIANTS:
        raise ConfigError(
            f"Invalid variant {variant!r}, expected one of {', '.join(VARIANTS)}"
        )


@dataclass
class HubConfig:
    """Device hub runtime configuration."""

    log_level: str = DEFAULT_LOG_LEVEL
    variant: str = DEFAULT_VARIANT

    def validate(self) -> None:
        """Validate that all values are known."""
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(
                f"Invalid log level {self.log_level!r}, expected one of {', '.join(LOG_LEVELS)}"
            )
        check_variant(self.variant)


def load_config(
    config_path: Optional[str] = None, variant: Optional[str] = None
) -> HubConfig:
    """Load hub configuration from a dotenv file with environment variable overrides.

    Environment variables:
        DEVICEHUB_LOG_LEVEL: Override log level
        DEVICEHUB_VARIANT: Override command variant ('bound' or 'shared')
        DEVICEHUB_ENV_FILE: Override dotenv file location

    A missing dotenv file is not an error; defaults apply. An explicit
    ``variant`` argument wins over both the file and the environment.

    Args:
        config_path: Path to dotenv file. Defaults to ~/.devicehub/.env
        variant: Command variant overriding any configured value

    Returns:
        Validated HubConfig
    """
    path_str = config_path or os.environ.get("DEVICEHUB_ENV_FILE", DEFAULT_ENV_FILE)
    env_file = Path(path_str).expanduser()

    data = {}
    if env_file.exists():
        data = dotenv_values(env_file)
        logger.debug(f"Loaded config file {env_file}")

    log_level = os.environ.get(
        "DEVICEHUB_LOG_LEVEL", data.get("DEVICEHUB_LOG_LEVEL") or DEFAULT_LOG_LEVEL
    )
    if variant is None:
        variant = os.environ.get(
            "DEVICEHUB_VARIANT", data.get("DEVICEHUB_VARIANT") or DEFAULT_VARIANT
        )

    config = HubConfig(log_level=log_level.upper(), variant=variant.lower())
    config.validate()
    return config

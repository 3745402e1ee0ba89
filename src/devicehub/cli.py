"""Command-line entry point running the device hub demonstration.

Usage:
    devicehub                    # Commands bound to each device
    devicehub --variant shared   # Reusable commands assigned onto devices
    devicehub --debug            # Enable debug logging
"""

import argparse
import logging
import sys
from typing import Optional

from devicehub.config import VARIANTS, load_config
from devicehub.demo import build_registry, run_demo
from devicehub.errors import ConfigError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Run the smart device hub demonstration",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--variant",
        choices=VARIANTS,
        default=None,
        help="Command variant (default: from config, else 'bound')",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to dotenv config file (default: ~/.devicehub/.env)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

    try:
        config = load_config(args.config, variant=args.variant)
    except ConfigError as e:
        logger.error(str(e))
        return 1

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)
    else:
        logging.getLogger().setLevel(config.log_level)

    logger.info(f"Running demo with {config.variant} commands")

    registry = build_registry(config.variant)
    run_demo(registry, config.variant)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Main entry point for the who-am-I service."""

import asyncio
import logging
import sys

from pydantic import ValidationError

from whoami_service.adapters.config import AppConfig
from whoami_service.adapters.web import StarletteWebAdapter
from whoami_service.application import HeaderInspectionService

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.INFO) -> None:
    """Configure root logging for the process."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


async def main(config: AppConfig) -> None:
    """Main application entry point."""
    web_adapter = StarletteWebAdapter(HeaderInspectionService(), config)

    try:
        await web_adapter.start()
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        await web_adapter.stop()


def run() -> None:
    """Load configuration and serve until interrupted."""
    configure_logging()
    try:
        config = AppConfig()
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    logging.getLogger().setLevel(config.logging_level)
    asyncio.run(main(config))


if __name__ == "__main__":
    run()

"""Main entry point for the ÖBB departures display host."""

import asyncio
import contextlib
import logging
import signal
import sys

import aiohttp

from oebb_departures.adapters.config import AppConfig, ButtonConfigurationLoader
from oebb_departures.adapters.display import FileDisplaySurface, SvgImageComposer
from oebb_departures.adapters.oebb_api import OebbDepartureRepository
from oebb_departures.application.presentation_scheduler import PresentationScheduler
from oebb_departures.application.services import DepartureBoardService

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the host process."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


async def main() -> None:
    """Main application entry point."""
    config = AppConfig()
    configure_logging(config.log_level)

    try:
        button_configs = ButtonConfigurationLoader.load(config)
    except (ValueError, FileNotFoundError) as e:
        logger.error(f"Invalid button configuration: {e}")
        sys.exit(1)

    logger.info(f"Loaded {len(button_configs)} button(s):")
    for button in button_configs:
        logger.info(f"  - '{button.instance_id}' for station {button.settings.station_id}")

    stop_event = asyncio.Event()
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        with contextlib.suppress(NotImplementedError):
            loop.add_signal_handler(sig, stop_event.set)

    # Create aiohttp session for efficient HTTP connections
    async with aiohttp.ClientSession() as session:
        repository = OebbDepartureRepository(session=session, board_url=config.api_url)
        scheduler = PresentationScheduler(
            board_service=DepartureBoardService(repository),
            display_surface=FileDisplaySurface(config.output_dir),
            image_composer=SvgImageComposer(),
        )

        for button in button_configs:
            await scheduler.appear(button.instance_id, button.settings)

        try:
            await stop_event.wait()
        finally:
            logger.info("Shutting down...")
            await scheduler.shutdown()


def run() -> None:
    """Console script entry point."""
    with contextlib.suppress(KeyboardInterrupt):
        asyncio.run(main())


if __name__ == "__main__":
    run()

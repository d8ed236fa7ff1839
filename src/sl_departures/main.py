"""Main entry point for the SL departures application."""

import asyncio
import logging
import sys

import aiohttp

from sl_departures.adapters.config import (
    AppConfig,
    HighUpdateIntervalLoader,
    StationConfigurationLoader,
)
from sl_departures.adapters.display import LoggingDisplayAdapter
from sl_departures.adapters.scheduling import PollScheduler
from sl_departures.adapters.sl_api import SlApiSettings, SlDepartureRepository
from sl_departures.application.services import (
    FetchOrchestrator,
    FilterSettings,
    StationDepartureService,
    UpdateIntervalPolicy,
)
from sl_departures.domain.errors import ConfigurationError
from sl_departures.domain.models import DEFAULT_STATION_NAME

logger = logging.getLogger(__name__)


def configure_logging(debug: bool) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )


async def main() -> None:
    """Main application entry point."""
    config = AppConfig()

    try:
        stations = StationConfigurationLoader.load(config)
        high_update_interval = HighUpdateIntervalLoader.load(config)
    except (ValueError, FileNotFoundError) as e:
        configure_logging(config.debug)
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    configure_logging(config.debug)
    if stations is None:
        logger.warning("No stations configured; every poll will report a configuration error.")
    else:
        logger.info(f"Loaded {len(stations)} station(s):")
        for station in stations:
            name = station.station_name
            if name is None:
                name = DEFAULT_STATION_NAME
            logger.info(f"  - {station.station_id} ({name})")

    async with aiohttp.ClientSession() as session:
        repository = SlDepartureRepository(
            session,
            SlApiSettings(
                api_key=config.apikey,
                use_ssl=config.ssl,
                proxy=config.proxy,
                timeout_seconds=config.request_timeout_seconds,
                debug=config.debug,
            ),
        )
        station_service = StationDepartureService(
            repository,
            FilterSettings(direction=config.direction, global_sort=config.global_sort),
        )
        orchestrator = FetchOrchestrator(station_service, stations, LoggingDisplayAdapter())
        scheduler = PollScheduler(
            orchestrator,
            UpdateIntervalPolicy(config.update_interval, high_update_interval),
            allow_overlapping_polls=config.allow_overlapping_polls,
        )

        await scheduler.start()
        try:
            await scheduler.wait()
        except ConfigurationError as e:
            logger.error(f"Invalid configuration: {e}")
            sys.exit(1)
        finally:
            logger.info("Shutting down...")
            await scheduler.stop()


def run() -> None:
    """Console script entry point."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Interrupted")


if __name__ == "__main__":
    run()

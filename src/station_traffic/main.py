"""Main entry point for the station traffic map application."""

import asyncio
import logging
import sys

from pydantic import ValidationError

from station_traffic.adapters.config import AppConfig, MapOverlayLoader
from station_traffic.adapters.web import PyViewWebAdapter
from station_traffic.adapters.web.formatters import TimeLabelFormatter
from station_traffic.application.services import (
    ReactiveControllerFactory,
    TimeWindowFilter,
)
from station_traffic.datasets import load_dataset
from station_traffic.domain.errors import DatasetLoadError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)


async def main() -> None:
    """Main application entry point."""
    try:
        config = AppConfig()
        overlays = MapOverlayLoader.load(config)
        unfiltered_range = config.unfiltered_radius_range()
        filtered_range = config.filtered_radius_range()
        window_filter = TimeWindowFilter(config.time_window_minutes)
    except (ValidationError, ValueError, FileNotFoundError) as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    logging.getLogger().setLevel(config.log_level)
    logger.info(f"Loaded {len(overlays)} map overlay(s)")

    # No marks and no server unless both datasets load
    try:
        dataset = await load_dataset(config)
    except DatasetLoadError as e:
        logger.error(f"Error loading data: {e}")
        sys.exit(1)

    controller_factory = ReactiveControllerFactory(
        dataset,
        TimeLabelFormatter(config),
        unfiltered_range=unfiltered_range,
        filtered_range=filtered_range,
        style=config.mark_style(),
        window_filter=window_filter,
        no_filter_value=config.no_filter_value,
    )

    display_adapter = PyViewWebAdapter(controller_factory, overlays, config)

    try:
        await display_adapter.start()
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        await display_adapter.stop()


def run() -> None:
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()

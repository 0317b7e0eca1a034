"""Command-line helper for inspecting station traffic without the web UI."""

import argparse
import asyncio
import sys

from pydantic import ValidationError

from station_traffic.adapters.config import AppConfig
from station_traffic.application.services import TimeWindowFilter, TrafficAggregator
from station_traffic.datasets import load_dataset
from station_traffic.domain.errors import DatasetLoadError
from station_traffic.domain.models import ANY_TIME, StationTraffic, TimeFilter, TrafficDataset


def parse_time_argument(value: str) -> TimeFilter:
    """Parse ``--time`` as ``HH:MM`` or as minutes since midnight.

    Raises:
        argparse.ArgumentTypeError: If the value is malformed or out of range.
    """
    text = value.strip()
    try:
        if ":" in text:
            hours_text, minutes_text = text.split(":", 1)
            hours, minutes = int(hours_text), int(minutes_text)
            if not (0 <= hours < 24 and 0 <= minutes < 60):
                raise ValueError(f"{text} is not a time of day")
            return TimeFilter(hours * 60 + minutes)
        return TimeFilter(int(text))
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid time '{value}': {e}") from e


def format_clock(minute: int) -> str:
    """Format a minute of the day as ``HH:MM``."""
    return f"{minute // 60:02d}:{minute % 60:02d}"


def top_stations(
    dataset: TrafficDataset,
    time_filter: TimeFilter,
    top: int,
    window_filter: TimeWindowFilter | None = None,
) -> list[StationTraffic]:
    """Return the ``top`` busiest stations for ``time_filter``, busiest first.

    Ties keep the order of the station list.
    """
    window_filter = window_filter or TimeWindowFilter()
    trips = window_filter.filter_by_time(dataset.trips, time_filter)
    traffic = TrafficAggregator().aggregate(dataset.stations, trips)
    ranked = sorted(traffic, key=lambda entry: entry.total_traffic, reverse=True)
    return ranked[:top]


def format_summary(traffic: list[StationTraffic], time_filter: TimeFilter) -> str:
    """Render the summary table printed by the ``summary`` command."""
    if time_filter.minute is None:
        heading = "Busiest stations (any time)"
    else:
        heading = f"Busiest stations around {format_clock(time_filter.minute)}"

    lines = [heading, ""]
    if not traffic:
        lines.append("  No stations.")
    for rank, entry in enumerate(traffic, start=1):
        name = entry.station.name or entry.station_id
        lines.append(f"  {rank:>3}. {name} ({entry.station_id})")
        lines.append(
            f"       {entry.total_traffic} trips: "
            f"{entry.departures} departures, {entry.arrivals} arrivals"
        )
    return "\n".join(lines)


async def run_summary(config: AppConfig, time_filter: TimeFilter, top: int) -> str:
    """Load the datasets and build the summary text."""
    dataset = await load_dataset(config)
    traffic = top_stations(
        dataset, time_filter, top, TimeWindowFilter(config.time_window_minutes)
    )
    return format_summary(traffic, time_filter)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``station-traffic-cli`` command."""
    parser = argparse.ArgumentParser(
        description="Bike-share station traffic helper",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Busiest stations over the whole day
  station-traffic-cli summary

  # Busiest 5 stations around 8:30 in the morning
  station-traffic-cli summary --time 08:30 --top 5
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    summary_parser = subparsers.add_parser("summary", help="Print the busiest stations")
    summary_parser.add_argument(
        "--time",
        type=parse_time_argument,
        default=ANY_TIME,
        help="Time of day as HH:MM or minutes since midnight (default: any time)",
    )
    summary_parser.add_argument(
        "--top", type=int, default=10, help="Number of stations to show (default: 10)"
    )

    return parser


async def async_main(argv: list[str] | None = None) -> None:
    """Parse arguments and run the selected command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        config = AppConfig()
        config.get_overlays_config()
    except (ValidationError, ValueError, FileNotFoundError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        if args.command == "summary":
            if args.top < 1:
                print("--top must be at least 1", file=sys.stderr)
                sys.exit(1)
            print(await run_summary(config, args.time, args.top))
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)
    except DatasetLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(async_main())


if __name__ == "__main__":
    main()

"""Trip repository backed by a trip CSV export."""

from __future__ import annotations

import io
import logging

import pandas as pd

from station_traffic.adapters.data.source_reader import SourceReader
from station_traffic.domain.errors import DatasetLoadError
from station_traffic.domain.models.trip import Trip
from station_traffic.domain.ports.trip_repository import TripRepository

logger = logging.getLogger(__name__)

TRIP_COLUMNS = ["start_station_id", "end_station_id", "started_at", "ended_at"]


class CsvTripRepository(TripRepository):
    """Loads trips from a CSV with start/end station ids and timestamps."""

    def __init__(self, source: str, reader: SourceReader) -> None:
        """Initialize the repository.

        Args:
            source: URL or local path of the CSV.
            reader: Reader used to fetch the CSV text.
        """
        self.source = source
        self.reader = reader

    async def load_trips(self) -> list[Trip]:
        """Load and parse every trip row."""
        text = await self.reader.read_text(self.source)
        return self.parse_trips(text)

    def parse_trips(self, text: str) -> list[Trip]:
        """Parse CSV text into trips.

        Rows whose timestamps cannot be parsed are dropped. Missing station
        ids become empty strings, which match no station.

        Raises:
            DatasetLoadError: If the CSV is malformed or lacks a required column.
        """
        try:
            df = pd.read_csv(
                io.StringIO(text),
                usecols=TRIP_COLUMNS,
                dtype={"start_station_id": str, "end_station_id": str},
            )
        except (ValueError, pd.errors.ParserError) as e:
            raise DatasetLoadError(self.source, f"invalid trip CSV: {e}") from e

        df["started_at"] = pd.to_datetime(df["started_at"], errors="coerce", format="mixed")
        df["ended_at"] = pd.to_datetime(df["ended_at"], errors="coerce", format="mixed")
        invalid = df["started_at"].isna() | df["ended_at"].isna()
        if invalid.any():
            logger.warning(f"Dropped {int(invalid.sum())} trip(s) with unparseable timestamps")
            df = df.loc[~invalid].copy()

        df[["start_station_id", "end_station_id"]] = df[
            ["start_station_id", "end_station_id"]
        ].fillna("")

        return [
            Trip(
                start_station_id=start_id,
                end_station_id=end_id,
                started_at=started_at.to_pydatetime(),
                ended_at=ended_at.to_pydatetime(),
            )
            for start_id, end_id, started_at, ended_at in zip(
                df["start_station_id"],
                df["end_station_id"],
                df["started_at"],
                df["ended_at"],
                strict=True,
            )
        ]

"""Station repository backed by a GBFS-style station JSON document."""

from __future__ import annotations

import json
import logging
from typing import Any

from station_traffic.adapters.data.source_reader import SourceReader
from station_traffic.domain.errors import DatasetLoadError
from station_traffic.domain.models.station import Station
from station_traffic.domain.ports.station_repository import StationRepository

logger = logging.getLogger(__name__)


class JsonStationRepository(StationRepository):
    """Loads stations from ``{"data": {"stations": [...]}}``."""

    def __init__(self, source: str, reader: SourceReader, id_field: str = "short_name") -> None:
        """Initialize the repository.

        Args:
            source: URL or local path of the document.
            reader: Reader used to fetch the document text.
            id_field: Record key holding the station id.
        """
        self.source = source
        self.reader = reader
        self.id_field = id_field

    async def load_stations(self) -> list[Station]:
        """Load and parse every station record."""
        text = await self.reader.read_text(self.source)
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as e:
            raise DatasetLoadError(self.source, f"invalid JSON: {e}") from e
        return self.parse_stations(payload)

    def parse_stations(self, payload: Any) -> list[Station]:
        """Convert the decoded document into stations.

        Records without an id or numeric coordinates are skipped.

        Raises:
            DatasetLoadError: If the document has no station list.
        """
        data = payload.get("data", {}) if isinstance(payload, dict) else {}
        records = data.get("stations") if isinstance(data, dict) else None
        if not isinstance(records, list):
            raise DatasetLoadError(self.source, "missing data.stations list")

        stations: list[Station] = []
        skipped = 0
        for record in records:
            station = self._parse_record(record)
            if station is None:
                skipped += 1
                continue
            stations.append(station)

        if skipped:
            logger.warning(f"Skipped {skipped} station record(s) without id or coordinates")
        return stations

    def _parse_record(self, record: Any) -> Station | None:
        if not isinstance(record, dict):
            return None
        station_id = record.get(self.id_field)
        if station_id is None or station_id == "":
            return None
        try:
            lon = float(record["lon"])
            lat = float(record["lat"])
        except (KeyError, TypeError, ValueError):
            return None
        name = record.get("name")
        return Station(
            id=str(station_id),
            lon=lon,
            lat=lat,
            name=name if isinstance(name, str) else None,
        )

"""Dataset loading adapters."""

from station_traffic.adapters.data.csv_trip_repository import CsvTripRepository
from station_traffic.adapters.data.json_station_repository import JsonStationRepository
from station_traffic.adapters.data.source_reader import SourceReader

__all__ = ["CsvTripRepository", "JsonStationRepository", "SourceReader"]

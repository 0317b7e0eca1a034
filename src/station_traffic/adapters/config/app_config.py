"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from station_traffic.domain.models import MarkStyle, RadiusRange, Viewport


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=8000, description="Port to bind the server to")
    reload: bool = Field(default=False, description="Enable auto-reload for development")
    log_level: str = Field(default="INFO", description="Root log level")
    title: str = Field(default="Bluebikes Traffic", description="Page title")

    # Datasets
    stations_url: str = Field(
        default="https://dsc106.com/labs/lab07/data/bluebikes-stations.json",
        description="URL or local path of the station JSON document",
    )
    trips_url: str = Field(
        default="https://dsc106.com/labs/lab07/data/bluebikes-traffic-2024-03.csv",
        description="URL or local path of the trip CSV",
    )
    station_id_field: str = Field(
        default="short_name",
        description="Station record key used as the station id",
    )
    load_timeout_seconds: int = Field(
        default=60, description="Timeout for each dataset download in seconds"
    )

    # Time filter
    time_window_minutes: int = Field(
        default=60,
        description="Trips within this many minutes of the selected time are counted",
    )
    no_filter_value: int = Field(
        default=-1, description="Slider value meaning 'any time'"
    )
    time_format: str = Field(default="12h", description="Time label format: '12h' or '24h'")

    # Radius scale
    unfiltered_radius_min: float = Field(default=0.0, description="Smallest radius, no filter")
    unfiltered_radius_max: float = Field(default=25.0, description="Largest radius, no filter")
    filtered_radius_min: float = Field(default=3.0, description="Smallest radius, time filtered")
    filtered_radius_max: float = Field(default=50.0, description="Largest radius, time filtered")

    # Circle style
    mark_fill: str = Field(default="steelblue", description="Circle fill color")
    mark_stroke: str = Field(default="white", description="Circle stroke color")
    mark_stroke_width: float = Field(default=1.0, description="Circle stroke width")
    mark_opacity: float = Field(default=0.6, description="Circle opacity")

    # Map
    map_style_url: str = Field(
        default="https://tiles.openfreemap.org/styles/liberty",
        description="MapLibre style URL for the basemap",
    )
    map_center_lon: float = Field(default=-71.09415, description="Initial map center longitude")
    map_center_lat: float = Field(default=42.36027, description="Initial map center latitude")
    map_zoom: float = Field(default=12, description="Initial map zoom")
    map_min_zoom: float = Field(default=5, description="Minimum map zoom")
    map_max_zoom: float = Field(default=18, description="Maximum map zoom")
    viewport_width: int = Field(
        default=1200, description="Assumed map width until the browser reports its size"
    )
    viewport_height: int = Field(
        default=800, description="Assumed map height until the browser reports its size"
    )

    # TOML config file path
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file for overlays and display settings",
    )

    @field_validator("time_format")
    @classmethod
    def validate_time_format(cls, v: str) -> str:
        """Validate time format is either '12h' or '24h'."""
        if v.lower() not in ("12h", "24h"):
            raise ValueError("time_format must be either '12h' or '24h'")
        return v.lower()

    @field_validator("time_window_minutes")
    @classmethod
    def validate_time_window(cls, v: int) -> int:
        """Validate the window is non-negative."""
        if v < 0:
            raise ValueError("time_window_minutes must be non-negative")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        if v.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("log_level must be DEBUG, INFO, WARNING, ERROR or CRITICAL")
        return v.upper()

    def unfiltered_radius_range(self) -> RadiusRange:
        """Radius range used while no time is selected."""
        return RadiusRange(lower=self.unfiltered_radius_min, upper=self.unfiltered_radius_max)

    def filtered_radius_range(self) -> RadiusRange:
        """Radius range used while a time is selected."""
        return RadiusRange(lower=self.filtered_radius_min, upper=self.filtered_radius_max)

    def mark_style(self) -> MarkStyle:
        """Static circle style."""
        return MarkStyle(
            fill=self.mark_fill,
            stroke=self.mark_stroke,
            stroke_width=self.mark_stroke_width,
            opacity=self.mark_opacity,
        )

    def initial_viewport(self) -> Viewport:
        """Viewport assumed before the browser map reports its own."""
        return Viewport(
            center_lon=self.map_center_lon,
            center_lat=self.map_center_lat,
            zoom=self.map_zoom,
            width=self.viewport_width,
            height=self.viewport_height,
        )

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse the TOML file, updating display, scale and map settings.

        Overrides go through the same field validators as environment values.
        """
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        for section in ("display", "scale", "map"):
            values = toml_data.get(section, {})
            if not isinstance(values, dict):
                raise ValueError(f"TOML config '{section}' must be a table")
            for key, value in values.items():
                field_name = key if section != "map" or key.startswith("map_") else f"map_{key}"
                if field_name in type(self).model_fields:
                    setattr(self, field_name, value)

        return toml_data

    def get_overlays_config(self) -> list[dict[str, Any]]:
        """Parse and return the [[overlays]] list from the TOML file.

        Also applies [display], [scale] and [map] overrides. Returns an empty
        list when no config file is set.
        """
        toml_data = self._load_toml_data()

        overlays = toml_data.get("overlays", [])
        if not isinstance(overlays, list):
            raise ValueError("TOML config 'overlays' must be a list")
        return overlays

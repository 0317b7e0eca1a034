"""Coordinate projection adapters."""

from station_traffic.adapters.projection.web_mercator_projector import WebMercatorProjector

__all__ = ["WebMercatorProjector"]

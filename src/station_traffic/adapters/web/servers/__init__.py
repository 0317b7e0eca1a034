"""Servers for the web adapter."""

from station_traffic.adapters.web.servers.static_file_server import StaticFileServer

__all__ = ["StaticFileServer"]

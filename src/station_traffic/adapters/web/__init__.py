"""Web adapters for displaying the traffic map."""

from station_traffic.adapters.web.pyview_app import PyViewWebAdapter

__all__ = ["PyViewWebAdapter"]

"""Traffic map LiveView."""

from station_traffic.adapters.web.views.traffic_map.traffic_map import (
    TrafficMapLiveView,
    create_traffic_map_live_view,
)

__all__ = ["TrafficMapLiveView", "create_traffic_map_live_view"]

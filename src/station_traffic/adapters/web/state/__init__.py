"""State management for the traffic map LiveView."""

from station_traffic.adapters.web.state.map_session import MapSession
from station_traffic.adapters.web.state.state import State
from station_traffic.adapters.web.state.traffic_map_state import TrafficMapState

__all__ = ["MapSession", "State", "TrafficMapState"]

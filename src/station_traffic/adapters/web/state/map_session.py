"""Per-socket traffic map session."""

from dataclasses import dataclass

from station_traffic.adapters.projection import WebMercatorProjector
from station_traffic.adapters.web.scene import SvgSceneSurface
from station_traffic.domain.ports import TrafficController


@dataclass
class MapSession:
    """Everything one viewer's map needs between events."""

    controller: TrafficController
    projector: WebMercatorProjector
    surface: SvgSceneSurface

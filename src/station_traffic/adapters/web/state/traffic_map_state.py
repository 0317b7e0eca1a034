"""Traffic map socket state dataclass."""

from dataclasses import dataclass, field


@dataclass
class TrafficMapState:
    """State for the traffic map LiveView, one per connected socket."""

    circles: list[dict[str, str]] = field(default_factory=list)
    time_label: str = ""
    show_any_time: bool = True
    slider_value: int = -1

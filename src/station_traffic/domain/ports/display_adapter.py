"""Display adapter port."""

from abc import ABC, abstractmethod


class DisplayAdapter(ABC):
    """Port for a front end that shows the traffic map until stopped."""

    @abstractmethod
    async def start(self) -> None:
        """Serve the map. Returns once the front end shuts down."""

    @abstractmethod
    async def stop(self) -> None:
        """Ask a running front end to shut down. Safe to call before start."""

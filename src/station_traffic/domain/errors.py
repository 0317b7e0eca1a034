"""Domain-level exceptions."""


class DatasetLoadError(RuntimeError):
    """Raised when the station or trip dataset cannot be fetched or parsed."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Failed to load {source}: {reason}")
        self.source = source
        self.reason = reason

"""Application layer - traffic aggregation and scene synchronization."""

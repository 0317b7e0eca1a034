"""Adapters for the ports-and-adapters architecture."""

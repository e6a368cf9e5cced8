"""GoldArena: simulated data layer for an AI trading competition dashboard."""

__version__ = "0.1.0"
__author__ = "GoldArena Team"

__all__ = ["__version__", "__author__"]

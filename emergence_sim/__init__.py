"""Hex-grid world simulation: geometry, map indexes, signals, light, time and world generation settings."""

__version__ = "0.1.0"

__all__ = [
    "generation",
    "hexgrid",
    "light",
    "map_geometry",
    "signal_types",
    "signals",
    "terrain_manifest",
    "tiles",
    "time",
]
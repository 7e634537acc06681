"""Route group exports."""

from . import geocoding, health

__all__ = ["geocoding", "health"]

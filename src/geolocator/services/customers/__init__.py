"""Customer-facing geolocation helpers."""

from .enrichment import EnrichmentReport, assign_regions, geocode_missing_coordinates
from .nearby import find_nearby_customers

__all__ = [
    "EnrichmentReport",
    "assign_regions",
    "find_nearby_customers",
    "geocode_missing_coordinates",
]

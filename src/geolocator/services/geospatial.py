"""Geospatial helper functions."""

from __future__ import annotations

import functools
import math
from typing import Optional, Sequence

import numpy as np
from shapely.geometry import Point, Polygon, box

from ..config import settings
from ..errors import BoundsReport
from ..models.domain import Coordinate

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute distance between two coordinates using the Haversine formula.

    The haversine term is clamped to [0, 1] so near-identical or antipodal
    points cannot push ``sqrt(1 - a)`` into NaN.
    """

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(abs(lat2 - lat1))
    d_lambda = math.radians(abs(lon2 - lon1))

    a = math.sin(d_phi / 2) ** 2 + (math.cos(phi1) * math.cos(phi2)) * math.sin(d_lambda / 2) ** 2
    if a > 1.0:
        a = 1.0
    elif a < 0.0:
        a = 0.0
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def distance_km(a: Coordinate, b: Coordinate) -> float:
    return haversine_km(a.latitude, a.longitude, b.latitude, b.longitude)


def haversine_km_many(origin: Coordinate, latitudes: Sequence[float], longitudes: Sequence[float]) -> np.ndarray:
    """Vectorised haversine from one origin to many points."""

    lats = np.radians(np.asarray(latitudes, dtype=float))
    lons = np.radians(np.asarray(longitudes, dtype=float))
    phi1 = math.radians(origin.latitude)
    lambda1 = math.radians(origin.longitude)

    d_phi = np.abs(lats - phi1)
    d_lambda = np.abs(lons - lambda1)
    a = np.sin(d_phi / 2) ** 2 + (math.cos(phi1) * np.cos(lats)) * np.sin(d_lambda / 2) ** 2
    a = np.clip(a, 0.0, 1.0)
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def country_bounds_polygon(bounds: Optional[tuple[float, float, float, float]] = None) -> Polygon:
    """Return the country bounding box as a shapely polygon in (lon, lat) order."""

    return _bounds_polygon(tuple(bounds or settings.country_bounds))


@functools.lru_cache(maxsize=8)
def _bounds_polygon(bounds: tuple[float, float, float, float]) -> Polygon:
    south, west, north, east = bounds
    return box(west, south, east, north)


def is_within_country_bounds(coordinate: Coordinate, bounds: Optional[tuple[float, float, float, float]] = None) -> bool:
    """Return True if the coordinate lies inside the (inclusive) country bounding box."""

    if not coordinate.is_finite():
        return False
    polygon = country_bounds_polygon(bounds)
    return polygon.covers(Point(coordinate.longitude, coordinate.latitude))


def check_bounds(coordinate: Coordinate, bounds: Optional[tuple[float, float, float, float]] = None) -> BoundsReport:
    effective = bounds or settings.country_bounds
    return BoundsReport(
        coordinate=coordinate,
        within_bounds=is_within_country_bounds(coordinate, effective),
        bounds=tuple(effective),
    )


def degree_window(center: Coordinate, radius_km: float) -> tuple[float, float, float, float]:
    """Approximate (south, west, north, east) box enclosing a radius around ``center``."""

    angular = radius_km / EARTH_RADIUS_KM
    d_lat = math.degrees(angular)
    cos_lat = math.cos(math.radians(center.latitude))
    ratio = math.sin(min(angular, math.pi / 2)) / cos_lat if cos_lat > 1e-12 else math.inf
    d_lon = 180.0 if ratio >= 1.0 or angular >= math.pi / 2 else math.degrees(math.asin(ratio))
    return (
        center.latitude - d_lat,
        center.longitude - d_lon,
        center.latitude + d_lat,
        center.longitude + d_lon,
    )

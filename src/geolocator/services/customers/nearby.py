"""Radius search over in-memory customer records."""

from __future__ import annotations

import math
from typing import Iterable

from ...errors import InvalidInputError, require_finite
from ...models.domain import Coordinate, Customer
from ..geospatial import degree_window, distance_km, is_within_country_bounds


def find_nearby_customers(
    customers: Iterable[Customer],
    center: Coordinate,
    radius_km: float = 10.0,
) -> list[tuple[Customer, float]]:
    """Return ``(customer, distance_km)`` pairs within ``radius_km`` of ``center``, nearest first."""

    require_finite(center, "center")
    if not is_within_country_bounds(center):
        raise InvalidInputError(f"Search center {center.as_tuple()} is outside the country bounds")
    if not math.isfinite(radius_km) or radius_km < 0:
        raise InvalidInputError(f"radius_km must be a non-negative number, got {radius_km}")

    south, west, north, east = degree_window(center, radius_km)
    matches: list[tuple[Customer, float]] = []
    for customer in customers:
        coordinate = customer.coordinate
        if coordinate is None or not coordinate.is_finite():
            continue
        if not (south <= coordinate.latitude <= north and west <= coordinate.longitude <= east):
            continue
        distance = distance_km(center, coordinate)
        if distance <= radius_km:
            matches.append((customer, distance))

    matches.sort(key=lambda item: item[1])
    return matches

"""Error types and advisory reports raised or returned by the geolocation services."""

from __future__ import annotations

from dataclasses import dataclass

from .models.domain import Coordinate


class InvalidInputError(ValueError):
    """Raised when a caller passes malformed input (blank text, non-finite coordinates)."""


@dataclass(frozen=True, slots=True)
class BoundsReport:
    """Advisory result of checking a coordinate against the country bounding box."""

    coordinate: Coordinate
    within_bounds: bool
    bounds: tuple[float, float, float, float]

    @property
    def out_of_bounds(self) -> bool:
        return not self.within_bounds


def require_finite(coordinate: Coordinate, label: str = "coordinate") -> Coordinate:
    if not coordinate.is_finite():
        raise InvalidInputError(f"{label} must have finite latitude/longitude, got {coordinate.as_tuple()}")
    return coordinate

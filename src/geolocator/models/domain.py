"""Domain models for gazetteer entries, geocoding results and customer records."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class PlaceKind(str, Enum):
    REGION = "region"
    LOCALITY = "locality"


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A latitude/longitude pair in decimal degrees.

    Any float pair is representable; whether it lies inside the country is a
    question for the bounds validator.
    """

    latitude: float
    longitude: float

    def is_finite(self) -> bool:
        return math.isfinite(self.latitude) and math.isfinite(self.longitude)

    def offset(self, d_lat: float, d_lon: float) -> "Coordinate":
        return Coordinate(self.latitude + d_lat, self.longitude + d_lon)

    def as_tuple(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)


@dataclass(frozen=True, slots=True)
class GazetteerEntry:
    """Named place with an approximate center coordinate."""

    name: str
    kind: PlaceKind
    center: Coordinate


@dataclass(frozen=True, slots=True)
class ResolveRequest:
    """Raw address fields submitted for forward resolution."""

    address_text: str
    region_label: str
    district_label: Optional[str] = None


@dataclass(frozen=True, slots=True)
class GeocodeResult:
    coordinate: Coordinate
    confidence: int
    matched_entry_name: Optional[str]
    matched_kind: Optional[PlaceKind]
    strategy: Optional[str] = None


@dataclass(frozen=True, slots=True)
class RegionClassification:
    region: str
    confidence: int
    distance_km: float


@dataclass(frozen=True, slots=True)
class BatchOutcome:
    """Per-item outcome of a batch resolution run."""

    index: int
    result: Optional[GeocodeResult] = None
    error: Optional[str] = None

    @property
    def resolved(self) -> bool:
        return self.result is not None


@dataclass(slots=True)
class Customer:
    """Represents a customer record as produced by the import pipeline."""

    customer_id: str
    customer_name: str
    address: Optional[str]
    region: Optional[str]
    district: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    geocode_confidence: Optional[int] = None
    geocode_source: Optional[str] = None
    raw: dict = field(default_factory=dict)

    @property
    def coordinate(self) -> Optional[Coordinate]:
        if self.latitude is None or self.longitude is None:
            return None
        return Coordinate(self.latitude, self.longitude)

"""Gazetteer-backed resolution strategies."""

from __future__ import annotations

from typing import Optional

from ...data.gazetteer_repository import Gazetteer
from ...models.domain import GeocodeResult, PlaceKind, ResolveRequest
from .base import ResolutionStrategy
from .jitter import JitterSource


class LocalityMatchStrategy(ResolutionStrategy):
    """Match a known locality name inside the address or district text."""

    name = "locality"

    def __init__(self, *, jitter_degrees: float = 0.01, confidence: int = 85) -> None:
        self.jitter_degrees = jitter_degrees
        self.confidence = confidence

    def resolve(
        self,
        request: ResolveRequest,
        *,
        gazetteer: Gazetteer,
        jitter: JitterSource,
    ) -> Optional[GeocodeResult]:
        # Fields are searched together so table order decides between them;
        # the newline keeps a name from matching across the field boundary.
        fields = [request.address_text, request.district_label or ""]
        entry = gazetteer.find_locality_contained_in("\n".join(text.strip() for text in fields if text))
        if entry is None:
            return None

        d_lat, d_lon = jitter.offset(request, self.jitter_degrees / 2)
        return GeocodeResult(
            coordinate=entry.center.offset(d_lat, d_lon),
            confidence=self.confidence,
            matched_entry_name=entry.name,
            matched_kind=PlaceKind.LOCALITY,
            strategy=self.name,
        )


class RegionFallbackStrategy(ResolutionStrategy):
    """Fall back to the center of the labelled region."""

    name = "region"

    def __init__(self, *, jitter_degrees: float = 0.1, confidence: int = 60) -> None:
        self.jitter_degrees = jitter_degrees
        self.confidence = confidence

    def resolve(
        self,
        request: ResolveRequest,
        *,
        gazetteer: Gazetteer,
        jitter: JitterSource,
    ) -> Optional[GeocodeResult]:
        entry = gazetteer.region(request.region_label.strip())
        if entry is None:
            return None

        d_lat, d_lon = jitter.offset(request, self.jitter_degrees / 2)
        return GeocodeResult(
            coordinate=entry.center.offset(d_lat, d_lon),
            confidence=self.confidence,
            matched_entry_name=entry.name,
            matched_kind=PlaceKind.REGION,
            strategy=self.name,
        )

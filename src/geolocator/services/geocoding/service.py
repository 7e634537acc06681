"""Module-level entry points backed by shared, lazily built service instances."""

from __future__ import annotations

import functools
from typing import Optional, Sequence

from ...errors import require_finite
from ...models.domain import Coordinate, GeocodeResult, RegionClassification, ResolveRequest
from ..geospatial import distance_km, is_within_country_bounds
from .batch import BatchResolver
from .classifier import RegionClassifier
from .resolver import AddressResolver


@functools.lru_cache(maxsize=1)
def get_resolver() -> AddressResolver:
    return AddressResolver()


@functools.lru_cache(maxsize=1)
def get_classifier() -> RegionClassifier:
    return RegionClassifier()


@functools.lru_cache(maxsize=1)
def get_batch_resolver() -> BatchResolver:
    return BatchResolver(get_resolver())


def reset_services() -> None:
    """Drop cached instances so the next call picks up changed settings."""

    get_resolver.cache_clear()
    get_classifier.cache_clear()
    get_batch_resolver.cache_clear()


def resolve(request: ResolveRequest) -> Optional[GeocodeResult]:
    return get_resolver().resolve(request)


def classify_strict(coordinate: Coordinate) -> Optional[RegionClassification]:
    return get_classifier().classify_strict(coordinate)


def classify_approx(coordinate: Coordinate) -> Optional[RegionClassification]:
    return get_classifier().classify_approx(coordinate)


def distance(a: Coordinate, b: Coordinate) -> float:
    return distance_km(a, b)


def in_bounds(coordinate: Coordinate) -> bool:
    require_finite(coordinate)
    return is_within_country_bounds(coordinate)


def resolve_batch(requests: Sequence[ResolveRequest]) -> list[Optional[GeocodeResult]]:
    return get_batch_resolver().resolve_batch(requests)

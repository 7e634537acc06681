"""Forward and reverse geocoding services."""

from .base import ResolutionStrategy
from .batch import BatchResolver
from .classifier import RegionClassifier, approx_confidence
from .jitter import HashJitter, JitterSource, NoJitter, RandomJitter, get_jitter_source
from .resolver import AddressResolver, validate_request
from .service import (
    classify_approx,
    classify_strict,
    distance,
    get_batch_resolver,
    get_classifier,
    get_resolver,
    in_bounds,
    reset_services,
    resolve,
    resolve_batch,
)
from .strategies import LocalityMatchStrategy, RegionFallbackStrategy

__all__ = [
    "AddressResolver",
    "BatchResolver",
    "HashJitter",
    "JitterSource",
    "LocalityMatchStrategy",
    "NoJitter",
    "RandomJitter",
    "RegionClassifier",
    "RegionFallbackStrategy",
    "ResolutionStrategy",
    "approx_confidence",
    "classify_approx",
    "classify_strict",
    "distance",
    "get_batch_resolver",
    "get_classifier",
    "get_jitter_source",
    "get_resolver",
    "in_bounds",
    "reset_services",
    "resolve",
    "resolve_batch",
    "validate_request",
]

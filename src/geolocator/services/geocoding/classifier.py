"""Reverse geocoding: classify a coordinate to its nearest administrative region."""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from ...config import Settings, settings as default_settings
from ...data.gazetteer_repository import Gazetteer, get_gazetteer
from ...errors import require_finite
from ...models.domain import Coordinate, GazetteerEntry, RegionClassification
from ..geospatial import haversine_km_many

logger = logging.getLogger(__name__)


class RegionClassifier:
    """Nearest-region lookup with two confidence regimes.

    ``classify_strict`` is used to assign customer records to a region and
    returns a fixed confidence inside a tight radius. ``classify_approx`` labels
    arbitrary map points and scales confidence down with distance over a
    looser radius. Equidistant regions (within ``tie_epsilon_km``) resolve to
    the one declared first in the gazetteer.
    """

    def __init__(self, *, gazetteer: Optional[Gazetteer] = None, config: Optional[Settings] = None) -> None:
        self.config = config or default_settings
        self.gazetteer = gazetteer if gazetteer is not None else get_gazetteer()
        self._regions: tuple[GazetteerEntry, ...] = tuple(self.gazetteer.all_regions())
        self._latitudes = np.array([entry.center.latitude for entry in self._regions], dtype=float)
        self._longitudes = np.array([entry.center.longitude for entry in self._regions], dtype=float)

    def nearest_region(self, coordinate: Coordinate) -> Optional[tuple[GazetteerEntry, float]]:
        """Return the nearest region and its distance, with no threshold applied."""

        require_finite(coordinate)
        if not self._regions:
            return None
        distances = haversine_km_many(coordinate, self._latitudes, self._longitudes)
        minimum = float(distances.min())
        # First index within epsilon of the minimum keeps ties in table order.
        index = int(np.flatnonzero(distances <= minimum + self.config.tie_epsilon_km)[0])
        return self._regions[index], float(distances[index])

    def classify_strict(self, coordinate: Coordinate, confidence: Optional[int] = None) -> Optional[RegionClassification]:
        nearest = self.nearest_region(coordinate)
        if nearest is None:
            return None
        entry, distance = nearest
        if distance >= self.config.strict_classification_km:
            logger.debug(f"Unclassified (strict): nearest region {entry.name} is {distance:.1f} km away")
            return None
        return RegionClassification(
            region=entry.name,
            confidence=self.config.strict_confidence if confidence is None else confidence,
            distance_km=distance,
        )

    def classify_approx(self, coordinate: Coordinate) -> Optional[RegionClassification]:
        nearest = self.nearest_region(coordinate)
        if nearest is None:
            return None
        entry, distance = nearest
        if distance >= self.config.approx_classification_km:
            logger.debug(f"Unclassified (approx): nearest region {entry.name} is {distance:.1f} km away")
            return None
        return RegionClassification(
            region=entry.name,
            confidence=approx_confidence(distance, floor=self.config.approx_min_confidence),
            distance_km=distance,
        )


def approx_confidence(distance_km: float, *, floor: int = 20) -> int:
    """Confidence that falls one point per kilometre from 100, never below ``floor``."""

    return int(max(floor, min(100, round(100 - distance_km))))

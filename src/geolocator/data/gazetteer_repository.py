"""Static reference gazetteer of Tanzanian regions and localities.

Both tables are ordered and that order is significant: locality lookups return
the first table-order match, and region ties during classification resolve to
the region declared first.
"""

from __future__ import annotations

import functools
from typing import Iterable, Optional

from ..models.domain import Coordinate, GazetteerEntry, PlaceKind

# Approximate region centers (lat, lon).
REGION_CENTERS: tuple[tuple[str, float, float], ...] = (
    ("Dar es Salaam", -6.7924, 39.2083),
    ("Mwanza", -2.5164, 32.9175),
    ("Arusha", -3.3869, 36.6830),
    ("Dodoma", -6.1630, 35.7516),
    ("Mbeya", -8.9094, 33.4607),
    ("Morogoro", -6.8235, 37.6610),
    ("Tanga", -5.0692, 39.0962),
    ("Kilimanjaro", -3.3398, 37.3407),
    ("Tabora", -5.0167, 32.8000),
    ("Kigoma", -4.8761, 29.6269),
    ("Shinyanga", -3.6667, 33.4167),
    ("Kagera", -1.8000, 31.1667),
    ("Mtwara", -10.2692, 40.1836),
    ("Ruvuma", -10.7000, 35.0000),
    ("Iringa", -7.7667, 35.6833),
    ("Lindi", -9.9833, 39.7167),
    ("Singida", -4.8167, 34.7500),
    ("Rukwa", -7.4000, 31.0000),
    ("Katavi", -6.5000, 31.0000),
    ("Njombe", -9.3333, 34.7667),
    ("Simiyu", -2.8000, 34.0000),
    ("Geita", -2.8667, 32.2167),
    ("Songwe", -9.2000, 33.4500),
    ("Manyara", -3.5500, 35.5000),
    ("Pemba", -5.0500, 39.7500),
    ("Unguja", -6.1659, 39.2026),
)

# Major cities, towns and districts (lat, lon).
LOCALITY_CENTERS: tuple[tuple[str, float, float], ...] = (
    # Dar es Salaam
    ("Dar es Salaam", -6.7924, 39.2083),
    ("Ilala", -6.8161, 39.2803),
    ("Kinondoni", -6.7500, 39.2167),
    ("Temeke", -6.8500, 39.2833),
    # Mwanza
    ("Mwanza", -2.5164, 32.9175),
    ("Ilemela", -2.4833, 32.9167),
    ("Nyamagana", -2.5167, 32.9000),
    # Arusha
    ("Arusha", -3.3869, 36.6830),
    ("Moshi", -3.3398, 37.3407),
    # Other major towns
    ("Dodoma", -6.1630, 35.7516),
    ("Mbeya", -8.9094, 33.4607),
    ("Morogoro", -6.8235, 37.6610),
    ("Tanga", -5.0692, 39.0962),
    ("Tabora", -5.0167, 32.8000),
    ("Kigoma", -4.8761, 29.6269),
    ("Mtwara", -10.2692, 40.1836),
    ("Iringa", -7.7667, 35.6833),
    ("Songea", -10.6833, 35.6500),
    ("Sumbawanga", -7.9667, 31.6167),
    ("Musoma", -1.5000, 33.8000),
    ("Bukoba", -1.3333, 31.8167),
    ("Shinyanga", -3.6667, 33.4167),
)


class Gazetteer:
    """Read-only lookup tables for regions and localities."""

    __slots__ = ("_regions", "_localities", "_region_index", "_locality_keys")

    def __init__(self, regions: Iterable[GazetteerEntry], localities: Iterable[GazetteerEntry]) -> None:
        self._regions: tuple[GazetteerEntry, ...] = tuple(regions)
        self._localities: tuple[GazetteerEntry, ...] = tuple(localities)
        self._region_index: dict[str, GazetteerEntry] = {}
        for entry in self._regions:
            self._region_index.setdefault(entry.name, entry)
        self._locality_keys: tuple[tuple[str, GazetteerEntry], ...] = tuple(
            (entry.name.lower(), entry) for entry in self._localities
        )

    def find_locality_contained_in(self, text: Optional[str]) -> Optional[GazetteerEntry]:
        """Return the first locality (table order) whose name occurs in ``text``."""

        if not text:
            return None
        haystack = text.lower()
        for key, entry in self._locality_keys:
            if key in haystack:
                return entry
        return None

    def region_center(self, name: str) -> Optional[Coordinate]:
        entry = self._region_index.get(name)
        return entry.center if entry else None

    def region(self, name: str) -> Optional[GazetteerEntry]:
        return self._region_index.get(name)

    def all_regions(self) -> list[GazetteerEntry]:
        return list(self._regions)

    def all_localities(self) -> list[GazetteerEntry]:
        return list(self._localities)

    def entries(self) -> list[GazetteerEntry]:
        return [*self._regions, *self._localities]

    def __len__(self) -> int:
        return len(self._regions) + len(self._localities)


def _build_entries(rows: Iterable[tuple[str, float, float]], kind: PlaceKind) -> list[GazetteerEntry]:
    return [GazetteerEntry(name=name, kind=kind, center=Coordinate(lat, lon)) for name, lat, lon in rows]


@functools.lru_cache(maxsize=1)
def get_gazetteer() -> Gazetteer:
    """Build the shared gazetteer once per process."""

    return Gazetteer(
        regions=_build_entries(REGION_CENTERS, PlaceKind.REGION),
        localities=_build_entries(LOCALITY_CENTERS, PlaceKind.LOCALITY),
    )

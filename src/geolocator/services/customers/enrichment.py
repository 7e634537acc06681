"""Geocoding helpers used by the customer import pipeline."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from ...models.domain import Customer, ResolveRequest
from ..geocoding.batch import BatchResolver
from ..geocoding.classifier import RegionClassifier
from ..geospatial import is_within_country_bounds

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class EnrichmentReport:
    """Counts and customer ids produced by an enrichment run."""

    total: int = 0
    already_located: int = 0
    geocoded: list[str] = field(default_factory=list)
    unresolved: list[str] = field(default_factory=list)
    invalid: dict[str, str] = field(default_factory=dict)
    out_of_bounds: list[str] = field(default_factory=list)

    def as_dict(self) -> dict:
        return {
            "total": self.total,
            "alreadyLocated": self.already_located,
            "geocoded": len(self.geocoded),
            "unresolved": len(self.unresolved),
            "invalid": len(self.invalid),
            "outOfBounds": len(self.out_of_bounds),
        }


def _request_for(customer: Customer) -> ResolveRequest:
    return ResolveRequest(
        address_text=(customer.address or "").strip(),
        region_label=(customer.region or "").strip(),
        district_label=(customer.district or "").strip() or None,
    )


def geocode_missing_coordinates(
    customers: Sequence[Customer],
    batch_resolver: Optional[BatchResolver] = None,
) -> EnrichmentReport:
    """Fill in coordinates for customers that lack them.

    Customers that cannot be placed keep their empty coordinates so the import
    can still retain them.
    """

    batch_resolver = batch_resolver or BatchResolver()
    report = EnrichmentReport(total=len(customers))

    pending: list[Customer] = []
    for customer in customers:
        coordinate = customer.coordinate
        if coordinate is None:
            pending.append(customer)
            continue
        report.already_located += 1
        if not is_within_country_bounds(coordinate):
            report.out_of_bounds.append(customer.customer_id)

    outcomes = batch_resolver.resolve_batch_detailed([_request_for(customer) for customer in pending])
    for customer, outcome in zip(pending, outcomes):
        if outcome.error:
            report.invalid[customer.customer_id] = outcome.error
        elif outcome.result is None:
            report.unresolved.append(customer.customer_id)
        else:
            customer.latitude = outcome.result.coordinate.latitude
            customer.longitude = outcome.result.coordinate.longitude
            customer.geocode_confidence = outcome.result.confidence
            customer.geocode_source = outcome.result.strategy
            report.geocoded.append(customer.customer_id)

    if report.out_of_bounds:
        logger.warning(f"{len(report.out_of_bounds)} customers have coordinates outside the country bounds")
    logger.info(
        f"Customer geocoding: {len(report.geocoded)} geocoded, {len(report.unresolved)} unresolved, "
        f"{len(report.invalid)} invalid out of {report.total}"
    )
    return report


def assign_regions(customers: Sequence[Customer], classifier: Optional[RegionClassifier] = None) -> int:
    """Set ``region`` for located customers that have none. Returns the number assigned."""

    classifier = classifier or RegionClassifier()
    assigned = 0
    for customer in customers:
        if customer.region and customer.region.strip():
            continue
        coordinate = customer.coordinate
        if coordinate is None or not coordinate.is_finite():
            continue
        classification = classifier.classify_strict(coordinate)
        if classification is None:
            continue
        customer.region = classification.region
        assigned += 1
    return assigned

"""Pydantic request/response models for geocoding endpoints."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from ..models.domain import GeocodeResult, RegionClassification, ResolveRequest


class ResolveRequestModel(BaseModel):
    address: str = Field("", description="Free-text street address.")
    region: str = Field("", description="Administrative region label, matched exactly.")
    district: Optional[str] = Field(default=None, description="Optional district label.")

    def to_domain(self) -> ResolveRequest:
        return ResolveRequest(address_text=self.address, region_label=self.region, district_label=self.district)


class BatchResolveRequest(BaseModel):
    items: list[ResolveRequestModel] = Field(..., description="Requests resolved in order.")

    @field_validator("items")
    @classmethod
    def validate_items(cls, value: list[ResolveRequestModel]) -> list[ResolveRequestModel]:
        if len(value) > 10_000:
            raise ValueError("A batch may contain at most 10000 items")
        return value


class GeocodeResultModel(BaseModel):
    latitude: float
    longitude: float
    confidence: int
    matched_name: Optional[str] = None
    matched_kind: Optional[Literal["region", "locality"]] = None
    strategy: Optional[str] = None

    @classmethod
    def from_domain(cls, result: GeocodeResult) -> "GeocodeResultModel":
        return cls(
            latitude=result.coordinate.latitude,
            longitude=result.coordinate.longitude,
            confidence=result.confidence,
            matched_name=result.matched_entry_name,
            matched_kind=result.matched_kind.value if result.matched_kind else None,
            strategy=result.strategy,
        )


class BatchResolveResponse(BaseModel):
    results: list[Optional[GeocodeResultModel]]
    errors: dict[int, str] = Field(default_factory=dict)
    resolved: int


class RegionClassificationModel(BaseModel):
    region: str
    confidence: int
    distance_km: float

    @classmethod
    def from_domain(cls, classification: RegionClassification) -> "RegionClassificationModel":
        return cls(
            region=classification.region,
            confidence=classification.confidence,
            distance_km=round(classification.distance_km, 3),
        )


class DistanceResponse(BaseModel):
    distance_km: float


class BoundsModel(BaseModel):
    south: float
    west: float
    north: float
    east: float


class BoundsResponse(BaseModel):
    latitude: float
    longitude: float
    within_bounds: bool
    bounds: BoundsModel


class RegionModel(BaseModel):
    name: str
    latitude: float
    longitude: float

"""Geocoding endpoints."""

from __future__ import annotations

from typing import List, Literal

from fastapi import APIRouter, HTTPException, Query, status

from ...data.gazetteer_repository import get_gazetteer
from ...errors import InvalidInputError, require_finite
from ...models.domain import Coordinate
from ...schemas.geocoding import (
    BatchResolveRequest,
    BatchResolveResponse,
    BoundsModel,
    BoundsResponse,
    DistanceResponse,
    GeocodeResultModel,
    RegionClassificationModel,
    RegionModel,
    ResolveRequestModel,
)
from ...services.geocoding import get_batch_resolver, get_classifier, get_resolver
from ...services.geospatial import check_bounds, distance_km

router = APIRouter(prefix="/geocode", tags=["geocoding"])


@router.post("/resolve", response_model=GeocodeResultModel, status_code=status.HTTP_200_OK)
def resolve_address(payload: ResolveRequestModel) -> GeocodeResultModel:
    try:
        result = get_resolver().resolve(payload.to_domain())
    except InvalidInputError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc
    if result is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="UnresolvedLocation: no locality or region matched the request.",
        )
    return GeocodeResultModel.from_domain(result)


@router.post("/batch", response_model=BatchResolveResponse, status_code=status.HTTP_200_OK)
def resolve_batch(payload: BatchResolveRequest) -> BatchResolveResponse:
    outcomes = get_batch_resolver().resolve_batch_detailed([item.to_domain() for item in payload.items])
    results = [GeocodeResultModel.from_domain(outcome.result) if outcome.result else None for outcome in outcomes]
    errors = {outcome.index: outcome.error for outcome in outcomes if outcome.error}
    return BatchResolveResponse(
        results=results,
        errors=errors,
        resolved=sum(1 for result in results if result is not None),
    )


@router.get("/reverse", response_model=RegionClassificationModel, status_code=status.HTTP_200_OK)
def reverse_geocode(
    lat: float = Query(..., description="Latitude in decimal degrees"),
    lon: float = Query(..., description="Longitude in decimal degrees"),
    mode: Literal["strict", "approx"] = Query(default="approx", description="Classification regime"),
) -> RegionClassificationModel:
    classifier = get_classifier()
    coordinate = Coordinate(lat, lon)
    try:
        if mode == "strict":
            classification = classifier.classify_strict(coordinate)
        else:
            classification = classifier.classify_approx(coordinate)
    except InvalidInputError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc
    if classification is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Unclassified: no region center within the classification radius.",
        )
    return RegionClassificationModel.from_domain(classification)


@router.get("/distance", response_model=DistanceResponse, status_code=status.HTTP_200_OK)
def get_distance(
    lat1: float = Query(...),
    lon1: float = Query(...),
    lat2: float = Query(...),
    lon2: float = Query(...),
) -> DistanceResponse:
    try:
        origin = require_finite(Coordinate(lat1, lon1), "origin")
        target = require_finite(Coordinate(lat2, lon2), "target")
    except InvalidInputError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc
    return DistanceResponse(distance_km=distance_km(origin, target))


@router.get("/bounds", response_model=BoundsResponse, status_code=status.HTTP_200_OK)
def get_bounds_check(lat: float = Query(...), lon: float = Query(...)) -> BoundsResponse:
    try:
        coordinate = require_finite(Coordinate(lat, lon))
    except InvalidInputError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc
    report = check_bounds(coordinate)
    south, west, north, east = report.bounds
    return BoundsResponse(
        latitude=lat,
        longitude=lon,
        within_bounds=report.within_bounds,
        bounds=BoundsModel(south=south, west=west, north=north, east=east),
    )


@router.get("/regions", response_model=List[RegionModel], status_code=status.HTTP_200_OK)
def list_regions() -> List[RegionModel]:
    return [
        RegionModel(name=entry.name, latitude=entry.center.latitude, longitude=entry.center.longitude)
        for entry in get_gazetteer().all_regions()
    ]

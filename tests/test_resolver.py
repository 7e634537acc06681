from typing import Optional

import pytest

from src.geolocator.config import Settings
from src.geolocator.data.gazetteer_repository import Gazetteer
from src.geolocator.errors import InvalidInputError
from src.geolocator.models.domain import Coordinate, GeocodeResult, PlaceKind, ResolveRequest
from src.geolocator.services.geocoding import (
    AddressResolver,
    HashJitter,
    LocalityMatchStrategy,
    NoJitter,
    RandomJitter,
    RegionFallbackStrategy,
    ResolutionStrategy,
    get_jitter_source,
)
from src.geolocator.services.geocoding.dispatcher import build_chain, get_strategy


@pytest.fixture
def resolver():
    return AddressResolver(jitter=NoJitter())


def test_locality_hit_returns_exact_center_without_jitter(resolver):
    result = resolver.resolve(ResolveRequest("Kariakoo Market, Ilala", "Dar es Salaam"))

    assert result is not None
    assert result.matched_entry_name == "Ilala"
    assert result.matched_kind is PlaceKind.LOCALITY
    assert result.confidence == 85
    assert result.coordinate == Coordinate(-6.8161, 39.2803)
    assert result.strategy == "locality"


def test_locality_hit_with_random_jitter_stays_within_window():
    resolver = AddressResolver(jitter=RandomJitter(seed=7))
    for _ in range(200):
        result = resolver.resolve(ResolveRequest("Kariakoo Market, Ilala", "Dar es Salaam"))
        assert abs(result.coordinate.latitude - -6.8161) <= 0.01
        assert abs(result.coordinate.longitude - 39.2803) <= 0.01
        assert result.confidence == 85


def test_region_fallback_with_random_jitter_stays_within_window():
    resolver = AddressResolver(jitter=RandomJitter(seed=11))
    for _ in range(200):
        result = resolver.resolve(ResolveRequest("roadside kiosk", "Katavi"))
        assert result.matched_kind is PlaceKind.REGION
        assert result.matched_entry_name == "Katavi"
        assert result.confidence == 60
        assert abs(result.coordinate.latitude - -6.5) <= 0.1
        assert abs(result.coordinate.longitude - 31.0) <= 0.1


def test_region_fallback_without_jitter(resolver):
    result = resolver.resolve(ResolveRequest("roadside kiosk", "Katavi"))

    assert result.coordinate == Coordinate(-6.5, 31.0)
    assert result.strategy == "region"


def test_locality_takes_precedence_over_region(resolver):
    result = resolver.resolve(ResolveRequest("Moshi town, Kilimanjaro", "Kilimanjaro"))

    assert result.matched_kind is PlaceKind.LOCALITY
    assert result.matched_entry_name == "Moshi"
    assert result.confidence == 85


def test_region_named_locality_in_address_is_still_a_locality_match(resolver):
    result = resolver.resolve(ResolveRequest("Mwanza road", "Mwanza"))

    assert result.matched_kind is PlaceKind.LOCALITY


def test_district_label_is_searched(resolver):
    result = resolver.resolve(ResolveRequest("Plot 14, Block C", "Dar es Salaam", district_label="Temeke"))

    assert result.matched_entry_name == "Temeke"
    assert result.matched_kind is PlaceKind.LOCALITY


def test_region_label_is_trimmed_but_case_sensitive(resolver):
    assert resolver.resolve(ResolveRequest("kiosk", "  Katavi ")).matched_entry_name == "Katavi"
    assert resolver.resolve(ResolveRequest("kiosk", "katavi")) is None


def test_unresolved_location_returns_none(resolver):
    assert resolver.resolve(ResolveRequest("roadside kiosk", "Atlantis")) is None


def test_address_only_request_can_match_locality(resolver):
    result = resolver.resolve(ResolveRequest("Bukoba port", ""))

    assert result.matched_entry_name == "Bukoba"


@pytest.mark.parametrize(
    "request_",
    [
        ResolveRequest("", ""),
        ResolveRequest("   ", "  "),
        ResolveRequest(None, "Katavi"),
        ResolveRequest("kiosk", 42),
        ResolveRequest("kiosk", "Katavi", district_label=7),
        "Katavi",
    ],
)
def test_malformed_requests_raise_invalid_input(resolver, request_):
    with pytest.raises(InvalidInputError):
        resolver.resolve(request_)


def test_invalid_input_is_a_value_error():
    assert issubclass(InvalidInputError, ValueError)


def test_hash_jitter_is_reproducible():
    resolver = AddressResolver(jitter=HashJitter())
    request = ResolveRequest("Kariakoo Market, Ilala", "Dar es Salaam")

    first = resolver.resolve(request)
    second = resolver.resolve(request)

    assert first.coordinate == second.coordinate
    assert abs(first.coordinate.latitude - -6.8161) <= 0.005
    assert abs(first.coordinate.longitude - 39.2803) <= 0.005


def test_hash_jitter_differs_between_requests():
    jitter = HashJitter()

    a = jitter.offset(ResolveRequest("Shop 1, Ilala", "Dar es Salaam"), 0.05)
    b = jitter.offset(ResolveRequest("Shop 2, Ilala", "Dar es Salaam"), 0.05)

    assert a != b


def test_seeded_random_jitter_is_reproducible():
    request = ResolveRequest("kiosk", "Katavi")
    first_source, second_source = RandomJitter(seed=3), RandomJitter(seed=3)

    first = [first_source.offset(request, 0.05) for _ in range(5)]
    second = [second_source.offset(request, 0.05) for _ in range(5)]

    assert first == second
    assert len(set(first)) == 5


def test_jitter_factory_modes():
    assert isinstance(get_jitter_source("random", 1), RandomJitter)
    assert isinstance(get_jitter_source("deterministic"), HashJitter)
    assert isinstance(get_jitter_source("none"), NoJitter)
    with pytest.raises(ValueError):
        get_jitter_source("chaos")


def test_default_chain_follows_settings():
    chain = build_chain(config=Settings(resolution_chain=("region",)))

    assert [strategy.name for strategy in chain] == ["region"]

    resolver = AddressResolver(jitter=NoJitter(), strategies=chain)
    result = resolver.resolve(ResolveRequest("Kariakoo Market, Ilala", "Dar es Salaam"))
    assert result.matched_kind is PlaceKind.REGION


def test_strategy_settings_are_applied():
    config = Settings(locality_confidence=70, region_jitter_degrees=0.2)

    locality = get_strategy("locality", config=config)
    region = get_strategy("region", config=config)

    assert isinstance(locality, LocalityMatchStrategy)
    assert locality.confidence == 70
    assert isinstance(region, RegionFallbackStrategy)
    assert region.jitter_degrees == 0.2
    with pytest.raises(ValueError):
        get_strategy("ward")
    with pytest.raises(ValueError):
        build_chain(names=())


class _MarketStrategy(ResolutionStrategy):
    name = "market"

    def resolve(self, request, *, gazetteer, jitter) -> Optional[GeocodeResult]:
        if "kariakoo" not in request.address_text.lower():
            return None
        return GeocodeResult(
            coordinate=Coordinate(-6.8190, 39.2730),
            confidence=95,
            matched_entry_name="Kariakoo",
            matched_kind=PlaceKind.LOCALITY,
            strategy=self.name,
        )


def test_extra_strategy_can_be_inserted_into_chain(resolver):
    extended = resolver.with_strategy(_MarketStrategy(), position=0)

    hit = extended.resolve(ResolveRequest("Kariakoo Market, Ilala", "Dar es Salaam"))
    miss = extended.resolve(ResolveRequest("Plot 2, Ilala", "Dar es Salaam"))

    assert hit.strategy == "market"
    assert miss.strategy == "locality"
    assert [strategy.name for strategy in resolver.strategies] == ["locality", "region"]


def test_injected_empty_gazetteer_is_used():
    resolver = AddressResolver(gazetteer=Gazetteer(regions=[], localities=[]), jitter=NoJitter())

    assert resolver.resolve(ResolveRequest("kiosk", "Katavi")) is None
    assert resolver.resolve(ResolveRequest("Kariakoo Market, Ilala", "Dar es Salaam")) is None

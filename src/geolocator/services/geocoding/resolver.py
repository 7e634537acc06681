"""Forward geocoding: address and region text to an approximate coordinate."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from ...config import Settings, settings as default_settings
from ...data.gazetteer_repository import Gazetteer, get_gazetteer
from ...errors import InvalidInputError
from ...models.domain import GeocodeResult, ResolveRequest
from .base import ResolutionStrategy
from .dispatcher import build_chain
from .jitter import JitterSource, get_jitter_source

logger = logging.getLogger(__name__)


def validate_request(request: ResolveRequest) -> ResolveRequest:
    """Reject requests that indicate an upstream programming error."""

    if not isinstance(request, ResolveRequest):
        raise InvalidInputError(f"Expected ResolveRequest, got {type(request).__name__}")
    for label, value in (("address_text", request.address_text), ("region_label", request.region_label)):
        if not isinstance(value, str):
            raise InvalidInputError(f"{label} must be a string, got {type(value).__name__}")
    if request.district_label is not None and not isinstance(request.district_label, str):
        raise InvalidInputError(f"district_label must be a string, got {type(request.district_label).__name__}")
    if not request.address_text.strip() and not request.region_label.strip():
        raise InvalidInputError("address_text and region_label cannot both be empty")
    return request


class AddressResolver:
    """Try each resolution strategy in order until one places the request."""

    def __init__(
        self,
        *,
        gazetteer: Optional[Gazetteer] = None,
        jitter: Optional[JitterSource] = None,
        strategies: Optional[Sequence[ResolutionStrategy]] = None,
        config: Optional[Settings] = None,
    ) -> None:
        config = config or default_settings
        self.gazetteer = gazetteer if gazetteer is not None else get_gazetteer()
        self.jitter = jitter if jitter is not None else get_jitter_source(config.jitter_mode, config.jitter_seed)
        self.strategies: tuple[ResolutionStrategy, ...] = tuple(
            strategies if strategies is not None else build_chain(config=config)
        )

    def resolve(self, request: ResolveRequest) -> Optional[GeocodeResult]:
        """Return a result, or ``None`` when no strategy can place the request.

        Raises:
            InvalidInputError: when the request is malformed.
        """

        validate_request(request)
        for strategy in self.strategies:
            result = strategy.resolve(request, gazetteer=self.gazetteer, jitter=self.jitter)
            if result is not None:
                return result
        logger.debug(
            f"Unresolved location for address='{request.address_text}' region='{request.region_label}'"
        )
        return None

    def with_strategy(self, strategy: ResolutionStrategy, position: Optional[int] = None) -> "AddressResolver":
        """Return a copy with ``strategy`` inserted into the chain (appended by default)."""

        chain = list(self.strategies)
        chain.insert(len(chain) if position is None else position, strategy)
        return AddressResolver(gazetteer=self.gazetteer, jitter=self.jitter, strategies=chain)

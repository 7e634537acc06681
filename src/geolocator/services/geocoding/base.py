"""Base classes for forward resolution strategy implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ...data.gazetteer_repository import Gazetteer
from ...models.domain import GeocodeResult, ResolveRequest
from .jitter import JitterSource


class ResolutionStrategy(ABC):
    """Contract for one link in the forward resolution chain.

    A strategy returns a result when it can place the request and ``None``
    when the next strategy should be tried.
    """

    name: str = "strategy"

    @abstractmethod
    def resolve(
        self,
        request: ResolveRequest,
        *,
        gazetteer: Gazetteer,
        jitter: JitterSource,
    ) -> Optional[GeocodeResult]:
        raise NotImplementedError

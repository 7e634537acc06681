"""Batch forward geocoding over many independent requests."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Sequence

from ...config import Settings, settings as default_settings
from ...errors import InvalidInputError
from ...models.domain import BatchOutcome, GeocodeResult, ResolveRequest
from .resolver import AddressResolver

logger = logging.getLogger(__name__)


class BatchResolver:
    """Apply an AddressResolver to each request independently.

    Output position ``i`` always corresponds to input position ``i``; a
    malformed or unresolvable request only affects its own slot.
    """

    def __init__(
        self,
        resolver: Optional[AddressResolver] = None,
        *,
        max_workers: Optional[int] = None,
        config: Optional[Settings] = None,
    ) -> None:
        config = config or default_settings
        self.resolver = resolver or AddressResolver(config=config)
        self.max_workers = max_workers or config.batch_max_workers

    def _resolve_one(self, index: int, request: ResolveRequest) -> BatchOutcome:
        try:
            return BatchOutcome(index=index, result=self.resolver.resolve(request))
        except InvalidInputError as exc:
            logger.warning(f"Skipping invalid batch item {index}: {exc}")
            return BatchOutcome(index=index, error=str(exc))

    def resolve_batch_detailed(self, requests: Sequence[ResolveRequest]) -> list[BatchOutcome]:
        total = len(requests)
        if total == 0:
            return []

        outcomes: list[Optional[BatchOutcome]] = [None] * total
        workers = min(self.max_workers, total)
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [executor.submit(self._resolve_one, index, request) for index, request in enumerate(requests)]
            for index, future in enumerate(futures):
                outcomes[index] = future.result()

        resolved = sum(1 for outcome in outcomes if outcome and outcome.resolved)
        invalid = sum(1 for outcome in outcomes if outcome and outcome.error)
        logger.info(f"Batch geocoding finished: {resolved}/{total} resolved, {invalid} invalid")
        return [outcome for outcome in outcomes if outcome is not None]

    def resolve_batch(self, requests: Sequence[ResolveRequest]) -> list[Optional[GeocodeResult]]:
        return [outcome.result for outcome in self.resolve_batch_detailed(requests)]

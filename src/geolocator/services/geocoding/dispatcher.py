"""Factory for resolution strategies based on configured names."""

from __future__ import annotations

from typing import Any, Iterable, Optional

from ...config import Settings, settings as default_settings
from .base import ResolutionStrategy
from .strategies import LocalityMatchStrategy, RegionFallbackStrategy


def get_strategy(name: str, *, config: Optional[Settings] = None, **kwargs: Any) -> ResolutionStrategy:
    config = config or default_settings
    match name:
        case "locality":
            return LocalityMatchStrategy(
                jitter_degrees=kwargs.get("jitter_degrees", config.locality_jitter_degrees),
                confidence=kwargs.get("confidence", config.locality_confidence),
            )
        case "region":
            return RegionFallbackStrategy(
                jitter_degrees=kwargs.get("jitter_degrees", config.region_jitter_degrees),
                confidence=kwargs.get("confidence", config.region_confidence),
            )
        case _:
            raise ValueError(f"Unknown resolution strategy '{name}'.")


def build_chain(names: Optional[Iterable[str]] = None, *, config: Optional[Settings] = None) -> list[ResolutionStrategy]:
    config = config or default_settings
    chain_names = tuple(names) if names is not None else config.resolution_chain
    if not chain_names:
        raise ValueError("Resolution chain must contain at least one strategy.")
    return [get_strategy(name, config=config) for name in chain_names]

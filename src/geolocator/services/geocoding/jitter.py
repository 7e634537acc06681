"""Positional jitter sources applied to gazetteer centers.

A jitter source returns a ``(d_lat, d_lon)`` pair with each component inside
``[-max_offset, max_offset]``. ``max_offset`` is half of the configured jitter
window, so a 0.01 degree window yields offsets of at most 0.005 degrees.
"""

from __future__ import annotations

import hashlib
import random
import threading
from typing import Optional, Protocol

from ...models.domain import ResolveRequest


class JitterSource(Protocol):
    def offset(self, request: ResolveRequest, max_offset: float) -> tuple[float, float]:
        ...


class NoJitter:
    """Always returns a zero offset."""

    def offset(self, request: ResolveRequest, max_offset: float) -> tuple[float, float]:
        return (0.0, 0.0)


class RandomJitter:
    """Draw offsets from a private PRNG.

    Without a seed each instance starts from fresh OS entropy, so repeated
    calls give different coordinates. With a seed the sequence is reproducible
    for a single-threaded caller.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)
        self._lock = threading.Lock()

    def offset(self, request: ResolveRequest, max_offset: float) -> tuple[float, float]:
        with self._lock:
            u_lat = self._rng.random()
            u_lon = self._rng.random()
        return ((u_lat - 0.5) * 2 * max_offset, (u_lon - 0.5) * 2 * max_offset)


class HashJitter:
    """Derive offsets from a SHA-256 digest of the request fields.

    The same request always yields the same coordinate, across calls and
    processes.
    """

    def __init__(self, salt: str = "") -> None:
        self._salt = salt

    def offset(self, request: ResolveRequest, max_offset: float) -> tuple[float, float]:
        material = "\x1f".join(
            (self._salt, request.address_text or "", request.region_label or "", request.district_label or "")
        )
        digest = hashlib.sha256(material.encode("utf-8")).digest()
        u_lat = int.from_bytes(digest[:8], "big") / 2**64
        u_lon = int.from_bytes(digest[8:16], "big") / 2**64
        return ((u_lat - 0.5) * 2 * max_offset, (u_lon - 0.5) * 2 * max_offset)


def get_jitter_source(mode: str, seed: Optional[int] = None) -> JitterSource:
    match mode:
        case "random":
            return RandomJitter(seed)
        case "deterministic":
            return HashJitter()
        case "none":
            return NoJitter()
        case _:
            raise ValueError(f"Unknown jitter mode '{mode}'.")

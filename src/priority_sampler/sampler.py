"""Weighted sampling over cumulative distributions."""

from __future__ import annotations

import logging
import numbers
import random
from bisect import bisect_left
from typing import Any, Optional

from .cdf import build_cdf
from .config import SamplerConfig
from .errors import EmptyDomainError, InvalidDrawCountError
from .telemetry import DRAW_EVENT, EMPTY_DOMAIN_EVENT, TelemetryPublisher
from .types import Candidates, CumulativeDistribution, RandomSource

LOGGER = logging.getLogger(__name__)


def match_item(cdf: CumulativeDistribution, num: int) -> Any:
    """Return the item owning draw value ``num``.

    The owner is the earliest item whose boundary is not below ``num``, so
    with boundaries ``(1, 3)`` the value 1 maps to the first item and 2 or 3
    to the second.
    """

    if not 1 <= num <= cdf.total:
        raise ValueError(f"draw value {num} outside 1..{cdf.total}")
    return cdf.items[bisect_left(cdf.boundaries, num)]


def check_draw_count(draw_count: object) -> int:
    """Return ``draw_count`` as an ``int``, raising for negatives and non-integers."""

    if isinstance(draw_count, bool) or not isinstance(draw_count, numbers.Integral):
        raise InvalidDrawCountError(draw_count)
    if draw_count < 0:
        raise InvalidDrawCountError(draw_count)
    return int(draw_count)


def sample(
    cdf: CumulativeDistribution,
    draw_count: int,
    rng: Optional[RandomSource] = None,
) -> list[Any]:
    """Draw ``draw_count`` items with replacement, proportionally to their weight."""

    count = check_draw_count(draw_count)
    if count == 0:
        return []
    if cdf.is_empty:
        raise EmptyDomainError(count)

    source = rng if rng is not None else random
    total = cdf.total
    return [match_item(cdf, source.randint(1, total)) for _ in range(count)]


def weighted_random(
    candidates: Candidates,
    n: int = 1,
    rng: Optional[RandomSource] = None,
) -> list[Any]:
    """Build a distribution from ``candidates`` and draw ``n`` items from it."""

    return sample(build_cdf(candidates), n, rng)


def weighted_choice(candidates: Candidates, rng: Optional[RandomSource] = None) -> Any:
    """Choose a single item from ``candidates``."""

    return weighted_random(candidates, 1, rng)[0]


class WeightedSampler:
    """Configured entry point bundling a random source and telemetry."""

    def __init__(
        self,
        config: Optional[SamplerConfig] = None,
        *,
        rng: Optional[RandomSource] = None,
        telemetry: Optional[TelemetryPublisher] = None,
    ) -> None:
        self.config = config if config is not None else SamplerConfig()
        self.rng = rng if rng is not None else self.config.create_rng()
        self._telemetry = telemetry

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def build(self, candidates: Candidates) -> CumulativeDistribution:
        return build_cdf(candidates)

    def draw(self, candidates: Candidates, n: Optional[int] = None) -> list[Any]:
        """Draw ``n`` items (``config.default_draws`` when omitted)."""

        count = self.config.default_draws if n is None else n
        cdf = self.build(candidates)
        try:
            selected = sample(cdf, count, self.rng)
        except EmptyDomainError:
            LOGGER.warning("Refusing %s draw(s) from an empty distribution", count)
            self._emit_telemetry(EMPTY_DOMAIN_EVENT, {"draws": count})
            raise
        self._emit_telemetry(
            DRAW_EVENT,
            {"draws": count, "total": cdf.total, "candidates": len(cdf), "selected": list(selected)},
        )
        return selected

    def choice(self, candidates: Candidates) -> Any:
        return self.draw(candidates, 1)[0]

    def attach_telemetry(self, telemetry: Optional[TelemetryPublisher]) -> None:
        self._telemetry = telemetry

    def _emit_telemetry(self, event: str, payload: dict[str, object]) -> None:
        if self._telemetry is None or not self.config.telemetry.enabled:
            return
        self._telemetry.publish(event, payload)


__all__ = [
    "WeightedSampler",
    "check_draw_count",
    "match_item",
    "sample",
    "weighted_choice",
    "weighted_random",
]

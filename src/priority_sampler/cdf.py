"""Cumulative weight table construction."""

from __future__ import annotations

import logging
import math
import numbers
from decimal import Decimal
from typing import Any, Mapping, Optional, Sequence

from .types import Candidate, Candidates, CumulativeDistribution, WeightedItem

LOGGER = logging.getLogger(__name__)


def normalize_weight(weight: Any) -> Optional[int]:
    """Return ``weight`` as a positive ``int`` or ``None`` when it is not eligible.

    Integral numbers pass through, rationals only with a denominator of 1, and
    other real numbers (and ``Decimal``) only when finite with no fractional
    part. Booleans are rejected even though ``bool`` subclasses ``int``.
    """

    if isinstance(weight, bool):
        return None
    if isinstance(weight, numbers.Integral):
        value = int(weight)
    elif isinstance(weight, Decimal):
        if not weight.is_finite() or weight != weight.to_integral_value():
            return None
        value = int(weight)
    elif isinstance(weight, numbers.Rational):
        if weight.denominator != 1:
            return None
        value = int(weight)
    elif isinstance(weight, numbers.Real):
        if not math.isfinite(weight) or int(weight) != weight:
            return None
        value = int(weight)
    else:
        return None
    return value if value >= 1 else None


def _unpack(candidate: Candidate) -> tuple[Any, Any]:
    if isinstance(candidate, WeightedItem):
        return candidate.as_pair()
    if isinstance(candidate, Mapping):
        if "item" not in candidate or "weight" not in candidate:
            raise TypeError("candidate mappings need 'item' and 'weight' keys")
        return candidate["item"], candidate["weight"]
    if isinstance(candidate, (str, bytes)) or not isinstance(candidate, Sequence):
        raise TypeError(f"candidate must be an (item, weight) pair, got {type(candidate).__name__}")
    item, weight = candidate
    return item, weight


def build_cdf(candidates: Candidates) -> CumulativeDistribution:
    """Build the cumulative distribution for ``candidates`` in input order.

    Candidates whose weight is not a positive integer are skipped and do not
    contribute to any boundary.
    """

    items: list[Any] = []
    boundaries: list[int] = []
    running = 0
    for position, candidate in enumerate(candidates):
        item, raw_weight = _unpack(candidate)
        weight = normalize_weight(raw_weight)
        if weight is None:
            LOGGER.debug("Skipping candidate %d with ineligible weight %r", position, raw_weight)
            continue
        running += weight
        items.append(item)
        boundaries.append(running)

    return CumulativeDistribution(items=tuple(items), boundaries=tuple(boundaries), total=running)


__all__ = ["build_cdf", "normalize_weight"]

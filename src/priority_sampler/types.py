"""Common data types used across the sampling package."""

from __future__ import annotations

import time
from typing import Any, Iterable, Mapping, Protocol, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class RandomSource(Protocol):
    """Uniform integer source; ``random.Random`` and the ``random`` module both qualify."""

    def randint(self, a: int, b: int) -> int:  # pragma: no cover - protocol definition
        ...


class WeightedItem(BaseModel):
    """An opaque payload paired with its raw, not yet validated weight."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    item: Any
    weight: Any = Field(..., description="Relative likelihood; only positive integers are eligible.")

    def as_pair(self) -> tuple[Any, Any]:
        return self.item, self.weight


Candidate = Union[WeightedItem, tuple[Any, Any], Mapping[str, Any]]
Candidates = Iterable[Candidate]


class CumulativeDistribution(BaseModel):
    """Surviving items with their cumulative weight boundaries.

    ``items[i]`` owns the draw values ``boundaries[i - 1] + 1 .. boundaries[i]``
    (with an implicit ``0`` before the first boundary), so every value in
    ``1 .. total`` maps to exactly one item.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    items: tuple[Any, ...] = ()
    boundaries: tuple[int, ...] = ()
    total: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def _check_invariants(self) -> "CumulativeDistribution":
        if len(self.items) != len(self.boundaries):
            raise ValueError("items and boundaries must have the same length")
        previous = 0
        for boundary in self.boundaries:
            if boundary <= previous:
                raise ValueError("boundaries must be strictly increasing and positive")
            previous = boundary
        if self.total != previous:
            raise ValueError("total must equal the last boundary")
        return self

    @property
    def is_empty(self) -> bool:
        return self.total == 0

    def __len__(self) -> int:
        return len(self.items)

    def weights(self) -> list[int]:
        """Recover the individual weights from the cumulative boundaries."""

        previous = 0
        weights: list[int] = []
        for boundary in self.boundaries:
            weights.append(boundary - previous)
            previous = boundary
        return weights


class TelemetryEvent(BaseModel):
    """Structured event describing a sampling operation."""

    event: str
    payload: dict[str, object] = Field(default_factory=dict)
    timestamp: float = Field(default_factory=time.time)


__all__ = [
    "Candidate",
    "Candidates",
    "CumulativeDistribution",
    "RandomSource",
    "TelemetryEvent",
    "WeightedItem",
]

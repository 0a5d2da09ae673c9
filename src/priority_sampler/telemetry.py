"""Sampling telemetry: a publisher and the sinks that consume its events."""

from __future__ import annotations

import logging
import random
from collections import Counter
from typing import Any, Callable, Iterable, Optional, Protocol

from .config import TelemetryConfig
from .types import TelemetryEvent

LOGGER = logging.getLogger(__name__)

DRAW_EVENT = "sample.draw"
EMPTY_DOMAIN_EVENT = "sample.empty_domain"


class TelemetrySink(Protocol):
    """Receives published sampling events."""

    def handle(self, event: TelemetryEvent) -> None:  # pragma: no cover - protocol
        ...


class TelemetryPublisher:
    """Fan sampling events out to sinks, keeping ``config.sample_rate`` of them."""

    def __init__(
        self,
        config: TelemetryConfig,
        sinks: Iterable[TelemetrySink] = (),
        *,
        random_fn: Callable[[], float] = random.random,
    ) -> None:
        self.config = config
        self._random = random_fn
        self._sinks: list[TelemetrySink] = list(sinks)

    @property
    def sinks(self) -> tuple[TelemetrySink, ...]:
        return tuple(self._sinks)

    def add_sink(self, sink: TelemetrySink) -> TelemetrySink:
        self._sinks.append(sink)
        return sink

    def remove_sink(self, sink: TelemetrySink) -> None:
        if sink in self._sinks:
            self._sinks.remove(sink)

    def publish(self, event: str, payload: Optional[dict[str, object]] = None) -> Optional[TelemetryEvent]:
        """Build and dispatch an event; returns ``None`` when it was not kept."""

        if not self.config.enabled or self._random() > self.config.sample_rate:
            return None
        record = TelemetryEvent(event=event, payload=payload or {})
        LOGGER.debug("Publishing %s to %d sink(s)", event, len(self._sinks))
        for sink in self.sinks:
            try:
                sink.handle(record)
            except Exception:  # pragma: no cover - sink failures must not break sampling
                LOGGER.exception("Telemetry sink %r rejected %s", sink, event)
        return record


class SelectionCounter:
    """Tallies how often each item was selected across ``sample.draw`` events.

    Items are counted by value, so they must be hashable.
    """

    def __init__(self) -> None:
        self.selections: Counter[Any] = Counter()
        self.empty_domain_hits = 0

    def handle(self, event: TelemetryEvent) -> None:
        if event.event == DRAW_EVENT:
            self.selections.update(event.payload.get("selected", ()))
        elif event.event == EMPTY_DOMAIN_EVENT:
            self.empty_domain_hits += 1

    @property
    def draws(self) -> int:
        return sum(self.selections.values())

    def share(self, item: Any) -> float:
        """Observed fraction of draws that selected ``item``."""

        total = self.draws
        return self.selections[item] / total if total else 0.0


class InMemoryTelemetrySink:
    """Keeps every event it receives."""

    def __init__(self) -> None:
        self.events: list[TelemetryEvent] = []

    def handle(self, event: TelemetryEvent) -> None:
        self.events.append(event)


__all__ = [
    "DRAW_EVENT",
    "EMPTY_DOMAIN_EVENT",
    "InMemoryTelemetrySink",
    "SelectionCounter",
    "TelemetryPublisher",
    "TelemetrySink",
]

"""Configuration models for the sampler."""

from __future__ import annotations

import random
from typing import Optional

from pydantic import BaseModel, Field, PositiveInt


class TelemetryConfig(BaseModel):
    """Controls whether sampling events are published and how often."""

    enabled: bool = False
    sample_rate: float = Field(
        default=1.0,
        ge=0.0,
        le=1.0,
        description="Fraction of events forwarded to sinks.",
    )


class SamplerConfig(BaseModel):
    """Top-level configuration object for the package."""

    seed: Optional[int] = Field(
        default=None,
        description="Seed for a private random.Random; unseeded when omitted.",
    )
    default_draws: PositiveInt = Field(
        default=1,
        description="Number of draws performed when a caller does not specify one.",
    )
    telemetry: TelemetryConfig = Field(default_factory=TelemetryConfig)

    def create_rng(self) -> random.Random:
        """Return a fresh generator honouring ``seed``."""

        if self.seed is None:
            return random.Random()
        return random.Random(self.seed)


__all__ = ["SamplerConfig", "TelemetryConfig"]

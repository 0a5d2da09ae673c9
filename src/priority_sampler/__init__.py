"""Public package interface for priority_sampler."""

from .cdf import build_cdf, normalize_weight
from .config import SamplerConfig, TelemetryConfig
from .errors import CandidateFileError, EmptyDomainError, InvalidDrawCountError, SamplingError
from .loader import load_candidates
from .recommend import priority_weights, recommend
from .sampler import WeightedSampler, check_draw_count, match_item, sample, weighted_choice, weighted_random
from .telemetry import InMemoryTelemetrySink, SelectionCounter, TelemetryPublisher
from .types import CumulativeDistribution, RandomSource, TelemetryEvent, WeightedItem

__all__ = [
    "CandidateFileError",
    "CumulativeDistribution",
    "EmptyDomainError",
    "InMemoryTelemetrySink",
    "InvalidDrawCountError",
    "RandomSource",
    "SamplerConfig",
    "SamplingError",
    "SelectionCounter",
    "TelemetryConfig",
    "TelemetryEvent",
    "TelemetryPublisher",
    "WeightedItem",
    "WeightedSampler",
    "build_cdf",
    "check_draw_count",
    "load_candidates",
    "match_item",
    "normalize_weight",
    "priority_weights",
    "recommend",
    "sample",
    "weighted_choice",
    "weighted_random",
]

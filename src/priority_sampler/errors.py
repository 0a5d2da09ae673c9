"""Exception hierarchy for the sampling core."""

from __future__ import annotations


class SamplingError(Exception):
    """Base class for errors raised by priority_sampler."""


class EmptyDomainError(SamplingError, RuntimeError):
    """Raised when draws are requested from a distribution with no weight."""

    def __init__(self, draw_count: int) -> None:
        super().__init__(f"cannot draw {draw_count} item(s): no candidate has a positive weight")
        self.draw_count = draw_count


class InvalidDrawCountError(SamplingError, ValueError):
    """Raised for negative or non-integer draw counts."""

    def __init__(self, draw_count: object) -> None:
        super().__init__(f"draw count must be a non-negative integer, got {draw_count!r}")
        self.draw_count = draw_count


class CandidateFileError(SamplingError, RuntimeError):
    """Raised when a candidate file cannot be turned into candidates."""


__all__ = [
    "CandidateFileError",
    "EmptyDomainError",
    "InvalidDrawCountError",
    "SamplingError",
]

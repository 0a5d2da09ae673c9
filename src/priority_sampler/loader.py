"""Utilities for loading candidate sets from JSON or YAML files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

try:
    import yaml
except ImportError:  # pragma: no cover - optional dependency
    yaml = None

from .errors import CandidateFileError
from .types import WeightedItem


def load_candidates(path: str | Path) -> list[WeightedItem]:
    """Load ``{"item": ..., "weight": ...}`` entries from the ``candidates`` list of a file.

    Weights are returned untouched; eligibility is decided when the
    distribution is built.
    """

    data = _read_file(path)
    if not isinstance(data, dict):
        raise CandidateFileError(f"{path}: expected a mapping at the top level")
    entries = data.get("candidates") or []
    if not isinstance(entries, list):
        raise CandidateFileError(f"{path}: 'candidates' must be a list")
    if not entries:
        raise CandidateFileError(f"{path}: file contains no candidates")
    try:
        return [WeightedItem(**entry) for entry in entries]
    except (TypeError, ValidationError) as exc:
        raise CandidateFileError(f"{path}: malformed candidate entry") from exc


def _read_file(path: str | Path) -> Any:
    payload = Path(path).read_text(encoding="utf-8")
    suffix = Path(path).suffix.lower()
    if suffix in {".yaml", ".yml"}:
        if yaml is None:
            raise CandidateFileError("PyYAML is required for YAML candidate files")
        return yaml.safe_load(payload) or {}
    return json.loads(payload)


__all__ = ["load_candidates"]

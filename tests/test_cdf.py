from decimal import Decimal
from fractions import Fraction

import random

import pytest

from priority_sampler.cdf import build_cdf, normalize_weight
from priority_sampler.types import WeightedItem


def test_zero_weight_is_dropped():
    cdf = build_cdf([("A", 1), ("B", 0), ("C", 2)])

    assert cdf.items == ("A", "C")
    assert cdf.boundaries == (1, 3)
    assert cdf.total == 3


def test_all_invalid_weights_yield_empty_distribution():
    cdf = build_cdf([("A", -5), ("B", "x")])

    assert cdf.items == ()
    assert cdf.boundaries == ()
    assert cdf.total == 0
    assert cdf.is_empty


def test_empty_candidates():
    cdf = build_cdf([])

    assert len(cdf) == 0
    assert cdf.total == 0


def test_accepts_weighted_items_and_generators():
    candidates = (WeightedItem(item=name, weight=weight) for name, weight in [("a", 2), ("b", 5)])
    cdf = build_cdf(candidates)

    assert cdf.items == ("a", "b")
    assert cdf.boundaries == (2, 7)
    assert cdf.weights() == [2, 5]


def test_duplicate_items_and_weights_are_kept():
    cdf = build_cdf([("a", 1), ("a", 1), ("b", 1)])

    assert cdf.items == ("a", "a", "b")
    assert cdf.boundaries == (1, 2, 3)


@pytest.mark.parametrize(
    "weight, expected",
    [
        (1, 1),
        (7, 7),
        (2.0, 2),
        (Decimal("3"), 3),
        (Fraction(8, 2), 4),
        (Fraction(10**400, 1), 10**400),
        (Fraction(3, 2), None),
        (Fraction(-(10**400), 1), None),
        (0, None),
        (-1, None),
        (1.5, None),
        (0.5, None),
        (Decimal("2.5"), None),
        (float("inf"), None),
        (float("nan"), None),
        (True, None),
        ("3", None),
        (None, None),
    ],
)
def test_normalize_weight(weight, expected):
    assert normalize_weight(weight) == expected


def test_invariants_hold_for_mixed_input():
    raw = [("a", 3), ("b", -2), ("c", 0.25), ("d", 1), ("e", 0), ("f", 4.0), ("g", "heavy")]
    cdf = build_cdf(raw)

    assert len(cdf.items) == len(cdf.boundaries)
    assert all(left < right for left, right in zip(cdf.boundaries, cdf.boundaries[1:]))
    assert cdf.total == 3 + 1 + 4
    assert set(cdf.items) == {"a", "d", "f"}


def test_build_is_deterministic():
    raw = [("a", 3), ("b", 0), ("c", 9)]

    assert build_cdf(raw) == build_cdf(raw)


def test_malformed_candidate_raises():
    with pytest.raises(ValueError):
        build_cdf([("a", 1, "extra")])


def _random_candidates(rng):
    pool = [0, -3, 1, 2, 7, 40, 0.5, 3.0, 2.75, "x", None, True, Decimal("5"), Fraction(9, 3)]
    return [(f"item-{index}", rng.choice(pool)) for index in range(rng.randint(0, 25))]


def _expected_total(candidates):
    return sum(normalize_weight(weight) or 0 for _, weight in candidates)


@pytest.mark.parametrize("seed", range(50))
def test_invariants_hold_for_generated_candidates(seed):
    candidates = _random_candidates(random.Random(seed))
    cdf = build_cdf(candidates)

    assert len(cdf.items) == len(cdf.boundaries)
    assert all(left < right for left, right in zip((0,) + cdf.boundaries, cdf.boundaries))
    assert cdf.total == _expected_total(candidates)
    kept = [item for item, weight in candidates if normalize_weight(weight) is not None]
    assert list(cdf.items) == kept
    assert build_cdf(candidates) == cdf


def test_mapping_candidates_are_accepted():
    cdf = build_cdf([{"item": "a", "weight": 3}, {"item": "b", "weight": 0}, ("c", 1)])

    assert cdf.items == ("a", "c")
    assert cdf.boundaries == (3, 4)


@pytest.mark.parametrize(
    "candidate",
    [{"name": "a", "weight": 3}, "ab", 42, {"a", "b"}],
)
def test_unusable_candidates_raise_type_error(candidate):
    with pytest.raises(TypeError):
        build_cdf([candidate])

"""Next-task recommendation on top of the weighted sampler.

Tasks are opaque to this module: the caller passes them ordered by ascending
priority value, and each task's weight is read through ``priority``. The
priorities are paired with the tasks in reverse order, so the task listed
first is weighted by the largest priority value and is the most likely pick.
"""

from __future__ import annotations

import logging
from operator import attrgetter
from typing import Any, Callable, Optional, Sequence, Union

from .cdf import build_cdf
from .errors import InvalidDrawCountError
from .sampler import check_draw_count, sample
from .types import RandomSource, WeightedItem

LOGGER = logging.getLogger(__name__)

PriorityGetter = Union[str, Callable[[Any], Any]]


def _resolve_getter(priority: PriorityGetter) -> Callable[[Any], Any]:
    if isinstance(priority, str):
        return attrgetter(priority)
    if callable(priority):
        return priority
    raise TypeError("priority must be an attribute name or a callable")


def priority_weights(tasks: Sequence[Any], priority: PriorityGetter = "priority") -> list[WeightedItem]:
    """Pair each task with the priority of its mirror position in ``tasks``."""

    getter = _resolve_getter(priority)
    weights = [getter(task) for task in tasks]
    weights.reverse()
    return [WeightedItem(item=task, weight=weight) for task, weight in zip(tasks, weights)]


def recommend(
    tasks: Sequence[Any],
    priority: PriorityGetter = "priority",
    *,
    rng: Optional[RandomSource] = None,
    draws: Optional[int] = None,
) -> Optional[Any]:
    """Return a recommended task, or ``None`` when nothing can be recommended.

    ``draws`` defaults to the number of tasks; only the first draw is kept.
    """

    tasks = list(tasks)
    if draws is not None and check_draw_count(draws) < 1:
        raise InvalidDrawCountError(draws)
    if not tasks:
        return None

    cdf = build_cdf(priority_weights(tasks, priority))
    if cdf.is_empty:
        LOGGER.info("No task among %d has a positive priority weight", len(tasks))
        return None

    count = len(tasks) if draws is None else int(draws)
    return sample(cdf, count, rng)[0]


__all__ = ["priority_weights", "recommend"]

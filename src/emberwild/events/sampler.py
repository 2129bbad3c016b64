from __future__ import annotations
import random
from typing import Callable, Optional, Sequence, TypeVar

from ..core.rng import default_rng
from .errors import EmptySequenceError

T = TypeVar("T")


def weighted_choice(
    items: Sequence[T],
    weight_fn: Callable[[T], float],
    rng: Optional[random.Random] = None,
) -> T:
    """
    Picks one item with probability proportional to its weight.

    Weights are relative masses and need not sum to 1. Negative weights count
    as zero. If no item carries positive weight the pick is uniform over the
    sequence.
    """
    if not items:
        raise EmptySequenceError("Cannot select from an empty sequence.")
    rng = rng or default_rng

    weights = [max(0.0, float(weight_fn(item))) for item in items]
    if sum(weights) <= 0:
        return rng.choice(items)

    # choices() draws r in [0, total) and bisects the running sums, so the
    # first item whose cumulative weight exceeds r wins
    return rng.choices(items, weights=weights, k=1)[0]

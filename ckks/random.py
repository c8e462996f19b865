"""Weighted random sampling used by the CKKS encoder."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence
from typing import Optional, TypeVar

T = TypeVar("T")


class UniformRandomGenerator:
    """A random source that picks items by weight."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)

    def weighted_choice(self, choices: Sequence[T], weights: Sequence[float]) -> T:
        """Pick one of ``choices``; the greater an item's weight, the likelier it is.

        Raises ``ValueError`` when the weights are empty, negative, not finite,
        sum to zero, or outnumber the choices.
        """
        weights = [float(w) for w in weights]
        if not weights:
            raise ValueError("weights must not be empty")
        if any(not math.isfinite(w) or w < 0.0 for w in weights):
            raise ValueError("weights must be finite and non-negative")
        if sum(weights) <= 0.0:
            raise ValueError("weights must not all be zero")
        if len(choices) < len(weights):
            raise ValueError("there are fewer choices than weights")
        (index,) = self._rng.choices(range(len(weights)), weights=weights)
        return choices[index]
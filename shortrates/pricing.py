"""Small pricing helpers."""

from __future__ import annotations

import math
from collections.abc import Iterable


def average(values: Iterable[float]) -> float:
    """Return the arithmetic mean of ``values``."""
    items = list(values)
    if not items:
        raise ValueError("average of an empty sequence")
    return math.fsum(items) / len(items)


def discount_factor(r: float, maturity: float) -> float:
    """Return the continuously compounded discount factor."""
    return math.exp(-r * maturity)


def forward_rate(spot: float, t: float, maturity: float) -> float:
    """Return the spot rate scaled by ``maturity / t``."""
    return (spot * maturity) / t
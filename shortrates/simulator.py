"""Monte Carlo simulation of short-rate paths and bond prices."""

from __future__ import annotations

import random
from typing import NamedTuple

from shortrates.models import InterestRateModel

DEFAULT_SEED = 1
STEPS = 100
SIMULATION_DT = 0.01


class MonteCarloResult(NamedTuple):
    """Average bond price together with the price from each path."""

    mean: float
    prices: list[float]


def _generator(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random(DEFAULT_SEED)


def _require_paths(paths: int) -> None:
    if paths < 1:
        raise ValueError(f"number of paths must be positive, got {paths}")


def _final_rate(
    model: InterestRateModel, r0: float, dt: float, steps: int, rng: random.Random
) -> float:
    r = r0
    for _ in range(steps):
        r = model.simulate_next_rate(r, dt, rng.gauss(0.0, 1.0))
    return r


def simulate_rates(
    model: InterestRateModel,
    r0: float,
    dt: float,
    steps: int,
    paths: int,
    rng: random.Random | None = None,
) -> list[float]:
    """Simulate ``paths`` rate paths of ``steps`` steps and return each final rate."""
    gen = _generator(rng)
    return [_final_rate(model, r0, dt, steps, gen) for _ in range(paths)]


def simulate_bond_price(
    model: InterestRateModel,
    r0: float,
    maturity: float,
    paths: int,
    rng: random.Random | None = None,
) -> float:
    """Average bond price over final rates of paths with a fixed step of 0.01."""
    _require_paths(paths)
    rates = simulate_rates(model, r0, SIMULATION_DT, STEPS, paths, rng)
    return sum(model.bond_price(r, maturity) for r in rates) / paths


def monte_carlo_bond_price(
    model: InterestRateModel,
    r0: float,
    maturity: float,
    num_paths: int,
    rng: random.Random | None = None,
) -> MonteCarloResult:
    """Price a bond by simulating paths over ``maturity`` in 100 equal steps."""
    _require_paths(num_paths)
    gen = _generator(rng)
    dt = maturity / STEPS
    prices = [
        model.bond_price(_final_rate(model, r0, dt, STEPS, gen), maturity)
        for _ in range(num_paths)
    ]
    return MonteCarloResult(sum(prices) / num_paths, prices)
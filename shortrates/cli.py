"""Command line entry point comparing bond prices across short-rate models."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence

from shortrates.models import (
    BDTModel,
    CIRModel,
    HJMModel,
    HoLeeModel,
    HullWhiteModel,
    InterestRateModel,
    VasicekModel,
)
from shortrates.simulator import DEFAULT_SEED, monte_carlo_bond_price


def _models() -> dict[str, InterestRateModel]:
    return {
        "Vasicek": VasicekModel(0.1, 0.05, 0.01),
        "CIR": CIRModel(0.1, 0.05, 0.01),
        "Hull-White": HullWhiteModel(0.1, 0.01),
        "BDT": BDTModel(0.02, 0.01),
        "HJM": HJMModel(0.01, lambda t: 0.03 + 0.002 * t),
        "Ho-Lee": HoLeeModel(0.01, lambda t: 0.02),
    }


def price_all_models(
    r0: float = 0.03,
    maturity: float = 1.0,
    num_paths: int = 1000,
    seed: int = DEFAULT_SEED,
) -> dict[str, float]:
    """Return the Monte Carlo bond price for each model, each from a fresh generator."""
    return {
        name: monte_carlo_bond_price(model, r0, maturity, num_paths, random.Random(seed)).mean
        for name, model in _models().items()
    }


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Average zero-coupon bond prices under several short-rate models."
    )
    parser.add_argument("--r0", type=float, default=0.03, help="initial short rate")
    parser.add_argument("--maturity", type=float, default=1.0, help="bond maturity in years")
    parser.add_argument("--paths", type=int, default=1000, help="number of simulated paths")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="random seed")
    args = parser.parse_args(argv)

    if args.paths < 1:
        parser.error("--paths must be positive")

    prices = price_all_models(args.r0, args.maturity, args.paths, args.seed)
    for name, price in prices.items():
        print(f"Average Bond Price for {name} Model: {price:g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
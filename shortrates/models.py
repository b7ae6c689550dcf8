"""Short-rate models: one-step rate evolution and zero-coupon bond pricing."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass

HULL_WHITE_FORWARD_RATE = 0.05


def _flat_discount(r: float, maturity: float) -> float:
    return math.exp(-r * maturity)


class InterestRateModel(ABC):
    """A short-rate model that can step a rate forward and price a bond."""

    @abstractmethod
    def simulate_next_rate(self, r: float, dt: float, z: float) -> float:
        """Return the rate after a step of length ``dt`` driven by shock ``z``."""

    @abstractmethod
    def bond_price(self, r: float, maturity: float) -> float:
        """Return the price of a zero-coupon bond paying 1 at ``maturity``."""


@dataclass(frozen=True)
class VasicekModel(InterestRateModel):
    """Mean-reverting Gaussian short rate."""

    kappa: float
    theta: float
    sigma: float

    def simulate_next_rate(self, r: float, dt: float, z: float) -> float:
        return r + self.kappa * (self.theta - r) * dt + self.sigma * math.sqrt(dt) * z

    def bond_price(self, r: float, maturity: float) -> float:
        return _flat_discount(r, maturity)


@dataclass(frozen=True)
class CIRModel(InterestRateModel):
    """Mean-reverting square-root diffusion short rate."""

    kappa: float
    theta: float
    sigma: float

    def simulate_next_rate(self, r: float, dt: float, z: float) -> float:
        variance = r * dt
        # A negative rate has no real square root; propagate NaN like IEEE sqrt.
        diffusion = math.sqrt(variance) if variance >= 0 else math.nan
        return r + self.kappa * (self.theta - r) * dt + self.sigma * diffusion * z

    def bond_price(self, r: float, maturity: float) -> float:
        return _flat_discount(r, maturity)


@dataclass(frozen=True)
class HullWhiteModel(InterestRateModel):
    """Hull-White short rate reverting to a fixed forward rate."""

    a: float
    sigma: float
    forward_rate: float = HULL_WHITE_FORWARD_RATE

    def simulate_next_rate(self, r: float, dt: float, z: float) -> float:
        return r + self.a * (self.forward_rate - r) * dt + self.sigma * math.sqrt(dt) * z

    def bond_price(self, r: float, maturity: float) -> float:
        a, sigma = self.a, self.sigma
        b = (1.0 - math.exp(-a * maturity)) / a
        log_a = (b - maturity) * (self.forward_rate * a - 0.5 * sigma * sigma / (a * a)) - (
            sigma * sigma * b * b
        ) / (4 * a)
        return math.exp(log_a) * math.exp(-b * r)


@dataclass(frozen=True)
class BDTModel(InterestRateModel):
    """Black-Derman-Toy style lognormal short rate with constant volatility."""

    sigma0: float
    dt: float

    def simulate_next_rate(self, r: float, dt: float, z: float) -> float:
        sigma = self.sigma0
        return r * math.exp(-0.5 * sigma * sigma * dt + sigma * math.sqrt(dt) * z)

    def bond_price(self, r: float, maturity: float) -> float:
        return _flat_discount(r, maturity)


@dataclass(frozen=True)
class HJMModel(InterestRateModel):
    """Simplified HJM model with constant volatility and a deterministic forward curve."""

    sigma: float
    forward_curve: Callable[[float], float]

    def simulate_next_rate(self, r: float, dt: float, z: float) -> float:
        return r + self.sigma * math.sqrt(dt) * z

    def bond_price(self, r: float, maturity: float) -> float:
        return math.exp(-self.forward_curve(maturity) * maturity)


@dataclass(frozen=True)
class HoLeeModel(InterestRateModel):
    """Ho-Lee short rate with a time-dependent drift evaluated at t = 0."""

    sigma: float
    theta: Callable[[float], float]

    def simulate_next_rate(self, r: float, dt: float, z: float) -> float:
        t = 0.0
        return r + self.theta(t) * dt + self.sigma * math.sqrt(dt) * z

    def bond_price(self, r: float, maturity: float) -> float:
        return _flat_discount(r, maturity)
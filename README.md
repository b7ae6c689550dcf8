# shortrates

Short-rate interest rate models and a small Monte Carlo engine for pricing
zero-coupon bonds.

## Models

All models live in `shortrates.models`. They are frozen dataclasses that
implement the abstract `InterestRateModel` interface:

- `simulate_next_rate(r, dt, z)` advances the short rate `r` by one time step
  `dt`, given a standard normal shock `z`.
- `bond_price(r, maturity)` gives the price of a zero-coupon bond that pays 1
  at `maturity`, given the short rate `r`.

| Class            | Fields                                            |
|------------------|---------------------------------------------------|
| `VasicekModel`   | `kappa`, `theta`, `sigma`                         |
| `CIRModel`       | `kappa`, `theta`, `sigma`                         |
| `HullWhiteModel` | `a`, `sigma`, `forward_rate` (default `0.05`)     |
| `BDTModel`       | `sigma0`, `dt`                                    |
| `HJMModel`       | `sigma`, `forward_curve` (a function of time)     |
| `HoLeeModel`     | `sigma`, `theta` (a drift function of time)       |

The rate dynamics work as follows:

- **Vasicek and CIR** revert to `theta` at speed `kappa`. In CIR the shock is
  scaled by `sqrt(r * dt)`. A negative rate in CIR gives NaN.
- **Hull-White** reverts to `forward_rate` at speed `a`.
- **BDT** steps lognormally with constant volatility `sigma0`. It uses the
  `dt` passed to `simulate_next_rate`, not its `dt` field.
- **HJM** adds a pure volatility shock.
- **Ho-Lee** adds the drift `theta(0) * dt` and a volatility shock.

The bond prices are deliberately simple:

- Vasicek, CIR, BDT and Ho-Lee discount with `exp(-r * maturity)`.
- Hull-White uses its affine closed form.
- HJM discounts with `forward_curve(maturity)` and ignores `r`.

## Simulation

`shortrates.simulator` provides the following functions:

- `simulate_rates(model, r0, dt, steps, paths, rng=None)` returns a list with
  the final short rate of each simulated path.
- `simulate_bond_price(model, r0, maturity, paths, rng=None)` returns the mean
  bond price over paths of 100 steps of 0.01 each.
- `monte_carlo_bond_price(model, r0, maturity, num_paths, rng=None)` runs 100
  steps of `maturity / 100`. It returns a `MonteCarloResult` named tuple of
  `mean` and `prices`, which holds the price from each path.

Both pricing functions raise `ValueError` unless the number of paths is
positive.

When `rng` is omitted, a `random.Random` seeded with `1` is used, so results
are reproducible. You can pass your own `random.Random` instead:

```python
import random
from shortrates.models import VasicekModel
from shortrates.simulator import monte_carlo_bond_price

model = VasicekModel(kappa=0.1, theta=0.05, sigma=0.01)
mean, per_path = monte_carlo_bond_price(model, 0.03, 1.0, 1000, random.Random(42))
print(mean, len(per_path))
```

`shortrates.pricing` has three helpers:

- `average(values)` raises `ValueError` on an empty input.
- `discount_factor(r, maturity)` returns `exp(-r * maturity)`.
- `forward_rate(spot, t, maturity)` returns `spot * maturity / t`.

## Command line

```
shortrates
shortrates --r0 0.04 --maturity 2 --paths 5000 --seed 7
```

The command prints the average bond price under each of the six models. Every
model draws from a fresh generator with the same seed.

| Option       | Default | Meaning                     |
|--------------|---------|-----------------------------|
| `--r0`       | 0.03    | Initial short rate          |
| `--maturity` | 1.0     | Bond maturity in years      |
| `--paths`    | 1000    | Number of paths; must be positive |
| `--seed`     | 1       | Random seed                 |

`price_all_models(r0, maturity, num_paths, seed)` in `shortrates.cli` returns
the same figures as a dict that maps each model name to its price.

## What it does not do

The models do not fit themselves to market data. Volatilities, mean-reversion
parameters and curves are whatever you pass in. The bond formulas other than
Hull-White are flat-rate approximations, not the models' exact closed forms.

## Tests

```
pip install -e .[test]
pytest
```
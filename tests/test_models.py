import math

import pytest

from shortrates.models import (
    BDTModel,
    CIRModel,
    HJMModel,
    HoLeeModel,
    HullWhiteModel,
    InterestRateModel,
    VasicekModel,
)


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        InterestRateModel()


def test_flat_bond_price_at_zero_rate_is_par():
    models = [
        VasicekModel(0.1, 0.05, 0.01),
        CIRModel(0.1, 0.05, 0.01),
        BDTModel(0.02, 0.01),
        HoLeeModel(0.01, lambda t: 0.02),
    ]
    assert [model.bond_price(0.0, 3.0) for model in models] == [1.0] * 4


def test_flat_bond_price_at_zero_maturity_is_par():
    models = [
        VasicekModel(0.1, 0.05, 0.01),
        CIRModel(0.1, 0.05, 0.01),
        BDTModel(0.02, 0.01),
        HoLeeModel(0.01, lambda t: 0.02),
    ]
    assert [model.bond_price(0.07, 0.0) for model in models] == [1.0] * 4


def test_flat_bond_price_compounds_over_maturities():
    models = [
        VasicekModel(0.1, 0.05, 0.01),
        CIRModel(0.1, 0.05, 0.01),
        BDTModel(0.02, 0.01),
        HoLeeModel(0.01, lambda t: 0.02),
    ]
    for model in models:
        combined = model.bond_price(0.04, 1.5) * model.bond_price(0.04, 2.5)
        assert model.bond_price(0.04, 4.0) == pytest.approx(combined)


def test_flat_bond_price_decreases_with_rate():
    models = [
        VasicekModel(0.1, 0.05, 0.01),
        CIRModel(0.1, 0.05, 0.01),
        BDTModel(0.02, 0.01),
        HoLeeModel(0.01, lambda t: 0.02),
    ]
    for model in models:
        assert model.bond_price(0.02, 2.0) > model.bond_price(0.05, 2.0)


def test_vasicek_stays_at_mean_without_shock():
    model = VasicekModel(0.3, 0.04, 0.02)
    assert model.simulate_next_rate(0.04, 0.5, 0.0) == pytest.approx(0.04)


def test_vasicek_reverts_towards_mean():
    model = VasicekModel(0.5, 0.04, 0.02)
    assert 0.04 < model.simulate_next_rate(0.08, 0.1, 0.0) < 0.08
    assert 0.01 < model.simulate_next_rate(0.01, 0.1, 0.0) < 0.04


def test_vasicek_is_linear_in_shock():
    model = VasicekModel(0.5, 0.04, 0.02)
    up = model.simulate_next_rate(0.03, 0.1, 1.0)
    mid = model.simulate_next_rate(0.03, 0.1, 0.0)
    down = model.simulate_next_rate(0.03, 0.1, -1.0)
    assert up - mid == pytest.approx(mid - down)
    assert up > mid > down


def test_vasicek_zero_step_keeps_rate():
    model = VasicekModel(0.5, 0.04, 0.02)
    assert model.simulate_next_rate(0.03, 0.0, 2.0) == 0.03


def test_cir_shock_vanishes_at_zero_rate():
    model = CIRModel(0.2, 0.05, 0.1)
    assert model.simulate_next_rate(0.0, 0.1, 3.0) == model.simulate_next_rate(0.0, 0.1, -3.0)


def test_cir_stays_at_mean_without_shock():
    model = CIRModel(0.2, 0.05, 0.1)
    assert model.simulate_next_rate(0.05, 0.25, 0.0) == pytest.approx(0.05)


def test_cir_negative_rate_gives_nan():
    model = CIRModel(0.2, 0.05, 0.1)
    value = model.simulate_next_rate(-0.01, 0.1, 1.0)
    assert str(value) == "nan"
    assert math.isnan(value)


def test_cir_shock_grows_with_rate():
    model = CIRModel(0.2, 0.05, 0.1)
    low = model.simulate_next_rate(0.01, 0.1, 1.0) - model.simulate_next_rate(0.01, 0.1, 0.0)
    high = model.simulate_next_rate(0.09, 0.1, 1.0) - model.simulate_next_rate(0.09, 0.1, 0.0)
    assert high > low > 0


def test_hull_white_reverts_to_fixed_forward_rate():
    model = HullWhiteModel(0.1, 0.01)
    assert model.simulate_next_rate(0.05, 0.5, 0.0) == pytest.approx(0.05)


def test_hull_white_bond_price_at_zero_maturity_is_par():
    model = HullWhiteModel(0.1, 0.01)
    assert model.bond_price(0.03, 0.0) == pytest.approx(1.0)


def test_hull_white_bond_price_decreases_with_rate():
    model = HullWhiteModel(0.1, 0.01)
    low = model.bond_price(0.01, 2.0)
    high = model.bond_price(0.06, 2.0)
    assert 0.0 < high < low < 1.0


def test_hull_white_zero_reversion_divides_by_zero():
    model = HullWhiteModel(0.0, 0.01)
    with pytest.raises(ZeroDivisionError):
        model.bond_price(0.03, 1.0)


def test_bdt_without_volatility_keeps_rate():
    model = BDTModel(0.0, 0.01)
    assert model.simulate_next_rate(0.03, 0.1, 2.5) == 0.03


def test_bdt_rate_stays_positive():
    model = BDTModel(0.5, 0.01)
    for z in (-10.0, -1.0, 0.0, 1.0, 10.0):
        assert model.simulate_next_rate(0.03, 0.1, z) > 0.0


def test_bdt_is_proportional_to_rate():
    model = BDTModel(0.2, 0.01)
    assert model.simulate_next_rate(0.06, 0.1, 0.7) == pytest.approx(
        2 * model.simulate_next_rate(0.03, 0.1, 0.7)
    )


def test_bdt_zero_rate_stays_zero():
    model = BDTModel(0.2, 0.01)
    assert model.simulate_next_rate(0.0, 0.1, 1.3) == 0.0


def test_hjm_step_without_shock_keeps_rate():
    model = HJMModel(0.01, lambda t: 0.03)
    assert model.simulate_next_rate(0.04, 0.1, 0.0) == 0.04


def test_hjm_bond_price_ignores_short_rate():
    model = HJMModel(0.01, lambda t: 0.03 + 0.002 * t)
    assert model.bond_price(0.01, 2.0) == model.bond_price(0.5, 2.0)


def test_hjm_bond_price_reads_curve_at_maturity():
    seen = []

    def curve(t):
        seen.append(t)
        return 0.0

    model = HJMModel(0.01, curve)
    assert model.bond_price(0.03, 4.0) == 1.0
    assert seen == [4.0]


def test_ho_lee_evaluates_drift_at_time_zero():
    seen = []

    def theta(t):
        seen.append(t)
        return 0.0

    model = HoLeeModel(0.0, theta)
    assert model.simulate_next_rate(0.03, 0.1, 1.0) == 0.03
    assert seen == [0.0]


def test_ho_lee_drift_adds_per_unit_time():
    model = HoLeeModel(0.0, lambda t: 0.02)
    one = model.simulate_next_rate(0.03, 1.0, 0.0) - 0.03
    half = model.simulate_next_rate(0.03, 0.5, 0.0) - 0.03
    assert one == pytest.approx(2 * half)
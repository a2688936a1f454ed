import pytest

from selfcheck.schemas import MoneyMode
from selfcheck.tvm import future_value, monthly_pmt, pv_of_annuity, required_contribution, yearly_pmt


def test_future_value_compounds_annually():
    assert future_value(100, 10, 2) == pytest.approx(121.0)


def test_future_value_zero_years_is_identity():
    for rate in (0, 3.5, 10):
        assert future_value(2500, rate, 0) == 2500


def test_future_value_negative_years_clamped():
    assert future_value(1000, 5, -3) == 1000


def test_future_value_never_below_present_value():
    for pv in (0, 1, 1000):
        for rate in (0, 1, 7.5):
            for years in (0, 0.5, 12):
                fv = future_value(pv, rate, years)
                assert fv >= pv
                if pv > 0 and rate > 0 and years > 0:
                    assert fv > pv


def test_pv_of_annuity_zero_rate_is_payment_times_months():
    assert pv_of_annuity(500, 0, 2.5) == 500 * 30
    assert pv_of_annuity(500, 0, 0) == 500  # at least one period


def test_pv_of_annuity_discounts_future_withdrawals():
    value = pv_of_annuity(1000, 6, 10)
    assert value < 1000 * 120
    assert value == pytest.approx(90073.45, rel=1e-4)


def test_monthly_pmt_is_zero_when_savings_already_cover_target():
    assert monthly_pmt(1000, 2000, 0, 5) == 0
    assert monthly_pmt(10_000, 9_000, 5, 10) == 0


def test_monthly_pmt_without_growth_spreads_gap_evenly():
    assert monthly_pmt(1200, 0, 0, 1) == pytest.approx(100.0)
    assert monthly_pmt(1200, 600, 0, 1) == pytest.approx(50.0)


def test_yearly_pmt_sinking_fund_factor():
    assert yearly_pmt(1000, 0, 10, 2) == pytest.approx(476.19, abs=0.01)


def test_non_positive_duration_floors_to_one_period():
    assert yearly_pmt(1000, 0, 0, 0) == 1000
    assert monthly_pmt(1000, 0, 0, -2) == 1000


def test_required_contribution_follows_mode():
    monthly = required_contribution(MoneyMode.monthly, 50_000, 1_000, 4, 10)
    yearly = required_contribution(MoneyMode.annual, 50_000, 1_000, 4, 10)
    assert monthly == monthly_pmt(50_000, 1_000, 4, 10)
    assert yearly == yearly_pmt(50_000, 1_000, 4, 10)
    assert yearly > monthly * 11

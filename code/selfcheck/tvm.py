"""Time-value-of-money primitives shared by every self-check tool.

Rates are percentages (4 means 4%). Contributions are level payments at the
end of each period (ordinary annuity).
"""
from .sanitize import round_half_up
from .schemas import MoneyMode


def future_value(pv: float, rate_pct: float, years: float) -> float:
    r = rate_pct / 100.0
    return pv * (1 + r) ** max(0.0, years)


def pv_of_annuity(monthly: float, annual_return_pct: float, years: float) -> float:
    """Lump sum that funds ``years`` of ``monthly`` withdrawals while earning the given return."""
    n = max(1, round_half_up(years * 12))
    r = annual_return_pct / 100.0 / 12.0
    if r == 0:
        return monthly * n
    return monthly * ((1 - (1 + r) ** -n) / r)


def _sinking_fund_payment(target_fv: float, current_pv: float, r: float, n: int) -> float:
    fv_current = current_pv * (1 + r) ** n
    gap = max(target_fv - fv_current, 0.0)
    if r == 0:
        return gap / n
    return gap * (r / ((1 + r) ** n - 1))


def monthly_pmt(target_fv: float, current_pv: float, annual_return_pct: float, years: float) -> float:
    n = max(1, round_half_up(years * 12))
    r = annual_return_pct / 100.0 / 12.0
    return _sinking_fund_payment(target_fv, current_pv, r, n)


def yearly_pmt(target_fv: float, current_pv: float, annual_return_pct: float, years: float) -> float:
    n = max(1, round_half_up(years))
    r = annual_return_pct / 100.0
    return _sinking_fund_payment(target_fv, current_pv, r, n)


def required_contribution(
    mode: MoneyMode,
    target_fv: float,
    current_pv: float,
    annual_return_pct: float,
    years: float,
) -> float:
    if MoneyMode(mode) is MoneyMode.annual:
        return yearly_pmt(target_fv, current_pv, annual_return_pct, years)
    return monthly_pmt(target_fv, current_pv, annual_return_pct, years)

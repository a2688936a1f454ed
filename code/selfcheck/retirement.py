from typing import Optional

from .schemas import RetirementInput, RetirementResult
from .tvm import future_value, monthly_pmt, pv_of_annuity, yearly_pmt

BIG_GAP_THRESHOLD = 500_000.0
TIGHT_RUNWAY_YEARS = 5


def readiness_label(gap_at_ret: float, years_to_retire: float) -> str:
    if gap_at_ret <= 0:
        return "On track"
    if years_to_retire <= TIGHT_RUNWAY_YEARS:
        return "Tight runway"
    if gap_at_ret >= BIG_GAP_THRESHOLD:
        return "Big gap"
    return "Gap to plan"


def compute_retirement(inputs: RetirementInput) -> Optional[RetirementResult]:
    expense = max(0.0, inputs.expense_today)
    if expense <= 0:
        return None

    current_age = max(0, inputs.current_age)
    retire_age = max(0, inputs.retire_age)
    end_age = max(0, inputs.end_age)
    years_to_retire = max(0, retire_age - current_age)
    years_in_retirement = max(1, end_age - retire_age)

    savings = max(0.0, inputs.savings)
    pre = max(0.0, inputs.pre_return_pct)
    post = max(0.0, inputs.post_return_pct)

    expense_at_ret = future_value(expense, max(0.0, inputs.inflation_pct), years_to_retire)
    net_monthly_need = max(expense_at_ret - max(0.0, inputs.income_at_ret), 0.0)
    nest_egg = pv_of_annuity(net_monthly_need, post, years_in_retirement)
    fv_savings = future_value(savings, pre, years_to_retire)
    gap = max(nest_egg - fv_savings, 0.0)

    return RetirementResult(
        years_to_retire=years_to_retire,
        years_in_retirement=years_in_retirement,
        expense_at_ret=expense_at_ret,
        net_monthly_need_at_ret=net_monthly_need,
        nest_egg_at_ret=nest_egg,
        fv_current_savings_at_ret=fv_savings,
        gap_at_ret=gap,
        monthly_set_aside=monthly_pmt(nest_egg, savings, pre, years_to_retire),
        yearly_set_aside=yearly_pmt(nest_egg, savings, pre, years_to_retire),
        label=readiness_label(gap, years_to_retire),
    )

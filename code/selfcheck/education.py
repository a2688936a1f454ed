from typing import List, Optional

from .sanitize import round_half_up
from .schemas import EducationInput, EducationResult, StudyYearCost
from .tvm import future_value, monthly_pmt, yearly_pmt


def study_year_costs(annual_at_start: float, inflation_pct: float, study_years: int, start_age: int) -> List[StudyYearCost]:
    rows: List[StudyYearCost] = []
    for i in range(study_years):
        rows.append(
            StudyYearCost(
                study_year=i + 1,
                child_age=start_age + i,
                cost=future_value(annual_at_start, inflation_pct, i),
            )
        )
    return rows


def compute_education(inputs: EducationInput) -> Optional[EducationResult]:
    annual_cost = max(0.0, inputs.annual_cost_today)
    if annual_cost <= 0:
        return None

    study_years = max(1, round_half_up(inputs.study_years))
    years_to_start = max(0, inputs.start_age - inputs.child_age)
    inflation = max(0.0, inputs.inflation_pct)
    ret = max(0.0, inputs.return_pct)
    savings = max(0.0, inputs.savings)

    annual_at_start = future_value(annual_cost, inflation, years_to_start)
    # Totals cover every study year; only the display is truncated.
    breakdown = study_year_costs(annual_at_start, inflation, study_years, inputs.start_age)
    total_future_cost = sum(row.cost for row in breakdown)

    fv_savings_at_start = future_value(savings, ret, years_to_start)

    return EducationResult(
        years_to_start=years_to_start,
        annual_at_start=annual_at_start,
        total_future_cost=total_future_cost,
        fv_savings_at_start=fv_savings_at_start,
        gap_at_start=max(total_future_cost - fv_savings_at_start, 0.0),
        monthly_set_aside=monthly_pmt(total_future_cost, savings, ret, years_to_start),
        yearly_set_aside=yearly_pmt(total_future_cost, savings, ret, years_to_start),
        breakdown=breakdown,
    )

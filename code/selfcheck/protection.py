from typing import Optional

from .sanitize import clamp, round1
from .schemas import Gender, MoneyMode, ProtectionInput, ProtectionResult

# Singapore life expectancy at birth, 2024 (SingStat life tables).
SG_LE_AT_BIRTH_2024 = {
    Gender.male: 81.2,
    Gender.female: 85.6,
    Gender.unspecified: 83.5,
}

# Rule-of-thumb multiples of annual commitments.
DEATH_TPD_MULTIPLE = 9
CI_MULTIPLE = 4


def monthly_commitments(inputs: ProtectionInput) -> float:
    value = max(0.0, inputs.monthly_commitments)
    if MoneyMode(inputs.commitments_mode) is MoneyMode.annual:
        return value / 12.0
    return value


def years_remaining_hint(age: int, gender: Gender) -> Optional[float]:
    if age <= 0:
        return None
    life_expectancy = SG_LE_AT_BIRTH_2024[Gender(gender)]
    return clamp(round1(life_expectancy - age), 0.0, 70.0)


def risk_from_total_gap(total_gap: float, annual_commitments: float) -> str:
    ratio = total_gap / max(1.0, annual_commitments)
    if ratio <= 8:
        return "LOW"
    if ratio <= 20:
        return "MODERATE"
    return "RISK"


def compute_protection(inputs: ProtectionInput) -> Optional[ProtectionResult]:
    monthly = monthly_commitments(inputs)
    years = max(0.0, inputs.years_to_support)
    if monthly <= 0 or years <= 0:
        return None

    annual = monthly * 12
    tpd_years = years if inputs.tpd_years_cover is None else max(0.0, inputs.tpd_years_cover)
    replace_pct = clamp(inputs.income_replace_pct, 0.0, 100.0)

    death_need = annual * years + max(0.0, inputs.one_time_costs) + max(0.0, inputs.debts_to_clear)
    tpd_need = annual * tpd_years * (replace_pct / 100.0)
    ci_need = monthly * max(0.0, inputs.ci_months_cover) + max(0.0, inputs.ci_one_off_buffer)

    ex_death = max(0.0, inputs.existing_death)
    ex_tpd = max(0.0, inputs.existing_tpd)
    ex_ci = max(0.0, inputs.existing_ci)

    death_gap = max(death_need - ex_death, 0.0)
    tpd_gap = max(tpd_need - ex_tpd, 0.0)
    ci_gap = max(ci_need - ex_ci, 0.0)
    total_gap = death_gap + tpd_gap + ci_gap

    return ProtectionResult(
        annual_commitments=annual,
        years_to_support=years,
        death_need=death_need,
        tpd_need=tpd_need,
        ci_need=ci_need,
        existing_death=ex_death,
        existing_tpd=ex_tpd,
        existing_ci=ex_ci,
        death_gap=death_gap,
        tpd_gap=tpd_gap,
        ci_gap=ci_gap,
        total_gap=total_gap,
        gap_ratio=total_gap / max(1.0, annual),
        label=risk_from_total_gap(total_gap, annual),
        death_tpd_thumb=annual * DEATH_TPD_MULTIPLE,
        ci_thumb=annual * CI_MULTIPLE,
        years_remaining_hint=years_remaining_hint(inputs.age, inputs.gender),
        dependents=max(0, int(inputs.dependents)),
    )

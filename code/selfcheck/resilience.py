from typing import Optional

from .sanitize import clamp, round1, round_half_up
from .schemas import IncomeStability, MoneyMode, ResilienceInput, ResilienceResult

BUFFER_WEIGHT = 0.45
SHOCK_WEIGHT = 0.35
AWARENESS_WEIGHT = 0.2

# dependents -> penalty when there is no life cover; 3 means "3 or more"
DEPENDENT_PENALTIES = {0: 0.0, 1: 12.0, 2: 18.0, 3: 22.0}


def essentials_monthly(inputs: ResilienceInput) -> float:
    value = max(0.0, inputs.essentials)
    if MoneyMode(inputs.expense_mode) is MoneyMode.annual:
        return value / 12.0
    return value


def buffer_score(buffer_months: float) -> float:
    if buffer_months <= 0:
        return 0.0
    if buffer_months < 1:
        return 10.0
    if buffer_months < 3:
        return 30.0
    if buffer_months < 6:
        return 60.0
    if buffer_months < 12:
        return 85.0
    return 95.0


def dependent_penalty(dependents: int, has_life: bool) -> float:
    if has_life:
        return 0.0
    key = min(max(int(dependents), 0), 3)
    return DEPENDENT_PENALTIES[key]


def score_label(score: float) -> str:
    if score < 40:
        return "Low"
    if score >= 70:
        return "Strong"
    return "Moderate"


def buffer_target_months(stability: IncomeStability) -> int:
    return 12 if IncomeStability(stability) is IncomeStability.irregular else 6


def runway_tag(months: float, stability: IncomeStability) -> str:
    target = buffer_target_months(stability)
    if months <= 0.5:
        return "FRAGILE"
    if months < 3:
        return "BUILDING"
    if months < target:
        return "DECENT"
    return "STRONG"


def next_milestone(months: float, stability: IncomeStability) -> int:
    target = buffer_target_months(stability)
    if months < 1:
        return 1
    if months < 3:
        return 3
    if months < target:
        return target
    return 12


def compute_resilience(inputs: ResilienceInput) -> Optional[ResilienceResult]:
    essentials = essentials_monthly(inputs)
    if essentials <= 0:
        return None
    savings = max(0.0, inputs.savings)

    buffer_months = savings / essentials
    b_score = buffer_score(buffer_months)

    shock_need = essentials * max(0.0, inputs.shock_months) * (clamp(inputs.income_drop_pct, 0.0, 100.0) / 100.0)
    shock_gap = max(shock_need - savings, 0.0)
    shock_surplus = max(savings - shock_need, 0.0)
    if shock_need > 0:
        shock_score = clamp(100.0 - shock_gap / shock_need * 100.0, 0.0, 100.0)
    else:
        shock_score = 100.0

    flags = [inputs.has_life, inputs.has_critical_illness, inputs.has_disability]
    awareness_score = sum(1 for f in flags if f) / 3.0 * 100.0
    penalty = dependent_penalty(inputs.dependents, inputs.has_life)

    raw = b_score * BUFFER_WEIGHT + shock_score * SHOCK_WEIGHT + awareness_score * AWARENESS_WEIGHT - penalty
    score = int(clamp(round_half_up(raw), 0, 100))

    target = buffer_target_months(inputs.income_stability)
    runway = round1(buffer_months)
    milestone = next_milestone(runway, inputs.income_stability)

    return ResilienceResult(
        essentials_monthly=essentials,
        buffer_months=buffer_months,
        buffer_score=b_score,
        shock_need=shock_need,
        shock_gap=shock_gap,
        shock_surplus=shock_surplus,
        shock_score=shock_score,
        awareness_score=awareness_score,
        dependent_penalty=penalty,
        score=score,
        label=score_label(score),
        shock_months=inputs.shock_months,
        buffer_target_months=target,
        buffer_target_amount=essentials * target,
        runway_tag=runway_tag(runway, inputs.income_stability),
        next_milestone_months=milestone,
        next_milestone_amount=essentials * milestone,
        notes=inputs.notes.strip(),
    )

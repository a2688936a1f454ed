from typing import Optional

from .sanitize import round1, round_half_up
from .schemas import (
    EducationResult,
    MoneyMode,
    ProtectionResult,
    ResilienceResult,
    RetirementResult,
    ScenarioKind,
)

SEPARATOR = " • "


def format_currency(value: float) -> str:
    return f"${max(0, round_half_up(value)):,}"


def _period(mode: MoneyMode) -> str:
    return "yearly" if MoneyMode(mode) is MoneyMode.annual else "monthly"


def summarize_resilience(result: ResilienceResult) -> str:
    months = f"{result.shock_months:g}"
    parts = [
        f"Resilience Score {result.score}/100",
        f"Buffer {round1(result.buffer_months):.1f} months",
        f"{months}-month shock gap {format_currency(result.shock_gap)}",
    ]
    if result.notes.strip():
        parts.append(f"Note: {result.notes.strip()}")
    return SEPARATOR.join(parts)


def summarize_protection(result: ProtectionResult) -> str:
    return SEPARATOR.join(
        [
            "Protection Gap Check",
            f"Annual commitments {format_currency(result.annual_commitments)}",
            f"Death gap {format_currency(result.death_gap)}",
            f"TPD gap {format_currency(result.tpd_gap)}",
            f"CI gap {format_currency(result.ci_gap)}",
            f"Total gap {format_currency(result.total_gap)}",
            f"Risk {result.label}",
        ]
    )


def summarize_education(result: EducationResult, mode: MoneyMode = MoneyMode.monthly) -> str:
    return SEPARATOR.join(
        [
            "Education Goal",
            f"Cost at start ~{format_currency(result.annual_at_start)}/yr",
            f"Total target ~{format_currency(result.total_future_cost)}",
            f"Horizon {result.years_to_start:g} yrs",
            f"Suggested {_period(mode)} ~{format_currency(result.set_aside(mode))}",
        ]
    )


def summarize_retirement(result: RetirementResult, mode: MoneyMode = MoneyMode.monthly) -> str:
    return SEPARATOR.join(
        [
            "Retirement",
            f"Expense at retirement ~{format_currency(result.expense_at_ret)}/mo",
            f"Net need ~{format_currency(result.net_monthly_need_at_ret)}/mo",
            f"Target nest egg ~{format_currency(result.nest_egg_at_ret)}",
            f"Suggested {_period(mode)} ~{format_currency(result.set_aside(mode))}",
        ]
    )


def summarize(kind: ScenarioKind, result: Optional[object], mode: MoneyMode = MoneyMode.monthly) -> str:
    if result is None:
        return ""
    kind = ScenarioKind(kind)
    if kind is ScenarioKind.resilience:
        return summarize_resilience(result)  # type: ignore[arg-type]
    if kind is ScenarioKind.protection:
        return summarize_protection(result)  # type: ignore[arg-type]
    if kind is ScenarioKind.education:
        return summarize_education(result, mode)  # type: ignore[arg-type]
    return summarize_retirement(result, mode)  # type: ignore[arg-type]

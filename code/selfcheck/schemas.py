from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class ScenarioKind(str, Enum):
    resilience = "resilience"
    protection = "protection"
    education = "education"
    retirement = "retirement"


class MoneyMode(str, Enum):
    monthly = "monthly"
    annual = "annual"


class IncomeStability(str, Enum):
    stable = "stable"
    irregular = "irregular"


class Gender(str, Enum):
    male = "male"
    female = "female"
    unspecified = "unspecified"


# Inputs hold values already sanitized by the form layer.


@dataclass
class ResilienceInput:
    essentials: float = 0.0
    savings: float = 0.0
    dependents: int = 0
    has_life: bool = False
    has_critical_illness: bool = False
    has_disability: bool = False
    expense_mode: MoneyMode = MoneyMode.monthly
    income_stability: IncomeStability = IncomeStability.stable
    shock_months: float = 6.0
    income_drop_pct: float = 50.0
    notes: str = ""


@dataclass
class ProtectionInput:
    monthly_commitments: float = 0.0
    years_to_support: float = 20.0
    one_time_costs: float = 0.0
    income_replace_pct: float = 60.0
    ci_months_cover: float = 24.0
    existing_death: float = 0.0
    existing_tpd: float = 0.0
    existing_ci: float = 0.0
    commitments_mode: MoneyMode = MoneyMode.monthly
    debts_to_clear: float = 0.0
    ci_one_off_buffer: float = 0.0
    tpd_years_cover: Optional[float] = None
    age: int = 0
    gender: Gender = Gender.unspecified
    dependents: int = 0


@dataclass
class EducationInput:
    child_age: int = 3
    start_age: int = 18
    study_years: float = 4
    annual_cost_today: float = 25000.0
    inflation_pct: float = 4.0
    savings: float = 0.0
    return_pct: float = 4.0


@dataclass
class RetirementInput:
    current_age: int = 25
    retire_age: int = 65
    end_age: int = 90
    expense_today: float = 3000.0
    inflation_pct: float = 3.0
    income_at_ret: float = 0.0
    savings: float = 0.0
    pre_return_pct: float = 4.0
    post_return_pct: float = 3.0


class _Result:
    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)  # type: ignore[call-overload]


@dataclass(frozen=True)
class ResilienceResult(_Result):
    essentials_monthly: float
    buffer_months: float
    buffer_score: float
    shock_need: float
    shock_gap: float
    shock_surplus: float
    shock_score: float
    awareness_score: float
    dependent_penalty: float
    score: int
    label: str
    shock_months: float
    buffer_target_months: int
    buffer_target_amount: float
    runway_tag: str
    next_milestone_months: int
    next_milestone_amount: float
    notes: str = ""


@dataclass(frozen=True)
class ProtectionResult(_Result):
    annual_commitments: float
    years_to_support: float
    death_need: float
    tpd_need: float
    ci_need: float
    existing_death: float
    existing_tpd: float
    existing_ci: float
    death_gap: float
    tpd_gap: float
    ci_gap: float
    total_gap: float
    gap_ratio: float
    label: str
    death_tpd_thumb: float
    ci_thumb: float
    years_remaining_hint: Optional[float] = None
    dependents: int = 0


@dataclass(frozen=True)
class StudyYearCost:
    study_year: int
    child_age: int
    cost: float


@dataclass(frozen=True)
class EducationResult(_Result):
    years_to_start: float
    annual_at_start: float
    total_future_cost: float
    fv_savings_at_start: float
    gap_at_start: float
    monthly_set_aside: float
    yearly_set_aside: float
    breakdown: List[StudyYearCost] = field(default_factory=list)

    DISPLAY_ROWS = 6

    @property
    def display_rows(self) -> List[StudyYearCost]:
        return self.breakdown[: self.DISPLAY_ROWS]

    def set_aside(self, mode: MoneyMode = MoneyMode.monthly) -> float:
        return self.yearly_set_aside if MoneyMode(mode) is MoneyMode.annual else self.monthly_set_aside


@dataclass(frozen=True)
class RetirementResult(_Result):
    years_to_retire: float
    years_in_retirement: float
    expense_at_ret: float
    net_monthly_need_at_ret: float
    nest_egg_at_ret: float
    fv_current_savings_at_ret: float
    gap_at_ret: float
    monthly_set_aside: float
    yearly_set_aside: float
    label: str

    def set_aside(self, mode: MoneyMode = MoneyMode.monthly) -> float:
        return self.yearly_set_aside if MoneyMode(mode) is MoneyMode.annual else self.monthly_set_aside

"""Step-by-step wizard state shared by the four self-check tools.

A wizard is an ordered list of steps, each with a completeness predicate
over the tool's input. A step can be entered only when every earlier step is
complete, so steps can't be skipped. Going back is always allowed. Nothing
survives a reload: a fresh ``Wizard`` starts at the first step.
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Sequence

from .sanitize import clamp
from .schemas import ScenarioKind

Predicate = Callable[[Any], bool]


def _always(_inputs: Any) -> bool:
    return True


@dataclass
class Wizard:
    steps: Sequence[str]
    predicates: Dict[str, Predicate] = field(default_factory=dict)
    current: str = ""

    def __post_init__(self) -> None:
        if not self.steps:
            raise ValueError("A wizard needs at least one step")
        unknown = set(self.predicates) - set(self.steps)
        if unknown:
            raise ValueError(f"Predicates for unknown steps: {sorted(unknown)}")
        if not self.current:
            self.current = self.steps[0]
        elif self.current not in self.steps:
            raise ValueError(f"Unknown step: {self.current}")

    @property
    def index(self) -> int:
        return list(self.steps).index(self.current)

    def is_complete(self, step: str, inputs: Any) -> bool:
        return self.predicates.get(step, _always)(inputs)

    def can_enter(self, step: str, inputs: Any) -> bool:
        if step not in self.steps:
            return False
        position = list(self.steps).index(step)
        return all(self.is_complete(s, inputs) for s in self.steps[:position])

    def next(self, inputs: Any) -> str:
        idx = self.index
        if idx < len(self.steps) - 1 and self.is_complete(self.current, inputs):
            self.current = self.steps[idx + 1]
        return self.current

    def back(self) -> str:
        self.current = self.steps[max(self.index - 1, 0)]
        return self.current

    def go_to(self, step: str, inputs: Any) -> bool:
        if not self.can_enter(step, inputs):
            return False
        self.current = step
        return True

    def reconcile(self, inputs: Any) -> str:
        while self.index > 0 and not self.can_enter(self.current, inputs):
            self.current = self.steps[self.index - 1]
        return self.current

    def progress(self) -> float:
        if len(self.steps) == 1:
            return 100.0
        return clamp(self.index / (len(self.steps) - 1) * 100.0, 0.0, 100.0)

    def reset(self) -> None:
        self.current = self.steps[0]


RESILIENCE_STEPS = ("start", "runway", "shock", "notes", "snapshot")
PROTECTION_STEPS = ("profile", "needs", "existing", "results")
PLANNER_STEPS = ("basics", "costs", "savings", "results")


def _resilience_runway_ok(inputs: Any) -> bool:
    return inputs.essentials > 0 and inputs.savings >= 0


def _resilience_shock_ok(inputs: Any) -> bool:
    return 3 <= inputs.shock_months <= 12 and 10 <= inputs.income_drop_pct <= 90


def _protection_profile_ok(inputs: Any) -> bool:
    return inputs.age > 0


def _protection_needs_ok(inputs: Any) -> bool:
    return inputs.monthly_commitments > 0 and inputs.years_to_support > 0


def _education_basics_ok(inputs: Any) -> bool:
    return inputs.start_age >= inputs.child_age >= 0 and inputs.study_years >= 1


def _retirement_basics_ok(inputs: Any) -> bool:
    return 0 <= inputs.current_age <= inputs.retire_age < inputs.end_age


def _non_negative_savings(inputs: Any) -> bool:
    return inputs.savings >= 0


def resilience_wizard() -> Wizard:
    return Wizard(
        RESILIENCE_STEPS,
        {"runway": _resilience_runway_ok, "shock": _resilience_shock_ok},
    )


def protection_wizard() -> Wizard:
    return Wizard(
        PROTECTION_STEPS,
        {"profile": _protection_profile_ok, "needs": _protection_needs_ok},
    )


def education_wizard() -> Wizard:
    return Wizard(
        PLANNER_STEPS,
        {
            "basics": _education_basics_ok,
            "costs": lambda i: i.annual_cost_today > 0,
            "savings": _non_negative_savings,
        },
    )


def retirement_wizard() -> Wizard:
    return Wizard(
        PLANNER_STEPS,
        {
            "basics": _retirement_basics_ok,
            "costs": lambda i: i.expense_today > 0,
            "savings": _non_negative_savings,
        },
    )


WIZARDS: Dict[ScenarioKind, Callable[[], Wizard]] = {
    ScenarioKind.resilience: resilience_wizard,
    ScenarioKind.protection: protection_wizard,
    ScenarioKind.education: education_wizard,
    ScenarioKind.retirement: retirement_wizard,
}


def wizard_for(kind: ScenarioKind) -> Wizard:
    return WIZARDS[ScenarioKind(kind)]()

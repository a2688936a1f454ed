from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple, Type

from .education import compute_education
from .handoff import ContactContext
from .protection import compute_protection
from .resilience import compute_resilience
from .retirement import compute_retirement
from .schemas import (
    EducationInput,
    MoneyMode,
    ProtectionInput,
    ResilienceInput,
    RetirementInput,
    ScenarioKind,
)
from .summary import summarize

STRATEGIES: Dict[ScenarioKind, Tuple[Type[Any], Callable[[Any], Any]]] = {
    ScenarioKind.resilience: (ResilienceInput, compute_resilience),
    ScenarioKind.protection: (ProtectionInput, compute_protection),
    ScenarioKind.education: (EducationInput, compute_education),
    ScenarioKind.retirement: (RetirementInput, compute_retirement),
}


@dataclass(frozen=True)
class Estimate:
    kind: ScenarioKind
    result: Optional[Any]
    summary: str
    handoff: ContactContext

    @property
    def has_result(self) -> bool:
        return self.result is not None

    @property
    def label(self) -> Optional[str]:
        return getattr(self.result, "label", None)


def default_input(kind: ScenarioKind) -> Any:
    input_type, _ = STRATEGIES[ScenarioKind(kind)]
    return input_type()


def compute(kind: ScenarioKind, inputs: Any) -> Optional[Any]:
    input_type, func = STRATEGIES[ScenarioKind(kind)]
    if not isinstance(inputs, input_type):
        raise TypeError(f"{ScenarioKind(kind).value} expects {input_type.__name__}, got {type(inputs).__name__}")
    return func(inputs)


def estimate(kind: ScenarioKind, inputs: Any, mode: MoneyMode = MoneyMode.monthly) -> Estimate:
    kind = ScenarioKind(kind)
    result = compute(kind, inputs)
    summary = summarize(kind, result, mode)
    return Estimate(
        kind=kind,
        result=result,
        summary=summary,
        handoff=ContactContext(tool=kind.value, summary=summary),
    )

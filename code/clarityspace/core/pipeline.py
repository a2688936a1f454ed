import logging
from typing import Any, Dict, Optional, Type

from pydantic import BaseModel

from selfcheck.engine import estimate
from selfcheck.handoff import ContactContext
from selfcheck.schemas import (
    EducationInput,
    Gender,
    IncomeStability,
    MoneyMode,
    ProtectionInput,
    ResilienceInput,
    RetirementInput,
    ScenarioKind,
)

from .contact import FIELD_MESSAGES, first_invalid_field, normalize_sg_mobile
from .models import (
    EducationRequest,
    EstimateResponse,
    LeadRequest,
    LeadResponse,
    ProtectionRequest,
    ResilienceRequest,
    RetirementRequest,
)
from clarityspace.leads.leads_client import build_lead_payload, submit_lead

logger = logging.getLogger(__name__)

REQUEST_MODELS: Dict[ScenarioKind, Type[BaseModel]] = {
    ScenarioKind.resilience: ResilienceRequest,
    ScenarioKind.protection: ProtectionRequest,
    ScenarioKind.education: EducationRequest,
    ScenarioKind.retirement: RetirementRequest,
}


class ContactFormError(ValueError):
    def __init__(self, field: str):
        super().__init__(FIELD_MESSAGES.get(field, "Please check the form."))
        self.field = field


def to_engine_input(kind: ScenarioKind, payload: BaseModel) -> Any:
    data = payload.model_dump()
    kind = ScenarioKind(kind)
    if kind is ScenarioKind.resilience:
        data["expense_mode"] = MoneyMode(data["expense_mode"])
        data["income_stability"] = IncomeStability(data["income_stability"])
        return ResilienceInput(**data)
    if kind is ScenarioKind.protection:
        data["commitments_mode"] = MoneyMode(data["commitments_mode"])
        data["gender"] = Gender(data["gender"])
        return ProtectionInput(**data)
    data.pop("mode", None)
    if kind is ScenarioKind.education:
        return EducationInput(**data)
    return RetirementInput(**data)


def run_estimate(kind: ScenarioKind, payload: BaseModel) -> EstimateResponse:
    kind = ScenarioKind(kind)
    mode = MoneyMode(getattr(payload, "mode", MoneyMode.monthly))
    out = estimate(kind, to_engine_input(kind, payload), mode)
    return EstimateResponse(
        tool=kind.value,
        has_result=out.has_result,
        label=out.label,
        result=out.result.as_dict() if out.result is not None else None,
        summary=out.summary,
        contact_href=out.handoff.contact_href(),
    )


def validate_contact(form: LeadRequest) -> ContactContext:
    context = ContactContext(tool=form.tool, summary=form.summary)
    _, mobile_valid = normalize_sg_mobile(form.mobile)
    invalid = first_invalid_field(
        form.name,
        mobile_valid,
        form.consent,
        context.has_context,
        form.context_confirmed,
    )
    if invalid:
        raise ContactFormError(invalid)
    return context


def submit_contact(form: LeadRequest, endpoint: Optional[str] = None) -> LeadResponse:
    context = validate_contact(form)
    payload = build_lead_payload(form, context)
    logger.info("Submitting lead for %s", context.label)
    submit_lead(payload, endpoint=endpoint)
    return LeadResponse(sent=True, preferred_contact=form.preferred_contact)

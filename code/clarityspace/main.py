import logging
from typing import Any, Dict, List

from fastapi import Body, FastAPI, HTTPException
from pydantic import ValidationError

from selfcheck.schemas import ScenarioKind

from clarityspace.core.contact import TOOL_CATALOGUE
from clarityspace.core.models import EstimateResponse, LeadRequest, LeadResponse, ToolInfo
from clarityspace.core.pipeline import REQUEST_MODELS, ContactFormError, run_estimate, submit_contact
from clarityspace.leads.leads_client import LeadEndpointMissing, LeadSubmissionError

logger = logging.getLogger(__name__)

app = FastAPI(title="ClaritySpace Self-Check API")


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/tools", response_model=List[ToolInfo])
def tools():
    return TOOL_CATALOGUE


@app.post("/tools/{kind}", response_model=EstimateResponse)
def estimate_tool(kind: ScenarioKind, payload: Dict[str, Any] = Body(...)):
    try:
        request = REQUEST_MODELS[kind].model_validate(payload)
    except ValidationError as exc:
        detail = [{"loc": list(err["loc"]), "msg": err["msg"]} for err in exc.errors()]
        raise HTTPException(status_code=422, detail=detail)
    return run_estimate(kind, request)


@app.post("/contact", response_model=LeadResponse)
def contact(form: LeadRequest):
    try:
        return submit_contact(form)
    except ContactFormError as exc:
        raise HTTPException(status_code=422, detail={"field": exc.field, "message": str(exc)})
    except LeadEndpointMissing as exc:
        logger.error("Lead endpoint not configured")
        raise HTTPException(status_code=503, detail=str(exc))
    except LeadSubmissionError as exc:
        logger.error("Lead submission failed: %s", exc)
        raise HTTPException(status_code=502, detail=str(exc))

import logging
import os
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import requests

from selfcheck.handoff import GENERAL_TOOL, ContactContext

from clarityspace.core.contact import normalize_sg_mobile
from clarityspace.core.models import LeadRequest

logger = logging.getLogger(__name__)

LEADS_ENDPOINT = os.getenv("LEADS_ENDPOINT", "")
LEADS_TIMEOUT = float(os.getenv("LEADS_TIMEOUT", "15"))
LEADS_SOURCE = os.getenv("LEADS_SOURCE", "clarityspace-web")
ERROR_TEXT_LIMIT = 160


class LeadSubmissionError(RuntimeError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class LeadEndpointMissing(LeadSubmissionError):
    pass


def _iso(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_lead_payload(
    form: LeadRequest,
    context: Optional[ContactContext] = None,
    page_url: str = "",
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    context = context or ContactContext(tool=form.tool, summary=form.summary)
    sg8, _ = normalize_sg_mobile(form.mobile)
    stamp = _iso(now or datetime.now(timezone.utc))
    return {
        "name": form.name.strip(),
        "mobile": f"+65{sg8}",
        "preferredContact": form.preferred_contact,
        "message": form.message.strip(),
        "tool": context.tool or GENERAL_TOOL,
        "resultSummary": context.summary or "",
        "pageUrl": page_url or form.page_url,
        "createdAtISO": stamp,
        "source": LEADS_SOURCE,
        "consent": {
            "contactedForRequest": True,
            "timestampISO": stamp,
        },
    }


def submit_lead(payload: Dict[str, Any], endpoint: Optional[str] = None, timeout: Optional[float] = None) -> None:
    target = endpoint if endpoint is not None else LEADS_ENDPOINT
    if not target:
        raise LeadEndpointMissing("Missing LEADS_ENDPOINT. The contact form has nowhere to send to yet.")

    try:
        resp = requests.post(
            target,
            json=payload,
            headers={"Content-Type": "application/json"},
            timeout=timeout if timeout is not None else LEADS_TIMEOUT,
        )
    except requests.RequestException as exc:
        logger.warning("Lead submission failed before a response: %s", exc)
        raise LeadSubmissionError("Something went wrong sending your request. Please try again.") from exc

    if not resp.ok:
        text = (resp.text or "")[:ERROR_TEXT_LIMIT]
        logger.warning("Lead endpoint rejected submission with status %s", resp.status_code)
        raise LeadSubmissionError(
            f"Couldn't send. {text if text else 'Please try again.'}",
            status_code=resp.status_code,
        )

    logger.info("Lead submitted for tool=%s", payload.get("tool", GENERAL_TOOL))

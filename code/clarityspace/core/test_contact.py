import pytest
from pydantic import ValidationError

from clarityspace.core.contact import first_invalid_field, format_sg_mobile_pretty, normalize_sg_mobile
from clarityspace.core.models import EducationRequest, LeadRequest, ResilienceRequest
from clarityspace.core.pipeline import ContactFormError, run_estimate, validate_contact
from clarityspace.core.sample_payloads import SAMPLE_LEAD, SAMPLE_REQUESTS


def test_normalize_sg_mobile():
    assert normalize_sg_mobile("9123 4567") == ("91234567", True)
    assert normalize_sg_mobile("+65 8123-4567") == ("81234567", True)
    assert normalize_sg_mobile("6123 4567") == ("61234567", False)
    assert normalize_sg_mobile("9123") == ("9123", False)


def test_format_sg_mobile_pretty():
    assert format_sg_mobile_pretty("6591234567") == "9123 4567"
    assert format_sg_mobile_pretty("912") == "912"


def test_first_invalid_field_order():
    assert first_invalid_field("Dan", False, False, True, False) == "name"
    assert first_invalid_field("Darren", False, False, True, False) == "mobile"
    assert first_invalid_field("Darren", True, False, True, False) == "consent"
    assert first_invalid_field("Darren", True, True, True, False) == "context"
    assert first_invalid_field("Darren", True, True, False, False) == ""


def test_validate_contact_requires_confirmed_context():
    form = LeadRequest(**{**SAMPLE_LEAD, "context_confirmed": False})
    with pytest.raises(ContactFormError) as info:
        validate_contact(form)
    assert info.value.field == "context"


def test_validate_contact_returns_handoff():
    ctx = validate_contact(LeadRequest(**SAMPLE_LEAD))
    assert ctx.tool == "resilience"
    assert ctx.summary == SAMPLE_LEAD["summary"]


def test_run_estimate_sample_resilience():
    out = run_estimate("resilience", ResilienceRequest(**SAMPLE_REQUESTS["resilience"]))
    assert out.has_result
    assert out.label == "Moderate"
    assert out.summary == SAMPLE_LEAD["summary"]
    assert out.contact_href.startswith("/contact?tool=resilience&summary=Resilience%20Score%2051")


def test_run_estimate_education_annual_mode():
    out = run_estimate("education", EducationRequest(**SAMPLE_REQUESTS["education"], mode="annual"))
    assert "Suggested yearly" in out.summary
    assert len(out.result["breakdown"]) == 4


def test_lead_message_is_capped_at_500_characters():
    assert LeadRequest(**{**SAMPLE_LEAD, "message": "x" * 500}).message == "x" * 500
    with pytest.raises(ValidationError):
        LeadRequest(**{**SAMPLE_LEAD, "message": "x" * 501})


def test_run_estimate_resilience_note_reaches_contact_link():
    request = ResilienceRequest(**SAMPLE_REQUESTS["resilience"], notes="Planning a career break")
    out = run_estimate("resilience", request)
    assert out.summary == SAMPLE_LEAD["summary"] + " • Note: Planning a career break"
    assert "Note%3A%20Planning%20a%20career%20break" in out.contact_href

from selfcheck.engine import estimate
from selfcheck.handoff import ContactContext, general_request, tool_label
from selfcheck.sanitize import clamp_rate, parse_money, round_half_up, strip_to_digits, to_number_safe
from selfcheck.schemas import EducationInput, MoneyMode, ProtectionInput, ResilienceInput, RetirementInput
from selfcheck.summary import format_currency


def test_contact_href_round_trips_summary():
    ctx = ContactContext(tool="resilience", summary="Resilience Score 72/100 • Buffer 4.2 months")
    href = ctx.contact_href()
    assert href.startswith("/contact?tool=resilience&summary=")
    assert " " not in href
    assert ContactContext.from_query(href.split("?", 1)[1]) == ctx


def test_from_query_accepts_mapping_with_lists():
    ctx = ContactContext.from_query({"tool": ["education"], "summary": "x"})
    assert ctx == ContactContext("education", "x")
    assert ctx.has_context
    assert not ContactContext.from_query({}).has_context


def test_empty_context_links_to_bare_contact_page():
    assert ContactContext().contact_href() == "/contact"
    assert general_request().label == "General request"


def test_tool_labels():
    assert tool_label("Protection") == "Protection Gap Check"
    assert tool_label("") == "General request"
    assert tool_label("custom-tool") == "custom-tool"


def test_resilience_summary_line():
    out = estimate("resilience", ResilienceInput(essentials=2000, savings=2000))
    assert out.summary == "Resilience Score 25/100 • Buffer 1.0 months • 6-month shock gap $4,000"


def test_resilience_summary_carries_note():
    base = "Resilience Score 62/100 • Buffer 4.0 months • 6-month shock gap $0"
    noted = estimate("resilience", ResilienceInput(essentials=2000, savings=8000, notes="  Planning a career break next year "))
    assert noted.summary == base + " • Note: Planning a career break next year"
    assert noted.handoff.summary == noted.summary
    blank = estimate("resilience", ResilienceInput(essentials=2000, savings=8000, notes="   "))
    assert blank.summary == base


def test_protection_summary_line():
    out = estimate(
        "protection",
        ProtectionInput(monthly_commitments=3000, years_to_support=20, one_time_costs=30000),
    )
    assert out.summary == (
        "Protection Gap Check • Annual commitments $36,000 • Death gap $750,000 • "
        "TPD gap $432,000 • CI gap $72,000 • Total gap $1,254,000 • Risk RISK"
    )


def test_retirement_summary_respects_money_mode():
    inputs = RetirementInput(
        current_age=55, retire_age=65, end_age=75, expense_today=1000,
        inflation_pct=0, pre_return_pct=0, post_return_pct=0,
    )
    assert estimate("retirement", inputs).summary.endswith("Suggested monthly ~$1,000")
    assert estimate("retirement", inputs, MoneyMode.annual).summary.endswith("Suggested yearly ~$12,000")


def test_format_currency_rounds_and_floors_at_zero():
    assert format_currency(1234.5) == "$1,235"
    assert format_currency(-50) == "$0"


def test_form_parsing_helpers():
    assert strip_to_digits("$12,345.67") == "1234567"
    assert parse_money("S$ 3,000") == 3000
    assert parse_money("abc") == 0
    assert to_number_safe("4.5") == 4.5
    assert to_number_safe("nan") == 0
    assert to_number_safe(None) == 0
    assert round_half_up(2.5) == 3


def test_clamp_rate_uses_field_bounds():
    assert clamp_rate("retirement", "inflation_pct", 12) == 8
    assert clamp_rate("protection", "income_replace_pct", 10) == 30
    assert clamp_rate("education", "return_pct", "7") == 7


def test_education_summary_rounds_cost_at_start():
    out = estimate("education", EducationInput())
    assert out.summary.startswith("Education Goal • Cost at start ~$45,024/yr • ")
    assert "Horizon 15 yrs" in out.summary

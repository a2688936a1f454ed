# streamlit_site.py
import logging
import os
import sys
from typing import Any, Dict

import streamlit as st

# --- Import handling ---------------------------------------------------------
# Ensure code/ is on sys.path so `selfcheck` and `clarityspace` import when Streamlit runs this file directly.
CODE_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if CODE_ROOT not in sys.path:
    sys.path.insert(0, CODE_ROOT)

from selfcheck.engine import default_input, estimate  # noqa: E402
from selfcheck.handoff import ContactContext, general_request  # noqa: E402
from selfcheck.sanitize import RATE_BOUNDS, clamp_rate  # noqa: E402
from selfcheck.schemas import Gender, IncomeStability, MoneyMode, ScenarioKind  # noqa: E402
from selfcheck.summary import format_currency  # noqa: E402
from selfcheck.wizard import Wizard, wizard_for  # noqa: E402

from clarityspace.core.contact import TOOL_CATALOGUE, format_sg_mobile_pretty  # noqa: E402
from clarityspace.core.models import LeadRequest  # noqa: E402
from clarityspace.core.pipeline import ContactFormError, submit_contact  # noqa: E402
from clarityspace.leads.leads_client import LeadSubmissionError  # noqa: E402

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))
logger = logging.getLogger(__name__)

DISCLAIMER = (
    "General information only. Not financial advice and not a product recommendation. "
    "Results are estimates based on the assumptions you key in."
)

PAGES = ["Tools", "Resilience Score", "Protection Gap Check", "Education Goal Planner", "Retirement Readiness", "Contact", "Disclaimer"]
PAGE_KINDS = {
    "Resilience Score": ScenarioKind.resilience,
    "Protection Gap Check": ScenarioKind.protection,
    "Education Goal Planner": ScenarioKind.education,
    "Retirement Readiness": ScenarioKind.retirement,
}

st.set_page_config(page_title="ClaritySpace", layout="wide")


# --- Session state -----------------------------------------------------------
def _state(kind: ScenarioKind) -> Dict[str, Any]:
    key = f"tool_{kind.value}"
    if key not in st.session_state:
        st.session_state[key] = {"inputs": default_input(kind), "wizard": wizard_for(kind), "mode": MoneyMode.monthly}
    return st.session_state[key]


def go_to_contact(context: ContactContext) -> None:
    st.query_params.clear()
    st.query_params["page"] = "Contact"
    if context.tool:
        st.query_params["tool"] = context.tool
    if context.summary:
        st.query_params["summary"] = context.summary
    st.rerun()


def rate_slider(label: str, kind: ScenarioKind, field: str, value: float, step: int = 1) -> float:
    lo, hi = RATE_BOUNDS[(kind.value, field)]
    start = int(clamp_rate(kind, field, value))
    return float(st.slider(label, int(lo), int(hi), start, step=step, key=f"{kind.value}_{field}"))


def step_nav(wiz: Wizard, inputs: Any) -> None:
    st.progress(int(wiz.progress()), text=f"Step {wiz.index + 1} of {len(wiz.steps)}: {wiz.current.title()}")
    left, right = st.columns(2)
    if left.button("← Back", disabled=wiz.index == 0, key=f"back_{id(wiz)}"):
        wiz.back()
        st.rerun()
    last = wiz.index == len(wiz.steps) - 1
    if right.button("Next →", disabled=last or not wiz.is_complete(wiz.current, inputs), key=f"next_{id(wiz)}"):
        wiz.next(inputs)
        st.rerun()


def result_panel(kind: ScenarioKind, inputs: Any, mode: MoneyMode) -> None:
    out = estimate(kind, inputs, mode)
    if not out.has_result:
        st.info("Fill in the earlier steps to see your snapshot.")
        return
    res = out.result
    if kind is ScenarioKind.resilience:
        c1, c2, c3 = st.columns(3)
        c1.metric("Resilience score", f"{res.score}/100", res.label)
        c2.metric("Buffer months", f"{res.buffer_months:.1f}", res.runway_tag)
        c3.metric(f"{res.shock_months:g}-month shock gap", format_currency(res.shock_gap))
        st.caption(f"Next milestone: {res.next_milestone_months} months ({format_currency(res.next_milestone_amount)}).")
    elif kind is ScenarioKind.protection:
        c1, c2, c3, c4 = st.columns(4)
        c1.metric("Death gap", format_currency(res.death_gap))
        c2.metric("TPD gap", format_currency(res.tpd_gap))
        c3.metric("CI gap", format_currency(res.ci_gap))
        c4.metric("Total gap", format_currency(res.total_gap), res.label)
        st.caption(
            f"Rule of thumb: Death/TPD ~{format_currency(res.death_tpd_thumb)}, CI ~{format_currency(res.ci_thumb)}."
        )
        dependents = "3+" if res.dependents >= 3 else str(res.dependents)
        st.caption(f"Dependents: {dependents} • Supporting for {res.years_to_support:g} years.")
    elif kind is ScenarioKind.education:
        c1, c2, c3 = st.columns(3)
        c1.metric("Cost at start (per year)", format_currency(res.annual_at_start))
        c2.metric("Total target", format_currency(res.total_future_cost))
        c3.metric(f"Suggested {mode.value} set-aside", format_currency(res.set_aside(mode)))
        st.table([{"Year": r.study_year, "Age": r.child_age, "Cost": format_currency(r.cost)} for r in res.display_rows])
    else:
        c1, c2, c3 = st.columns(3)
        c1.metric("Target nest egg", format_currency(res.nest_egg_at_ret), res.label)
        c2.metric("Gap at retirement", format_currency(res.gap_at_ret))
        c3.metric(f"Suggested {mode.value} set-aside", format_currency(res.set_aside(mode)))
    st.code(out.summary, language=None)
    if st.button("Talk it through →", type="primary"):
        go_to_contact(out.handoff)


# --- Pages -------------------------------------------------------------------
def page_tools() -> None:
    st.title("Self-check tools")
    st.caption(DISCLAIMER)
    for tool in TOOL_CATALOGUE:
        with st.container(border=True):
            st.subheader(str(tool["title"]))
            st.write(tool["desc"])
            st.caption(" · ".join(tool["highlights"]))  # type: ignore[arg-type]


def page_resilience(state: Dict[str, Any]) -> None:
    i, wiz = state["inputs"], state["wizard"]
    step = wiz.reconcile(i)
    if step == "start":
        i.expense_mode = MoneyMode(st.radio("Expense input style", [m.value for m in MoneyMode], index=list(MoneyMode).index(i.expense_mode), horizontal=True))
        i.income_stability = IncomeStability(st.radio("Income stability", [s.value for s in IncomeStability], index=list(IncomeStability).index(i.income_stability), horizontal=True))
    elif step == "runway":
        i.essentials = st.number_input(f"Essential expenses ({i.expense_mode.value})", min_value=0.0, value=float(i.essentials), step=100.0)
        i.savings = st.number_input("Liquid savings", min_value=0.0, value=float(i.savings), step=500.0)
        i.dependents = st.select_slider("Dependents", options=[0, 1, 2, 3], value=i.dependents, format_func=lambda d: "3+" if d == 3 else str(d))
        i.has_life = st.checkbox("I have life cover", value=i.has_life)
        i.has_critical_illness = st.checkbox("I have critical illness cover", value=i.has_critical_illness)
        i.has_disability = st.checkbox("I have disability cover", value=i.has_disability)
    elif step == "shock":
        i.shock_months = rate_slider("Shock length (months)", ScenarioKind.resilience, "shock_months", i.shock_months)
        i.income_drop_pct = rate_slider("Income drop (%)", ScenarioKind.resilience, "income_drop_pct", i.income_drop_pct, step=5)
    elif step == "notes":
        i.notes = st.text_area("Anything you want me to take note of (optional)", value=i.notes, max_chars=500)
    else:
        result_panel(ScenarioKind.resilience, i, MoneyMode.monthly)
    if wiz.reconcile(i) != step:
        st.rerun()


def page_protection(state: Dict[str, Any]) -> None:
    i, wiz = state["inputs"], state["wizard"]
    step = wiz.reconcile(i)
    if step == "profile":
        i.age = int(st.number_input("Age", min_value=0, max_value=120, value=int(i.age)))
        i.gender = Gender(st.radio("Gender", [g.value for g in Gender], index=list(Gender).index(i.gender), horizontal=True))
        i.dependents = st.select_slider("Dependents", options=[0, 1, 2, 3], value=i.dependents, format_func=lambda d: "3+" if d == 3 else str(d))
    elif step == "needs":
        i.commitments_mode = MoneyMode(st.radio("Commitments entered as", [m.value for m in MoneyMode], index=list(MoneyMode).index(i.commitments_mode), horizontal=True))
        i.monthly_commitments = st.number_input("Commitments", min_value=0.0, value=float(i.monthly_commitments), step=100.0)
        i.years_to_support = st.number_input("Years to support", min_value=0.0, max_value=70.0, value=float(i.years_to_support))
        i.one_time_costs = st.number_input("One-time costs", min_value=0.0, value=float(i.one_time_costs), step=1000.0)
        i.debts_to_clear = st.number_input("Debts to clear", min_value=0.0, value=float(i.debts_to_clear), step=1000.0)
        i.income_replace_pct = rate_slider("TPD income replacement (%)", ScenarioKind.protection, "income_replace_pct", i.income_replace_pct, step=5)
        i.ci_months_cover = rate_slider("Critical illness cover (months)", ScenarioKind.protection, "ci_months_cover", i.ci_months_cover, step=6)
        i.ci_one_off_buffer = st.number_input("CI one-off buffer", min_value=0.0, value=float(i.ci_one_off_buffer), step=1000.0)
    elif step == "existing":
        i.existing_death = st.number_input("Existing death cover", min_value=0.0, value=float(i.existing_death), step=10000.0)
        i.existing_tpd = st.number_input("Existing TPD cover", min_value=0.0, value=float(i.existing_tpd), step=10000.0)
        i.existing_ci = st.number_input("Existing CI cover", min_value=0.0, value=float(i.existing_ci), step=10000.0)
    else:
        result_panel(ScenarioKind.protection, i, MoneyMode.monthly)
    if wiz.reconcile(i) != step:
        st.rerun()


def page_education(state: Dict[str, Any]) -> None:
    i, wiz = state["inputs"], state["wizard"]
    step = wiz.reconcile(i)
    if step == "basics":
        i.child_age = int(st.number_input("Child's current age", min_value=0, max_value=30, value=int(i.child_age)))
        i.start_age = int(st.number_input("Start age", min_value=0, max_value=40, value=int(i.start_age)))
        i.study_years = int(st.number_input("Years of study", min_value=1, max_value=10, value=int(i.study_years)))
    elif step == "costs":
        i.annual_cost_today = st.number_input("Annual cost today", min_value=0.0, value=float(i.annual_cost_today), step=1000.0)
        i.inflation_pct = rate_slider("Education inflation (%)", ScenarioKind.education, "inflation_pct", i.inflation_pct)
    elif step == "savings":
        i.savings = st.number_input("Current education savings", min_value=0.0, value=float(i.savings), step=1000.0)
        i.return_pct = rate_slider("Expected return (%)", ScenarioKind.education, "return_pct", i.return_pct)
    else:
        state["mode"] = MoneyMode(st.radio("Show set-aside", [m.value for m in MoneyMode], horizontal=True))
        result_panel(ScenarioKind.education, i, state["mode"])
    if wiz.reconcile(i) != step:
        st.rerun()


def page_retirement(state: Dict[str, Any]) -> None:
    i, wiz = state["inputs"], state["wizard"]
    step = wiz.reconcile(i)
    if step == "basics":
        i.current_age = int(st.number_input("Current age", min_value=0, max_value=100, value=int(i.current_age)))
        i.retire_age = int(st.number_input("Retirement age", min_value=0, max_value=100, value=int(i.retire_age)))
        i.end_age = int(st.number_input("Plan until age", min_value=0, max_value=120, value=int(i.end_age)))
    elif step == "costs":
        i.expense_today = st.number_input("Monthly expense today", min_value=0.0, value=float(i.expense_today), step=100.0)
        i.inflation_pct = rate_slider("Inflation (%)", ScenarioKind.retirement, "inflation_pct", i.inflation_pct)
        i.income_at_ret = st.number_input("Expected monthly income at retirement", min_value=0.0, value=float(i.income_at_ret), step=100.0)
    elif step == "savings":
        i.savings = st.number_input("Current retirement savings", min_value=0.0, value=float(i.savings), step=1000.0)
        i.pre_return_pct = rate_slider("Return before retirement (%)", ScenarioKind.retirement, "pre_return_pct", i.pre_return_pct)
        i.post_return_pct = rate_slider("Return during retirement (%)", ScenarioKind.retirement, "post_return_pct", i.post_return_pct)
    else:
        state["mode"] = MoneyMode(st.radio("Show set-aside", [m.value for m in MoneyMode], horizontal=True))
        result_panel(ScenarioKind.retirement, i, state["mode"])
    if wiz.reconcile(i) != step:
        st.rerun()


def page_contact() -> None:
    context = ContactContext.from_query(dict(st.query_params))
    st.title("Contact")
    st.caption("Leave your details and I'll reach out. " + DISCLAIMER)
    confirmed = True
    if context.has_context:
        with st.container(border=True):
            st.subheader(context.label)
            st.text(context.summary or "(no summary)")
            confirmed = st.checkbox("This summary looks right", value=False)

    with st.form("contact"):
        name = st.text_input("Name", placeholder="e.g. Darren Lim")
        mobile = st.text_input("SG mobile", placeholder="9123 4567")
        if mobile:
            st.caption(f"+65 {format_sg_mobile_pretty(mobile)}")
        preferred = st.radio("Preferred contact", ["WhatsApp", "Call", "Telegram"], horizontal=True)
        message = st.text_area("Message (optional)", max_chars=500)
        consent = st.checkbox("I consent to being contacted about this request.")
        submitted = st.form_submit_button("Send", type="primary")

    if not submitted:
        return
    form = LeadRequest(
        name=name,
        mobile=mobile,
        preferred_contact=preferred,
        message=message,
        consent=consent,
        tool=context.tool,
        summary=context.summary,
        context_confirmed=confirmed,
        page_url=os.getenv("SITE_BASE_URL", "") + "/contact",
    )
    try:
        with st.spinner("Sending..."):
            sent = submit_contact(form)
    except ContactFormError as exc:
        st.warning(str(exc))
    except LeadSubmissionError as exc:
        logger.warning("Contact form could not be sent: %s", exc)
        st.error(str(exc))
    else:
        st.success(f"Thanks, I'll reach out via {sent.preferred_contact}.")


def page_disclaimer() -> None:
    st.title("Disclaimer")
    st.write(DISCLAIMER)
    st.write(
        "The self-check tools use simple, assumption-based formulas for education. "
        "They don't consider your full financial situation, and the results are not a recommendation to buy any product."
    )
    if st.button("Request a personalised review"):
        go_to_contact(general_request())


# --- Router ------------------------------------------------------------------
requested = st.query_params.get("page", "Tools")
with st.sidebar:
    st.header("ClaritySpace")
    page = st.radio("Go to", PAGES, index=PAGES.index(requested) if requested in PAGES else 0)
    st.markdown("---")
    st.caption(DISCLAIMER)

if page != requested:
    st.query_params.clear()
    st.query_params["page"] = page

if page == "Tools":
    page_tools()
elif page in PAGE_KINDS:
    kind = PAGE_KINDS[page]
    state = _state(kind)
    st.title(page)
    RENDERERS = {
        ScenarioKind.resilience: page_resilience,
        ScenarioKind.protection: page_protection,
        ScenarioKind.education: page_education,
        ScenarioKind.retirement: page_retirement,
    }
    RENDERERS[kind](state)
    step_nav(state["wizard"], state["inputs"])
elif page == "Contact":
    page_contact()
else:
    page_disclaimer()

import re
from typing import Dict, List, Tuple

MIN_NAME_LENGTH = 5

FIELD_MESSAGES = {
    "name": "Please enter your name (min 5 characters).",
    "mobile": "Please enter a valid Singapore mobile number.",
    "consent": "Consent is required so I can reach you about this request.",
    "context": "Quick confirm: please confirm the tool summary before sending.",
}

TOOL_CATALOGUE: List[Dict[str, object]] = [
    {
        "key": "resilience",
        "title": "Resilience Score",
        "desc": "Spot pressure points like buffer months, shock gap, and dependents impact in plain English.",
        "highlights": ["Buffer months", "6-month shock gap", "Dependents impact"],
        "tags": ["Start", "Protect"],
    },
    {
        "key": "protection",
        "title": "Protection Gap Check",
        "desc": "Clean snapshot of possible shortfalls across Death / TPD / Critical Illness (educational only).",
        "highlights": ["Death / TPD / CI", "Shortfall view", "No comparisons"],
        "tags": ["Protect", "Start"],
    },
    {
        "key": "education",
        "title": "Education Goal Planner",
        "desc": "Estimate a future education target and a simple set-aside path (assumptions-based).",
        "highlights": ["Target", "Timeline", "Monthly / yearly"],
        "tags": ["Plan"],
    },
    {
        "key": "retirement",
        "title": "Retirement Readiness",
        "desc": "Rough nest-egg target and a suggested set-aside to close the gap.",
        "highlights": ["Nest egg", "Gap at retirement", "Monthly / yearly"],
        "tags": ["Retire", "Plan"],
    },
]

_NON_DIGITS = re.compile(r"\D")


def _local_digits(text: str) -> str:
    digits = _NON_DIGITS.sub("", text or "")
    return digits[2:] if digits.startswith("65") else digits


def normalize_sg_mobile(text: str) -> Tuple[str, bool]:
    sg8 = _local_digits(text)
    is_valid = len(sg8) == 8 and sg8[0] in ("8", "9")
    return sg8, is_valid


def format_sg_mobile_pretty(text: str) -> str:
    local = _local_digits(text)
    if len(local) <= 4:
        return local
    return f"{local[:4]} {local[4:8]}".strip()


def first_invalid_field(
    name: str,
    mobile_valid: bool,
    consent: bool,
    has_context: bool,
    context_confirmed: bool,
) -> str:
    if len((name or "").strip()) < MIN_NAME_LENGTH:
        return "name"
    if not mobile_valid:
        return "mobile"
    if not consent:
        return "consent"
    if has_context and not context_confirmed:
        return "context"
    return ""

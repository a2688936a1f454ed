import math
import re
from typing import Any, Dict, Tuple

from .schemas import ScenarioKind

# Inclusive bounds for the slider / range fields on each tool.
RATE_BOUNDS: Dict[Tuple[str, str], Tuple[float, float]] = {
    ("resilience", "shock_months"): (3.0, 12.0),
    ("resilience", "income_drop_pct"): (10.0, 90.0),
    ("protection", "income_replace_pct"): (30.0, 100.0),
    ("protection", "ci_months_cover"): (6.0, 60.0),
    ("education", "inflation_pct"): (0.0, 10.0),
    ("education", "return_pct"): (0.0, 10.0),
    ("retirement", "inflation_pct"): (0.0, 8.0),
    ("retirement", "pre_return_pct"): (0.0, 10.0),
    ("retirement", "post_return_pct"): (0.0, 8.0),
}

_NON_DIGITS = re.compile(r"[^\d]")


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(value, hi))


def round_half_up(value: float) -> int:
    # Half rounds up, never to even.
    return int(math.floor(value + 0.5))


def round1(value: float) -> float:
    return round_half_up(value * 10) / 10


def strip_to_digits(text: Any) -> str:
    return _NON_DIGITS.sub("", str(text or ""))


def parse_money(text: Any) -> float:
    digits = strip_to_digits(text)
    if not digits:
        return 0.0
    return float(digits)


def to_number_safe(text: Any) -> float:
    if text is None or text == "":
        return 0.0
    try:
        value = float(text)
    except (TypeError, ValueError):
        return 0.0
    return value if math.isfinite(value) else 0.0


def clamp_rate(kind: ScenarioKind | str, field: str, value: float) -> float:
    key = (ScenarioKind(kind).value, field)
    if key not in RATE_BOUNDS:
        raise KeyError(f"No bounds registered for {key[0]}.{field}")
    lo, hi = RATE_BOUNDS[key]
    return clamp(to_number_safe(value), lo, hi)

from dataclasses import dataclass
from typing import Mapping, Union
from urllib.parse import parse_qs, quote, urlencode

CONTACT_PATH = "/contact"
GENERAL_TOOL = "general"

TOOL_LABELS = {
    "protection": "Protection Gap Check",
    "resilience": "Resilience Score",
    "education": "Education Goal Planner",
    "retirement": "Retirement Readiness",
    "general": "General request",
}


def tool_label(tool: str) -> str:
    key = (tool or "").strip().lower()
    if not key:
        return TOOL_LABELS[GENERAL_TOOL]
    return TOOL_LABELS.get(key, tool)


@dataclass(frozen=True)
class ContactContext:
    """What a calculator hands to the contact form: the tool key and its summary line."""

    tool: str = ""
    summary: str = ""

    @property
    def has_context(self) -> bool:
        return bool(self.tool.strip() or self.summary.strip())

    @property
    def label(self) -> str:
        return tool_label(self.tool or GENERAL_TOOL)

    def to_query(self) -> str:
        params = {k: v for k, v in (("tool", self.tool), ("summary", self.summary)) if v}
        return urlencode(params, quote_via=quote)

    def contact_href(self) -> str:
        query = self.to_query()
        return f"{CONTACT_PATH}?{query}" if query else CONTACT_PATH

    @classmethod
    def from_query(cls, query: Union[str, Mapping[str, object]]) -> "ContactContext":
        if isinstance(query, str):
            parsed = parse_qs(query.lstrip("?"), keep_blank_values=True)
            values = {k: v[0] for k, v in parsed.items() if v}
        else:
            values = {}
            for key, value in query.items():
                # Streamlit query params may hand back lists.
                if isinstance(value, (list, tuple)):
                    value = value[0] if value else ""
                values[key] = "" if value is None else str(value)
        return cls(tool=values.get("tool", ""), summary=values.get("summary", ""))


def general_request() -> ContactContext:
    return ContactContext(
        tool=GENERAL_TOOL,
        summary="I'd like a personalised review of my current situation.",
    )

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

MoneyModeName = Literal["monthly", "annual"]
PreferredContact = Literal["WhatsApp", "Call", "Telegram"]


class ResilienceRequest(BaseModel):
    essentials: float = Field(ge=0)
    savings: float = Field(ge=0, default=0.0)
    dependents: int = Field(ge=0, le=3, default=0)
    has_life: bool = False
    has_critical_illness: bool = False
    has_disability: bool = False
    expense_mode: MoneyModeName = "monthly"
    income_stability: Literal["stable", "irregular"] = "stable"
    shock_months: float = Field(ge=3, le=12, default=6)
    income_drop_pct: float = Field(ge=10, le=90, default=50)
    notes: str = Field(default="", max_length=500)


class ProtectionRequest(BaseModel):
    monthly_commitments: float = Field(ge=0)
    years_to_support: float = Field(ge=0, le=70, default=20)
    one_time_costs: float = Field(ge=0, default=0.0)
    income_replace_pct: float = Field(ge=30, le=100, default=60)
    ci_months_cover: float = Field(ge=6, le=60, default=24)
    existing_death: float = Field(ge=0, default=0.0)
    existing_tpd: float = Field(ge=0, default=0.0)
    existing_ci: float = Field(ge=0, default=0.0)
    commitments_mode: MoneyModeName = "monthly"
    debts_to_clear: float = Field(ge=0, default=0.0)
    ci_one_off_buffer: float = Field(ge=0, default=0.0)
    tpd_years_cover: Optional[float] = Field(ge=0, le=40, default=None)
    age: int = Field(ge=0, le=120, default=0)
    gender: Literal["male", "female", "unspecified"] = "unspecified"
    dependents: int = Field(ge=0, le=3, default=0)


class EducationRequest(BaseModel):
    child_age: int = Field(ge=0, le=30, default=3)
    start_age: int = Field(ge=0, le=40, default=18)
    study_years: float = Field(ge=1, le=10, default=4)
    annual_cost_today: float = Field(ge=0, default=25000.0)
    inflation_pct: float = Field(ge=0, le=10, default=4.0)
    savings: float = Field(ge=0, default=0.0)
    return_pct: float = Field(ge=0, le=10, default=4.0)
    mode: MoneyModeName = "monthly"


class RetirementRequest(BaseModel):
    current_age: int = Field(ge=0, le=100, default=25)
    retire_age: int = Field(ge=0, le=100, default=65)
    end_age: int = Field(ge=0, le=120, default=90)
    expense_today: float = Field(ge=0, default=3000.0)
    inflation_pct: float = Field(ge=0, le=8, default=3.0)
    income_at_ret: float = Field(ge=0, default=0.0)
    savings: float = Field(ge=0, default=0.0)
    pre_return_pct: float = Field(ge=0, le=10, default=4.0)
    post_return_pct: float = Field(ge=0, le=8, default=3.0)
    mode: MoneyModeName = "monthly"


class EstimateResponse(BaseModel):
    tool: str
    has_result: bool
    label: Optional[str] = None
    result: Optional[Dict[str, Any]] = None
    summary: str
    contact_href: str


class ToolInfo(BaseModel):
    key: str
    title: str
    desc: str
    highlights: List[str]
    tags: List[str]


class LeadRequest(BaseModel):
    name: str
    mobile: str
    preferred_contact: PreferredContact = "WhatsApp"
    message: str = Field(default="", max_length=500)
    consent: bool = False
    tool: str = ""
    summary: str = ""
    context_confirmed: bool = False
    page_url: str = ""


class LeadResponse(BaseModel):
    sent: bool
    preferred_contact: PreferredContact

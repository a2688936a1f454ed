SAMPLE_REQUESTS = {
    "resilience": {
        "essentials": 2000,
        "savings": 8000,
        "dependents": 2,
        "has_life": False,
        "has_critical_illness": True,
        "has_disability": False,
    },
    "protection": {
        "monthly_commitments": 3000,
        "years_to_support": 20,
        "one_time_costs": 30000,
        "income_replace_pct": 60,
        "ci_months_cover": 24,
        "age": 35,
    },
    "education": {
        "child_age": 3,
        "start_age": 18,
        "study_years": 4,
        "annual_cost_today": 25000,
        "inflation_pct": 4,
        "savings": 10000,
        "return_pct": 4,
    },
    "retirement": {
        "current_age": 35,
        "retire_age": 65,
        "end_age": 90,
        "expense_today": 3000,
        "inflation_pct": 3,
        "income_at_ret": 800,
        "savings": 50000,
        "pre_return_pct": 4,
        "post_return_pct": 3,
    },
}

SAMPLE_LEAD = {
    "name": "Darren Lim",
    "mobile": "9123 4567",
    "preferred_contact": "WhatsApp",
    "message": "Keen to sanity-check my numbers.",
    "consent": True,
    "tool": "resilience",
    "summary": "Resilience Score 51/100 • Buffer 4.0 months • 6-month shock gap $0",
    "context_confirmed": True,
}

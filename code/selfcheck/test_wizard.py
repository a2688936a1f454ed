import pytest

from selfcheck.schemas import EducationInput, ProtectionInput, ResilienceInput, RetirementInput, ScenarioKind
from selfcheck.wizard import RESILIENCE_STEPS, Wizard, wizard_for


def test_new_wizard_starts_at_first_step():
    wiz = wizard_for(ScenarioKind.resilience)
    assert wiz.current == "start"
    assert wiz.progress() == 0


def test_next_is_gated_by_current_step():
    wiz = wizard_for(ScenarioKind.resilience)
    inputs = ResilienceInput()
    assert wiz.next(inputs) == "runway"
    # essentials still empty
    assert wiz.next(inputs) == "runway"
    inputs.essentials, inputs.savings = 2000, 5000
    assert wiz.next(inputs) == "shock"


def test_steps_cannot_be_skipped():
    wiz = wizard_for(ScenarioKind.resilience)
    inputs = ResilienceInput()
    assert not wiz.go_to("snapshot", inputs)
    assert wiz.current == "start"
    inputs.essentials = 2000
    assert wiz.go_to("snapshot", inputs)
    assert wiz.progress() == 100


def test_back_is_always_allowed():
    wiz = wizard_for(ScenarioKind.protection)
    inputs = ProtectionInput(age=35, monthly_commitments=3000)
    wiz.next(inputs)
    wiz.next(inputs)
    assert wiz.current == "existing"
    assert wiz.back() == "needs"
    assert wiz.back() == "profile"
    assert wiz.back() == "profile"


def test_reconcile_falls_back_when_inputs_become_incomplete():
    wiz = wizard_for(ScenarioKind.retirement)
    inputs = RetirementInput()
    assert wiz.go_to("results", inputs)
    inputs.expense_today = 0
    assert wiz.reconcile(inputs) == "costs"
    inputs.retire_age = 20
    assert wiz.reconcile(inputs) == "basics"


def test_wizard_rejects_unknown_steps():
    with pytest.raises(ValueError):
        Wizard(RESILIENCE_STEPS, {"nope": lambda i: True})
    with pytest.raises(ValueError):
        Wizard(RESILIENCE_STEPS, current="nope")


def test_education_basics_and_costs_gate_next():
    wiz = wizard_for(ScenarioKind.education)
    inputs = EducationInput(child_age=10, start_age=8)
    assert wiz.next(inputs) == "basics"
    inputs.start_age, inputs.study_years = 18, 0
    assert wiz.next(inputs) == "basics"
    inputs.study_years = 4
    assert wiz.next(inputs) == "costs"
    inputs.annual_cost_today = 0
    assert wiz.next(inputs) == "costs"
    assert not wiz.go_to("results", inputs)
    inputs.annual_cost_today = 25000
    assert wiz.next(inputs) == "savings"


def test_protection_profile_needs_an_age():
    wiz = wizard_for(ScenarioKind.protection)
    inputs = ProtectionInput(monthly_commitments=3000)
    assert wiz.next(inputs) == "profile"
    inputs.age = 35
    assert wiz.next(inputs) == "needs"


def test_reconcile_moves_off_a_step_that_is_no_longer_reachable():
    wiz = wizard_for(ScenarioKind.education)
    inputs = EducationInput()
    assert wiz.go_to("savings", inputs)
    inputs.child_age = 20
    assert wiz.reconcile(inputs) == "basics"
    assert wiz.current == "basics"

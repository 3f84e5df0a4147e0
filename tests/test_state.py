import pytest

from transcription_roi.finance import compute
from transcription_roi.scenarios import UnknownScenarioError, default_inputs
from transcription_roi.state import CalculatorState
from transcription_roi.utils import INPUT_FIELDS


def test_initial_state_uses_scenario_defaults():
    state = CalculatorState.initial('consulting')
    assert state.active_scenario == 'consulting'
    assert state.inputs == default_inputs('consulting')
    assert state.result.net_savings == pytest.approx(23240)


def test_initial_state_rejects_unknown_scenario():
    with pytest.raises(UnknownScenarioError):
        CalculatorState.initial('marketing')


def test_set_input_updates_only_that_field():
    state = CalculatorState.initial('consulting')
    before = state.inputs.as_dict()
    state.set_input('recordingsPerMonth', 55)
    after = state.inputs.as_dict()
    assert after['recordingsPerMonth'] == 55
    for name in INPUT_FIELDS:
        if name != 'recordingsPerMonth':
            assert after[name] == before[name]


def test_set_input_coerces_unparseable_values_to_zero():
    state = CalculatorState.initial('legal')
    assert state.set_input('hourlyRate', 'lots') == 0.0
    assert state.inputs.hourly_rate == 0.0
    r = state.result
    assert r.money_saved_per_year == 0
    assert r.setup_cost == pytest.approx(450)


def test_switching_scenario_discards_edits():
    state = CalculatorState.initial('consulting')
    state.set_input('hourlyRate', 500)
    state.set_input('minutesAuto', 1)
    state.select_scenario('legal')
    assert state.active_scenario == 'legal'
    assert state.inputs == default_inputs('legal')

    state.set_input('hourlyRate', 900)
    state.select_scenario('legal')
    assert state.inputs == default_inputs('legal')


def test_failed_switch_leaves_state_untouched():
    state = CalculatorState.initial('therapy')
    state.set_input('hourlyRate', 99)
    with pytest.raises(UnknownScenarioError):
        state.select_scenario('radio')
    assert state.active_scenario == 'therapy'
    assert state.inputs.hourly_rate == 99


def test_result_is_recomputed_on_every_change():
    state = CalculatorState.initial('education')
    first = state.result
    state.set_input('recordingsPerMonth', 24)
    second = state.result
    assert second != first
    assert second == compute(state.inputs, 'education')

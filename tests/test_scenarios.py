import pytest

from transcription_roi import scenarios
from transcription_roi.scenarios import (
    COST_PROFILES,
    FALLBACK_COST_PROFILE,
    SCENARIOS,
    UnknownScenarioError,
    cost_profile,
    default_inputs,
    get_scenario,
)


def test_catalog_has_five_scenarios_in_display_order():
    assert scenarios.scenario_ids() == ['content', 'consulting', 'therapy', 'legal', 'education']
    assert set(COST_PROFILES) == set(SCENARIOS)


def test_lookup_returns_definition_with_defaults():
    legal = get_scenario('legal')
    assert legal.name == 'Legal Team'
    assert legal.note
    assert legal.defaults.as_dict() == {
        'recordingsPerMonth': 30,
        'minutesManual': 15,
        'minutesAuto': 5,
        'hourlyRate': 315,
        'avgRecordingMinutes': 35,
    }
    assert default_inputs('education').minutes_manual == 180


@pytest.mark.parametrize('bad', ['marketing', '', 'Legal', None, ['legal']])
def test_lookup_rejects_ids_outside_catalog(bad):
    with pytest.raises(UnknownScenarioError):
        get_scenario(bad)
    with pytest.raises(ValueError):
        default_inputs(bad)


@pytest.mark.parametrize('scenario_id, hours, vps', [
    ('content', 5, 175),
    ('consulting', 6, 400),
    ('therapy', 5, 525),
    ('legal', 4, 450),
    ('education', 5, 350),
])
def test_cost_profile_table(scenario_id, hours, vps):
    profile = cost_profile(scenario_id)
    assert profile.setup_hours == hours
    assert profile.vps_yearly_cost == vps


def test_cost_profile_falls_back_to_content_tier():
    assert cost_profile('podcasting') == FALLBACK_COST_PROFILE
    assert cost_profile(None) == COST_PROFILES['content']

import logging
from typing import Dict, List

from .utils import InputSet, ScenarioCostProfile, ScenarioDefinition

logger = logging.getLogger(__name__)


class UnknownScenarioError(ValueError):
    """Raised when a scenario id is outside the catalog."""


SCENARIOS: Dict[str, ScenarioDefinition] = {
    'content': ScenarioDefinition(
        id='content', name='Content Creator', description='Voice memos → polished content', icon='✦',
        defaults=InputSet(recordings_per_month=20, minutes_manual=35, minutes_auto=8,
                          hourly_rate=35, avg_recording_minutes=5),
    ),
    'consulting': ScenarioDefinition(
        id='consulting', name='Consulting Firm', description='Client calls → documented insights', icon='◈',
        defaults=InputSet(recordings_per_month=40, minutes_manual=30, minutes_auto=10,
                          hourly_rate=150, avg_recording_minutes=45),
    ),
    'therapy': ScenarioDefinition(
        id='therapy', name='Private Practice', description='Session notes without typing', icon='◎',
        defaults=InputSet(recordings_per_month=75, minutes_manual=18, minutes_auto=5,
                          hourly_rate=160, avg_recording_minutes=50),
    ),
    'legal': ScenarioDefinition(
        id='legal', name='Legal Team', description='Privileged calls → secure transcripts', icon='⬡',
        defaults=InputSet(recordings_per_month=30, minutes_manual=15, minutes_auto=5,
                          hourly_rate=315, avg_recording_minutes=35),
        note=('Time savings understates true value. Primary benefit is maintaining attorney-client '
              'privilege by keeping communications on your infrastructure, with no third-party '
              'subpoena risk.'),
    ),
    'education': ScenarioDefinition(
        id='education', name='Education Business', description='Course content → materials', icon='◇',
        defaults=InputSet(recordings_per_month=12, minutes_manual=180, minutes_auto=45,
                          hourly_rate=50, avg_recording_minutes=60),
    ),
}

# hosting figures are midpoints of the quoted yearly VPS ranges
COST_PROFILES: Dict[str, ScenarioCostProfile] = {
    'content': ScenarioCostProfile(setup_hours=5, vps_yearly_cost=175),
    'consulting': ScenarioCostProfile(setup_hours=6, vps_yearly_cost=400),
    'therapy': ScenarioCostProfile(setup_hours=5, vps_yearly_cost=525),
    'legal': ScenarioCostProfile(setup_hours=4, vps_yearly_cost=450),
    'education': ScenarioCostProfile(setup_hours=5, vps_yearly_cost=350),
}

FALLBACK_COST_PROFILE = COST_PROFILES['content']


def scenario_ids() -> List[str]:
    return list(SCENARIOS)


def get_scenario(scenario_id: str) -> ScenarioDefinition:
    try:
        return SCENARIOS[scenario_id]
    except (KeyError, TypeError):
        raise UnknownScenarioError(
            f"Unknown scenario {scenario_id!r}; expected one of {', '.join(SCENARIOS)}"
        ) from None


def default_inputs(scenario_id: str) -> InputSet:
    return get_scenario(scenario_id).defaults


def cost_profile(scenario_id: str) -> ScenarioCostProfile:
    """Setup hours and hosting cost for a scenario.

    Unlike ``get_scenario`` this never fails: ids the table does not know yet
    get the content-tier constants.
    """
    profile = COST_PROFILES.get(scenario_id) if isinstance(scenario_id, str) else None
    if profile is None:
        logger.debug("No cost profile for scenario %r; using content-tier fallback", scenario_id)
        return FALLBACK_COST_PROFILE
    return profile

import logging
from dataclasses import dataclass
from typing import Any

from .finance import compute
from .scenarios import default_inputs, get_scenario
from .utils import CalculationResult, InputSet, coerce_number

logger = logging.getLogger(__name__)


@dataclass
class CalculatorState:
    """Active scenario plus the current inputs, owned by the page."""

    active_scenario: str
    inputs: InputSet

    @classmethod
    def initial(cls, scenario_id: str) -> 'CalculatorState':
        return cls(active_scenario=get_scenario(scenario_id).id, inputs=default_inputs(scenario_id))

    def select_scenario(self, scenario_id: str) -> None:
        # switching always discards manual edits, including re-selecting the active scenario
        self.inputs = default_inputs(scenario_id)
        self.active_scenario = scenario_id
        logger.debug("Scenario switched to %s; inputs reset to defaults", scenario_id)

    def set_input(self, name: str, raw_value: Any) -> float:
        value = coerce_number(raw_value)
        self.inputs = self.inputs.replace(name, value)
        logger.debug("Input %s set to %s", name, value)
        return value

    @property
    def result(self) -> CalculationResult:
        return compute(self.inputs, self.active_scenario)

import math
import re
from dataclasses import dataclass, asdict, fields
from typing import Any, Dict, Optional

# camelCase names are the public field keys (slider keys, CLI overrides, exports)
INPUT_FIELDS = (
    'recordingsPerMonth',
    'minutesManual',
    'minutesAuto',
    'hourlyRate',
    'avgRecordingMinutes',
)

_ATTR_BY_FIELD = {
    'recordingsPerMonth': 'recordings_per_month',
    'minutesManual': 'minutes_manual',
    'minutesAuto': 'minutes_auto',
    'hourlyRate': 'hourly_rate',
    'avgRecordingMinutes': 'avg_recording_minutes',
}

_LEADING_NUMBER = re.compile(r'^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?')


class UnknownInputError(ValueError):
    """Raised for an input field name outside INPUT_FIELDS."""


@dataclass(frozen=True)
class InputSet:
    recordings_per_month: float
    minutes_manual: float  # per recording, old workflow
    minutes_auto: float  # per recording, automated workflow
    hourly_rate: float  # currency/hour
    avg_recording_minutes: float  # recording length, drives API cost only

    def as_dict(self) -> Dict[str, float]:
        return {name: getattr(self, _ATTR_BY_FIELD[name]) for name in INPUT_FIELDS}

    def get(self, name: str) -> float:
        return getattr(self, _attr_for(name))

    def replace(self, name: str, value: float) -> 'InputSet':
        """Return a copy with only ``name`` changed."""
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data[_attr_for(name)] = float(value)
        return InputSet(**data)

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> 'InputSet':
        missing = [name for name in INPUT_FIELDS if name not in values]
        if missing:
            raise UnknownInputError(f"Missing input fields: {', '.join(missing)}")
        return cls(**{_ATTR_BY_FIELD[name]: coerce_number(values[name]) for name in INPUT_FIELDS})


@dataclass(frozen=True)
class ScenarioCostProfile:
    setup_hours: float
    vps_yearly_cost: float  # currency/year


@dataclass(frozen=True)
class ScenarioDefinition:
    id: str
    name: str
    description: str
    icon: str
    defaults: InputSet
    note: Optional[str] = None


@dataclass
class CalculationResult:
    time_saved_per_month: float  # hours
    money_saved_per_year: float
    api_cost_per_year: float
    setup_hours: float
    setup_time_cost: float
    vps_yearly_cost: float
    setup_cost: float
    net_savings: float
    break_even_months: float  # non-finite when there is no break-even point

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


def _attr_for(name: str) -> str:
    try:
        return _ATTR_BY_FIELD[name]
    except KeyError:
        raise UnknownInputError(
            f"Unknown input field: {name!r} (expected one of {', '.join(INPUT_FIELDS)})"
        ) from None


def coerce_number(value: Any) -> float:
    """Coerce raw user input to a float, falling back to 0.0."""
    if isinstance(value, bool) or value is None:
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        match = _LEADING_NUMBER.match(str(value))
        if not match:
            return 0.0
        number = float(match.group(0))
    return number if math.isfinite(number) else 0.0

from typing import Dict, List

import numpy as np
import pandas as pd

from .scenarios import cost_profile
from .utils import CalculationResult, InputSet

# blended external API price per recorded minute:
# Whisper transcription ~$0.006/min + LLM summary/formatting/extraction ~$0.019/min
API_COST_PER_MINUTE = 0.025
TRAJECTORY_MONTHS = 12
MIN_BAR_PCT = 4.0


def _round_half_up(value: float) -> int:
    return int(np.floor(value + 0.5))


def _ratio(numerator: float, denominator: float) -> float:
    # IEEE semantics: x/0 -> +-inf, 0/0 -> nan
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.float64(numerator) / np.float64(denominator))


def compute(inputs: InputSet, scenario_id: str) -> CalculationResult:
    profile = cost_profile(scenario_id)

    time_saved_per_month = (inputs.minutes_manual - inputs.minutes_auto) * inputs.recordings_per_month / 60
    money_saved_per_year = time_saved_per_month * inputs.hourly_rate * 12
    api_cost_per_year = inputs.avg_recording_minutes * API_COST_PER_MINUTE * inputs.recordings_per_month * 12

    setup_time_cost = profile.setup_hours * inputs.hourly_rate
    setup_cost = setup_time_cost + profile.vps_yearly_cost
    net_savings = money_saved_per_year + api_cost_per_year - setup_cost
    break_even_months = _ratio(setup_cost, money_saved_per_year / 12 + api_cost_per_year / 12)

    return CalculationResult(
        time_saved_per_month=time_saved_per_month,
        money_saved_per_year=money_saved_per_year,
        api_cost_per_year=api_cost_per_year,
        setup_hours=profile.setup_hours,
        setup_time_cost=setup_time_cost,
        vps_yearly_cost=profile.vps_yearly_cost,
        setup_cost=setup_cost,
        net_savings=net_savings,
        break_even_months=break_even_months,
    )


def has_break_even(r: CalculationResult) -> bool:
    return bool(np.isfinite(r.break_even_months))


def monthly_savings(r: CalculationResult) -> float:
    return r.money_saved_per_year / 12 + r.api_cost_per_year / 12


def vps_monthly(r: CalculationResult) -> int:
    return _round_half_up(r.vps_yearly_cost / 12)


def trajectory(r: CalculationResult, months: int = TRAJECTORY_MONTHS) -> pd.DataFrame:
    """Cumulative position month by month, with normalised bar heights."""
    per_month = monthly_savings(r)
    max_val = r.money_saved_per_year + r.api_cost_per_year - r.setup_cost
    min_val = -r.setup_cost
    span = max_val - min_val
    if span == 0 or np.isnan(span):
        span = 1.0
    marker = int(np.ceil(r.break_even_months)) if has_break_even(r) else None

    rows = []
    for month in range(1, months + 1):
        cumulative = per_month * month - r.setup_cost
        pct = max(0.0, (cumulative - min_val) / span)
        rows.append({
            'month': month,
            'cumulative': cumulative,
            'height_pct': max(MIN_BAR_PCT, pct * 100),
            'profitable': bool(cumulative >= 0),
            'break_even': month == marker,
        })
    return pd.DataFrame(rows)


def cost_breakdown(r: CalculationResult) -> pd.DataFrame:
    rows = [
        {'item': 'Time value recovered / year', 'value': r.money_saved_per_year, 'note': 'at your hourly rate'},
        {'item': 'API costs avoided / year', 'value': r.api_cost_per_year, 'note': 'vs. SaaS pricing'},
        {'item': 'Setup time cost', 'value': -r.setup_time_cost, 'note': f"{r.setup_hours:g} hrs one-time"},
        {'item': 'VPS / year', 'value': -r.vps_yearly_cost, 'note': f"~${vps_monthly(r)}/mo hosting"},
    ]
    return pd.DataFrame(rows)


def processing_speedup(inputs: InputSet) -> Dict[str, float]:
    """Automated processing time as a share of manual time."""
    share = _ratio(inputs.minutes_auto, inputs.minutes_manual)
    faster = (1 - share) * 100
    return {
        'automated_share': share,
        'percent_faster': float(_round_half_up(faster)) if np.isfinite(faster) else faster,
    }


_RESULT_LABELS: List[tuple] = [
    ('time_saved_per_month', 'Time saved / month', 'hours'),
    ('money_saved_per_year', 'Time value recovered / year', 'currency'),
    ('api_cost_per_year', 'API costs avoided / year', 'currency'),
    ('setup_hours', 'Setup effort', 'hours'),
    ('setup_time_cost', 'Setup time cost', 'currency'),
    ('vps_yearly_cost', 'VPS hosting / year', 'currency'),
    ('setup_cost', 'First-year setup cost', 'currency'),
    ('net_savings', 'Year-one net savings', 'currency'),
    ('break_even_months', 'Break-even', 'months'),
]


def results_frame(r: CalculationResult) -> pd.DataFrame:
    data = r.as_dict()
    return pd.DataFrame([
        {'metric': key, 'label': label, 'value': data[key], 'unit': unit}
        for key, label, unit in _RESULT_LABELS
    ])


def format_currency(value: float) -> str:
    if not np.isfinite(value):
        return 'n/a'
    amount = _round_half_up(value)
    sign = '-' if amount < 0 else ''
    return f"{sign}${abs(amount):,}"


def format_hours(value: float) -> str:
    return f"{value:,.1f}h" if np.isfinite(value) else 'n/a'


def format_break_even(months: float) -> str:
    if not np.isfinite(months):
        return 'no break-even'
    return f"{months:.1f} months"

import time
import numpy as np
import plotly.express as px
import streamlit as st
from transcription_roi.animate import AnimatedNumber
from transcription_roi.config import ConfigError, configure_logging, load_config
from transcription_roi.finance import (cost_breakdown, format_break_even, format_currency, format_hours,
                                       has_break_even, processing_speedup, results_frame, trajectory)
from transcription_roi.scenarios import SCENARIOS
from transcription_roi.state import CalculatorState

st.set_page_config(page_title='Private Transcription ROI', layout='wide')

try:
    cfg = load_config()
except ConfigError as e:
    st.error(f'Invalid configuration: {e}')
    st.stop()
configure_logging(cfg.log_level)

# (key, label, min, max, step, prefix, suffix)
SLIDERS = [
    ('recordingsPerMonth', 'Recordings / Month', 1.0, 200.0, 1.0, '', ''),
    ('avgRecordingMinutes', 'Avg Recording Length', 1.0, 120.0, 1.0, '', ' min'),
    ('minutesManual', 'Manual Processing Time', 1.0, 240.0, 1.0, '', ' min'),
    ('minutesAuto', 'Automated Processing Time', 1.0, 60.0, 1.0, '', ' min'),
    ('hourlyRate', 'Your Hourly Rate', 10.0, 1000.0, 5.0, '$', ''),
]


def sync_widgets(state: CalculatorState):
    for key, value in state.inputs.as_dict().items():
        st.session_state[key] = float(value)


def select_scenario(scenario_id: str):
    state = st.session_state.calculator
    state.select_scenario(scenario_id)
    sync_widgets(state)


def update_input(key: str):
    st.session_state.calculator.set_input(key, st.session_state[key])


@st.cache_data
def df_to_csv_bytes(df):
    return df.to_csv(index=False).encode('utf-8')


# lazy init of the UI state container
if 'calculator' not in st.session_state:
    st.session_state.calculator = CalculatorState.initial(cfg.default_scenario)
    st.session_state.tweens = {}
    sync_widgets(st.session_state.calculator)
state = st.session_state.calculator

st.caption('SELF-HOSTED AI TRANSCRIPTION')
st.title('Private Transcription ROI')
st.write('Self-hosted transcription vs. external APIs: what one automation is worth in year one.')

# --- Scenario selector ---
cols = st.columns(len(SCENARIOS))
for col, scenario in zip(cols, SCENARIOS.values()):
    col.button(f'{scenario.icon} {scenario.name}', key=f'scenario_{scenario.id}', on_click=select_scenario,
               args=(scenario.id,), use_container_width=True,
               type='primary' if scenario.id == state.active_scenario else 'secondary')

left, right = st.columns(2)

# --- Inputs ---
with left:
    scenario = SCENARIOS[state.active_scenario]
    with st.container(border=True):
        st.caption('SCENARIO')
        st.subheader(scenario.name)
        st.write(scenario.description)
    if scenario.note:
        st.warning(f'**Note:** {scenario.note}')
    for key, label, lo, hi, step, prefix, suffix in SLIDERS:
        st.slider(f'{label} ({prefix}{lo:g}{suffix} to {prefix}{hi:g}{suffix})', min_value=lo, max_value=hi,
                  step=step, format=f'{prefix}%.0f{suffix}', key=key, on_change=update_input, args=(key,))

r = state.result
inputs = state.inputs

# --- Results ---
with right:
    with st.container(border=True):
        st.caption('YEAR-ONE NET SAVINGS')
        hero = st.empty()
        st.write(f'Break-even in **{format_break_even(r.break_even_months)}**')

    c1, c2 = st.columns(2)
    time_slot = c1.empty()
    value_slot = c2.empty()

    speed = processing_speedup(inputs)
    st.caption(f'Manual: {inputs.minutes_manual:g} min/recording')
    st.progress(1.0)
    st.caption(f'Automated: {inputs.minutes_auto:g} min/recording')
    share = speed['automated_share']
    st.progress(float(min(max(share, 0.0), 1.0)) if np.isfinite(share) else 0.0)
    faster = speed['percent_faster']
    st.caption(f'{faster:.0f}% faster' if np.isfinite(faster) else 'n/a')

    st.info('This is one automation. Imagine what 5-10 could save you.')

    st.subheader('Cost Breakdown')
    breakdown = cost_breakdown(r)
    breakdown['amount'] = [('+' if v > 0 else '') + format_currency(v) for v in breakdown['value']]
    st.dataframe(breakdown[['item', 'amount', 'note']], hide_index=True, use_container_width=True)

    st.subheader('12-Month Trajectory')
    traj = trajectory(r)
    traj['status'] = np.where(traj['profitable'], 'Profitable', 'Pre-breakeven')
    fig = px.bar(traj, x='month', y='height_pct', color='status', hover_data=['cumulative'],
                 color_discrete_map={'Profitable': '#6db88a', 'Pre-breakeven': '#c8a96e'},
                 labels={'height_pct': 'position (scaled)', 'month': 'month'})
    if has_break_even(r) and traj['break_even'].any():
        fig.add_vline(x=int(traj.loc[traj['break_even'], 'month'].iloc[0]), line_dash='dot',
                      annotation_text='break-even')
    st.plotly_chart(fig, use_container_width=True)

    with st.expander('Download Results'):
        st.download_button('Results CSV', df_to_csv_bytes(results_frame(r)), 'transcription_roi.csv', 'text/csv')

# --- Animated figures (cosmetic only) ---
slots = [
    ('net_savings', r.net_savings, lambda v, s=hero: s.metric('Net', format_currency(v), label_visibility='collapsed')),
    ('time_saved', r.time_saved_per_month, lambda v, s=time_slot: s.metric('Time Freed / Month', format_hours(v))),
    ('annual_value', r.money_saved_per_year, lambda v, s=value_slot: s.metric('Annual Value', format_currency(v))),
]
tweens = st.session_state.tweens
for name, target, _ in slots:
    tweens.setdefault(name, AnimatedNumber(duration_ms=cfg.animation_ms)).retarget(target)

if cfg.animate:
    delay = cfg.animation_ms / 1000 / cfg.animation_frames
    frames = [tweens[name].frames(cfg.animation_frames) for name, _, _ in slots]
    for values in zip(*frames):
        for (_, _, draw), v in zip(slots, values):
            draw(v)
        time.sleep(delay)
for name, _, draw in slots:
    draw(tweens[name].finish())

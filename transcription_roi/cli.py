"""Command line rendition of the savings calculator."""

from pathlib import Path
from typing import List, Optional

import typer

from .config import ConfigError, configure_logging, load_config
from .finance import (
    cost_breakdown,
    format_break_even,
    format_currency,
    format_hours,
    results_frame,
    trajectory,
)
from .scenarios import SCENARIOS, UnknownScenarioError
from .state import CalculatorState
from .utils import UnknownInputError

app = typer.Typer(add_completion=False, help="Self-hosted transcription vs. external API: year-one savings.")


def _fail(message: str) -> None:
    typer.secho(message, fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


@app.callback()
def main() -> None:
    try:
        cfg = load_config()
    except ConfigError as exc:
        _fail(str(exc))
    configure_logging(cfg.log_level)


@app.command()
def scenarios() -> None:
    """List the available scenarios."""

    for scenario in SCENARIOS.values():
        typer.echo(f"{scenario.id:<12} {scenario.name:<20} {scenario.description}")


@app.command()
def estimate(
    scenario: str = typer.Argument(..., help="Scenario id, see `scenarios`."),
    overrides: Optional[List[str]] = typer.Option(
        None, "--set", help="Override an input, e.g. --set hourlyRate=200. Repeatable."
    ),
    csv: Optional[Path] = typer.Option(None, "--csv", help="Write the result table to this CSV file."),
) -> None:
    """Compute the year-one comparison for a scenario."""

    try:
        state = CalculatorState.initial(scenario)
        for item in overrides or []:
            name, sep, raw = item.partition('=')
            if not sep:
                _fail(f"Invalid override {item!r}; expected field=value")
            state.set_input(name.strip(), raw)
    except (UnknownScenarioError, UnknownInputError) as exc:
        _fail(str(exc))

    r = state.result
    definition = SCENARIOS[state.active_scenario]
    typer.secho(f"{definition.name}: {definition.description}", bold=True)
    for name, value in state.inputs.as_dict().items():
        typer.echo(f"  {name:<20} {value:g}")
    if definition.note:
        typer.echo(f"  Note: {definition.note}")

    typer.echo("")
    typer.echo(f"Time freed / month      {format_hours(r.time_saved_per_month)}")
    typer.echo(f"Annual value            {format_currency(r.money_saved_per_year)}")
    typer.echo(f"API costs avoided       {format_currency(r.api_cost_per_year)}")
    typer.echo(f"Setup cost (year one)   {format_currency(r.setup_cost)}")
    colour = typer.colors.GREEN if r.net_savings > 0 else typer.colors.RED
    typer.secho(f"Year-one net savings    {format_currency(r.net_savings)}", fg=colour, bold=True)
    typer.echo(f"Break-even              {format_break_even(r.break_even_months)}")

    typer.echo("\nCost breakdown")
    for row in cost_breakdown(r).itertuples(index=False):
        typer.echo(f"  {row.item:<30} {format_currency(row.value):>10}  ({row.note})")

    typer.echo("\n12-month trajectory")
    for row in trajectory(r).itertuples(index=False):
        bar = '#' * int(round(row.height_pct / 5))
        flag = ' <- break-even' if row.break_even else ''
        typer.echo(f"  {row.month:>2} {format_currency(row.cumulative):>10} {bar}{flag}")

    if csv is not None:
        csv.parent.mkdir(parents=True, exist_ok=True)
        results_frame(r).to_csv(csv, index=False)
        typer.echo(f"\nSaved results to {csv}")


if __name__ == '__main__':
    app()

# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Main CLI application for grid-stress."""

from __future__ import annotations

import json
import logging
from typing import Any, Callable

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from grid_stress import __version__
from grid_stress.config import load_scenario_file
from grid_stress.data.models import (
    Advisory,
    EVAdoption,
    ForecastResult,
    StressInput,
    StressResult,
)
from grid_stress.data.scenarios import SCENARIOS, get_scenario
from grid_stress.recommendations.engine import AdvisoryEngine
from grid_stress.reporting.terminal import TerminalRenderer
from grid_stress.scoring.engine import StressScorer
from grid_stress.scoring.forecast import ForecastGenerator

logger = logging.getLogger(__name__)

SCENARIO_CHOICES = list(SCENARIOS.keys())
EV_CHOICES = [level.value for level in EVAdoption]

# CLI option name -> StressInput field
_OVERRIDE_FIELDS = {
    "temperature": "temperature",
    "humidity": "humidity",
    "hour": "hour",
    "day": "day_of_week",
    "wind": "wind_speed",
    "cloud": "cloud_cover",
    "ev_adoption": "ev_adoption",
}


def condition_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the scenario and per-field condition options to a command."""
    options = [
        click.option(
            "--scenario", "-S", type=str, default=None,
            help=f"Named scenario ({', '.join(SCENARIO_CHOICES)}) or a name from --scenario-file",
        ),
        click.option(
            "--scenario-file", type=click.Path(), default=None,
            help="YAML or JSON scenario file",
        ),
        click.option("--temperature", "-t", type=float, default=None, help="Temperature in °F"),
        click.option("--humidity", type=float, default=None, help="Relative humidity, 0-100"),
        click.option("--hour", type=int, default=None, help="Hour of day, 0-23"),
        click.option("--day", type=int, default=None, help="Day of week, 0-6 (0 = Sunday)"),
        click.option("--wind", type=float, default=None, help="Wind speed in mph"),
        click.option("--cloud", type=float, default=None, help="Cloud cover, 0-100"),
        click.option(
            "--ev-adoption", type=click.Choice(EV_CHOICES), default=None,
            help="Regional EV adoption level",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _resolve_conditions(
    scenario: str | None,
    scenario_file: str | None,
    overrides: dict[str, Any],
) -> StressInput:
    """Build conditions from a scenario (preset or file) plus explicit overrides."""
    if scenario_file:
        loaded = load_scenario_file(scenario_file)
        base = loaded.resolve(scenario).conditions if scenario else loaded.base_input()
    elif scenario:
        base = get_scenario(scenario).conditions
    else:
        base = StressInput()

    update = {
        _OVERRIDE_FIELDS[name]: value
        for name, value in overrides.items()
        if value is not None
    }
    if update:
        logger.debug("Applying overrides: %s", update)
        base = StressInput.model_validate({**base.model_dump(), **update})
    return base


def _run_evaluation(
    conditions: StressInput, console: Console
) -> tuple[StressResult, ForecastResult, list[Advisory]]:
    """Score the conditions, build the forecast and advisories."""
    scorer = StressScorer()
    with console.status("[bold cyan]Scoring conditions..."):
        result = scorer.evaluate(conditions)
        forecast = ForecastGenerator(scorer).profile(conditions)
    advisories = AdvisoryEngine().generate(result, forecast)
    return result, forecast, advisories


def _conditions_or_exit(console: Console, scenario, scenario_file, overrides) -> StressInput:
    try:
        return _resolve_conditions(scenario, scenario_file, overrides)
    except KeyError as exc:
        console.print(f"[red]{escape(exc.args[0])}[/]")
    except FileNotFoundError as exc:
        console.print(f"[red]{escape(str(exc))}[/]")
    except ValueError as exc:
        console.print(f"[red]Invalid conditions: {escape(str(exc))}[/]")
    raise SystemExit(1)


@click.group()
@click.version_option(version=__version__)
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, no_color: bool, verbose: bool) -> None:
    """grid-stress: Grid Stress Index from weather and time-of-day signals

    Scores how hard the grid is working on a 0-100 scale from six
    components:

    \b
      Temperature, Time of Day, Day of Week   (demand)
      Wind Relief, Solar Depletion            (supply)
      EV Charging                             (new load)
    """
    ctx.ensure_object(dict)
    console = Console(no_color=no_color)
    ctx.obj["console"] = console
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


@cli.command()
@condition_options
@click.option("--show-details/--no-details", default=True, help="Show component breakdown")
@click.option("--forecast/--no-forecast", "with_forecast", default=True,
              help="Include the 24-hour forecast strip")
@click.pass_context
def score(
    ctx: click.Context,
    scenario: str | None,
    scenario_file: str | None,
    show_details: bool,
    with_forecast: bool,
    **overrides: Any,
) -> None:
    """Score one set of conditions and show the full report."""
    console: Console = ctx.obj["console"]
    conditions = _conditions_or_exit(console, scenario, scenario_file, overrides)
    result, forecast, advisories = _run_evaluation(conditions, console)

    renderer = TerminalRenderer(console)
    renderer.render(
        result,
        forecast=forecast if with_forecast else None,
        advisories=advisories,
        show_details=show_details,
    )


@cli.command()
@condition_options
@click.pass_context
def forecast(
    ctx: click.Context,
    scenario: str | None,
    scenario_file: str | None,
    **overrides: Any,
) -> None:
    """Show the 24-hour stress profile with weather held constant."""
    console: Console = ctx.obj["console"]
    conditions = _conditions_or_exit(console, scenario, scenario_file, overrides)
    profile = ForecastGenerator().profile(conditions)
    TerminalRenderer(console).render_forecast(profile)


@cli.command()
@click.option(
    "--scenario-file", type=click.Path(), default=None,
    help="List scenarios from this YAML or JSON file instead of the presets",
)
@click.pass_context
def scenarios(ctx: click.Context, scenario_file: str | None) -> None:
    """List scenario presets with their current scores."""
    console: Console = ctx.obj["console"]

    if scenario_file:
        try:
            available = load_scenario_file(scenario_file).to_scenarios()
        except (FileNotFoundError, ValueError) as exc:
            console.print(f"[red]{escape(str(exc))}[/]")
            raise SystemExit(1)
    else:
        available = SCENARIOS

    scorer = StressScorer()
    scores = {name: scorer.score(s.conditions) for name, s in available.items()}
    TerminalRenderer(console).render_scenarios(available, scores)


@cli.command()
@click.option(
    "--format", "-f",
    type=click.Choice(["json", "png"]),
    default="json",
    help="Export format",
)
@click.option("--output", "-o", type=click.Path(), required=True,
              help="Output file (json) or directory (png)")
@condition_options
@click.pass_context
def export(
    ctx: click.Context,
    format: str,
    output: str,
    scenario: str | None,
    scenario_file: str | None,
    **overrides: Any,
) -> None:
    """Export the score, forecast and advisories to JSON or PNG charts."""
    console: Console = ctx.obj["console"]
    conditions = _conditions_or_exit(console, scenario, scenario_file, overrides)
    result, profile, advisories = _run_evaluation(conditions, console)

    if format == "json":
        _export_json(result, profile, advisories, output, console)
    elif format == "png":
        _export_png(result, profile, output, console)


@cli.command()
@click.option("--host", default="127.0.0.1", help="Bind host")
@click.option("--port", "-p", default=8080, type=int, help="Bind port")
@click.pass_context
def serve(ctx: click.Context, host: str, port: int) -> None:
    """Start the REST API server."""
    from grid_stress.api import check_dependency

    console: Console = ctx.obj["console"]
    try:
        check_dependency("fastapi", "pip install -e '.[api]'")
        check_dependency("uvicorn", "pip install -e '.[api]'")
    except ImportError as exc:
        console.print(f"[red]{exc}[/]")
        raise SystemExit(1)

    console.print(f"[bold cyan]Starting API server on {host}:{port}...[/]")

    from grid_stress.api.server import create_app
    import uvicorn

    app = create_app()
    uvicorn.run(app, host=host, port=port)


def build_export_payload(
    result: StressResult,
    profile: ForecastResult,
    advisories: list[Advisory],
) -> dict[str, Any]:
    """Assemble the JSON export document."""
    return {
        "version": __version__,
        "input": result.input.model_dump(mode="json", by_alias=True),
        "score": result.score,
        "level": result.level.label,
        "color": result.color,
        "breakdown": result.breakdown.model_dump(mode="json"),
        "forecast": {
            "scores": profile.scores,
            "peak_hour": profile.peak_hour,
            "peak_score": profile.peak_score,
            "mean_score": profile.mean_score,
            "stress_windows": [list(w) for w in profile.stress_windows],
        },
        "advisories": [a.model_dump(mode="json") for a in advisories],
    }


def _export_json(
    result: StressResult,
    profile: ForecastResult,
    advisories: list[Advisory],
    path: str,
    console: Console,
) -> None:
    """Export to JSON."""
    with open(path, "w") as f:
        json.dump(build_export_payload(result, profile, advisories), f, indent=2)
    console.print(f"  [green]JSON report exported to:[/green] {path}")


def _export_png(
    result: StressResult, profile: ForecastResult, path: str, console: Console
) -> None:
    """Export charts as PNG files into a directory."""
    try:
        from grid_stress.reporting.charts import ChartGenerator
    except ImportError:
        console.print(
            "[red]PNG export requires matplotlib. Install with: pip install -e '.[charts]'[/red]"
        )
        raise SystemExit(1)

    with console.status("[bold cyan]Rendering charts..."):
        paths = ChartGenerator(result, profile).save_all(path)
    for name, file_path in paths.items():
        console.print(f"  [green]{name} chart exported to:[/green] {file_path}")

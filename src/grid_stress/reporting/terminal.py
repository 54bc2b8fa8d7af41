"""Rich terminal report renderer.

Composes Rich tables, panels, and ASCII charts into the primary
user-facing terminal output: the stress gauge, the component
breakdown, the 24-hour forecast and the advisories.
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from grid_stress.data.models import Advisory, ForecastResult, StressInput, StressResult
from grid_stress.data.scenarios import Scenario
from grid_stress.reporting.ascii_charts import (
    component_bar,
    day_name,
    forecast_strip,
    format_hour,
    hour_axis,
    mini_gauge,
    sparkline,
    stress_gauge,
)
from grid_stress.scoring.thresholds import score_to_level
from grid_stress.scoring.weights import (
    COMPONENT_NAMES,
    EV_MAX,
    SOLAR_MAX,
    TEMP_MAX,
    TIME_OF_DAY_MAX,
    WEEKDAY_SCORE,
    WIND_STRONG_SCORE,
)

# Largest magnitude each component can reach, for bar scaling.
_COMPONENT_MAX = {
    "temperature": TEMP_MAX,
    "time_of_day": TIME_OF_DAY_MAX,
    "day_of_week": WEEKDAY_SCORE,
    "wind": abs(WIND_STRONG_SCORE),
    "solar": SOLAR_MAX,
    "ev_charging": EV_MAX,
}


class TerminalRenderer:
    """Renders stress results to the terminal using Rich."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render(
        self,
        result: StressResult,
        forecast: ForecastResult | None = None,
        advisories: list[Advisory] | None = None,
        show_details: bool = True,
    ) -> None:
        """Render the full stress report to the terminal."""
        self._render_header(result.input)
        self._render_overall_score(result)
        if show_details:
            self._render_breakdown(result)
        if forecast is not None:
            self._render_forecast_strip(forecast)
        if advisories is not None:
            self._render_advisories(advisories)
        self._render_footer()

    def render_forecast(self, forecast: ForecastResult) -> None:
        """Render the 24-hour profile with an hour-by-hour table."""
        self._render_header(forecast.input)
        self._render_forecast_strip(forecast)

        table = Table(show_header=True, header_style="bold", padding=(0, 1))
        table.add_column("Hour", justify="right", min_width=5)
        table.add_column("Score", justify="center", min_width=15)
        table.add_column("Level", justify="center", min_width=9)

        for entry in forecast.hours:
            hour_label = format_hour(entry.hour)
            if entry.hour == forecast.input.hour:
                hour_label = f"[bold]> {hour_label}[/bold]"
            style = entry.level.style
            table.add_row(
                hour_label,
                mini_gauge(entry.score),
                f"[{style}]{entry.level.label}[/{style}]",
            )

        self.console.print()
        self.console.print(table)
        self._render_footer()

    def render_scenarios(self, scenarios: dict[str, Scenario], scores: dict[str, int]) -> None:
        """Render a table of named scenarios with their current scores."""
        table = Table(show_header=True, header_style="bold", padding=(0, 1))
        table.add_column("Scenario", style="bold", min_width=18)
        table.add_column("Conditions", min_width=30)
        table.add_column("Score", justify="center", min_width=15)
        table.add_column("Description")

        for name, scenario in scenarios.items():
            table.add_row(
                name,
                _conditions_summary(scenario.conditions),
                mini_gauge(scores[name]),
                scenario.description,
            )

        self.console.print()
        self.console.print(table)

    # ------------------------------------------------------------------
    # Private rendering methods
    # ------------------------------------------------------------------

    def _render_header(self, inp: StressInput) -> None:
        header_text = Text()
        header_text.append("GRID STRESS", style="bold cyan")
        header_text.append(" | ", style="dim")
        header_text.append(
            f"{day_name(inp.day_of_week)} {format_hour(inp.hour)}", style="bold"
        )
        header_text.append(" | ", style="dim")
        header_text.append(_conditions_summary(inp))

        self.console.print()
        self.console.print(Panel(header_text, title="Grid Stress Index"))

    def _render_overall_score(self, result: StressResult) -> None:
        gauge = stress_gauge(result.score, width=30)

        self.console.print()
        self.console.print(f"  [bold]STRESS SCORE[/bold]: {gauge}")

    def _render_breakdown(self, result: StressResult) -> None:
        """Render per-component contributions."""
        bd = result.breakdown
        color = result.level.style

        self.console.print()
        self.console.print(Rule("[bold]COMPONENTS[/bold]", style=color))

        table = Table(show_header=True, header_style="bold", padding=(0, 1))
        table.add_column("Component", style="bold", min_width=16)
        table.add_column("Points", justify="right", min_width=7)
        table.add_column("", min_width=20)
        table.add_column("Max", justify="right", min_width=5)

        for key, value in bd.components().items():
            max_value = _COMPONENT_MAX[key]
            table.add_row(
                COMPONENT_NAMES[key],
                f"{value:+.1f}",
                component_bar(value, max_value),
                f"{max_value:.0f}",
            )

        table.add_row("[dim]Raw total[/dim]", f"{bd.raw_total:.2f}", "", "")
        self.console.print(table)

    def _render_forecast_strip(self, forecast: ForecastResult) -> None:
        """Render the 24-hour strip, peak, and stress windows."""
        self.console.print()
        self.console.print(Rule("[bold]24-HOUR FORECAST[/bold] - weather held constant"))
        self.console.print(
            f"  {forecast_strip(forecast.scores, current_hour=forecast.input.hour)}"
        )
        self.console.print(f"  [dim]{hour_axis()}[/dim]")
        self.console.print(
            f"  [dim]shape[/dim] {sparkline([float(s) for s in forecast.scores])}"
        )

        peak_style = score_to_level(forecast.peak_score).style
        self.console.print(
            f"\n  [bold]Peak:[/bold] [{peak_style}]{forecast.peak_score}/100[/] "
            f"at {format_hour(forecast.peak_hour)} | "
            f"[bold]Mean:[/bold] {forecast.mean_score:.1f}"
        )

        if forecast.stress_windows:
            windows = ", ".join(
                f"{format_hour(start)}-{format_hour(end % 24)}"
                for start, end in forecast.stress_windows
            )
            self.console.print(f"  [bold]High-stress windows:[/bold] [dark_orange]{windows}[/]")
        else:
            self.console.print("  [bold]High-stress windows:[/bold] [green]none[/green]")

    def _render_advisories(self, advisories: list[Advisory]) -> None:
        """Render ranked advisories table."""
        self.console.print()
        self.console.print(Rule("[bold]ADVISORIES[/bold]"))

        if not advisories:
            self.console.print("  [green]No action needed under these conditions.[/green]")
            return

        table = Table(show_header=True, header_style="bold", padding=(0, 1))
        table.add_column("#", justify="right", style="bold", width=3)
        table.add_column("Advisory", min_width=28)
        table.add_column("Details", min_width=40)
        table.add_column("Urgency", justify="center", width=8)

        for adv in advisories:
            urgency_color = {"high": "red", "medium": "yellow", "low": "green"}.get(
                adv.urgency, "white"
            )
            table.add_row(
                str(adv.rank),
                adv.title,
                adv.description,
                f"[{urgency_color}]{adv.urgency}[/{urgency_color}]",
            )

        self.console.print(table)

    def _render_footer(self) -> None:
        """Render the report footer."""
        from grid_stress import __version__

        self.console.print()
        self.console.print(Rule(style="dim"))
        self.console.print(f"  [dim]grid-stress v{__version__}[/dim]")
        self.console.print()


def _conditions_summary(inp: StressInput) -> str:
    return (
        f"{inp.temperature:.0f}°F, {inp.humidity:.0f}% RH, "
        f"wind {inp.wind_speed:.0f} mph, cloud {inp.cloud_cover:.0f}%, "
        f"EV {inp.ev_adoption}"
    )

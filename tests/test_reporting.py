"""Tests for ASCII charts and the Rich terminal renderer."""

from __future__ import annotations

import pytest
from rich.console import Console

from grid_stress.data.models import ForecastResult, StressResult
from grid_stress.data.scenarios import SCENARIOS
from grid_stress.recommendations.engine import AdvisoryEngine
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
from grid_stress.reporting.terminal import TerminalRenderer


class TestAsciiCharts:
    @pytest.mark.parametrize("hour, label", [
        (0, "12am"), (7, "7am"), (12, "12pm"), (17, "5pm"), (23, "11pm"),
    ])
    def test_format_hour(self, hour: int, label: str):
        assert format_hour(hour) == label

    def test_day_name(self):
        assert day_name(0) == "Sunday"
        assert day_name(6) == "Saturday"
        assert day_name(9) == "day 9"

    def test_stress_gauge(self):
        gauge = stress_gauge(86)
        assert "86/100" in gauge
        assert "CRITICAL" in gauge

    def test_stress_gauge_clamps(self):
        assert "100/100" in stress_gauge(140)
        assert "0/100" in stress_gauge(-5)

    def test_mini_gauge(self):
        assert mini_gauge(45).endswith(" 45")

    def test_component_bar_relief_is_cyan(self):
        assert "cyan" in component_bar(-10, 10)
        assert "magenta" in component_bar(10, 35)
        assert "n/a" in component_bar(1, 0)

    def test_forecast_strip_has_24_blocks(self):
        strip = forecast_strip([0, 50, 100] * 8, current_hour=1)
        assert strip.count("[/]") == 24
        assert "underline" in strip

    def test_hour_axis(self):
        axis = hour_axis()
        assert len(axis) == 24
        assert axis.startswith("12am")
        assert axis[6:9] == "6am"
        assert axis[12:16] == "12pm"

    def test_sparkline(self):
        assert sparkline([]) == ""
        line = sparkline([0.0, 5.0, 10.0])
        assert len(line) == 3
        assert line[-1] == "█"


class TestTerminalRenderer:
    """Tests for rendered report text."""

    def _console(self) -> Console:
        return Console(record=True, width=120)

    def test_full_report(
        self, heat_wave_result: StressResult, heat_wave_forecast: ForecastResult
    ):
        console = self._console()
        advisories = AdvisoryEngine().generate(heat_wave_result, heat_wave_forecast)
        TerminalRenderer(console).render(
            heat_wave_result, forecast=heat_wave_forecast, advisories=advisories
        )
        text = console.export_text()
        assert "GRID STRESS" in text
        assert "Tuesday 5pm" in text
        assert "STRESS SCORE" in text
        assert "86/100" in text
        assert "COMPONENTS" in text
        assert "EV Charging" in text
        assert "24-HOUR FORECAST" in text
        assert "Peak:" in text
        assert "2pm-8pm" in text
        assert "Critical Grid Stress Expected" in text
        assert "grid-stress v" in text

    def test_report_without_extras(self, heat_wave_result: StressResult):
        console = self._console()
        TerminalRenderer(console).render(heat_wave_result, show_details=False)
        text = console.export_text()
        assert "STRESS SCORE" in text
        assert "COMPONENTS" not in text
        assert "ADVISORIES" not in text

    def test_empty_advisories(self, heat_wave_result: StressResult):
        console = self._console()
        TerminalRenderer(console).render(heat_wave_result, advisories=[])
        assert "No action needed under these conditions." in console.export_text()

    def test_render_forecast(self, heat_wave_forecast: ForecastResult):
        console = self._console()
        TerminalRenderer(console).render_forecast(heat_wave_forecast)
        text = console.export_text()
        assert "24-HOUR FORECAST" in text
        assert "> 5pm" in text
        assert "Critical" in text

    def test_render_scenarios(self):
        console = self._console()
        scores = {name: 10 for name in SCENARIOS}
        TerminalRenderer(console).render_scenarios(SCENARIOS, scores)
        text = console.export_text()
        for name in SCENARIOS:
            assert name in text

    def test_component_bars_scale_to_weights(self):
        from grid_stress.reporting.terminal import _COMPONENT_MAX
        from grid_stress.scoring.weights import (
            SOLAR_CLOUD_RANGE,
            TIME_OF_DAY_CURVE,
            WEEKDAY_SCORE,
        )

        assert _COMPONENT_MAX["time_of_day"] == max(s for _, s in TIME_OF_DAY_CURVE)
        assert _COMPONENT_MAX["day_of_week"] == WEEKDAY_SCORE
        assert _COMPONENT_MAX["solar"] == SOLAR_CLOUD_RANGE[3]
